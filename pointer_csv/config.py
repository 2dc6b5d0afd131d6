"""Export configuration for Pointer CSV."""
from __future__ import annotations

import os
from typing import List

from pydantic import BaseModel, field_validator

from .header import HeaderStyle
from .pointer import parse
from .records import ROOT_LABEL


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class ExportOptions(BaseModel):
    """Options for one CSV export."""

    header_style: HeaderStyle = HeaderStyle.parse(os.getenv("POINTER_CSV_HEADER_STYLE", "pointer"))
    transpose: bool = _env_flag("POINTER_CSV_TRANSPOSE")

    # Pointer to the part of the document holding the records
    root: str = ROOT_LABEL

    # Declared columns; empty means "use the union of record keys"
    header_template: List[str] = []

    file_name: str = "output.csv"

    @field_validator("header_style", mode="before")
    @classmethod
    def _parse_style(cls, value):
        return HeaderStyle.parse(value)

    @field_validator("root", mode="before")
    @classmethod
    def _check_root(cls, value):
        if value in (None, "", ROOT_LABEL):
            return ROOT_LABEL
        parse(value)
        return value

    @field_validator("header_template", mode="before")
    @classmethod
    def _split_template(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            value = value.splitlines()
        keys = [line.strip() for line in value if line and line.strip()]
        for key in keys:
            parse(key)
        return keys

    @field_validator("file_name", mode="before")
    @classmethod
    def _default_name(cls, value):
        if not value or not str(value).strip():
            return "output.csv"
        name = str(value).strip()
        if not name.lower().endswith(".csv"):
            name += ".csv"
        return name
