"""Core logic for Pointer CSV.

The Gradio UI lives in `app.py`. This package contains the pieces that:
- parse JSON Pointers and order them deterministically
- render header labels in several styles
- project flattened records onto a unified column set
- write row-major or transposed CSV
"""
from __future__ import annotations

from .errors import InvalidPointer, SinkWriteFailure, UnsupportedDocument
from .flattening import flatten, flatten_document
from .header import HeaderStyle, format_header
from .pointer import Pointer, parse
from .pointer_set import collect
from .projection import normalize_by_header, project
from .writer import CSVWriter

__all__ = [
    "CSVWriter",
    "HeaderStyle",
    "InvalidPointer",
    "Pointer",
    "SinkWriteFailure",
    "UnsupportedDocument",
    "collect",
    "flatten",
    "flatten_document",
    "format_header",
    "normalize_by_header",
    "parse",
    "project",
]
