from __future__ import annotations

import json
import math
from decimal import Decimal
from typing import Any


def format_float(value: float) -> str:
    """Shortest positional decimal text, never in exponent form."""
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return '+Inf' if value > 0 else '-Inf'
    return format(Decimal(repr(value)).normalize(), 'f')


def to_cell_text(value: Any) -> str:
    """Convert a scalar leaf value to its CSV cell text."""
    if value is None:
        return ''
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return format_float(value)
    if isinstance(value, Decimal):
        return format(value, 'f')
    try:
        return json.dumps(value, ensure_ascii=False, separators=(',', ':'))
    except TypeError:
        return str(value)
