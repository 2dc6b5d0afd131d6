from __future__ import annotations

from typing import Any, Union

from .pointer import Index, Pointer, parse


def get_value_by_pointer(data: Any, pointer: Union[str, Pointer], default: Any = None) -> Any:
    """Retrieve a value from nested data by JSON Pointer.

    Returns `default` when any step of the pointer does not resolve.
    """
    if isinstance(pointer, str):
        pointer = parse(pointer)

    val = data
    for token in pointer.tokens():
        if isinstance(val, dict):
            key = str(token.value)
            if key not in val:
                return default
            val = val[key]
        elif isinstance(val, list):
            if not isinstance(token, Index) or token.value >= len(val):
                return default
            val = val[token.value]
        else:
            return default
    return val
