from __future__ import annotations

from typing import Any, Dict, List, Optional

from .errors import UnsupportedDocument
from .pointer import ROOT, Pointer


def flatten(value: Any, prefix: Optional[Pointer] = None) -> Dict[str, Any]:
    """Flatten a JSON value into {pointer string: scalar leaf}.

    Objects and arrays are walked depth-first; empty containers contribute
    no leaves.
    """
    leaves: Dict[str, Any] = {}

    def _walk(obj: Any, at: Pointer) -> None:
        if isinstance(obj, dict):
            for k, v in obj.items():
                _walk(v, at.child(k))
        elif isinstance(obj, list):
            for i, v in enumerate(obj):
                _walk(v, at.child(i))
        else:
            leaves[at.as_pointer_string()] = obj

    _walk(value, prefix if prefix is not None else ROOT)
    return leaves


def is_object_array(value: Any) -> bool:
    return isinstance(value, list) and bool(value) and all(isinstance(v, dict) for v in value)


def flatten_document(data: Any) -> List[Dict[str, Any]]:
    """Turn a parsed JSON document into flattened records.

    - object: one record (none when empty)
    - array of objects: one record per element
    - any other non-empty array: a single record keyed by index pointers
    """
    if isinstance(data, dict):
        return [flatten(data)] if data else []
    if isinstance(data, list):
        if is_object_array(data):
            return [flatten(item) for item in data]
        return [flatten(data)] if data else []
    raise UnsupportedDocument(
        f"Unsupported JSON structure: expected an object or array, got {type(data).__name__}"
    )
