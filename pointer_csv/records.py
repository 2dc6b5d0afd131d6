from __future__ import annotations

from typing import Any, Dict, List

from .accessors import get_value_by_pointer
from .flattening import flatten_document
from .pointer import ROOT, Pointer

ROOT_LABEL = '(root)'


def resolve_items_by_root(data: Any, root: str = ROOT_LABEL) -> Any:
    """Return the part of the document that records are built from."""
    if data is None:
        return None
    if root in (None, '', ROOT_LABEL):
        return data
    return get_value_by_pointer(data, root)


def records_from_document(data: Any, root: str = ROOT_LABEL) -> List[Dict[str, Any]]:
    target = resolve_items_by_root(data, root)
    if target is None:
        return []
    return flatten_document(target)


def find_array_pointers(data: Any, parent: Pointer = ROOT) -> List[str]:
    """Find all pointers in the document that point to an array.

    Only the first element of an array is searched for nested arrays.
    """
    found: List[str] = []
    if isinstance(data, dict):
        for k, v in data.items():
            at = parent.child(k)
            if isinstance(v, list):
                found.append(at.as_pointer_string())
                if v and isinstance(v[0], dict):
                    found.extend(find_array_pointers(v[0], at.child(0)))
            elif isinstance(v, dict):
                found.extend(find_array_pointers(v, at))
    elif isinstance(data, list) and len(parent) == 0:
        found.append(ROOT_LABEL)
        if data and isinstance(data[0], dict):
            found.extend(find_array_pointers(data[0], parent.child(0)))
    return sorted(found)
