from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Set

from .pointer import Pointer, parse


def sort_pointers(pointers: Iterable[Pointer]) -> List[Pointer]:
    return sorted(pointers, key=Pointer.sort_key)


def collect(records: Iterable[Mapping[str, Any]]) -> List[Pointer]:
    """Collect the distinct pointer keys of all records in column order.

    Every key is parsed before sorting; an unparsable key raises
    InvalidPointer and no partial set is returned.
    """
    seen: Set[str] = set()
    pointers: List[Pointer] = []
    for record in records:
        for key in record.keys():
            if key in seen:
                continue
            seen.add(key)
            pointers.append(parse(key))
    return sort_pointers(pointers)


def pointer_strings(pointers: Iterable[Pointer]) -> List[str]:
    return [p.as_pointer_string() for p in pointers]
