from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Sequence

from .values import to_cell_text


def project(record: Mapping[str, Any], keys: Sequence[str]) -> List[str]:
    """Project a record onto the ordered key list.

    Keys the record lacks become empty cells; record keys outside `keys`
    are ignored. The result always has len(keys) cells.
    """
    row: List[str] = []
    for key in keys:
        if key in record:
            row.append(to_cell_text(record[key]))
        else:
            row.append('')
    return row


def project_transposed(records: Sequence[Mapping[str, Any]], key: str, label: str) -> List[str]:
    """One transposed line: the label, then `key`'s value in every record."""
    row = [label]
    for record in records:
        if key in record:
            row.append(to_cell_text(record[key]))
        else:
            row.append('')
    return row


def normalize_by_header(records: Iterable[Mapping[str, Any]], csv_header: Iterable[str]) -> List[Dict[str, Any]]:
    """Copy records onto a declared header.

    Each returned record holds exactly the declared keys: values the record
    has are kept, missing ones are filled with ''. Undeclared fields are
    dropped. Input records are not modified.
    """
    declared = list(dict.fromkeys(csv_header))
    normalized: List[Dict[str, Any]] = []
    for record in records:
        normalized.append({key: record[key] if key in record else '' for key in declared})
    return normalized
