from __future__ import annotations

import csv
import logging
from typing import IO, Any, Iterable, List, Mapping, Optional, Sequence

from .errors import SinkWriteFailure
from .header import HeaderStyle, format_header
from .pointer import Pointer
from .pointer_set import collect, pointer_strings
from .projection import normalize_by_header, project, project_transposed

logger = logging.getLogger(__name__)


class CSVWriter:
    """Write flattened records as CSV.

    Every public write recomputes the column set from its own inputs; the
    writer keeps no cursor between calls. Quoting and escaping are left to
    `csv.writer`, configured with `fmtparams`.
    """

    def __init__(
        self,
        stream: IO[str],
        header_style: HeaderStyle = HeaderStyle.POINTER,
        transpose: bool = False,
        **fmtparams,
    ):
        fmtparams.setdefault('lineterminator', '\n')
        self.stream = stream
        self.header_style = HeaderStyle.parse(header_style)
        self.transpose = bool(transpose)
        self._writer = csv.writer(stream, **fmtparams)

    def format_header(self, csv_header: Iterable[str]) -> List[str]:
        """Render a declared header in this writer's style and column order."""
        pointers = collect([dict.fromkeys(csv_header, '')])
        return self.get_header(pointers)

    def get_header(self, pointers: Sequence[Pointer]) -> List[str]:
        return format_header(pointers, self.header_style)

    def write_header(self, csv_header: Iterable[str]) -> None:
        """Write only the header row for a declared set of keys."""
        header = self.format_header(csv_header)
        self._write_row(header)
        self._flush()
        logger.debug("Wrote header-only CSV with %d columns", len(header))

    def write_csv(self, records: Sequence[Mapping[str, Any]]) -> None:
        records = list(records)
        pointers = collect(records)
        if self.transpose:
            self._write_transposed(records, pointers)
        else:
            self._write_rows(records, pointers, include_header=True)

    def write_csv_by_header(
        self,
        records: Sequence[Mapping[str, Any]],
        csv_header: Iterable[str],
        include_header: bool = False,
    ) -> None:
        """Write records pinned to a declared header.

        Declared columns a record lacks are written empty; fields outside the
        declared header are never emitted. The header row itself is only
        written with `include_header` (pair with `write_header` otherwise).
        """
        declared = list(dict.fromkeys(csv_header))
        pointers = collect([dict.fromkeys(declared, '')])
        normalized = normalize_by_header(records, declared)
        if self.transpose:
            self._write_transposed(normalized, pointers)
        else:
            self._write_rows(normalized, pointers, include_header=include_header)

    def _write_rows(self, records: List[Mapping[str, Any]], pointers: List[Pointer], include_header: bool) -> None:
        keys = pointer_strings(pointers)
        if include_header:
            self._write_row(self.get_header(pointers))
        for record in records:
            self._write_row(project(record, keys))
        self._flush()
        logger.debug("Wrote CSV: %d columns, %d rows", len(keys), len(records))

    def _write_transposed(self, records: List[Mapping[str, Any]], pointers: List[Pointer]) -> None:
        keys = pointer_strings(pointers)
        header = self.get_header(pointers)
        for key, label in zip(keys, header):
            self._write_row(project_transposed(records, key, label))
        self._flush()
        logger.debug("Wrote transposed CSV: %d lines, %d records", len(keys), len(records))

    def _write_row(self, row: List[str]) -> None:
        try:
            self._writer.writerow(row)
        except (csv.Error, OSError) as e:
            logger.error("CSV row write failed: %s", e)
            raise SinkWriteFailure(f"Failed to write CSV row: {e}") from e

    def _flush(self) -> None:
        flush = getattr(self.stream, 'flush', None)
        if flush is None:
            return
        try:
            flush()
        except (csv.Error, OSError) as e:
            logger.error("CSV flush failed: %s", e)
            raise SinkWriteFailure(f"Failed to flush CSV output: {e}") from e


def write_records_to_path(
    path: str,
    records: Sequence[Mapping[str, Any]],
    header_style: HeaderStyle = HeaderStyle.POINTER,
    transpose: bool = False,
    csv_header: Optional[Iterable[str]] = None,
    header_only: bool = False,
) -> str:
    """Write records (or just a header template) to a CSV file at `path`."""
    try:
        f = open(path, 'w', newline='', encoding='utf-8')
    except OSError as e:
        raise SinkWriteFailure(f"Cannot open {path}: {e}") from e

    with f:
        writer = CSVWriter(f, header_style=header_style, transpose=transpose)
        if header_only:
            writer.write_header(csv_header or [])
        elif csv_header:
            writer.write_csv_by_header(records, csv_header, include_header=True)
        else:
            writer.write_csv(records)
    return path
