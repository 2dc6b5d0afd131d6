import csv
import io

import pytest

from pointer_csv.errors import InvalidPointer, SinkWriteFailure
from pointer_csv.header import HeaderStyle
from pointer_csv.writer import CSVWriter, write_records_to_path


def write(records, **kwargs):
    buf = io.StringIO()
    CSVWriter(buf, **kwargs).write_csv(records)
    return buf.getvalue()


def test_missing_fields_are_empty():
    out = write([{"/a": "1"}, {"/b": "2"}])
    assert out == "/a,/b\n1,\n,2\n"


def test_transposed_output():
    out = write([{"/a": "1"}, {"/b": "2"}], transpose=True)
    assert out == "/a,1,\n/b,,2\n"


def test_header_style_applies_to_labels():
    out = write([{"/items/0/name": "x", "/items/10/name": "y"}], header_style=HeaderStyle.DOT_BRACKET)
    assert out.splitlines() == ["items[0].name,items[10].name", "x,y"]


def test_transpose_symmetry():
    records = [
        {"/id": 1, "/tags/0": "a", "/tags/1": "b"},
        {"/id": 2, "/meta/ok": True},
        {"/id": 3, "/tags/0": "c,d"},
    ]
    rows = list(csv.reader(io.StringIO(write(records))))
    header, body = rows[0], rows[1:]
    row_major = {(key, i): value for i, row in enumerate(body) for key, value in zip(header, row)}

    lines = list(csv.reader(io.StringIO(write(records, transpose=True))))
    transposed = {(line[0], i): value for line in lines for i, value in enumerate(line[1:])}

    assert row_major == transposed


def test_cells_are_quoted_by_csv_writer():
    assert write([{"/a": "x,y"}]) == '/a\n"x,y"\n'


def test_write_header_only():
    buf = io.StringIO()
    CSVWriter(buf).write_header({"/y", "/x"})
    assert buf.getvalue() == "/x,/y\n"


def test_format_header_uses_style_and_order():
    writer = CSVWriter(io.StringIO(), header_style="dot")
    assert writer.format_header(["/b", "/a/2", "/a/10"]) == ["a.2", "a.10", "b"]


def test_write_csv_by_header_pins_columns():
    records = [{"/a": 1, "/z": 9}, {"/b": "x"}]
    buf = io.StringIO()
    CSVWriter(buf).write_csv_by_header(records, {"/b", "/a"})
    assert buf.getvalue() == "1,\n,x\n"
    assert records == [{"/a": 1, "/z": 9}, {"/b": "x"}]


def test_write_csv_by_header_with_header_row():
    buf = io.StringIO()
    CSVWriter(buf).write_csv_by_header([{"/z": 1}], ["/c", "/d"], include_header=True)
    assert buf.getvalue() == "/c,/d\n,\n"


def test_invalid_pointer_writes_nothing():
    buf = io.StringIO()
    with pytest.raises(InvalidPointer):
        CSVWriter(buf).write_csv([{"/a": 1}, {"a": 2}])
    assert buf.getvalue() == ""


class FailingStream:
    def __init__(self, fail_on_write=True):
        self.fail_on_write = fail_on_write
        self.chunks = []

    def write(self, s):
        if self.fail_on_write:
            raise OSError("disk full")
        self.chunks.append(s)
        return len(s)

    def flush(self):
        raise OSError("flush failed")


def test_row_write_failure_is_surfaced():
    with pytest.raises(SinkWriteFailure) as excinfo:
        CSVWriter(FailingStream()).write_csv([{"/a": 1}])
    assert isinstance(excinfo.value.__cause__, OSError)


def test_flush_failure_is_surfaced():
    stream = FailingStream(fail_on_write=False)
    with pytest.raises(SinkWriteFailure):
        CSVWriter(stream).write_csv([{"/a": 1}])
    assert "".join(stream.chunks) == "/a\n1\n"


def test_write_records_to_path(tmp_path):
    path = write_records_to_path(str(tmp_path / "out.csv"), [{"/a": 1}], header_style="slash")
    with open(path, newline="", encoding="utf-8") as f:
        assert f.read() == "a\n1\n"


def test_write_records_to_path_header_only(tmp_path):
    path = write_records_to_path(str(tmp_path / "h.csv"), [{"/ignored": 1}], csv_header=["/y", "/x"], header_only=True)
    with open(path, newline="", encoding="utf-8") as f:
        assert f.read() == "/x,/y\n"
