import pytest
from pydantic import ValidationError

from pointer_csv.config import ExportOptions
from pointer_csv.header import HeaderStyle


def test_defaults():
    options = ExportOptions()
    assert options.root == "(root)"
    assert options.header_template == []
    assert options.file_name == "output.csv"


def test_header_style_labels():
    assert ExportOptions(header_style="dot-bracket").header_style is HeaderStyle.DOT_BRACKET


def test_header_template_from_text():
    options = ExportOptions(header_template="\n/a\n  /b  \n\n")
    assert options.header_template == ["/a", "/b"]


def test_file_name_gets_extension():
    assert ExportOptions(file_name="report").file_name == "report.csv"
    assert ExportOptions(file_name="  ").file_name == "output.csv"


@pytest.mark.parametrize("field, value", [("root", "items"), ("header_template", "/ok\nbad"), ("header_style", "fancy")])
def test_invalid_values(field, value):
    with pytest.raises(ValidationError):
        ExportOptions(**{field: value})
