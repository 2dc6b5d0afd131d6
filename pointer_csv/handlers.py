from __future__ import annotations

import csv
import io
import logging
import os
import tempfile
from typing import Any, List

import gradio as gr
from pydantic import ValidationError

from .config import ExportOptions
from .errors import InvalidPointer, SinkWriteFailure, UnsupportedDocument
from .io_utils import read_json_content
from .pointer_set import collect
from .records import ROOT_LABEL, find_array_pointers, records_from_document
from .writer import CSVWriter, write_records_to_path

logger = logging.getLogger(__name__)

PREVIEW_LINES = 4


def _error_message(exc: Exception) -> str:
    if isinstance(exc, ValidationError):
        return "; ".join(err.get("msg", "") for err in exc.errors())
    return str(exc)


def build_options(header_style, transpose, root, header_template, file_name=None) -> ExportOptions:
    return ExportOptions(
        header_style=header_style or "pointer",
        transpose=bool(transpose),
        root=root or ROOT_LABEL,
        header_template=header_template or [],
        file_name=file_name,
    )


def prepare_dataset_payload(file_obj):
    if file_obj is None:
        return None, gr.update(choices=[ROOT_LABEL], value=ROOT_LABEL), "No file uploaded."

    try:
        data = read_json_content(file_obj)
    except Exception as e:
        logger.warning("Failed to parse upload: %s", e)
        return None, gr.update(choices=[ROOT_LABEL], value=ROOT_LABEL), f"Error parsing JSON: {str(e)}"

    array_pointers = find_array_pointers(data)
    if ROOT_LABEL not in array_pointers:
        array_pointers = [ROOT_LABEL] + array_pointers

    return data, gr.update(choices=array_pointers, value=ROOT_LABEL), "Successfully loaded."


def compute_document_count_text(data: Any, root: str = ROOT_LABEL) -> str:
    if data is None:
        return ""
    try:
        records = records_from_document(data, root or ROOT_LABEL)
        columns = collect(records)
    except (InvalidPointer, UnsupportedDocument) as e:
        return f"Cannot build records: {str(e)}"
    return f"Records: {len(records)} | Columns: {len(columns)}"


def load_and_parse_json_with_preview(file_obj):
    data, root_dropdown, message = prepare_dataset_payload(file_obj)
    if data is None:
        return None, root_dropdown, message, None, ""
    return data, root_dropdown, message, None, compute_document_count_text(data, ROOT_LABEL)


def handle_root_change(data: Any, root: str):
    return compute_document_count_text(data, root or ROOT_LABEL), None


def render_rows(records, options: ExportOptions) -> List[List[str]]:
    """Render records exactly as the CSV export would, as a list of rows."""
    buf = io.StringIO(newline='')
    writer = CSVWriter(buf, header_style=options.header_style, transpose=options.transpose)
    if options.header_template:
        writer.write_csv_by_header(records, options.header_template, include_header=True)
    else:
        writer.write_csv(records)
    buf.seek(0)
    return list(csv.reader(buf))


def preview_handler(data, root, header_style, transpose, header_template):
    if data is None:
        return None
    try:
        options = build_options(header_style, transpose, root, header_template)
        records = records_from_document(data, options.root)
        rows = render_rows(records, options)
    except (ValidationError, InvalidPointer, UnsupportedDocument, SinkWriteFailure) as e:
        logger.warning("Preview failed: %s", e)
        return None
    return rows[:PREVIEW_LINES] if rows else None


def _output_path(file_name: str) -> str:
    return os.path.join(tempfile.gettempdir(), file_name)


def export_data_handler(data, root, header_style, transpose, header_template, file_name):
    if data is None:
        return None, "No data loaded."

    try:
        options = build_options(header_style, transpose, root, header_template, file_name)
        records = records_from_document(data, options.root)
        path = write_records_to_path(
            _output_path(options.file_name),
            records,
            header_style=options.header_style,
            transpose=options.transpose,
            csv_header=options.header_template or None,
        )
    except (ValidationError, InvalidPointer, UnsupportedDocument) as e:
        return None, f"Error during export: {_error_message(e)}"
    except SinkWriteFailure as e:
        logger.error("Export failed: %s", e)
        return None, f"Error during export: {str(e)}"

    logger.info("Exported %d records to %s", len(records), path)
    return path, f"Export successful! Saved to {path}"


def export_header_handler(header_style, header_template, file_name):
    try:
        options = build_options(header_style, False, None, header_template, file_name)
    except ValidationError as e:
        return None, f"Error during export: {_error_message(e)}"

    if not options.header_template:
        return None, "No header columns given."

    try:
        path = write_records_to_path(
            _output_path(options.file_name),
            [],
            header_style=options.header_style,
            csv_header=options.header_template,
            header_only=True,
        )
    except SinkWriteFailure as e:
        logger.error("Header export failed: %s", e)
        return None, f"Error during export: {str(e)}"

    return path, f"Header template saved to {path}"
