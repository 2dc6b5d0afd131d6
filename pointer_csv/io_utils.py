from __future__ import annotations

import json


def _decode(content):
    if isinstance(content, bytes):
        content = content.decode('utf-8-sig')
    return content


def parse_json_text(text: str):
    """Parse JSON, falling back to JSON Lines (one document per line)."""
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        lines = [line for line in text.splitlines() if line.strip()]
        if len(lines) < 2:
            raise
        return [json.loads(line) for line in lines]


def read_json_content(file_obj):
    """Read JSON content from an uploaded file or file path."""
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        return parse_json_text(_decode(file_obj.read()))

    path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    with open(path, 'r', encoding='utf-8-sig') as f:
        return parse_json_text(f.read())
