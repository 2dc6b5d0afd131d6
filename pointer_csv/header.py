from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Iterable, List

from .pointer import Pointer


class HeaderStyle(str, Enum):
    """How pointer keys are rendered as column labels."""

    POINTER = 'pointer'          # /foo/bar/0/baz
    SLASH = 'slash'              # foo/bar/0/baz
    DOT = 'dot'                  # foo.bar.0.baz
    DOT_BRACKET = 'dot-bracket'  # foo.bar[0].baz

    @classmethod
    def parse(cls, value) -> 'HeaderStyle':
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower().replace('_', '-')
        for style in cls:
            if text in (style.value, style.name.lower().replace('_', '-')):
                return style
        choices = ', '.join(s.value for s in cls)
        raise ValueError(f"Unknown header style {value!r} (expected one of: {choices})")


RENDERERS: Dict[HeaderStyle, Callable[[Pointer], str]] = {
    HeaderStyle.POINTER: Pointer.as_pointer_string,
    HeaderStyle.SLASH: Pointer.as_slash_string,
    HeaderStyle.DOT: lambda p: p.as_dot_string(bracket_arrays=False),
    HeaderStyle.DOT_BRACKET: lambda p: p.as_dot_string(bracket_arrays=True),
}


def format_header(pointers: Iterable[Pointer], style: HeaderStyle = HeaderStyle.POINTER) -> List[str]:
    render = RENDERERS[HeaderStyle.parse(style)]
    return [render(p) for p in pointers]
