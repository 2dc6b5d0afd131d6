from __future__ import annotations

from typing import Iterable, List, NamedTuple, Tuple, Union

from .errors import InvalidPointer


class Index(NamedTuple):
    """Array index token."""

    value: int


class Name(NamedTuple):
    """Object member token."""

    value: str


Token = Union[Index, Name]


def escape_token(token: str) -> str:
    """Escape a single reference token for pointer syntax.

    - '~' is written as '~0'
    - '/' is written as '~1'
    """
    if not isinstance(token, str):
        token = str(token)
    return token.replace('~', '~0').replace('/', '~1')


def unescape_token(token: str, pointer: str = '') -> str:
    out: List[str] = []
    i = 0
    while i < len(token):
        ch = token[i]
        if ch == '~':
            nxt = token[i + 1] if i + 1 < len(token) else ''
            if nxt == '0':
                out.append('~')
            elif nxt == '1':
                out.append('/')
            else:
                raise InvalidPointer(pointer, f"bad escape sequence '~{nxt}'")
            i += 2
        else:
            out.append(ch)
            i += 1
    return ''.join(out)


def is_index_token(token: str) -> bool:
    # RFC 6901 array index: "0" or digits without a leading zero.
    if not token or not token.isascii() or not token.isdigit():
        return False
    return token == '0' or token[0] != '0'


def classify(token: str) -> Token:
    if is_index_token(token):
        return Index(int(token))
    return Name(token)


class Pointer:
    """A parsed JSON Pointer.

    Holds the unescaped reference tokens. Two pointers are equal when their
    token sequences are equal.
    """

    __slots__ = ('_parts',)

    def __init__(self, parts: Iterable[str] = ()):
        self._parts: Tuple[str, ...] = tuple(parts)

    @classmethod
    def from_tokens(cls, tokens: Iterable[Union[str, int, Token]]) -> 'Pointer':
        parts: List[str] = []
        for token in tokens:
            if isinstance(token, (Index, Name)):
                token = token.value
            parts.append(str(token))
        return cls(parts)

    def child(self, token: Union[str, int]) -> 'Pointer':
        return Pointer(self._parts + (str(token),))

    def parts(self) -> List[str]:
        return list(self._parts)

    def tokens(self) -> List[Token]:
        return [classify(part) for part in self._parts]

    def sort_key(self) -> Tuple[Tuple[int, int, bytes], ...]:
        """Key implementing the token-wise column order.

        Index tokens compare numerically and sort before Name tokens at the
        same position; Name tokens compare byte-wise. Tuple comparison puts
        a strict prefix first.
        """
        key = []
        for token in self.tokens():
            if isinstance(token, Index):
                key.append((0, token.value, b''))
            else:
                key.append((1, 0, token.value.encode('utf-8')))
        return tuple(key)

    def as_pointer_string(self) -> str:
        return ''.join('/' + escape_token(part) for part in self._parts)

    def as_slash_string(self) -> str:
        return self.as_pointer_string()[1:]

    def as_dot_string(self, bracket_arrays: bool = False) -> str:
        if not bracket_arrays:
            return '.'.join(self._parts)

        out: List[str] = []
        for token in self.tokens():
            if isinstance(token, Index):
                out.append(f"[{token.value}]")
            elif out:
                out.append('.' + token.value)
            else:
                out.append(token.value)
        return ''.join(out)

    def __len__(self) -> int:
        return len(self._parts)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Pointer):
            return NotImplemented
        return self._parts == other._parts

    def __lt__(self, other: 'Pointer') -> bool:
        if not isinstance(other, Pointer):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __hash__(self) -> int:
        return hash(self._parts)

    def __str__(self) -> str:
        return self.as_pointer_string()

    def __repr__(self) -> str:
        return f"Pointer({self.as_pointer_string()!r})"


ROOT = Pointer()


def parse(pointer: str) -> Pointer:
    """Parse a JSON Pointer string such as '/foo/bar/0/baz'.

    The empty string is the whole-document pointer.
    """
    if not isinstance(pointer, str):
        raise InvalidPointer(repr(pointer), 'pointer must be a string')
    if pointer == '':
        return ROOT
    if not pointer.startswith('/'):
        raise InvalidPointer(pointer, "must be empty or start with '/'")
    return Pointer(unescape_token(part, pointer) for part in pointer[1:].split('/'))
