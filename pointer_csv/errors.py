from __future__ import annotations


class InvalidPointer(ValueError):
    """A record key could not be tokenized as a JSON Pointer."""

    def __init__(self, pointer: str, reason: str):
        self.pointer = pointer
        self.reason = reason
        super().__init__(f"invalid JSON pointer {pointer!r}: {reason}")


class SinkWriteFailure(OSError):
    """The CSV sink rejected a row write or the final flush."""


class UnsupportedDocument(ValueError):
    """The JSON document cannot be flattened into records."""
