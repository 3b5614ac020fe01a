"""Exception types raised by json_mapping."""

from __future__ import annotations


class JsonMappingError(Exception):
    """Base class for all json_mapping errors."""


class DecodeError(JsonMappingError, ValueError):
    """Raised by ``decode`` / ``decode_string`` when a decoder rejects its input.

    ``message`` holds the complete failure text, deepest mismatch first,
    followed by the field / index trace lines of every enclosing step.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
