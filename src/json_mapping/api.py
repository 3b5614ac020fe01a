"""Boundary API: the only place where a failed decode is raised."""

from __future__ import annotations

import json
import logging
from typing import Any, Callable

from .debug import expected
from .errors import DecodeError
from .evaluator import evaluate
from .model import Decoder
from .result import is_ok

logger = logging.getLogger(__name__)

__all__ = ["decode", "decode_string", "expected"]


def decode(decoder: Decoder, value: Any) -> Any:
    """Decode *value* with *decoder*, raising :class:`DecodeError` on mismatch."""
    result = evaluate(decoder, value)
    if is_ok(result):
        return result.value
    logger.debug("decode rejected value: %s", result.message.split("\n", 1)[0])
    raise DecodeError(result.message)


def decode_string(
    decoder: Decoder,
    text: str | bytes,
    *,
    loads: Callable[[str | bytes], Any] = json.loads,
) -> Any:
    """Parse *text* with *loads*, then :func:`decode` the parsed value.

    Parser failures (``json.JSONDecodeError`` with the default parser)
    propagate unchanged.
    """
    logger.debug("parsing %d characters of JSON text", len(text))
    return decode(decoder, loads(text))
