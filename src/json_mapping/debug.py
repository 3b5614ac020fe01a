"""Failure message construction: value dumps and trace lines."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class DumpSettings:
    indent: int = 4
    margin: str = "    "
    preview_fields: int = 3   # field names listed in an <Object ...> summary
    max_items: int = 50       # top-level entries shown before truncating


DEFAULT_DUMP = DumpSettings()


# ---------------------------------------------------------------------------
# Value dump
# ---------------------------------------------------------------------------

def _summarize(value: Any, settings: DumpSettings) -> Any:
    """Collapse a nested container into a one-line placeholder string."""
    if isinstance(value, (list, tuple)):
        if len(value) == 0:
            return []
        if len(value) == 1:
            return "<Array with a single item>"
        return f"<Array with {len(value)} items>"

    if isinstance(value, Mapping):
        keys = [str(k) for k in value]
        if not keys:
            return {}
        shown = ", ".join(f"'{k}'" for k in keys[: settings.preview_fields])
        if len(keys) > settings.preview_fields:
            shown += ", ..."
        if len(keys) == 1:
            return f"<Object with the field {shown}>"
        if len(keys) <= settings.preview_fields + 1:
            return f"<Object with these fields: {shown}>"
        return f"<Object with {len(keys)} fields, like {shown}>"

    return value


def _shallow(value: Any, settings: DumpSettings) -> Any:
    """Copy the top level of *value*, summarising everything below it."""
    if isinstance(value, (list, tuple)):
        items = [_summarize(v, settings) for v in value[: settings.max_items]]
        if len(value) > settings.max_items:
            items.append(f"<{len(value) - settings.max_items} more items>")
        return items

    if isinstance(value, Mapping):
        out: dict[str, Any] = {}
        for i, (k, v) in enumerate(value.items()):
            if i == settings.max_items:
                out["..."] = f"<{len(value) - settings.max_items} more fields>"
                break
            out[str(k)] = _summarize(v, settings)
        return out

    return value


def to_debug_string(value: Any, settings: DumpSettings = DEFAULT_DUMP) -> str:
    """Render *value* as an indented, size-bounded block for error messages.

    Only the top level is printed in full; nested arrays and objects are
    replaced by a summary such as ``<Array with 3 items>``.  Anything JSON
    cannot represent is shown through ``repr``.
    """
    text = json.dumps(
        _shallow(value, settings),
        indent=settings.indent,
        ensure_ascii=False,
        default=repr,
    )
    return ("\n" + text).replace("\n", "\n" + settings.margin) + "\n"


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------

def expected(description: str, value: Any) -> str:
    """Build an ``Expected <description>, but got`` message for *value*.

    Public so that decoders built with ``and_then`` / ``fail`` can report
    mismatches in the same layout as the built-in ones.
    """
    return f"Expected {description}, but got\n" + to_debug_string(value)


def field_trace(key: str, container: Any) -> str:
    return f"\nwhen attempting to decode the field '{key}' of\n" + to_debug_string(container)


def index_trace(index: int, sequence: Any) -> str:
    return f"\nwhen attempting to decode the item at index {index} of\n" + to_debug_string(sequence)


def key_trace(key: Any, mapping: Any) -> str:
    return f"\nwhen attempting to decode the key '{key}' of\n" + to_debug_string(mapping)


def unscoped_hint(message: str) -> str:
    return (
        "Did you forget to wrap your decoder in 'field'?"
        " This is not done automatically for you when using 'object_' or"
        " 'instance'. Here's the actual error: " + message
    )


def one_of_failure(messages: list[str]) -> str:
    """Box every branch failure of a ``one_of`` into a single message."""
    parts = [
        "one_of failed, because none of its child decoders were successful"
        " in decoding the value, here is a list of all errors:\n\n"
    ]
    for i, message in enumerate(messages):
        parts.append("┌" if i == 0 else "├")
        parts.append(f"── Decoder at index {i} reported:\n│\n│")
        parts.append(("\n" + message).replace("\n", "\n│    ") + "\n│")
        if i < len(messages) - 1:
            parts.append("\n│\n")
    parts.append("\n┴\n")
    return "".join(parts)
