"""Evaluator: apply a Decoder to an untyped value, producing a Result."""

from __future__ import annotations

import math
from collections.abc import Mapping, MutableMapping
from typing import Any

from .debug import (
    expected,
    field_trace,
    index_trace,
    key_trace,
    one_of_failure,
    unscoped_hint,
)
from .model import (
    AndThen,
    Decoder,
    Dict,
    Fail,
    Field,
    Instance,
    Lazy,
    Many,
    Map,
    Object,
    OneOf,
    Primitive,
    PrimitiveKind,
    Succeed,
)
from .result import Err, ErrorMeta, Ok, Result


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def evaluate(decoder: Decoder, value: Any) -> Result:
    """Interpret *decoder* against *value* without raising on mismatch."""
    if isinstance(decoder, Primitive):
        return _eval_primitive(decoder.kind, value)
    if isinstance(decoder, Field):
        return _eval_field(decoder, value)
    if isinstance(decoder, Object):
        return _eval_layout(decoder.layout, value, None)
    if isinstance(decoder, Instance):
        return _eval_layout(decoder.layout, value, decoder.factory)
    if isinstance(decoder, Many):
        return _eval_many(decoder.child, value)
    if isinstance(decoder, Dict):
        return _eval_dict(decoder.child, value)
    if isinstance(decoder, Map):
        result = evaluate(decoder.child, value)
        if isinstance(result, Ok):
            return Ok(decoder.fn(result.value))
        return result
    if isinstance(decoder, AndThen):
        result = evaluate(decoder.child, value)
        if isinstance(result, Ok):
            # The follow-up decoder sees the original value, not result.value.
            return evaluate(decoder.fn(result.value), value)
        return result
    if isinstance(decoder, OneOf):
        return _eval_one_of(decoder.decoders, value)
    if isinstance(decoder, Lazy):
        return evaluate(decoder.thunk(), value)
    if isinstance(decoder, Succeed):
        return Ok(decoder.value)
    if isinstance(decoder, Fail):
        return Err(decoder.message)
    raise TypeError(f"not a decoder: {decoder!r}")


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------

def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a JSON number
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return isinstance(value, int) or math.isfinite(value)


def _eval_primitive(kind: PrimitiveKind, value: Any) -> Result:
    if kind == PrimitiveKind.String:
        if isinstance(value, str):
            return Ok(value)
        return Err(expected("a string", value))

    if kind == PrimitiveKind.Number:
        if _is_number(value):
            return Ok(value)
        return Err(expected("a number", value))

    if kind == PrimitiveKind.Integer:
        if _is_number(value) and math.trunc(value) == value:
            return Ok(value)
        return Err(expected("an integer", value))

    if kind == PrimitiveKind.Bool:
        if isinstance(value, bool):
            return Ok(value)
        return Err(expected("a boolean", value))

    return Ok(value)


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------

def _eval_field(decoder: Field, value: Any) -> Result:
    key = decoder.key
    if not isinstance(value, Mapping) or key not in value:
        if isinstance(value, Mapping) and decoder.has_default:
            return Ok(decoder.default)
        return Err(
            expected(f"an object with a field named '{key}'", value),
            ErrorMeta.FIELD,
        )

    result = evaluate(decoder.child, value[key])
    if isinstance(result, Ok):
        return result
    return Err(result.message + field_trace(key, value), ErrorMeta.FIELD)


def _eval_many(child: Decoder, value: Any) -> Result:
    if not isinstance(value, (list, tuple)):
        return Err(expected("an array", value))

    items: list[Any] = []
    for idx, item in enumerate(value):
        result = evaluate(child, item)
        if not isinstance(result, Ok):
            return result.append(index_trace(idx, value))
        items.append(result.value)
    return Ok(items)


def _eval_dict(child: Decoder, value: Any) -> Result:
    if not isinstance(value, Mapping):
        return Err(expected("an object", value))

    entries: dict[Any, Any] = {}
    for key, item in value.items():
        result = evaluate(child, item)
        if not isinstance(result, Ok):
            return result.append(key_trace(key, value))
        entries[key] = result.value
    return Ok(entries)


def _eval_layout(layout, value: Any, factory) -> Result:
    """Decode every layout entry against *value* and assemble the aggregate.

    Each child decoder receives the whole *value*; scoping to a key is the
    job of ``field`` / ``at`` inside the layout.
    """
    collected: dict[str, Any] = {}
    for key, child in layout:
        result = evaluate(child, value)
        if isinstance(result, Ok):
            collected[key] = result.value
            continue
        if result.meta is not ErrorMeta.FIELD:
            return Err(unscoped_hint(result.message), ErrorMeta.FIELD)
        return result

    if factory is None:
        return Ok(collected)

    target = factory()
    if isinstance(target, MutableMapping):
        target.update(collected)
    else:
        for key, item in collected.items():
            setattr(target, key, item)
    return Ok(target)


def _eval_one_of(decoders: tuple[Decoder, ...], value: Any) -> Result:
    failures: list[Err] = []
    for decoder in decoders:
        result = evaluate(decoder, value)
        if isinstance(result, Ok):
            return result
        failures.append(result)

    tagged = bool(failures) and all(f.meta is ErrorMeta.FIELD for f in failures)
    return Err(
        one_of_failure([f.message for f in failures]),
        ErrorMeta.FIELD if tagged else None,
    )
