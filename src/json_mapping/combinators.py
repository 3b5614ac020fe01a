"""Decoder constructors.

Every function here is pure: it only builds a Decoder value and never looks
at the data that will later be decoded.  Names that would shadow a builtin
carry a trailing underscore (``object_``, ``dict_``, ``map_``, ``bool_``).

Usage::

    from json_mapping import Decode, decode

    point = Decode.object_({
        "x": Decode.field("x", Decode.number),
        "y": Decode.field("y", Decode.number),
    })
    decode(point, {"x": 1, "y": 2.5})   # → {"x": 1, "y": 2.5}
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Callable

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


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------

string = Primitive(PrimitiveKind.String)
number = Primitive(PrimitiveKind.Number)
integer = Primitive(PrimitiveKind.Integer)
bool_ = Primitive(PrimitiveKind.Bool)
unknown = Primitive(PrimitiveKind.Unknown)


# ---------------------------------------------------------------------------
# Field access
# ---------------------------------------------------------------------------

def field(key: str, child: Decoder) -> Decoder:
    """Decode ``value[key]`` with *child*; a missing key is a failure."""
    return Field(key, child)


def optional_field(key: str, default: Any, child: Decoder) -> Decoder:
    """Like :func:`field`, but a missing key yields *default*."""
    return Field(key, child, default)


def at(path: Sequence[str], child: Decoder) -> Decoder:
    """Decode the value found by following *path* from the outside in."""
    decoder = child
    for key in reversed(path):
        decoder = field(key, decoder)
    return decoder


def optional_at(path: Sequence[str], default: Any, child: Decoder) -> Decoder:
    """Like :func:`at`; a key missing at any depth yields *default*."""
    decoder = child
    for key in reversed(path):
        decoder = optional_field(key, default, decoder)
    return decoder


# ---------------------------------------------------------------------------
# Aggregates
# ---------------------------------------------------------------------------

def object_(layout: Mapping[str, Decoder]) -> Decoder:
    """Build a dict whose keys are those of *layout*, in declaration order.

    Each decoder in *layout* is applied to the whole input, so per-key
    access has to be spelled out with :func:`field` or :func:`at`.
    """
    return Object(tuple(layout.items()))


def instance(factory: Callable[[], Any], layout: Mapping[str, Decoder]) -> Decoder:
    """Like :func:`object_`, but assign the results onto ``factory()``."""
    return Instance(factory, tuple(layout.items()))


def many(child: Decoder) -> Decoder:
    return Many(child)


def dict_(child: Decoder) -> Decoder:
    return Dict(child)


# ---------------------------------------------------------------------------
# Transformation & control
# ---------------------------------------------------------------------------

def map_(fn: Callable[[Any], Any], child: Decoder) -> Decoder:
    return Map(fn, child)


def and_then(fn: Callable[[Any], Decoder], child: Decoder) -> Decoder:
    """Decode with *child*, then decode the same input with ``fn(result)``."""
    return AndThen(fn, child)


def one_of(decoders: Iterable[Decoder]) -> Decoder:
    """Try *decoders* in order and keep the first success."""
    return OneOf(tuple(decoders))


def optional(default: Any, child: Decoder) -> Decoder:
    return one_of([child, succeed(default)])


def lazy(thunk: Callable[[], Decoder]) -> Decoder:
    """Defer building a decoder until decode time.

    *thunk* runs on every decode, which is what lets a decoder refer to
    itself before its own definition has finished.
    """
    return Lazy(thunk)


def succeed(value: Any) -> Decoder:
    return Succeed(value)


def fail(message: str) -> Decoder:
    return Fail(message)
