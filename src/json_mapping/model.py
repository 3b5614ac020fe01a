"""Decoder representation for json_mapping."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Union


# ---------------------------------------------------------------------------
# Missing — singleton for "no default supplied"
# ---------------------------------------------------------------------------

class _MissingType:
    """Sentinel marking a Field without a default (None is a valid default)."""

    _instance: _MissingType | None = None

    def __new__(cls) -> _MissingType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Missing"

    def __bool__(self) -> bool:
        return False


Missing = _MissingType()


# ---------------------------------------------------------------------------
# PrimitiveKind
# ---------------------------------------------------------------------------

class PrimitiveKind(Enum):
    String = auto()
    Number = auto()
    Integer = auto()
    Bool = auto()
    Unknown = auto()


# ---------------------------------------------------------------------------
# Decoder variants
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Primitive:
    kind: PrimitiveKind


@dataclass(frozen=True, slots=True)
class Field:
    key: str
    child: Decoder
    default: Any = Missing

    @property
    def has_default(self) -> bool:
        return self.default is not Missing


@dataclass(frozen=True, slots=True)
class Object:
    layout: tuple[tuple[str, Decoder], ...]


@dataclass(frozen=True, slots=True)
class Instance:
    factory: Callable[[], Any]
    layout: tuple[tuple[str, Decoder], ...]


@dataclass(frozen=True, slots=True)
class Many:
    child: Decoder


@dataclass(frozen=True, slots=True)
class Dict:
    child: Decoder


@dataclass(frozen=True, slots=True)
class Map:
    fn: Callable[[Any], Any]
    child: Decoder


@dataclass(frozen=True, slots=True)
class AndThen:
    fn: Callable[[Any], Decoder]
    child: Decoder


@dataclass(frozen=True, slots=True)
class OneOf:
    decoders: tuple[Decoder, ...]


@dataclass(frozen=True, slots=True)
class Lazy:
    thunk: Callable[[], Decoder]  # evaluated on every decode, never cached


@dataclass(frozen=True, slots=True)
class Succeed:
    value: Any


@dataclass(frozen=True, slots=True)
class Fail:
    message: str


Decoder = Union[
    Primitive, Field, Object, Instance, Many, Dict, Map, AndThen, OneOf, Lazy, Succeed, Fail
]
