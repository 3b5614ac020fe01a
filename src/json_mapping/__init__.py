"""json_mapping — composable decoders from untyped JSON values to typed ones."""

import logging

from . import combinators as Decode
from .api import decode, decode_string
from .combinators import (
    and_then,
    at,
    bool_,
    dict_,
    fail,
    field,
    instance,
    integer,
    lazy,
    many,
    map_,
    number,
    object_,
    one_of,
    optional,
    optional_at,
    optional_field,
    string,
    succeed,
    unknown,
)
from .debug import DEFAULT_DUMP, DumpSettings, expected, to_debug_string
from .errors import DecodeError, JsonMappingError
from .model import Decoder, Missing

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Decode",
    "decode",
    "decode_string",
    "expected",
    "to_debug_string",
    "DumpSettings",
    "DEFAULT_DUMP",
    "Decoder",
    "Missing",
    "DecodeError",
    "JsonMappingError",
    "string",
    "number",
    "integer",
    "bool_",
    "unknown",
    "field",
    "at",
    "optional_field",
    "optional_at",
    "object_",
    "instance",
    "many",
    "dict_",
    "map_",
    "and_then",
    "one_of",
    "optional",
    "lazy",
    "succeed",
    "fail",
]
