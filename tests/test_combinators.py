"""Tests for json_mapping.combinators (structure only, no decoding)."""

from json_mapping import Decode
from json_mapping.model import Field, Lazy, OneOf, Succeed


def test_at_folds_outside_in():
    decoder = Decode.at(["a", "b"], Decode.integer)
    assert decoder == Field("a", Field("b", Decode.integer))


def test_at_empty_path_is_child():
    assert Decode.at([], Decode.string) is Decode.string


def test_optional_at_carries_default_on_every_level():
    decoder = Decode.optional_at(["a", "b"], 0, Decode.integer)
    assert decoder.default == 0
    assert decoder.child.default == 0


def test_optional_is_one_of_with_succeed():
    assert Decode.optional(1, Decode.integer) == OneOf((Decode.integer, Succeed(1)))


def test_one_of_copies_its_input():
    decoders = [Decode.integer]
    decoder = Decode.one_of(decoders)
    decoders.append(Decode.string)
    assert decoder.decoders == (Decode.integer,)


def test_object_layout_copied():
    layout = {"a": Decode.integer}
    decoder = Decode.object_(layout)
    layout["b"] = Decode.string
    assert decoder.layout == (("a", Decode.integer),)


def test_lazy_does_not_call_thunk():
    def boom():
        raise AssertionError("called at construction")

    assert isinstance(Decode.lazy(boom), Lazy)


def test_constructors_do_not_share_state():
    assert Decode.field("a", Decode.integer) == Decode.field("a", Decode.integer)
    assert Decode.field("a", Decode.integer) is not Decode.field("a", Decode.integer)
