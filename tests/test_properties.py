"""Property tests for the decoder laws."""

from hypothesis import given, settings
from hypothesis import strategies as st

from json_mapping import Decode, DecodeError, decode

_SCALAR = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-(2 ** 53), max_value=2 ** 53),
    st.floats(allow_nan=False, allow_infinity=False),
    st.text(max_size=10),
)

_JSON = st.recursive(
    _SCALAR,
    lambda child: st.one_of(
        st.lists(child, max_size=4),
        st.dictionaries(st.text(max_size=5), child, max_size=4),
    ),
    max_leaves=12,
)

_PRIMITIVES = st.sampled_from(
    [Decode.string, Decode.number, Decode.integer, Decode.bool_, Decode.unknown]
)


@given(value=_JSON, anything=_JSON)
@settings(max_examples=100, deadline=None)
def test_succeed_ignores_input(value, anything):
    assert decode(Decode.succeed(value), anything) is value


@given(decoder=_PRIMITIVES, value=_JSON)
@settings(max_examples=100, deadline=None)
def test_optional_is_child_or_default(decoder, value):
    default = object()
    try:
        want = decode(decoder, value)
    except DecodeError:
        want = default
    assert decode(Decode.optional(default, decoder), value) is want


@given(value=_JSON)
@settings(max_examples=50, deadline=None)
def test_one_of_is_left_biased(value):
    decoder = Decode.one_of([
        Decode.map_(lambda v: ("first", v), Decode.unknown),
        Decode.map_(lambda v: ("second", v), Decode.unknown),
    ])
    assert decode(decoder, value)[0] == "first"


@given(decoder=_PRIMITIVES)
def test_many_empty(decoder):
    assert decode(Decode.many(decoder), []) == []


@given(data=st.data())
@settings(max_examples=50, deadline=None)
def test_many_names_first_bad_index(data):
    items = data.draw(st.lists(st.integers(), max_size=6))
    k = data.draw(st.integers(min_value=0, max_value=len(items)))
    items.insert(k, "bad")
    items.append("also bad")
    try:
        decode(Decode.many(Decode.integer), items)
    except DecodeError as exc:
        assert f"item at index {k} of" in exc.message
        assert f"item at index {len(items) - 1} of" not in exc.message
    else:
        raise AssertionError("expected a DecodeError")


@given(value=st.dictionaries(st.text(max_size=5), st.integers(), max_size=6))
@settings(max_examples=50, deadline=None)
def test_dict_is_fresh_copy(value):
    result = decode(Decode.dict_(Decode.integer), value)
    assert result == value
    assert result is not value


@given(value=st.dictionaries(st.text(max_size=5), st.integers(), min_size=1, max_size=6), data=st.data())
@settings(max_examples=50, deadline=None)
def test_dict_aborts_on_single_bad_value(value, data):
    key = data.draw(st.sampled_from(sorted(value)))
    value[key] = "bad"
    try:
        decode(Decode.dict_(Decode.integer), value)
    except DecodeError:
        pass
    else:
        raise AssertionError("expected a DecodeError")
