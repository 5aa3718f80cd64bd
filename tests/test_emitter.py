"""Tests for dump()."""

import pytest

from miniyaml_core import EmitError, Null, VNumber, VText, dump, from_python, parse


def _reparses(data):
    value = from_python(data)
    assert parse(dump(value)) == value


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

def test_dump_object():
    assert dump({"name": "Bob", "age": 20}) == "name: Bob\nage: 20\n"

def test_dump_list():
    assert dump(["Bob", "Alice"]) == "- Bob\n- Alice\n"

def test_dump_nested():
    text = dump({"first": [1, 2], "second": {"name": "Bob"}})
    assert text == "first:\n  - 1\n  - 2\nsecond:\n  name: Bob\n"

def test_dump_list_of_objects():
    assert dump([{"a": 1, "b": 2}]) == "- a: 1\n  b: 2\n"

def test_dump_empty_containers_inline():
    assert dump({"a": [], "b": {}}) == "a: []\nb: {}\n"

def test_dump_null_document():
    assert dump(None) == ""
    assert dump(Null) == ""


# ---------------------------------------------------------------------------
# Quoting
# ---------------------------------------------------------------------------

def test_digit_text_is_quoted():
    assert dump({"zip": "02134"}) == 'zip: "02134"\n'

def test_marker_text_is_quoted():
    assert dump(["-x", "[a]", "{b}", "a: b", "end:"]) == (
        '- "-x"\n- "[a]"\n- "{b}"\n- "a: b"\n- "end:"\n'
    )

def test_empty_and_padded_text_is_quoted():
    assert dump(["", " x "]) == '- ""\n- " x "\n'


# ---------------------------------------------------------------------------
# Round trips through parse()
# ---------------------------------------------------------------------------

def test_roundtrip_scalars_at_root():
    for data in ["Bob", "20", 20, "", "'quoted'", "a: b", "- x"]:
        _reparses(data)

def test_roundtrip_mixed_document():
    _reparses({
        "name": "Bob",
        "age": 20,
        "tags": ["x", "12", "", "a, b"],
        "friends": [{"name": "Eve", "pets": ["cat"]}, {"name": "Al"}],
        "grid": [[1, 2], [], [[3]]],
        "meta": {"empty": {}, "none": [], "deep": {"k": {"v": "w}"}}},
    })

def test_roundtrip_list_of_list_of_objects():
    _reparses([[{"a": 1, "b": [2, 3]}], {"c": {}}])


# ---------------------------------------------------------------------------
# Unrepresentable values
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("data", [
    {"a": None},
    [1.5],
    [-1],
    {"bad key": 1},
    {"k": "two\nlines"},
    [True],
])
def test_unrepresentable(data):
    with pytest.raises(EmitError):
        dump(data)

def test_vnumber_rejected():
    with pytest.raises(EmitError):
        dump(VNumber(2.0))

def test_text_value_accepted():
    assert dump(VText("hi")) == "hi\n"


def test_roundtrip_long_integer():
    value = parse("9" * 5000)
    text = dump(value)
    assert text == "9" * 5000 + "\n"
    assert parse(text) == value

def test_roundtrip_long_integer_in_object():
    _reparses({"big": 10 ** 6000, "small": 1})
