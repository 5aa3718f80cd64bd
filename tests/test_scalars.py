"""Tests for character classes and scalar coercion."""

from miniyaml_core.scalars import (
    coerce_scalar,
    digits_to_int,
    int_to_digits,
    is_digit,
    is_integer_token,
    is_letter_or_digit,
    is_quoted,
    is_space,
    trimmed,
    unquote,
)
from miniyaml_core.values import VInteger, VText


# ---------------------------------------------------------------------------
# Character classes
# ---------------------------------------------------------------------------

def test_is_space():
    assert is_space(" ")
    assert is_space("\t")
    assert not is_space("\n")

def test_is_digit_ascii_only():
    assert is_digit("7")
    assert not is_digit("٣")  # Arabic-Indic three

def test_is_letter_or_digit():
    assert is_letter_or_digit("a")
    assert is_letter_or_digit("Z")
    assert is_letter_or_digit("0")
    assert not is_letter_or_digit("_")
    assert not is_letter_or_digit("é")


# ---------------------------------------------------------------------------
# trimmed / unquote
# ---------------------------------------------------------------------------

def test_trimmed():
    assert trimmed(" \t a b \t") == "a b"

def test_trimmed_is_idempotent():
    for s in ["  x  ", "\tx", "", "   ", "a  b"]:
        assert trimmed(trimmed(s)) == trimmed(s)

def test_is_quoted():
    assert is_quoted('"a"')
    assert is_quoted("'a'")
    assert is_quoted('""')
    assert not is_quoted('"')
    assert not is_quoted("'a\"")

def test_unquote():
    assert unquote("'Bob'") == "Bob"
    assert unquote("Bob") == "Bob"
    assert unquote("'x'", quotes=('"',)) == "'x'"


# ---------------------------------------------------------------------------
# coerce_scalar
# ---------------------------------------------------------------------------

def test_coerce_double_quoted():
    assert coerce_scalar('"Bob"') == VText("Bob")

def test_coerce_single_quoted():
    assert coerce_scalar("'Bob'") == VText("Bob")

def test_coerce_quoted_digits_stay_text():
    assert coerce_scalar('"20"') == VText("20")

def test_coerce_no_escape_processing():
    assert coerce_scalar(r'"a\nb"') == VText(r"a\nb")

def test_coerce_strips_one_quote_pair():
    assert coerce_scalar("''x''") == VText("'x'")

def test_coerce_integer():
    assert coerce_scalar(" 20 ") == VInteger(20)

def test_coerce_leading_zeros():
    assert coerce_scalar("007") == VInteger(7)

def test_coerce_non_digit_is_text():
    for token in ["20a", "-1", "+1", "3.14", "1e5", "true", "null", "1 2"]:
        assert coerce_scalar(token) == VText(token)

def test_coerce_empty_is_text():
    assert coerce_scalar("") == VText("")
    assert coerce_scalar("   ") == VText("")

def test_coerce_trims_text():
    assert coerce_scalar("  hello  ") == VText("hello")


# ---------------------------------------------------------------------------
# Integers
# ---------------------------------------------------------------------------

def test_is_integer_token():
    assert is_integer_token("0123")
    assert not is_integer_token("")
    assert not is_integer_token("12\n")

def test_digits_to_int_long():
    token = "1" + "0" * 9000
    assert digits_to_int(token) == 10 ** 9000

def test_digits_to_int_short():
    assert digits_to_int("42") == 42

def test_int_to_digits_short():
    assert int_to_digits(0) == "0"
    assert int_to_digits(42) == "42"
    assert int_to_digits(-7) == "-7"

def test_int_to_digits_long():
    token = "1" + "0" * 4000 + "5" + "0" * 4500
    assert int_to_digits(digits_to_int(token)) == token
    assert int_to_digits(10 ** 4000) == "1" + "0" * 4000
