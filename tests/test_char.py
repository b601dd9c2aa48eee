import string as ascii_sets

from hypothesis import given
from hypothesis import strategies as st

from pydoparse.Char import (
    alphanum,
    any_char,
    char,
    digit,
    is_alphanum,
    is_digit,
    is_letter,
    is_lower,
    is_space,
    is_upper,
    letter,
    lower,
    none_of,
    one_of,
    space,
    spaces,
    spaces1,
    string,
    upper,
)
from pydoparse.Parser import Success
from pydoparse.Prim import parse


# --- Predicates ---


@given(st.characters())
def test_predicates_match_ascii_classes(c):
    assert is_digit(c) == (c in ascii_sets.digits)
    assert is_upper(c) == (c in ascii_sets.ascii_uppercase)
    assert is_lower(c) == (c in ascii_sets.ascii_lowercase)
    assert is_letter(c) == (c in ascii_sets.ascii_letters)
    assert is_alphanum(c) == (c in ascii_sets.ascii_letters + ascii_sets.digits + "_")
    assert is_space(c) == (c in " \t\n\v\f\r")


def test_predicates_reject_non_ascii():
    assert not is_digit("\u0663")
    assert not is_letter("é")
    assert not is_upper("Σ")
    assert not is_space("\u00a0")


def test_predicates_reject_multi_character_strings():
    assert not is_digit("12")
    assert not is_letter("ab")
    assert not is_digit("")


# --- Basic Character Parsers ---


@given(st.characters())
def test_char_parser(c):
    assert parse(char(c), c + "rest") == Success(c, "rest")

    diff = chr((ord(c) + 1) % 0x110000)
    assert not parse(char(c), diff)


def test_char_on_empty_input():
    assert not parse(char("a"), "")


def test_class_parsers():
    assert parse(digit, "5a") == Success("5", "a")
    assert parse(space, "\tx") == Success("\t", "x")
    assert parse(alphanum, "_x") == Success("_", "x")
    assert parse(letter, "Qx") == Success("Q", "x")
    assert parse(upper, "Qx") == Success("Q", "x")
    assert parse(lower, "qX") == Success("q", "X")
    assert parse(any_char, "!") == Success("!", "")

    assert not parse(digit, "a")
    assert not parse(upper, "q")
    assert not parse(lower, "Q")
    assert not parse(letter, "1")


def test_one_of_and_none_of():
    assert parse(one_of("+-"), "-1") == Success("-", "1")
    assert not parse(one_of("+-"), "1")
    assert parse(none_of('"'), "a") == Success("a", "")
    assert not parse(none_of('"'), '"')
    assert not parse(none_of('"'), "")


# --- Strings ---


def test_string_match():
    assert parse(string("abc"), "abcdef") == Success("abc", "def")


def test_string_no_partial_match():
    assert not parse(string("abc"), "abd")
    assert not parse(string("abc"), "ab")


@given(st.text())
def test_empty_string_always_succeeds(text):
    assert parse(string(""), text) == Success("", text)


@given(st.text(), st.text())
def test_string_prefix(prefix, rest):
    assert parse(string(prefix), prefix + rest) == Success(prefix, rest)


# --- Whitespace ---


def test_spaces():
    assert parse(spaces, "  \n x") == Success("  \n ", "x")
    assert parse(spaces, "x") == Success("", "x")
    assert parse(spaces1, " x") == Success(" ", "x")
    assert not parse(spaces1, "x")
