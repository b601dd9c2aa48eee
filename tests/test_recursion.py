import sys

import pytest

from pydoparse.Char import char, digit, string
from pydoparse.Combinators import sep_by, seq_str
from pydoparse.Prim import many, many_str, parse


@pytest.fixture
def low_recursion_limit():
    old = sys.getrecursionlimit()
    sys.setrecursionlimit(1000)
    yield
    sys.setrecursionlimit(old)


def test_many_stack_safety(low_recursion_limit):
    n = 10000
    outcome = parse(many(char('a')), "a" * n)
    assert outcome
    assert len(outcome.value) == n


def test_many_str_stack_safety(low_recursion_limit):
    n = 10000
    assert parse(many_str(digit), "7" * n).value == "7" * n


def test_long_string_and_sequence(low_recursion_limit):
    text = "ab" * 5000
    assert parse(string(text), text).value == text
    assert parse(seq_str([char("a"), char("b")] * 5000), text).value == text


def test_sep_by_stack_safety(low_recursion_limit):
    n = 5000
    outcome = parse(sep_by(digit, char(",")), ",".join("1" * n))
    assert len(outcome.value) == n
