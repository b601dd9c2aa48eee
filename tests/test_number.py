import pytest
from hypothesis import given, strategies as st

from pydoparse.Number import num
from pydoparse.Prim import parse


@pytest.mark.parametrize("text, value, rest", [
    ("-12.5", -12.5, ""),
    ("3", 3, ""),
    ("0.25x", 0.25, "x"),
    ("-.5", -0.5, ""),
    (".5", 0.5, ""),
    ("7.", 7, "."),
    ("42abc", 42, "abc"),
])
def test_num(text, value, rest):
    outcome = parse(num, text)
    assert outcome
    assert outcome.value == value
    assert outcome.remaining == rest


@pytest.mark.parametrize("text", ["-", ".", "", "abc", "-x", "--1"])
def test_num_fails(text):
    assert not parse(num, text)


def test_num_rejects_overflow():
    assert not parse(num, "9" * 400)


@given(st.floats(allow_nan=False, allow_infinity=False, min_value=-1e6, max_value=1e6))
def test_num_reads_fixed_point_text(x):
    text = f"{x:.4f}"
    outcome = parse(num, text)
    assert outcome.value == float(text)
    assert outcome.remaining == ""
