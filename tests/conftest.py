# tests/conftest.py

from pydoparse.Parser import Failure, ParseOutcome, Success


def assert_outcome_eq(res1: ParseOutcome, res2: ParseOutcome):
    """
    Deep comparison of two ParseOutcomes.
    """
    if isinstance(res1, Success):
        assert isinstance(res2, Success), "Outcome mismatch: Success vs Failure"
        assert res1.value == res2.value
        assert res1.remaining == res2.remaining
    else:
        assert isinstance(res1, Failure)
        assert isinstance(res2, Failure), "Outcome mismatch: Failure vs Success"
