import logging
from typing import Callable
from .Parser import Parser, InputSyntaxError, ExpectedEndOfInputError, T

logger = logging.getLogger(__name__)


def make_parser(p: Parser[T], source_name: str = "input") -> Callable[[str], T]:
    """
    Wrap `p` in a function that parses a whole string.

    The returned function raises InputSyntaxError when `p` fails, and
    ExpectedEndOfInputError when `p` succeeds without consuming all of
    the input. `source_name` is the word used for the input in messages.
    """
    def parse_all(s: str) -> T:
        outcome = p(s)
        if not outcome:
            logger.debug("Parse of %s %r failed", source_name, s)
            raise InputSyntaxError(s, source_name)
        if outcome.remaining:
            logger.debug("Parse of %s %r stopped before %r", source_name, s, outcome.remaining)
            raise ExpectedEndOfInputError(s, outcome.remaining, source_name)
        return outcome.value
    return parse_all
