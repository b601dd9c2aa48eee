from typing import Iterable
from .Parser import Parser, Success, FAILURE, ParseOutcome
from .Prim import item, sat, many_str, many1_str

_DIGITS = frozenset("0123456789")
_UPPER = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
_LOWER = frozenset("abcdefghijklmnopqrstuvwxyz")
_SPACE = frozenset(" \t\n\v\f\r")

# Character predicates. ASCII only; anything but a single character is rejected.
def is_digit(c: str) -> bool:
    return c in _DIGITS

def is_space(c: str) -> bool:
    return c in _SPACE

def is_upper(c: str) -> bool:
    return c in _UPPER

def is_lower(c: str) -> bool:
    return c in _LOWER

def is_letter(c: str) -> bool:
    return is_upper(c) or is_lower(c)

def is_alphanum(c: str) -> bool:
    """Word characters: ASCII letters, digits and underscore."""
    return is_letter(c) or is_digit(c) or c == "_"

# Helper function: Parses a single character
def char(c: str) -> Parser[str]:
    """Parses a single character c and returns it."""
    return sat(lambda v: v == c)

def string(s: str) -> Parser[str]:
    """Parses the exact string s and returns it. A mismatch anywhere fails the whole match."""
    def parse(text: str) -> ParseOutcome[str]:
        if text.startswith(s):
            return Success(s, text[len(s):])
        return FAILURE
    return Parser(parse)

def one_of(cs: Iterable[str]) -> Parser[str]:
    """Succeeds if the current character is in cs. Returns the parsed character."""
    allowed = frozenset(cs)
    return sat(lambda c: c in allowed)

def none_of(cs: Iterable[str]) -> Parser[str]:
    """Succeeds if the current character is not in cs. Returns the parsed character."""
    forbidden = frozenset(cs)
    return sat(lambda c: c not in forbidden)

any_char: Parser[str] = item
digit: Parser[str] = sat(is_digit)
space: Parser[str] = sat(is_space)
alphanum: Parser[str] = sat(is_alphanum)
letter: Parser[str] = sat(is_letter)
upper: Parser[str] = sat(is_upper)
lower: Parser[str] = sat(is_lower)

spaces: Parser[str] = many_str(space)
spaces1: Parser[str] = many1_str(space)
