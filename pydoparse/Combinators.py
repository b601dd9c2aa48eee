import logging
from typing import Any, Callable, List, Optional, Sequence
from .Parser import Parser, Success, FAILURE, ParseOutcome, T
from .Prim import ret, fail, many

logger = logging.getLogger(__name__)


# 1. seq_str: Concatenates the results of string parsers run in order
def seq_str(parsers: Sequence[Parser[str]]) -> Parser[str]:
    """
    Applies each parser left to right, joining their results.
    Fails if any of them fails; an empty sequence succeeds with "".
    """
    parsers = list(parsers)
    def parse(text: str) -> ParseOutcome[str]:
        parts: List[str] = []
        rest = text
        for p in parsers:
            outcome = p(rest)
            if not outcome:
                return FAILURE
            parts.append(outcome.value)
            rest = outcome.remaining
        return Success("".join(parts), rest)
    return Parser(parse)

# 2. choice: Tries parsers in order until one succeeds
def choice(parsers: Sequence[Parser[T]]) -> Parser[T]:
    """
    Applies a list of parsers in order until one succeeds.
    Returns the value of the succeeding parser, or fails if none succeed.
    """
    if not parsers:
        return fail
    result = parsers[0]
    for p in parsers[1:]:
        result = result | p
    return result

# 3. count: Parses n occurrences of a parser
def count(n: int, p: Parser[T]) -> Parser[List[T]]:
    if n <= 0:
        return ret([])
    def parse(text: str) -> ParseOutcome[List[T]]:
        results: List[T] = []
        rest = text
        for _ in range(n):
            outcome = p(rest)
            if not outcome:
                return FAILURE
            results.append(outcome.value)
            rest = outcome.remaining
        return Success(results, rest)
    return Parser(parse)

# 4. between: Parses an opening parser, a main parser, and a closing parser
def between(open: Parser[Any], close: Parser[Any], p: Parser[T]) -> Parser[T]:
    """
    Parses 'open', then 'p', then 'close', returning the result of 'p'.
    """
    return open.bind(lambda _: p.bind(lambda x: close.bind(lambda _: ret(x))))

# 5. option: Tries a parser, returning a default value on failure
def option(x: T, p: Parser[T]) -> Parser[T]:
    return p | ret(x)

# 6. option_maybe: Tries a parser, returning None on failure
def option_maybe(p: Parser[T]) -> Parser[Optional[T]]:
    return p | ret(None)

# 7. optional: Tries a parser, discarding the result
def optional(p: Parser[Any]) -> Parser[None]:
    return p.bind(lambda _: ret(None)) | ret(None)

# 8. sep_by1: Parses one or more occurrences separated by a separator
def sep_by1(p: Parser[T], sep: Parser[Any]) -> Parser[List[T]]:
    """
    Parses one or more occurrences of p separated by sep, returning a list of p's results.
    """
    return p.bind(lambda x: many(sep > p).bind(lambda xs: ret([x] + xs)))

# 9. sep_by: Parses zero or more occurrences separated by a separator
def sep_by(p: Parser[T], sep: Parser[Any]) -> Parser[List[T]]:
    return sep_by1(p, sep) | ret([])

# 10. chainl1: Left-associative operator chain
def chainl1(p: Parser[T], op: Parser[Callable[[T, T], T]]) -> Parser[T]:
    """
    Parses one or more p separated by op, applying op left-associatively.
    A trailing op without a following p is left unconsumed.
    """
    def parse(text: str) -> ParseOutcome[T]:
        first = p(text)
        if not first:
            return FAILURE
        value, rest = first
        while True:
            op_outcome = op(rest)
            if not op_outcome:
                break
            next_outcome = p(op_outcome.remaining)
            if not next_outcome:
                break
            value = op_outcome.value(value, next_outcome.value)
            rest = next_outcome.remaining
        return Success(value, rest)
    return Parser(parse)

# 11. eof: Succeeds only at the end of input
eof: Parser[None] = Parser(lambda text: FAILURE if text else Success(None, text))

# 12. parser_trace: Debugging parser that logs the remaining input
def parser_trace(label_str: str) -> Parser[None]:
    def parse(text: str) -> ParseOutcome[None]:
        logger.debug('%s: "%s%s"', label_str, text[:30], '...' if len(text) > 30 else '')
        return Success(None, text)
    return Parser(parse)
