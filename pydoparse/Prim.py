from .Parser import Parser, Success, FAILURE, ParseOutcome, T, U
from typing import Any, Callable, List

def parse(parser: Parser[T], text: str) -> ParseOutcome[T]:
    """Apply `parser` to `text`."""
    return parser(text)

def _item(text: str) -> ParseOutcome[str]:
    if not text:
        return FAILURE
    return Success(text[0], text[1:])

# The only parser that consumes input
item: Parser[str] = Parser(_item)

def ret(value: T) -> Parser[T]:
    """Return a parser that succeeds with a value without consuming input."""
    def parse(text: str) -> ParseOutcome[T]:
        return Success(value, text)
    return Parser(parse)

pure = ret

fail: Parser[Any] = Parser(lambda text: FAILURE)

def bind(p: Parser[T], f: Callable[[T], Parser[U]]) -> Parser[U]:
    """Run `p`, then the parser `f` builds from its value."""
    return p.bind(f)

def alt(a: Parser[T], b: Parser[T]) -> Parser[T]:
    """Try `a`; if it fails, try `b` from the same input."""
    return a | b

def sat(predicate: Callable[[str], bool]) -> Parser[str]:
    """Consume one character if it satisfies `predicate`."""
    return item.bind(lambda v: ret(v) if predicate(v) else fail)

def lazy(thunk: Callable[[], Parser[T]]) -> Parser[T]:
    """Build the parser on first use. Lets module-level grammars refer to themselves."""
    cache: List[Parser[T]] = []
    def parse(text: str) -> ParseOutcome[T]:
        if not cache:
            cache.append(thunk())
        return cache[0](text)
    return Parser(parse)

def _many_accum(p: Parser[T], minimum: int) -> Parser[List[T]]:
    # Loop form of `many1 = p then many`, `many = many1 | ret([])`.
    # `p` must consume on success or this never terminates.
    def parse_accum(text: str) -> ParseOutcome[List[T]]:
        values: List[T] = []
        rest = text
        while True:
            outcome = p(rest)
            if not outcome:
                break
            values.append(outcome.value)
            rest = outcome.remaining
        if len(values) < minimum:
            return FAILURE
        return Success(values, rest)
    return Parser(parse_accum)

def many(p: Parser[T]) -> Parser[List[T]]:
    """Parse zero or more occurrences of `p`."""
    return _many_accum(p, 0)

def many1(p: Parser[T]) -> Parser[List[T]]:
    """Parse one or more occurrences of `p`."""
    return _many_accum(p, 1)

def many_str(p: Parser[str]) -> Parser[str]:
    """Zero or more occurrences of `p`, joined into one string."""
    return _many_accum(p, 0).map("".join)

def many1_str(p: Parser[str]) -> Parser[str]:
    """One or more occurrences of `p`, joined into one string."""
    return _many_accum(p, 1).map("".join)

def skip_many(parser: Parser[Any]) -> Parser[None]:
    """Skips zero or more occurrences of `parser`."""
    return _many_accum(parser, 0).map(lambda _: None)
