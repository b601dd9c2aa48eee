"""
Do-notation for parsers, driven by Python generators.

A do-block is a generator function that yields parsers and receives their
values back::

    @do
    def pair():
        a = yield digit
        b = yield digit
        return a + b

Running the block is equivalent to the nested chain
``digit.bind(lambda a: digit.bind(lambda b: ret(a + b)))``.
"""
import functools
from typing import Any, Callable, Generator

from .Parser import Parser, Success, FAILURE, ParseOutcome, T

DoBlock = Generator[Parser[Any], Any, T]


def run(gen_func: Callable[[], DoBlock[T]]) -> Parser[T]:
    """
    Turn a generator function into a parser.

    Each application of the parser starts a fresh generator. The yielded
    parsers are applied in turn to the remaining input, and each produced
    value is sent back into the generator. If any of them fails, the
    generator is closed and the whole parse fails. When the generator
    returns, its return value is the parse value.
    """
    def parse(text: str) -> ParseOutcome[T]:
        gen = gen_func()
        rest = text
        value: Any = None
        while True:
            try:
                step = gen.send(value)
            except StopIteration as stop:
                return Success(stop.value, rest)
            if not callable(step):
                gen.close()
                raise TypeError(f"do-block yielded {step!r}, expected a parser")
            outcome = step(rest)
            if not outcome:
                gen.close()
                return FAILURE
            value, rest = outcome
    return Parser(parse)


def do(gen_func: Callable[..., DoBlock[T]]) -> Callable[..., Parser[T]]:
    """
    Decorator form of `run` for do-blocks that take arguments.

    ``@do def block(x): ...`` makes ``block(x)`` return a parser.
    """
    @functools.wraps(gen_func)
    def make(*args: Any, **kwargs: Any) -> Parser[T]:
        return run(lambda: gen_func(*args, **kwargs))
    return make
