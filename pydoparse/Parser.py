from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Tuple, TypeVar, Union

T = TypeVar('T')  # Generic type for parser results
U = TypeVar('U')


@dataclass(frozen=True)
class Success(Generic[T]):
    """A parse that produced `value` and left `remaining` unconsumed."""
    value: T
    remaining: str

    def __bool__(self) -> bool:
        return True

    def __iter__(self) -> Iterator[Any]:
        # Allows `value, rest = outcome`
        yield self.value
        yield self.remaining


@dataclass(frozen=True)
class Failure:
    """A failed parse. Carries no reason and no position."""

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "FAILURE"


FAILURE = Failure()

ParseOutcome = Union[Success[T], Failure]


class Parser(Generic[T]):
    """A parser: a function from input text to a ParseOutcome."""
    __slots__ = ("parse_fn",)

    def __init__(self, parse_fn: Callable[[str], ParseOutcome[T]]):
        self.parse_fn = parse_fn

    def __call__(self, text: str) -> ParseOutcome[T]:
        return self.parse_fn(text)

    # Monadic bind (>>=)
    def bind(self, f: Callable[[T], 'Parser[U]']) -> 'Parser[U]':
        def parse(text: str) -> ParseOutcome[U]:
            outcome = self(text)
            if not outcome:
                return FAILURE
            return f(outcome.value)(outcome.remaining)
        return Parser(parse)

    # Ordered choice (<|>), always backtracks to the original input
    def __or__(self, other: 'Parser[T]') -> 'Parser[T]':
        def parse(text: str) -> ParseOutcome[T]:
            return self(text) or other(text)
        return Parser(parse)

    # Sequence (&)
    def __and__(self, other: 'Parser[U]') -> 'Parser[Tuple[T, U]]':
        def combined(text: str) -> ParseOutcome[Tuple[T, U]]:
            first = self(text)
            if not first:
                return FAILURE
            second = other(first.remaining)
            if not second:
                return FAILURE
            return Success((first.value, second.value), second.remaining)
        return Parser(combined)

    # Sequence (*>)
    def __gt__(self, other: 'Parser[U]') -> 'Parser[U]':
        return self.bind(lambda _: other)

    # Sequence (<*)
    def __lt__(self, other: 'Parser[U]') -> 'Parser[T]':
        return self.bind(lambda x: other.map(lambda _: x))

    # `p >> f` binds; `p >> q` with a parser on the right is `p > q`
    def __rshift__(self, f: Union['Parser[U]', Callable[[T], 'Parser[U]']]) -> 'Parser[U]':
        if isinstance(f, Parser):
            return self > f
        return self.bind(f)

    def map(self, f: Callable[[T], U]) -> 'Parser[U]':
        def parse(text: str) -> ParseOutcome[U]:
            outcome = self(text)
            if not outcome:
                return FAILURE
            return Success(f(outcome.value), outcome.remaining)
        return Parser(parse)


class ParseError(Exception):
    """Raised when a complete parse of `input` could not be produced."""

    def __init__(self, message: str, input: str):
        super().__init__(message)
        self.input = input


class InputSyntaxError(ParseError):
    """The parser failed outright on the input."""

    def __init__(self, input: str, source_name: str = "input"):
        super().__init__(f'Syntax error in {source_name}: "{input}"', input)
        self.source_name = source_name


class ExpectedEndOfInputError(ParseError):
    """The parser succeeded on a prefix of the input but left `leftover` behind."""

    def __init__(self, input: str, leftover: str, source_name: str = "input"):
        super().__init__(
            f'In {source_name} "{input}": expected end of input, saw "{leftover}"',
            input,
        )
        self.leftover = leftover
        self.source_name = source_name
