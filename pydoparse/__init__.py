# Core
from .Parser import (
    Parser, Success, Failure, FAILURE, ParseOutcome,
    ParseError, InputSyntaxError, ExpectedEndOfInputError
)
from .Prim import (
    parse, item, ret, pure, fail, bind, alt, sat, lazy,
    many, many1, many_str, many1_str, skip_many
)

# Characters
from .Char import (
    is_digit, is_space, is_alphanum, is_letter, is_upper, is_lower,
    char, string, one_of, none_of,
    any_char, digit, space, alphanum, letter, upper, lower, spaces, spaces1
)

# Combinators
from .Combinators import (
    seq_str, choice, count, between, option, option_maybe, optional,
    sep_by, sep_by1, chainl1, eof, parser_trace
)

# Do-notation
from .Do import run, do

# Grammar and driver
from .Number import num
from .Driver import make_parser
