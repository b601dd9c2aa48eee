import math
from .Parser import Parser
from .Prim import ret, fail, many_str, many1_str
from .Char import char, digit
from .Combinators import seq_str

def _to_number(s: str) -> Parser[float]:
    try:
        n = float(s)
    except ValueError:
        # "" or a lone "-"
        return fail
    return ret(n) if math.isfinite(n) else fail

# Optional '-', digits, optional fraction: "-12.5", "3", "-.5", "7."  ->  7 with "." left over
num: Parser[float] = seq_str([
    char("-") | ret(""),
    many_str(digit),
    seq_str([char("."), many1_str(digit)]) | ret(""),
]).bind(_to_number)
