from pydoparse import (
    char, letter, alphanum, many_str, num, spaces, sep_by, make_parser, do, run, ParseError
)

# 1. Lexeme helper: a token followed by optional whitespace
@do
def lexeme(p):
    value = yield p
    yield spaces
    return value

def symbol(c):
    return lexeme(char(c))

# 2. Descriptor grammar:  name(arg, arg, ...)  where each arg is a number
def identifier():
    first = yield letter
    rest = yield many_str(alphanum)
    return first + rest

def descriptor():
    yield spaces
    name = yield lexeme(run(identifier))
    yield symbol("(")
    args = yield sep_by(lexeme(num), symbol(","))
    yield symbol(")")
    return name, args

parse_descriptor = make_parser(run(descriptor), source_name="descriptor")

if __name__ == "__main__":
    for text in ["point(1.5, -2)", "rgb(255, 128, 0)", "empty()", "broken(1,", "ok(1) extra"]:
        try:
            print(text, "->", parse_descriptor(text))
        except ParseError as err:
            print(text, "->", err)
