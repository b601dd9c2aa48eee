from pydoparse.Char import char, digit
from pydoparse.Do import run
from pydoparse.Prim import many, many_str


def _digits(n):
    def block():
        out = []
        for _ in range(n):
            out.append((yield digit))
        return out
    return run(block)


class TimeMany:
    def setup(self):
        self.parser = many(char("a"))
        self.str_parser = many_str(char("a"))
        self.small = "a" * 1000
        self.medium = "a" * 10000

    def time_many_small(self):
        self.parser(self.small)

    def time_many_medium(self):
        self.parser(self.medium)

    def time_many_str_medium(self):
        self.str_parser(self.medium)


class TimeDoBlock:
    def setup(self):
        self.parser = _digits(1000)
        self.data = "1" * 1000

    def time_do_block(self):
        self.parser(self.data)
