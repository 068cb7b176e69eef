from typing import Any, Callable, Iterable

from .maybe import Maybe, Just, NOTHING
from .pair import Pair
from .seq import Cons, NIL, replicate, to_str, from_iterable
from .stream import Input


# --- Parser abstraction ---
#
# A parser maps a stream to Maybe[Pair[remaining stream, value]]. A stream is
# anything with `uncons()` and `__len__`: an `Input` cursor or a `Seq`.
#
# Combinators call `p.func` rather than `p(...)` and keep each `run` flat, so
# nesting a parser costs one Python frame per combinator.


class Parser:
    def __init__(self, func: Callable[[Any], Maybe]):
        if not callable(func):
            raise TypeError(f"Parser needs a callable, got {func!r}")
        self.func = func

    def __call__(self, inp) -> Maybe:
        return self.func(inp)

    @classmethod
    def lazy(cls, thunk: Callable[[], "Parser"]) -> "Parser":
        "Defers building the parser until it first runs, for recursive grammars"
        return cls(lambda inp: thunk().func(inp))

    def map(self, f) -> "Parser":
        def run(inp):
            res = self.func(inp)
            if res.is_nothing():
                return res
            cur, x = res.get_or(None)
            return Just(Pair(cur, f(x)))

        return Parser(run)

    def apply(self, other: "Parser") -> "Parser":
        "Runs self for a function, then other on what is left, and applies"

        def run(inp):
            res = self.func(inp)
            if res.is_nothing():
                return res
            cur, f = res.get_or(None)
            res = other.func(cur)
            if res.is_nothing():
                return res
            cur, x = res.get_or(None)
            return Just(Pair(cur, f(x)))

        return Parser(run)

    def bind(self, f: Callable[[Any], "Parser"]) -> "Parser":
        def run(inp):
            res = self.func(inp)
            if res.is_nothing():
                return res
            cur, x = res.get_or(None)
            return f(x).func(cur)

        return Parser(run)

    def __or__(self, other: "Parser") -> "Parser":
        def run(inp):
            res = self.func(inp)
            if res.is_just():
                return res
            return other.func(inp)

        return Parser(run)

    def __rshift__(self, other: "Parser") -> "Parser":
        "Sequencing, discarding first result"

        def run(inp):
            res = self.func(inp)
            if res.is_nothing():
                return res
            cur, _ = res.get_or(None)
            return other.func(cur)

        return Parser(run)

    def __lshift__(self, other: "Parser") -> "Parser":
        "Sequencing, discarding second result"

        def run(inp):
            res = self.func(inp)
            if res.is_nothing():
                return res
            cur, x = res.get_or(None)
            res = other.func(cur)
            if res.is_nothing():
                return res
            cur, _ = res.get_or(None)
            return Just(Pair(cur, x))

        return Parser(run)


def pure(x) -> Parser:
    return Parser(lambda inp: Just(Pair(inp, x)))


empty = Parser(lambda inp: NOTHING)


def runParser(p: Parser, source) -> Maybe:
    if isinstance(source, str):
        source = Input.of(source)
    return p.func(source)


# --- Primitives ---


def satisfy(pred: Callable[[Any], bool]) -> Parser:
    def run(inp):
        res = inp.uncons()
        if res.is_nothing():
            return res
        x, rest = res.get_or(None)
        if pred(x):
            return Just(Pair(rest, x))
        return NOTHING

    return Parser(run)


def charP(x) -> Parser:
    return satisfy(lambda y: y == x)


def literalSeq(xs: Iterable) -> Parser:
    "Matches the elements of xs in order, yielding them as a Seq"
    return sequenceOf(charP(x) for x in xs)


def stringP(s: str) -> Parser:
    return literalSeq(s).map(lambda _: s)


def _end_of_input(inp):
    if len(inp) > 0:
        return NOTHING
    return Just(Pair(inp, None))


endOfInput = Parser(_end_of_input)


def lookAhead(p: Parser) -> Parser:
    def run(inp):
        res = p.func(inp)
        if res.is_nothing():
            return res
        _, x = res.get_or(None)
        return Just(Pair(inp, x))

    return Parser(run)


# --- Repetition and sequencing ---


def some(p: Parser) -> Parser:
    """One or more. A success of `p` that consumes nothing fails the first
    round, and ends the repetition in later rounds."""

    def run(inp):
        first = p.func(inp)
        if first.is_nothing():
            return NOTHING
        cur, x = first.get_or(None)
        if len(cur) >= len(inp):
            return NOTHING
        vals = [x]
        while True:
            res = p.func(cur)
            if res.is_nothing():
                break
            nxt, v = res.get_or(None)
            if len(nxt) >= len(cur):
                break
            cur = nxt
            vals.append(v)
        return Just(Pair(cur, from_iterable(vals)))

    return Parser(run)


def many(p: Parser) -> Parser:
    return some(p) | pure(NIL)


def sequenceOf(parsers: Iterable[Parser]) -> Parser:
    parsers = list(parsers)

    def run(inp):
        cur = inp
        vals = []
        for p in parsers:
            res = p.func(cur)
            if res.is_nothing():
                return NOTHING
            cur, v = res.get_or(None)
            vals.append(v)
        return Just(Pair(cur, from_iterable(vals)))

    return Parser(run)


def count(n: int, p: Parser) -> Parser:
    return sequenceOf(replicate(n, p))


def optional(p: Parser) -> Parser:
    "Never fails: Just the value of p, or NOTHING without consuming"
    return p.map(Just) | pure(NOTHING)


def choice(parsers: Iterable[Parser]) -> Parser:
    parsers = list(parsers)

    def run(inp):
        for p in parsers:
            res = p.func(inp)
            if res.is_just():
                return res
        return NOTHING

    return Parser(run)


def sepBy(element: Parser, sep: Parser) -> Parser:
    "One or more elements separated by sep; separators are dropped"
    return element.map(lambda x: lambda xs: Cons(x, xs)).apply(many(sep >> element))


def sepBy0(element: Parser, sep: Parser) -> Parser:
    return sepBy(element, sep) | pure(NIL)


def spanP(pred: Callable[[str], bool]) -> Parser:
    return many(satisfy(pred)).map(to_str)
