from typing import Any, Callable


# --- Pairs ---


class Pair:
    __slots__ = ("first", "second")

    def __init__(self, first, second):
        self.first = first
        self.second = second

    def fold(self, f: Callable[[Any, Any], Any]):
        return f(self.first, self.second)

    def __iter__(self):
        yield self.first
        yield self.second

    def __eq__(self, other):
        return (
            isinstance(other, Pair)
            and self.first == other.first
            and self.second == other.second
        )

    def __hash__(self):
        return hash((self.first, self.second))

    def __repr__(self):
        return f"Pair({self.first!r}, {self.second!r})"


def fst(p: Pair):
    return p.first


def snd(p: Pair):
    return p.second


def fmap_pair(f, p: Pair) -> Pair:
    "Maps over the second component, keeping the first"
    return Pair(p.first, f(p.second))
