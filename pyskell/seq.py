from typing import Any, Callable, Iterable, List

from .maybe import Maybe, Just, NOTHING
from .pair import Pair


# --- Ordered sequences ---


class Seq:
    """Immutable singly-linked sequence: `Cons(head, tail)` or `NIL`.

    Every cell records its length, so `len()` is constant time. All derived
    operations below walk the cells with loops rather than recursion.
    """

    __slots__ = ()

    def fold(self, cons: Callable[[Any, Any], Any], nil):
        """Right fold: `Cons(a, Cons(b, NIL)).fold(f, z) == f(a, f(b, z))`."""
        acc = nil
        for x in reversed(to_list(self)):
            acc = cons(x, acc)
        return acc

    def uncons(self) -> Maybe:
        raise NotImplementedError

    def __iter__(self):
        cur = self
        while isinstance(cur, Cons):
            yield cur.head
            cur = cur.tail

    def __eq__(self, other):
        if not isinstance(other, Seq) or len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self, other))

    def __hash__(self):
        return hash(tuple(self))

    def __repr__(self):
        return f"Seq({to_list(self)!r})"


class Cons(Seq):
    __slots__ = ("head", "tail", "size")

    def __init__(self, head, tail: Seq):
        self.head = head
        self.tail = tail
        self.size = len(tail) + 1

    def uncons(self) -> Maybe:
        return Just(Pair(self.head, self.tail))

    def __len__(self):
        return self.size


class Nil(Seq):
    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def uncons(self) -> Maybe:
        return NOTHING

    def __len__(self):
        return 0


NIL = Nil()


# --- Host adapters ---


def from_iterable(xs: Iterable) -> Seq:
    acc = NIL
    for x in reversed(list(xs)):
        acc = Cons(x, acc)
    return acc


def to_list(xs: Seq) -> List:
    return list(xs)


def from_str(s: str) -> Seq:
    return from_iterable(s)


def to_str(xs: Seq) -> str:
    return "".join(xs)


# --- Derived operations ---


def length(xs: Seq) -> int:
    return len(xs)


def head_option(xs: Seq) -> Maybe:
    return xs.uncons().map(lambda p: p.first)


def tail(xs: Seq) -> Seq:
    return drop(1, xs)


def append(xs: Seq, ys: Seq) -> Seq:
    acc = ys
    for x in reversed(to_list(xs)):
        acc = Cons(x, acc)
    return acc


def reverse(xs: Seq) -> Seq:
    acc = NIL
    for x in xs:
        acc = Cons(x, acc)
    return acc


def take(n: int, xs: Seq) -> Seq:
    if n <= 0:
        return NIL
    taken = []
    for x in xs:
        if len(taken) >= n:
            break
        taken.append(x)
    return from_iterable(taken)


def drop(n: int, xs: Seq) -> Seq:
    cur = xs
    while n > 0 and isinstance(cur, Cons):
        cur = cur.tail
        n -= 1
    return cur


def replicate(n: int, element) -> Seq:
    acc = NIL
    for _ in range(n):
        acc = Cons(element, acc)
    return acc


def fmap_seq(f, xs: Seq) -> Seq:
    return from_iterable(f(x) for x in xs)


def zip_seq(xs: Seq, ys: Seq) -> Seq:
    pairs = []
    while True:
        step = head_option(xs).bind(
            lambda a: head_option(ys).bind(lambda b: Just(Pair(a, b)))
        )
        if step.is_nothing():
            break
        pairs.append(step.get_or(None))
        xs, ys = tail(xs), tail(ys)
    return from_iterable(pairs)


def pure_seq(a) -> Seq:
    return Cons(a, NIL)


def ap_seq(fs: Seq, xs: Seq) -> Seq:
    "Every function applied to every element, functions outermost"
    return from_iterable(f(x) for f in fs for x in xs)


def lookup(key, xs: Seq) -> Maybe:
    "Value of the first pair whose first component equals `key`"
    for p in xs:
        if p.first == key:
            return Just(p.second)
    return NOTHING
