from typing import Iterable, Tuple

from .maybe import Maybe, Just, NOTHING
from .pair import Pair
from .seq import Seq, from_iterable


# --- Input abstraction ---


class Input:
    """A position in an immutable buffer.

    Advancing makes a new `Input` sharing the same buffer, so keeping an old
    `Input` around is all it takes to backtrack to it.
    """

    __slots__ = ("buf", "loc")

    def __init__(self, buf: Tuple, loc: int = 0):
        self.buf = buf
        self.loc = loc

    @classmethod
    def of(cls, xs: Iterable) -> "Input":
        return cls(tuple(xs), 0)

    def uncons(self) -> Maybe:
        if self.loc >= len(self.buf):
            return NOTHING
        return Just(Pair(self.buf[self.loc], Input(self.buf, self.loc + 1)))

    def __len__(self):
        return len(self.buf) - self.loc

    def text(self) -> str:
        return "".join(self.buf[self.loc:])

    def to_seq(self) -> Seq:
        return from_iterable(self.buf[self.loc:])

    def __eq__(self, other):
        return (
            isinstance(other, Input)
            and self.buf[self.loc:] == other.buf[other.loc:]
        )

    def __hash__(self):
        return hash(self.buf[self.loc:])

    def __repr__(self):
        return f"Input({self.loc}, {self.text()!r})"
