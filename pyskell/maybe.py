from typing import Any, Callable


# --- Optional values ---


class Maybe:
    """Either `Just(value)` or `NOTHING`. Eliminate with `fold`."""

    __slots__ = ()

    def fold(self, if_nothing, if_just: Callable[[Any], Any]):
        raise NotImplementedError

    def map(self, f: Callable[[Any], Any]) -> "Maybe":
        return self.fold(NOTHING, lambda x: Just(f(x)))

    def apply(self, ma: "Maybe") -> "Maybe":
        "Applies the wrapped function to the value inside `ma`"
        return self.fold(NOTHING, lambda f: ma.map(f))

    def bind(self, f: Callable[[Any], "Maybe"]) -> "Maybe":
        return self.fold(NOTHING, f)

    def or_else(self, other: "Maybe") -> "Maybe":
        return self.fold(other, Just)

    def __or__(self, other):
        return self.or_else(other)

    def is_just(self) -> bool:
        return self.fold(False, lambda _: True)

    def is_nothing(self) -> bool:
        return not self.is_just()

    def get_or(self, default):
        return self.fold(default, lambda x: x)


class Just(Maybe):
    __slots__ = ("value",)

    def __init__(self, value):
        self.value = value

    def fold(self, if_nothing, if_just):
        return if_just(self.value)

    def __eq__(self, other):
        return isinstance(other, Just) and self.value == other.value

    def __hash__(self):
        return hash(("Just", self.value))

    def __repr__(self):
        return f"Just({self.value!r})"


class Nothing(Maybe):
    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def fold(self, if_nothing, if_just):
        return if_nothing

    def __eq__(self, other):
        return isinstance(other, Nothing)

    def __hash__(self):
        return hash("Nothing")

    def __repr__(self):
        return "Nothing"


NOTHING = Nothing()


def just(x) -> Maybe:
    return Just(x)


def ap_maybe(mf: Maybe, ma: Maybe) -> Maybe:
    return mf.apply(ma)


def bind_maybe(ma: Maybe, f) -> Maybe:
    return ma.bind(f)

