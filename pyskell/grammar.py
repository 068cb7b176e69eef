import logging
from typing import Any, List, Tuple

from .maybe import Maybe, Just, NOTHING
from .pair import Pair
from .parser import (
    Parser,
    charP,
    choice,
    count,
    endOfInput,
    many,
    optional,
    satisfy,
    sepBy0,
    sequenceOf,
    some,
    spanP,
    stringP,
)
from .seq import to_list, to_str
from .stream import Input

log = logging.getLogger(__name__)

WHITESPACE = " \t\n\r"
DIGITS = "0123456789"
HEX_DIGITS = "0123456789abcdefABCDEF"

# Single-character escapes after a backslash inside a string.
ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


# --- JSON Value Types ---


class JsonValue:
    def to_python(self) -> Any:
        raise NotImplementedError


class JsonNull(JsonValue):
    def to_python(self):
        return None

    def __eq__(self, other):
        return isinstance(other, JsonNull)

    def __repr__(self):
        return "JsonNull"


class JsonBool(JsonValue):
    def __init__(self, val: bool):
        self.val = val

    def to_python(self):
        return self.val

    def __eq__(self, other):
        return isinstance(other, JsonBool) and self.val == other.val

    def __repr__(self):
        return f"JsonBool({self.val})"


class JsonNumber(JsonValue):
    def __init__(self, val):
        self.val = val

    def to_python(self):
        return self.val

    def __eq__(self, other):
        return isinstance(other, JsonNumber) and self.val == other.val

    def __repr__(self):
        return f"JsonNumber({self.val})"


class JsonString(JsonValue):
    def __init__(self, val: str):
        self.val = val

    def to_python(self):
        return self.val

    def __eq__(self, other):
        return isinstance(other, JsonString) and self.val == other.val

    def __repr__(self):
        return f"JsonString({self.val!r})"


class JsonArray(JsonValue):
    def __init__(self, vals: List[JsonValue]):
        self.vals = vals

    def to_python(self):
        return [v.to_python() for v in self.vals]

    def __eq__(self, other):
        return isinstance(other, JsonArray) and self.vals == other.vals

    def __repr__(self):
        return f"JsonArray({self.vals})"


class JsonObject(JsonValue):
    """Members in source order. Converting to a dict keeps the last value of
    a repeated key."""

    def __init__(self, items: List[Tuple[str, JsonValue]]):
        self.items = items

    def to_python(self):
        return {k: v.to_python() for k, v in self.items}

    def __eq__(self, other):
        return isinstance(other, JsonObject) and self.items == other.items

    def __repr__(self):
        return f"JsonObject({self.items})"


class JsonDecodeError(ValueError):
    def __init__(self, doc: str):
        self.doc = doc
        super().__init__(doc)

    def __str__(self):
        return f"JsonDecodeError(not a JSON document: {self.doc!r})"


# --- JSON Parsers ---

ws = spanP(lambda c: c in WHITESPACE)

jsonNull = stringP("null").map(lambda _: JsonNull())

jsonTrue = stringP("true").map(lambda _: JsonBool(True))
jsonFalse = stringP("false").map(lambda _: JsonBool(False))
jsonBool = jsonTrue | jsonFalse


def _or_empty(m: Maybe) -> str:
    return m.get_or("")


digits = some(satisfy(lambda c: c in DIGITS)).map(to_str)

sign = optional(charP("-")).map(_or_empty)
fraction = optional(charP(".") >> digits).map(lambda m: m.fold("", lambda d: "." + d))
exponent = optional(
    (charP("e") | charP("E"))
    >> optional(charP("+") | charP("-"))
    .map(lambda s: lambda d: "e" + s.get_or("") + d)
    .apply(digits)
).map(_or_empty)


def _to_number(text: str):
    if any(c in text for c in ".eE"):
        return float(text)
    return int(text)


# The number is collected as text and converted once at the end.
numberText = sequenceOf([sign, digits, fraction, exponent]).map(to_str)
jsonNumber = numberText.map(lambda t: JsonNumber(_to_number(t)))

escapeUnicode = charP("u") >> count(4, satisfy(lambda c: c in HEX_DIGITS)).map(
    lambda hs: chr(int(to_str(hs), 16))
)
escapeChar = charP("\\") >> (
    satisfy(lambda c: c in ESCAPES).map(ESCAPES.__getitem__) | escapeUnicode
)
normalChar = satisfy(lambda c: c not in '"\\')

stringLiteral = charP('"') >> many(normalChar | escapeChar).map(to_str) << charP('"')
jsonString = stringLiteral.map(JsonString)

comma = charP(",")
openArray = charP("[") >> ws
openObject = charP("{") >> ws
memberKey = ws >> stringLiteral << ws << charP(":")
closeArray = ws >> charP("]")
closeObject = ws >> charP("}")


def _array(inp):
    res = openArray.func(inp)
    if res.is_nothing():
        return res
    cur, _ = res.get_or(None)
    res = elements.func(cur)
    if res.is_nothing():
        return res
    cur, vals = res.get_or(None)
    res = closeArray.func(cur)
    if res.is_nothing():
        return res
    cur, _ = res.get_or(None)
    return Just(Pair(cur, JsonArray(to_list(vals))))


def _member(inp):
    res = memberKey.func(inp)
    if res.is_nothing():
        return res
    cur, key = res.get_or(None)
    res = jsonValue.func(cur)
    if res.is_nothing():
        return res
    cur, val = res.get_or(None)
    return Just(Pair(cur, (key, val)))


def _object(inp):
    res = openObject.func(inp)
    if res.is_nothing():
        return res
    cur, _ = res.get_or(None)
    res = members.func(cur)
    if res.is_nothing():
        return res
    cur, items = res.get_or(None)
    res = closeObject.func(cur)
    if res.is_nothing():
        return res
    cur, _ = res.get_or(None)
    return Just(Pair(cur, JsonObject(to_list(items))))


elements = sepBy0(Parser.lazy(lambda: jsonValue), comma)
members = sepBy0(Parser(_member), comma)

jsonArray = Parser(_array)
jsonObject = Parser(_object)

jsonValue = (
    ws
    >> choice([jsonNull, jsonBool, jsonNumber, jsonString, jsonArray, jsonObject])
    << ws
)

jsonDocument = jsonValue << endOfInput


# --- Entry points ---
#
# Each nesting level of arrays or objects costs about ten Python frames, so at
# the default recursion limit documents nest to roughly 90 levels. Deeper
# input is reported as NOTHING like any other rejected document.


def _run(p: Parser, text: str) -> Maybe:
    try:
        return p.func(Input.of(text))
    except RecursionError:
        log.warning("JSON nested too deeply to parse (length %d)", len(text))
        return NOTHING


def parse_value(text: str) -> Maybe:
    """Parses one JSON value from the start of `text`.

    Returns Just(Pair(remaining input, JsonValue)) or NOTHING. Input after
    the value is left for the caller.
    """
    return _run(jsonValue, text)


parse_json = parse_value


def parse_document(text: str) -> Maybe:
    "Like parse_value, but the value must be followed only by whitespace"
    return _run(jsonDocument, text)


def loads(text: str) -> Any:
    res = parse_document(text)
    if res.is_nothing():
        log.debug("rejected JSON document of length %d", len(text))
        raise JsonDecodeError(text)
    return res.fold(None, lambda p: p.second.to_python())
