from .maybe import Maybe, Just, Nothing, NOTHING, just
from .pair import Pair, fst, snd, fmap_pair
from .seq import Seq, Cons, Nil, NIL, from_iterable, from_str, to_list, to_str
from .stream import Input
from .parser import (
    Parser,
    pure,
    empty,
    satisfy,
    charP,
    literalSeq,
    stringP,
    many,
    some,
    sequenceOf,
    endOfInput,
    optional,
    lookAhead,
    count,
    choice,
    sepBy,
    sepBy0,
    spanP,
    runParser,
)
from .grammar import (
    JsonValue,
    JsonNull,
    JsonBool,
    JsonNumber,
    JsonString,
    JsonArray,
    JsonObject,
    JsonDecodeError,
    jsonValue,
    parse_json,
    parse_value,
    parse_document,
    loads,
)
