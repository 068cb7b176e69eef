import pytest

from pyskell.grammar import (
    JsonArray,
    JsonBool,
    JsonDecodeError,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    loads,
    parse_document,
    parse_json,
)
from pyskell.maybe import NOTHING

sentinel = object()


def value(text):
    return parse_json(text).fold(sentinel, lambda r: r.second.to_python())


def remaining(text):
    return parse_json(text).fold(sentinel, lambda r: r.first.text())


def test_unterminated_string_fails():
    assert parse_json('"yay') == NOTHING


def test_string():
    assert value('"yay2"') == "yay2"
    assert remaining('"yay2"') == ""


def test_remaining_input():
    assert remaining('"yay2"rest') == "rest"


def test_null():
    assert value("null") is None


@pytest.mark.parametrize("text, expected", [("true", True), ("false", False)])
def test_bool(text, expected):
    assert value(text) is expected


def test_array():
    assert value('[  true, "yay", 12, -12 ]') == [True, "yay", 12, -12]


@pytest.mark.parametrize(
    "text, expected",
    [("123abc", 123), ("123.25abc", 123.25), ("1.2e-2abc", 0.012)],
)
def test_numbers(text, expected):
    assert value(text) == expected
    assert remaining(text) == "abc"


def test_integer_stays_integer():
    assert isinstance(value("-12"), int)
    assert isinstance(value("1E3"), float)


def test_incomplete_fraction_is_left_unparsed():
    assert value("1.x") == 1
    assert remaining("1.x") == ".x"


def test_object():
    assert value('{ "abc" : 123   }') == {"abc": 123}


def test_object_missing_value_fails():
    assert parse_json('{"abc": }') == NOTHING


def test_empty_containers():
    assert value("[ ]") == []
    assert value("{}") == {}


def test_escapes():
    assert value(r'"a\nb\t\"q\"\\ \/"') == 'a\nb\t"q"\\ /'
    assert value(r'"\u0041\u00e9"') == "A\u00e9"
    assert parse_json(r'"\x"') == NOTHING
    assert parse_json(r'"\u12"') == NOTHING


def test_nested_document():
    text = """{
    "hello": [false, true, null, 42, "foo\\n\\u1234\\\"", [1, -2, 3.1415, 4e-6, 5E6, 0.123e+1]],
    "world": null
}
"""
    expected = JsonObject(
        [
            (
                "hello",
                JsonArray(
                    [
                        JsonBool(False),
                        JsonBool(True),
                        JsonNull(),
                        JsonNumber(42),
                        JsonString('foo\n\u1234"'),
                        JsonArray(
                            [
                                JsonNumber(1),
                                JsonNumber(-2),
                                JsonNumber(3.1415),
                                JsonNumber(4e-6),
                                JsonNumber(5000000),
                                JsonNumber(1.23),
                            ]
                        ),
                    ]
                ),
            ),
            ("world", JsonNull()),
        ]
    )
    assert parse_json(text).fold(sentinel, lambda r: r.second) == expected
    assert remaining(text) == ""


def test_object_keeps_member_order():
    assert list(value('{"b": 1, "a": 2, "c": 3}')) == ["b", "a", "c"]


def test_parse_is_deterministic():
    text = '[1, {"a": [true]}]'
    assert parse_json(text) == parse_json(text)


def test_document_rejects_trailing_input():
    assert parse_document("1 x") == NOTHING
    assert parse_document(" [1] \n").fold(None, lambda r: r.second) == JsonArray(
        [JsonNumber(1)]
    )


def test_loads():
    assert loads(' {"a": [1, 2.5, "x"]} ') == {"a": [1, 2.5, "x"]}
    with pytest.raises(JsonDecodeError):
        loads('"yay')
    with pytest.raises(ValueError):
        loads("[1] 2")


def test_deeply_nested_arrays():
    depth = 60
    text = "[" * depth + "]" * depth
    expected = []
    for _ in range(depth - 1):
        expected = [expected]
    assert remaining(text) == ""
    assert value(text) == expected
    assert loads(text) == expected


def test_deeply_nested_objects():
    depth = 60
    text = '{"a": ' * depth + "1" + "}" * depth
    expected = 1
    for _ in range(depth):
        expected = {"a": expected}
    assert remaining(text) == ""
    assert value(text) == expected
    assert loads(text) == expected


def test_nesting_beyond_recursion_limit_is_rejected():
    text = "[" * 5000 + "]" * 5000
    assert parse_json(text) == NOTHING
    with pytest.raises(JsonDecodeError):
        loads(text)
