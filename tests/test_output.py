import ast
import enum

import pytest

from mettle.output import escape_string, to_printable, type_name


class Shade(enum.Enum):
    DARK = 1


class Plain:
    pass


class Named:
    def __str__(self):
        return "named thing"


@pytest.mark.parametrize(
    "text",
    ["", "hello", "a\nb", "tab\there", "quote\"inside", "back\\slash",
     "\a\b\f\r\v", "nul\0x", "caf\u00e9"],
)
def test_escape_string_round_trips(text):
    escaped = escape_string(text)
    assert escaped[0] == '"' and escaped[-1] == '"'
    assert ast.literal_eval(escaped) == text


def test_escape_string_single_quote_delimiter():
    escaped = escape_string("it's", "'")
    assert escaped.startswith("'") and escaped.endswith("'")
    assert ast.literal_eval(escaped) == "it's"


def test_escape_string_leaves_other_delimiter_alone():
    assert '\\"' not in escape_string('say "hi"', "'")


def test_escape_string_unnamed_control_char_uses_hex():
    assert escape_string("\x1f") == '"\\x1f"'


def test_escape_string_delete_char_is_escaped():
    escaped = escape_string("\x7f")
    assert "\x7f" not in escaped
    assert escaped.startswith('"\\x')


def test_bools():
    assert to_printable(True) == "true"
    assert to_printable(False) == "false"


def test_none():
    assert to_printable(None) == "nullptr"


def test_string_is_escaped():
    assert to_printable("a\tb") == escape_string("a\tb")


def test_list_of_mixed():
    assert to_printable([1, "a"]) == '[1, "a"]'


def test_empty_list():
    assert to_printable([]) == "[]"


def test_tuple_nesting():
    assert to_printable(("x",)) == "[" + to_printable("x") + "]"
    assert to_printable([(1, 2)]) == "[" + to_printable((1, 2)) + "]"


def test_mapping_items_are_pairs():
    assert to_printable({1: "a"}) == "[" + to_printable((1, "a")) + "]"


def test_enum():
    assert to_printable(Shade.DARK) == f"{type_name(Shade.DARK)}(1)"


def test_exception():
    err = ValueError("bad")
    assert to_printable(err) == "ValueError(" + to_printable("bad") + ")"


def test_type_name_builtin():
    assert type_name(3) == int.__name__
    assert type_name(KeyError()) == KeyError.__name__


def test_type_name_user_class():
    assert type_name(Plain()).endswith(".Plain")


def test_fallback_uses_type_name():
    obj = Plain()
    assert to_printable(obj) == type_name(obj)


def test_custom_str_passes_through():
    assert to_printable(Named()) == str(Named())


def test_number_passes_through():
    assert to_printable(42) == str(42)