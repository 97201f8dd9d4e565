"""Human-readable rendering of values for test failure messages."""

from __future__ import annotations

import enum
import types
from collections.abc import Iterable, Mapping
from typing import Any

_ESCAPE = "\\"

_NAMED_ESCAPES = {
    "\0": "0",
    "\a": "a",
    "\b": "b",
    "\f": "f",
    "\n": "n",
    "\r": "r",
    "\t": "t",
    "\v": "v",
}


def _escape_char(c: str, delim: str) -> str:
    code = ord(c)
    if code < 32 or code == 0x7F:
        named = _NAMED_ESCAPES.get(c)
        if named is not None:
            return _ESCAPE + named
        return f"{_ESCAPE}x{code:x}"
    if c == delim or c == _ESCAPE:
        return _ESCAPE + c
    return c


def escape_string(s: str, delim: str = '"') -> str:
    """Quote ``s`` with ``delim``, escaping control characters, the
    delimiter and backslashes."""
    if isinstance(s, (bytes, bytearray)):
        s = bytes(s).decode("latin-1")
    body = "".join(_escape_char(c, delim) for c in s)
    return f"{delim}{body}{delim}"


def type_name(value: Any) -> str:
    """Return the name of the type of ``value``.

    Built-in types are shown by their bare name; other types are qualified
    with the module that defines them.
    """
    cls = type(value)
    module = getattr(cls, "__module__", None)
    qualname = getattr(cls, "__qualname__", cls.__name__)
    if module in (None, "builtins"):
        return qualname
    return f"{module}.{qualname}"


def _has_own_str(value: Any) -> bool:
    cls = type(value)
    return cls.__str__ is not object.__str__ or cls.__repr__ is not object.__repr__


def _joined(items: Iterable[Any]) -> str:
    return "[" + ", ".join(to_printable(item) for item in items) + "]"


def _function_printable(func: Any) -> str:
    return getattr(func, "__qualname__",
                   getattr(func, "__name__", type_name(func)))


def to_printable(value: Any) -> str:
    """Render ``value`` the way it appears in test failure messages."""
    if value is None:
        return "nullptr"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, enum.Enum):
        return f"{type_name(value)}({to_printable(value.value)})"
    if isinstance(value, str):
        return escape_string(value)
    if isinstance(value, (bytes, bytearray)):
        return escape_string(bytes(value).decode("latin-1"))
    if isinstance(value, BaseException):
        return f"{type_name(value)}({to_printable(str(value))})"
    if isinstance(value, Mapping):
        return _joined(value.items())
    if isinstance(value, Iterable):
        return _joined(value)
    if isinstance(value, (int, float, complex)):
        return str(value)
    if isinstance(value, (types.FunctionType, types.BuiltinFunctionType,
                          types.MethodType)):
        return _function_printable(value)
    if _has_own_str(value):
        return str(value)
    return type_name(value)