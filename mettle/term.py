"""ANSI terminal formatting that can be switched on and off per stream."""

from __future__ import annotations

import enum
import weakref
from typing import Any, TextIO, Union

_enabled: "weakref.WeakKeyDictionary[Any, bool]" = weakref.WeakKeyDictionary()
_ATTR = "_mettle_term_enabled"


class Sgr(enum.IntEnum):
    """Select Graphic Rendition codes."""

    RESET = 0
    BOLD = 1
    FAINT = 2
    ITALIC = 3
    UNDERLINE = 4
    BLINK = 5
    INVERSE = 7
    CONCEAL = 8
    CROSSED_OUT = 9


class Color(enum.IntEnum):
    """The eight standard terminal colours."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    NORMAL = 9


def fg(color: Color) -> int:
    """SGR code setting the foreground to ``color``."""
    return 30 + int(color)


def bg(color: Color) -> int:
    """SGR code setting the background to ``color``."""
    return 40 + int(color)


class Format:
    """A sequence of SGR codes to emit together."""

    def __init__(self, *args: Union[Sgr, int]) -> None:
        if not args:
            raise ValueError("a format needs at least one SGR value")
        self.values = tuple(int(a) for a in args)

    def render(self, enabled: bool) -> str:
        """Return the escape sequence, or an empty string when disabled."""
        if not enabled:
            return ""
        return "\033[" + ";".join(str(v) for v in self.values) + "m"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Format) and self.values == other.values

    def __hash__(self) -> int:
        return hash(self.values)

    def __repr__(self) -> str:
        return f"Format{self.values!r}"


def reset() -> Format:
    """Format that resets all attributes."""
    return Format(Sgr.RESET)


def enable(stream: TextIO, enabled: bool) -> None:
    """Turn formatting on or off for ``stream``."""
    try:
        _enabled[stream] = bool(enabled)
    except TypeError:
        setattr(stream, _ATTR, bool(enabled))


def is_enabled(stream: TextIO) -> bool:
    """Whether formatting is turned on for ``stream``; off by default."""
    try:
        return _enabled.get(stream, False)
    except TypeError:
        return bool(getattr(stream, _ATTR, False))


def emit(stream: TextIO, fmt: Format) -> TextIO:
    """Write ``fmt`` to ``stream`` if formatting is enabled on it."""
    text = fmt.render(is_enabled(stream))
    if text:
        stream.write(text)
    return stream