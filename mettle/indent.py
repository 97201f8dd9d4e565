"""Text streams that indent every line they write."""

from __future__ import annotations

import enum
from typing import Any, TextIO

from . import term


class IndentStyle(enum.Enum):
    """How an indentation offset is measured."""

    VISUAL = "visual"
    LOGICAL = "logical"


class IndentingStream:
    """Wraps a text stream and prefixes each non-empty line with spaces.

    A ``LOGICAL`` offset counts levels of ``base_indent`` spaces; a
    ``VISUAL`` offset counts single spaces. Terminal formatting follows the
    wrapped stream's setting at the time of wrapping.
    """

    def __init__(self, stream: TextIO, base_indent: int = 2) -> None:
        self._stream = stream
        self._base_indent = base_indent
        self._indent = 0
        self._new_line = True
        term.enable(self, term.is_enabled(stream))

    @property
    def level(self) -> int:
        """Current indentation in spaces."""
        return self._indent

    @property
    def stream(self) -> TextIO:
        """The wrapped stream."""
        return self._stream

    def indent(self, offset: int,
               style: IndentStyle = IndentStyle.LOGICAL) -> None:
        """Change the indentation by ``offset``, never going below zero."""
        if style is IndentStyle.LOGICAL:
            offset *= self._base_indent
        self._indent = max(0, self._indent + offset)

    def write(self, text: str) -> int:
        """Write ``text``, indenting the start of each non-empty line."""
        parts = []
        for position, line in enumerate(text.split("\n")):
            if position:
                parts.append("\n")
                self._new_line = True
            if line:
                if self._new_line:
                    parts.append(" " * self._indent)
                parts.append(line)
                self._new_line = False
        self._stream.write("".join(parts))
        return len(text)

    def flush(self) -> None:
        """Flush the wrapped stream."""
        flush = getattr(self._stream, "flush", None)
        if flush is not None:
            flush()

    def __getattr__(self, name: str) -> Any:
        return getattr(self._stream, name)


class ScopedIndent:
    """Context manager that indents a stream for the duration of a block."""

    def __init__(self, stream: IndentingStream,
                 style: IndentStyle = IndentStyle.LOGICAL,
                 depth: int = 1) -> None:
        if depth < 0:
            raise ValueError("indent depth must not be negative")
        self._stream = stream
        self._style = style
        self._depth = depth

    def __enter__(self) -> "ScopedIndent":
        self._stream.indent(self._depth, self._style)
        return self

    def __exit__(self, *args: Any) -> None:
        self._stream.indent(-self._depth, self._style)


class Indenter:
    """Adjustable indentation of a stream, undone on reset or exit."""

    def __init__(self, stream: IndentingStream,
                 style: IndentStyle = IndentStyle.LOGICAL,
                 depth: int = 0) -> None:
        if depth < 0:
            raise ValueError("indent depth must not be negative")
        self._stream = stream
        self._style = style
        self._depth = depth
        self._stream.indent(depth, style)

    @property
    def depth(self) -> int:
        """Number of levels this indenter has applied."""
        return self._depth

    def increase(self) -> None:
        """Indent one level further."""
        self._stream.indent(1, self._style)
        self._depth += 1

    def decrease(self) -> None:
        """Remove one level, if this indenter applied any."""
        if self._depth > 0:
            self._stream.indent(-1, self._style)
            self._depth -= 1

    def reset(self) -> None:
        """Remove every level this indenter applied."""
        self._stream.indent(-self._depth, self._style)
        self._depth = 0

    def __enter__(self) -> "Indenter":
        return self

    def __exit__(self, *args: Any) -> None:
        self.reset()