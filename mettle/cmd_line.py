"""Command-line options for choosing, filtering and reporting tests."""

from __future__ import annotations

import argparse
import enum
import os
import re
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, List, Optional, Sequence, Tuple

from .brief import BriefLogger
from .counter import CounterLogger
from .filters import AttrFilter, AttrFilterSet, NameFilterSet, has_attr
from .object_factory import ObjectFactory


class ColorOption(enum.Enum):
    """When to colour output."""

    NEVER = "never"
    AUTOMATIC = "auto"
    ALWAYS = "always"


@dataclass
class OutputOptions:
    """How results are reported."""

    output: str = "brief"
    color: ColorOption = ColorOption.AUTOMATIC
    runs: int = 1
    show_terminal: bool = False
    show_time: bool = False
    file: str = "mettle.xml"


@dataclass
class DriverOptions:
    """Which tests run, and for how long each may take."""

    timeout: Optional[timedelta] = None
    by_name: NameFilterSet = field(default_factory=NameFilterSet)
    by_attr: AttrFilterSet = field(default_factory=AttrFilterSet)


def color_enabled(opt: ColorOption, fd: int = 1) -> bool:
    """Whether to colour output written to ``fd``."""
    if opt is ColorOption.NEVER:
        return False
    if opt is ColorOption.ALWAYS:
        return True
    if opt is ColorOption.AUTOMATIC:
        return os.isatty(fd)
    raise ValueError(f"unexpected color option {opt!r}")


def parse_color(value: str) -> ColorOption:
    """Parse ``never``, ``auto`` or ``always``."""
    try:
        return ColorOption(value)
    except ValueError:
        raise ValueError(f"invalid color option {value!r}") from None


def parse_timeout(value: str) -> timedelta:
    """Parse a non-negative whole number of milliseconds."""
    if not value.isascii() or not value.isdigit():
        raise ValueError(f"invalid timeout {value!r}")
    return timedelta(milliseconds=int(value))


def _count(value: str) -> int:
    if not value.isascii() or not value.isdigit():
        raise ValueError(f"invalid count {value!r}")
    return int(value)


def _regex(value: str) -> re.Pattern:
    try:
        return re.compile(value)
    except re.error as e:
        raise ValueError(str(e)) from None


def parse_attr(value: str) -> AttrFilter:
    """Parse ``[!]name[=value],...`` into an attribute filter.

    Raises ValueError for an empty item or a missing attribute name.
    """
    result = AttrFilter()
    items = value.split(",")
    for position, item in enumerate(items):
        last = position == len(items) - 1
        negated = item.startswith("!")
        if negated:
            item = item[1:]
        if not item:
            raise ValueError("unexpected end of string" if last
                             else "expected attribute name")
        if item.startswith("="):
            raise ValueError("expected attribute name")
        name, sep, attr_value = item.partition("=")
        entry = has_attr(name, attr_value) if sep else has_attr(name)
        result.insert(~entry if negated else entry)
    return result


def make_logger_factory() -> ObjectFactory:
    """Factory of the available output formats.

    Each entry is called with the output stream and the OutputOptions.
    """
    factory = ObjectFactory()
    factory.add("silent", lambda out, args: None)
    factory.add("counter", lambda out, args: CounterLogger(out))
    factory.add("brief", lambda out, args: BriefLogger(out))
    return factory


class _StoreOnce(argparse.Action):
    def __call__(self, parser: argparse.ArgumentParser,
                 namespace: argparse.Namespace, values: Any,
                 option_string: Optional[str] = None) -> None:
        seen = "_seen_" + self.dest
        if getattr(namespace, seen, False):
            raise argparse.ArgumentError(
                self, "option cannot be specified more than once"
            )
        setattr(namespace, seen, True)
        setattr(namespace, self.dest, values)


def build_parser(factory: Optional[ObjectFactory] = None) \
        -> argparse.ArgumentParser:
    """Build the argument parser for the driver and output options."""
    if factory is None:
        factory = make_logger_factory()
    defaults = OutputOptions()
    parser = argparse.ArgumentParser()

    driver = parser.add_argument_group("Driver options")
    driver.add_argument("-t", "--timeout", type=parse_timeout,
                        action=_StoreOnce, metavar="TIME", default=None,
                        help="timeout in ms")
    driver.add_argument("-T", "--test", type=_regex, action="append",
                        metavar="REGEX", default=[],
                        help="regex matching names of tests to run")
    driver.add_argument("-a", "--attr", type=parse_attr, action="append",
                        metavar="ATTR", default=[],
                        help="attributes of tests to run")

    formats = ", ".join(name for name, _ in factory)
    output = parser.add_argument_group("Output options")
    output.add_argument(
        "-o", "--output", metavar="FORMAT", default=defaults.output,
        help=f"set output format (one of: {formats}; "
             f"default: {defaults.output})"
    )
    output.add_argument(
        "--color", type=parse_color, action=_StoreOnce, metavar="WHEN",
        default=defaults.color,
        help="show colored output (one of: never, auto, always; "
             "default: auto)"
    )
    output.add_argument(
        "-c", dest="color", action="store_const", const=ColorOption.ALWAYS,
        help="show colored output (equivalent to `--color=always`)"
    )
    output.add_argument("-n", "--runs", type=_count, metavar="N",
                        default=defaults.runs, help="number of test runs")
    output.add_argument("--show-terminal", action="store_true",
                        help="show terminal output for each test")
    output.add_argument("--show-time", action="store_true",
                        help="show the duration for each test")
    output.add_argument(
        "-f", "--file", metavar="FILE", default=defaults.file,
        help=f"file to print test results to (for xunit only; "
             f"default: {defaults.file})"
    )
    return parser


def parse_args(argv: Optional[Sequence[str]] = None,
               factory: Optional[ObjectFactory] = None) \
        -> Tuple[DriverOptions, OutputOptions]:
    """Parse ``argv`` into driver and output options.

    Invalid arguments exit through the parser, as does ``--help``.
    """
    ns = build_parser(factory).parse_args(argv)
    by_attr = AttrFilterSet()
    attr_filters: List[AttrFilter] = ns.attr
    for f in attr_filters:
        by_attr.insert(f)
    by_name = NameFilterSet()
    for pattern in ns.test:
        by_name.insert(pattern)
    driver = DriverOptions(timeout=ns.timeout, by_name=by_name,
                           by_attr=by_attr)
    output = OutputOptions(
        output=ns.output, color=ns.color, runs=ns.runs,
        show_terminal=ns.show_terminal, show_time=ns.show_time,
        file=ns.file,
    )
    return driver, output