# mettle

Components for building a test framework and its driver. The package has
no dependencies outside the standard library and supports Python 3.10 and
later.

## What is in it

- **Value printing** (`mettle.output`): `to_printable` turns a value into a
  readable description for failure messages. Strings are quoted and escaped
  with `escape_string`, `None` prints as `nullptr`, booleans as
  `true`/`false`, iterables and mappings as `[...]` lists, exceptions as
  `TypeName("message")`. `type_name` gives the name of a value's type,
  qualified by module unless it is a built-in.
- **Matchers** (`mettle.matchers`): a `Matcher` is called with an actual
  value and returns a `MatchResult` (`matched`, `message`). There are
  `anything`, `equal_to`, `ensure_matcher` (turns a plain value into an
  equality matcher), `near_to` (relative tolerance, defaulting to ten times
  the float epsilon and refused for integers), `near_to_abs` (absolute
  tolerance), and `thrown` / `thrown_raw` for callables that should raise.
- **Terminal formatting** (`mettle.term`): `Format`, `Sgr`, `Color`, `fg`,
  `bg` and `reset` describe ANSI SGR sequences. `enable` turns formatting on
  or off for a stream (off by default), `is_enabled` reports it, and `emit`
  writes a format only when the stream allows it.
- **Indented output** (`mettle.indent`): `IndentingStream` wraps a text
  stream and indents the start of every non-empty line. `IndentStyle.LOGICAL`
  offsets count levels of `base_indent` spaces, `IndentStyle.VISUAL` offsets
  count single spaces. `ScopedIndent` indents for the duration of a `with`
  block; `Indenter` can be increased, decreased and reset.
- **Loggers** (`mettle.log_core`, `mettle.brief`, `mettle.counter`):
  `TestLogger` and `FileLogger` are the abstract interfaces for run, suite,
  test and file events; `TestOutput` holds captured stdout and stderr.
  `BriefLogger` prints `.` for a pass, `!` for a failure, `_` for a skip and
  `X` for a failed file. `CounterLogger` redraws a
  `[ total | passed | skipped | failed ]` line after each result.
- **Object factory** (`mettle.object_factory`): `ObjectFactory` maps names to
  constructors; `make` raises `KeyError` for an unknown name and iteration
  yields `(name, callable)` pairs in name order.
- **Filters** (`mettle.filters`): `has_attr`, `AttrFilter` and
  `AttrFilterSet` select tests by attribute; `NameFilterSet` selects them by
  regular expressions searched in the full test name. Each returns a
  `FilterResult` holding a `TestAction` (`RUN`, `SKIP`, `HIDE` or
  `INDETERMINATE` when the set is empty) and a message.
- **Command-line options** (`mettle.cmd_line`): `build_parser` and
  `parse_args` handle `-t/--timeout`, `-T/--test`, `-a/--attr`,
  `-o/--output`, `--color`, `-c`, `-n/--runs`, `--show-terminal`,
  `--show-time` and `-f/--file`. `parse_attr`, `parse_color` and
  `parse_timeout` parse single option values, `color_enabled` decides
  whether to colour a file descriptor, and `make_logger_factory` registers
  the `silent`, `counter` and `brief` output formats.

## Examples

Printing values:

```python
from mettle.output import escape_string, to_printable

escape_string('say "hi"\n', '"')   # '"say \\"hi\\"\\n"'
to_printable([1, "two"])           # '[1, "two"]'
```

Matching:

```python
from mettle.matchers import near_to, thrown

near_to(1.0, 1e-9)(1.0 + 1e-12).matched    # True

def boom():
    raise ValueError("bad value")

thrown(ValueError, "bad value")(boom).matched   # True
```

Attribute filters, written the same way as the `--attr` option:

```python
from mettle.cmd_line import parse_attr

only_slow = parse_attr("slow")           # tests with the "slow" attribute
not_slow = parse_attr("!slow")           # tests without it
by_value = parse_attr("tag=network")     # attribute "tag" with value "network"
```

A counter on standard output:

```python
import sys

from mettle.counter import CounterLogger
from mettle.indent import IndentingStream

logger = CounterLogger(IndentingStream(sys.stdout, 2))
logger.started_run()
```

Parsing driver options:

```python
from mettle.cmd_line import make_logger_factory, parse_args

driver, output = parse_args(["--output", "counter", "--runs", "3"],
                            make_logger_factory())
```

## What it does not do

This package provides the parts around a test run, not the run itself. It
has no way to declare suites or tests, no test runner (in-process or in
subprocesses), no timeouts enforcement, and no installed command: the parsed
options are returned to the caller to act on. The only output formats are
`silent`, `counter` and `brief`; there is no verbose or XML report, so the
`--show-terminal`, `--show-time` and `--file` options are parsed but nothing
in the package uses them.

## Running the tests

Install the `test` extra and run pytest from the project directory.