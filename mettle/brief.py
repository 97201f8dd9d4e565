"""A logger that prints one coloured character per test."""

from __future__ import annotations

from typing import Any, Optional, Sequence, TextIO

from . import term
from .log_core import FileLogger, TestOutput


class BriefLogger(FileLogger):
    """Prints ``.`` for a pass, ``!`` for a failure, ``_`` for a skip and
    ``X`` for a failed file.

    It also remembers where in the run it is: the suite path, the test and
    the file currently being run.
    """

    def __init__(self, out: TextIO) -> None:
        self._out = out
        self.suites: tuple[str, ...] = ()
        self.current_test: Any = None
        self.current_file: Optional[str] = None

    def _mark(self, color: term.Color, char: str) -> None:
        term.emit(self._out, term.Format(term.Sgr.BOLD, term.fg(color)))
        self._out.write(char)
        term.emit(self._out, term.reset())
        self._out.flush()

    def started_run(self) -> None:
        self.suites = ()
        self.current_test = None

    def ended_run(self) -> None:
        self._out.write("\n")
        self._out.flush()

    def started_suite(self, suites: Sequence[str]) -> None:
        self.suites = tuple(suites)

    def ended_suite(self, suites: Sequence[str]) -> None:
        self.suites = tuple(suites)[:-1]

    def started_test(self, test: Any) -> None:
        self.current_test = test

    def passed_test(self, test: Any, output: TestOutput,
                    duration: Any) -> None:
        self._mark(term.Color.GREEN, ".")

    def failed_test(self, test: Any, message: str, output: TestOutput,
                    duration: Any) -> None:
        self._mark(term.Color.RED, "!")

    def skipped_test(self, test: Any, message: str) -> None:
        self._mark(term.Color.BLUE, "_")

    def started_file(self, file: str) -> None:
        self.current_file = file

    def ended_file(self, file: str) -> None:
        self.current_file = None

    def failed_file(self, file: str, message: str) -> None:
        self._mark(term.Color.RED, "X")