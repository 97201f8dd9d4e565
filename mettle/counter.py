"""A logger that keeps a running tally of results on one line."""

from __future__ import annotations

from typing import Any, Optional, Sequence, TextIO

from . import term
from .log_core import FileLogger, TestOutput


class CounterLogger(FileLogger):
    """Redraws ``[ total | passed | skipped | failed ]`` after each test.

    It also remembers the suite path, the test and the file currently being
    run.
    """

    def __init__(self, out: TextIO) -> None:
        self._out = out
        self.tests = 0
        self.passes = 0
        self.skips = 0
        self.failures = 0
        self.suites: tuple[str, ...] = ()
        self.current_test: Any = None
        self.current_file: Optional[str] = None

    def _print_counter(self) -> None:
        fields = [
            (term.Format(term.Sgr.BOLD), self.tests),
            (term.Format(term.Sgr.BOLD, term.fg(term.Color.GREEN)),
             self.passes),
            (term.Format(term.Sgr.BOLD, term.fg(term.Color.BLUE)),
             self.skips),
            (term.Format(term.Sgr.BOLD, term.fg(term.Color.RED)),
             self.failures),
        ]
        self._out.write("\r[ ")
        for position, (fmt, count) in enumerate(fields):
            if position:
                self._out.write(" | ")
            term.emit(self._out, fmt)
            self._out.write(f"{count:3d}")
            term.emit(self._out, term.reset())
        self._out.write(" ]")
        self._out.flush()

    def started_run(self) -> None:
        self.tests = self.passes = self.skips = self.failures = 0
        self.suites = ()
        self.current_test = None
        self._print_counter()

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
        self.tests += 1
        self.passes += 1
        self._print_counter()

    def failed_test(self, test: Any, message: str, output: TestOutput,
                    duration: Any) -> None:
        self.tests += 1
        self.failures += 1
        self._print_counter()

    def skipped_test(self, test: Any, message: str) -> None:
        self.tests += 1
        self.skips += 1
        self._print_counter()

    def started_file(self, file: str) -> None:
        self.current_file = file

    def ended_file(self, file: str) -> None:
        self.current_file = None

    def failed_file(self, file: str, message: str) -> None:
        self.tests += 1
        self.failures += 1
        self._print_counter()