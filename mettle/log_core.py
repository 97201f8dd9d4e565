"""Interfaces for receiving the events of a test run."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Any, Sequence


@dataclass
class TestOutput:
    """Captured standard output and standard error of a test."""

    __test__ = False

    stdout_log: str = ""
    stderr_log: str = ""

    def empty(self) -> bool:
        """Whether nothing was captured on either stream."""
        return not self.stdout_log and not self.stderr_log


class TestLogger(abc.ABC):
    """Receives the events of a test run.

    Durations are given in milliseconds.
    """

    __test__ = False

    @abc.abstractmethod
    def started_run(self) -> None:
        """A run of all tests began."""

    @abc.abstractmethod
    def ended_run(self) -> None:
        """A run of all tests ended."""

    @abc.abstractmethod
    def started_suite(self, suites: Sequence[str]) -> None:
        """A suite, given by its path of suite names, began."""

    @abc.abstractmethod
    def ended_suite(self, suites: Sequence[str]) -> None:
        """A suite, given by its path of suite names, ended."""

    @abc.abstractmethod
    def started_test(self, test: Any) -> None:
        """A test began."""

    @abc.abstractmethod
    def passed_test(self, test: Any, output: TestOutput,
                    duration: Any) -> None:
        """A test passed."""

    @abc.abstractmethod
    def failed_test(self, test: Any, message: str, output: TestOutput,
                    duration: Any) -> None:
        """A test failed with ``message``."""

    @abc.abstractmethod
    def skipped_test(self, test: Any, message: str) -> None:
        """A test was skipped for the reason ``message``."""


class FileLogger(TestLogger):
    """A test logger that also hears about test files."""

    @abc.abstractmethod
    def started_file(self, file: str) -> None:
        """Tests from ``file`` began."""

    @abc.abstractmethod
    def ended_file(self, file: str) -> None:
        """Tests from ``file`` ended."""

    @abc.abstractmethod
    def failed_file(self, file: str, message: str) -> None:
        """``file`` could not be run."""