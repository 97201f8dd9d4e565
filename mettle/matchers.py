"""Matchers that check values, closeness of numbers and raised exceptions."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Callable, Optional, Type, Union

from .output import to_printable, type_name

_FLOAT_EPSILON = sys.float_info.epsilon


@dataclass(frozen=True)
class MatchResult:
    """Whether a value matched, and what was seen if that is worth saying."""

    matched: bool
    message: str = ""

    def __bool__(self) -> bool:
        return self.matched


class Matcher:
    """A predicate on a value together with a description of what it expects.

    ``func`` may return a bool or a :class:`MatchResult`.
    """

    def __init__(self, func: Callable[[Any], Union[bool, MatchResult]],
                 desc: str) -> None:
        self._func = func
        self.desc = desc

    def __call__(self, actual: Any) -> MatchResult:
        result = self._func(actual)
        if isinstance(result, MatchResult):
            return result
        return MatchResult(bool(result))

    def __repr__(self) -> str:
        return f"Matcher({self.desc!r})"


def _class_name(cls: type) -> str:
    module = getattr(cls, "__module__", None)
    if module in (None, "builtins"):
        return cls.__qualname__
    return f"{module}.{cls.__qualname__}"


def anything() -> Matcher:
    """A matcher that accepts every value."""
    return Matcher(lambda actual: True, "anything")


def equal_to(expected: Any) -> Matcher:
    """A matcher for values equal to ``expected``."""
    return Matcher(lambda actual: actual == expected, to_printable(expected))


def ensure_matcher(thing: Any) -> Matcher:
    """Return ``thing`` if it is a matcher, else a matcher equal to it."""
    if isinstance(thing, Matcher):
        return thing
    return equal_to(thing)


def _filtered(func: Callable[[Any], Any], matcher: Matcher,
              prefix: str) -> Matcher:
    def check(actual: Any) -> MatchResult:
        value = func(actual)
        result = matcher(value)
        return MatchResult(result.matched,
                           prefix + (result.message or to_printable(value)))

    return Matcher(check, prefix + matcher.desc)


def near_to(expected: Any, epsilon: Optional[float] = None) -> Matcher:
    """A matcher for values within a relative ``epsilon`` of ``expected``.

    Without ``epsilon``, ten times the machine epsilon is used; that default
    is not defined for integers.
    """
    if epsilon is None:
        if isinstance(expected, int):
            raise TypeError("near_to(x) not defined for integral types")
        epsilon = _FLOAT_EPSILON * 10

    def check(actual: Any) -> bool:
        # With a NaN on either side every comparison below is false.
        magnitude = max(abs(expected), abs(actual))
        return abs(actual - expected) <= magnitude * epsilon

    return Matcher(check, "~= " + to_printable(expected))


def near_to_abs(expected: Any, tolerance: Any) -> Matcher:
    """A matcher for values within an absolute ``tolerance`` of ``expected``."""
    return Matcher(lambda actual: abs(actual - expected) <= tolerance,
                   "~= " + to_printable(expected))


def thrown_raw(exception: Type[BaseException], thing: Any) -> Matcher:
    """A matcher for callables raising ``exception`` that itself matches
    ``thing``."""
    matcher = ensure_matcher(thing)

    def check(func: Callable[[], Any]) -> MatchResult:
        try:
            func()
        except exception as e:
            result = matcher(e)
            if result.message:
                shown = f"{type_name(e)}({result.message})"
            else:
                shown = to_printable(e)
            return MatchResult(result.matched, "threw " + shown)
        except Exception as e:
            return MatchResult(False, "threw " + to_printable(e))
        return MatchResult(False, "threw nothing")

    return Matcher(check, f"threw {_class_name(exception)}({matcher.desc})")


def _thrown_any() -> Matcher:
    def check(func: Callable[[], Any]) -> MatchResult:
        try:
            func()
        except Exception as e:
            return MatchResult(True, "threw " + to_printable(e))
        return MatchResult(False, "threw nothing")

    return Matcher(check, "threw exception")


def thrown(exception: Optional[Type[BaseException]] = None,
           thing: Any = None) -> Matcher:
    """A matcher for callables that raise.

    With no arguments any exception matches. With ``exception`` alone any
    exception of that type matches; with ``thing`` too, the exception's
    message must match it.
    """
    if exception is None:
        return _thrown_any()
    if thing is None:
        return thrown_raw(exception, anything())
    return thrown_raw(exception, _filtered(
        lambda e: str(e), ensure_matcher(thing), "what: "
    ))