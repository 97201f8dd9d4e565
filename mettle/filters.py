"""Deciding which tests to run, skip or hide by name and attributes."""

from __future__ import annotations

import enum
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, \
    Pattern, Tuple, Union


class TestAction(enum.Enum):
    """What to do with a test."""

    __test__ = False

    RUN = "run"
    SKIP = "skip"
    HIDE = "hide"
    INDETERMINATE = "indeterminate"


@dataclass(frozen=True)
class FilterResult:
    """The action chosen for a test and the reason for it."""

    action: TestAction
    message: str = ""


@dataclass(frozen=True)
class Attribute:
    """A named test attribute; a ``SKIP`` attribute skips tests carrying it."""

    name: str
    action: TestAction = TestAction.RUN


@dataclass(frozen=True)
class AttrInstance:
    """An attribute attached to a test, with its values."""

    attribute: Attribute
    value: Tuple[str, ...] = ()


AttrPredicate = Callable[[Optional[AttrInstance]], bool]


@dataclass(frozen=True)
class AttrFilterItem:
    """A test on the instance (or absence) of one named attribute."""

    attribute: str
    func: AttrPredicate

    def __invert__(self) -> "AttrFilterItem":
        func = self.func
        return AttrFilterItem(self.attribute, lambda attr: not func(attr))


def has_attr(name: str, value: Optional[str] = None) -> AttrFilterItem:
    """A filter item requiring attribute ``name``, holding ``value`` if given."""
    if value is None:
        return AttrFilterItem(name, lambda attr: attr is not None)
    return AttrFilterItem(
        name, lambda attr: attr is not None and value in attr.value
    )


Attributes = Union[Mapping, Iterable[AttrInstance]]


def _index(attrs: Attributes) -> Dict[str, AttrInstance]:
    if isinstance(attrs, Mapping):
        return dict(attrs)
    return {attr.attribute.name: attr for attr in attrs}


def _joined(values: Iterable[str]) -> str:
    return ", ".join(values)


class AttrFilter:
    """A conjunction of attribute filter items."""

    def __init__(self, items: Iterable[AttrFilterItem] = ()) -> None:
        self._items: List[AttrFilterItem] = list(items)

    def insert(self, item: AttrFilterItem) -> None:
        """Add a filter item."""
        self._items.append(item)

    def __iter__(self) -> Iterator[AttrFilterItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __call__(self, name: Any, attrs: Attributes) -> FilterResult:
        index = _index(attrs)
        shown = set()
        for item in self._items:
            attr = index.get(item.attribute)
            if not item.func(attr):
                return FilterResult(TestAction.HIDE,
                                    _joined(attr.value) if attr else "")
            if attr is not None:
                shown.add(attr.attribute.name)
        for attr_name, attr in sorted(index.items()):
            if attr.attribute.action is TestAction.SKIP and \
                    attr_name not in shown:
                return FilterResult(TestAction.SKIP, _joined(attr.value))
        return FilterResult(TestAction.RUN)


class AttrFilterSet:
    """A disjunction of attribute filters: the first that runs a test wins."""

    def __init__(self, filters: Iterable[AttrFilter] = ()) -> None:
        self._filters: List[AttrFilter] = list(filters)

    def insert(self, item: AttrFilter) -> None:
        """Add a filter."""
        self._filters.append(item)

    def __iter__(self) -> Iterator[AttrFilter]:
        return iter(self._filters)

    def __len__(self) -> int:
        return len(self._filters)

    def __call__(self, name: Any, attrs: Attributes) -> FilterResult:
        if not self._filters:
            return FilterResult(TestAction.INDETERMINATE)

        result: Optional[FilterResult] = None
        for f in self._filters:
            current = f(name, attrs)
            if current.action is TestAction.RUN:
                return current
            if current.action is TestAction.SKIP:
                if result is None or result.action is TestAction.HIDE:
                    result = current
            elif current.action is TestAction.HIDE:
                if result is None:
                    result = current
            else:
                raise ValueError(f"unexpected test action {current.action}")
        assert result is not None
        return result


def _full_name(name: Any) -> str:
    if isinstance(name, str):
        return name
    full = getattr(name, "full_name")
    return full() if callable(full) else full


class NameFilterSet:
    """Runs tests whose full name matches any of a set of regexes."""

    def __init__(self, patterns: Iterable[Union[str, Pattern[str]]] = ()) \
            -> None:
        self._patterns: List[Pattern[str]] = []
        for pattern in patterns:
            self.insert(pattern)

    def insert(self, pattern: Union[str, Pattern[str]]) -> None:
        """Add a regex, given as a string or a compiled pattern."""
        if isinstance(pattern, str):
            pattern = re.compile(pattern)
        self._patterns.append(pattern)

    def __iter__(self) -> Iterator[Pattern[str]]:
        return iter(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def __call__(self, name: Any, attrs: Attributes) -> FilterResult:
        if not self._patterns:
            return FilterResult(TestAction.INDETERMINATE)
        full = _full_name(name)
        if any(p.search(full) for p in self._patterns):
            return FilterResult(TestAction.RUN)
        return FilterResult(TestAction.HIDE)