"""A registry of named constructors."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, Tuple


class ObjectFactory:
    """Maps names to callables that build objects.

    Iteration yields ``(name, callable)`` pairs in name order.
    """

    def __init__(self) -> None:
        self._registry: Dict[str, Callable[..., Any]] = {}

    def add(self, name: str, func: Callable[..., Any]) -> None:
        """Register ``func`` under ``name``; an existing entry is kept."""
        self._registry.setdefault(name, func)

    def make(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Build an object with the callable registered under ``name``.

        Raises KeyError if no such name is registered.
        """
        return self._registry[name](*args, **kwargs)

    def __iter__(self) -> Iterator[Tuple[str, Callable[..., Any]]]:
        return iter(sorted(self._registry.items()))

    def __contains__(self, name: object) -> bool:
        return name in self._registry

    def __len__(self) -> int:
        return len(self._registry)