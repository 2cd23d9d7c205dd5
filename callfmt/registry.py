"""Formatter registry — lookup placeholder callbacks by name."""

from __future__ import annotations

import logging
from typing import Callable, Generic, Iterable, Iterator, Mapping, Optional, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Receives the render context, returns the text for the placeholder or None
# when the context has no value for it.
FormatterCallback = Callable[[T], Optional[str]]


class FormatterRegistry(Generic[T]):
    """Mapping of placeholder name to callback.

    Registering a name that already exists replaces the earlier callback.
    """

    def __init__(self) -> None:
        self._formatters: dict[str, FormatterCallback[T]] = {}

    @classmethod
    def build_from(
        cls,
        pairs: Union[Mapping[str, FormatterCallback[T]], Iterable[tuple[str, FormatterCallback[T]]]],
    ) -> FormatterRegistry[T]:
        """Build a registry from (name, callback) pairs; later duplicates win."""
        registry: FormatterRegistry[T] = cls()
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        for name, callback in items:
            registry.register(name, callback)
        return registry

    def register(self, name: str, callback: FormatterCallback[T]) -> None:
        """Register a callback under a placeholder name."""
        if not isinstance(name, str) or not name:
            raise ValueError(f"Placeholder name must be a non-empty string, got {name!r}")
        if not callable(callback):
            raise TypeError(f"Callback for {name!r} is not callable: {callback!r}")
        if name in self._formatters:
            logger.debug("Replacing formatter for placeholder %r", name)
        self._formatters[name] = callback

    def get(self, name: str) -> Optional[FormatterCallback[T]]:
        return self._formatters.get(name)

    def names(self) -> list[str]:
        """Return all registered placeholder names."""
        return list(self._formatters.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._formatters

    def __len__(self) -> int:
        return len(self._formatters)

    def __iter__(self) -> Iterator[str]:
        return iter(self._formatters)

    def __repr__(self) -> str:
        return f"FormatterRegistry({self.names()!r})"
