"""Data models for compiled templates."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterator, TypeVar, Union

from callfmt.registry import FormatterCallback

T = TypeVar("T")


@dataclass(frozen=True)
class Literal:
    """Text copied verbatim to the output."""

    text: str


@dataclass(frozen=True)
class Placeholder(Generic[T]):
    """A placeholder resolved to its callback at compile time."""

    name: str
    # Compared and shown by name only; two placeholders with the same name
    # are the same field even if their callbacks are different objects.
    callback: FormatterCallback[T] = field(compare=False, repr=False)


Piece = Union[Literal, Placeholder]


@dataclass(frozen=True)
class CompiledTemplate(Generic[T]):
    """Parsed template, ready to render against any number of contexts."""

    source: str
    pieces: tuple[Piece, ...] = ()

    def render(self, context: T) -> str:
        from callfmt.template_engine import render

        return render(self, context)

    def placeholders(self) -> list[str]:
        """Return placeholder names in order of appearance."""
        return [p.name for p in self.pieces if isinstance(p, Placeholder)]

    def __iter__(self) -> Iterator[Piece]:
        return iter(self.pieces)

    def __len__(self) -> int:
        return len(self.pieces)
