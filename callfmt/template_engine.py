"""Template engine — compiles {key} placeholders to callbacks once, renders many times.

A template is parsed a single time against a registry. Each ``{name}`` is
resolved to its callback during compilation, so rendering only walks the
resulting pieces and calls the captured callbacks with the context.

To keep a literal marker in the output, double it: ``{{`` renders as ``{``
and ``}}`` renders as ``}``.
"""

from __future__ import annotations

import logging
from typing import Mapping, TypeVar, Union

from callfmt.errors import (
    EmptyPlaceholderName,
    MissingValue,
    UnknownPlaceholder,
    UnmatchedClosingMarker,
    UnterminatedPlaceholder,
)
from callfmt.models import CompiledTemplate, Literal, Piece, Placeholder
from callfmt.registry import FormatterCallback, FormatterRegistry
from callfmt.syntax import DEFAULT_SYNTAX, TemplateSyntax

logger = logging.getLogger(__name__)

T = TypeVar("T")

Formatters = Union[FormatterRegistry[T], Mapping[str, FormatterCallback[T]]]


def _flush_literal(pieces: list[Piece], pending: list[str]) -> None:
    text = "".join(pending)
    pending.clear()
    if text:
        pieces.append(Literal(text))


def compile_template(
    template: str,
    registry: Formatters,
    syntax: TemplateSyntax = DEFAULT_SYNTAX,
) -> CompiledTemplate:
    """Parse ``template`` and resolve every placeholder against ``registry``.

    Only the callbacks the template references are captured, so the result
    stays valid if the registry is later changed or discarded.

    Raises:
        UnknownPlaceholder: a name has no callback in the registry.
        UnterminatedPlaceholder: an opening marker is never closed.
        EmptyPlaceholderName: ``{}`` was found.
        UnmatchedClosingMarker: a single closing marker outside a placeholder.
    """
    open_m = syntax.open_marker
    close_m = syntax.close_marker

    pieces: list[Piece] = []
    pending: list[str] = []
    run_start = 0
    i = 0
    n = len(template)

    while i < n:
        ch = template[i]
        if ch == open_m:
            if template.startswith(open_m, i + 1):
                # Escaped: keep one marker, drop the other.
                pending.append(template[run_start:i + 1])
                i += 2
                run_start = i
                continue

            pending.append(template[run_start:i])
            close = template.find(close_m, i + 1)
            if close == -1 or template.find(open_m, i + 1, close) != -1:
                raise UnterminatedPlaceholder(template, i)
            name = template[i + 1:close]
            if not name:
                raise EmptyPlaceholderName(template, i)
            callback = registry.get(name)
            if callback is None:
                raise UnknownPlaceholder(name, template, i)

            _flush_literal(pieces, pending)
            pieces.append(Placeholder(name, callback))
            i = close + 1
            run_start = i
        elif ch == close_m:
            if not template.startswith(close_m, i + 1):
                raise UnmatchedClosingMarker(template, i)
            pending.append(template[run_start:i + 1])
            i += 2
            run_start = i
        else:
            i += 1

    pending.append(template[run_start:])
    _flush_literal(pieces, pending)

    logger.debug("Compiled template of %d chars into %d pieces", n, len(pieces))
    return CompiledTemplate(source=template, pieces=tuple(pieces))


def render(compiled: CompiledTemplate, context: T) -> str:
    """Render a compiled template against one context.

    Raises ``MissingValue`` naming the first placeholder whose callback
    returned None. Nothing is returned on failure, not even a partial string.
    """
    parts: list[str] = []
    for piece in compiled.pieces:
        if isinstance(piece, Literal):
            parts.append(piece.text)
            continue
        value = piece.callback(context)
        if value is None:
            raise MissingValue(piece.name)
        if not isinstance(value, str):
            raise TypeError(
                f"Callback for placeholder {piece.name!r} returned "
                f"{type(value).__name__}, expected str or None"
            )
        parts.append(value)
    return "".join(parts)


def render_string(
    template: str,
    registry: Formatters,
    context: T,
    syntax: TemplateSyntax = DEFAULT_SYNTAX,
) -> str:
    """Same as compile_template + render, for templates used only once."""
    return render(compile_template(template, registry, syntax), context)
