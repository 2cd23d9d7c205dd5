"""Compile-once, render-many placeholder templates backed by callbacks."""

from callfmt.errors import (
    CompileError,
    EmptyPlaceholderName,
    FormatError,
    MissingValue,
    RenderError,
    UnknownPlaceholder,
    UnmatchedClosingMarker,
    UnterminatedPlaceholder,
)
from callfmt.models import CompiledTemplate, Literal, Piece, Placeholder
from callfmt.registry import FormatterCallback, FormatterRegistry
from callfmt.syntax import DEFAULT_SYNTAX, TemplateSyntax, load_syntax
from callfmt.template_engine import compile_template, render, render_string

__all__ = [
    # Engine
    "compile_template",
    "render",
    "render_string",
    # Models
    "CompiledTemplate",
    "Literal",
    "Piece",
    "Placeholder",
    # Registry
    "FormatterCallback",
    "FormatterRegistry",
    # Syntax
    "DEFAULT_SYNTAX",
    "TemplateSyntax",
    "load_syntax",
    # Errors
    "CompileError",
    "EmptyPlaceholderName",
    "FormatError",
    "MissingValue",
    "RenderError",
    "UnknownPlaceholder",
    "UnmatchedClosingMarker",
    "UnterminatedPlaceholder",
]
