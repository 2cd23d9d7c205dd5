"""Exceptions raised while compiling or rendering templates."""

from __future__ import annotations

from typing import Optional


class FormatError(Exception):
    """Base class for every error raised by callfmt."""


class CompileError(FormatError):
    """The template could not be compiled; fix it and compile again."""

    def __init__(
        self,
        message: str,
        template: Optional[str] = None,
        position: Optional[int] = None,
    ):
        if position is not None:
            message = f"{message} (at position {position})"
        super().__init__(message)
        self.template = template
        self.position = position


class UnknownPlaceholder(CompileError):
    def __init__(self, name: str, template: Optional[str] = None, position: Optional[int] = None):
        super().__init__(f"unknown placeholder {name!r}", template, position)
        self.name = name


class UnterminatedPlaceholder(CompileError):
    def __init__(self, template: Optional[str] = None, position: Optional[int] = None):
        super().__init__("unterminated placeholder", template, position)


class EmptyPlaceholderName(CompileError):
    def __init__(self, template: Optional[str] = None, position: Optional[int] = None):
        super().__init__("empty placeholder name", template, position)


class UnmatchedClosingMarker(CompileError):
    def __init__(self, template: Optional[str] = None, position: Optional[int] = None):
        super().__init__(
            "unmatched closing marker (double it to emit a literal one)",
            template,
            position,
        )


class RenderError(FormatError):
    """A single render failed; the compiled template is still usable."""


class MissingValue(RenderError):
    def __init__(self, name: str):
        super().__init__(f"no value for placeholder {name!r}")
        self.name = name
