"""Placeholder marker configuration and YAML loader."""

from __future__ import annotations

from dataclasses import dataclass

import yaml


@dataclass(frozen=True)
class TemplateSyntax:
    open_marker: str = "{"
    close_marker: str = "}"

    def __post_init__(self):
        for field_name in ("open_marker", "close_marker"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or len(value) != 1:
                raise ValueError(
                    f"{field_name} must be a single character, got {value!r}"
                )
        if self.open_marker == self.close_marker:
            raise ValueError(
                f"open_marker and close_marker must differ, both are {self.open_marker!r}"
            )


DEFAULT_SYNTAX = TemplateSyntax()

_SYNTAX_KEYS = frozenset(f.name for f in TemplateSyntax.__dataclass_fields__.values())


def load_syntax(path: str) -> TemplateSyntax:
    """Load marker characters from a YAML file.

    Missing keys fall back to the brace defaults. Unknown keys cause a
    ``ValueError`` so typos are caught early.
    """
    with open(path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        return DEFAULT_SYNTAX
    if not isinstance(raw, dict):
        raise ValueError(f"Syntax YAML must be a mapping, got {type(raw).__name__}")

    unknown = set(raw) - _SYNTAX_KEYS
    if unknown:
        raise ValueError(
            f"Unknown keys in syntax file: {sorted(unknown)}. "
            f"Allowed: {sorted(_SYNTAX_KEYS)}"
        )
    return TemplateSyntax(**raw)
