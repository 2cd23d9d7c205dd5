"""Tests for callfmt.models."""

import dataclasses

import pytest

from callfmt.models import CompiledTemplate, Literal, Placeholder


def _a(_):
    return "a"


def _b(_):
    return "b"


class TestPlaceholder:
    def test_equality_by_name_only(self):
        assert Placeholder("foo", _a) == Placeholder("foo", _b)
        assert Placeholder("foo", _a) != Placeholder("bar", _a)

    def test_repr_shows_name_only(self):
        assert repr(Placeholder("foo", _a)) == "Placeholder(name='foo')"

    def test_not_equal_to_literal(self):
        assert Placeholder("foo", _a) != Literal("foo")


class TestCompiledTemplate:
    def _compiled(self):
        return CompiledTemplate(
            source="x{foo}y{bar}",
            pieces=(Literal("x"), Placeholder("foo", _a), Literal("y"), Placeholder("bar", _b)),
        )

    def test_placeholders_in_order(self):
        assert self._compiled().placeholders() == ["foo", "bar"]

    def test_iter_and_len(self):
        compiled = self._compiled()
        assert len(compiled) == 4
        assert list(compiled)[0] == Literal("x")

    def test_render(self):
        assert self._compiled().render(None) == "xayb"

    def test_immutable(self):
        compiled = self._compiled()
        with pytest.raises(dataclasses.FrozenInstanceError):
            compiled.pieces = ()
        with pytest.raises(dataclasses.FrozenInstanceError):
            compiled.pieces[0].text = "z"
