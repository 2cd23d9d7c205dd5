"""Tests for the `callfmt` CLI — render and bench commands."""

import argparse
import json
from unittest.mock import patch

import pytest

from callfmt.__main__ import build_record_registry, cmd_bench, cmd_render, load_records


def _write_records(tmp_path, records):
    path = tmp_path / "records.jsonl"
    path.write_text("\n".join(json.dumps(r) for r in records) + "\n")
    return str(path)


def _render_args(template, records, syntax=None) -> argparse.Namespace:
    return argparse.Namespace(template=template, records=records, syntax=syntax)


class TestLoadRecords:
    def test_skips_blank_lines(self, tmp_path):
        path = tmp_path / "records.jsonl"
        path.write_text('{"a": 1}\n\n{"a": 2}\n')
        assert load_records(str(path)) == [{"a": 1}, {"a": 2}]

    def test_rejects_non_object(self, tmp_path):
        path = tmp_path / "records.jsonl"
        path.write_text("[1, 2]\n")
        with pytest.raises(ValueError, match="expected a JSON object"):
            load_records(str(path))


class TestBuildRecordRegistry:
    def test_union_of_keys(self):
        registry = build_record_registry([{"a": 1}, {"b": "x"}])
        assert registry.names() == ["a", "b"]

    def test_getters(self):
        registry = build_record_registry([{"a": 1, "b": "x", "c": None}])
        record = {"a": 1, "b": "x", "c": None}
        assert registry.get("a")(record) == "1"
        assert registry.get("b")(record) == "x"
        assert registry.get("c")(record) is None
        assert registry.get("a")({}) is None


class TestRender:
    def test_renders_every_record(self, tmp_path, capsys):
        path = _write_records(tmp_path, [
            {"artist": "Ann", "title": "One"},
            {"artist": "Bob", "title": "Two"},
        ])
        cmd_render(_render_args("{artist}-{title}", path))
        out = capsys.readouterr().out
        assert "Ann-One" in out
        assert "Bob-Two" in out
        assert "2 rendered, 0 skipped" in out

    def test_skips_records_with_missing_fields(self, tmp_path, capsys):
        path = _write_records(tmp_path, [
            {"artist": "Ann", "title": "One"},
            {"artist": "Bob"},
        ])
        with pytest.raises(SystemExit) as exc_info:
            cmd_render(_render_args("{artist}-{title}", path))
        assert exc_info.value.code == 1
        out = capsys.readouterr().out
        assert "Ann-One" in out
        assert "skipped" in out
        assert "1 rendered, 1 skipped" in out

    def test_unknown_placeholder_exits(self, tmp_path, capsys):
        path = _write_records(tmp_path, [{"artist": "Ann"}])
        with pytest.raises(SystemExit) as exc_info:
            cmd_render(_render_args("{album}", path))
        assert exc_info.value.code == 1
        assert "invalid template" in capsys.readouterr().err

    def test_missing_records_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit):
            cmd_render(_render_args("{a}", str(tmp_path / "nope.jsonl")))
        assert "Error:" in capsys.readouterr().err

    def test_custom_syntax(self, tmp_path, capsys):
        path = _write_records(tmp_path, [{"n": "7"}])
        syntax = tmp_path / "syntax.yaml"
        syntax.write_text("open_marker: '<'\nclose_marker: '>'\n")
        cmd_render(_render_args("{n}=<n>", path, syntax=str(syntax)))
        assert "{n}=7" in capsys.readouterr().out


class TestBench:
    @patch("callfmt.benchmark.print_summary")
    @patch("callfmt.benchmark.run_benchmark")
    def test_runs_each_count(self, mock_run, mock_print):
        args = argparse.Namespace(placeholders=[10, 100], iterations=3, output="json")
        cmd_bench(args)
        mock_run.assert_any_call(placeholders=10, iterations=3)
        mock_run.assert_any_call(placeholders=100, iterations=3)
        mock_print.assert_called_once()
        assert mock_print.call_args.kwargs["output"] == "json"

    def test_invalid_count_exits(self, capsys):
        args = argparse.Namespace(placeholders=[0], iterations=1, output="table")
        with pytest.raises(SystemExit):
            cmd_bench(args)
        assert "placeholders" in capsys.readouterr().err
