"""Tests for the shiftinclude command line."""
from __future__ import annotations

import io
import json

import pytest

from shiftinclude.cli._dispatcher import build_parser, discover_root_commands, main


class TestDispatcher:
    def test_commands_are_discovered(self) -> None:
        assert {"expand", "preprocess", "supports"} <= set(discover_root_commands())

    def test_version_flag(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--version"])
        assert exc_info.value.code == 0
        assert "shiftinclude" in capsys.readouterr().out


class TestSupports:
    def test_supported_renderer(self) -> None:
        assert main(["supports", "html"]) == 0

    def test_unsupported_renderer(self) -> None:
        assert main(["supports", "not-supported"]) == 1


class TestPreprocess:
    """mdBook protocol over stdin/stdout."""

    def _payload(self, root, table=None):
        table = {"shift": "auto"} if table is None else table
        ctx = {
            "root": str(root),
            "config": {"book": {"src": "src"}, "preprocessor": {"shiftinclude": table}},
            "renderer": "html",
            "mdbook_version": "0.4.40",
        }
        book = {
            "sections": [
                {
                    "Chapter": {
                        "name": "Intro",
                        "content": "```\n{{#include code.py:2:3}}\n```",
                        "path": "intro.md",
                        "sub_items": [],
                    }
                }
            ],
            "__non_exhaustive": None,
        }
        return json.dumps([ctx, book])

    @pytest.mark.parametrize("argv", [[], ["preprocess"]])
    def test_book_round_trip(self, argv, tmp_path, write_file, monkeypatch, capsys) -> None:
        write_file("src/code.py", "def f():\n    x = 1\n    return x\n")
        monkeypatch.setattr("sys.stdin", io.StringIO(self._payload(tmp_path)))

        assert main(argv) == 0

        book = json.loads(capsys.readouterr().out)
        chapter = book["sections"][0]["Chapter"]
        assert chapter["content"] == "```\nx = 1\nreturn x\n```"

    def test_invalid_input_fails(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("garbage"))
        assert main(["preprocess"]) == 1
        assert "Unable to parse the input" in capsys.readouterr().err

    def test_mdbook_keys_in_table_are_accepted(self, tmp_path, write_file, monkeypatch, capsys) -> None:
        write_file("src/code.py", "def f():\n    x = 1\n    return x\n")
        table = {"command": "shiftinclude", "optional": True, "renderers": ["html"], "shift": "auto"}
        monkeypatch.setattr("sys.stdin", io.StringIO(self._payload(tmp_path, table)))

        assert main([]) == 0
        chapter = json.loads(capsys.readouterr().out)["sections"][0]["Chapter"]
        assert chapter["content"] == "```\nx = 1\nreturn x\n```"

    def test_unrelated_environment_variable_is_ignored(
        self, tmp_path, write_file, monkeypatch, capsys
    ) -> None:
        write_file("src/code.py", "def f():\n    x = 1\n    return x\n")
        monkeypatch.setenv("SHIFTINCLUDE_HOME", "/opt/x")
        monkeypatch.setattr("sys.stdin", io.StringIO(self._payload(tmp_path)))

        assert main([]) == 0
        assert json.loads(capsys.readouterr().out)["sections"]


class TestExpand:
    """Single-file expansion."""

    def test_expand_to_stdout(self, write_file, capsys) -> None:
        doc = write_file("docs/page.md", "Code:\n{{#include lib/a.txt:x}}\n")
        write_file("docs/lib/a.txt", "// ANCHOR: x\n    one\n// ANCHOR_END: x\n")

        assert main(["expand", str(doc)]) == 0
        assert capsys.readouterr().out == "Code:\n    one\n\n"

    def test_expand_with_shift_override(self, write_file, capsys) -> None:
        doc = write_file("page.md", "{{#include a.txt}}")
        write_file("a.txt", "    one\n      two")

        assert main(["expand", str(doc), "--shift", "auto"]) == 0
        assert capsys.readouterr().out == "one\n  two\n"

    def test_expand_json(self, write_file, capsys) -> None:
        doc = write_file("page.md", "{{#include a.txt}} \\{{#include b.txt}}")
        write_file("a.txt", "A")

        assert main(["expand", str(doc), "--json"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["status"] == "success"
        assert payload["content"] == "A {{#include b.txt}}"
        assert payload["report"]["escapes_rendered"] == 1
        assert len(payload["report"]["includes_resolved"]) == 1

    def test_expand_to_output_file(self, tmp_path, write_file, capsys) -> None:
        doc = write_file("page.md", "{{#include a.txt}}")
        write_file("a.txt", "A")
        out = tmp_path / "out.md"

        assert main(["expand", str(doc), "-o", str(out)]) == 0
        assert out.read_text(encoding="utf-8") == "A"
        assert "Wrote" in capsys.readouterr().out

    def test_unresolved_include_is_not_fatal(self, write_file, capsys) -> None:
        doc = write_file("page.md", "x {{#include missing.txt}}")

        assert main(["expand", str(doc)]) == 0
        captured = capsys.readouterr()
        assert captured.out == "x {{#include missing.txt}}\n"
        assert "Could not read file for link" in captured.err

    def test_missing_input_file(self, tmp_path, capsys) -> None:
        assert main(["expand", str(tmp_path / "absent.md")]) == 1
        assert "Could not read" in capsys.readouterr().err

    def test_missing_input_file_json(self, tmp_path, capsys) -> None:
        assert main(["expand", str(tmp_path / "absent.md"), "--json"]) == 1
        err = json.loads(capsys.readouterr().err)
        assert err["error"] == "IncludeReadError"

    def test_unwritable_output_is_reported(self, tmp_path, write_file, capsys) -> None:
        doc = write_file("page.md", "text")

        # A directory cannot be opened for writing.
        assert main(["expand", str(doc), "-o", str(tmp_path)]) == 1
        assert "Could not write" in capsys.readouterr().err

    def test_shift_warnings_appear_in_json_report(self, write_file, capsys) -> None:
        doc = write_file("page.md", "{{#include a.txt}}")
        write_file("a.txt", "  ab\n    cd")

        assert main(["expand", str(doc), "--shift", "-4", "--json"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["content"] == "\n"
        assert payload["report"]["warnings"] == ["left-shifting away non-whitespace: '  ab'"]
