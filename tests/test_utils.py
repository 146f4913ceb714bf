"""Unit tests for utility functions (kaboomer.utils).

Tests cover:
- stream_command (success, non-zero exit, missing binary, line relay)
- to_identifier
- dump_json determinism
- ensure_dir / write_file
- Rich output helpers
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from types import MappingProxyType

import pytest

from kaboomer.utils import (
    dump_json,
    ensure_dir,
    print_created,
    print_error,
    print_info,
    print_next_steps,
    print_running,
    print_success,
    print_warning,
    stream_command,
    to_identifier,
    write_file,
)


# ---------------------------------------------------------------------------
# stream_command
# ---------------------------------------------------------------------------


class TestStreamCommand:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_success_returns_zero(self):
        code = await stream_command([sys.executable, "-c", "print('hello')"])
        assert code == 0

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_relays_output_lines(self, capsys):
        await stream_command([sys.executable, "-c", "print('line-one'); print('line-two')"])
        out = capsys.readouterr().out
        assert "line-one" in out
        assert "line-two" in out
        assert out.index("line-one") < out.index("line-two")

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_relays_stderr(self, capsys):
        await stream_command(
            [sys.executable, "-c", "import sys; sys.stderr.write('oops\\n')"]
        )
        assert "oops" in capsys.readouterr().out

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_nonzero_exit(self):
        code = await stream_command([sys.executable, "-c", "import sys; sys.exit(3)"])
        assert code == 3

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_runs_in_cwd(self, tmp_path: Path):
        code = await stream_command(
            [sys.executable, "-c", "open('marker.txt', 'w').close()"], cwd=tmp_path
        )
        assert code == 0
        assert (tmp_path / "marker.txt").exists()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_missing_binary_raises(self):
        with pytest.raises(OSError):
            await stream_command(["nonexistent-binary-12345-xyz"])


# ---------------------------------------------------------------------------
# to_identifier
# ---------------------------------------------------------------------------


class TestToIdentifier:
    @pytest.mark.unit
    def test_single_hyphen(self):
        assert to_identifier("boss-fight") == "bossFight"

    @pytest.mark.unit
    def test_multiple_hyphens(self):
        assert to_identifier("big-boss-fight") == "bigBossFight"

    @pytest.mark.unit
    def test_digit_after_hyphen(self):
        assert to_identifier("level-1-intro") == "level1Intro"

    @pytest.mark.unit
    def test_no_hyphen(self):
        assert to_identifier("player") == "player"

    @pytest.mark.unit
    def test_other_characters_untouched(self):
        assert to_identifier("hud_bar") == "hud_bar"


# ---------------------------------------------------------------------------
# dump_json
# ---------------------------------------------------------------------------


class TestDumpJson:
    @pytest.mark.unit
    def test_fixed_indentation_and_newline(self):
        text = dump_json({"a": 1})
        assert text == '{\n  "a": 1\n}\n'

    @pytest.mark.unit
    def test_keeps_declaration_order(self):
        text = dump_json({"zeta": 1, "alpha": 2})
        assert text.index("zeta") < text.index("alpha")

    @pytest.mark.unit
    def test_deterministic(self):
        data = {"name": "x", "nested": {"b": [1, 2], "a": True}}
        assert dump_json(data) == dump_json(json.loads(dump_json(data)))

    @pytest.mark.unit
    def test_non_ascii_kept(self):
        assert "é" in dump_json({"title": "café"})

    @pytest.mark.unit
    def test_read_only_mapping(self):
        data = {"sprites": MappingProxyType({"bean": "bean.png"})}
        assert dump_json(data) == dump_json({"sprites": {"bean": "bean.png"}})

    @pytest.mark.unit
    def test_unserialisable_rejected(self):
        with pytest.raises(TypeError):
            dump_json({"bad": object()})


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


class TestEnsureDir:
    @pytest.mark.unit
    def test_creates_nested(self, tmp_path: Path):
        target = tmp_path / "a" / "b" / "c"
        result = ensure_dir(target)
        assert target.is_dir()
        assert result == target

    @pytest.mark.unit
    def test_idempotent(self, tmp_path: Path):
        target = tmp_path / "a" / "b"
        ensure_dir(target)
        ensure_dir(target)
        assert target.is_dir()
        assert [p.name for p in (tmp_path / "a").iterdir()] == ["b"]

    @pytest.mark.unit
    def test_accepts_str(self, tmp_path: Path):
        ensure_dir(str(tmp_path / "s"))
        assert (tmp_path / "s").is_dir()


class TestWriteFile:
    @pytest.mark.unit
    def test_creates_parents(self, tmp_path: Path):
        target = tmp_path / "x" / "y" / "file.txt"
        write_file(target, "hi")
        assert target.read_text(encoding="utf-8") == "hi"

    @pytest.mark.unit
    def test_overwrites(self, tmp_path: Path):
        target = tmp_path / "file.txt"
        write_file(target, "old")
        write_file(target, "new")
        assert target.read_text(encoding="utf-8") == "new"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestOutputHelpers:
    @pytest.mark.unit
    def test_print_info(self, capsys):
        print_info("scaffolding inside demo")
        out = capsys.readouterr().out
        assert "info" in out
        assert "scaffolding inside demo" in out

    @pytest.mark.unit
    def test_print_created(self, capsys):
        print_created("src/scenes/main.ts")
        out = capsys.readouterr().out
        assert "created" in out
        assert "src/scenes/main.ts" in out

    @pytest.mark.unit
    def test_print_created_escapes_markup(self, capsys):
        print_created("assets/[bold]odd.png")
        assert "[bold]odd.png" in capsys.readouterr().out

    @pytest.mark.unit
    def test_print_running(self, capsys):
        print_running("git init")
        out = capsys.readouterr().out
        assert "running" in out
        assert "git init" in out

    @pytest.mark.unit
    def test_print_error(self, capsys):
        print_error("boom")
        out = capsys.readouterr().out
        assert "Error:" in out
        assert "boom" in out

    @pytest.mark.unit
    def test_print_success_and_warning(self, capsys):
        print_success("yay")
        print_warning("careful")
        out = capsys.readouterr().out
        assert "yay" in out
        assert "careful" in out

    @pytest.mark.unit
    def test_print_next_steps(self, capsys):
        print_next_steps("my-game", ["cd my-game", "npm install", "npm run dev"])
        out = capsys.readouterr().out
        assert "done" in out
        assert "my-game" in out
        assert "install" in out
        assert "run dev" in out
