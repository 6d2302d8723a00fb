from __future__ import annotations

from pathlib import Path

import pytest

from cmdbuild.cli import main
from tests.helpers import write


def test_successful_build_exits_zero(plugin_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    write(plugin_root / "a.md", "A")
    write(plugin_root / "src" / "commands" / "cmd.template.md", "{{include:a.md}}")

    assert main(["--root", str(plugin_root)]) == 0

    captured = capsys.readouterr()
    assert "cmd.template.md -> cmd.md" in captured.out
    assert "Build complete!" in captured.out
    assert captured.err == ""
    assert (plugin_root / "commands" / "cmd.md").read_text(encoding="utf-8") == "A"


def test_missing_include_fails_closed(plugin_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    write(plugin_root / "src" / "commands" / "cmd.template.md", "{{include:missing.md}}")

    assert main(["--root", str(plugin_root)]) == 1

    captured = capsys.readouterr()
    assert "missing.md" in captured.err
    assert "Build failed" in captured.err
    assert "Build complete!" not in captured.out
    assert not (plugin_root / "commands" / "cmd.md").exists()


def test_config_file_is_applied(plugin_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    write(plugin_root / "tpl" / "x.tpl", "hi")
    cfg = write(plugin_root / "cmdbuild.yaml", "source_dir: tpl\noutput_dir: dist\ntemplate_suffix: .tpl\noutput_suffix: .out\n")

    assert main(["--root", str(plugin_root), "--config", str(cfg)]) == 0
    assert (plugin_root / "dist" / "x.out").read_text(encoding="utf-8") == "hi"


def test_bad_config_exits_two(plugin_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cfg = write(plugin_root / "cmdbuild.yaml", "bogus: 1\n")

    assert main(["--root", str(plugin_root), "--config", str(cfg)]) == 2
    assert "Invalid configuration" in capsys.readouterr().err


def test_defaults_to_current_directory(
    plugin_root: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    write(plugin_root / "src" / "commands" / "foo.template.md", "foo")
    monkeypatch.chdir(plugin_root)

    assert main([]) == 0
    assert (plugin_root / "commands" / "foo.md").exists()


def test_blocked_output_exits_one(plugin_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    write(plugin_root / "src" / "commands" / "cmd.template.md", "body")
    (plugin_root / "commands" / "cmd.md").mkdir(parents=True)

    assert main(["--root", str(plugin_root)]) == 1

    err = capsys.readouterr().err
    assert "Build failed" in err
    assert str(Path("commands") / "cmd.md") in err


def test_nul_in_include_path_is_reported(plugin_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    write(plugin_root / "src" / "commands" / "cmd.template.md", "{{include:a\x00b}}")

    assert main(["--root", str(plugin_root)]) == 1

    err = capsys.readouterr().err
    assert "Failed to include" in err
    assert "Build failed" in err
