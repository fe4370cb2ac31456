# Copyright 2026 FlowML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the FlowML CLI entry point."""

import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from flowml.cli.main import main

# ###############
# Helpers
# ###############

_VALID = 'Entity(a, "A")\nDatabase(db, "DB")\nRel(a, "reads", db)\n'


def _run(monkeypatch: pytest.MonkeyPatch, *argv: str) -> int:
    """Run main() with the given arguments and return the exit code."""
    monkeypatch.setattr(sys, "argv", ["flowml", *argv])
    with pytest.raises(SystemExit) as exc_info:
        main()
    return exc_info.value.code


def _write(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


# ###############
# Public Interface
# ###############


def test_main_no_args_prints_help_and_exits(monkeypatch: pytest.MonkeyPatch) -> None:
    """main() with no subcommand prints help and exits with code 0."""
    assert _run(monkeypatch) == 0


# -------- build tests --------


def test_build_writes_default_output(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """build writes <source>.md next to the source by default."""
    source = _write(tmp_path / "arch.flow", _VALID)
    assert _run(monkeypatch, "build", str(source)) == 0
    output = tmp_path / "arch.md"
    assert output.read_text(encoding="utf-8") == (
        "```mermaid\nflowchart LR\na[A]\ndb[(DB)]\na-->|reads|db\n```\n"
    )


def test_build_reports_output_path(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    source = _write(tmp_path / "arch.flow", _VALID)
    assert _run(monkeypatch, "build", str(source)) == 0
    captured = capsys.readouterr()
    assert "3 flowchart line(s)" in captured.out
    assert "arch.md" in captured.out


def test_build_with_explicit_output(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    source = _write(tmp_path / "arch.flow", _VALID)
    output = tmp_path / "out" / "result.md"
    assert _run(monkeypatch, "build", str(source), "-o", str(output)) == 0
    assert output.exists()


def test_build_no_fence(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    source = _write(tmp_path / "arch.flow", 'Queue(q, "Q")\n')
    assert _run(monkeypatch, "build", str(source), "--no-fence") == 0
    assert (tmp_path / "arch.md").read_text(encoding="utf-8") == "flowchart LR\nq[[Q]]\n"


def test_build_uses_config_next_to_source(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _write(tmp_path / ".flowml.yaml", "output-suffix: .mmd\noutput-directory: gen\nfenced: false\n")
    source = _write(tmp_path / "arch.flow", 'Decision(d, "D")\n')
    assert _run(monkeypatch, "build", str(source)) == 0
    assert (tmp_path / "gen" / "arch.mmd").read_text(encoding="utf-8") == "flowchart LR\nd{D}\n"


def test_build_uses_explicit_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config = _write(tmp_path / "custom.yaml", "output-suffix: .markdown\n")
    source = _write(tmp_path / "arch.flow", _VALID)
    assert _run(monkeypatch, "build", str(source), "--config", str(config)) == 0
    assert (tmp_path / "arch.markdown").exists()


def test_build_invalid_config_fails(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _write(tmp_path / ".flowml.yaml", "unknown-key: 1\n")
    source = _write(tmp_path / "arch.flow", _VALID)
    assert _run(monkeypatch, "build", str(source)) == 1
    assert "Invalid config file" in capsys.readouterr().err


def test_build_missing_source_fails(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    assert _run(monkeypatch, "build", str(tmp_path / "missing.flow")) == 1


def test_build_reports_first_error_and_writes_nothing(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    source = _write(tmp_path / "arch.flow", 'Entity(a, "A")\nEntity(b)\nFoo(c, "C")\n')
    assert _run(monkeypatch, "build", str(source)) == 1
    err = capsys.readouterr().err
    assert "Line 2:" in err
    assert "Foo" not in err
    assert not (tmp_path / "arch.md").exists()


def test_build_reports_lexer_error(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    source = _write(tmp_path / "arch.flow", "Entity(a, 'A')\n")
    assert _run(monkeypatch, "build", str(source)) == 1
    assert "Line 1:" in capsys.readouterr().err


# -------- check tests --------


def test_check_clean_file(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    source = _write(tmp_path / "arch.flow", _VALID)
    assert _run(monkeypatch, "check", str(source)) == 0
    assert "No issues found." in capsys.readouterr().out


def test_check_reports_warnings_without_failing(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    source = _write(tmp_path / "arch.flow", 'Entity(a, "A")\nRel(a, "to", b)\n')
    assert _run(monkeypatch, "check", str(source)) == 0
    out = capsys.readouterr().out
    assert "undeclared node 'b'" in out
    assert "1 warning(s)" in out


def test_check_fails_on_parse_error(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    source = _write(tmp_path / "arch.flow", 'Foo(a, "b")\n')
    assert _run(monkeypatch, "check", str(source)) == 1
    assert "Foo" in capsys.readouterr().err


def test_check_missing_file_fails(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    assert _run(monkeypatch, "check", str(tmp_path / "missing.flow")) == 1


# -------- serve tests --------


def test_serve_missing_file_fails(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    assert _run(monkeypatch, "serve", str(tmp_path / "missing.flow")) == 1


def test_serve_starts_app(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    source = _write(tmp_path / "arch.flow", _VALID)
    mock_app = MagicMock()
    with patch("flowml.webui.app.create_app", return_value=mock_app) as mock_create:
        assert _run(monkeypatch, "serve", str(source), "--port", "9000") == 0
    mock_create.assert_called_once_with(source=source.resolve())
    mock_app.run.assert_called_once_with(host="127.0.0.1", port=9000, debug=False)


def test_build_refuses_to_overwrite_source(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """build exits 1 and leaves the source intact when the output path is the source."""
    source = _write(tmp_path / "arch.md", 'Entity(a, "A")\n')
    assert _run(monkeypatch, "build", str(source)) == 1
    assert "would overwrite the source file" in capsys.readouterr().err
    assert source.read_text(encoding="utf-8") == 'Entity(a, "A")\n'


def test_build_refuses_explicit_output_equal_to_source(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    source = _write(tmp_path / "arch.flow", _VALID)
    assert _run(monkeypatch, "build", str(source), "-o", str(source)) == 1
    assert source.read_text(encoding="utf-8") == _VALID


def test_build_invalid_suffix_in_config_fails(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _write(tmp_path / ".flowml.yaml", "output-suffix: md\n")
    source = _write(tmp_path / "arch.flow", _VALID)
    assert _run(monkeypatch, "build", str(source)) == 1
    assert "output-suffix" in capsys.readouterr().err


def test_build_output_directory_is_relative_to_source(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """An output-directory from a --config elsewhere still resolves next to the source."""
    config_dir = tmp_path / "settings"
    config_dir.mkdir()
    config = _write(config_dir / "flowml.yaml", "output-directory: gen\n")
    source_dir = tmp_path / "diagrams"
    source_dir.mkdir()
    source = _write(source_dir / "arch.flow", _VALID)
    assert _run(monkeypatch, "build", str(source), "--config", str(config)) == 0
    assert (source_dir / "gen" / "arch.md").exists()
    assert not (config_dir / "gen").exists()
