from __future__ import annotations

import json
from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from relgate import __version__
from relgate.cli.app import app
from relgate.cli.context import CLIContext
from relgate.core.errors import ErrorCode
from relgate.output.console import MockConsole


def _use_mock_console(monkeypatch: pytest.MonkeyPatch, module: object) -> MockConsole:
    console = MockConsole()
    monkeypatch.setattr(module, "build_context", lambda: CLIContext(console=console))
    return console


def _write_inputs(
    tmp_path: Path, *, tag: str, version: str, prerelease: bool = False
) -> tuple[Path, Path]:
    event = tmp_path / "event.json"
    event.write_text(
        json.dumps({"release": {"draft": False, "prerelease": prerelease, "tag_name": tag}}),
        encoding="utf-8",
    )
    manifest = tmp_path / "package.json"
    manifest.write_text(json.dumps({"version": version}), encoding="utf-8")
    return event, manifest


def test_validate_writes_outputs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import relgate.cli.commands.validate as validate_cmd

    _use_mock_console(monkeypatch, validate_cmd)
    event, manifest = _write_inputs(
        tmp_path, tag="v2.0.0-rc.1", version="2.0.0-rc.1", prerelease=True
    )
    out = tmp_path / "github_output"

    validate_cmd.validate(manifest=manifest, event=event, output=out)

    assert out.read_text(encoding="utf-8") == "version=2.0.0-rc.1\ntag=rc\n"


def test_validate_exits_on_validation_failure(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    import relgate.cli.commands.validate as validate_cmd

    _use_mock_console(monkeypatch, validate_cmd)
    event, manifest = _write_inputs(tmp_path, tag="1.2.3", version="1.2.3")
    out = tmp_path / "github_output"

    with pytest.raises(typer.Exit) as exc:
        validate_cmd.validate(manifest=manifest, event=event, output=out)

    assert exc.value.exit_code == int(ErrorCode.VALIDATION_FAILED)
    assert "::error::release tag does not start with `v`" in capsys.readouterr().out
    assert not out.exists()


def test_validate_exits_on_missing_event_config(monkeypatch: pytest.MonkeyPatch) -> None:
    import relgate.cli.commands.validate as validate_cmd

    _use_mock_console(monkeypatch, validate_cmd)
    monkeypatch.delenv("GITHUB_EVENT_PATH", raising=False)

    with pytest.raises(typer.Exit) as exc:
        validate_cmd.validate(manifest=None, event=None, output=None)

    assert exc.value.exit_code == int(ErrorCode.USER_ERROR)


def test_validate_reads_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import relgate.cli.commands.validate as validate_cmd

    _use_mock_console(monkeypatch, validate_cmd)
    event, manifest = _write_inputs(tmp_path, tag="v1.0.0", version="1.0.0")
    out = tmp_path / "github_output"
    monkeypatch.setenv("GITHUB_EVENT_PATH", str(event))
    monkeypatch.setenv("GITHUB_OUTPUT", str(out))
    monkeypatch.setenv("INPUT_PACKAGE-PATH", str(manifest))

    validate_cmd.validate(manifest=None, event=None, output=None)

    assert out.read_text(encoding="utf-8") == "version=1.0.0\ntag=\n"


def test_check_success(monkeypatch: pytest.MonkeyPatch) -> None:
    import relgate.cli.commands.check as check_cmd

    console = _use_mock_console(monkeypatch, check_cmd)

    check_cmd.check(
        tag="v1.2.3-beta.1", manifest_version="1.2.3-beta.1", draft=False, prerelease=True
    )

    assert console.has_success()
    assert "tag: beta" in console.messages


def test_check_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    import relgate.cli.commands.check as check_cmd

    console = _use_mock_console(monkeypatch, check_cmd)

    with pytest.raises(typer.Exit) as exc:
        check_cmd.check(tag="v1.2.3", manifest_version="1.2.3", draft=True, prerelease=False)

    assert exc.value.exit_code == int(ErrorCode.VALIDATION_FAILED)
    assert console.messages == ["error: release is a draft; skip publish."]


def test_version_flag() -> None:
    result = CliRunner().invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.output.strip() == __version__
