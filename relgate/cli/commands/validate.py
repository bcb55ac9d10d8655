from __future__ import annotations

from pathlib import Path

import typer

from relgate.cli.commands._helpers import exit_gate
from relgate.cli.context import build_context
from relgate.core.config import load_config
from relgate.core.errors import ErrorCode
from relgate.core.result import Err
from relgate.infra.outputs import GitHubOutputSink
from relgate.services.gate import run_gate


def validate(
    manifest: Path | None = typer.Option(
        None,
        "--manifest",
        help="Manifest to read the version from (default: INPUT_PACKAGE-PATH or package.json).",
    ),
    event: Path | None = typer.Option(
        None,
        "--event",
        help="Release event payload JSON (default: GITHUB_EVENT_PATH).",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        help="File receiving step outputs (default: GITHUB_OUTPUT, else stdout).",
    ),
) -> None:
    """Validate the triggering release against the manifest and emit outputs."""
    ctx = build_context()

    config = load_config(manifest_path=manifest, event_path=event, output_path=output)
    if isinstance(config, Err):
        exit_gate(config.error.message, code=ErrorCode.USER_ERROR)

    sink = GitHubOutputSink(output_path=config.value.output_path)
    code = run_gate(config.value, sink=sink, console=ctx.console)
    if code.is_error:
        raise typer.Exit(code=int(code))
