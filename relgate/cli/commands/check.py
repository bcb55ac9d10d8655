from __future__ import annotations

import typer

from relgate.cli.context import build_context
from relgate.core.errors import ErrorCode
from relgate.core.result import Err
from relgate.output.console import Style
from relgate.release.model import ReleaseEvent
from relgate.release.validator import validate_release


def check(
    tag: str = typer.Option(..., "--tag", help="Release tag, e.g. v1.2.3-beta.1."),
    manifest_version: str | None = typer.Option(
        None, "--manifest-version", help="Version declared by the manifest."
    ),
    draft: bool = typer.Option(False, "--draft", help="Treat the release as a draft."),
    prerelease: bool = typer.Option(
        False, "--prerelease", help="Treat the release as a pre-release."
    ),
) -> None:
    """Check a tag and manifest version locally, without a CI event."""
    ctx = build_context()

    event = ReleaseEvent(is_draft=draft, is_prerelease=prerelease, raw_tag=tag)
    outcome = validate_release(event, manifest_version)
    if isinstance(outcome, Err):
        ctx.console.error(outcome.error.message)
        raise typer.Exit(code=int(ErrorCode.VALIDATION_FAILED))

    ctx.console.success("release is publishable")
    ctx.console.print(f"version: {outcome.value.version}", Style.DIM)
    ctx.console.print(f"tag: {outcome.value.tag or '(none)'}", Style.DIM)
