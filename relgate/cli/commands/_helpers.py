from __future__ import annotations

from typing import NoReturn

import typer

from relgate.core.errors import ErrorCode


def exit_gate(err: str, *, code: ErrorCode) -> NoReturn:
    typer.echo(f"error: {err}", err=True)
    raise typer.Exit(code=int(code))
