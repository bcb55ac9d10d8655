"""Step output sinks.

A gate run ends in exactly one of two ways: a failure carrying one reason, or
both the ``version`` and ``tag`` outputs. ``emit_outcome`` is the only place
that translates a ValidationOutcome into sink calls.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol
from uuid import uuid4

import typer

from relgate.core.result import Err
from relgate.release.model import ValidationOutcome

__all__ = [
    "OutputSink",
    "GitHubOutputSink",
    "MemoryOutputSink",
    "emit_outcome",
    "escape_annotation",
    "format_output",
]


class OutputSink(Protocol):
    def set_output(self, name: str, value: str) -> None: ...

    def set_failed(self, message: str) -> None: ...


def escape_annotation(message: str) -> str:
    """Escape a workflow command payload the way the Actions runner expects."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def format_output(name: str, value: str) -> str:
    """Format one entry for a GITHUB_OUTPUT file.

    Multi-line values use the heredoc form with a random delimiter.
    """
    if "\n" not in value and "\r" not in value:
        return f"{name}={value}\n"
    delimiter = f"ghadelimiter_{uuid4()}"
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"


@dataclass
class GitHubOutputSink:
    """Writes outputs to the runner's output file, failures as annotations.

    Without an output file (local runs) outputs are echoed as ``name=value``.
    """

    output_path: Path | None = None

    def set_output(self, name: str, value: str) -> None:
        entry = format_output(name, value)
        if self.output_path is None:
            typer.echo(entry, nl=False)
            return
        with self.output_path.open("a", encoding="utf-8") as fh:
            fh.write(entry)

    def set_failed(self, message: str) -> None:
        typer.echo(f"::error::{escape_annotation(message)}")


def _empty_outputs() -> dict[str, str]:
    return {}


def _empty_failures() -> list[str]:
    return []


@dataclass
class MemoryOutputSink:
    """Captures outputs and failures for tests."""

    outputs: dict[str, str] = field(default_factory=_empty_outputs)
    failures: list[str] = field(default_factory=_empty_failures)

    def set_output(self, name: str, value: str) -> None:
        self.outputs[name] = value

    def set_failed(self, message: str) -> None:
        self.failures.append(message)


def emit_outcome(outcome: ValidationOutcome, sink: OutputSink) -> None:
    if isinstance(outcome, Err):
        sink.set_failed(outcome.error.message)
        return
    for name, value in outcome.value.as_dict().items():
        sink.set_output(name, value)
