from __future__ import annotations

from dataclasses import dataclass

from relgate.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    console: ConsoleProtocol


def build_context() -> CLIContext:
    # stdout is reserved for step outputs and workflow commands.
    return CLIContext(console=RichConsole(stderr=True))
