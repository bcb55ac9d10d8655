"""Run the gate end to end: read inputs, validate, emit outputs."""

from __future__ import annotations

from relgate.core.config import GateConfig
from relgate.core.errors import ErrorCode
from relgate.core.result import Err
from relgate.infra.event import read_event
from relgate.infra.manifest import read_manifest_version
from relgate.infra.outputs import OutputSink, emit_outcome
from relgate.output.console import ConsoleProtocol, Style
from relgate.release.validator import validate_release

__all__ = ["run_gate"]


def run_gate(config: GateConfig, *, sink: OutputSink, console: ConsoleProtocol) -> ErrorCode:
    """Run one gate pass and return the exit code it warrants.

    Exactly one of ``sink.set_failed`` or the pair of ``sink.set_output``
    calls happens per run. Input read failures are reported verbatim and
    map to IO_ERROR; validation failures map to VALIDATION_FAILED.
    """
    console.print(f"event: {config.event_path}", Style.DIM)
    console.print(f"manifest: {config.manifest_path}", Style.DIM)

    event = read_event(path=config.event_path)
    if isinstance(event, Err):
        sink.set_failed(event.error.pretty())
        return ErrorCode.IO_ERROR

    manifest_version = read_manifest_version(path=config.manifest_path)
    if isinstance(manifest_version, Err):
        sink.set_failed(manifest_version.error.pretty())
        return ErrorCode.IO_ERROR

    console.info(
        f"tag {event.value.raw_tag!r} (draft={event.value.is_draft}, "
        f"prerelease={event.value.is_prerelease}), manifest version {manifest_version.value!r}"
    )

    outcome = validate_release(event.value, manifest_version.value)
    emit_outcome(outcome, sink)
    if isinstance(outcome, Err):
        return ErrorCode.VALIDATION_FAILED

    outputs = outcome.value
    console.success(f"release {outputs.version} ({outputs.tag or 'stable'})")
    return ErrorCode.OK
