"""Typed configuration for a gate run.

The gate is configured the way a CI step is: through environment variables
set by the runner, with explicit command-line values taking precedence.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .result import Err, Ok, Result

__all__ = [
    "GateConfig",
    "ConfigError",
    "load_config",
    "DEFAULT_MANIFEST_PATH",
    "MANIFEST_PATH_ENV_VARS",
    "EVENT_PATH_ENV_VAR",
    "OUTPUT_PATH_ENV_VAR",
]

DEFAULT_MANIFEST_PATH = "package.json"

# Action inputs are exposed as INPUT_<NAME> with the name upper-cased as-is.
MANIFEST_PATH_ENV_VARS = ("INPUT_PACKAGE-PATH", "INPUT_MANIFEST-PATH")
EVENT_PATH_ENV_VAR = "GITHUB_EVENT_PATH"
OUTPUT_PATH_ENV_VAR = "GITHUB_OUTPUT"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when the gate cannot be configured."""

    message: str


@dataclass(frozen=True, slots=True)
class GateConfig:
    """Resolved locations of the gate's inputs and outputs.

    Attributes:
        manifest_path: Manifest to read the declared version from.
        event_path: JSON file holding the release event payload.
        output_path: File receiving step outputs, or None to echo them.
    """

    manifest_path: Path
    event_path: Path
    output_path: Path | None = None


def _first_env(env: Mapping[str, str], names: tuple[str, ...]) -> str | None:
    for name in names:
        value = env.get(name, "").strip()
        if value:
            return value
    return None


def load_config(
    *,
    manifest_path: Path | None = None,
    event_path: Path | None = None,
    output_path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> Result[GateConfig, ConfigError]:
    """Resolve the gate configuration.

    Args:
        manifest_path: Explicit manifest path (overrides environment)
        event_path: Explicit event payload path (overrides environment)
        output_path: Explicit output file (overrides environment)
        env: Environment to read from; defaults to os.environ

    Returns:
        Ok(GateConfig) on success, Err(ConfigError) when no event payload
        location is known.
    """
    if env is None:
        env = os.environ

    if manifest_path is None:
        manifest_path = Path(_first_env(env, MANIFEST_PATH_ENV_VARS) or DEFAULT_MANIFEST_PATH)

    if event_path is None:
        raw_event = _first_env(env, (EVENT_PATH_ENV_VAR,))
        if raw_event is None:
            return Err(
                ConfigError(f"no release event payload: pass --event or set {EVENT_PATH_ENV_VAR}")
            )
        event_path = Path(raw_event)

    if output_path is None:
        raw_output = _first_env(env, (OUTPUT_PATH_ENV_VAR,))
        output_path = Path(raw_output) if raw_output else None

    return Ok(
        GateConfig(
            manifest_path=manifest_path,
            event_path=event_path,
            output_path=output_path,
        )
    )
