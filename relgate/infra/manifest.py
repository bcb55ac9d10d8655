"""Read the declared version from a project manifest.

JSON manifests (``package.json``) declare it at the top level; TOML manifests
(``pyproject.toml``, ``Cargo.toml``) under ``[project]``, ``[package]`` or
``[tool.poetry]``. A missing or empty version is not an error here: the
validator reports it.
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path

from relgate.core.result import Err, Ok, Result
from relgate.core.structured import StrDict, as_str_dict, get_raw_str, get_table
from relgate.infra.errors import InputError
from relgate.release.model import ManifestVersion

__all__ = ["read_manifest_version", "manifest_version_from_mapping"]

_TOML_VERSION_TABLES = (("project",), ("package",), ("tool", "poetry"))


def _decode(path: Path, text: str) -> Result[object, InputError]:
    if path.suffix == ".toml":
        try:
            return Ok(tomllib.loads(text))
        except tomllib.TOMLDecodeError as e:
            return Err(
                InputError(
                    kind="manifest_invalid",
                    message=f"invalid TOML in manifest: {e}",
                    path=path,
                )
            )
    try:
        return Ok(json.loads(text))
    except json.JSONDecodeError as e:
        return Err(
            InputError(
                kind="manifest_invalid",
                message=f"invalid JSON in manifest: {e}",
                path=path,
            )
        )


def manifest_version_from_mapping(data: StrDict, *, toml: bool = False) -> ManifestVersion:
    if not toml:
        return get_raw_str(data, "version")

    for keys in _TOML_VERSION_TABLES:
        table: StrDict | None = data
        for key in keys:
            table = get_table(table, key) if table is not None else None
        if table is not None:
            version = get_raw_str(table, "version")
            if version is not None:
                return version
    return None


def read_manifest_version(*, path: Path) -> Result[ManifestVersion, InputError]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return Err(
            InputError(
                kind="manifest_unreadable",
                message=f"failed to read manifest: {e}",
                path=path,
            )
        )

    decoded = _decode(path, text)
    if isinstance(decoded, Err):
        return decoded

    data = as_str_dict(decoded.value)
    if data is None:
        return Err(
            InputError(
                kind="manifest_invalid",
                message="manifest root must be an object",
                path=path,
            )
        )

    return Ok(manifest_version_from_mapping(data, toml=path.suffix == ".toml"))
