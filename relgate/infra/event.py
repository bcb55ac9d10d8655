from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path

from relgate.core.result import Err, Ok, Result
from relgate.core.structured import as_str_dict, get_table
from relgate.infra.errors import InputError
from relgate.release.model import ReleaseEvent


def _flag(release: Mapping[str, object], key: str) -> Result[bool, InputError]:
    value = release.get(key, False)
    if value is None:
        return Ok(False)
    if not isinstance(value, bool):
        return Err(
            InputError(
                kind="event_invalid",
                message=f"release.{key} must be a boolean, got {value!r}",
            )
        )
    return Ok(value)


def event_from_mapping(payload: Mapping[str, object]) -> Result[ReleaseEvent, InputError]:
    """Extract the release event from a decoded webhook payload."""
    release = get_table(payload, "release")
    if release is None:
        return Err(InputError(kind="event_invalid", message="event payload has no release object"))

    tag = release.get("tag_name")
    if not isinstance(tag, str):
        return Err(InputError(kind="event_invalid", message="release.tag_name must be a string"))

    draft = _flag(release, "draft")
    if isinstance(draft, Err):
        return draft
    prerelease = _flag(release, "prerelease")
    if isinstance(prerelease, Err):
        return prerelease

    return Ok(ReleaseEvent(is_draft=draft.value, is_prerelease=prerelease.value, raw_tag=tag))


def read_event(*, path: Path) -> Result[ReleaseEvent, InputError]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return Err(
            InputError(
                kind="event_unreadable",
                message=f"failed to read event payload: {e}",
                path=path,
            )
        )

    try:
        obj: object = json.loads(text)
    except json.JSONDecodeError as e:
        return Err(
            InputError(
                kind="event_invalid",
                message=f"invalid JSON in event payload: {e}",
                path=path,
            )
        )

    data = as_str_dict(obj)
    if data is None:
        return Err(
            InputError(
                kind="event_invalid",
                message="event payload root must be a JSON object",
                path=path,
            )
        )

    result = event_from_mapping(data)
    if isinstance(result, Err):
        return Err(InputError(kind=result.error.kind, message=result.error.message, path=path))
    return result
