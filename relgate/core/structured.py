"""Helpers for safely working with the untyped JSON/TOML we ingest.

Event payloads and manifests arrive as arbitrary decoded data. These helpers
narrow them at the boundary so the rest of the code sees typed values.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    """Return obj as StrDict if it matches, else None."""
    if is_str_dict(obj):
        return obj
    return None


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    """Get a nested table (dict with string keys) from a mapping."""
    return as_str_dict(table.get(key))


def get_raw_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a non-empty string value exactly as written.

    Unlike a config lookup, whitespace is kept: versions are compared
    byte for byte.
    """
    value = table.get(key)
    if not isinstance(value, str) or value == "":
        return None
    return value
