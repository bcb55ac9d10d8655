"""Error types for release validation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

FailureKind = Literal[
    "draft",
    "missing_version",
    "invalid_tag",
    "version_mismatch",
    "invalid_semver",
    "prerelease_mismatch",
]


@dataclass(frozen=True, slots=True)
class ValidationFailure:
    """Why a release was rejected.

    ``message`` is the single human-readable reason surfaced to the user;
    ``kind`` lets callers branch without matching on text.
    """

    kind: FailureKind
    message: str

    def pretty(self) -> str:
        return self.message
