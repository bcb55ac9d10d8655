from __future__ import annotations

from dataclasses import dataclass

from relgate.core.result import Result
from relgate.release.errors import ValidationFailure


# Absent when the manifest declares no usable version.
ManifestVersion = str | None


@dataclass(frozen=True, slots=True)
class ReleaseEvent:
    """The parts of a release event the gate reads."""

    is_draft: bool
    is_prerelease: bool
    raw_tag: str  # e.g. "v1.2.3-beta.1"


@dataclass(frozen=True, slots=True)
class ReleaseOutputs:
    version: str
    # First pre-release identifier ("beta"), or "" for a stable release.
    tag: str

    def as_dict(self) -> dict[str, str]:
        return {"version": self.version, "tag": self.tag}


type ValidationOutcome = Result[ReleaseOutputs, ValidationFailure]
