from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal


@dataclass(frozen=True, slots=True)
class InputError:
    """A boundary read failed before validation could start.

    Distinct from a ValidationFailure: the release was never judged.
    """

    kind: Literal["event_unreadable", "event_invalid", "manifest_unreadable", "manifest_invalid"]
    message: str
    path: Path | None = None

    def pretty(self) -> str:
        if self.path is not None:
            return f"{self.message} ({self.path})"
        return self.message
