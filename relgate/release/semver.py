from __future__ import annotations

import re
from dataclasses import dataclass


_NUM = r"(?:0|[1-9][0-9]*)"
_PRE_IDENT = r"(?:0|[1-9][0-9]*|[0-9]*[A-Za-z-][0-9A-Za-z-]*)"
_BUILD_IDENT = r"[0-9A-Za-z-]+"

_SEMVER_RE = re.compile(
    rf"({_NUM})\.({_NUM})\.({_NUM})"
    rf"(?:-({_PRE_IDENT}(?:\.{_PRE_IDENT})*))?"
    rf"(?:\+({_BUILD_IDENT}(?:\.{_BUILD_IDENT})*))?"
)

# Same limits npm's semver applies before accepting a version.
MAX_LENGTH = 256
MAX_COMPONENT = 2**53 - 1


@dataclass(frozen=True, slots=True)
class SemVer:
    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = ()

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    @property
    def core(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def __str__(self) -> str:
        text = self.core
        if self.prerelease:
            text += "-" + ".".join(self.prerelease)
        if self.build:
            text += "+" + ".".join(self.build)
        return text


def parse(text: str) -> SemVer | None:
    """Parse a strict ``MAJOR.MINOR.PATCH[-prerelease][+build]`` version.

    No leading ``v``, no surrounding whitespace, no leading zeros in numeric
    parts. Returns None for anything else.
    """
    if len(text) > MAX_LENGTH:
        return None
    m = _SEMVER_RE.fullmatch(text)
    if m is None:
        return None
    major, minor, patch = int(m.group(1)), int(m.group(2)), int(m.group(3))
    if max(major, minor, patch) > MAX_COMPONENT:
        return None
    pre = tuple(m.group(4).split(".")) if m.group(4) else ()
    build = tuple(m.group(5).split(".")) if m.group(5) else ()
    return SemVer(major, minor, patch, pre, build)


def is_valid(text: str) -> bool:
    return parse(text) is not None


def prerelease_identifiers(text: str) -> tuple[str, ...]:
    """Dot-separated identifiers after ``-``; empty if none or not semver."""
    parsed = parse(text)
    if parsed is None:
        return ()
    return parsed.prerelease
