from __future__ import annotations

import pytest

from relgate.release.semver import SemVer, is_valid, parse, prerelease_identifiers


def test_parse_stable() -> None:
    assert parse("1.2.3") == SemVer(1, 2, 3)
    assert parse("0.0.0") == SemVer(0, 0, 0)


def test_parse_prerelease_and_build() -> None:
    parsed = parse("1.2.3-beta.1+exp.sha.5114f85")
    assert parsed == SemVer(1, 2, 3, ("beta", "1"), ("exp", "sha", "5114f85"))
    assert parsed is not None
    assert parsed.is_prerelease
    assert parsed.core == "1.2.3"
    assert str(parsed) == "1.2.3-beta.1+exp.sha.5114f85"


@pytest.mark.parametrize(
    "text",
    [
        "1.0.0-alpha",
        "1.0.0-0.3.7",
        "1.0.0-x.7.z.92",
        "1.0.0-x-y-z.--",
        "1.0.0-0abc",
        "1.0.0+20130313144700",
        "1.0.0+001",
    ],
)
def test_valid(text: str) -> None:
    assert is_valid(text)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "1",
        "1.2",
        "1.2.3.4",
        "v1.2.3",
        "=1.2.3",
        "01.2.3",
        "1.02.3",
        "1.2.03",
        "1.2.3-01",
        "1.2.3-",
        "1.2.3+",
        "1.2.3-beta..1",
        "1.2.3-beta_1",
        "1.2.3\n",
        " 1.2.3",
        "a.b.c",
    ],
)
def test_invalid(text: str) -> None:
    assert not is_valid(text)


def test_rejects_oversized_versions() -> None:
    assert not is_valid(f"{2**53}.0.0")
    assert is_valid(f"{2**53 - 1}.0.0")
    assert not is_valid("1.2.3-" + "a" * 256)


def test_prerelease_identifiers() -> None:
    assert prerelease_identifiers("1.2.3") == ()
    assert prerelease_identifiers("1.2.3-beta.1.2") == ("beta", "1", "2")
    assert prerelease_identifiers("not semver") == ()
