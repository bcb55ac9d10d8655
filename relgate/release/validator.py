"""Release validation guard chain.

Checks run in a fixed order and the first failing one decides the outcome:

1. the release is not a draft
2. the manifest declares a version
3. the tag starts with ``v``
4. the tag (without ``v``) equals the manifest version, as strings
5. that version is valid semver
6. the pre-release flag agrees with the version's pre-release identifiers

Equality in (4) is deliberately textual: ``1.2.3`` and ``1.2.3+build`` are
different releases here even though semver precedence ignores build metadata.
"""

from __future__ import annotations

from relgate.core.result import Err, Ok
from relgate.release import semver
from relgate.release.errors import ValidationFailure
from relgate.release.model import (
    ManifestVersion,
    ReleaseEvent,
    ReleaseOutputs,
    ValidationOutcome,
)

__all__ = ["ReleaseValidator", "validate_release"]

TAG_PREFIX = "v"


class ReleaseValidator:
    """Validates a release event against the manifest's declared version.

    Holds no state; ``validate`` is a pure function of its arguments.
    """

    def validate(self, event: ReleaseEvent, manifest_version: ManifestVersion) -> ValidationOutcome:
        if event.is_draft:
            return Err(ValidationFailure("draft", "release is a draft; skip publish."))

        if not manifest_version:
            return Err(ValidationFailure("missing_version", "manifest is missing a version."))

        if not event.raw_tag.startswith(TAG_PREFIX):
            return Err(
                ValidationFailure(
                    "invalid_tag",
                    "release tag does not start with `v` (expected form `v1.2.3`).",
                )
            )

        tag_version = event.raw_tag[len(TAG_PREFIX) :]
        if tag_version != manifest_version:
            return Err(
                ValidationFailure(
                    "version_mismatch",
                    "tag does not match manifest version: "
                    f"tag={tag_version}, manifest={manifest_version}.",
                )
            )

        parsed = semver.parse(tag_version)
        if parsed is None:
            return Err(
                ValidationFailure("invalid_semver", "tag/manifest version is not valid semver.")
            )

        identifiers = parsed.prerelease
        if event.is_prerelease and not identifiers:
            return Err(
                ValidationFailure(
                    "prerelease_mismatch",
                    "marked as pre-release but version has no pre-release identifier "
                    "(expected form `1.2.3-beta.1`).",
                )
            )
        if not event.is_prerelease and identifiers:
            return Err(
                ValidationFailure(
                    "prerelease_mismatch",
                    "not marked as pre-release but version has a pre-release identifier.",
                )
            )

        # Only the first identifier: 1.2.3-beta.1.2 publishes under "beta".
        tag = identifiers[0] if event.is_prerelease else ""
        return Ok(ReleaseOutputs(version=tag_version, tag=tag))


_VALIDATOR = ReleaseValidator()


def validate_release(event: ReleaseEvent, manifest_version: ManifestVersion) -> ValidationOutcome:
    return _VALIDATOR.validate(event, manifest_version)
