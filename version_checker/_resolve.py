"""
Resolution of registry listings into a "latest" version, and comparison of
classified versions.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from version_checker._semver import InvalidSemVer, SemVer
from version_checker._version_spec import (
    UNSPECIFIED,
    SemanticVersion,
    VersionValue,
    coerce,
)

logger = logging.getLogger(__name__)


def resolve_latest(raw_versions: Iterable[str]) -> VersionValue:
    """
    Pick the highest semantic version out of a registry's listing.

    The registry's own ordering is not trusted. Entries are coerced to three components
    before parsing; entries that still fail to parse are logged and skipped.
    """
    latest: SemVer | None = None
    for raw in raw_versions:
        try:
            candidate = SemVer.parse(coerce(raw.strip()))
        except InvalidSemVer as exc:
            logger.debug(f"skipping malformed registry version {raw!r}: {exc}")
            continue

        if latest is None or candidate > latest:
            latest = candidate

    if latest is None:
        return UNSPECIFIED
    return SemanticVersion(latest)


def is_current(local: VersionValue, remote: VersionValue) -> bool:
    """
    Returns whether `local` is known to match `remote`.

    Only two semantic versions can ever be current: anything opaque or unspecified
    is always reported as needing attention, even when the text is identical.
    """
    if isinstance(local, SemanticVersion) and isinstance(remote, SemanticVersion):
        return local.semver == remote.semver
    return False


def is_behind(local: VersionValue, remote: VersionValue) -> bool:
    """
    Returns whether `local` is strictly older than `remote`.
    """
    if isinstance(local, SemanticVersion) and isinstance(remote, SemanticVersion):
        return local.semver < remote.semver
    return False
