"""
Decide how many of a package's advisories still apply to a local version.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from version_checker._advisory.interface import Advisory
from version_checker._semver import InvalidSemVer, SemVer
from version_checker._version_spec import SemanticVersion, VersionValue, strip_operators

logger = logging.getLogger(__name__)


def _patch_applies(patched: str, local: VersionValue) -> bool:
    # The operators only describe the patched range; they don't narrow the comparison.
    _, candidate = strip_operators(patched)
    try:
        threshold = SemVer.parse(candidate)
    except InvalidSemVer:
        logger.debug(f"unparsable patched version {patched!r}, assuming still vulnerable")
        return True

    if not isinstance(local, SemanticVersion):
        return True
    return threshold > local.semver


def count_applicable(advisories: Iterable[Advisory], local: VersionValue) -> int:
    """
    Count the advisories that may still apply to `local`.

    Anything that can't be verified counts against the package: an advisory without patch
    information, a patched version that can't be parsed, or a local version that isn't
    semantic. Every unmet patched version is counted, so one advisory listing several
    patched releases can contribute several units.
    """
    applicable = 0
    for advisory in advisories:
        if advisory.versions is None or advisory.versions.patched is None:
            applicable += 1
            continue

        for patched in advisory.versions.patched:
            if _patch_applies(patched, local):
                applicable += 1
    return applicable
