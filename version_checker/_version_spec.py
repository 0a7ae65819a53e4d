"""
Classification of free-form version specifiers into comparable version values.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from version_checker._semver import InvalidSemVer, SemVer

logger = logging.getLogger(__name__)

OPERATOR_CHARS = frozenset(">=<^*~")
"""
Range and wildcard characters that may prefix or decorate a specifier.

They are recorded for display, but play no part in comparisons.
"""

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class VersionValue:
    """
    Represents the classified form of a version string.

    This class cannot be constructed directly; use one of `UnspecifiedVersion`,
    `SemanticVersion` or `OpaqueVersion`.
    """

    def __init__(self, *_args: Any, **_kwargs: Any) -> None:
        """
        A stub constructor that always fails.
        """
        raise NotImplementedError

    def is_specified(self) -> bool:
        """
        Check whether any usable version information was present.
        """
        return self.__class__ is not UnspecifiedVersion

    def display(self) -> str:  # pragma: no cover
        """
        Render this value for human consumption.
        """
        raise NotImplementedError

    def __str__(self) -> str:
        return self.display()


@dataclass(frozen=True)
class UnspecifiedVersion(VersionValue):
    """
    No version information was available.
    """

    def display(self) -> str:
        return NOT_AVAILABLE


@dataclass(frozen=True)
class SemanticVersion(VersionValue):
    """
    A version that parsed as a strict semantic version.
    """

    semver: SemVer

    def display(self) -> str:
        return str(self.semver)


@dataclass(frozen=True)
class OpaqueVersion(VersionValue):
    """
    A non-empty version string that cannot be ordered.
    """

    raw: str

    def display(self) -> str:
        return self.raw


UNSPECIFIED = UnspecifiedVersion()


def strip_operators(raw: str) -> tuple[frozenset[str], str]:
    """
    Split `raw` into the set of operator characters it contains and the remaining
    version text. Plain spaces are dropped and never recorded; any other whitespace is
    left in place.
    """
    operators = frozenset(c for c in raw if c in OPERATOR_CHARS)
    cleaned = "".join(c for c in raw if c not in OPERATOR_CHARS and c != " ")
    return operators, cleaned


def coerce(version: str) -> str:
    """
    Right-pad `version` with zero components until it has three dotted components.

    >>> coerce("1.2")
    '1.2.0'
    """
    pieces = version.split(".")
    while len(pieces) < 3:
        pieces.append("0")
    return ".".join(pieces)


def classify(cleaned: str) -> VersionValue:
    """
    Classify an already-cleaned version string.

    Strings with fewer than three numeric components are coerced before giving up on them.
    """
    try:
        return SemanticVersion(SemVer.parse(cleaned))
    except InvalidSemVer as exc:
        if exc.incomplete:
            try:
                return SemanticVersion(SemVer.parse(coerce(cleaned)))
            except InvalidSemVer:  # pragma: no cover
                pass

    if not cleaned:
        return UNSPECIFIED
    logger.debug(f"treating {cleaned!r} as an opaque version")
    return OpaqueVersion(cleaned)


def parse_specifier(raw: str) -> tuple[frozenset[str], VersionValue]:
    """
    Parse a raw specifier (e.g. `^1.2`, `>= 0.4.1`, `*`) into its operators and
    classified version value.
    """
    operators, cleaned = strip_operators(raw)
    return operators, classify(cleaned)
