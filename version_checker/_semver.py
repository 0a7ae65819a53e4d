"""
A strict [SemVer 2.0.0](https://semver.org/spec/v2.0.0.html) version type.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import total_ordering

_NUMERIC = r"0|[1-9]\d*"
_PRERELEASE_IDENT = r"0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*"
_BUILD_IDENT = r"[0-9a-zA-Z-]+"

_SEMVER_RE = re.compile(
    rf"(?P<major>{_NUMERIC})\.(?P<minor>{_NUMERIC})\.(?P<patch>{_NUMERIC})"
    rf"(?:-(?P<prerelease>(?:{_PRERELEASE_IDENT})(?:\.(?:{_PRERELEASE_IDENT}))*))?"
    rf"(?:\+(?P<build>{_BUILD_IDENT}(?:\.{_BUILD_IDENT})*))?"
)

# A string that would be a valid version core if only it had more components,
# e.g. `1` or `1.2`.
_INCOMPLETE_RE = re.compile(rf"(?:{_NUMERIC})(?:\.(?:{_NUMERIC}))?")


class InvalidSemVer(ValueError):
    """
    Raised when a string is not a valid SemVer 2.0.0 version.
    """

    def __init__(self, version: str, *, incomplete: bool = False) -> None:
        """
        Create a new `InvalidSemVer`.

        `incomplete` is set when the string is a well-formed prefix of a version core
        that is simply missing its trailing components.
        """
        if incomplete:
            msg = f"expected more input: {version!r} has fewer than three components"
        else:
            msg = f"invalid semantic version: {version!r}"
        super().__init__(msg)
        self.version = version
        self.incomplete = incomplete


def _prerelease_key(ident: str) -> tuple[int, int, str]:
    # Numeric identifiers always have lower precedence than alphanumeric ones.
    if ident.isdigit():
        return (0, int(ident), "")
    return (1, 0, ident)


@total_ordering
@dataclass(frozen=True, eq=False)
class SemVer:
    """
    Represents a single, fully-specified semantic version.

    Equality, hashing and ordering follow SemVer precedence rules, which means
    that build metadata is carried along for display but never compared.
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = field(default=())
    build: tuple[str, ...] = field(default=())

    @classmethod
    def parse(cls, version: str) -> SemVer:
        """
        Parse `version` as a strict semantic version.

        Raises `InvalidSemVer` on failure.
        """
        match = _SEMVER_RE.fullmatch(version)
        if match is None:
            raise InvalidSemVer(version, incomplete=bool(_INCOMPLETE_RE.fullmatch(version)))

        prerelease = match.group("prerelease")
        build = match.group("build")
        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            prerelease=tuple(prerelease.split(".")) if prerelease else (),
            build=tuple(build.split(".")) if build else (),
        )

    def _precedence(self) -> tuple:
        # An empty pre-release sorts *after* any non-empty one.
        if not self.prerelease:
            pre: tuple = (1, ())
        else:
            pre = (0, tuple(_prerelease_key(ident) for ident in self.prerelease))
        return (self.major, self.minor, self.patch, pre)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self._precedence() == other._precedence()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self._precedence() < other._precedence()

    def __hash__(self) -> int:
        return hash(self._precedence())

    def __str__(self) -> str:
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += "-" + ".".join(self.prerelease)
        if self.build:
            version += "+" + ".".join(self.build)
        return version
