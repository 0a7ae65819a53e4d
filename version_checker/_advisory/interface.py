"""
Advisory types and the read-only advisory database consumed by the checker.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class AdvisoryVersions:
    """
    The version information attached to an advisory.
    """

    patched: list[str] | None = None
    """
    Specifiers for the releases that contain a fix, e.g. `>= 1.2.3`.

    `None` when the advisory lists version information but no patched releases.
    """


@dataclass(frozen=True)
class Advisory:
    """
    Represents a single security advisory against a package.
    """

    id: str
    """
    The database-provided identifier, e.g. `RUSTSEC-2021-0001`.
    """

    package: str
    """
    The name of the affected package.
    """

    versions: AdvisoryVersions | None = None
    """
    Patch information, if the advisory carries any.
    """


class AdvisoryDatabase(Mapping[str, list[Advisory]]):
    """
    A mapping of package names to the advisories recorded against them.

    The database is built once per run and never mutated afterwards.
    """

    def __init__(self, advisories: Iterable[Advisory] = ()) -> None:
        """
        Create a new `AdvisoryDatabase` from a flat collection of advisories.
        """
        by_package: dict[str, list[Advisory]] = {}
        for advisory in advisories:
            by_package.setdefault(advisory.package, []).append(advisory)
        self._advisories = by_package

    @classmethod
    def empty(cls) -> AdvisoryDatabase:
        """
        An advisory database with no entries.
        """
        return cls()

    def for_package(self, name: str) -> list[Advisory]:
        """
        Returns the advisories for `name`, or an empty list if there are none.
        """
        return list(self._advisories.get(name, []))

    def __getitem__(self, name: str) -> list[Advisory]:
        return list(self._advisories[name])

    def __iter__(self) -> Iterator[str]:
        return iter(self._advisories)

    def __len__(self) -> int:
        return len(self._advisories)


class AdvisoryDatabaseError(Exception):
    """
    Raised when an advisory database cannot be loaded.
    """

    pass
