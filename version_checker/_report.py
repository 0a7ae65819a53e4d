"""
Core reporting APIs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from version_checker._advisory import AdvisoryDatabase, count_applicable
from version_checker._manifest import DeclaredDependency, DependencyKind, ManifestSource
from version_checker._registry import Registry, RegistryError
from version_checker._resolve import is_behind, is_current, resolve_latest
from version_checker._state import CheckState
from version_checker._version_spec import UNSPECIFIED, VersionValue, parse_specifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DependencySpecifier:
    """
    A declared dependency with its specifier classified.
    """

    name: str
    version: VersionValue
    operators: frozenset[str] = frozenset()
    """
    The range and wildcard characters stripped from the raw specifier. These are kept for
    display only.
    """

    @classmethod
    def from_declared(cls, name: str, raw: str) -> DependencySpecifier:
        """
        Classify the raw specifier `raw` declared for `name`.
        """
        operators, version = parse_specifier(raw)
        return cls(name=name, version=version, operators=operators)


@dataclass(frozen=True)
class DependencyFlags:
    """
    The independent conditions a dependency can be in. Any combination may hold at once.
    """

    unspecified: bool
    insecure: bool
    outdated: bool


@dataclass(frozen=True)
class ReportRow:
    """
    The display data for a single dependency.
    """

    name: str
    advisories: int
    local: str
    remote: str


@dataclass(frozen=True)
class DependencyRecord:
    """
    Pairs a classified local specifier with the latest version the registry publishes.
    """

    local: DependencySpecifier
    remote: VersionValue
    kind: DependencyKind = DependencyKind.Runtime
    advisories: int = 0

    @property
    def name(self) -> str:
        return self.local.name

    @property
    def flags(self) -> DependencyFlags:
        return DependencyFlags(
            unspecified=not self.local.version.is_specified(),
            insecure=self.advisories > 0,
            outdated=not is_current(self.local.version, self.remote),
        )

    def row(self) -> ReportRow:
        return ReportRow(
            name=self.name,
            advisories=self.advisories,
            local=self.local.version.display(),
            remote=self.remote.display(),
        )


@dataclass
class ReportTally:
    """
    Running counts for one report.
    """

    up_to_date: int = 0
    out_of_date: int = 0
    insecure: int = 0
    unspecified: int = 0
    advisories: int = 0

    @property
    def total(self) -> int:
        """
        The number of dependencies tallied.
        """
        return self.up_to_date + self.out_of_date

    def add(self, record: DependencyRecord) -> None:
        """
        Account for `record`. Each condition is counted independently of the others.
        """
        flags = record.flags
        if flags.unspecified:
            self.unspecified += 1
        if flags.insecure:
            self.insecure += record.advisories
        self.advisories += record.advisories
        if flags.outdated:
            self.out_of_date += 1
        else:
            self.up_to_date += 1


@dataclass(frozen=True)
class Report:
    """
    The result of checking one manifest.
    """

    manifest: str
    records: list[DependencyRecord] = field(default_factory=list)
    tally: ReportTally = field(default_factory=ReportTally)

    def rows(self) -> list[ReportRow]:
        return [record.row() for record in self.records]


class Reporter:
    """
    The core class of the `version-checker` API.

    For a given registry and advisory database, check every dependency a manifest declares.
    """

    def __init__(
        self,
        registry: Registry,
        advisories: AdvisoryDatabase = AdvisoryDatabase.empty(),
        state: CheckState = CheckState(),
    ) -> None:
        """
        Create a new reporter.

        `advisories` is loaded once by the caller and is only ever read.

        `state` is a `CheckState` to use for state callbacks.
        """
        self._registry = registry
        self._advisories = advisories
        self._state = state

    def remote_version(self, name: str) -> VersionValue:
        """
        Resolve the latest published version of `name`, degrading to unspecified when the
        registry can't be queried.
        """
        try:
            return resolve_latest(self._registry.versions(name))
        except RegistryError as exc:
            logger.warning(f"couldn't fetch published versions of {name}: {exc}")
            return UNSPECIFIED

    def check(self, dep: DeclaredDependency) -> DependencyRecord:
        """
        Build the record for a single declared dependency.
        """
        self._state.update_state(f"Checking {dep.name}")
        local = DependencySpecifier.from_declared(dep.name, dep.specifier)
        remote = self.remote_version(dep.registry_name)
        known = self._advisories.for_package(dep.registry_name)
        advisories = count_applicable(known, local.version)
        logger.debug(f"{dep.name}: local={local.version} remote={remote} advisories={advisories}")
        return DependencyRecord(local=local, remote=remote, kind=dep.kind, advisories=advisories)

    def report(self, source: ManifestSource) -> Report:
        """
        Check every runtime, development and build dependency of the manifest provided by
        `source`.

        A `ManifestError` from `source` propagates to the caller before any registry lookup
        is made.
        """
        manifest = source.load()
        report = Report(manifest=manifest.name)
        for kind in DependencyKind:
            for dep in manifest.of_kind(kind):
                record = self.check(dep)
                report.records.append(record)
                report.tally.add(record)
        return report


@dataclass(frozen=True)
class SelfUpdate:
    """
    A notice that a newer release of the running tool has been published.
    """

    local: VersionValue
    remote: VersionValue


def check_self_update(registry: Registry, current: str, package: str) -> SelfUpdate | None:
    """
    Compare the running tool's version against the newest release `registry` knows for
    `package`, returning a notice only when the local build is behind.
    """
    try:
        remote = resolve_latest(registry.versions(package))
    except RegistryError as exc:
        logger.debug(f"self-update check failed: {exc}")
        return None

    _, local = parse_specifier(current)
    if is_behind(local, remote):
        return SelfUpdate(local=local, remote=remote)
    return None
