import pytest

from version_checker._manifest import DependencyKind
from version_checker._report import DependencyRecord, DependencySpecifier, Report, ReportTally
from version_checker._version_spec import UNSPECIFIED, parse_specifier
from version_checker._resolve import resolve_latest


def _record(name, declared, published, advisories=0, kind=DependencyKind.Runtime):
    operators, local = parse_specifier(declared)
    return DependencyRecord(
        local=DependencySpecifier(name=name, version=local, operators=operators),
        remote=resolve_latest(published) if published is not None else UNSPECIFIED,
        kind=kind,
        advisories=advisories,
    )


def _report(records):
    tally = ReportTally()
    for record in records:
        tally.add(record)
    return Report(manifest="demo", records=records, tally=tally)


@pytest.fixture
def report():
    return _report(
        [
            _record("serde", "1.0", ["1.0.0", "1.0.188"]),
            _record("time", "=0.1.0", ["0.3.0", "0.1.0"], advisories=2),
            _record("helper", "", None),
            _record("cc", ">= 1.0.79", ["1.0.79"], kind=DependencyKind.Build),
        ]
    )


@pytest.fixture
def empty_report():
    return _report([])
