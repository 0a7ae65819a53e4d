from pathlib import Path

import pytest

from version_checker._advisory import Advisory, AdvisoryDatabase, AdvisoryVersions
from version_checker._manifest import DeclaredDependency, Manifest, ManifestSource
from version_checker._registry import PackageNotFound, Registry


def pytest_addoption(parser):
    parser.addoption(
        "--skip-online", action="store_true", help="skip tests that require network connectivity"
    )


def pytest_runtest_setup(item):
    if "online" in item.keywords and item.config.getoption("--skip-online"):
        pytest.skip("skipping test that requires network connectivity due to `--skip-online` flag")


def pytest_configure(config):
    config.addinivalue_line("markers", "online: mark test as requiring network connectivity")


@pytest.fixture
def registry():
    # A dummy registry that only knows about the packages it's constructed with.
    class StaticRegistry(Registry):
        def __init__(self, listings):
            self.listings = listings
            self.lookups = []

        def versions(self, name):
            self.lookups.append(name)
            if name not in self.listings:
                raise PackageNotFound(f"no such package: {name}")
            return list(self.listings[name])

    return StaticRegistry


@pytest.fixture
def manifest_source():
    def _manifest_source(*deps, name="demo"):
        class Source(ManifestSource):
            def load(self):
                return Manifest(name=name, path=Path("Cargo.toml"), dependencies=list(deps))

        return Source()

    return _manifest_source


@pytest.fixture
def declared():
    def _declared(name, specifier, **kwargs):
        return DeclaredDependency(name=name, specifier=specifier, **kwargs)

    return _declared


@pytest.fixture
def advisory():
    def _advisory(package="foo", patched=None, *, versions=True, id="RUSTSEC-0000-0000"):
        return Advisory(
            id=id,
            package=package,
            versions=AdvisoryVersions(patched=patched) if versions else None,
        )

    return _advisory


@pytest.fixture
def advisory_db(advisory):
    return AdvisoryDatabase(
        [
            advisory("insecure", [">= 2.0.0"], id="RUSTSEC-2020-0001"),
            advisory("unpatched", versions=False, id="RUSTSEC-2020-0002"),
        ]
    )
