"""
Collect declared dependencies from `Cargo.toml` files.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import toml

from version_checker._manifest.interface import (
    DeclaredDependency,
    DependencyKind,
    Manifest,
    ManifestNotFound,
    ManifestParseError,
    ManifestSource,
)

logger = logging.getLogger(__name__)

_SECTIONS = {
    "dependencies": DependencyKind.Runtime,
    "dev-dependencies": DependencyKind.Development,
    "build-dependencies": DependencyKind.Build,
}


class CargoManifestSource(ManifestSource):
    """
    Wraps a `Cargo.toml` file as a manifest source.
    """

    def __init__(self, filename: Path) -> None:
        """
        Create a new `CargoManifestSource`.

        `filename` is the path to a `Cargo.toml` file, or to a directory containing one.
        """
        if filename.is_dir():
            filename = filename / "Cargo.toml"
        self.filename = filename

    def load(self) -> Manifest:
        """
        Load the runtime, development and build dependencies declared by this manifest.

        See `ManifestSource.load`.
        """
        try:
            with self.filename.open("r", encoding="utf-8") as f:
                cargo_data = toml.load(f)
        except OSError as exc:
            raise ManifestNotFound(f"couldn't read manifest {self.filename}: {exc}") from exc
        except (toml.TomlDecodeError, UnicodeDecodeError) as exc:
            raise ManifestParseError(f"malformed manifest {self.filename}: {exc}") from exc

        package = cargo_data.get("package")
        if isinstance(package, dict) and "name" in package:
            name = str(package["name"])
        else:
            # Virtual workspace roots have no `[package]` table.
            logger.debug(f"manifest {self.filename} has no package name")
            name = str(self.filename)

        dependencies: list[DeclaredDependency] = []
        for section, kind in _SECTIONS.items():
            entries = cargo_data.get(section, {})
            if not isinstance(entries, dict):
                raise ManifestParseError(
                    f"manifest {self.filename}: `{section}` should be a table"
                )
            for dep_name, entry in entries.items():
                dependencies.append(self._declared(dep_name, entry, kind))

        return Manifest(name=name, path=self.filename, dependencies=dependencies)

    def _declared(self, name: str, entry: Any, kind: DependencyKind) -> DeclaredDependency:
        if isinstance(entry, str):
            return DeclaredDependency(name=name, specifier=entry, kind=kind)

        if isinstance(entry, dict):
            # Path, git and `workspace = true` dependencies frequently omit `version`.
            version = entry.get("version", "")
            package = entry.get("package")
            return DeclaredDependency(
                name=name,
                specifier=str(version),
                kind=kind,
                package=str(package) if package is not None else None,
            )

        raise ManifestParseError(
            f"manifest {self.filename}: dependency `{name}` has an unsupported declaration"
        )
