"""
Interfaces for loading project manifests, i.e. sources of declared dependencies
and the raw version specifiers they were declared with.
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path


@enum.unique
class DependencyKind(str, enum.Enum):
    """
    The manifest section a dependency was declared in.
    """

    Runtime = "runtime"
    Development = "development"
    Build = "build"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DeclaredDependency:
    """
    A single dependency entry, exactly as the manifest declares it.
    """

    name: str
    """
    The name the dependency is declared under in the manifest.
    """

    specifier: str
    """
    The raw version specifier, or an empty string when none was given.
    """

    kind: DependencyKind = DependencyKind.Runtime

    package: str | None = None
    """
    The registry name, when the dependency is renamed in the manifest.
    """

    @property
    def registry_name(self) -> str:
        """
        The name to look the dependency up under in registries and advisory databases.
        """
        return self.package or self.name


@dataclass(frozen=True)
class Manifest:
    """
    A fully loaded manifest.
    """

    name: str
    path: Path
    dependencies: list[DeclaredDependency] = field(default_factory=list)

    def of_kind(self, kind: DependencyKind) -> list[DeclaredDependency]:
        """
        Returns the dependencies declared in the `kind` section, in declaration order.
        """
        return [dep for dep in self.dependencies if dep.kind is kind]


class ManifestSource(ABC):
    """
    Represents an abstract source of declared dependencies.
    """

    @abstractmethod
    def load(self) -> Manifest:  # pragma: no cover
        """
        Load and return the manifest.

        Raises a `ManifestError` if the manifest is missing or can't be parsed; no partial
        manifest is ever returned.
        """
        raise NotImplementedError


class ManifestError(Exception):
    """
    Raised when a `ManifestSource` fails to provide its dependencies.

    Concrete implementations are expected to subclass this exception to provide more
    context.
    """

    pass


class ManifestNotFound(ManifestError):
    """
    A `ManifestError` for manifests that are missing or unreadable.
    """

    pass


class ManifestParseError(ManifestError):
    """
    A `ManifestError` for manifests that exist but aren't well-formed.
    """

    pass
