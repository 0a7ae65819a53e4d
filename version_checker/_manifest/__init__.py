"""
Manifest loading interfaces and implementations for `version-checker`.
"""

from .cargo import CargoManifestSource
from .interface import (
    DeclaredDependency,
    DependencyKind,
    Manifest,
    ManifestError,
    ManifestNotFound,
    ManifestParseError,
    ManifestSource,
)

__all__ = [
    "CargoManifestSource",
    "DeclaredDependency",
    "DependencyKind",
    "Manifest",
    "ManifestError",
    "ManifestNotFound",
    "ManifestParseError",
    "ManifestSource",
]
