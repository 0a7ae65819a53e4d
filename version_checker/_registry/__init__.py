"""
Package registry interfaces and implementations for `version-checker`.
"""

from .crates_io import CratesIoRegistry
from .interface import ConnectionError, PackageNotFound, Registry, RegistryError
from .pypi import PyPIRegistry

__all__ = [
    "ConnectionError",
    "CratesIoRegistry",
    "PackageNotFound",
    "PyPIRegistry",
    "Registry",
    "RegistryError",
]
