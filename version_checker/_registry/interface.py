"""
Interfaces for interacting with package registries, i.e. sources of the
published version listing for a named package.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import requests

from version_checker import __version__

USER_AGENT = f"version-checker/{__version__} (https://github.com/version-checker/version-checker)"


def registry_session() -> requests.Session:
    """
    Return a `requests` session suitable for talking to a package registry.
    """

    # We limit the number of redirects to 5, since the registries we connect to
    # should really never redirect more than once or twice.
    session = requests.Session()
    session.max_redirects = 5
    session.headers["User-Agent"] = USER_AGENT
    return session


class Registry(ABC):
    """
    Represents an abstract package registry.
    """

    @abstractmethod
    def versions(self, name: str) -> list[str]:  # pragma: no cover
        """
        Return every version string published for the package `name`, in whatever order
        the registry supplies them.

        Raises a `RegistryError` on any failure.
        """
        raise NotImplementedError


class RegistryError(Exception):
    """
    Raised when a `Registry` fails, for any reason.

    Concrete implementations of `Registry` are expected to subclass this exception to
    provide more context.
    """

    pass


class ConnectionError(RegistryError):
    """
    A specialization of `RegistryError` specifically for cases where the registry is
    unreachable or offline.
    """

    pass


class PackageNotFound(RegistryError):
    """
    A specialization of `RegistryError` for packages the registry has never heard of.
    """

    pass
