"""
Functionality for using the [PyPI](https://warehouse.pypa.io/api-reference/json.html)
JSON API as a `Registry`.
"""

from __future__ import annotations

import logging

import requests
from packaging.utils import canonicalize_name

from version_checker._registry.interface import (
    ConnectionError,
    PackageNotFound,
    Registry,
    RegistryError,
    registry_session,
)

logger = logging.getLogger(__name__)


class PyPIRegistry(Registry):
    """
    An implementation of `Registry` that lists the releases PyPI knows for a project.
    """

    def __init__(self, timeout: int | None = None) -> None:
        """
        Create a new `PyPIRegistry`.

        `timeout` is an optional argument to control how many seconds the component should wait
        for responses to network requests.
        """
        self.session = registry_session()
        self.timeout = timeout

    def versions(self, name: str) -> list[str]:
        """
        Queries PyPI for the releases of the project `name`.

        See `Registry.versions`.
        """
        url = f"https://pypi.org/pypi/{canonicalize_name(name)}/json"

        try:
            response: requests.Response = self.session.get(url=url, timeout=self.timeout)
            response.raise_for_status()
        except requests.TooManyRedirects:
            # This should never happen with a healthy PyPI instance, but might
            # happen during an outage or network event.
            raise ConnectionError("PyPI is not redirecting properly")
        except (requests.Timeout, requests.ConnectionError):
            raise ConnectionError("Could not connect to PyPI")
        except requests.HTTPError as http_error:
            if response.status_code == 404:
                raise PackageNotFound(f"project not found on PyPI: {name}") from http_error
            raise RegistryError(f"PyPI request for {name} failed") from http_error
        except requests.RequestException as exc:
            raise ConnectionError(f"PyPI request for {name} failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise RegistryError(f"Received malformed response from PyPI for {name}") from exc

        releases = payload.get("releases") if isinstance(payload, dict) else None
        if not isinstance(releases, dict):
            raise RegistryError(f"Received malformed response from PyPI for {name}")
        return list(releases)
