"""
Functionality for using the [crates.io](https://crates.io/data-access) API as a `Registry`.
"""

from __future__ import annotations

import logging

import requests

from version_checker._registry.interface import (
    ConnectionError,
    PackageNotFound,
    Registry,
    RegistryError,
    registry_session,
)

logger = logging.getLogger(__name__)


class CratesIoRegistry(Registry):
    """
    An implementation of `Registry` backed by the crates.io web API.
    """

    DEFAULT_API_URL = "https://crates.io/api/v1/crates"

    def __init__(
        self,
        timeout: int | None = None,
        api_url: str = DEFAULT_API_URL,
        include_yanked: bool = True,
    ) -> None:
        """
        Create a new `CratesIoRegistry`.

        `timeout` is an optional argument to control how many seconds the component should wait
        for responses to network requests.

        `include_yanked` controls whether yanked releases take part in the listing.
        """
        self.session = registry_session()
        self.timeout = timeout
        self.api_url = api_url.rstrip("/")
        self.include_yanked = include_yanked

    def versions(self, name: str) -> list[str]:
        """
        Queries crates.io for the versions published for `name`.

        See `Registry.versions`.
        """
        url = f"{self.api_url}/{name}"

        try:
            response: requests.Response = self.session.get(url=url, timeout=self.timeout)
            response.raise_for_status()
        except requests.TooManyRedirects:
            raise ConnectionError("crates.io is not redirecting properly")
        except (requests.Timeout, requests.ConnectionError):
            raise ConnectionError("Could not connect to crates.io")
        except requests.HTTPError as http_error:
            if response.status_code == 404:
                raise PackageNotFound(f"crate not found on crates.io: {name}") from http_error
            raise RegistryError(f"crates.io request for {name} failed") from http_error
        except requests.RequestException as exc:
            raise ConnectionError(f"crates.io request for {name} failed: {exc}") from exc

        versions: list[str] = []
        try:
            for entry in response.json()["versions"]:
                if not self.include_yanked and entry.get("yanked", False):
                    logger.debug(f"ignoring yanked release {name} {entry['num']}")
                    continue
                versions.append(entry["num"])
        except (ValueError, KeyError, TypeError, AttributeError) as exc:
            raise RegistryError(f"Received malformed response from crates.io for {name}") from exc
        return versions
