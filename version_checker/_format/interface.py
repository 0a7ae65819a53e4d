"""
Interfaces for formatting reports into a string representation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from version_checker._report import Report, SelfUpdate


class ReportFormat(ABC):
    """
    Represents an abstract string representation for version reports.
    """

    @property
    @abstractmethod
    def is_manifest(self) -> bool:  # pragma: no cover
        """
        Is this format a "manifest" format, i.e. one meant to be consumed by other tools
        rather than read in a terminal?

        When a manifest format is selected, the CLI skips its human-oriented stderr output:
        the self-update notice and the closing summary line.
        """
        raise NotImplementedError

    @abstractmethod
    def format(self, report: Report) -> str:  # pragma: no cover
        """
        Convert a report into a string.
        """
        raise NotImplementedError

    def format_self_update(self, update: SelfUpdate) -> str:
        """
        Render the notice shown when a newer release of `version-checker` is available.
        """
        return (
            f"A newer version-checker is available: {update.local} -> {update.remote}. "
            "Upgrade with `pip install --upgrade version-checker`."
        )
