"""
Progress reporting for long-running checks, plus the terminal spinner the CLI uses.
"""

from __future__ import annotations

import logging
from logging.handlers import MemoryHandler
from typing import Any

from rich.console import Console
from rich.status import Status


class CheckState:
    """
    Receives progress messages while a `Reporter` works through a manifest.

    The base class discards every message, which is what library callers usually want.
    Subclasses hook `start`, `update_state` and `stop` to show progress somewhere.
    """

    def update_state(self, message: str) -> None:
        """
        Called with a short human-readable description of the current step.
        """

    def start(self) -> None:
        pass

    def stop(self) -> None:
        pass

    def __enter__(self) -> CheckState:
        self.start()
        return self

    def __exit__(self, *_exc: Any) -> None:
        self.stop()


class CheckSpinner(CheckState):  # pragma: no cover
    """
    A `rich` status spinner on stderr.

    Log records emitted while the spinner runs are held back and replayed through the
    original root handlers once it stops, so they never tear the spinner line.
    """

    def __init__(self, message: str = "") -> None:
        self._status = Status(message, console=Console(stderr=True), spinner="line")
        # With no target, a capacity of 0 never drops records; they wait for `setTarget`.
        self._held = MemoryHandler(0, target=None, flushOnClose=False)
        self._displaced: list[logging.Handler] = []

    def update_state(self, message: str) -> None:
        self._status.update(message)

    def start(self) -> None:
        root = logging.getLogger()
        self._displaced = list(root.handlers)
        for handler in self._displaced:
            root.removeHandler(handler)
        root.addHandler(self._held)
        self._status.start()

    def stop(self) -> None:
        self._status.stop()

        root = logging.getLogger()
        root.removeHandler(self._held)
        for handler in self._displaced:
            root.addHandler(handler)

        replay = self._displaced[0] if self._displaced else logging.StreamHandler()
        self._held.setTarget(replay)
        self._held.flush()
