"""
Hazard notification sinks.

Liquid and gas containers carry a notifier; the surrounding application picks
the sink (log, console or an alerting integration).
"""

from __future__ import annotations

import logging
import sys
from typing import Protocol, TextIO

from ..models import Container

_LOG = logging.getLogger(__name__)


class HazardNotifier(Protocol):
    def notify(self, message: str) -> None:
        ...


class LoggingHazardNotifier:
    """Default sink: a WARNING record on the hazard logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or _LOG

    def notify(self, message: str) -> None:
        self._logger.warning("[HAZARD] %s", message)


class ConsoleHazardNotifier:
    """Prints hazard messages, as the console driver does."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def notify(self, message: str) -> None:
        print(f"[WARNING] {message}", file=self._stream or sys.stdout)


def notify_hazard(container: Container, message: str) -> bool:
    """
    Send a hazard message through the container's notifier.

    Returns False when the container has no hazard capability (refrigerated
    containers); the container itself is never modified.
    """
    notifier = container.notifier
    if notifier is None:
        return False
    notifier.notify(message)
    return True
