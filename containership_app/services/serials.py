"""
Serial number issuance for containers.

A generator is an ordinary value owned by the application (usually through a
``ContainerFactory``); two generators never share counters.
"""

from __future__ import annotations

from typing import Dict

from ..config.limits import SERIAL_PREFIX
from ..models import ContainerKind


class SerialNumberGenerator:
    """Issues ``KON-<code>-<n>`` serials with one counter per type code."""

    def __init__(self, prefix: str = SERIAL_PREFIX, start: int = 1) -> None:
        self._prefix = prefix
        self._start = start
        self._next: Dict[str, int] = {}

    def next_serial(self, kind: ContainerKind) -> str:
        code = kind.value
        n = self._next.get(code, self._start)
        self._next[code] = n + 1
        return f"{self._prefix}-{code}-{n}"

    def issued(self, kind: ContainerKind) -> int:
        """Number of serials issued so far for the kind's type code."""
        return self._next.get(kind.value, self._start) - self._start
