"""Pytest configuration and fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure project root is on path when running tests
_project_root = Path(__file__).resolve().parents[2]
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from containership_app.models import Ship
from containership_app.services.container_factory import ContainerFactory
from containership_app.services.serials import SerialNumberGenerator


class RecordingNotifier:
    """Collects hazard messages instead of emitting them."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def factory(notifier):
    """Factory with its own serial generator, so serials start at 1 per test."""
    return ContainerFactory(serials=SerialNumberGenerator(), notifier=notifier)


@pytest.fixture
def sample_ship():
    return Ship(name="OceanKing", max_containers=5, max_weight_kg=10000.0)


@pytest.fixture
def small_ship():
    return Ship(name="Coaster", max_containers=2, max_weight_kg=5000.0)


@pytest.fixture
def loaded_container(factory):
    """Refrigerated container holding the given load, built without loading checks."""

    def _make(load_kg: float, max_capacity_kg: float = 10000.0):
        container = factory.refrigerated(max_capacity_kg, "Bananas", 13.3, 250, 300, 1000)
        container.current_load_kg = load_kg
        return container

    return _make
