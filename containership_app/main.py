"""
Demo entry point for the containership app.

Builds a small fleet, loads a few containers and prints the ship summary.
Rejected operations are logged and the run continues.
"""

import logging
import sys
from pathlib import Path

from containership_app.config.settings import Settings, init_logging  # type: ignore[import]
from containership_app.models import Ship  # type: ignore[import]
from containership_app.reports import build_ship_summary_text  # type: ignore[import]
from containership_app.services.container_factory import ContainerFactory  # type: ignore[import]
from containership_app.services.hazard import notify_hazard  # type: ignore[import]
from containership_app.services.loading_service import describe_container, load_container  # type: ignore[import]
from containership_app.services.ship_service import add_container, make_ship  # type: ignore[import]

_LOG = logging.getLogger(__name__)


def build_demo_ship(factory: ContainerFactory) -> Ship:
    """OceanKing with a refrigerated, a hazardous liquid and a gas container."""
    ship = make_ship("OceanKing", max_containers=5, max_weight_kg=10000)

    bananas = factory.refrigerated(5000, "Bananas", 13.3, 250, 300, 1000)
    result = load_container(bananas, 2000)
    if result.ok:
        print(f"Loaded cargo: {describe_container(bananas)}")
    else:
        _LOG.error("Error: %s", result.message)

    fuel = factory.liquid(3000, True, 250, 300, 800)
    gas = factory.gas(4000, 2.5, 250, 300, 900)
    notify_hazard(fuel, f"Hazardous liquid container {fuel.serial_number} boarded {ship.name}.")

    for container in (bananas, fuel, gas):
        result = add_container(ship, container)
        if not result.ok:
            _LOG.error("Error: %s", result.message)
            break
    return ship


def main() -> None:
    settings = Settings.default()
    init_logging(settings)

    ship = build_demo_ship(ContainerFactory())
    print(build_ship_summary_text(ship))


if __name__ == "__main__":
    # Allow running as a script: `python -m containership_app.main`
    # or `python containership_app/main.py` (when cwd is project root)
    project_root = Path(__file__).resolve().parents[1]
    if project_root.exists():
        sys.path.insert(0, str(project_root))
    main()
