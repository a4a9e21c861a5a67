"""
Simple text-based report builder for a ship and its containers.
"""

from __future__ import annotations

from ..models import Ship
from ..services.loading_service import describe_container


def build_ship_summary_text(ship: Ship) -> str:
    lines: list[str] = []
    lines.append(
        f"Ship: {ship.name}, Max containers: {ship.max_containers}, "
        f"Max weight: {ship.max_weight_kg:g} kg"
    )
    lines.append(f"Cargo on board: {ship.total_load_kg:g} kg in {ship.container_count} container(s)")
    lines.append("Containers on board:")
    for container in ship.containers:
        lines.append(describe_container(container))
    return "\n".join(lines)
