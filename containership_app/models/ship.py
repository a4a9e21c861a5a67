from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .container import Container


@dataclass(slots=True)
class Ship:
    name: str = ""
    max_containers: int = 0
    max_weight_kg: float = 0.0

    # Insertion order is kept for reports and iteration
    containers: List[Container] = field(default_factory=list)

    @property
    def container_count(self) -> int:
        return len(self.containers)

    @property
    def total_load_kg(self) -> float:
        """Aggregate weight: sum of cargo loads currently on board."""
        return sum(c.current_load_kg for c in self.containers)

    def remaining_slots(self) -> int:
        return max(0, self.max_containers - len(self.containers))

    def remaining_weight_kg(self) -> float:
        return max(0.0, self.max_weight_kg - self.total_load_kg)

    def find_container(self, serial_number: str) -> Container | None:
        """First container with the given serial, or None."""
        for container in self.containers:
            if container.serial_number == serial_number:
                return container
        return None

    def serial_numbers(self) -> List[str]:
        return [c.serial_number for c in self.containers]
