from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..services.hazard import HazardNotifier


class ContainerKind(Enum):
    """Container variant tag; the value is the type code used in serial numbers."""

    LIQUID = "L"
    GAS = "G"
    REFRIGERATED = "C"


@dataclass(slots=True)
class Container:
    serial_number: str
    kind: ContainerKind

    # Rated capacity (kg); the effective ceiling may be lower depending on kind
    max_capacity_kg: float
    height_cm: float = 0.0
    depth_cm: float = 0.0
    own_weight_kg: float = 0.0

    # Cargo currently on board (kg); changed only by loading_service
    current_load_kg: float = 0.0

    # Variant fields: liquid / gas / refrigerated
    is_hazardous: bool = False
    pressure_atm: float | None = None
    product_type: str | None = None
    temperature_c: float | None = None

    # Hazard capability, attached to liquid and gas containers by the factory
    notifier: HazardNotifier | None = field(default=None, repr=False, compare=False)

    @property
    def type_code(self) -> str:
        return self.kind.value

    @property
    def gross_weight_kg(self) -> float:
        """Tare plus cargo."""
        return self.own_weight_kg + self.current_load_kg

    @property
    def has_hazard_notifier(self) -> bool:
        return self.notifier is not None
