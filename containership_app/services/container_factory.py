"""
Construction of containers from their configuration-at-construction contract.

The factory owns the serial number generator and the hazard sink, so the
application decides both instead of relying on process-wide state.
"""

from __future__ import annotations

import logging
import math

from ..models import Container, ContainerKind
from .hazard import HazardNotifier, LoggingHazardNotifier
from .results import ContainerSpecError
from .serials import SerialNumberGenerator

_LOG = logging.getLogger(__name__)


class ContainerFactory:
    """Builds liquid, gas and refrigerated containers with fresh serials."""

    def __init__(
        self,
        serials: SerialNumberGenerator | None = None,
        notifier: HazardNotifier | None = None,
    ) -> None:
        self.serials = serials or SerialNumberGenerator()
        self.notifier = notifier or LoggingHazardNotifier()

    def liquid(
        self,
        max_capacity_kg: float,
        is_hazardous: bool,
        height_cm: float,
        depth_cm: float,
        own_weight_kg: float,
    ) -> Container:
        self._validate(max_capacity_kg, height_cm, depth_cm, own_weight_kg)
        return self._build(
            ContainerKind.LIQUID,
            max_capacity_kg,
            height_cm,
            depth_cm,
            own_weight_kg,
            is_hazardous=bool(is_hazardous),
            notifier=self.notifier,
        )

    def gas(
        self,
        max_capacity_kg: float,
        pressure_atm: float,
        height_cm: float,
        depth_cm: float,
        own_weight_kg: float,
    ) -> Container:
        self._validate(max_capacity_kg, height_cm, depth_cm, own_weight_kg)
        return self._build(
            ContainerKind.GAS,
            max_capacity_kg,
            height_cm,
            depth_cm,
            own_weight_kg,
            pressure_atm=float(pressure_atm),
            notifier=self.notifier,
        )

    def refrigerated(
        self,
        max_capacity_kg: float,
        product_type: str,
        temperature_c: float,
        height_cm: float,
        depth_cm: float,
        own_weight_kg: float,
    ) -> Container:
        self._validate(max_capacity_kg, height_cm, depth_cm, own_weight_kg)
        return self._build(
            ContainerKind.REFRIGERATED,
            max_capacity_kg,
            height_cm,
            depth_cm,
            own_weight_kg,
            product_type=product_type,
            temperature_c=float(temperature_c),
        )

    def _build(
        self,
        kind: ContainerKind,
        max_capacity_kg: float,
        height_cm: float,
        depth_cm: float,
        own_weight_kg: float,
        **variant,
    ) -> Container:
        container = Container(
            serial_number=self.serials.next_serial(kind),
            kind=kind,
            max_capacity_kg=float(max_capacity_kg),
            height_cm=float(height_cm),
            depth_cm=float(depth_cm),
            own_weight_kg=float(own_weight_kg),
            **variant,
        )
        _LOG.debug("Created container %s (%s)", container.serial_number, kind.name)
        return container

    @staticmethod
    def _validate(
        max_capacity_kg: float,
        height_cm: float,
        depth_cm: float,
        own_weight_kg: float,
    ) -> None:
        if not math.isfinite(max_capacity_kg) or max_capacity_kg <= 0:
            raise ContainerSpecError("Maximum capacity must be greater than zero.")
        if not (math.isfinite(height_cm) and math.isfinite(depth_cm)) or height_cm < 0 or depth_cm < 0:
            raise ContainerSpecError("Container dimensions must be finite, non-negative numbers.")
        if not math.isfinite(own_weight_kg) or own_weight_kg < 0:
            raise ContainerSpecError("Own weight must be a finite, non-negative number.")
