"""
Ship capacity management: add, remove, replace and transfer containers.

Ship invariants (container count and aggregate cargo weight) are checked at
the moment a container is added. Replace and transfer validate the add
against the target ship before anything is removed, so a rejected operation
leaves every ship unchanged.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Iterable, List

from ..config.limits import EPS
from ..models import Container, Ship
from .results import ErrorKind, OperationResult, ShipSpecError

_LOG = logging.getLogger(__name__)


@dataclass(slots=True)
class ContainerSummary:
    serial_number: str
    type_code: str
    current_load_kg: float
    max_capacity_kg: float
    height_cm: float
    depth_cm: float
    own_weight_kg: float
    is_hazardous: bool = False
    pressure_atm: float | None = None
    product_type: str | None = None
    temperature_c: float | None = None


@dataclass(slots=True)
class ShipManifest:
    name: str
    max_containers: int
    max_weight_kg: float
    total_load_kg: float
    containers: List[ContainerSummary] = field(default_factory=list)

    @property
    def container_count(self) -> int:
        return len(self.containers)


def make_ship(name: str, max_containers: int, max_weight_kg: float) -> Ship:
    if not name.strip():
        raise ShipSpecError("Ship name is required.")
    if max_containers < 0:
        raise ShipSpecError("Maximum container count cannot be negative.")
    if not math.isfinite(max_weight_kg) or max_weight_kg < 0:
        raise ShipSpecError("Maximum weight must be a finite, non-negative number.")
    return Ship(name=name, max_containers=int(max_containers), max_weight_kg=float(max_weight_kg))


def check_can_add(
    ship: Ship,
    container: Container,
    *,
    leaving: Iterable[Container] = (),
) -> OperationResult:
    """
    Check whether ``container`` may be added without mutating anything.

    ``leaving`` are containers that leave the ship in the same operation;
    they do not count against the ship's limits.
    """
    leaving_ids = {id(c) for c in leaving}
    staying = [c for c in ship.containers if id(c) not in leaving_ids]

    if len(staying) >= ship.max_containers:
        return OperationResult.failure(
            ErrorKind.CAPACITY_EXCEEDED,
            f"Ship {ship.name} has reached its maximum of {ship.max_containers} containers!",
            serial_number=container.serial_number,
            value=float(len(staying) + 1),
            limit=float(ship.max_containers),
        )

    total_weight = sum(c.current_load_kg for c in staying) + container.current_load_kg
    if total_weight > ship.max_weight_kg + EPS:
        return OperationResult.failure(
            ErrorKind.WEIGHT_EXCEEDED,
            f"Ship {ship.name} cannot carry more cargo! "
            f"{total_weight:g} kg exceeds the maximum of {ship.max_weight_kg:g} kg.",
            serial_number=container.serial_number,
            value=total_weight,
            limit=ship.max_weight_kg,
        )
    return OperationResult.success()


def add_container(ship: Ship, container: Container) -> OperationResult:
    result = check_can_add(ship, container)
    if not result.ok:
        _LOG.warning("Rejected %s on %s: %s", container.serial_number, ship.name, result.message)
        return result
    ship.containers.append(container)
    _LOG.info("Added %s to %s (%d/%d)", container.serial_number, ship.name, ship.container_count, ship.max_containers)
    return result


def remove_container(ship: Ship, serial_number: str) -> int:
    """Remove every container with the serial; returns how many were removed."""
    before = len(ship.containers)
    ship.containers[:] = [c for c in ship.containers if c.serial_number != serial_number]
    removed = before - len(ship.containers)
    if removed:
        _LOG.info("Removed %d container(s) %s from %s", removed, serial_number, ship.name)
    return removed


def replace_container(ship: Ship, serial_number: str, new_container: Container) -> OperationResult:
    """
    Swap every container with ``serial_number`` for ``new_container``.

    The new container is validated as if the old ones had already left; on
    rejection the ship is unchanged. A missing serial behaves like a plain add.
    """
    outgoing = [c for c in ship.containers if c.serial_number == serial_number]
    result = check_can_add(ship, new_container, leaving=outgoing)
    if not result.ok:
        _LOG.warning(
            "Rejected replacement of %s by %s on %s: %s",
            serial_number,
            new_container.serial_number,
            ship.name,
            result.message,
        )
        return result

    remove_container(ship, serial_number)
    ship.containers.append(new_container)
    _LOG.info("Replaced %s by %s on %s", serial_number, new_container.serial_number, ship.name)
    return result


def transfer_container(from_ship: Ship, to_ship: Ship, serial_number: str) -> OperationResult:
    """
    Move the container with ``serial_number`` from one ship to another.

    The add is validated on ``to_ship`` before the container leaves
    ``from_ship``; on rejection both ships are unchanged.
    """
    container = from_ship.find_container(serial_number)
    if container is None:
        _LOG.warning("Transfer failed: %s is not on %s", serial_number, from_ship.name)
        return OperationResult.failure(
            ErrorKind.NOT_FOUND,
            f"Container {serial_number} is not on ship {from_ship.name}.",
            serial_number=serial_number,
        )

    if from_ship is to_ship:
        return OperationResult.success()

    result = check_can_add(to_ship, container)
    if not result.ok:
        _LOG.warning(
            "Rejected transfer of %s from %s to %s: %s",
            serial_number,
            from_ship.name,
            to_ship.name,
            result.message,
        )
        return result

    from_ship.containers[:] = [c for c in from_ship.containers if c is not container]
    to_ship.containers.append(container)
    _LOG.info("Transferred %s from %s to %s", serial_number, from_ship.name, to_ship.name)
    return result


def summarize_container(container: Container) -> ContainerSummary:
    return ContainerSummary(
        serial_number=container.serial_number,
        type_code=container.type_code,
        current_load_kg=container.current_load_kg,
        max_capacity_kg=container.max_capacity_kg,
        height_cm=container.height_cm,
        depth_cm=container.depth_cm,
        own_weight_kg=container.own_weight_kg,
        is_hazardous=container.is_hazardous,
        pressure_atm=container.pressure_atm,
        product_type=container.product_type,
        temperature_c=container.temperature_c,
    )


def ship_manifest(ship: Ship) -> ShipManifest:
    """Read-only snapshot of the ship and its containers in insertion order."""
    return ShipManifest(
        name=ship.name,
        max_containers=ship.max_containers,
        max_weight_kg=ship.max_weight_kg,
        total_load_kg=ship.total_load_kg,
        containers=[summarize_container(c) for c in ship.containers],
    )
