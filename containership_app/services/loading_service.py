"""
Loading and unloading rules per container kind.

Each kind maps to a ``LoadPolicy`` row; liquid tightens the load ceiling
(further when hazardous) and gas keeps a residual load after unloading.
Refrigerated containers use the base policy.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict

from ..config.limits import (
    EPS,
    GAS_RESIDUAL_FRACTION,
    HAZARDOUS_LIQUID_FILL_FRACTION,
    LIQUID_FILL_FRACTION,
)
from ..models import Container, ContainerKind
from .results import ErrorKind, OperationResult

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LoadPolicy:
    # Fractions of max_capacity_kg
    ceiling_fraction: float = 1.0
    hazardous_ceiling_fraction: float | None = None
    unload_residual_fraction: float = 0.0


BASE_POLICY = LoadPolicy()

LOAD_POLICIES: Dict[ContainerKind, LoadPolicy] = {
    ContainerKind.LIQUID: LoadPolicy(
        ceiling_fraction=LIQUID_FILL_FRACTION,
        hazardous_ceiling_fraction=HAZARDOUS_LIQUID_FILL_FRACTION,
    ),
    ContainerKind.GAS: LoadPolicy(unload_residual_fraction=GAS_RESIDUAL_FRACTION),
    ContainerKind.REFRIGERATED: BASE_POLICY,
}


def policy_for(kind: ContainerKind) -> LoadPolicy:
    return LOAD_POLICIES.get(kind, BASE_POLICY)


def effective_limit(container: Container) -> float:
    """Maximum load (kg) the container may hold under its kind's policy."""
    policy = policy_for(container.kind)
    fraction = policy.ceiling_fraction
    if container.is_hazardous and policy.hazardous_ceiling_fraction is not None:
        fraction = policy.hazardous_ceiling_fraction
    return container.max_capacity_kg * fraction


def load_container(container: Container, weight_kg: float) -> OperationResult:
    """
    Add ``weight_kg`` of cargo to the container.

    The kind's ceiling is checked first, then the rated capacity. On any
    failure the current load is left untouched.
    """
    serial = container.serial_number
    if not math.isfinite(weight_kg) or weight_kg < 0:
        _LOG.warning("Rejected load of %s kg into %s: invalid weight", weight_kg, serial)
        return OperationResult.failure(
            ErrorKind.INVALID_WEIGHT,
            f"Cannot load {weight_kg} kg into container {serial}: weight must be a non-negative number.",
            serial_number=serial,
            value=weight_kg,
        )

    requested = container.current_load_kg + weight_kg

    limit = effective_limit(container)
    if limit < container.max_capacity_kg and requested > limit + EPS:
        _LOG.warning("Rejected load of %.1f kg into %s: ceiling %.1f kg", weight_kg, serial, limit)
        return OperationResult.failure(
            ErrorKind.OVERFILL,
            f"Attempt to overfill container {serial}! Maximum load: {limit:g} kg.",
            serial_number=serial,
            value=requested,
            limit=limit,
        )

    if requested > container.max_capacity_kg + EPS:
        _LOG.warning(
            "Rejected load of %.1f kg into %s: capacity %.1f kg",
            weight_kg,
            serial,
            container.max_capacity_kg,
        )
        return OperationResult.failure(
            ErrorKind.OVERFILL,
            f"Container {serial} overfilled! Maximum capacity is {container.max_capacity_kg:g} kg.",
            serial_number=serial,
            value=requested,
            limit=container.max_capacity_kg,
        )

    container.current_load_kg = requested
    _LOG.info("Loaded %.1f kg into %s (now %.1f kg)", weight_kg, serial, requested)
    return OperationResult.success()


def unload_container(container: Container) -> OperationResult:
    """Empty the container, leaving the kind's residual fraction on board."""
    residual = policy_for(container.kind).unload_residual_fraction
    container.current_load_kg = container.current_load_kg * residual
    _LOG.info("Unloaded %s (residual %.1f kg)", container.serial_number, container.current_load_kg)
    return OperationResult.success()


def describe_container(container: Container) -> str:
    text = (
        f"{container.serial_number} - Load: {container.current_load_kg:g}/{container.max_capacity_kg:g} kg, "
        f"Height: {container.height_cm:g} cm, Depth: {container.depth_cm:g} cm, "
        f"Own weight: {container.own_weight_kg:g} kg"
    )
    if container.kind is ContainerKind.REFRIGERATED:
        product = container.product_type or "n/a"
        temperature = "n/a" if container.temperature_c is None else f"{container.temperature_c:g}°C"
        text += f" - Product: {product}, Temperature: {temperature}"
    return text
