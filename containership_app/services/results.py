"""
Operation outcomes for container loading and ship operations.

Operations return an ``OperationResult`` instead of raising; callers that
prefer exceptions can call ``raise_for_error()`` on the result.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    OVERFILL = "overfill"
    CAPACITY_EXCEEDED = "capacity_exceeded"
    WEIGHT_EXCEEDED = "weight_exceeded"
    NOT_FOUND = "not_found"
    INVALID_WEIGHT = "invalid_weight"


@dataclass(slots=True)
class OperationError:
    kind: ErrorKind
    message: str
    serial_number: str | None = None
    value: float | None = None
    limit: float | None = None


@dataclass(slots=True)
class OperationResult:
    ok: bool
    error: OperationError | None = None

    @classmethod
    def success(cls) -> "OperationResult":
        return cls(ok=True)

    @classmethod
    def failure(
        cls,
        kind: ErrorKind,
        message: str,
        serial_number: str | None = None,
        value: float | None = None,
        limit: float | None = None,
    ) -> "OperationResult":
        return cls(
            ok=False,
            error=OperationError(
                kind=kind,
                message=message,
                serial_number=serial_number,
                value=value,
                limit=limit,
            ),
        )

    @property
    def kind(self) -> ErrorKind | None:
        return self.error.kind if self.error else None

    @property
    def message(self) -> str:
        return self.error.message if self.error else ""

    def raise_for_error(self) -> None:
        """Raise the exception matching the error kind; no-op on success."""
        if self.error is None:
            return
        exc_type = _EXCEPTION_BY_KIND[self.error.kind]
        raise exc_type(
            message=self.error.message,
            serial_number=self.error.serial_number,
            limit=self.error.limit,
        )


@dataclass(slots=True)
class ContainerShipError(Exception):
    message: str
    serial_number: str | None = None
    limit: float | None = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


class OverfillError(ContainerShipError):
    """Load would exceed the container's effective limit."""


class CapacityExceededError(ContainerShipError):
    """Ship already carries its maximum number of containers."""


class WeightExceededError(ContainerShipError):
    """Aggregate cargo weight would exceed the ship's maximum."""


class ContainerNotFoundError(ContainerShipError):
    pass


class InvalidWeightError(ContainerShipError):
    pass


class ContainerSpecError(ContainerShipError):
    """Invalid construction parameters for a container."""


class ShipSpecError(ContainerShipError):
    """Invalid construction parameters for a ship."""


_EXCEPTION_BY_KIND = {
    ErrorKind.OVERFILL: OverfillError,
    ErrorKind.CAPACITY_EXCEEDED: CapacityExceededError,
    ErrorKind.WEIGHT_EXCEEDED: WeightExceededError,
    ErrorKind.NOT_FOUND: ContainerNotFoundError,
    ErrorKind.INVALID_WEIGHT: InvalidWeightError,
}
