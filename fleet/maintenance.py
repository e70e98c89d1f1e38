"""MaintenanceRecord dataclass for service events."""

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from .enums import MaintenanceType


@dataclass(frozen=True)
class MaintenanceRecord:
    """A single service event. Immutable once created."""

    date: date
    type: MaintenanceType
    description: str
    cost: float = 0.0


def total_maintenance_cost(records: Iterable[MaintenanceRecord]) -> float:
    """Sum of the cost of every record."""
    return sum(r.cost for r in records)
