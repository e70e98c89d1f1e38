"""Vehicle base class - identity, components, driver link and maintenance history."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Callable, List, Optional, Tuple

from .calculations import calc_depreciation, system_clock
from .components import BrakingSystem, Engine, Transmission
from .driver import Driver
from .enums import VehicleKind
from .maintenance import MaintenanceRecord, total_maintenance_cost
from .validation import require_min, require_text

NO_DRIVER = "No Driver"


def driver_display_name(driver: Optional[Driver]) -> str:
    """The driver's name, or NO_DRIVER when unassigned or the name is blank."""
    if driver is None or not (driver.full_name or "").strip():
        return NO_DRIVER
    return driver.full_name


Clock = Callable[[], date]


class Vehicle(ABC):
    """
    Common state and behaviour of every fleet vehicle.

    Subclasses set ``kind`` and implement ``calculate_operating_cost``.
    All numeric attributes are validated on assignment, and the constructor
    goes through the same setters, so an invalid vehicle cannot exist.
    """

    kind: VehicleKind

    def __init__(
        self,
        vehicle_id: int,
        license_plate: str,
        make: str,
        model: str,
        year: int,
        mileage: float,
        *,
        purchase_price: float = 0.0,
        clock: Optional[Clock] = None,
    ):
        self._id = vehicle_id
        self.license_plate = license_plate
        self.make = make
        self.model = model
        self.year = year
        self.mileage = mileage
        self.purchase_price = purchase_price
        self._clock = clock or system_clock

        self.engine = Engine()
        self.transmission = Transmission()
        self.braking_system = BrakingSystem()
        self._maintenance_records: List[MaintenanceRecord] = []
        self._driver: Optional[Driver] = None

    @property
    def id(self) -> int:
        return self._id

    @property
    def license_plate(self) -> str:
        return self._license_plate

    @license_plate.setter
    def license_plate(self, value: str) -> None:
        self._license_plate = require_text(value, "License plate cannot be empty.")

    @property
    def year(self) -> int:
        return self._year

    @year.setter
    def year(self, value: int) -> None:
        self._year = require_min(value, 1, "Year must be a positive number.")

    @property
    def mileage(self) -> float:
        return self._mileage

    @mileage.setter
    def mileage(self, value: float) -> None:
        self._mileage = require_min(value, 0, "Mileage cannot be negative.")

    @property
    def purchase_price(self) -> float:
        return self._purchase_price

    @purchase_price.setter
    def purchase_price(self, value: float) -> None:
        self._purchase_price = require_min(value, 0, "Purchase price cannot be negative.")

    @property
    def name(self) -> str:
        """Human-readable vehicle name."""
        return f"{self.year} {self.make} {self.model}"

    # -- driver assignment --

    @property
    def driver(self) -> Optional[Driver]:
        return self._driver

    @property
    def has_driver(self) -> bool:
        return self._driver is not None

    def assign_driver(self, driver: Optional[Driver]) -> None:
        """Link a driver to this vehicle. None is ignored (does not clear)."""
        if driver is not None:
            self._driver = driver

    def release_driver(self) -> None:
        """Clear the driver link. No-op when no driver is assigned."""
        self._driver = None

    # -- maintenance --

    def register_maintenance(self, record: Optional[MaintenanceRecord]) -> None:
        if record is not None:
            self._maintenance_records.append(record)

    def get_maintenance_history(self) -> Tuple[MaintenanceRecord, ...]:
        """Read-only snapshot of the maintenance history in insertion order."""
        return tuple(self._maintenance_records)

    def get_maintenance_history_sorted(
        self, reverse: bool = False
    ) -> List[MaintenanceRecord]:
        return sorted(self._maintenance_records, key=lambda r: r.date, reverse=reverse)

    @property
    def total_maintenance_cost(self) -> float:
        return total_maintenance_cost(self._maintenance_records)

    # -- financial metrics --

    @abstractmethod
    def calculate_operating_cost(self) -> float:
        """Estimated monthly operating cost."""

    def calculate_depreciation(self) -> float:
        """Fraction of value lost, from age (per the clock) and mileage."""
        age = self._clock().year - self.year
        return calc_depreciation(age, self.mileage)

    @property
    def current_value(self) -> float:
        return self.purchase_price * (1 - self.calculate_depreciation())

    # -- reporting --

    def describe_specifics(self) -> Optional[str]:
        """One-line summary of the variant-specific attributes."""
        return None

    def requires_commercial_license(self) -> bool:
        return False

    def generate_report(self) -> str:
        driver_name = driver_display_name(self._driver)
        return (
            "Vehicle Report\n"
            f"License Plate: {self.license_plate}\n"
            f"Make: {self.make}\n"
            f"Model: {self.model}\n"
            f"Year: {self.year}\n"
            f"Driver: {driver_name}"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, plate={self.license_plate!r})"
