"""Car - passenger vehicle with seats and a fuel type."""

from typing import Optional

from .calculations import fuel_factor
from .enums import FuelType, VehicleKind
from .validation import require_member, require_min
from .vehicle import Clock, Vehicle


class Car(Vehicle):
    kind = VehicleKind.CAR

    def __init__(
        self,
        vehicle_id: int,
        license_plate: str,
        make: str,
        model: str,
        year: int,
        seating_capacity: int,
        fuel_type: FuelType,
        mileage: float,
        *,
        purchase_price: float = 0.0,
        clock: Optional[Clock] = None,
    ):
        super().__init__(
            vehicle_id, license_plate, make, model, year, mileage,
            purchase_price=purchase_price, clock=clock,
        )
        self.seating_capacity = seating_capacity
        self.fuel_type = fuel_type

    @property
    def seating_capacity(self) -> int:
        return self._seating_capacity

    @seating_capacity.setter
    def seating_capacity(self, value: int) -> None:
        self._seating_capacity = require_min(
            value, 1, "Seating capacity must be at least 1."
        )

    @property
    def fuel_type(self) -> FuelType:
        return self._fuel_type

    @fuel_type.setter
    def fuel_type(self, value: FuelType) -> None:
        self._fuel_type = require_member(value, FuelType, "Fuel type cannot be empty.")

    def calculate_operating_cost(self) -> float:
        """base 100 + mileage x 0.02 + seats x 5 + fuel factor"""
        return (
            100.0
            + self.mileage * 0.02
            + self.seating_capacity * 5.0
            + fuel_factor(self.fuel_type)
        )

    def describe_specifics(self) -> str:
        return (
            f"Car [{self.license_plate}] - Seats: {self.seating_capacity}, "
            f"Fuel: {self.fuel_type.name}"
        )
