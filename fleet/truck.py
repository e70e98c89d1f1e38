"""Truck - freight vehicle rated by payload and axle count."""

from typing import Optional

from .enums import VehicleKind
from .heavy_vehicle import HeavyVehicle
from .validation import require_min
from .vehicle import Clock


class Truck(HeavyVehicle):
    kind = VehicleKind.TRUCK

    def __init__(
        self,
        vehicle_id: int,
        license_plate: str,
        make: str,
        model: str,
        year: int,
        payload_capacity: int,
        axle_count: int,
        mileage: float,
        gross_vehicle_weight: float,
        *,
        purchase_price: float = 0.0,
        clock: Optional[Clock] = None,
    ):
        super().__init__(
            vehicle_id, license_plate, make, model, year, mileage,
            gross_vehicle_weight, purchase_price=purchase_price, clock=clock,
        )
        self.payload_capacity = payload_capacity
        self.axle_count = axle_count

    @property
    def payload_capacity(self) -> int:
        return self._payload_capacity

    @payload_capacity.setter
    def payload_capacity(self, value: int) -> None:
        self._payload_capacity = require_min(
            value, 0, "Payload capacity cannot be negative."
        )

    @property
    def axle_count(self) -> int:
        return self._axle_count

    @axle_count.setter
    def axle_count(self, value: int) -> None:
        self._axle_count = require_min(value, 2, "Axle count must be at least 2.")

    def calculate_operating_cost(self) -> float:
        """base 200 + mileage x 0.03 + payload x 2.5 + axles x 30"""
        return (
            200.0
            + self.mileage * 0.03
            + self.payload_capacity * 2.5
            + self.axle_count * 30.0
        )

    def describe_specifics(self) -> str:
        return (
            f"Truck [{self.license_plate}] - Payload: {self.payload_capacity} tons, "
            f"Axles: {self.axle_count}, Gross Weight: {self.gross_vehicle_weight:.1f} t"
        )
