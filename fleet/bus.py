"""Bus - passenger heavy vehicle on a city or intercity route."""

from typing import Optional

from .calculations import service_factor
from .enums import ServiceType, VehicleKind
from .heavy_vehicle import HeavyVehicle
from .validation import require_member, require_min
from .vehicle import Clock


class Bus(HeavyVehicle):
    kind = VehicleKind.BUS

    def __init__(
        self,
        vehicle_id: int,
        license_plate: str,
        make: str,
        model: str,
        year: int,
        passenger_capacity: int,
        service_type: ServiceType,
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
        self.passenger_capacity = passenger_capacity
        self.service_type = service_type

    @property
    def passenger_capacity(self) -> int:
        return self._passenger_capacity

    @passenger_capacity.setter
    def passenger_capacity(self, value: int) -> None:
        self._passenger_capacity = require_min(
            value, 1, "Passenger capacity must be at least 1."
        )

    @property
    def service_type(self) -> ServiceType:
        return self._service_type

    @service_type.setter
    def service_type(self, value: ServiceType) -> None:
        self._service_type = require_member(
            value, ServiceType, "Service type cannot be empty."
        )

    def calculate_operating_cost(self) -> float:
        """base 150 + mileage x 0.025 + passengers x 4 + service factor"""
        return (
            150.0
            + self.mileage * 0.025
            + self.passenger_capacity * 4.0
            + service_factor(self.service_type)
        )

    def describe_specifics(self) -> str:
        licence = "Yes" if self.requires_commercial_license() else "No"
        return (
            f"Bus [{self.license_plate}] - Passengers: {self.passenger_capacity}, "
            f"Service: {self.service_type.name}, Commercial License: {licence}"
        )
