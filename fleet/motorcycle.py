"""Motorcycle - light vehicle rated by engine displacement."""

from typing import Optional

from .enums import VehicleKind
from .validation import require_min
from .vehicle import Clock, Vehicle


class Motorcycle(Vehicle):
    kind = VehicleKind.MOTORCYCLE

    def __init__(
        self,
        vehicle_id: int,
        license_plate: str,
        make: str,
        model: str,
        year: int,
        engine_displacement: int,
        mileage: float,
        *,
        purchase_price: float = 0.0,
        clock: Optional[Clock] = None,
    ):
        super().__init__(
            vehicle_id, license_plate, make, model, year, mileage,
            purchase_price=purchase_price, clock=clock,
        )
        self.engine_displacement = engine_displacement

    @property
    def engine_displacement(self) -> int:
        """Displacement in cc."""
        return self._engine_displacement

    @engine_displacement.setter
    def engine_displacement(self, value: int) -> None:
        self._engine_displacement = require_min(
            value, 1, "Engine displacement must be at least 1."
        )

    def calculate_operating_cost(self) -> float:
        """base 60 + mileage x 0.015 + displacement x 0.05"""
        return 60.0 + self.mileage * 0.015 + self.engine_displacement * 0.05

    def describe_specifics(self) -> str:
        return (
            f"Motorcycle [{self.license_plate}] - "
            f"Displacement: {self.engine_displacement} cc"
        )
