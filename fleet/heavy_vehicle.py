"""HeavyVehicle - shared base for trucks and buses, which carry a gross weight."""

from typing import Optional

from .calculations import exceeds_commercial_weight
from .validation import require_min
from .vehicle import Clock, Vehicle


class HeavyVehicle(Vehicle):
    """Vehicle with a gross weight (tons) and commercial-licence eligibility."""

    def __init__(
        self,
        vehicle_id: int,
        license_plate: str,
        make: str,
        model: str,
        year: int,
        mileage: float,
        gross_vehicle_weight: float,
        *,
        purchase_price: float = 0.0,
        clock: Optional[Clock] = None,
    ):
        super().__init__(
            vehicle_id, license_plate, make, model, year, mileage,
            purchase_price=purchase_price, clock=clock,
        )
        self.gross_vehicle_weight = gross_vehicle_weight

    @property
    def gross_vehicle_weight(self) -> float:
        return self._gross_vehicle_weight

    @gross_vehicle_weight.setter
    def gross_vehicle_weight(self, value: float) -> None:
        self._gross_vehicle_weight = require_min(
            value, 0, "Gross vehicle weight cannot be negative."
        )

    def requires_commercial_license(self) -> bool:
        return exceeds_commercial_weight(self.gross_vehicle_weight)
