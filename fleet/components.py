"""Engine, transmission and braking system owned by each vehicle."""

from typing import Optional

from .enums import BrakeType, TransmissionType
from .validation import require_member, require_min, require_text


class Engine:
    """Engine description. All fields are optional until configured."""

    def __init__(
        self,
        engine_type: Optional[str] = None,
        displacement: Optional[str] = None,
        horsepower: Optional[str] = None,
    ):
        self._engine_type = None
        self._displacement = None
        self._horsepower = None
        if engine_type is not None:
            self.engine_type = engine_type
        if displacement is not None:
            self.displacement = displacement
        if horsepower is not None:
            self.horsepower = horsepower

    @property
    def engine_type(self) -> Optional[str]:
        return self._engine_type

    @engine_type.setter
    def engine_type(self, value: str) -> None:
        self._engine_type = require_text(value, "Engine type cannot be empty.")

    @property
    def displacement(self) -> Optional[str]:
        return self._displacement

    @displacement.setter
    def displacement(self, value: str) -> None:
        self._displacement = require_text(value, "Displacement cannot be empty.")

    @property
    def horsepower(self) -> Optional[str]:
        return self._horsepower

    @horsepower.setter
    def horsepower(self, value: str) -> None:
        self._horsepower = require_text(value, "Horsepower cannot be empty.")

    @property
    def is_configured(self) -> bool:
        return self._engine_type is not None


class Transmission:
    """Gearbox: number of gears and shift type."""

    def __init__(
        self,
        number_of_gears: Optional[int] = None,
        transmission_type: Optional[TransmissionType] = None,
    ):
        self._number_of_gears = None
        self._transmission_type = None
        if number_of_gears is not None:
            self.number_of_gears = number_of_gears
        if transmission_type is not None:
            self.transmission_type = transmission_type

    @property
    def number_of_gears(self) -> Optional[int]:
        return self._number_of_gears

    @number_of_gears.setter
    def number_of_gears(self, value: int) -> None:
        self._number_of_gears = require_min(
            value, 1, "Number of gears must be at least 1."
        )

    @property
    def transmission_type(self) -> Optional[TransmissionType]:
        return self._transmission_type

    @transmission_type.setter
    def transmission_type(self, value: TransmissionType) -> None:
        self._transmission_type = require_member(
            value, TransmissionType, "Transmission type cannot be empty."
        )


class BrakingSystem:
    """Brake mechanism and a free-text condition note."""

    def __init__(
        self, brake_type: Optional[BrakeType] = None, status: Optional[str] = None
    ):
        self._brake_type = None
        if brake_type is not None:
            self.brake_type = brake_type
        self.status = status

    @property
    def brake_type(self) -> Optional[BrakeType]:
        return self._brake_type

    @brake_type.setter
    def brake_type(self, value: BrakeType) -> None:
        self._brake_type = require_member(value, BrakeType, "Brake type cannot be empty.")
