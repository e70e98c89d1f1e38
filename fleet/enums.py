"""Closed value sets used by vehicles, components and maintenance records."""

from enum import Enum

from .errors import InvalidArgumentError


class _ParseableEnum(Enum):
    """Enum whose members can be looked up by name, ignoring case."""

    @classmethod
    def parse(cls, text):
        if isinstance(text, cls):
            return text
        if text is not None:
            key = str(text).strip().upper()
            if key in cls.__members__:
                return cls[key]
        choices = ", ".join(cls.__members__)
        raise InvalidArgumentError(
            f"Invalid {cls.__name__} '{text}' (expected one of: {choices})"
        )


class FuelType(_ParseableEnum):
    """Fuel or energy source of a car."""

    GASOLINE = "GASOLINE"
    DIESEL = "DIESEL"
    ELECTRIC = "ELECTRIC"
    HYBRID = "HYBRID"


class ServiceType(_ParseableEnum):
    """Route a bus is operated on."""

    CITY = "CITY"
    INTERCITY = "INTERCITY"


class MaintenanceType(_ParseableEnum):
    """Category of a maintenance event."""

    PREVENTIVE = "PREVENTIVE"  # scheduled, before a failure
    CORRECTIVE = "CORRECTIVE"  # repair of an existing fault


class TransmissionType(_ParseableEnum):
    MANUAL = "MANUAL"
    AUTOMATIC = "AUTOMATIC"


class BrakeType(_ParseableEnum):
    DISC = "DISC"
    DRUM = "DRUM"


class VehicleKind(_ParseableEnum):
    """Concrete variant tag carried by every vehicle."""

    CAR = "CAR"
    TRUCK = "TRUCK"
    BUS = "BUS"
    MOTORCYCLE = "MOTORCYCLE"

    @property
    def label(self) -> str:
        return self.name.capitalize()
