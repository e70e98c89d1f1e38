"""YAML loading for fleet bootstrap data."""

import logging
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dateutil.parser import isoparse

from .bus import Bus
from .car import Car
from .driver import Driver
from .enums import FuelType, MaintenanceType, ServiceType, VehicleKind
from .errors import InvalidArgumentError
from .maintenance import MaintenanceRecord
from .motorcycle import Motorcycle
from .service import FleetService
from .truck import Truck
from .vehicle import Clock, Vehicle

logger = logging.getLogger(__name__)


def _parse_date(value: Any) -> date:
    """Accept a YAML date or an ISO-8601 string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return isoparse(str(value)).date()
    except ValueError as e:
        raise InvalidArgumentError(f"Invalid date '{value}'") from e


def _text(value: Any) -> Any:
    """YAML reads plates like 12345 as ints; keep identifiers as strings."""
    return value if value is None or isinstance(value, str) else str(value)


def _cost(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"Invalid cost '{value}'") from e


def _driver_from_dict(dct: Dict[str, Any]) -> Driver:
    return Driver(
        _text(dct["fullName"]),
        _text(dct["licenseNumber"]),
        dct.get("yearsOfExperience", 0),
    )


def _record_from_dict(dct: Dict[str, Any]) -> MaintenanceRecord:
    if not isinstance(dct, dict):
        raise InvalidArgumentError("maintenance entries must be mappings")
    return MaintenanceRecord(
        _parse_date(dct["date"]),
        MaintenanceType.parse(dct["type"]),
        dct.get("description", ""),
        _cost(dct.get("cost", 0.0)),
    )


def _vehicle_from_dict(dct: Dict[str, Any], clock: Optional[Clock]) -> Vehicle:
    """Build the concrete vehicle named by the entry's ``type`` key."""
    kind = VehicleKind.parse(dct.get("type"))
    common = (
        dct["id"],
        _text(dct["licensePlate"]),
        _text(dct["make"]),
        _text(dct["model"]),
        dct["year"],
    )
    options = {"purchase_price": dct.get("purchasePrice", 0.0), "clock": clock}
    mileage = dct.get("mileage", 0)

    if kind is VehicleKind.CAR:
        return Car(
            *common,
            dct["seatingCapacity"],
            FuelType.parse(dct["fuelType"]),
            mileage,
            **options,
        )
    elif kind is VehicleKind.TRUCK:
        return Truck(
            *common,
            dct["payloadCapacity"],
            dct["axleCount"],
            mileage,
            dct["grossVehicleWeight"],
            **options,
        )
    elif kind is VehicleKind.BUS:
        return Bus(
            *common,
            dct["passengerCapacity"],
            ServiceType.parse(dct["serviceType"]),
            mileage,
            dct["grossVehicleWeight"],
            **options,
        )
    return Motorcycle(*common, dct["engineDisplacement"], mileage, **options)


def _entry_label(dct: Any, key: str, index: int) -> str:
    """Name an entry for error messages, validating that it is a mapping."""
    if not isinstance(dct, dict):
        raise InvalidArgumentError(f"Entry #{index} must be a mapping")
    return str(dct.get(key) or f"#{index}")


def load_fleet(
    filename: Union[str, Path],
    service: Optional[FleetService] = None,
    clock: Optional[Clock] = None,
) -> FleetService:
    """
    Load a fleet file into a service.

    Entries are fed to the service in bootstrap order: vehicles, drivers,
    driver assignments, then maintenance records. Any invalid entry raises
    InvalidArgumentError naming the entry.
    """
    service = service if service is not None else FleetService()

    with open(filename, "r") as fp:
        data = yaml.load(fp, Loader=yaml.SafeLoader) or {}

    vehicle_entries = data.get("vehicles") or []
    driver_entries = data.get("drivers") or []

    loaded = []
    for i, dct in enumerate(vehicle_entries):
        label = _entry_label(dct, "licensePlate", i)
        try:
            vehicle = _vehicle_from_dict(dct, clock)
        except KeyError as e:
            raise InvalidArgumentError(f"Vehicle {label}: missing field {e}") from e
        except InvalidArgumentError as e:
            raise InvalidArgumentError(f"Vehicle {label}: {e}") from e
        service.add_vehicle(vehicle)
        loaded.append((vehicle, dct))

    for i, dct in enumerate(driver_entries):
        label = _entry_label(dct, "licenseNumber", i)
        try:
            service.add_driver(_driver_from_dict(dct))
        except KeyError as e:
            raise InvalidArgumentError(f"Driver {label}: missing field {e}") from e
        except InvalidArgumentError as e:
            raise InvalidArgumentError(f"Driver {label}: {e}") from e

    for vehicle, dct in loaded:
        license_number = dct.get("driver")
        if license_number is None:
            continue
        driver = service.find_driver(str(license_number))
        if driver is None:
            raise InvalidArgumentError(
                f"Vehicle {vehicle.license_plate}: unknown driver '{license_number}'"
            )
        service.assign_driver(vehicle, driver)

    for vehicle, dct in loaded:
        for record_dct in dct.get("maintenance") or []:
            try:
                record = _record_from_dict(record_dct)
            except KeyError as e:
                raise InvalidArgumentError(
                    f"Vehicle {vehicle.license_plate}: maintenance missing field {e}"
                ) from e
            except InvalidArgumentError as e:
                raise InvalidArgumentError(
                    f"Vehicle {vehicle.license_plate}: {e}"
                ) from e
            service.add_maintenance(vehicle, record)

    logger.info(
        "Loaded %d vehicles and %d drivers from %s",
        len(vehicle_entries),
        len(driver_entries),
        filename,
    )
    return service
