"""Fleet class - the aggregate of tracked vehicles and drivers."""

import logging
from typing import Iterable, List, Optional, Tuple

from .driver import Driver
from .heavy_vehicle import HeavyVehicle
from .maintenance import MaintenanceRecord
from .vehicle import Vehicle

logger = logging.getLogger(__name__)


def _remove_by_identity(items: list, target) -> bool:
    for i, item in enumerate(items):
        if item is target:
            del items[i]
            return True
    return False


class Fleet:
    """
    Vehicles and drivers tracked together, plus cross-vehicle queries.

    Both collections keep insertion order. The fleet does not own its
    members: a vehicle or driver can be created before it is added and
    keeps existing after it is removed.
    """

    def __init__(
        self,
        vehicles: Optional[Iterable[Vehicle]] = None,
        drivers: Optional[Iterable[Driver]] = None,
    ):
        self._vehicles: List[Vehicle] = [v for v in vehicles or [] if v is not None]
        self._drivers: List[Driver] = [d for d in drivers or [] if d is not None]

    @property
    def vehicles(self) -> Tuple[Vehicle, ...]:
        return tuple(self._vehicles)

    @property
    def drivers(self) -> Tuple[Driver, ...]:
        return tuple(self._drivers)

    def __len__(self) -> int:
        return len(self._vehicles)

    def tracks(self, vehicle: Vehicle) -> bool:
        return any(v is vehicle for v in self._vehicles)

    # -- collection management --

    def add_vehicle(self, vehicle: Optional[Vehicle]) -> None:
        if vehicle is not None:
            self._vehicles.append(vehicle)
            logger.debug("Added vehicle %s", vehicle.license_plate)

    def remove_vehicle(self, vehicle: Vehicle) -> bool:
        """Remove the vehicle. Returns False if it was not tracked."""
        removed = _remove_by_identity(self._vehicles, vehicle)
        if removed:
            logger.debug("Removed vehicle %s", vehicle.license_plate)
        return removed

    def add_driver(self, driver: Optional[Driver]) -> None:
        if driver is not None:
            self._drivers.append(driver)
            logger.debug("Added driver %s", driver.license_number)

    def remove_driver(self, driver: Driver) -> bool:
        """
        Remove the driver, first releasing it from every vehicle it drives.

        Returns False if the driver was not in the fleet.
        """
        for vehicle in self._vehicles:
            if vehicle.driver is driver:
                vehicle.release_driver()
                logger.debug(
                    "Released driver %s from %s",
                    driver.license_number,
                    vehicle.license_plate,
                )
        return _remove_by_identity(self._drivers, driver)

    def assign_driver(self, vehicle: Vehicle, driver: Optional[Driver]) -> None:
        """
        Assign a driver to a vehicle.

        A driver already linked to another vehicle is still assigned; the
        double assignment is only logged.
        """
        if driver is not None:
            current = self.find_vehicle_for_driver(driver)
            if current is not None and current is not vehicle:
                logger.warning(
                    "Driver %s is already assigned to %s; also assigning to %s",
                    driver.license_number,
                    current.license_plate,
                    vehicle.license_plate,
                )
        vehicle.assign_driver(driver)

    def register_maintenance(
        self, vehicle: Optional[Vehicle], record: Optional[MaintenanceRecord]
    ) -> None:
        """Append a record to the vehicle, adding the vehicle if untracked."""
        if vehicle is None or record is None:
            return
        if not self.tracks(vehicle):
            logger.warning(
                "Vehicle %s was not in the fleet; adding it", vehicle.license_plate
            )
            self._vehicles.append(vehicle)
        vehicle.register_maintenance(record)

    # -- lookups --

    def find_vehicle(self, license_plate: str) -> Optional[Vehicle]:
        """Find a vehicle by licence plate (case-insensitive)."""
        wanted = license_plate.strip().lower()
        for vehicle in self._vehicles:
            if vehicle.license_plate.lower() == wanted:
                return vehicle
        return None

    def find_vehicle_by_id(self, vehicle_id: int) -> Optional[Vehicle]:
        for vehicle in self._vehicles:
            if vehicle.id == vehicle_id:
                return vehicle
        return None

    def find_driver(self, license_number: str) -> Optional[Driver]:
        """Find the first driver holding the given licence number."""
        wanted = license_number.strip().lower()
        for driver in self._drivers:
            if driver.license_number.lower() == wanted:
                return driver
        return None

    def find_vehicle_for_driver(self, driver: Driver) -> Optional[Vehicle]:
        """The first vehicle the driver is assigned to, if any."""
        for vehicle in self._vehicles:
            if vehicle.driver is driver:
                return vehicle
        return None

    # -- queries --

    def calculate_total_operating_cost(self) -> float:
        return sum(v.calculate_operating_cost() for v in self._vehicles)

    def total_maintenance_cost(self) -> float:
        return sum(v.total_maintenance_cost for v in self._vehicles)

    def generate_fleet_reports(self) -> List[str]:
        """One report per vehicle, in fleet order."""
        return [v.generate_report() for v in self._vehicles]

    def get_vehicle_specific_details(self) -> List[str]:
        """Variant-specific detail line per vehicle; vehicles without one are skipped."""
        details = []
        for vehicle in self._vehicles:
            line = vehicle.describe_specifics()
            if line is not None:
                details.append(line)
        return details

    def get_vehicles_requiring_commercial_license(self) -> List[Vehicle]:
        """Trucks and buses heavier than the commercial licence threshold."""
        return [
            v
            for v in self._vehicles
            if isinstance(v, HeavyVehicle) and v.requires_commercial_license()
        ]
