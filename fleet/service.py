"""FleetService - the entry point presentation code uses to reach the fleet."""

import logging
from typing import List, Optional, Tuple

from .driver import Driver
from .fleet import Fleet
from .maintenance import MaintenanceRecord
from .vehicle import Vehicle

logger = logging.getLogger(__name__)


class FleetService:
    """Forwards calls to a Fleet. Holds no state or rules of its own."""

    def __init__(self, fleet: Optional[Fleet] = None):
        self._fleet = fleet if fleet is not None else Fleet()

    @property
    def fleet(self) -> Fleet:
        return self._fleet

    # Queries

    def vehicles(self) -> Tuple[Vehicle, ...]:
        return self._fleet.vehicles

    def drivers(self) -> Tuple[Driver, ...]:
        return self._fleet.drivers

    def find_vehicle(self, license_plate: str) -> Optional[Vehicle]:
        return self._fleet.find_vehicle(license_plate)

    def find_driver(self, license_number: str) -> Optional[Driver]:
        return self._fleet.find_driver(license_number)

    def total_operating_cost(self) -> float:
        return self._fleet.calculate_total_operating_cost()

    def generate_fleet_reports(self) -> List[str]:
        return self._fleet.generate_fleet_reports()

    def get_vehicle_specific_details(self) -> List[str]:
        return self._fleet.get_vehicle_specific_details()

    def get_vehicles_requiring_commercial_license(self) -> List[Vehicle]:
        return self._fleet.get_vehicles_requiring_commercial_license()

    # Commands

    def add_vehicle(self, vehicle: Vehicle) -> None:
        self._fleet.add_vehicle(vehicle)

    def remove_vehicle(self, vehicle: Vehicle) -> bool:
        return self._fleet.remove_vehicle(vehicle)

    def add_driver(self, driver: Driver) -> None:
        self._fleet.add_driver(driver)

    def remove_driver(self, driver: Driver) -> bool:
        logger.debug("Removing driver %s", driver)
        return self._fleet.remove_driver(driver)

    def assign_driver(self, vehicle: Vehicle, driver: Driver) -> None:
        self._fleet.assign_driver(vehicle, driver)

    def release_driver(self, vehicle: Vehicle) -> None:
        logger.debug("Releasing driver from %s", vehicle.license_plate)
        vehicle.release_driver()

    def add_maintenance(self, vehicle: Vehicle, record: MaintenanceRecord) -> None:
        self._fleet.register_maintenance(vehicle, record)
