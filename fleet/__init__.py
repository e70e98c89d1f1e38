"""
Fleet management domain model.

This package provides the vehicle fleet model and its service facade:
- Enums: FuelType, ServiceType, MaintenanceType, TransmissionType, BrakeType, VehicleKind
- Components: Engine, Transmission, BrakingSystem (owned by each vehicle)
- MaintenanceRecord: Immutable service event
- Driver: Person who can be assigned to a vehicle
- Vehicle: Abstract base with Car, Motorcycle and the HeavyVehicle variants Truck, Bus
- Fleet: Aggregate of vehicles and drivers with cross-vehicle queries
- FleetService: Facade used by presentation code
"""

from .errors import FleetError, InvalidArgumentError, IllegalStateError
from .enums import (
    FuelType,
    ServiceType,
    MaintenanceType,
    TransmissionType,
    BrakeType,
    VehicleKind,
)
from .components import Engine, Transmission, BrakingSystem
from .maintenance import MaintenanceRecord, total_maintenance_cost
from .driver import Driver
from .vehicle import Vehicle, NO_DRIVER, driver_display_name
from .heavy_vehicle import HeavyVehicle
from .car import Car
from .truck import Truck
from .bus import Bus
from .motorcycle import Motorcycle
from .fleet import Fleet
from .service import FleetService
from .calculations import (
    calc_depreciation,
    fuel_factor,
    service_factor,
    exceeds_commercial_weight,
)
from .loader import load_fleet

__all__ = [
    "FleetError",
    "InvalidArgumentError",
    "IllegalStateError",
    "FuelType",
    "ServiceType",
    "MaintenanceType",
    "TransmissionType",
    "BrakeType",
    "VehicleKind",
    "Engine",
    "Transmission",
    "BrakingSystem",
    "MaintenanceRecord",
    "total_maintenance_cost",
    "Driver",
    "Vehicle",
    "NO_DRIVER",
    "driver_display_name",
    "HeavyVehicle",
    "Car",
    "Truck",
    "Bus",
    "Motorcycle",
    "Fleet",
    "FleetService",
    "calc_depreciation",
    "fuel_factor",
    "service_factor",
    "exceeds_commercial_weight",
    "load_fleet",
]
