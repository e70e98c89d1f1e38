#!/usr/bin/env python3
"""
Tests for Fleet aggregate.

Covers collection management, driver removal cascade, maintenance upsert,
and the cross-vehicle queries (cost, reports, details, commercial licence).
"""

import logging
from datetime import date

import pytest
from fleet import (
    Bus,
    Car,
    Driver,
    Fleet,
    FuelType,
    MaintenanceRecord,
    MaintenanceType,
    Motorcycle,
    ServiceType,
    Truck,
    Vehicle,
)


class Trailer(Vehicle):
    """A variant with no specific details, used to test skipping."""

    def calculate_operating_cost(self):
        return 10.0


@pytest.fixture
def car():
    return Car(1, "ABC-1234", "Toyota", "Corolla", 2022, 5, FuelType.GASOLINE, 35000)


@pytest.fixture
def truck():
    return Truck(4, "TRK-0001", "Volvo", "FH16", 2020, 25000, 3, 120000, 16.0)


@pytest.fixture
def bus():
    return Bus(6, "BUS-0001", "Mercedes-Benz", "Citaro", 2019, 50, ServiceType.CITY, 95000, 18.0)


@pytest.fixture
def moto():
    return Motorcycle(8, "MOT-0001", "Yamaha", "MT-07", 2023, 689, 8000)


@pytest.fixture
def driver():
    return Driver("Carlos Garcia", "LIC-10001", 8)


@pytest.fixture
def record():
    return MaintenanceRecord(date(2025, 6, 15), MaintenanceType.PREVENTIVE, "Oil change", 120.0)


@pytest.fixture
def fleet(car, truck, bus, moto):
    return Fleet(vehicles=[car, truck, bus, moto])


# =============================================================================
# Collection management
# =============================================================================


class TestFleetCollections:
    """Tests for add/remove of vehicles and drivers."""

    def test_empty_by_default(self):
        fleet = Fleet()
        assert fleet.vehicles == ()
        assert fleet.drivers == ()
        assert len(fleet) == 0

    def test_constructor_copies_input(self, car):
        source = [car]
        fleet = Fleet(source, None)
        source.clear()
        assert fleet.vehicles == (car,)

    def test_constructor_skips_empty_slots(self, car, driver):
        fleet = Fleet([None, car], [driver, None])
        assert fleet.vehicles == (car,)
        assert fleet.drivers == (driver,)
        assert fleet.calculate_total_operating_cost() == pytest.approx(845.0)

    def test_add_vehicle(self, car):
        fleet = Fleet()
        fleet.add_vehicle(car)
        assert fleet.vehicles == (car,)

    def test_add_none_ignored(self):
        fleet = Fleet()
        fleet.add_vehicle(None)
        fleet.add_driver(None)
        assert fleet.vehicles == ()
        assert fleet.drivers == ()

    def test_duplicate_reference_allowed(self, car):
        fleet = Fleet()
        fleet.add_vehicle(car)
        fleet.add_vehicle(car)
        assert len(fleet.vehicles) == 2
        assert fleet.remove_vehicle(car) is True
        assert fleet.vehicles == (car,)

    def test_remove_vehicle(self, fleet, car):
        assert fleet.remove_vehicle(car) is True
        assert car not in fleet.vehicles

    def test_remove_absent_vehicle_returns_false(self, fleet):
        stranger = Car(99, "ZZZ-9999", "Fiat", "Panda", 2010, 4, FuelType.GASOLINE, 0)
        assert fleet.remove_vehicle(stranger) is False
        assert len(fleet) == 4

    def test_removed_vehicle_keeps_existing(self, fleet, car):
        fleet.remove_vehicle(car)
        assert car.calculate_operating_cost() == pytest.approx(845.0)

    def test_collections_are_read_only(self, fleet, car):
        with pytest.raises(AttributeError):
            fleet.vehicles.append(car)

    def test_add_and_remove_driver(self, driver):
        fleet = Fleet()
        fleet.add_driver(driver)
        assert fleet.drivers == (driver,)
        assert fleet.remove_driver(driver) is True
        assert fleet.drivers == ()

    def test_remove_absent_driver_returns_false(self, driver):
        assert Fleet().remove_driver(driver) is False


class TestRemoveDriverReleasesAssignment:
    """Removing a driver must clear its vehicle link."""

    def test_assigned_driver_released(self, fleet, car, driver):
        fleet.add_driver(driver)
        car.assign_driver(driver)

        assert fleet.remove_driver(driver) is True

        assert car.driver is None
        assert car.generate_report().endswith("Driver: No Driver")
        assert driver not in fleet.drivers

    def test_released_from_every_vehicle(self, fleet, car, truck, driver):
        fleet.add_driver(driver)
        car.assign_driver(driver)
        truck.assign_driver(driver)
        fleet.remove_driver(driver)
        assert car.driver is None
        assert truck.driver is None

    def test_other_assignments_untouched(self, fleet, car, truck, driver):
        other = Driver("Maria Lopez", "LIC-10002", 12)
        fleet.add_driver(driver)
        fleet.add_driver(other)
        car.assign_driver(driver)
        truck.assign_driver(other)
        fleet.remove_driver(driver)
        assert truck.driver is other


class TestAssignDriver:
    def test_assigns(self, fleet, car, driver):
        fleet.assign_driver(car, driver)
        assert car.driver is driver

    def test_double_assignment_allowed_and_logged(self, fleet, car, truck, driver, caplog):
        fleet.assign_driver(car, driver)
        with caplog.at_level(logging.WARNING, logger="fleet.fleet"):
            fleet.assign_driver(truck, driver)
        assert car.driver is driver
        assert truck.driver is driver
        assert "already assigned" in caplog.text

    def test_find_vehicle_for_driver(self, fleet, truck, driver):
        assert fleet.find_vehicle_for_driver(driver) is None
        fleet.assign_driver(truck, driver)
        assert fleet.find_vehicle_for_driver(driver) is truck


# =============================================================================
# Maintenance
# =============================================================================


class TestRegisterMaintenance:
    def test_appends_to_tracked_vehicle(self, fleet, car, record):
        fleet.register_maintenance(car, record)
        assert car.get_maintenance_history() == (record,)
        assert len(fleet) == 4

    def test_untracked_vehicle_is_added(self, record):
        fleet = Fleet()
        car = Car(2, "DEF-5678", "Tesla", "Model 3", 2023, 5, FuelType.ELECTRIC, 12000)
        fleet.register_maintenance(car, record)
        assert fleet.vehicles == (car,)
        assert car.get_maintenance_history() == (record,)

    def test_upsert_happens_once(self, record):
        fleet = Fleet()
        car = Car(2, "DEF-5678", "Tesla", "Model 3", 2023, 5, FuelType.ELECTRIC, 12000)
        fleet.register_maintenance(car, record)
        fleet.register_maintenance(car, record)
        assert len(fleet) == 1
        assert len(car.get_maintenance_history()) == 2

    def test_none_vehicle_or_record_is_noop(self, car, record):
        fleet = Fleet()
        fleet.register_maintenance(None, record)
        fleet.register_maintenance(car, None)
        assert fleet.vehicles == ()
        assert car.get_maintenance_history() == ()

    def test_total_maintenance_cost(self, fleet, car, truck, record):
        fleet.register_maintenance(car, record)
        fleet.register_maintenance(
            truck,
            MaintenanceRecord(date(2026, 1, 5), MaintenanceType.PREVENTIVE, "Inspection", 600.0),
        )
        assert fleet.total_maintenance_cost() == 720.0


# =============================================================================
# Lookups
# =============================================================================


class TestLookups:
    def test_find_vehicle_by_plate(self, fleet, bus):
        assert fleet.find_vehicle("bus-0001") is bus
        assert fleet.find_vehicle("NOPE") is None

    def test_find_vehicle_by_id(self, fleet, moto):
        assert fleet.find_vehicle_by_id(8) is moto
        assert fleet.find_vehicle_by_id(42) is None

    def test_find_driver(self, driver):
        fleet = Fleet(drivers=[driver])
        assert fleet.find_driver("lic-10001") is driver
        assert fleet.find_driver("LIC-0") is None


# =============================================================================
# Queries
# =============================================================================


class TestTotalOperatingCost:
    def test_empty_fleet(self):
        assert Fleet().calculate_total_operating_cost() == 0

    def test_sums_every_variant(self, fleet):
        """845 + 66390 + 2765 + 214.45."""
        assert fleet.calculate_total_operating_cost() == pytest.approx(70214.45)


class TestGenerateFleetReports:
    def test_one_report_per_vehicle_in_order(self, fleet, car, truck, bus, moto):
        reports = fleet.generate_fleet_reports()
        assert len(reports) == 4
        assert all(r is not None for r in reports)
        assert reports == [v.generate_report() for v in (car, truck, bus, moto)]

    def test_reflects_driver(self, fleet, car, driver):
        car.assign_driver(driver)
        assert fleet.generate_fleet_reports()[0].endswith("Driver: Carlos Garcia")


class TestVehicleSpecificDetails:
    def test_line_per_variant(self, fleet):
        assert fleet.get_vehicle_specific_details() == [
            "Car [ABC-1234] - Seats: 5, Fuel: GASOLINE",
            "Truck [TRK-0001] - Payload: 25000 tons, Axles: 3, Gross Weight: 16.0 t",
            "Bus [BUS-0001] - Passengers: 50, Service: CITY, Commercial License: Yes",
            "Motorcycle [MOT-0001] - Displacement: 689 cc",
        ]

    def test_unknown_variant_skipped(self, car):
        fleet = Fleet([Trailer(10, "TRL-0001", "Krone", "Cool", 2018, 0), car])
        assert fleet.get_vehicle_specific_details() == [
            "Car [ABC-1234] - Seats: 5, Fuel: GASOLINE"
        ]


class TestCommercialLicense:
    def test_only_heavy_vehicles_above_threshold(self, fleet, truck, bus):
        assert fleet.get_vehicles_requiring_commercial_license() == [truck, bus]

    def test_threshold_is_strict(self):
        light = Truck(5, "TRK-0002", "Isuzu", "N35", 2021, 1000, 2, 0, 3.5)
        heavier = Truck(6, "TRK-0003", "Isuzu", "N75", 2021, 3000, 2, 0, 3.51)
        fleet = Fleet([light, heavier])
        assert fleet.get_vehicles_requiring_commercial_license() == [heavier]

    def test_light_variants_never_included(self, car, moto):
        assert Fleet([car, moto]).get_vehicles_requiring_commercial_license() == []
