#!/usr/bin/env python3
"""
Command-line view of a vehicle fleet.

Commands:
  vehicles    - List vehicles with operating cost and depreciation
  drivers     - List drivers and the vehicle each one drives
  reports     - Print the report of every vehicle
  details     - Print the type-specific details of every vehicle
  commercial  - List vehicles that need a commercial licence
  cost        - Show total operating and maintenance cost
  history     - View the maintenance history of one vehicle
"""

import argparse
import logging
import os
import sys
from datetime import MAXYEAR, MINYEAR, date
from pathlib import Path
from typing import List, Optional, Sequence

from tabulate import tabulate

from fleet import (
    FleetError,
    FleetService,
    IllegalStateError,
    MaintenanceRecord,
    Vehicle,
    driver_display_name,
    load_fleet,
)

DEFAULT_FLEET_FILE = Path(__file__).parent / "data" / "sample_fleet.yaml"

# =============================================================================
# Formatting helpers
# =============================================================================


def format_money(amount: Optional[float]) -> str:
    """Format a monetary amount for display."""
    return f"${amount:,.2f}" if amount is not None else "-"


def format_km(km: Optional[float]) -> str:
    """Format a distance for display."""
    return f"{km:,.0f}" if km is not None else "-"


def format_percent(fraction: Optional[float]) -> str:
    """Format a 0..1 fraction as a percentage."""
    return f"{fraction * 100:.1f}%" if fraction is not None else "-"


def truncate(text: Optional[str], max_len: int = 30) -> str:
    """Truncate text with ellipsis if too long."""
    if text is None:
        return "-"
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


def driver_name(vehicle: Vehicle) -> str:
    return driver_display_name(vehicle.driver)


def select_vehicle(service: FleetService, plate: Optional[str]) -> Vehicle:
    """Resolve a plate to a tracked vehicle, or raise IllegalStateError."""
    if not plate:
        raise IllegalStateError("No vehicle selected.")
    vehicle = service.find_vehicle(plate)
    if vehicle is None:
        raise IllegalStateError(f"No vehicle with plate '{plate}' in the fleet.")
    return vehicle


# =============================================================================
# Table builders
# =============================================================================


def make_vehicle_table(vehicles: Sequence[Vehicle]) -> List[List[str]]:
    """Convert vehicles to table rows."""
    rows = []
    for v in vehicles:
        rows.append(
            [
                str(v.id),
                v.kind.label,
                v.license_plate,
                v.name,
                format_km(v.mileage),
                driver_name(v),
                format_money(v.calculate_operating_cost()),
                format_percent(v.calculate_depreciation()),
            ]
        )
    return rows


def make_driver_table(service: FleetService) -> List[List[str]]:
    """Convert drivers to table rows, including their current vehicle."""
    rows = []
    for d in service.drivers():
        vehicle = service.fleet.find_vehicle_for_driver(d)
        rows.append(
            [
                d.full_name,
                d.license_number,
                str(d.years_of_experience),
                vehicle.license_plate if vehicle else "-",
            ]
        )
    return rows


def make_history_table(records: Sequence[MaintenanceRecord]) -> List[List[str]]:
    """Convert maintenance records to table rows."""
    return [
        [
            r.date.isoformat(),
            r.type.name.capitalize(),
            truncate(r.description),
            format_money(r.cost),
        ]
        for r in records
    ]


# =============================================================================
# Commands
# =============================================================================


def cmd_vehicles(service: FleetService, args) -> int:
    """List vehicles with operating cost and depreciation."""
    vehicles = service.vehicles()
    print(f"Vehicles: {len(vehicles)}")
    print()
    if not vehicles:
        print("No vehicles in the fleet.")
        return 0
    headers = ["ID", "Type", "Plate", "Vehicle", "Km", "Driver", "Cost", "Depr."]
    print(tabulate(make_vehicle_table(vehicles), headers=headers, tablefmt="simple"))
    return 0


def cmd_drivers(service: FleetService, args) -> int:
    """List drivers and the vehicle each one drives."""
    print(f"Drivers: {len(service.drivers())}")
    print()
    if not service.drivers():
        print("No drivers in the fleet.")
        return 0
    headers = ["Name", "License", "Years", "Vehicle"]
    print(tabulate(make_driver_table(service), headers=headers, tablefmt="simple"))
    return 0


def cmd_reports(service: FleetService, args) -> int:
    """Print the report of every vehicle."""
    reports = service.generate_fleet_reports()
    if not reports:
        print("No vehicles in the fleet.")
        return 0
    print("\n\n".join(reports))
    return 0


def cmd_details(service: FleetService, args) -> int:
    """Print the type-specific details of every vehicle."""
    details = service.get_vehicle_specific_details()
    if not details:
        print("No vehicles in the fleet.")
        return 0
    for line in details:
        print(line)
    return 0


def cmd_commercial(service: FleetService, args) -> int:
    """List vehicles that need a commercial licence."""
    vehicles = service.get_vehicles_requiring_commercial_license()
    print(f"Vehicles requiring a commercial license: {len(vehicles)}")
    print()
    if vehicles:
        headers = ["ID", "Type", "Plate", "Vehicle", "Km", "Driver", "Cost", "Depr."]
        print(tabulate(make_vehicle_table(vehicles), headers=headers, tablefmt="simple"))
    return 0


def cmd_cost(service: FleetService, args) -> int:
    """Show total operating and maintenance cost."""
    print(f"Vehicles: {len(service.vehicles())}")
    print(f"Total operating cost: {format_money(service.total_operating_cost())}")
    print(
        "Total maintenance cost: "
        f"{format_money(service.fleet.total_maintenance_cost())}"
    )
    return 0


def cmd_history(service: FleetService, args) -> int:
    """View the maintenance history of one vehicle."""
    vehicle = select_vehicle(service, args.plate)
    records = vehicle.get_maintenance_history_sorted(reverse=not args.asc)

    print(f"Vehicle: {vehicle.name} [{vehicle.license_plate}]")
    print(f"Mileage: {format_km(vehicle.mileage)} km")
    print(f"Driver: {driver_name(vehicle)}")
    print(f"Total services: {len(records)}")
    if vehicle.total_maintenance_cost > 0:
        print(f"Total cost: {format_money(vehicle.total_maintenance_cost)}")
    print()

    if not records:
        print("No maintenance records found.")
        return 0

    headers = ["Date", "Type", "Description", "Cost"]
    print(tabulate(make_history_table(records), headers=headers, tablefmt="simple"))
    return 0


COMMANDS = {
    "vehicles": cmd_vehicles,
    "drivers": cmd_drivers,
    "reports": cmd_reports,
    "details": cmd_details,
    "commercial": cmd_commercial,
    "cost": cmd_cost,
    "history": cmd_history,
}


# =============================================================================
# Main
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Vehicle fleet viewer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s vehicles
  %(prog)s --fleet-file data/sample_fleet.yaml details
  %(prog)s --as-of-year 2026 vehicles
  %(prog)s history ABC-1234 --asc
""",
    )
    parser.add_argument(
        "--fleet-file",
        type=Path,
        default=Path(os.environ.get("FLEET_FILE", DEFAULT_FLEET_FILE)),
        help="Path to fleet YAML file (default: $FLEET_FILE or the sample fleet)",
    )
    parser.add_argument(
        "--as-of-year",
        type=int,
        help="Calendar year used for depreciation (default: current year)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log output (-v for info, -vv for debug)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("vehicles", help="List vehicles")
    subparsers.add_parser("drivers", help="List drivers")
    subparsers.add_parser("reports", help="Print every vehicle report")
    subparsers.add_parser("details", help="Print type-specific vehicle details")
    subparsers.add_parser(
        "commercial", help="List vehicles requiring a commercial license"
    )
    subparsers.add_parser("cost", help="Show total fleet costs")

    history_parser = subparsers.add_parser(
        "history", help="View maintenance history of a vehicle"
    )
    history_parser.add_argument("plate", type=str, help="License plate")
    history_parser.add_argument(
        "--asc",
        action="store_true",
        help="Oldest first instead of newest first",
    )
    return parser


def configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    if not args.fleet_file.exists():
        print(f"Error: File not found: {args.fleet_file}")
        return 1

    clock = None
    if args.as_of_year is not None:
        if not MINYEAR <= args.as_of_year <= MAXYEAR:
            print(f"Error: --as-of-year must be between {MINYEAR} and {MAXYEAR}")
            return 1
        as_of = date(args.as_of_year, 1, 1)
        clock = lambda: as_of  # noqa: E731

    try:
        service = load_fleet(args.fleet_file, clock=clock)
        return COMMANDS[args.command](service, args)
    except FleetError as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main() or 0)
