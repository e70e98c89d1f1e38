"""Helper functions and policy constants for cost and depreciation calculations."""

from datetime import date
from typing import Optional

from .enums import FuelType, ServiceType

# Depreciation policy
DEPRECIATION_PER_YEAR = 0.10
MILEAGE_BLOCK_KM = 10000.0
DEPRECIATION_PER_MILEAGE_BLOCK = 0.01
MAX_DEPRECIATION = 0.90

# Heavy vehicles above this gross weight (tons) need a commercial licence
COMMERCIAL_LICENSE_WEIGHT_TONS = 3.5

FUEL_COST_FACTORS = {
    FuelType.ELECTRIC: 10.0,
    FuelType.DIESEL: 25.0,
    FuelType.GASOLINE: 20.0,
    FuelType.HYBRID: 15.0,
}
DEFAULT_FUEL_COST_FACTOR = 15.0

SERVICE_COST_FACTORS = {
    ServiceType.CITY: 40.0,
    ServiceType.INTERCITY: 70.0,
}
DEFAULT_SERVICE_COST_FACTOR = 50.0


def system_clock() -> date:
    """Default time source: today's date."""
    return date.today()


def calc_depreciation(age_years: float, mileage: float) -> float:
    """
    Fraction of the original value lost to age and usage.

    - 10% per year of age
    - 1% per 10,000 km driven
    - Clamped to [0, MAX_DEPRECIATION]
    """
    by_age = age_years * DEPRECIATION_PER_YEAR
    by_mileage = (mileage / MILEAGE_BLOCK_KM) * DEPRECIATION_PER_MILEAGE_BLOCK
    return max(0.0, min(by_age + by_mileage, MAX_DEPRECIATION))


def fuel_factor(fuel_type: Optional[FuelType]) -> float:
    """Car operating-cost surcharge for the given fuel type."""
    return FUEL_COST_FACTORS.get(fuel_type, DEFAULT_FUEL_COST_FACTOR)


def service_factor(service_type: Optional[ServiceType]) -> float:
    """Bus operating-cost surcharge for the given service type."""
    return SERVICE_COST_FACTORS.get(service_type, DEFAULT_SERVICE_COST_FACTOR)


def exceeds_commercial_weight(gross_weight: float) -> bool:
    """True when the weight is strictly above the commercial licence threshold."""
    return gross_weight > COMMERCIAL_LICENSE_WEIGHT_TONS
