"""Driver class for people who can be assigned to a vehicle."""

from .validation import require_min


class Driver:
    """A licensed driver. Identity is by reference, not by licence number."""

    def __init__(self, full_name: str, license_number: str, years_of_experience: int = 0):
        self.full_name = full_name
        self.license_number = license_number
        self.years_of_experience = years_of_experience

    @property
    def years_of_experience(self) -> int:
        return self._years_of_experience

    @years_of_experience.setter
    def years_of_experience(self, value: int) -> None:
        self._years_of_experience = require_min(
            value, 0, "Years of experience cannot be negative."
        )

    def __str__(self) -> str:
        return f"{self.full_name} ({self.license_number})"

    def __repr__(self) -> str:
        return f"Driver({self.full_name!r}, {self.license_number!r})"
