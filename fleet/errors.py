"""Exception types raised by the fleet domain model."""


class FleetError(Exception):
    """Base class for all fleet errors caused by caller input."""


class InvalidArgumentError(FleetError, ValueError):
    """A value is out of range, blank, or not a member of the expected enum."""


class IllegalStateError(FleetError, RuntimeError):
    """An operation needs something (e.g. a selected vehicle) that is missing."""
