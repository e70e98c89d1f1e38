"""Argument checks shared by the validated setters."""

from numbers import Real
from typing import Optional, Type, TypeVar

from .errors import InvalidArgumentError

E = TypeVar("E")


def require_min(value, minimum, message: str):
    """Return value unchanged, or raise if it is not a number or below minimum."""
    # bool is a Real subclass; True must not pass as 1
    if not isinstance(value, Real) or isinstance(value, bool):
        raise InvalidArgumentError(f"{message} Got {value!r}.")
    if value < minimum:
        raise InvalidArgumentError(message)
    return value


def require_text(value: Optional[str], message: str) -> str:
    """Return value unchanged, or raise if it is not a non-blank string."""
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(message)
    return value


def require_member(value, enum_type: Type[E], message: str) -> E:
    """Return value if it is a member of enum_type, otherwise raise."""
    if not isinstance(value, enum_type):
        raise InvalidArgumentError(message)
    return value
