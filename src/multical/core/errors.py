from __future__ import annotations


class MulticalError(Exception):
    """Base error."""


class InvalidFieldError(MulticalError, ValueError):
    """Raised for an unknown field, style, weekday constant or calendar name."""


class FieldRangeError(MulticalError, ValueError):
    """Raised when a value falls outside the feasible range of its field."""

    def __init__(self, field: int, value: int, minimum: int, maximum: int):
        from .types import field_name

        self.field = field
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"{field_name(field)}={value} is out of feasible range. [Min: {minimum} , Max: {maximum}]"
        )


class ConversionDomainError(MulticalError, ValueError):
    """Raised when a month index outside -11..11 reaches a Gregorian bridge."""
