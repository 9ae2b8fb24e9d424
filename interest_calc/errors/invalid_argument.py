"""
Invalid-argument error classifications for interest calculations.

These exceptions identify which input of a calculation was rejected. They
subclass ValueError so callers unaware of this hierarchy still catch them.
"""

from typing import Optional, Dict, Any


class InvalidArgumentError(ValueError):
    """Base class for rejected calculator inputs."""

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Any = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.value = value
        self.context = context or {}
        self.recoverable = False


class InvalidPrincipalError(InvalidArgumentError):
    """Principal amount below zero."""

    def __init__(self, value: Any, **kwargs):
        super().__init__("Principal amount cannot be negative",
                         field="principal", value=value, **kwargs)


class InvalidRateError(InvalidArgumentError):
    """Annual interest rate below zero."""

    def __init__(self, value: Any, **kwargs):
        super().__init__("Interest rate cannot be negative",
                         field="rate", value=value, **kwargs)


class InvalidTimeError(InvalidArgumentError):
    """Time period below zero."""

    def __init__(self, value: Any, **kwargs):
        super().__init__("Time period cannot be negative",
                         field="time", value=value, **kwargs)


class InvalidFrequencyError(InvalidArgumentError):
    """Compounding frequency of zero or less, or not a whole number."""

    def __init__(self, value: Any,
                 message: str = "Compounding frequency must be positive", **kwargs):
        super().__init__(message, field="frequency", value=value, **kwargs)


class InvalidDecimalPlacesError(InvalidArgumentError):
    """Negative rounding precision."""

    def __init__(self, value: Any, **kwargs):
        super().__init__("Decimal places cannot be negative",
                         field="decimal_places", value=value, **kwargs)
