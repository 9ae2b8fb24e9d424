"""
Error classification for the interest calculator.

Every calculator failure is an invalid-argument condition: it is raised
synchronously, never retried, and carries a fixed message meant to be shown
to the caller verbatim.
"""

from .invalid_argument import (
    InvalidArgumentError,
    InvalidPrincipalError,
    InvalidRateError,
    InvalidTimeError,
    InvalidFrequencyError,
    InvalidDecimalPlacesError,
)
from .configuration import ConfigurationError

__all__ = [
    # Invalid Arguments
    "InvalidArgumentError",
    "InvalidPrincipalError",
    "InvalidRateError",
    "InvalidTimeError",
    "InvalidFrequencyError",
    "InvalidDecimalPlacesError",
    # Configuration
    "ConfigurationError",
]
