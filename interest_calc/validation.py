"""Input validation shared by the calculator operations"""

import numbers

from .errors import (
    InvalidDecimalPlacesError,
    InvalidFrequencyError,
    InvalidPrincipalError,
    InvalidRateError,
    InvalidTimeError,
)


def validate_inputs(principal: float, rate: float, time: float) -> None:
    """
    Validate principal, rate and time

    Checked in the order principal, rate, time; the first negative value
    determines the error raised.

    Raises:
        InvalidPrincipalError: principal is negative
        InvalidRateError: rate is negative
        InvalidTimeError: time is negative
    """
    if principal < 0:
        raise InvalidPrincipalError(principal)
    if rate < 0:
        raise InvalidRateError(rate)
    if time < 0:
        raise InvalidTimeError(time)


def validate_frequency(frequency: int) -> None:
    """
    Validate the number of compounding periods per year

    Positivity is checked first, so 0 and -2.5 report the positive-frequency
    message. CompoundingFrequency members are ints and pass.

    Raises:
        InvalidFrequencyError: frequency is not positive, or not an integer
    """
    if frequency <= 0:
        raise InvalidFrequencyError(frequency)
    if isinstance(frequency, bool) or not isinstance(frequency, numbers.Integral):
        raise InvalidFrequencyError(frequency, message="Compounding frequency must be an integer")


def validate_decimal_places(decimal_places: int) -> None:
    """Raise InvalidDecimalPlacesError if decimal_places is negative"""
    if decimal_places < 0:
        raise InvalidDecimalPlacesError(decimal_places)
