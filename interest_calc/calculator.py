"""Simple and compound interest calculator"""

from typing import Optional

from .config.defaults import DefaultConfig, get_default_config
from .errors import InvalidArgumentError
from .logging.config import get_calculation_logger, log_calculation, log_invalid_argument
from .models import InterestBreakdown
from .rounding import round_half_up
from .validation import validate_frequency, validate_inputs


class InterestCalculator:
    """
    Calculator for simple and compound interest

    Rates are annual percentages (5 means 5%) and time is in years.
    Every operation is a pure function of its arguments; the instance only
    holds read-only configuration used for default rounding precision and
    default compounding frequency.
    """

    def __init__(self, config: Optional[DefaultConfig] = None):
        self.config = config or get_default_config()
        self.logger = get_calculation_logger(__name__)

    def simple_interest(self, principal: float, rate: float, time: float) -> float:
        """
        Calculate simple interest

        SI = (P * R * T) / 100

        Args:
            principal: The principal amount
            rate: The annual interest rate (as percentage)
            time: Time period in years

        Returns:
            Simple interest amount

        Raises:
            InvalidArgumentError: any parameter is negative
        """
        self._validate("simple_interest", principal, rate, time)

        interest = (principal * rate * time) / 100.0
        log_calculation(self.logger, "simple_interest", interest,
                        principal=principal, rate=rate, time=time)
        return interest

    def compound_interest(self, principal: float, rate: float, time: float,
                          frequency: Optional[int] = None) -> float:
        """
        Calculate compound interest

        Without a frequency interest compounds once a year:
            CI = P * (1 + R/100)^T - P
        With a frequency n:
            CI = P * (1 + R/(n*100))^(n*T) - P

        Args:
            principal: The principal amount
            rate: The annual interest rate (as percentage)
            time: Time period in years
            frequency: Number of times interest is compounded per year

        Returns:
            Compound interest amount, infinite when growth exceeds float range

        Raises:
            InvalidArgumentError: any parameter is negative, or frequency is
                not positive
        """
        self._validate("compound_interest", principal, rate, time, frequency)

        if frequency is None:
            growth_base, exponent = 1 + rate / 100.0, time
        else:
            growth_base, exponent = 1 + rate / (frequency * 100.0), frequency * time

        try:
            amount = principal * growth_base ** exponent
        except OverflowError:
            # growth beyond float range; zero principal still earns nothing
            amount = float("inf") if principal else 0.0

        interest = amount - principal
        log_calculation(self.logger, "compound_interest", interest,
                        principal=principal, rate=rate, time=time, frequency=frequency)
        return interest

    def simple_interest_amount(self, principal: float, rate: float, time: float) -> float:
        """Final amount for simple interest (principal + simple interest)"""
        return principal + self.simple_interest(principal, rate, time)

    def compound_interest_amount(self, principal: float, rate: float, time: float) -> float:
        """Final amount for annual compound interest (principal + compound interest)"""
        return principal + self.compound_interest(principal, rate, time)

    def interest_difference(self, principal: float, rate: float, time: float) -> float:
        """Difference between annual compound interest and simple interest"""
        simple = self.simple_interest(principal, rate, time)
        compound = self.compound_interest(principal, rate, time)
        return compound - simple

    def round_amount(self, amount: float, decimal_places: Optional[int] = None) -> float:
        """
        Round amount to the given number of decimal places, ties away from zero

        Args:
            amount: The amount to round
            decimal_places: Number of decimal places, configured default if None

        Returns:
            Rounded amount

        Raises:
            InvalidArgumentError: decimal_places is negative
        """
        if decimal_places is None:
            decimal_places = self.config.rounding.decimal_places

        try:
            return round_half_up(amount, decimal_places)
        except InvalidArgumentError as e:
            log_invalid_argument(self.logger, "round_amount", e.field, e.value, e.message)
            raise

    def summarize(self, principal: float, rate: float, time: float,
                  frequency: Optional[int] = None,
                  decimal_places: Optional[int] = None) -> InterestBreakdown:
        """
        Calculate every figure for one set of inputs

        Simple and compound interest, both final amounts and their
        difference, each rounded to decimal_places. The difference is taken
        before rounding.

        Args:
            principal: The principal amount
            rate: The annual interest rate (as percentage)
            time: Time period in years
            frequency: Compounding periods per year, configured default if None
            decimal_places: Rounding precision, configured default if None

        Returns:
            InterestBreakdown with rounded figures
        """
        if frequency is None:
            frequency = self.config.compounding.default_frequency

        simple = self.simple_interest(principal, rate, time)
        compound = self.compound_interest(principal, rate, time, frequency)

        return InterestBreakdown(
            principal=principal,
            rate=rate,
            time=time,
            frequency=frequency,
            simple_interest=self.round_amount(simple, decimal_places),
            compound_interest=self.round_amount(compound, decimal_places),
            simple_amount=self.round_amount(principal + simple, decimal_places),
            compound_amount=self.round_amount(principal + compound, decimal_places),
            difference=self.round_amount(compound - simple, decimal_places),
        )

    def _validate(self, operation: str, principal: float, rate: float, time: float,
                  frequency: Optional[int] = None) -> None:
        """Validate inputs, logging the rejected argument before re-raising"""
        try:
            validate_inputs(principal, rate, time)
            if frequency is not None:
                validate_frequency(frequency)
        except InvalidArgumentError as e:
            log_invalid_argument(self.logger, operation, e.field, e.value, e.message)
            raise
