"""
Interest Calc - Simple and Compound Interest Calculator

A small financial library computing simple interest, compound interest
(annual or at a chosen compounding frequency), final amounts, the
compound-versus-simple difference and round-half-up amounts.
"""

from .calculator import InterestCalculator
from .errors import InvalidArgumentError
from .models import CompoundingFrequency, InterestBreakdown

__version__ = "0.1.0"
__author__ = "Interest Calc Team"

__all__ = [
    "InterestCalculator",
    "InvalidArgumentError",
    "CompoundingFrequency",
    "InterestBreakdown",
]
