"""Data models for interest calculations"""

from dataclasses import dataclass
from enum import IntEnum


class CompoundingFrequency(IntEnum):
    """Common compounding frequencies, in periods per year"""
    ANNUALLY = 1
    SEMI_ANNUALLY = 2
    QUARTERLY = 4
    MONTHLY = 12
    WEEKLY = 52
    DAILY = 365


@dataclass(frozen=True)
class InterestBreakdown:
    """Simple and compound interest figures for one set of inputs"""
    principal: float
    rate: float
    time: float
    frequency: int
    simple_interest: float
    compound_interest: float
    simple_amount: float
    compound_amount: float
    difference: float

    def to_dict(self) -> dict:
        """Convert breakdown to dictionary for serialization"""
        return {
            "principal": self.principal,
            "rate": self.rate,
            "time": self.time,
            "frequency": int(self.frequency),
            "simple_interest": self.simple_interest,
            "compound_interest": self.compound_interest,
            "simple_amount": self.simple_amount,
            "compound_amount": self.compound_amount,
            "difference": self.difference,
        }
