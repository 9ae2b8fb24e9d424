"""Pytest configuration and shared fixtures."""

import pytest

from interest_calc.calculator import InterestCalculator


@pytest.fixture
def calculator() -> InterestCalculator:
    """Calculator with default configuration."""
    return InterestCalculator()


@pytest.fixture
def standard_inputs() -> dict:
    """Principal=1000, Rate=5%, Time=2 years."""
    return {"principal": 1000.0, "rate": 5.0, "time": 2.0}
