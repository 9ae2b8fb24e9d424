"""
Logging configuration and utilities for the interest calculator.
"""
from .config import (
    configure_logging,
    get_calculation_logger,
    get_logger,
    log_calculation,
    log_invalid_argument,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "get_calculation_logger",
    "log_calculation",
    "log_invalid_argument",
]
