"""
Centralized logging configuration for the interest calculator.

This module provides standardized logging configuration using structlog.
Calculator components obtain their loggers here so that every calculation
and rejected input is recorded with the same structure.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger

from ..config.defaults import LoggingParams


def configure_logging(
    level: Optional[str] = None,
    format_json: Optional[bool] = None,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None,
    params: Optional[LoggingParams] = None
) -> None:
    """
    Configure structlog for the entire application.

    Level and output format come from the logging section of the calculator
    configuration unless given explicitly.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
        params: Logging section of the configuration, defaults if None
    """
    params = params or LoggingParams()
    if level is None:
        level = params.level
    if format_json is None:
        format_json = params.format_json

    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # rendered by structlog
    )
    # basicConfig is a no-op once handlers exist
    logging.getLogger().setLevel(log_level)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_calculation_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the interest calculation subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for calculations
    """
    return get_logger(name).bind(subsystem="interest")


def log_calculation(
    logger: FilteringBoundLogger,
    operation: str,
    result: float,
    **inputs: Any
) -> None:
    """
    Log a completed calculation with standardized format.

    Args:
        logger: Structlog logger instance
        operation: Name of the calculator operation
        result: Value the operation returned
        **inputs: Arguments the operation was called with
    """
    logger.debug(
        "calculation",
        operation=operation,
        result=result,
        **inputs
    )


def log_invalid_argument(
    logger: FilteringBoundLogger,
    operation: str,
    field: Optional[str],
    value: Any,
    message: str
) -> None:
    """
    Log a rejected calculator input.

    Args:
        logger: Structlog logger instance
        operation: Name of the calculator operation
        field: Name of the rejected argument
        value: Rejected value
        message: Message carried by the raised error
    """
    logger.warning(
        "invalid_argument",
        operation=operation,
        field=field,
        value=value,
        reason=message
    )
