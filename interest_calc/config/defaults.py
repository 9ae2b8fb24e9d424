"""Default configuration parameters for the interest calculator."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RoundingParams:
    """Rounding parameters."""
    decimal_places: int = 2          # Precision used when none is given


@dataclass(frozen=True)
class CompoundingParams:
    """Compounding parameters."""
    default_frequency: int = 1       # Periods per year for summaries


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    rounding: RoundingParams
    compounding: CompoundingParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        rounding=RoundingParams(),
        compounding=CompoundingParams(),
        logging=LoggingParams(),
    )


def config_from_dict(config: dict) -> DefaultConfig:
    """Build a DefaultConfig from a merged configuration dictionary."""
    return DefaultConfig(
        rounding=RoundingParams(**config.get("rounding", {})),
        compounding=CompoundingParams(**config.get("compounding", {})),
        logging=LoggingParams(**config.get("logging", {})),
    )
