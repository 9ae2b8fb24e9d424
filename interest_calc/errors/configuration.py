"""Configuration error raised when calculator settings cannot be used."""

from typing import Optional, Dict, Any


class ConfigurationError(Exception):
    """Configuration file is unreadable or holds invalid values."""

    def __init__(self, message: str, source: Optional[str] = None,
                 errors: Optional[list] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.source = source
        self.errors = errors or []
        self.context = context or {}
        self.recoverable = False
