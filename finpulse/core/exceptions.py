"""Exceptions raised at the FinPulse boundaries (CLI and configuration)."""


class FinPulseError(Exception):
    """Base exception for FinPulse errors."""


class UnknownTimeRangeError(FinPulseError, ValueError):
    """Raised when a string does not name a known time range."""

    def __init__(self, value: str, valid: list[str]):
        self.value = value
        self.valid = valid
        super().__init__(
            f"Unknown time range '{value}'. Expected one of: {', '.join(valid)}"
        )


class ConfigurationError(FinPulseError):
    """Raised when environment configuration is invalid."""
