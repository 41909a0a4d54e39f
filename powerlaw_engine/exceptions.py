"""Project-wide exception types."""

class PowerLawError(Exception):
    """Base exception for all engine errors."""


class ConfigError(PowerLawError):
    """Raised when configuration is missing or malformed."""


class ConfigValidationError(ConfigError):
    """Raised when validation fails for supplied configuration."""


class DataValidationError(PowerLawError):
    """Raised when a sample does not satisfy the variant's domain."""


class InsufficientDataError(DataValidationError):
    """Raised when a sample is empty."""


class DistributionFitError(PowerLawError):
    """Raised when fitting produces an undefined result."""


class InvalidParameterError(PowerLawError):
    """Raised when model parameters do not support the requested operation."""
