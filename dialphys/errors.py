"""Exceptions raised for invalid engine construction input.

Stepping and the pick/drag mutators never raise: out-of-range entity counts
are clamped and degenerate geometry is skipped. Only inputs with no sensible
interpretation (an empty viewport, a non-positive radius) are rejected.
"""


class SimulationError(Exception):
    """Base exception for simulation-related errors."""
    pass


class ConfigurationError(SimulationError):
    """Raised when configuration is invalid."""
    pass


def validate_positive_number(value: float, parameter_name: str) -> None:
    """Validate that a number is positive.

    Args:
        value: The value to validate
        parameter_name: Name of the parameter for error messages

    Raises:
        ConfigurationError: If value is not positive
    """
    if not value > 0:
        raise ConfigurationError(f"{parameter_name} must be positive, got {value}")
