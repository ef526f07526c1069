"""
Exception types raised by the growth standards engine.
"""


class DomainError(ValueError):
    """A measurement or reference value outside the LMS transform's domain."""


class ConfigurationError(RuntimeError):
    """Reference tables are missing or malformed. Fatal at startup."""
