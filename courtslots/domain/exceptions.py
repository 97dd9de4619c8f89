"""
Domain-specific exception hierarchy for the court slot scheduler.
"""


class CourtSlotsError(Exception):
    """Base class for all application-level errors."""


class ConfigurationError(CourtSlotsError):
    """Raised when operating hours, days or peak windows are malformed or inconsistent."""


class ValidationError(CourtSlotsError):
    """Raised when a slot candidate is missing fields required for persistence."""


class NotFoundError(CourtSlotsError):
    """Raised when a referenced court does not exist."""
