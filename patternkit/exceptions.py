"""
Exception hierarchy for patternkit.

Every error raised by the library derives from PatternKitError so callers
can catch the whole family in one place.
"""

from typing import Any, Optional


class PatternKitError(Exception):
    """Base exception for patternkit errors."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.details = details


class ConstructionError(PatternKitError):
    """Raised when the one-time construction of a guarded instance fails."""
    pass


class ThemeLookupError(PatternKitError, LookupError):
    """Raised when no factory is registered for a theme."""
    pass


class RegistrationError(PatternKitError):
    """Raised when a factory registration is duplicated or inconsistent."""
    pass


class FamilyMismatchError(PatternKitError, ValueError):
    """Raised when products of different themes are combined into one family."""
    pass


class ConfigurationError(PatternKitError, ValueError):
    """Raised when environment configuration is invalid."""
    pass
