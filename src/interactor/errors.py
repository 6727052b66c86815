"""Exception hierarchy for interactor."""

from __future__ import annotations


class InteractorError(Exception):
    """Base class for errors raised by the interactor package."""


class InteractorUsageError(InteractorError, TypeError):
    """Raised when ``call`` receives arguments of the wrong shape."""


class DeclarationError(InteractorError, ValueError):
    """Raised when ``expose`` or ``validations`` receive invalid names."""


class ConfigurationError(InteractorError, RuntimeError):
    """Raised when configuration values are invalid."""
