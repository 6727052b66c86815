"""Composable business operations with validated input and exposed results."""

from __future__ import annotations

from importlib import metadata

from interactor.declaration import InteractorConfig
from interactor.errors import (
    ConfigurationError,
    DeclarationError,
    InteractorError,
    InteractorUsageError,
)
from interactor.interactor import Interactor, expose, validations
from interactor.result import Result
from interactor.validation import BASE, ErrorKey, Errors, Validator, validates

try:
    __version__ = metadata.version("interactor")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "BASE",
    "ConfigurationError",
    "DeclarationError",
    "ErrorKey",
    "Errors",
    "Interactor",
    "InteractorConfig",
    "InteractorError",
    "InteractorUsageError",
    "Result",
    "Validator",
    "__version__",
    "expose",
    "validates",
    "validations",
]
