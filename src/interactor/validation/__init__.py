"""Validation building blocks: error collection, rules and validators."""

from __future__ import annotations

from .errors import BASE, DEFAULT_MESSAGES, ErrorKey, Errors, HasFullMessages, humanize
from .rules import (
    Absence,
    AttributeRule,
    Check,
    Exclusion,
    Format,
    Inclusion,
    Length,
    Numericality,
    Presence,
    Rule,
    TypeCheck,
    is_blank,
    validates,
)
from .validator import Validator, build_validator_class

__all__ = [
    "BASE",
    "DEFAULT_MESSAGES",
    "Absence",
    "AttributeRule",
    "Check",
    "ErrorKey",
    "Errors",
    "Exclusion",
    "Format",
    "HasFullMessages",
    "Inclusion",
    "Length",
    "Numericality",
    "Presence",
    "Rule",
    "TypeCheck",
    "Validator",
    "build_validator_class",
    "humanize",
    "is_blank",
    "validates",
]
