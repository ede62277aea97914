"""Validation package for compiled message groups."""

from .base import (
    DuplicatePathError,
    IdentifierCollisionError,
    MissingLocaleFileError,
    MissingTranslationsError,
    ValidationContext,
    ValidationError,
    ValidationIssue,
    Validator,
)
from .collisions import IdentifierCollisionValidator
from .completeness import CompletenessValidator

__all__ = [
    "CompletenessValidator",
    "DuplicatePathError",
    "IdentifierCollisionError",
    "IdentifierCollisionValidator",
    "MissingLocaleFileError",
    "MissingTranslationsError",
    "ValidationContext",
    "ValidationError",
    "ValidationIssue",
    "Validator",
]
