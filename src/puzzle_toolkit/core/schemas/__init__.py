"""
Schemas Package

JSON schema definitions and validation utilities.
"""

from .validator import (
    validate_result,
    ResultValidationError,
    RESULT_SCHEMA_VERSION,
)

__all__ = [
    "validate_result",
    "ResultValidationError",
    "RESULT_SCHEMA_VERSION",
]
