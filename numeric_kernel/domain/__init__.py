"""
Pure domain layer.

Immutable value objects and pure validation functions with NO dependencies
on configuration files or other I/O.
"""

from numeric_kernel.domain.document_validator import (
    FieldRule,
    FieldRuleSource,
    validate_document,
    validate_field,
    validate_unknown_fields,
)
from numeric_kernel.domain.dtos import RejectionCode, ValidationError, ValidationResult
from numeric_kernel.domain.number_format import NumberFormat
from numeric_kernel.domain.number_validator import NumberValidator

__all__ = [
    # Value Objects
    "NumberFormat",
    # Validators
    "NumberValidator",
    "FieldRule",
    "FieldRuleSource",
    "validate_document",
    "validate_field",
    "validate_unknown_fields",
    # DTOs
    "RejectionCode",
    "ValidationError",
    "ValidationResult",
]
