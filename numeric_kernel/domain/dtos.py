"""
Validation DTOs -- immutable rejection reports.

Bad input values never raise. Validators describe each rejection as a
``ValidationError`` and aggregate them into a ``ValidationResult``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


class RejectionCode:
    """Machine-readable reason codes for rejected values."""

    EMPTY_VALUE = "EMPTY_VALUE"
    MALFORMED_NUMBER = "MALFORMED_NUMBER"
    PRECISION_EXCEEDED = "PRECISION_EXCEEDED"
    SCALE_EXCEEDED = "SCALE_EXCEEDED"
    NEGATIVE_NOT_ALLOWED = "NEGATIVE_NOT_ALLOWED"
    MISSING_FIELD = "MISSING_FIELD"
    UNKNOWN_FIELD = "UNKNOWN_FIELD"


@dataclass(frozen=True)
class ValidationError:
    """
    A single validation error.

    Contract:
        Carries a machine-readable code, human-readable message, optional field
        name, and optional details dict.

    Guarantees:
        - Immutable (frozen dataclass)
        - code is always present

    Non-goals:
        - Does NOT raise exceptions -- it IS the error representation.
    """

    code: str
    message: str
    field: str | None = None
    details: dict[str, Any] | None = None


@dataclass(frozen=True)
class ValidationResult:
    """
    Result of validation.

    Contract:
        Aggregates zero or more ValidationErrors. is_valid is True only when
        there are no errors.

    Guarantees:
        - Immutable (frozen dataclass)
        - errors is always a tuple (never None)
        - bool(result) == result.is_valid for convenience
    """

    is_valid: bool
    errors: tuple[ValidationError, ...] = field(default_factory=tuple)

    @classmethod
    def success(cls) -> ValidationResult:
        """Create a successful validation result."""
        return cls(is_valid=True, errors=())

    @classmethod
    def failure(cls, *errors: ValidationError) -> ValidationResult:
        """Create a failed validation result."""
        return cls(is_valid=False, errors=tuple(errors))

    @property
    def codes(self) -> tuple[str, ...]:
        return tuple(e.code for e in self.errors)

    def errors_for(self, field_name: str) -> tuple[ValidationError, ...]:
        """Errors attached to one field, in report order."""
        return tuple(e for e in self.errors if e.field == field_name)

    def __bool__(self) -> bool:
        return self.is_valid
