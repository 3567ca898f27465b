"""DocumentValidator -- Pure field-level validation of numeric document fields."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from typing import Protocol, runtime_checkable

from numeric_kernel.domain.dtos import RejectionCode, ValidationError, ValidationResult
from numeric_kernel.domain.number_format import NumberFormat
from numeric_kernel.domain.number_validator import NumberValidator
from numeric_kernel.logging_config import LogContext, get_logger

logger = get_logger("domain.document_validator")


@dataclass(frozen=True)
class FieldRule:
    """Format requirement for one named document field."""

    name: str
    number_format: NumberFormat
    required: bool = True
    validator: NumberValidator = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "validator", NumberValidator.from_format(self.number_format)
        )


@runtime_checkable
class FieldRuleSource(Protocol):
    """Anything that hands out field rules, e.g. a field format catalogue."""

    def rules(self) -> tuple[FieldRule, ...]: ...


def validate_document(
    fields: Mapping[str, str | None],
    rules: Iterable[FieldRule] | FieldRuleSource,
    *,
    allow_unknown: bool = True,
) -> ValidationResult:
    """Validate every numeric field of a document against its rule."""
    if isinstance(rules, FieldRuleSource):
        rules = rules.rules()
    rules = tuple(rules)
    errors: list[ValidationError] = []

    logger.debug(
        "document_validation_started",
        extra={
            "rule_count": len(rules),
            "field_names": sorted(fields.keys(), key=str),
        },
    )

    for rule in rules:
        with LogContext.bind(field_name=rule.name):
            errors.extend(validate_field(rule, fields.get(rule.name)))

    if not allow_unknown:
        errors.extend(validate_unknown_fields(fields, rules))

    if errors:
        logger.warning(
            "document_validation_failed",
            extra={
                "error_count": len(errors),
                "error_codes": [e.code for e in errors],
                "error_fields": [e.field for e in errors],
            },
        )
        return ValidationResult.failure(*errors)

    logger.info(
        "document_validation_passed",
        extra={"field_count": len(fields)},
    )
    return ValidationResult.success()


def validate_field(rule: FieldRule, value: str | None) -> list[ValidationError]:
    """Validate one field value; absent optional fields pass."""
    if value is None or value == "":
        if not rule.required:
            return []
        return [
            ValidationError(
                code=RejectionCode.MISSING_FIELD,
                message=f"Required field '{rule.name}' is missing",
                field=rule.name,
                details={"format": rule.number_format.notation},
            )
        ]

    error = rule.validator.explain(value)
    if error is None:
        return []
    return [replace(error, field=rule.name)]


def validate_unknown_fields(
    fields: Mapping[str, str | None],
    rules: Iterable[FieldRule],
) -> list[ValidationError]:
    """Report fields that no rule describes, in sorted order."""
    known = {rule.name for rule in rules}
    return [
        ValidationError(
            code=RejectionCode.UNKNOWN_FIELD,
            message=f"Field '{name}' has no numeric format",
            field=name,
        )
        for name in sorted(fields, key=str)
        if name not in known
    ]
