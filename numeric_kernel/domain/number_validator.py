"""NumberValidator -- checks string literals against an N(m,k) format."""

from __future__ import annotations

import logging
import re

from numeric_kernel.domain.dtos import RejectionCode, ValidationError
from numeric_kernel.domain.number_format import NumberFormat
from numeric_kernel.logging_config import get_logger

logger = get_logger("domain.number_validator")

# sign, integer digits, fractional digits
_NUMBER_PATTERN = re.compile(r"([+-]?)([0-9]+)(?:[.,]([0-9]+))?")


class NumberValidator:
    """
    Validates decimal literals against a fixed-point number format.

    Contract:
        Configuration is checked once in the constructor and never changes.
        ``is_valid_number`` and ``explain`` never raise for any input.

    Guarantees:
        - The sign of a number counts toward precision.
        - ``+`` is accepted under ``only_positive``; only ``-`` is rejected.
        - ``.`` and ``,`` are equivalent fractional separators.
        - Instances hold no mutable state and are safe to share.

    Raises:
        InvalidConfigurationError: precision <= 0, scale < 0 or
            scale >= precision.
    """

    __slots__ = ("_format",)

    def __init__(self, precision: int, scale: int = 0, only_positive: bool = False):
        object.__setattr__(self, "_format", NumberFormat(precision, scale, only_positive))
        logger.debug(
            "number_validator_created",
            extra={
                "precision": precision,
                "scale": scale,
                "only_positive": self._format.positive_only,
            },
        )

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def from_format(cls, number_format: NumberFormat) -> NumberValidator:
        return cls(
            number_format.precision,
            number_format.scale,
            number_format.positive_only,
        )

    @property
    def format(self) -> NumberFormat:
        return self._format

    @property
    def precision(self) -> int:
        return self._format.precision

    @property
    def scale(self) -> int:
        return self._format.scale

    @property
    def only_positive(self) -> bool:
        return self._format.positive_only

    def is_valid_number(self, value: str | None) -> bool:
        """True when ``value`` is a number that fits this format."""
        return self.explain(value) is None

    def explain(self, value: str | None) -> ValidationError | None:
        """Return the first reason ``value`` is rejected, or None if it is valid."""
        error = self._diagnose(value)
        if error is not None and logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "number_rejected",
                extra={
                    "code": error.code,
                    "format": self._format.notation,
                    "value_length": len(value) if isinstance(value, str) else None,
                },
            )
        return error

    def _diagnose(self, value: object) -> ValidationError | None:
        if value is None:
            return ValidationError(
                code=RejectionCode.EMPTY_VALUE,
                message="Value is missing",
            )
        if not isinstance(value, str):
            return ValidationError(
                code=RejectionCode.MALFORMED_NUMBER,
                message=f"Value must be a string, not {type(value).__name__}",
            )
        if not value:
            return ValidationError(
                code=RejectionCode.EMPTY_VALUE,
                message="Value is empty",
            )

        match = _NUMBER_PATTERN.fullmatch(value)
        if match is None:
            return ValidationError(
                code=RejectionCode.MALFORMED_NUMBER,
                message=f"Value {value!r} is not a decimal number",
            )

        sign, int_digits, frac_digits = match.groups()
        int_len = len(sign) + len(int_digits)
        frac_len = len(frac_digits) if frac_digits else 0
        fmt = self._format
        details = {
            "int_len": int_len,
            "frac_len": frac_len,
            "precision": fmt.precision,
            "scale": fmt.scale,
        }

        if int_len + frac_len > fmt.precision:
            return ValidationError(
                code=RejectionCode.PRECISION_EXCEEDED,
                message=(
                    f"Value has {int_len + frac_len} characters, "
                    f"format {fmt.notation} allows {fmt.precision}"
                ),
                details=details,
            )
        if frac_len > fmt.scale:
            return ValidationError(
                code=RejectionCode.SCALE_EXCEEDED,
                message=(
                    f"Value has {frac_len} fractional digits, "
                    f"format {fmt.notation} allows {fmt.scale}"
                ),
                details=details,
            )
        if fmt.positive_only and sign == "-":
            return ValidationError(
                code=RejectionCode.NEGATIVE_NOT_ALLOWED,
                message=f"Negative values are not allowed for {fmt.notation}",
                details=details,
            )
        return None

    def __repr__(self) -> str:
        return (
            f"NumberValidator(precision={self.precision}, scale={self.scale}, "
            f"only_positive={self.only_positive})"
        )
