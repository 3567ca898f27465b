"""
NumberFormat -- the N(m,k) fixed-point format value object.

Responsibility:
    Holds the three settings that define a numeric field format: precision
    (m), scale (k) and the positive-only restriction. Parses and renders the
    ``N(m.k)`` notation used in document format descriptions.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.

Invariants enforced:
    - precision is an int > 0
    - scale is an int with 0 <= scale < precision
    - immutable after construction

Failure modes:
    - InvalidConfigurationError when precision/scale violate the invariants
    - FormatNotationError when notation text cannot be parsed

Notation:
    ``N(m.k)`` where m is the maximum number of characters in the number,
    counting the sign of a negative number together with the integer and
    fractional digits (the separator is not counted), and k is the maximum
    number of fractional digits. A whole-number format is written ``N(m)``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from numeric_kernel.exceptions import FormatNotationError, InvalidConfigurationError

_NOTATION_PATTERN = re.compile(
    r"\s*[Nn]\s*\(\s*([0-9]+)\s*(?:[.,]\s*([0-9]+)\s*)?\)\s*"
)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def check_limits(precision: object, scale: object) -> None:
    """Raise InvalidConfigurationError unless (precision, scale) is a valid N(m,k)."""
    if not _is_int(precision):
        raise InvalidConfigurationError(
            precision, scale, "precision must be an integer"
        )
    if not _is_int(scale):
        raise InvalidConfigurationError(
            precision, scale, "scale must be an integer"
        )
    if precision <= 0:
        raise InvalidConfigurationError(
            precision, scale, "precision must be a positive number"
        )
    if scale < 0 or scale >= precision:
        raise InvalidConfigurationError(
            precision,
            scale,
            "scale must be a non-negative number less than precision",
        )


@dataclass(frozen=True, slots=True)
class NumberFormat:
    """
    Fixed-point number format N(precision, scale).

    Contract:
        Validated once on construction; frozen thereafter.

    Guarantees:
        - Immutable and hashable (frozen dataclass with slots)
        - 0 <= scale < precision
    """

    precision: int
    scale: int = 0
    positive_only: bool = False

    def __post_init__(self) -> None:
        check_limits(self.precision, self.scale)
        object.__setattr__(self, "positive_only", bool(self.positive_only))

    @classmethod
    def parse(cls, notation: str, *, positive_only: bool = False) -> NumberFormat:
        """
        Parse ``N(m)``, ``N(m.k)`` or ``N(m,k)``.

        Raises:
            FormatNotationError: text is not format notation.
            InvalidConfigurationError: m/k violate the format invariants.
        """
        if not isinstance(notation, str):
            raise FormatNotationError(notation)
        match = _NOTATION_PATTERN.fullmatch(notation)
        if match is None:
            raise FormatNotationError(notation)
        precision = int(match.group(1))
        scale = int(match.group(2)) if match.group(2) is not None else 0
        return cls(precision, scale, positive_only)

    @property
    def notation(self) -> str:
        """Canonical notation: ``N(m.k)``, or ``N(m)`` for whole numbers."""
        if self.scale == 0:
            return f"N({self.precision})"
        return f"N({self.precision}.{self.scale})"

    def __str__(self) -> str:
        return self.notation
