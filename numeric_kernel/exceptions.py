"""
Typed Exception Hierarchy for the Numeric Kernel.

===============================================================================
WHY TYPED EXCEPTIONS
===============================================================================

A submission pipeline must tell a broken field *configuration* (programmer
error, fatal) apart from a broken field *value* (expected, reported back to
the document author). Only the first kind is ever raised. Bad values are
reported as ``ValidationError`` data by the validators.

Every exception class carries:
  1. A CODE class attribute (machine-readable, API-safe)
  2. Structured DATA attributes (not just a message string)

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    NumericKernelError (base)
    |
    +-- ConfigurationError
    |   +-- InvalidConfigurationError
    |   +-- FormatNotationError
    |
    +-- CatalogueError
        +-- FieldNotInCatalogueError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category        | Code                        | When Raised
----------------|-----------------------------|-----------------------------------------
Configuration   | INVALID_CONFIGURATION       | precision <= 0, scale < 0, scale >= precision
                | INVALID_FORMAT_NOTATION     | Text is not N(m), N(m.k) or N(m,k)
----------------|-----------------------------|-----------------------------------------
Catalogue       | FIELD_NOT_IN_CATALOGUE      | Lookup of a field the catalogue lacks

===============================================================================
HANDLING PATTERNS
===============================================================================

    try:
        validator = NumberValidator(precision, scale)
    except InvalidConfigurationError as e:
        log.error("bad_field_format", extra={"code": e.code, "scale": e.scale})
        raise
"""


class NumericKernelError(Exception):
    """
    Base exception for all numeric kernel errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "NUMERIC_KERNEL_ERROR"


# Configuration-related exceptions


class ConfigurationError(NumericKernelError):
    """Base exception for number format configuration errors."""

    code: str = "CONFIGURATION_ERROR"


class InvalidConfigurationError(ConfigurationError):
    """
    Precision/scale pair does not describe a valid N(m,k) format.

    Raised synchronously at construction; the validator is never created.
    """

    code: str = "INVALID_CONFIGURATION"

    def __init__(self, precision: object, scale: object, reason: str):
        self.precision = precision
        self.scale = scale
        self.reason = reason
        super().__init__(
            f"Invalid number format (precision={precision!r}, "
            f"scale={scale!r}): {reason}"
        )


class FormatNotationError(ConfigurationError):
    """Text is not a recognisable N(m) / N(m.k) format notation."""

    code: str = "INVALID_FORMAT_NOTATION"

    def __init__(self, notation: object):
        self.notation = notation
        super().__init__(
            f"Invalid format notation {notation!r}: expected N(m) or N(m.k)"
        )


# Catalogue-related exceptions


class CatalogueError(NumericKernelError):
    """Base exception for field format catalogue errors."""

    code: str = "CATALOGUE_ERROR"


class FieldNotInCatalogueError(CatalogueError):
    """Requested field has no format in the catalogue."""

    code: str = "FIELD_NOT_IN_CATALOGUE"

    def __init__(self, catalogue_id: str, field_name: str):
        self.catalogue_id = catalogue_id
        self.field_name = field_name
        super().__init__(
            f"Field '{field_name}' is not defined in catalogue '{catalogue_id}'"
        )
