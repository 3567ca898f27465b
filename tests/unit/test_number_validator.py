"""
Tests for NumberValidator: N(m,k) checks on numeric string literals.

Format rule (tax document inventory format):
- m counts the sign of a negative number, integer and fractional digits
  (not the separator)
- k is the maximum number of fractional digits
"""

import logging
import threading

import pytest

from numeric_kernel.domain.dtos import RejectionCode
from numeric_kernel.domain.number_format import NumberFormat
from numeric_kernel.domain.number_validator import NumberValidator
from numeric_kernel.exceptions import (
    ConfigurationError,
    InvalidConfigurationError,
    NumericKernelError,
)


class TestConstruction:
    """Configuration is checked once, at construction."""

    def test_minimal_positive_only_validator_constructs(self):
        validator = NumberValidator(1, 0, True)
        assert validator.precision == 1
        assert validator.scale == 0
        assert validator.only_positive is True

    def test_defaults(self):
        validator = NumberValidator(5)
        assert validator.scale == 0
        assert validator.only_positive is False

    @pytest.mark.parametrize("precision", [0, -1, -17])
    def test_non_positive_precision_rejected(self, precision):
        with pytest.raises(InvalidConfigurationError, match="precision must be a positive"):
            NumberValidator(precision, 0)

    def test_zero_precision_with_scale_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            NumberValidator(0, 2)

    def test_negative_scale_rejected(self):
        with pytest.raises(InvalidConfigurationError) as exc_info:
            NumberValidator(1, -2)
        assert exc_info.value.scale == -2
        assert exc_info.value.precision == 1

    @pytest.mark.parametrize("precision,scale", [(2, 2), (3, 5), (1, 1)])
    def test_scale_not_less_than_precision_rejected(self, precision, scale):
        with pytest.raises(InvalidConfigurationError, match="less than precision"):
            NumberValidator(precision, scale)

    def test_non_integer_settings_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            NumberValidator(10.5, 2)
        with pytest.raises(InvalidConfigurationError):
            NumberValidator(True, 0)
        with pytest.raises(InvalidConfigurationError):
            NumberValidator(10, "2")

    def test_error_is_typed_and_coded(self):
        with pytest.raises(ConfigurationError) as exc_info:
            NumberValidator(2, 2)
        assert isinstance(exc_info.value, NumericKernelError)
        assert exc_info.value.code == "INVALID_CONFIGURATION"

    def test_from_format(self):
        validator = NumberValidator.from_format(NumberFormat(17, 2, True))
        assert validator.format == NumberFormat(17, 2, True)
        assert validator.only_positive is True

    def test_settings_are_read_only(self):
        validator = NumberValidator(3, 2)
        with pytest.raises(AttributeError):
            validator.precision = 10
        with pytest.raises(AttributeError):
            validator.extra = 1
        with pytest.raises(AttributeError):
            validator._format = NumberFormat(30, 2)
        with pytest.raises(AttributeError):
            del validator._format
        assert validator.precision == 3
        assert validator.is_valid_number("123456.7") is False


class TestEmptyInput:

    def test_none_is_invalid(self, default_validator):
        assert default_validator.is_valid_number(None) is False

    def test_empty_string_is_invalid(self, default_validator):
        assert default_validator.is_valid_number("") is False

    def test_non_string_is_invalid(self, default_validator):
        assert default_validator.is_valid_number(12) is False
        assert default_validator.is_valid_number(1.5) is False


class TestGrammar:
    """Whole-string match: [+-]? digits ([.,] digits)?"""

    @pytest.mark.parametrize(
        "value",
        ["a.sd", " 1.1", "1.1 ", ".3", "1.", "+", "-", "1.2.3", "1e5",
         "1 000", "--1", "+-1", "1,2,3", "1\n", "\t1", "0x1F", "١٢"],
    )
    def test_malformed_values_rejected(self, default_validator, value):
        assert default_validator.is_valid_number(value) is False

    @pytest.mark.parametrize("value", ["0", "1.25", "1,25", "+1.25", "-1.25", "00.0"])
    def test_well_formed_values_accepted(self, default_validator, value):
        assert default_validator.is_valid_number(value) is True

    def test_comma_and_period_are_equivalent(self):
        validator = NumberValidator(3, 2)
        assert validator.is_valid_number("12.34") is False
        assert validator.is_valid_number("12,34") is False
        assert validator.is_valid_number("1.23") is True
        assert validator.is_valid_number("1,23") is True


class TestPrecisionAndScale:

    def test_fraction_longer_than_scale_rejected(self):
        assert NumberValidator(17, 2).is_valid_number("0.000") is False

    def test_sign_counts_toward_precision(self):
        validator = NumberValidator(3, 2)
        assert validator.is_valid_number("-1.23") is False
        assert validator.is_valid_number("+1.23") is False
        assert validator.is_valid_number("1.23") is True
        assert validator.is_valid_number("-1.2") is True

    def test_long_number_within_budget_accepted(self):
        assert NumberValidator(17, 2, True).is_valid_number("123456789.01") is True

    def test_integer_accepted_with_zero_scale(self):
        validator = NumberValidator(3)
        assert validator.is_valid_number("123") is True
        assert validator.is_valid_number("1234") is False
        assert validator.is_valid_number("1.0") is False

    def test_separator_not_counted(self):
        assert NumberValidator(4, 2).is_valid_number("12.34") is True


class TestSignRestriction:

    def test_negative_rejected_when_positive_only(self):
        assert NumberValidator(3, 2, True).is_valid_number("-0.00") is False

    def test_plus_sign_allowed_when_positive_only(self):
        assert NumberValidator(3, 2, True).is_valid_number("+0.0") is True

    def test_signed_numbers_allowed_by_default(self, default_validator):
        assert default_validator.is_valid_number("+1.25") is True
        assert default_validator.is_valid_number("-1.25") is True


class TestExplain:
    """explain() gives the first failing reason, in check order."""

    def test_valid_value_has_no_reason(self, default_validator):
        assert default_validator.explain("1.25") is None

    @pytest.mark.parametrize(
        "value,code",
        [
            (None, RejectionCode.EMPTY_VALUE),
            ("", RejectionCode.EMPTY_VALUE),
            (" 1", RejectionCode.MALFORMED_NUMBER),
            ("-1234.5", RejectionCode.PRECISION_EXCEEDED),
            ("0.123", RejectionCode.SCALE_EXCEEDED),
            ("-0.1", RejectionCode.NEGATIVE_NOT_ALLOWED),
        ],
    )
    def test_reason_codes(self, value, code):
        error = NumberValidator(5, 2, True).explain(value)
        assert error is not None
        assert error.code == code

    def test_precision_checked_before_scale(self):
        error = NumberValidator(3, 1).explain("1.234")
        assert error.code == RejectionCode.PRECISION_EXCEEDED

    def test_details_carry_lengths(self):
        error = NumberValidator(3, 2).explain("-1.23")
        assert error.details == {
            "int_len": 2,
            "frac_len": 2,
            "precision": 3,
            "scale": 2,
        }
        assert "N(3.2)" in error.message

    def test_rejection_logged_without_value(self, captured_logs):
        NumberValidator(3, 2).explain("-1.23")
        records = [r for r in captured_logs() if r["message"] == "number_rejected"]
        assert len(records) == 1
        assert records[0]["code"] == RejectionCode.PRECISION_EXCEEDED
        assert records[0]["value_length"] == 5
        assert "-1.23" not in str(records[0])

    def test_rejection_not_logged_above_debug(self, captured_logs):
        root = logging.getLogger("numeric_kernel")
        root.setLevel(logging.INFO)
        error = NumberValidator(3, 2).explain("-1.23")
        assert error.code == RejectionCode.PRECISION_EXCEEDED
        assert not [r for r in captured_logs() if r["message"] == "number_rejected"]


class TestPurity:

    def test_repeated_calls_agree(self, default_validator):
        for value in ["1.25", "-1.25", ".3", "", None, "123456789012"]:
            first = default_validator.is_valid_number(value)
            for _ in range(5):
                assert default_validator.is_valid_number(value) is first

    def test_shared_between_threads(self):
        validator = NumberValidator(5, 2, True)
        results: list[bool] = []

        def worker():
            results.extend(
                validator.is_valid_number(v)
                for v in ["123.45", "-1", "1.234", "99"] * 50
            )

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results.count(True) == 4 * 50 * 2
        assert results.count(False) == 4 * 50 * 2

    def test_repr(self):
        assert repr(NumberValidator(3, 2, True)) == (
            "NumberValidator(precision=3, scale=2, only_positive=True)"
        )
