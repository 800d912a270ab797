"""参数校验测试"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import math
from decimal import Decimal

import numpy as np
import pytest
from core.validation import (
    parse_method,
    validate_loan_parameters,
    check_loan_parameters,
)
from core.errors import (
    LoanParameterError,
    InvalidPrincipal,
    InvalidTerm,
    InvalidRate,
    UnknownMethod,
)
from config.constants import AmortizationMethod
from config.settings import MAX_TERM_MONTHS


class TestParseMethod:
    @pytest.mark.parametrize("value,expected", [
        (AmortizationMethod.FRENCH, AmortizationMethod.FRENCH),
        ("german", AmortizationMethod.GERMAN),
        (" American ", AmortizationMethod.AMERICAN),
        ("frances", AmortizationMethod.FRENCH),
        ("Alemán", AmortizationMethod.GERMAN),
    ])
    def test_valid(self, value, expected):
        assert parse_method(value) is expected

    @pytest.mark.parametrize("value", ["italian", "", None, 1])
    def test_invalid(self, value):
        with pytest.raises(UnknownMethod) as exc_info:
            parse_method(value)
        assert exc_info.value.field == "method"


class TestValidateLoanParameters:
    def test_returns_parameters(self):
        params = validate_loan_parameters(10000, 12, 24, "french")
        assert params.principal == 10000.0
        assert params.term_months == 12
        assert params.annual_rate == 24.0
        assert params.method is AmortizationMethod.FRENCH
        assert params.monthly_rate == pytest.approx(0.02)

    def test_integral_float_term_accepted(self):
        params = validate_loan_parameters(10000, 12.0, 24, "french")
        assert params.term_months == 12
        assert isinstance(params.term_months, int)

    def test_numpy_values_accepted(self):
        params = validate_loan_parameters(np.float64(5000), np.int64(6), np.float64(0), "german")
        assert params.term_months == 6

    def test_decimal_values_accepted(self):
        params = validate_loan_parameters(Decimal("10000.50"), Decimal("12"), Decimal("24.5"), "french")
        assert params.principal == 10000.5
        assert params.term_months == 12

    def test_zero_rate_accepted(self):
        assert validate_loan_parameters(10000, 12, 0, "american").annual_rate == 0

    @pytest.mark.parametrize("principal", [0, -1, math.nan, math.inf, "10000", None, True])
    def test_invalid_principal(self, principal):
        with pytest.raises(InvalidPrincipal):
            validate_loan_parameters(principal, 12, 24, "french")

    @pytest.mark.parametrize("term", [0, -12, 1.5, math.nan, "12", True])
    def test_invalid_term(self, term):
        with pytest.raises(InvalidTerm):
            validate_loan_parameters(10000, term, 24, "french")

    @pytest.mark.parametrize("rate", [-0.5, math.nan, math.inf, None])
    def test_invalid_rate(self, rate):
        with pytest.raises(InvalidRate):
            validate_loan_parameters(10000, 12, rate, "french")

    def test_huge_integer_term(self):
        with pytest.raises(InvalidTerm):
            validate_loan_parameters(10000, 10 ** 400, 24, "french")

    def test_term_above_maximum(self):
        assert validate_loan_parameters(10000, MAX_TERM_MONTHS, 24, "french").term_months == MAX_TERM_MONTHS
        with pytest.raises(InvalidTerm):
            validate_loan_parameters(10000, MAX_TERM_MONTHS + 1, 24, "french")

    def test_huge_integer_principal(self):
        with pytest.raises(InvalidPrincipal):
            validate_loan_parameters(10 ** 400, 12, 24, "french")

    def test_signaling_nan(self):
        with pytest.raises(InvalidPrincipal):
            validate_loan_parameters(Decimal("sNaN"), 12, 24, "french")
        with pytest.raises(InvalidTerm):
            validate_loan_parameters(10000, Decimal("sNaN"), 24, "french")
        with pytest.raises(InvalidRate):
            validate_loan_parameters(10000, 12, Decimal("sNaN"), "french")

    def test_error_carries_value(self):
        with pytest.raises(InvalidPrincipal) as exc_info:
            validate_loan_parameters(-5, 12, 24, "french")
        assert exc_info.value.value == -5
        assert exc_info.value.field == "principal"
        assert isinstance(exc_info.value, LoanParameterError)


class TestCheckLoanParameters:
    def test_ok(self):
        assert check_loan_parameters(10000, 12, 24, "french") == (True, "")

    def test_rejected(self):
        ok, msg = check_loan_parameters(0, 12, 24, "french")
        assert not ok
        assert "mayor que 0" in msg
