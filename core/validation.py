import math
import numbers
from decimal import Decimal
from typing import Optional, Tuple

from config.constants import AmortizationMethod, METHOD_ALIASES
from config.settings import MAX_TERM_MONTHS
from core.errors import (
    LoanParameterError,
    InvalidPrincipal,
    InvalidTerm,
    InvalidRate,
    UnknownMethod,
)
from core.schema import LoanParameters


def _is_real(value) -> bool:
    return isinstance(value, (numbers.Real, Decimal)) and not isinstance(value, bool)


def _to_finite_float(value) -> Optional[float]:
    """转为有限浮点数，无法转换（溢出、signaling NaN 等）时返回 None"""
    if not _is_real(value):
        return None
    try:
        result = float(value)
    except (ValueError, OverflowError):
        return None
    return result if math.isfinite(result) else None


def parse_method(method) -> AmortizationMethod:
    """解析还款方式，支持枚举、英文值和西语名称"""
    if isinstance(method, AmortizationMethod):
        return method
    if isinstance(method, str):
        key = method.strip().lower()
        if key in METHOD_ALIASES:
            return METHOD_ALIASES[key]
        try:
            return AmortizationMethod(key)
        except ValueError:
            pass
    raise UnknownMethod(f"Sistema de amortización desconocido: {method!r}", method)


def validate_principal(principal) -> float:
    value = _to_finite_float(principal)
    if value is None:
        raise InvalidPrincipal("El monto del préstamo debe ser un número", principal)
    if value <= 0:
        raise InvalidPrincipal("El monto del préstamo debe ser mayor que 0", principal)
    return value


def validate_term(term_months) -> int:
    if isinstance(term_months, numbers.Integral) and not isinstance(term_months, bool):
        value = int(term_months)
    else:
        as_float = _to_finite_float(term_months)
        if as_float is None or not as_float.is_integer():
            raise InvalidTerm("El plazo debe ser un número entero de meses", term_months)
        value = int(as_float)
    if value <= 0:
        raise InvalidTerm("El plazo debe ser mayor que 0 meses", term_months)
    if value > MAX_TERM_MONTHS:
        raise InvalidTerm(f"El plazo no puede superar {MAX_TERM_MONTHS} meses", term_months)
    return value


def validate_rate(annual_rate) -> float:
    value = _to_finite_float(annual_rate)
    if value is None:
        raise InvalidRate("La tasa de interés debe ser un número", annual_rate)
    if value < 0:
        raise InvalidRate("La tasa de interés no puede ser negativa", annual_rate)
    return value



def validate_loan_parameters(
    principal: float,
    term_months: int,
    annual_rate: float,
    method,
) -> LoanParameters:
    """校验输入并返回 LoanParameters，非法时抛出对应的 LoanParameterError"""
    return LoanParameters(
        principal=validate_principal(principal),
        term_months=validate_term(term_months),
        annual_rate=validate_rate(annual_rate),
        method=parse_method(method),
    )


def check_loan_parameters(
    principal: float,
    term_months: int,
    annual_rate: float,
    method,
) -> Tuple[bool, str]:
    """表单用：返回 (是否合法, 错误信息)"""
    try:
        validate_loan_parameters(principal, term_months, annual_rate, method)
    except LoanParameterError as exc:
        return False, exc.message
    return True, ""
