"""核心计算：法式（等额本息）、德式（等额本金）、美式（先息后本）、TCEA"""
import logging
from typing import Dict, List

import numpy as np
from scipy import optimize

from config.constants import AmortizationMethod
from config.settings import RATE_PRECISION
from core.schema import Installment, LoanParameters, Schedule
from core.validation import validate_loan_parameters

logger = logging.getLogger(__name__)

MAX_BRACKET_STEPS = 1100


def calc_monthly_rate(annual_rate: float) -> float:
    """年名义利率(%) -> 月利率(小数)"""
    return annual_rate / 12 / 100


def calc_fixed_payment(principal: float, monthly_rate: float, term_months: int) -> float:
    """法式固定月供，零利率时退化为 本金/期数"""
    if monthly_rate == 0:
        return principal / term_months
    return (principal * monthly_rate) / (1 - (1 + monthly_rate) ** (-term_months))


def calc_first_installment(
    principal: float,
    term_months: int,
    annual_rate: float,
    method,
) -> float:
    """不生成完整计划，直接计算首期月供"""
    params = validate_loan_parameters(principal, term_months, annual_rate, method)
    i = params.monthly_rate
    p = params.principal
    n = params.term_months
    if params.method == AmortizationMethod.FRENCH:
        return calc_fixed_payment(p, i, n)
    if params.method == AmortizationMethod.GERMAN:
        return p / n + p * i
    # 美式：只有一期时首期即为尾期
    return p * i + (p if n == 1 else 0.0)


def _build_installments(params: LoanParameters) -> List[Installment]:
    p = params.principal
    n = params.term_months
    i = params.monthly_rate
    method = params.method

    if method == AmortizationMethod.FRENCH:
        fixed_payment = calc_fixed_payment(p, i, n)
    elif method == AmortizationMethod.GERMAN:
        base_capital = p / n

    installments = []
    balance = p
    for period in range(1, n + 1):
        interest = balance * i
        if method == AmortizationMethod.FRENCH:
            capital = fixed_payment - interest
            total = fixed_payment
        elif method == AmortizationMethod.GERMAN:
            capital = base_capital
            total = capital + interest
        else:
            capital = p if period == n else 0.0
            total = capital + interest

        balance = max(0.0, balance - capital)
        installments.append(Installment(
            period=period,
            capital=capital,
            interest=interest,
            total=total,
            balance=balance,
        ))
    return installments


def compute_schedule(
    principal: float,
    term_months: int,
    annual_rate: float,
    method,
) -> Schedule:
    """生成还款计划表

    先校验全部参数（非法时抛出 LoanParameterError 子类），
    再逐期计算，返回恰好 term_months 期的 Schedule。
    """
    params = validate_loan_parameters(principal, term_months, annual_rate, method)
    return compute_schedule_for(params)


def compute_schedule_for(params: LoanParameters) -> Schedule:
    """对已校验的 LoanParameters 生成还款计划"""
    schedule = Schedule(params=params, installments=tuple(_build_installments(params)))
    logger.debug(
        "schedule computed: method=%s principal=%.2f term=%d rate=%.4f total_interest=%.2f",
        params.method.value, params.principal, params.term_months,
        params.annual_rate, schedule.total_interest,
    )
    return schedule


def summarize(schedule: Schedule) -> Dict[str, float]:
    """摘要指标：本金、首期/末期月供、总利息、总还款额、利息占比"""
    total_payable = schedule.total_payable
    return {
        "principal": schedule.params.principal,
        "first_installment": schedule.first_installment,
        "last_installment": schedule.last_installment,
        "total_interest": schedule.total_interest,
        "total_payable": total_payable,
        "interest_share": schedule.total_interest / total_payable if total_payable > 0 else 0.0,
    }


def _npv_by_discount(cash_flows: np.ndarray, discount: float) -> float:
    """按折现因子 v = 1/(1+r) 计算净现值，v 在 (0, 1] 内不会溢出"""
    periods = np.arange(len(cash_flows))
    with np.errstate(under="ignore"):
        return float(np.sum(cash_flows * np.power(discount, periods)))


def calc_effective_annual_rate(schedule: Schedule) -> float:
    """用 IRR 法计算 TCEA（真实年化成本，%）

    在折现因子空间求根：npv(v) 在 v=0 处为 -本金，在 v=1 处为总利息，
    且随 v 单调递增。无法求解时返回 nan。
    """
    if schedule.params.monthly_rate == 0:
        return 0.0

    cash_flows = np.array(
        [-schedule.params.principal] + [inst.total for inst in schedule.installments]
    )

    # 下界从月利率两倍处开始，逐次减半直到净现值为负
    lower = 1 / (1 + 2 * schedule.params.monthly_rate)
    for _ in range(MAX_BRACKET_STEPS):
        if _npv_by_discount(cash_flows, lower) < 0:
            break
        lower /= 2
    else:
        lower = 0.0

    try:
        discount = optimize.brentq(
            lambda v: _npv_by_discount(cash_flows, v), lower, 1.0, xtol=1e-15,
        )
    except (ValueError, RuntimeError):
        logger.warning(
            "IRR not bracketed for method=%s rate=%.4f",
            schedule.params.method.value, schedule.params.annual_rate,
        )
        return float("nan")
    with np.errstate(over="ignore", divide="ignore"):
        annual_irr = float(np.power(discount, -12.0)) - 1
    return round(annual_irr * 100, RATE_PRECISION)
