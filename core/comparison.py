"""还款方式对比"""
from typing import Dict

import pandas as pd

from config.constants import AmortizationMethod, COMPARISON_COLUMNS
from core.calculator import (
    calc_effective_annual_rate,
    compute_schedule_for,
    summarize,
)
from core.schema import LoanParameters, Schedule
from core.validation import validate_loan_parameters


def compute_all_schedules(
    principal: float,
    term_months: int,
    annual_rate: float,
) -> Dict[AmortizationMethod, Schedule]:
    """同一组参数下三种方式的还款计划"""
    base = validate_loan_parameters(principal, term_months, annual_rate, AmortizationMethod.FRENCH)
    return {
        method: compute_schedule_for(LoanParameters(
            principal=base.principal,
            term_months=base.term_months,
            annual_rate=base.annual_rate,
            method=method,
        ))
        for method in AmortizationMethod
    }


def compare_methods(
    principal: float,
    term_months: int,
    annual_rate: float,
) -> pd.DataFrame:
    """
    对比法式/德式/美式的关键指标。
    返回每种方式一行的 DataFrame。
    """
    return compare_schedules(compute_all_schedules(principal, term_months, annual_rate))


def compare_schedules(schedules: Dict[AmortizationMethod, Schedule]) -> pd.DataFrame:
    """对已生成的还款计划做对比，避免重复计算"""
    rows = []
    for method, schedule in schedules.items():
        summary = summarize(schedule)
        rows.append({
            "method": method.value,
            "first_installment": summary["first_installment"],
            "last_installment": summary["last_installment"],
            "total_interest": summary["total_interest"],
            "total_payable": summary["total_payable"],
            "interest_share": summary["interest_share"],
            "tcea": calc_effective_annual_rate(schedule),
        })
    return pd.DataFrame(rows, columns=COMPARISON_COLUMNS)
