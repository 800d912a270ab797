from dataclasses import dataclass
from typing import Tuple

import pandas as pd

from config.constants import AmortizationMethod, SCHEDULE_COLUMNS


@dataclass(frozen=True)
class LoanParameters:
    principal: float
    term_months: int
    annual_rate: float  # 年名义利率 (%)
    method: AmortizationMethod

    @property
    def monthly_rate(self) -> float:
        return self.annual_rate / 12 / 100


@dataclass(frozen=True)
class Installment:
    period: int
    capital: float
    interest: float
    total: float
    balance: float  # 剩余本金，不小于0


@dataclass(frozen=True)
class Schedule:
    """还款计划：按期数顺序排列的 Installment"""

    params: LoanParameters
    installments: Tuple[Installment, ...]

    def __len__(self) -> int:
        return len(self.installments)

    def __iter__(self):
        return iter(self.installments)

    def __getitem__(self, index):
        return self.installments[index]

    @property
    def total_interest(self) -> float:
        return sum(inst.interest for inst in self.installments)

    @property
    def total_capital(self) -> float:
        return sum(inst.capital for inst in self.installments)

    @property
    def total_payable(self) -> float:
        return self.params.principal + self.total_interest

    @property
    def first_installment(self) -> float:
        return self.installments[0].total if self.installments else 0.0

    @property
    def last_installment(self) -> float:
        return self.installments[-1].total if self.installments else 0.0

    def to_dataframe(self) -> pd.DataFrame:
        """转为 DataFrame，附带累计本金/利息列"""
        records = []
        cum_capital = 0.0
        cum_interest = 0.0
        for inst in self.installments:
            cum_capital += inst.capital
            cum_interest += inst.interest
            records.append({
                "period": inst.period,
                "capital": inst.capital,
                "interest": inst.interest,
                "total": inst.total,
                "balance": inst.balance,
                "cumulative_capital": cum_capital,
                "cumulative_interest": cum_interest,
            })
        return pd.DataFrame(records, columns=SCHEDULE_COLUMNS)
