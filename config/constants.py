from enum import Enum


class AmortizationMethod(str, Enum):
    FRENCH = "french"  # 法式：等额本息
    GERMAN = "german"  # 德式：等额本金
    AMERICAN = "american"  # 美式：先息后本

    @property
    def label(self) -> str:
        return {
            "french": "Francés",
            "german": "Alemán",
            "american": "Americano",
        }[self.value]

    @property
    def description(self) -> str:
        return {
            "french": "Cuota fija",
            "german": "Cuota decreciente",
            "american": "Pago final",
        }[self.value]

    @property
    def detail(self) -> str:
        return {
            "french": "Cuotas fijas con interés decreciente",
            "german": "Cuotas decrecientes con capital fijo",
            "american": "Pago de intereses + capital al final",
        }[self.value]

    @property
    def installment_caption(self) -> str:
        """摘要卡片上代表性月供的标题"""
        return {
            "french": "Cuota mensual",
            "german": "Primera cuota",
            "american": "Cuota periódica",
        }[self.value]


# 西语名称别名
METHOD_ALIASES = {
    "frances": AmortizationMethod.FRENCH,
    "francés": AmortizationMethod.FRENCH,
    "aleman": AmortizationMethod.GERMAN,
    "alemán": AmortizationMethod.GERMAN,
    "americano": AmortizationMethod.AMERICAN,
}

# 列定义
SCHEDULE_COLUMNS = [
    "period", "capital", "interest", "total", "balance",
    "cumulative_capital", "cumulative_interest",
]

COMPARISON_COLUMNS = [
    "method", "first_installment", "last_installment",
    "total_interest", "total_payable", "interest_share", "tcea",
]
