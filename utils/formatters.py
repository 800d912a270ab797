import math

from config.settings import AMOUNT_PRECISION, CURRENCY_SYMBOL


def fmt_currency(value: float, symbol: str = CURRENCY_SYMBOL) -> str:
    """格式化金额：1234567.891 -> S/ 1,234,567.89"""
    sign = "-" if value < 0 and round(abs(value), AMOUNT_PRECISION) != 0 else ""
    return f"{sign}{symbol} {abs(value):,.{AMOUNT_PRECISION}f}"


def fmt_rate(value: float) -> str:
    """格式化利率百分比：24 -> 24.00%，无法计算(nan)时显示 —"""
    if math.isnan(value):
        return "—"
    return f"{value:.2f}%"


def fmt_percent(value: float) -> str:
    """格式化比例：0.3456 -> 34.56%"""
    return f"{value * 100:.2f}%"


def fmt_months(months: int) -> str:
    """格式化月数：15 -> 1 año 3 meses"""
    years = months // 12
    remain = months % 12
    parts = []
    if years:
        parts.append(f"{years} año" if years == 1 else f"{years} años")
    if remain or not years:
        parts.append(f"{remain} mes" if remain == 1 else f"{remain} meses")
    return " ".join(parts)
