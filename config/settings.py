import os

from config.constants import AmortizationMethod

# 页面配置
PAGE_TITLE = "Simulador de Préstamo"
PAGE_SUBTITLE = "Compara diferentes sistemas de amortización"
PAGE_ICON = "💸"
LAYOUT = "centered"

# 默认输入
DEFAULT_PRINCIPAL = 10000.0
DEFAULT_TERM_MONTHS = 12
DEFAULT_ANNUAL_RATE = 24.0
DEFAULT_METHOD = AmortizationMethod.FRENCH

# 输入控件范围
INPUT_RANGES = {
    "principal": {"min": 1000.0, "max": 100000.0, "step": 1000.0},
    "term_months": {"min": 3, "max": 36, "step": 1},
    "annual_rate": {"min": 5.0, "max": 60.0, "step": 0.5},
}

# 货币格式 (es-PE, PEN)
CURRENCY_SYMBOL = "S/"
AMOUNT_PRECISION = 2
RATE_PRECISION = 4

# 贷款期限上限（月）
MAX_TERM_MONTHS = 1200

# 浮点容差
TOLERANCE = 1e-6

# 图表配色
COLORS = {
    "primary": "#f97316",
    "secondary": "#fdba74",
    "capital": "#f97316",
    "interest": "#fdba74",
    "balance": "#2563eb",
    "french": "#f97316",
    "german": "#2563eb",
    "american": "#16a34a",
}

# 日志级别
LOG_LEVEL = os.environ.get("LOAN_SIM_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
