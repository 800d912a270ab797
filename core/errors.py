"""贷款参数错误"""


class LoanParameterError(ValueError):
    """参数非法，计算前即拒绝"""

    field = ""

    def __init__(self, message: str, value=None):
        super().__init__(message)
        self.message = message
        self.value = value


class InvalidPrincipal(LoanParameterError):
    field = "principal"


class InvalidTerm(LoanParameterError):
    field = "term_months"


class InvalidRate(LoanParameterError):
    field = "annual_rate"


class UnknownMethod(LoanParameterError):
    field = "method"
