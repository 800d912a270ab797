"""指标卡片组件"""
import streamlit as st

from config.constants import AmortizationMethod
from utils.formatters import fmt_currency, fmt_percent, fmt_rate


def render_summary_metrics(method: AmortizationMethod, summary: dict, tcea: float):
    """渲染摘要卡片：贷款金额、代表性月供、总还款额

    summary 为 core.calculator.summarize 的返回值
    """
    c1, c2, c3 = st.columns(3)
    with c1:
        st.metric("Monto solicitado", fmt_currency(summary["principal"]))
    with c2:
        st.metric(method.installment_caption, fmt_currency(summary["first_installment"]))
    with c3:
        st.metric("Total a pagar", fmt_currency(summary["total_payable"]))

    c4, c5, c6 = st.columns(3)
    with c4:
        st.metric("Intereses", fmt_currency(summary["total_interest"]))
    with c5:
        st.metric("Proporción de intereses", fmt_percent(summary["interest_share"]))
    with c6:
        st.metric("TCEA", fmt_rate(tcea))
