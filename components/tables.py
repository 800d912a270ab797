"""格式化表格组件"""
import pandas as pd
import streamlit as st

from config.constants import AmortizationMethod
from utils.formatters import fmt_currency, fmt_percent, fmt_rate


def render_schedule_table(schedule: pd.DataFrame):
    """渲染还款计划表格"""
    if schedule.empty:
        st.info("Sin cuotas para mostrar")
        return

    col_map = {
        "period": "Mes",
        "capital": "Capital",
        "interest": "Interés",
        "total": "Cuota",
        "balance": "Saldo",
    }
    display_df = schedule[list(col_map)].rename(columns=col_map)

    for col in ["Capital", "Interés", "Cuota", "Saldo"]:
        display_df[col] = display_df[col].apply(fmt_currency)

    st.dataframe(display_df, width='stretch', hide_index=True, height=300)


def render_comparison_table(comparison_df: pd.DataFrame):
    """渲染还款方式对比表"""
    if comparison_df.empty:
        st.info("Sin datos de comparación")
        return

    display = comparison_df.copy()
    display["method"] = display["method"].map(lambda m: AmortizationMethod(m).label)
    for col in ["first_installment", "last_installment", "total_interest", "total_payable"]:
        display[col] = display[col].apply(fmt_currency)
    display["interest_share"] = display["interest_share"].apply(fmt_percent)
    display["tcea"] = display["tcea"].apply(fmt_rate)

    display = display.rename(columns={
        "method": "Sistema",
        "first_installment": "Primera cuota",
        "last_installment": "Última cuota",
        "total_interest": "Intereses",
        "total_payable": "Total a pagar",
        "interest_share": "% intereses",
        "tcea": "TCEA",
    })
    st.dataframe(display, width='stretch', hide_index=True)
