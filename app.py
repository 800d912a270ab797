"""Simulador de Préstamo - 主入口"""
import logging

import streamlit as st

from config.settings import PAGE_TITLE, PAGE_SUBTITLE, PAGE_ICON, LAYOUT
from config.constants import AmortizationMethod
from components.charts import (
    create_distribution_bar, create_composition_bar, create_balance_line,
    create_method_payment_lines, create_comparison_bar,
)
from components.forms import render_loan_inputs, render_method_selector
from components.metrics import render_summary_metrics
from components.tables import render_schedule_table, render_comparison_table
from core.calculator import summarize
from core.comparison import compare_schedules, compute_all_schedules
from core.validation import check_loan_parameters
from utils.logging_setup import setup_logging

setup_logging()
logger = logging.getLogger(__name__)

st.set_page_config(
    page_title=PAGE_TITLE,
    page_icon=PAGE_ICON,
    layout=LAYOUT,
)

st.title(f"{PAGE_ICON} {PAGE_TITLE}")
st.caption(PAGE_SUBTITLE)

with st.sidebar:
    st.markdown("### Sistemas de amortización")
    for m in AmortizationMethod:
        st.markdown(f"- **{m.label}:** {m.detail}")

params = render_loan_inputs()
method = render_method_selector()

# 每次参数变化 Streamlit 重跑脚本，这里先校验再同步重新计算
ok, message = check_loan_parameters(
    params["principal"], params["term_months"], params["annual_rate"], method,
)
if not ok:
    logger.info("rejected parameters: %s", message)
    st.error(message)
    st.stop()

all_schedules = compute_all_schedules(
    params["principal"], params["term_months"], params["annual_rate"],
)
comparison_df = compare_schedules(all_schedules)

schedule = all_schedules[method]
schedule_df = schedule.to_dataframe()
summary = summarize(schedule)
tcea = float(comparison_df.set_index("method").loc[method.value, "tcea"])

tab_schedule, tab_compare = st.tabs(["Tabla de Amortización", "Comparar sistemas"])

with tab_schedule:
    render_summary_metrics(method, summary, tcea)
    st.plotly_chart(
        create_distribution_bar(summary["principal"], summary["total_interest"]),
        width='stretch',
    )

    st.subheader("Tabla de Amortización")
    st.caption(method.detail)
    render_schedule_table(schedule_df)

    col1, col2 = st.columns(2)
    with col1:
        st.plotly_chart(create_composition_bar(schedule_df), width='stretch')
    with col2:
        st.plotly_chart(create_balance_line(schedule_df), width='stretch')

with tab_compare:
    render_comparison_table(comparison_df)

    all_schedule_dfs = {
        m: schedule_df if m is method else sch.to_dataframe()
        for m, sch in all_schedules.items()
    }
    st.plotly_chart(create_method_payment_lines(all_schedule_dfs), width='stretch')
    st.plotly_chart(create_comparison_bar(comparison_df), width='stretch')
