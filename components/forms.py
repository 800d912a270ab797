"""表单组件"""
import streamlit as st

from config.constants import AmortizationMethod
from config.settings import (
    DEFAULT_PRINCIPAL, DEFAULT_TERM_MONTHS, DEFAULT_ANNUAL_RATE, DEFAULT_METHOD,
    INPUT_RANGES, CURRENCY_SYMBOL,
)
from utils.formatters import fmt_months


def _sync(source_key: str, target_key: str):
    """滑块与数字输入框联动"""
    st.session_state[target_key] = st.session_state[source_key]


def _render_control(label: str, field: str, default, key_prefix: str):
    """滑块 + 数字输入，返回当前值"""
    rng = INPUT_RANGES[field]
    slider_key = f"{key_prefix}_{field}_slider"
    input_key = f"{key_prefix}_{field}_input"
    if slider_key not in st.session_state:
        st.session_state[slider_key] = default
        st.session_state[input_key] = default

    with st.container(border=True):
        st.slider(
            label,
            min_value=rng["min"], max_value=rng["max"], step=rng["step"],
            key=slider_key,
            on_change=_sync, args=(slider_key, input_key),
        )
        st.number_input(
            label,
            min_value=rng["min"], max_value=rng["max"], step=rng["step"],
            key=input_key,
            label_visibility="collapsed",
            on_change=_sync, args=(input_key, slider_key),
        )
    return st.session_state[input_key]


def render_loan_inputs(key_prefix: str = "sim") -> dict:
    """渲染三项贷款参数输入，返回 {principal, term_months, annual_rate}"""
    c1, c2, c3 = st.columns(3)
    with c1:
        principal = _render_control(
            f"Monto del préstamo ({CURRENCY_SYMBOL})", "principal",
            DEFAULT_PRINCIPAL, key_prefix,
        )
    with c2:
        term_months = _render_control(
            "Plazo (meses)", "term_months", DEFAULT_TERM_MONTHS, key_prefix,
        )
        st.caption(fmt_months(int(term_months)))
    with c3:
        annual_rate = _render_control(
            "Tasa de interés anual (%)", "annual_rate", DEFAULT_ANNUAL_RATE, key_prefix,
        )
    return {
        "principal": float(principal),
        "term_months": int(term_months),
        "annual_rate": float(annual_rate),
    }


def render_method_selector(key_prefix: str = "sim") -> AmortizationMethod:
    """还款方式选择"""
    options = [m.value for m in AmortizationMethod]
    selected = st.radio(
        "Sistema de amortización",
        options=options,
        index=options.index(DEFAULT_METHOD.value),
        format_func=lambda x: f"{AmortizationMethod(x).label} · {AmortizationMethod(x).description}",
        horizontal=True,
        key=f"{key_prefix}_method",
    )
    return AmortizationMethod(selected)
