"""Plotly 图表工厂"""
from typing import Dict

import plotly.graph_objects as go
import plotly.express as px
import pandas as pd

import plotly.io as pio
from config.constants import AmortizationMethod
from config.settings import COLORS, CURRENCY_SYMBOL

# 自定义 Plotly 主题
pio.templates["loan_simulator_light"] = go.layout.Template(
    layout=go.Layout(
        font=dict(family="sans-serif", color="#333"),
        title_font=dict(size=18, color="#333"),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        xaxis=dict(
            gridcolor="#e5e7eb",
            linecolor="#e5e7eb",
            zerolinecolor="#e5e7eb",
            tickfont=dict(color="#666"),
            title_font=dict(color="#666"),
        ),
        yaxis=dict(
            gridcolor="#e5e7eb",
            linecolor="#e5e7eb",
            zerolinecolor="#e5e7eb",
            tickfont=dict(color="#666"),
            title_font=dict(color="#666"),
        ),
        legend=dict(
            font=dict(color="#666"),
            bgcolor="rgba(255,255,255,0.5)",
            bordercolor="#e5e7eb",
            borderwidth=1,
        ),
        colorway=px.colors.qualitative.Plotly,
    )
)

pio.templates.default = "loan_simulator_light"

_HOVER_AMOUNT = f"%{{x}}<br>%{{fullData.name}}: {CURRENCY_SYMBOL} %{{y:,.2f}}<extra></extra>"


def create_distribution_bar(
    principal: float,
    total_interest: float,
    template: str = "loan_simulator_light",
) -> go.Figure:
    """总还款额中本金与利息的占比条"""
    fig = go.Figure()
    fig.add_trace(go.Bar(
        y=["Total"], x=[principal], orientation="h",
        name="Capital", marker_color=COLORS["capital"],
        hovertemplate=f"Capital: {CURRENCY_SYMBOL} %{{x:,.2f}}<extra></extra>",
    ))
    fig.add_trace(go.Bar(
        y=["Total"], x=[total_interest], orientation="h",
        name="Intereses", marker_color=COLORS["interest"],
        hovertemplate=f"Intereses: {CURRENCY_SYMBOL} %{{x:,.2f}}<extra></extra>",
    ))
    fig.update_layout(
        title="Distribución de pagos",
        barmode="stack",
        height=180,
        margin=dict(t=50, b=20, l=20, r=20),
        yaxis=dict(showticklabels=False),
        template=template,
    )
    return fig


def create_composition_bar(schedule: pd.DataFrame, template: str = "loan_simulator_light") -> go.Figure:
    """每期本金/利息构成堆叠柱状图"""
    fig = go.Figure()
    x_labels = [f"Mes {int(p)}" for p in schedule["period"]]

    fig.add_trace(go.Bar(
        x=x_labels, y=schedule["capital"], name="Capital",
        marker_color=COLORS["capital"], hovertemplate=_HOVER_AMOUNT,
    ))
    fig.add_trace(go.Bar(
        x=x_labels, y=schedule["interest"], name="Interés",
        marker_color=COLORS["interest"], hovertemplate=_HOVER_AMOUNT,
    ))

    fig.update_layout(
        title="Composición de cada cuota",
        barmode="stack",
        xaxis_title="Mes",
        yaxis_title=f"Monto ({CURRENCY_SYMBOL})",
        hovermode="x unified",
        margin=dict(t=60, b=60, l=60, r=20),
        height=380,
        template=template,
    )
    return fig


def create_balance_line(schedule: pd.DataFrame, template: str = "loan_simulator_light") -> go.Figure:
    """剩余本金折线图"""
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=schedule["period"], y=schedule["balance"],
        mode="lines+markers", name="Saldo",
        line=dict(color=COLORS["balance"], width=2),
        hovertemplate=f"Mes %{{x}}<br>Saldo: {CURRENCY_SYMBOL} %{{y:,.2f}}<extra></extra>",
    ))
    fig.update_layout(
        title="Saldo pendiente",
        xaxis_title="Mes",
        yaxis_title=f"Saldo ({CURRENCY_SYMBOL})",
        margin=dict(t=60, b=60, l=60, r=20),
        height=350,
        template=template,
    )
    return fig


def create_method_payment_lines(
    schedules: Dict[AmortizationMethod, pd.DataFrame],
    template: str = "loan_simulator_light",
) -> go.Figure:
    """三种方式每期月供对比"""
    fig = go.Figure()
    for method, df in schedules.items():
        fig.add_trace(go.Scatter(
            x=df["period"], y=df["total"],
            mode="lines+markers", name=method.label,
            line=dict(color=COLORS[method.value], width=2),
            hovertemplate=f"Mes %{{x}}<br>{method.label}: {CURRENCY_SYMBOL} %{{y:,.2f}}<extra></extra>",
        ))
    fig.update_layout(
        title="Cuota por sistema",
        xaxis_title="Mes",
        yaxis_title=f"Cuota ({CURRENCY_SYMBOL})",
        hovermode="x unified",
        margin=dict(t=60, b=60, l=60, r=20),
        height=400,
        template=template,
    )
    return fig


def create_comparison_bar(comparison_df: pd.DataFrame, template: str = "loan_simulator_light") -> go.Figure:
    """各方式总利息对比柱状图"""
    labels = [AmortizationMethod(m).label for m in comparison_df["method"]]
    colors = [COLORS[m] for m in comparison_df["method"]]
    fig = go.Figure(data=[go.Bar(
        x=labels, y=comparison_df["total_interest"],
        marker_color=colors,
        hovertemplate=f"%{{x}}<br>Intereses: {CURRENCY_SYMBOL} %{{y:,.2f}}<extra></extra>",
    )])
    fig.update_layout(
        title="Intereses totales por sistema",
        yaxis_title=f"Intereses ({CURRENCY_SYMBOL})",
        margin=dict(t=60, b=40, l=60, r=20),
        height=350,
        template=template,
    )
    return fig
