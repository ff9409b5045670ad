"""
Plotly chart factory functions with consistent styling for the dashboard.
"""

from __future__ import annotations

from typing import Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from fuelops.config import LOW_STOCK_PERCENT

DEFAULT_TEMPLATE = "plotly_white"
REVENUE_COLOR = "#10b981"
STOCK_COLOR = "#3b82f6"
LOW_STOCK_COLOR = "#ef4444"
DEFAULT_COLOR_SEQUENCE = [
    STOCK_COLOR,
    REVENUE_COLOR,
    "#6366f1",
    LOW_STOCK_COLOR,
]


def _configure_layout(
    fig: go.Figure,
    title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
    yaxis_tickformat: Optional[str] = None,
    hovermode: str = "x unified",
) -> go.Figure:
    fig.update_layout(
        template=DEFAULT_TEMPLATE,
        colorway=DEFAULT_COLOR_SEQUENCE,
        title=title,
        hovermode=hovermode,
        showlegend=False,
        margin=dict(l=40, r=20, t=60, b=40),
    )
    if yaxis_title:
        fig.update_yaxes(title=yaxis_title)
    if yaxis_tickformat:
        fig.update_yaxes(tickformat=yaxis_tickformat)
    fig.update_xaxes(showgrid=False)
    fig.update_yaxes(showgrid=True, zeroline=True)
    return fig


def render_plotly(fig: go.Figure) -> None:
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})


def revenue_area_chart(
    df: pd.DataFrame,
    x: str = "time",
    y: str = "amount",
    title: Optional[str] = None,
) -> go.Figure:
    fig = px.area(df, x=x, y=y, markers=True)
    fig.update_traces(line=dict(color=REVENUE_COLOR, width=2), fillcolor="rgba(16, 185, 129, 0.1)")
    fig = _configure_layout(fig, title, yaxis_title="Revenue", yaxis_tickformat="$,.0f")
    fig.update_xaxes(type="category", title=None)
    return fig


def stock_level_bar_chart(
    df: pd.DataFrame,
    title: Optional[str] = None,
) -> go.Figure:
    """Horizontal bars of current level per tank, red for tanks flagged low."""
    colors = [LOW_STOCK_COLOR if low else STOCK_COLOR for low in df["is_low"]]
    fig = go.Figure(
        go.Bar(
            x=df["current_level"],
            y=df["name"],
            orientation="h",
            marker=dict(color=colors),
            customdata=df[["capacity", "fill_percent"]].to_numpy(),
            hovertemplate=(
                "%{y}<br>%{x:,.0f} L of %{customdata[0]:,.0f} L"
                " (%{customdata[1]:.0f}%)<extra></extra>"
            ),
        )
    )
    fig = _configure_layout(fig, title, hovermode="closest")
    fig.update_xaxes(visible=False)
    fig.update_yaxes(autorange="reversed", showgrid=False)
    return fig


def tank_fill_gauge(
    percent: int,
    is_low: bool,
    low_stock_percent: float = LOW_STOCK_PERCENT,
) -> go.Figure:
    color = LOW_STOCK_COLOR if is_low else STOCK_COLOR
    fig = go.Figure(
        go.Indicator(
            mode="gauge+number",
            value=percent,
            number=dict(suffix="%"),
            gauge=dict(
                axis=dict(range=[0, 100]),
                bar=dict(color=color),
                threshold=dict(line=dict(color=LOW_STOCK_COLOR, width=2), value=low_stock_percent),
            ),
        )
    )
    fig.update_layout(template=DEFAULT_TEMPLATE, height=180, margin=dict(l=20, r=20, t=20, b=10))
    return fig
