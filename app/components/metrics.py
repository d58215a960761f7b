from __future__ import annotations

from dataclasses import dataclass
from html import escape
from typing import Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from config import THEME
from data.records import ClubStats, WineRecord


@dataclass(frozen=True)
class Kpi:
    label: str
    value: str
    help: Optional[str] = None


def render_kpi_row(kpis: list[Kpi]) -> None:
    for col, kpi in zip(st.columns(len(kpis)), kpis):
        tooltip = f' title="{escape(kpi.help)}"' if kpi.help else ""
        col.markdown(
            f'<div class="metric-card"{tooltip}>'
            f'<div class="metric-value">{escape(kpi.value)}</div>'
            f'<div class="metric-label">{escape(kpi.label)}</div>'
            "</div>",
            unsafe_allow_html=True,
        )


def stats_kpis(stats: ClubStats, approximate: bool = False) -> list[Kpi]:
    # Sample figures are rounded club history, shown as "36+"
    suffix = "+" if approximate else ""
    return [
        Kpi("Events Hosted", f"{stats.total_events}{suffix}"),
        Kpi("Active Members", f"{stats.active_members}{suffix}"),
        Kpi("Wines Tasted", f"{stats.total_wines}{suffix}"),
    ]


def apply_plotly_theme(fig: go.Figure, x_title: str = "", y_title: str = "") -> go.Figure:
    """Club look for plotly figures: white card surface, serif title, faint grid."""
    axis = dict(gridcolor=THEME["grid"], linecolor=THEME["border_color"], zeroline=False,
                tickfont=dict(color=THEME["text_secondary"]))
    fig.update_layout(
        margin=dict(l=10, r=10, t=48, b=10),
        paper_bgcolor=THEME["bg_card"],
        plot_bgcolor=THEME["bg_card"],
        font=dict(family="Lato, system-ui, sans-serif", color=THEME["text_primary"]),
        title_font=dict(family="Playfair Display, Georgia, serif", color=THEME["wine_900"], size=18),
        showlegend=False,
    )
    fig.update_xaxes(title_text=x_title, **axis)
    fig.update_yaxes(title_text=y_title, **axis)
    return fig


def ratings_frame(wines: list[WineRecord]) -> pd.DataFrame:
    """Rated wines only, in the order given (already sorted by rating)."""
    return pd.DataFrame(
        [
            {"wine": w.name, "rating": w.rating, "result": "Winner" if w.is_winner else "Entry"}
            for w in wines
            if w.rating is not None
        ],
        columns=["wine", "rating", "result"],
    )


def rating_bar_chart(wines: list[WineRecord], title: str = "Tasting ratings") -> Optional[go.Figure]:
    df = ratings_frame(wines)
    if df.empty:
        return None
    fig = px.bar(
        df,
        x="rating",
        y="wine",
        color="result",
        orientation="h",
        title=title,
        text="rating",
        color_discrete_map={"Winner": THEME["gold"], "Entry": THEME["accent_primary"]},
    )
    apply_plotly_theme(fig, x_title="Rating (1-10)")
    fig.update_xaxes(range=[0, 10])
    fig.update_yaxes(autorange="reversed")
    st.plotly_chart(fig, use_container_width=True)
    return fig
