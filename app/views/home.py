from __future__ import annotations

from typing import Optional

import streamlit as st

from components.cards import render_event_card
from components.metrics import render_kpi_row, stats_kpis
from components.narrative import render_callout, render_source_warnings
from config import CLUB_NAME, AppConfig
from data.connection import Store
from data.service import get_events, get_stats

RECENT_EVENTS = 3


def render(cfg: AppConfig, store: Optional[Store]) -> None:
    stats = get_stats(cfg, store)
    events = get_events(cfg, store)
    render_source_warnings(stats, events)

    # --- Hero ---
    st.markdown(
        f"""
<div class="hero">
  <div class="hero-title">{CLUB_NAME}</div>
  <p class="hero-narrative">
    Once a month we gather, bring a bottle that fits the theme and the budget, and taste everything blind.<br/>
    The best bottle of the night takes the crown.
  </p>
</div>
        """,
        unsafe_allow_html=True,
    )

    render_kpi_row(stats_kpis(stats.data, approximate=stats.source == "fallback"))

    # --- Recent events ---
    st.markdown('<div class="section-title">Recent tastings</div>', unsafe_allow_html=True)
    recent = events.data[:RECENT_EVENTS]
    if not recent:
        st.info("No tastings recorded yet.")
    cols = st.columns(RECENT_EVENTS)
    for col, event in zip(cols, recent):
        with col:
            render_event_card(event, key_prefix="home")

    render_callout(
        "Want a seat at the table?",
        "Membership is by invitation. Visit the Join page to find out how the next intake works.",
    )
