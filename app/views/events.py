from __future__ import annotations

from typing import Optional

import streamlit as st

from components.cards import render_event_card
from components.narrative import render_page_intro, render_source_warnings
from config import AppConfig
from data.connection import Store
from data.service import get_events


def render(cfg: AppConfig, store: Optional[Store]) -> None:
    render_page_intro(
        "Events",
        "Every tasting has a theme and a budget ceiling. Open a report to see the wines and how they scored.",
    )
    res = get_events(cfg, store)
    render_source_warnings(res)

    completed = [e for e in res.data if e.is_completed]
    upcoming = [e for e in res.data if e.status == "upcoming"]

    st.markdown('<div class="section-title">Upcoming</div>', unsafe_allow_html=True)
    if upcoming:
        for event in sorted(upcoming, key=lambda e: e.date):
            render_event_card(event, key_prefix="upcoming")
    else:
        st.caption("The next tasting will be announced soon.")

    st.markdown('<div class="section-title">Past tastings</div>', unsafe_allow_html=True)
    if completed:
        for event in completed:
            render_event_card(event, key_prefix="completed")
    else:
        st.caption("No completed tastings yet.")
