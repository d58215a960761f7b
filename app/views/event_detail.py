from __future__ import annotations

from typing import Optional

import streamlit as st

from components.cards import format_date, render_wine_card
from components.metrics import Kpi, rating_bar_chart, render_kpi_row
from components.narrative import render_source_warnings
from components.sidebar import close_event
from config import AppConfig
from data.connection import Store
from data.service import get_event_detail


def render(cfg: AppConfig, store: Optional[Store], event_id: int) -> None:
    st.button("← Back to events", key="back_to_events", on_click=close_event)

    res = get_event_detail(cfg, store, event_id)
    if res.data is None:
        if res.source == "unavailable":
            st.error(res.warning)
        else:
            st.error("Event not found")
        return
    render_source_warnings(res)

    detail = res.data
    event = detail.event
    st.title(event.title)
    st.caption(f"{format_date(event.date)} · {event.location}")

    render_kpi_row([
        Kpi("Theme", event.theme),
        Kpi("Budget", event.budget),
        Kpi("Participants", str(event.participants)),
        Kpi("Status", event.status.title()),
    ])

    st.markdown('<div class="section-title">Highlights</div>', unsafe_allow_html=True)
    st.markdown("\n".join(f"- {h}" for h in detail.highlights()))
    st.write(event.excerpt)

    if not detail.wines:
        if event.winner:
            st.info(f"🏆 Winning wine: {event.winner}")
        st.caption("No tasting sheet has been published for this event.")
        return

    st.markdown('<div class="section-title">The wines</div>', unsafe_allow_html=True)
    rating_bar_chart(detail.wines)
    for rank, wine in enumerate(detail.wines, start=1):
        render_wine_card(wine, rank)
