from __future__ import annotations

import streamlit as st

from components.narrative import render_page_intro
from config import CLUB_NAME, AppConfig


VALUES = [
    ("Blind tasting", "Bottles are bagged before pouring, so labels and prices never sway a score."),
    ("A theme and a budget", "Each event sets a region or style and a price ceiling. Finding value is half the game."),
    ("One winner", "Everyone rates every wine. The highest average takes the night."),
]


def render(cfg: AppConfig) -> None:
    render_page_intro(
        f"About the {CLUB_NAME}",
        "A small group of friends in Bangkok who meet monthly to taste, argue and learn about wine.",
    )

    st.markdown('<div class="section-title">How it works</div>', unsafe_allow_html=True)
    cols = st.columns(len(VALUES))
    for col, (title, body) in zip(cols, VALUES):
        with col:
            st.markdown(
                f"""
<div class="value-card">
  <div class="value-card-title">{title}</div>
  <div class="value-card-body">{body}</div>
</div>
                """,
                unsafe_allow_html=True,
            )

    st.markdown('<div class="section-title">Our story</div>', unsafe_allow_html=True)
    st.write(
        "The club started with a handful of colleagues sharing bottles after work. "
        "It has since grown into a regular fixture, hosted at restaurants and members' homes around the city."
    )
