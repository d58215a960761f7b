from __future__ import annotations

import streamlit as st

from components.narrative import render_callout, render_page_intro
from config import AppConfig


def render(cfg: AppConfig) -> None:
    render_page_intro("Join the club")
    render_callout(
        "Membership is currently closed",
        "We keep the table small so everyone can taste every bottle. "
        "New seats open occasionally, and are offered to guests of existing members first.",
    )
    st.markdown(
        """
**What members do**

- Attend a monthly themed tasting
- Bring one bottle within the budget
- Score every wine, blind
        """
    )
