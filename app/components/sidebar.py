from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import streamlit as st

import auth
from components.session_store import browser_session
from config import CLUB_NAME, AppConfig

NAV_KEY = "nav"
EVENT_KEY = "event_id"


@dataclass(frozen=True)
class SidebarState:
    view: str
    event_id: Optional[int]
    session: Optional[auth.SessionMarker]


NAV_ITEMS = [
    ("🏠 Home", "home"),
    ("🍷 Events", "events"),
    ("📖 About", "about"),
    ("✉️ Join", "join"),
    ("🔐 Admin", "admin"),
]


def open_event(event_id: int) -> None:
    """Button callback: show the detail page for one event."""
    st.session_state[EVENT_KEY] = event_id
    st.session_state[NAV_KEY] = "events"


def close_event() -> None:
    st.session_state[EVENT_KEY] = None
    if "event" in st.query_params:
        del st.query_params["event"]


def _apply_query_params() -> None:
    # Deep link: ?event=<id> opens that report on the first run of a session
    raw = st.query_params.get("event")
    if raw is None:
        return
    try:
        open_event(int(raw))
    except ValueError:
        del st.query_params["event"]


def _logout(cfg: AppConfig) -> None:
    auth.logout(browser_session(cfg))


def render_sidebar(cfg: AppConfig) -> SidebarState:
    if NAV_KEY not in st.session_state:
        st.session_state[NAV_KEY] = "home"
        _apply_query_params()

    labels = dict((v, l) for l, v in NAV_ITEMS)
    session = auth.load_session(cfg, browser_session(cfg))

    with st.sidebar:
        st.markdown(f"### 🍷 {CLUB_NAME}")
        st.caption("Monthly blind tastings in Bangkok")

        view = st.radio(
            "Nav",
            [v for _, v in NAV_ITEMS],
            format_func=labels.get,
            key=NAV_KEY,
            on_change=close_event,
            label_visibility="collapsed",
        )

        if session is not None:
            st.divider()
            st.caption(f"Signed in as **{session.username}**")
            st.button("Log out", key="logout_btn", on_click=_logout, args=(cfg,))

    event_id = st.session_state.get(EVENT_KEY)
    if view == "events" and event_id is not None:
        view = "event_detail"
    return SidebarState(view=view, event_id=event_id, session=session)
