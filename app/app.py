"""
Routing only.

All view logic lives in app/views/.
All env reads happen ONLY in config.py.
"""

from __future__ import annotations

import os
import sys

# Make `app/` importable as a flat module path when running:
#   streamlit run app/app.py
APP_DIR = os.path.dirname(__file__)
REPO_ROOT = os.path.abspath(os.path.join(APP_DIR, ".."))
for p in [APP_DIR, REPO_ROOT]:
    if p not in sys.path:
        sys.path.insert(0, p)

import streamlit as st  # noqa: E402

from components.styles import apply_theme  # noqa: E402
from components.sidebar import render_sidebar  # noqa: E402
from components.header import render_header  # noqa: E402
from config import CLUB_NAME, configure_logging, get_config  # noqa: E402
from components.session_store import flush_cookie_ops  # noqa: E402
from data.service import open_store  # noqa: E402

from views import about, admin, event_detail, events, home, join  # noqa: E402


def main() -> None:
    apply_theme()
    cfg = get_config()
    configure_logging(cfg)
    store = open_store(cfg.database_url)
    state = render_sidebar(cfg)

    render_header(
        app_name=CLUB_NAME,
        subtitle="Themed blind tastings, one winner per night",
        right_pill=f"Data: {'Live' if store is not None else 'Sample'}",
    )

    # Routing only
    if state.view == "home":
        home.render(cfg, store)
    elif state.view == "events":
        events.render(cfg, store)
    elif state.view == "event_detail":
        event_detail.render(cfg, store, state.event_id)
    elif state.view == "about":
        about.render(cfg)
    elif state.view == "join":
        join.render(cfg)
    elif state.view == "admin":
        admin.render(cfg, store, state.session)
    else:
        st.error("Unknown view")

    flush_cookie_ops()


if __name__ == "__main__":
    main()
