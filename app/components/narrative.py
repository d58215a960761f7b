from __future__ import annotations

from html import escape

import streamlit as st


def render_page_intro(title: str, context: str | None = None) -> None:
    st.markdown(
        f"""
<div class="page-intro">
  <div class="page-intro-title">{escape(title)}</div>
  {f'<div class="page-intro-context">{escape(context)}</div>' if context else ''}
</div>
        """,
        unsafe_allow_html=True,
    )


def render_callout(title: str, body: str) -> None:
    st.markdown(
        f"""
<div class="callout">
  <div class="callout-title">{escape(title)}</div>
  <div class="callout-body">{escape(body)}</div>
</div>
        """,
        unsafe_allow_html=True,
    )


def render_source_warnings(*results) -> None:
    """One st.warning per DataResult that fell back or failed."""
    seen: set[str] = set()
    for res in results:
        if res.warning and res.warning not in seen:
            seen.add(res.warning)
            st.warning(res.warning)
