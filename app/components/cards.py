from __future__ import annotations

from html import escape

import streamlit as st

from components.sidebar import open_event
from data.records import EventRecord, WineRecord


def format_date(d) -> str:
    return f"{d:%B} {d.day}, {d.year}" if hasattr(d, "day") else str(d)


def event_card_html(event: EventRecord) -> str:
    # Every record field is admin-entered text: escape before it reaches markup
    status = "Completed" if event.is_completed else event.status.title()
    winner = f'<span class="badge">🏆 {escape(event.winner)}</span>' if event.winner else ""
    badges = "".join(
        f'<span class="badge badge-outline">{escape(text)}</span>' for text in (event.theme, event.budget, status)
    )
    return (
        '<div class="event-card">'
        f'<div class="event-card-meta">{format_date(event.date)} · {escape(event.location)}</div>'
        f'<div class="event-card-title">{escape(event.title)}</div>'
        f"<div>{badges}{winner}</div>"
        f'<div class="event-card-body">{escape(event.excerpt)}</div>'
        "</div>"
    )


def wine_card_html(wine: WineRecord, rank: int) -> str:
    facts = [p for p in (wine.producer, str(wine.vintage) if wine.vintage else None, wine.origin, wine.grape_variety) if p]
    rating = f"{wine.rating:.1f}/10" if wine.rating is not None else "Not rated"
    price = f" · ฿{wine.price:,.0f}" if wine.price is not None else ""
    notes = f'<div class="event-card-body">{escape(wine.notes)}</div>' if wine.notes else ""
    return (
        f'<div class="wine-card{" winner" if wine.is_winner else ""}">'
        f'<div class="wine-card-title">#{rank} {escape(wine.name)}{" 🏆" if wine.is_winner else ""}</div>'
        f'<div class="event-card-meta">{escape(" · ".join(facts))}</div>'
        f'<div><span class="badge">{rating}</span>{price}</div>'
        f"{notes}"
        "</div>"
    )


def render_event_card(event: EventRecord, key_prefix: str) -> None:
    st.markdown(event_card_html(event), unsafe_allow_html=True)
    st.button(
        "Read full report",
        key=f"{key_prefix}_open_{event.id}",
        on_click=open_event,
        args=(event.id,),
    )


def render_wine_card(wine: WineRecord, rank: int) -> None:
    st.markdown(wine_card_html(wine, rank), unsafe_allow_html=True)
