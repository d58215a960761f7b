"""
Admin input forms.

Each form returns a values dict on a valid submit and None otherwise. Required
fields are checked here; the data layer repeats the status/role/rating checks.
"""
from __future__ import annotations

from datetime import date
from typing import Any, Optional

import streamlit as st

from data.models import EVENT_STATUSES, MEMBER_ROLES
from data.queries import RATING_RANGE
from data.records import EventRecord, MemberRecord, WineRecord


def _missing(values: dict[str, Any], required: tuple[str, ...]) -> list[str]:
    return [k for k in required if not str(values.get(k) or "").strip()]


def _blank_to_none(value: str) -> Optional[str]:
    value = (value or "").strip()
    return value or None


def event_form(key: str, event: Optional[EventRecord] = None) -> Optional[dict[str, Any]]:
    with st.form(key, clear_on_submit=event is None):
        c1, c2 = st.columns(2)
        with c1:
            title = st.text_input("Title *", value=event.title if event else "")
            event_date = st.date_input("Date *", value=event.date if event else date.today())
            theme = st.text_input("Theme *", value=event.theme if event else "")
            budget = st.text_input("Budget *", value=event.budget if event else "", placeholder="Under 1500 THB")
        with c2:
            location = st.text_input("Location *", value=event.location if event else "")
            status = st.selectbox(
                "Status",
                EVENT_STATUSES,
                index=EVENT_STATUSES.index(event.status) if event else 0,
            )
            participants = st.number_input(
                "Participants", min_value=0, step=1, value=event.participants if event else 0
            )
            winner = st.text_input(
                "Winner",
                value=(event.winner or "") if event else "",
                help="Kept only for completed events.",
            )
        excerpt = st.text_area("Excerpt *", value=event.excerpt if event else "")
        submitted = st.form_submit_button("Save event" if event else "Create event")

    if not submitted:
        return None
    values = {
        "title": title.strip(),
        "date": event_date,
        "theme": theme.strip(),
        "budget": budget.strip(),
        "location": location.strip(),
        "excerpt": excerpt.strip(),
        "status": status,
        "participants": int(participants),
        "winner": _blank_to_none(winner),
    }
    missing = _missing(values, ("title", "theme", "budget", "location", "excerpt"))
    if missing:
        st.error(f"Please fill in: {', '.join(missing)}")
        return None
    return values


def member_form(key: str, member: Optional[MemberRecord] = None) -> Optional[dict[str, Any]]:
    with st.form(key, clear_on_submit=member is None):
        name = st.text_input("Name *", value=member.name if member else "")
        email = st.text_input("Email *", value=member.email if member else "")
        role = st.selectbox("Role", MEMBER_ROLES, index=MEMBER_ROLES.index(member.role) if member else 0)
        is_active = st.checkbox("Active", value=member.is_active if member else True)
        submitted = st.form_submit_button("Save member" if member else "Add member")

    if not submitted:
        return None
    values = {"name": name.strip(), "email": email.strip(), "role": role, "is_active": is_active}
    missing = _missing(values, ("name", "email"))
    if missing:
        st.error(f"Please fill in: {', '.join(missing)}")
        return None
    if "@" not in values["email"]:
        st.error("Please enter a valid email address.")
        return None
    return values


def wine_form(
    key: str,
    members: list[MemberRecord],
    wine: Optional[WineRecord] = None,
) -> Optional[dict[str, Any]]:
    lo, hi = RATING_RANGE
    member_ids: list[Optional[int]] = [None] + [m.id for m in members]
    names = {m.id: m.name for m in members}
    current_member = wine.member_id if wine and wine.member_id in names else None

    with st.form(key, clear_on_submit=wine is None):
        c1, c2 = st.columns(2)
        with c1:
            name = st.text_input("Wine name *", value=wine.name if wine else "")
            producer = st.text_input("Producer", value=(wine.producer or "") if wine else "")
            vintage = st.number_input(
                "Vintage", min_value=1900, max_value=2100, step=1, value=wine.vintage if wine else None
            )
            grape = st.text_input("Grape variety", value=(wine.grape_variety or "") if wine else "")
            member_id = st.selectbox(
                "Brought by",
                member_ids,
                index=member_ids.index(current_member),
                format_func=lambda mid: "(nobody)" if mid is None else names[mid],
            )
        with c2:
            region = st.text_input("Region", value=(wine.region or "") if wine else "")
            country = st.text_input("Country", value=(wine.country or "") if wine else "")
            price = st.number_input("Price (THB)", min_value=0.0, step=50.0, value=wine.price if wine else None)
            rating = st.number_input(
                f"Rating ({lo}-{hi})",
                min_value=float(lo),
                max_value=float(hi),
                step=0.1,
                value=wine.rating if wine else None,
            )
            is_winner = st.checkbox("Winning wine", value=wine.is_winner if wine else False)
        notes = st.text_area("Tasting notes", value=(wine.notes or "") if wine else "")
        submitted = st.form_submit_button("Save wine" if wine else "Add wine")

    if not submitted:
        return None
    if not name.strip():
        st.error("Please fill in: name")
        return None
    return {
        "name": name.strip(),
        "producer": _blank_to_none(producer),
        "vintage": int(vintage) if vintage is not None else None,
        "region": _blank_to_none(region),
        "country": _blank_to_none(country),
        "grape_variety": _blank_to_none(grape),
        "price": price,
        "rating": rating,
        "notes": _blank_to_none(notes),
        "is_winner": is_winner,
        "member_id": member_id,
    }
