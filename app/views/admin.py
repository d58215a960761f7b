"""
Admin console (login-gated).

Writes go through data.service, which clears the affected caches; after a
successful write the page reruns so tables show fresh rows.
"""
from __future__ import annotations

from typing import Optional

import pandas as pd
import streamlit as st

import auth
from components.forms import event_form, member_form, wine_form
from components.login import render_login_form
from components.metrics import render_kpi_row, stats_kpis
from components.narrative import render_callout, render_page_intro, render_source_warnings
from config import AppConfig
from data.connection import Store
from data.records import EventRecord, MemberRecord, WineRecord
from data.service import (
    WriteResult,
    get_events,
    get_members,
    get_stats,
    get_wines_for_event,
    remove_event,
    remove_member,
    remove_wine,
    run_data_migration,
    save_event,
    save_member,
    save_wine,
)

FLASH_KEY = "admin_flash"


def _finish(res: WriteResult, success: str) -> None:
    if res.ok:
        st.session_state[FLASH_KEY] = success
        st.rerun()
    st.error(res.error)


def _show_flash() -> None:
    msg = st.session_state.pop(FLASH_KEY, None)
    if msg:
        st.success(msg)


def _events_frame(events: list[EventRecord]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"id": e.id, "date": e.date, "title": e.title, "theme": e.theme, "status": e.status,
             "participants": e.participants, "winner": e.winner or ""}
            for e in events
        ],
        columns=["id", "date", "title", "theme", "status", "participants", "winner"],
    )


def _members_frame(members: list[MemberRecord]) -> pd.DataFrame:
    return pd.DataFrame(
        [{"id": m.id, "name": m.name, "email": m.email, "role": m.role, "active": m.is_active} for m in members],
        columns=["id", "name", "email", "role", "active"],
    )


def _wines_frame(wines: list[WineRecord]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"id": w.id, "name": w.name, "producer": w.producer or "", "vintage": w.vintage,
             "rating": w.rating, "price": w.price, "winner": w.is_winner}
            for w in wines
        ],
        columns=["id", "name", "producer", "vintage", "rating", "price", "winner"],
    )


def _delete_controls(key: str, label: str) -> bool:
    c1, c2 = st.columns([1, 3])
    with c1:
        confirmed = st.checkbox("Confirm", key=f"{key}_confirm")
    with c2:
        clicked = st.button(f"Delete {label}", key=f"{key}_btn", disabled=not confirmed)
    return clicked and confirmed


def _events_tab(cfg: AppConfig, store: Optional[Store]) -> None:
    res = get_events(cfg, store)
    render_source_warnings(res)
    st.dataframe(_events_frame(res.data), hide_index=True, use_container_width=True)

    with st.expander("➕ New event"):
        values = event_form("event_create")
        if values is not None:
            _finish(save_event(store, values), f"Created event '{values['title']}'.")

    if res.source != "database" or not res.data:
        return
    by_id = {e.id: e for e in res.data}
    event_id = st.selectbox(
        "Edit event", list(by_id), format_func=lambda i: f"{by_id[i].date} · {by_id[i].title}", key="event_edit_id"
    )
    event = by_id[event_id]
    values = event_form(f"event_edit_{event.id}", event)
    if values is not None:
        _finish(save_event(store, values, event_id=event.id), f"Updated event '{values['title']}'.")
    st.caption("Deleting an event also deletes its wines.")
    if _delete_controls(f"event_delete_{event.id}", "event"):
        _finish(remove_event(store, event.id), f"Deleted event '{event.title}'.")


def _members_tab(cfg: AppConfig, store: Optional[Store]) -> None:
    res = get_members(cfg, store)
    render_source_warnings(res)
    st.dataframe(_members_frame(res.data), hide_index=True, use_container_width=True)

    with st.expander("➕ New member"):
        values = member_form("member_create")
        if values is not None:
            _finish(save_member(store, values), f"Added member '{values['name']}'.")

    if res.source != "database" or not res.data:
        return
    by_id = {m.id: m for m in res.data}
    member_id = st.selectbox(
        "Edit member", list(by_id), format_func=lambda i: f"{by_id[i].name} <{by_id[i].email}>", key="member_edit_id"
    )
    member = by_id[member_id]
    values = member_form(f"member_edit_{member.id}", member)
    if values is not None:
        _finish(save_member(store, values, member_id=member.id), f"Updated member '{values['name']}'.")
    if _delete_controls(f"member_delete_{member.id}", "member"):
        _finish(remove_member(store, member.id), f"Deleted member '{member.name}'.")


def _wines_tab(cfg: AppConfig, store: Optional[Store]) -> None:
    events = get_events(cfg, store)
    if events.source != "database" or not events.data:
        render_source_warnings(events)
        st.info("Create an event (or run the data migration) before adding wines.")
        return
    by_id = {e.id: e for e in events.data}
    event_id = st.selectbox(
        "Event", list(by_id), format_func=lambda i: f"{by_id[i].date} · {by_id[i].title}", key="wine_event_id"
    )

    wines = get_wines_for_event(cfg, store, event_id)
    members = get_members(cfg, store)
    # Sample members are not rows; they cannot be referenced by a wine
    owners = members.data if members.source == "database" else []
    render_source_warnings(wines)
    st.dataframe(_wines_frame(wines.data), hide_index=True, use_container_width=True)

    with st.expander("➕ New wine"):
        values = wine_form(f"wine_create_{event_id}", owners)
        if values is not None:
            _finish(save_wine(store, {**values, "event_id": event_id}), f"Added wine '{values['name']}'.")

    if not wines.data:
        return
    wines_by_id = {w.id: w for w in wines.data}
    wine_id = st.selectbox(
        "Edit wine", list(wines_by_id), format_func=lambda i: wines_by_id[i].name, key=f"wine_edit_id_{event_id}"
    )
    wine = wines_by_id[wine_id]
    values = wine_form(f"wine_edit_{wine.id}", owners, wine)
    if values is not None:
        _finish(save_wine(store, values, wine_id=wine.id), f"Updated wine '{values['name']}'.")
    if _delete_controls(f"wine_delete_{wine.id}", "wine"):
        _finish(remove_wine(store, wine.id), f"Deleted wine '{wine.name}'.")


def _settings_tab(cfg: AppConfig, store: Optional[Store]) -> None:
    st.markdown("**Database**")
    st.code(cfg.database_label, language="text")
    if store is None:
        st.warning("No database configured. Set DATABASE_URL to enable editing.")
    else:
        status = store.ping()
        if status["status"] == "connected":
            st.success("Connected")
        else:
            st.error(f"Connection error: {status['error']}")

    render_callout(
        "Data migration",
        "Creates the tables if needed and loads the initial events (with their winning wines) and sample members. "
        "Tables that already hold rows are left untouched.",
    )
    if st.button("Run data migration", key="run_migration", disabled=store is None):
        result = run_data_migration(store)
        if result.success:
            st.success(f"Migration complete: {result.events_count} events, {result.members_count} members.")
        else:
            st.error(f"Migration failed: {result.error}")


def render(cfg: AppConfig, store: Optional[Store], session: Optional[auth.SessionMarker]) -> None:
    render_page_intro("Admin", "Manage events, members and tasting sheets.")
    if session is None:
        render_login_form(cfg)
        return

    _show_flash()
    stats = get_stats(cfg, store)
    render_source_warnings(stats)
    render_kpi_row(stats_kpis(stats.data))

    events_tab, members_tab, wines_tab, settings_tab = st.tabs(["Events", "Members", "Wines", "Settings"])
    with events_tab:
        _events_tab(cfg, store)
    with members_tab:
        _members_tab(cfg, store)
    with wines_tab:
        _wines_tab(cfg, store)
    with settings_tab:
        _settings_tab(cfg, store)
