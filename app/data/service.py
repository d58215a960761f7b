from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

import streamlit as st
from sqlalchemy.exc import ArgumentError, IntegrityError, SQLAlchemyError

from config import AppConfig
from data import fallback_data, queries
from data.connection import Store, StoreUnavailableError, create_store
from data.records import ClubStats, EventDetail, EventRecord, MemberRecord, WineRecord, sort_by_rating
from data.seed import SeedResult, seed_database

logger = logging.getLogger(__name__)

CACHE_TTL = "5m"
NO_STORE_MESSAGE = "Database connection not available. Changes were not saved."


@dataclass(frozen=True)
class DataResult:
    data: Any
    source: str  # "database" | "fallback" | "unavailable"
    warning: str | None = None


@dataclass(frozen=True)
class WriteResult:
    ok: bool
    record: Any = None
    error: str | None = None


def _fallback(
    store: Optional[Store],
    fn_live: Callable[[], Any],
    fn_fallback: Callable[[], Any],
    on_empty: bool,
    subject: str = "Showing sample data",
) -> DataResult:
    if store is None:
        return DataResult(data=fn_fallback(), source="fallback", warning=f"{subject}: no database configured")
    try:
        data = fn_live()
    except (StoreUnavailableError, SQLAlchemyError) as e:
        logger.warning("Read failed, serving fallback data: %s", e)
        return DataResult(data=fn_fallback(), source="fallback", warning=f"{subject}: database unavailable ({type(e).__name__})")
    if on_empty and not data:
        return DataResult(data=fn_fallback(), source="fallback", warning=f"{subject}: nothing stored yet")
    return DataResult(data=data, source="database")


# --- Cached reads ---
# `store_key` is the hashed part of each cache key; the leading underscore keeps
# st.cache_data from hashing the store itself.

@st.cache_data(ttl=CACHE_TTL, show_spinner=False)
def _cached_events(store_key: str, _store: Store) -> list[EventRecord]:
    return queries.list_events(_store)


@st.cache_data(ttl=CACHE_TTL, show_spinner=False)
def _cached_event_detail(store_key: str, event_id: int, _store: Store) -> Optional[EventDetail]:
    return queries.get_event_with_wines(_store, event_id)


@st.cache_data(ttl=CACHE_TTL, show_spinner=False)
def _cached_wines(store_key: str, event_id: int, _store: Store) -> list[WineRecord]:
    return queries.list_wines_by_event(_store, event_id)


@st.cache_data(ttl=CACHE_TTL, show_spinner=False)
def _cached_members(store_key: str, _store: Store) -> list[MemberRecord]:
    return queries.list_members(_store)


@st.cache_data(ttl=CACHE_TTL, show_spinner=False)
def _cached_stats(store_key: str, _store: Store) -> ClubStats:
    return queries.count_stats(_store)


CACHE_FAMILIES = {
    "events": (_cached_events, _cached_event_detail),
    "wines": (_cached_wines, _cached_event_detail),
    "members": (_cached_members,),
    "stats": (_cached_stats,),
}


def invalidate(*families: str) -> None:
    """Drop cached reads so dependent views refetch on the next run."""
    for family in families:
        for fn in CACHE_FAMILIES[family]:
            fn.clear()


def invalidate_all() -> None:
    invalidate(*CACHE_FAMILIES)


# --- Reads (graceful fallback inside) ---

def get_events(cfg: AppConfig, store: Optional[Store]) -> DataResult:
    return _fallback(
        store,
        fn_live=lambda: _cached_events(store.cache_key, store),
        fn_fallback=fallback_data.fallback_events,
        on_empty=cfg.fallback_on_empty,
    )


def get_members(cfg: AppConfig, store: Optional[Store]) -> DataResult:
    return _fallback(
        store,
        fn_live=lambda: _cached_members(store.cache_key, store),
        fn_fallback=fallback_data.fallback_members,
        on_empty=cfg.fallback_on_empty,
    )


def get_stats(cfg: AppConfig, store: Optional[Store]) -> DataResult:
    res = _fallback(
        store,
        fn_live=lambda: _cached_stats(store.cache_key, store),
        fn_fallback=fallback_data.fallback_stats,
        on_empty=False,
    )
    if res.source == "database" and res.data.is_empty and cfg.fallback_on_empty:
        return DataResult(data=fallback_data.fallback_stats(), source="fallback", warning="Showing sample stats: nothing stored yet")
    return res


def get_wines_for_event(cfg: AppConfig, store: Optional[Store], event_id: int) -> DataResult:
    # No sample wines exist, so failures degrade to an empty list
    res = _fallback(
        store,
        fn_live=lambda: _cached_wines(store.cache_key, event_id, store),
        fn_fallback=list,
        on_empty=False,
        subject="Wine list unavailable",
    )
    source = "unavailable" if res.source == "fallback" else res.source
    return DataResult(data=sort_by_rating(res.data), source=source, warning=res.warning)


def get_event_detail(cfg: AppConfig, store: Optional[Store], event_id: int) -> DataResult:
    """
    data is an EventDetail with wines sorted by rating, or None.
    - source="database", data=None: the event does not exist
    - source="fallback": a sample event, served when the store failed or
      (with fallback_on_empty) holds no events yet, matching get_events
    - source="unavailable", data=None: the store failed and no sample event has this id
    """
    failure: str | None = None
    if store is None:
        failure = "no database configured"
    else:
        try:
            detail = _cached_event_detail(store.cache_key, event_id, store)
            nothing_stored = detail is None and cfg.fallback_on_empty and not _cached_events(store.cache_key, store)
        except (StoreUnavailableError, SQLAlchemyError) as e:
            logger.warning("Event %s lookup failed: %s", event_id, e)
            failure = f"database unavailable ({type(e).__name__})"
        else:
            if detail is not None:
                return DataResult(data=EventDetail(event=detail.event, wines=sort_by_rating(detail.wines)), source="database")
            if not nothing_stored:
                return DataResult(data=None, source="database")

    sample = fallback_data.fallback_event(event_id)
    if sample is None:
        if failure is None:
            return DataResult(data=None, source="database")
        return DataResult(data=None, source="unavailable", warning=f"Event details are temporarily unavailable: {failure}")
    return DataResult(data=EventDetail(event=sample), source="fallback", warning=f"Showing sample data: {failure or 'nothing stored yet'}")


# --- Writes ---

def _write(
    store: Optional[Store],
    action: str,
    fn: Callable[[], Any],
    families: tuple[str, ...],
    conflict_message: str | None = None,
) -> WriteResult:
    if store is None:
        return WriteResult(ok=False, error=NO_STORE_MESSAGE)
    try:
        result = fn()
    except ValueError as e:
        return WriteResult(ok=False, error=str(e))
    except IntegrityError as e:
        logger.warning("Could not %s: %s", action, e)
        return WriteResult(ok=False, error=conflict_message or f"Could not {action}: conflicting data.")
    except (StoreUnavailableError, SQLAlchemyError):
        logger.exception("Could not %s", action)
        return WriteResult(ok=False, error=f"Could not {action}. Check the database connection.")

    if result is None or result is False:
        return WriteResult(ok=False, error=f"Could not {action}: record not found.")
    invalidate(*families)
    return WriteResult(ok=True, record=None if result is True else result)


def save_event(store: Optional[Store], values: Mapping[str, Any], event_id: int | None = None) -> WriteResult:
    if event_id is None:
        return _write(store, "create event", lambda: queries.create_event(store, values), ("events", "stats"))
    return _write(store, "update event", lambda: queries.update_event(store, event_id, values), ("events", "stats"))


def remove_event(store: Optional[Store], event_id: int) -> WriteResult:
    return _write(store, "delete event", lambda: queries.delete_event(store, event_id), ("events", "wines", "stats"))


def save_member(store: Optional[Store], values: Mapping[str, Any], member_id: int | None = None) -> WriteResult:
    conflict = "A member with this email already exists."
    if member_id is None:
        return _write(store, "create member", lambda: queries.create_member(store, values), ("members", "stats"), conflict)
    return _write(store, "update member", lambda: queries.update_member(store, member_id, values), ("members", "stats"), conflict)


def remove_member(store: Optional[Store], member_id: int) -> WriteResult:
    return _write(store, "delete member", lambda: queries.delete_member(store, member_id), ("members", "wines", "stats"))


def save_wine(store: Optional[Store], values: Mapping[str, Any], wine_id: int | None = None) -> WriteResult:
    if wine_id is None:
        return _write(store, "create wine", lambda: queries.create_wine(store, values), ("wines", "stats"))
    return _write(store, "update wine", lambda: queries.update_wine(store, wine_id, values), ("wines", "stats"))


def remove_wine(store: Optional[Store], wine_id: int) -> WriteResult:
    return _write(store, "delete wine", lambda: queries.delete_wine(store, wine_id), ("wines", "stats"))


def run_data_migration(store: Optional[Store]) -> SeedResult:
    result = seed_database(store)
    if result.success:
        invalidate_all()
    return result


# --- Store construction ---

@st.cache_resource(show_spinner=False)
def _build_store(database_url: Optional[str]) -> Optional[Store]:
    # Raises on failure; st.cache_resource does not memoize exceptions
    store = create_store(database_url)
    if store is not None:
        store.init_schema()
    return store


def open_store(database_url: Optional[str]) -> Optional[Store]:
    """
    One store per process and URL. A broken URL, missing driver or unreachable
    database serves fallback data for this run; the next run tries again.
    """
    try:
        return _build_store(database_url)
    except (ImportError, ArgumentError, SQLAlchemyError) as e:
        logger.error("Store unavailable, serving fallback data: %s", e)
        return None
