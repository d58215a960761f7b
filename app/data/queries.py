"""
Single-table reads and writes over the wine club store.

Every function opens one session, runs one query or mutation and returns
plain records (never ORM rows). Errors propagate; data.service decides what
the UI sees.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Any, Mapping, Optional

from sqlalchemy import func, select

from data.connection import Store, require_store
from data.models import EVENT_STATUSES, MEMBER_ROLES, Event, Member, Wine, utcnow
from data.records import ClubStats, EventDetail, EventRecord, MemberRecord, WineRecord

EVENT_FIELDS = ("title", "date", "theme", "budget", "location", "excerpt", "status", "participants", "winner")
MEMBER_FIELDS = ("name", "email", "role", "is_active", "join_date")
WINE_FIELDS = (
    "event_id", "member_id", "name", "producer", "vintage", "region", "country",
    "grape_variety", "price", "rating", "notes", "is_winner",
)
RATING_RANGE = (1, 10)


def _check_fields(values: Mapping[str, Any], allowed: tuple[str, ...]) -> dict[str, Any]:
    unknown = sorted(set(values) - set(allowed))
    if unknown:
        raise ValueError(f"Unknown field(s): {', '.join(unknown)}")
    return dict(values)


def _event_values(values: Mapping[str, Any], current_status: Optional[str] = None) -> dict[str, Any]:
    data = _check_fields(values, EVENT_FIELDS)
    if "date" in data and isinstance(data["date"], datetime):
        data["date"] = data["date"].date()
    if "date" in data and isinstance(data["date"], str):
        data["date"] = date.fromisoformat(data["date"])
    status = data.get("status", current_status or "upcoming")
    if status not in EVENT_STATUSES:
        raise ValueError(f"Invalid status '{status}'. Expected one of: {', '.join(EVENT_STATUSES)}")
    # A winner only means something once the tasting is over
    if status != "completed" and ("winner" in data or "status" in data):
        data["winner"] = None
    elif "winner" in data:
        data["winner"] = data["winner"] or None
    if data.get("participants") is None and "participants" in data:
        data["participants"] = 0
    return data


def _member_values(values: Mapping[str, Any]) -> dict[str, Any]:
    data = _check_fields(values, MEMBER_FIELDS)
    if "role" in data and data["role"] not in MEMBER_ROLES:
        raise ValueError(f"Invalid role '{data['role']}'. Expected one of: {', '.join(MEMBER_ROLES)}")
    if "email" in data and data["email"]:
        data["email"] = data["email"].strip().lower()
    return data


def _wine_values(values: Mapping[str, Any]) -> dict[str, Any]:
    data = _check_fields(values, WINE_FIELDS)
    rating = data.get("rating")
    if rating is not None:
        lo, hi = RATING_RANGE
        if not lo <= float(rating) <= hi:
            raise ValueError(f"Rating must be between {lo} and {hi}, got {rating}")
    return data


# --- Events ---

def list_events(store: Optional[Store]) -> list[EventRecord]:
    with require_store(store).session() as s:
        rows = s.scalars(select(Event).order_by(Event.date.desc(), Event.id.desc())).all()
        return [EventRecord.from_row(r) for r in rows]


def get_event(store: Optional[Store], event_id: int) -> Optional[EventRecord]:
    with require_store(store).session() as s:
        row = s.get(Event, event_id)
        return EventRecord.from_row(row) if row else None


def get_event_with_wines(store: Optional[Store], event_id: int) -> Optional[EventDetail]:
    with require_store(store).session() as s:
        row = s.get(Event, event_id)
        if row is None:
            return None
        wines = s.scalars(select(Wine).where(Wine.event_id == event_id)).all()
        return EventDetail(event=EventRecord.from_row(row), wines=[WineRecord.from_row(w) for w in wines])


def create_event(store: Optional[Store], values: Mapping[str, Any]) -> EventRecord:
    data = _event_values(values)
    with require_store(store).session() as s:
        row = Event(**data)
        s.add(row)
        s.flush()
        s.refresh(row)
        return EventRecord.from_row(row)


def update_event(store: Optional[Store], event_id: int, values: Mapping[str, Any]) -> Optional[EventRecord]:
    with require_store(store).session() as s:
        row = s.get(Event, event_id)
        if row is None:
            return None
        for key, value in _event_values(values, current_status=row.status).items():
            setattr(row, key, value)
        row.updated_at = utcnow()
        s.flush()
        s.refresh(row)
        return EventRecord.from_row(row)


def delete_event(store: Optional[Store], event_id: int) -> bool:
    """Deletes the event together with its wines (cascade)."""
    with require_store(store).session() as s:
        row = s.get(Event, event_id)
        if row is None:
            return False
        s.delete(row)
        return True


# --- Members ---

def list_members(store: Optional[Store]) -> list[MemberRecord]:
    with require_store(store).session() as s:
        rows = s.scalars(select(Member).order_by(Member.name)).all()
        return [MemberRecord.from_row(r) for r in rows]


def get_member(store: Optional[Store], member_id: int) -> Optional[MemberRecord]:
    with require_store(store).session() as s:
        row = s.get(Member, member_id)
        return MemberRecord.from_row(row) if row else None


def create_member(store: Optional[Store], values: Mapping[str, Any]) -> MemberRecord:
    data = _member_values(values)
    with require_store(store).session() as s:
        row = Member(**data)
        s.add(row)
        s.flush()
        s.refresh(row)
        return MemberRecord.from_row(row)


def update_member(store: Optional[Store], member_id: int, values: Mapping[str, Any]) -> Optional[MemberRecord]:
    with require_store(store).session() as s:
        row = s.get(Member, member_id)
        if row is None:
            return None
        for key, value in _member_values(values).items():
            setattr(row, key, value)
        row.updated_at = utcnow()
        s.flush()
        s.refresh(row)
        return MemberRecord.from_row(row)


def delete_member(store: Optional[Store], member_id: int) -> bool:
    with require_store(store).session() as s:
        row = s.get(Member, member_id)
        if row is None:
            return False
        s.delete(row)
        return True


# --- Wines ---

def list_wines_by_event(store: Optional[Store], event_id: int) -> list[WineRecord]:
    with require_store(store).session() as s:
        rows = s.scalars(select(Wine).where(Wine.event_id == event_id)).all()
        return [WineRecord.from_row(r) for r in rows]


def get_wine(store: Optional[Store], wine_id: int) -> Optional[WineRecord]:
    with require_store(store).session() as s:
        row = s.get(Wine, wine_id)
        return WineRecord.from_row(row) if row else None


def get_winning_wine(store: Optional[Store], event_id: int) -> Optional[WineRecord]:
    with require_store(store).session() as s:
        row = s.scalars(
            select(Wine).where(Wine.event_id == event_id, Wine.is_winner.is_(True)).order_by(Wine.id)
        ).first()
        return WineRecord.from_row(row) if row else None


def create_wine(store: Optional[Store], values: Mapping[str, Any]) -> WineRecord:
    data = _wine_values(values)
    if not data.get("event_id"):
        raise ValueError("A wine must belong to an event")
    with require_store(store).session() as s:
        row = Wine(**data)
        s.add(row)
        s.flush()
        s.refresh(row)
        return WineRecord.from_row(row)


def update_wine(store: Optional[Store], wine_id: int, values: Mapping[str, Any]) -> Optional[WineRecord]:
    with require_store(store).session() as s:
        row = s.get(Wine, wine_id)
        if row is None:
            return None
        for key, value in _wine_values(values).items():
            setattr(row, key, value)
        row.updated_at = utcnow()
        s.flush()
        s.refresh(row)
        return WineRecord.from_row(row)


def delete_wine(store: Optional[Store], wine_id: int) -> bool:
    with require_store(store).session() as s:
        row = s.get(Wine, wine_id)
        if row is None:
            return False
        s.delete(row)
        return True


# --- Stats ---

def count_stats(store: Optional[Store]) -> ClubStats:
    with require_store(store).session() as s:
        return ClubStats(
            total_events=s.scalar(select(func.count(Event.id))) or 0,
            active_members=s.scalar(select(func.count(Member.id)).where(Member.is_active.is_(True))) or 0,
            total_wines=s.scalar(select(func.count(Wine.id))) or 0,
        )
