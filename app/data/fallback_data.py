"""
Fixed sample records served when the store is unavailable or empty.
"""
from __future__ import annotations

from datetime import date

from data.records import ClubStats, EventRecord, MemberRecord


FALLBACK_EVENTS: tuple[EventRecord, ...] = (
    EventRecord(
        id=1,
        title="French Rouges",
        date=date(2025, 8, 15),
        theme="French Red Wines",
        budget="1,500 THB",
        location="O'Shea's Irish Pub",
        excerpt="An evening dedicated to the elegance of French Burgundy wines, featuring exceptional reds from Bordeaux to Burgundy.",
        status="completed",
        participants=12,
        winner="Luccianus Amphore",
    ),
    EventRecord(
        id=2,
        title="Italian Renaissance",
        date=date(2025, 7, 20),
        theme="Italian Red Wines",
        budget="1,200 THB",
        location="Casa Boo",
        excerpt="A journey through Italy's diverse wine regions, showcasing Tuscany, Piedmont, and Veneto's finest expressions of terroir.",
        status="completed",
        participants=15,
        winner="Tenuta Ulissse Don Antonio",
    ),
    EventRecord(
        id=3,
        title="Malbec Discovery",
        date=date(2024, 1, 18),
        theme="Malbec from Argentina or Anywhere",
        budget="1,400 THB",
        location="O'Shea's Irish Pub",
        excerpt="Exploring the bold and rich world of Argentine Malbec, from Mendoza's high-altitude vineyards to Bangkok's sophisticated palate.",
        status="completed",
        participants=14,
        winner="BenMarco Expresivo 2021",
    ),
)

FALLBACK_MEMBERS: tuple[MemberRecord, ...] = (
    MemberRecord(id=1, name="Alex Chen", email="alex@bangkokwineclub.com", role="admin"),
    MemberRecord(id=2, name="Sarah Martinez", email="sarah@bangkokwineclub.com", role="organizer"),
    MemberRecord(id=3, name="James Richardson", email="james@bangkokwineclub.com", role="organizer"),
)

FALLBACK_STATS = ClubStats(total_events=36, active_members=25, total_wines=150)


def fallback_events() -> list[EventRecord]:
    return sorted(FALLBACK_EVENTS, key=lambda e: e.date, reverse=True)


def fallback_event(event_id: int) -> EventRecord | None:
    return next((e for e in FALLBACK_EVENTS if e.id == event_id), None)


def fallback_members() -> list[MemberRecord]:
    return sorted(FALLBACK_MEMBERS, key=lambda m: m.name)


def fallback_stats() -> ClubStats:
    return FALLBACK_STATS
