"""
One-time data migration: loads the club's historical events and founding
members into an empty store.

Each table is only seeded when it is empty, so running the migration again is
harmless. An event and its winning wine are inserted in the same transaction.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from data.connection import Store
from data.models import Event, Member, Wine

logger = logging.getLogger(__name__)


INITIAL_EVENTS = [
    {
        "title": "French Rouges",
        "date": date(2025, 8, 15),
        "theme": "French Red Wines",
        "budget": "1,500 THB",
        "location": "O'Shea's Irish Pub",
        "excerpt": "An evening dedicated to the elegance of French Burgundy wines, featuring exceptional reds from Bordeaux to Burgundy.",
        "status": "completed",
        "participants": 12,
        "winner": "Luccianus Amphore",
        "wines": [{"name": "Luccianus Amphore", "country": "France", "is_winner": True}],
    },
    {
        "title": "Italian Renaissance",
        "date": date(2025, 7, 20),
        "theme": "Italian Red Wines",
        "budget": "1,200 THB",
        "location": "Casa Boo",
        "excerpt": "A journey through Italy's diverse wine regions, showcasing Tuscany, Piedmont, and Veneto's finest expressions of terroir.",
        "status": "completed",
        "participants": 15,
        "winner": "Tenuta Ulissse Don Antonio",
        "wines": [{"name": "Tenuta Ulissse Don Antonio", "country": "Italy", "is_winner": True}],
    },
    {
        "title": "Malbec Discovery",
        "date": date(2024, 1, 18),
        "theme": "Malbec from Argentina or Anywhere",
        "budget": "1,400 THB",
        "location": "O'Shea's Irish Pub",
        "excerpt": "Exploring the bold and rich world of Argentine Malbec, from Mendoza's high-altitude vineyards to Bangkok's sophisticated palate.",
        "status": "completed",
        "participants": 14,
        "winner": "BenMarco Expresivo 2021",
        "wines": [
            {"name": "BenMarco Expresivo 2021", "vintage": 2021, "country": "Argentina",
             "grape_variety": "Malbec", "is_winner": True},
        ],
    },
]

SAMPLE_MEMBERS = [
    {"name": "Alex Chen", "email": "alex@bangkokwineclub.com", "role": "admin", "is_active": True},
    {"name": "Sarah Martinez", "email": "sarah@bangkokwineclub.com", "role": "organizer", "is_active": True},
    {"name": "James Richardson", "email": "james@bangkokwineclub.com", "role": "organizer", "is_active": True},
]


@dataclass(frozen=True)
class SeedResult:
    success: bool
    events_count: int = 0
    members_count: int = 0
    error: Optional[str] = None


def _count(store: Store, model) -> int:
    with store.session() as s:
        return s.scalar(select(func.count(model.id))) or 0


def _seed_events(store: Store) -> None:
    if _count(store, Event):
        logger.info("Events already exist in database. Skipping event migration.")
        return
    for entry in INITIAL_EVENTS:
        values = {k: v for k, v in entry.items() if k != "wines"}
        with store.session() as s:
            event = Event(**values)
            event.wines = [Wine(**w) for w in entry["wines"]]
            s.add(event)
        logger.info("Added event: %s", values["title"])


def _seed_members(store: Store) -> None:
    if _count(store, Member):
        logger.info("Members already exist in database. Skipping member migration.")
        return
    with store.session() as s:
        s.add_all(Member(**m) for m in SAMPLE_MEMBERS)
    for m in SAMPLE_MEMBERS:
        logger.info("Added member: %s", m["name"])


def seed_database(store: Optional[Store]) -> SeedResult:
    if store is None:
        logger.error("Database not available for seeding")
        return SeedResult(success=False, error="Database connection not available")

    try:
        logger.info("Starting data migration...")
        store.init_schema()
        _seed_events(store)
        _seed_members(store)
        result = SeedResult(
            success=True,
            events_count=_count(store, Event),
            members_count=_count(store, Member),
        )
    except SQLAlchemyError as e:
        logger.exception("Migration failed")
        return SeedResult(success=False, error=str(e))

    logger.info("Data migration completed: %s events, %s members", result.events_count, result.members_count)
    return result
