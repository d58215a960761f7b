"""
Plain records handed to views.

ORM rows never leave a session; queries convert them to these frozen
dataclasses so results can be cached by st.cache_data and compared in tests.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from data import models


def _num(value: Optional[float | Decimal]) -> Optional[float]:
    return None if value is None else float(value)


@dataclass(frozen=True)
class EventRecord:
    id: int
    title: str
    date: date
    theme: str
    budget: str
    location: str
    excerpt: str
    status: str = "upcoming"
    participants: int = 0
    winner: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_completed(self) -> bool:
        return self.status == "completed"

    @classmethod
    def from_row(cls, row: models.Event) -> "EventRecord":
        return cls(
            id=row.id,
            title=row.title,
            date=row.date,
            theme=row.theme,
            budget=row.budget,
            location=row.location,
            excerpt=row.excerpt,
            status=row.status,
            participants=row.participants or 0,
            winner=row.winner,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )


@dataclass(frozen=True)
class MemberRecord:
    id: int
    name: str
    email: str
    role: str = "member"
    is_active: bool = True
    join_date: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: models.Member) -> "MemberRecord":
        return cls(
            id=row.id,
            name=row.name,
            email=row.email,
            role=row.role,
            is_active=bool(row.is_active),
            join_date=row.join_date,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )


@dataclass(frozen=True)
class WineRecord:
    id: int
    event_id: int
    name: str
    member_id: Optional[int] = None
    producer: Optional[str] = None
    vintage: Optional[int] = None
    region: Optional[str] = None
    country: Optional[str] = None
    grape_variety: Optional[str] = None
    price: Optional[float] = None
    rating: Optional[float] = None
    notes: Optional[str] = None
    is_winner: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def origin(self) -> Optional[str]:
        parts = [p for p in (self.region, self.country) if p]
        return ", ".join(parts) if parts else None

    @classmethod
    def from_row(cls, row: models.Wine) -> "WineRecord":
        return cls(
            id=row.id,
            event_id=row.event_id,
            member_id=row.member_id,
            name=row.name,
            producer=row.producer,
            vintage=row.vintage,
            region=row.region,
            country=row.country,
            grape_variety=row.grape_variety,
            price=_num(row.price),
            rating=_num(row.rating),
            notes=row.notes,
            is_winner=bool(row.is_winner),
            created_at=row.created_at,
            updated_at=row.updated_at,
        )


def sort_by_rating(wines: list[WineRecord]) -> list[WineRecord]:
    # Highest rated first; unrated wines count as 0
    return sorted(wines, key=lambda w: w.rating or 0, reverse=True)


@dataclass(frozen=True)
class EventDetail:
    event: EventRecord
    wines: list[WineRecord] = field(default_factory=list)

    @property
    def winning_wine(self) -> Optional[WineRecord]:
        return next((w for w in self.wines if w.is_winner), None)

    def highlights(self) -> list[str]:
        e = self.event
        return [
            f"{e.theme} themed tasting",
            f"{e.participants} wine enthusiasts participated",
            f"{len(self.wines)} exceptional wines tasted" if self.wines else "Curated wine selection",
            f"Winner: {e.winner}" if e.winner else "Memorable tasting experience",
        ]


@dataclass(frozen=True)
class ClubStats:
    total_events: int
    active_members: int
    total_wines: int

    @property
    def is_empty(self) -> bool:
        return self.total_events == 0 and self.active_members == 0 and self.total_wines == 0
