"""
SQLAlchemy models for the wine club store.

Three primary tables (events, members, wines) plus two declared tables
(wine_ratings, event_attendance) that nothing reads or writes yet.
"""
from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()

EVENT_STATUSES = ("upcoming", "completed", "cancelled")
MEMBER_ROLES = ("member", "organizer", "admin")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampMixin:
    """created_at / updated_at on every primary table"""

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow,
                        comment="Timestamp when record was created")
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow,
                        comment="Timestamp when record was last updated")


class Event(TimestampMixin, Base):
    """A themed tasting evening"""
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    date = Column(Date, nullable=False, index=True)
    theme = Column(Text, nullable=False)
    budget = Column(Text, nullable=False, comment="Display string, e.g. '1,500 THB'")
    location = Column(Text, nullable=False)
    excerpt = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default="upcoming",
                    comment="upcoming | completed | cancelled")
    participants = Column(Integer, nullable=False, default=0)
    winner = Column(Text, nullable=True, comment="Winning wine name (completed events only)")

    # Deleting an event deletes its wines and attendance rows in the same transaction
    wines = relationship("Wine", back_populates="event", cascade="all, delete-orphan", passive_deletes=True)
    attendance = relationship("EventAttendance", cascade="all, delete-orphan", passive_deletes=True)

    def __repr__(self):
        return f"<Event(id={self.id}, title='{self.title}')>"


class Member(TimestampMixin, Base):
    """Club member; role decides admin capability"""
    __tablename__ = "members"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    email = Column(String(320), nullable=False, unique=True, index=True)
    join_date = Column(DateTime(timezone=True), default=utcnow)
    is_active = Column(Boolean, nullable=False, default=True)
    role = Column(String(20), nullable=False, default="member", comment="member | organizer | admin")

    def __repr__(self):
        return f"<Member(id={self.id}, email='{self.email}')>"


class Wine(TimestampMixin, Base):
    """A bottle entered into one event's tasting"""
    __tablename__ = "wines"

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(Integer, ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    member_id = Column(Integer, ForeignKey("members.id", ondelete="SET NULL"), nullable=True,
                       comment="Member who brought the bottle")
    name = Column(Text, nullable=False)
    producer = Column(Text)
    vintage = Column(Integer)
    region = Column(Text)
    country = Column(Text)
    grape_variety = Column(Text)
    price = Column(Numeric(10, 2, asdecimal=False), comment="Price in THB")
    rating = Column(Numeric(4, 2, asdecimal=False), comment="Average member rating, 1-10")
    notes = Column(Text, comment="Tasting notes")
    is_winner = Column(Boolean, nullable=False, default=False)

    event = relationship("Event", back_populates="wines")

    def __repr__(self):
        return f"<Wine(id={self.id}, name='{self.name}')>"


class WineRating(Base):
    """Individual member rating for a wine (declared, unused)"""
    __tablename__ = "wine_ratings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    wine_id = Column(Integer, ForeignKey("wines.id", ondelete="CASCADE"))
    member_id = Column(Integer, ForeignKey("members.id", ondelete="CASCADE"))
    rating = Column(Numeric(4, 2, asdecimal=False), nullable=False, comment="1-10 scale")
    notes = Column(Text)
    created_at = Column(DateTime(timezone=True), default=utcnow)


class EventAttendance(Base):
    """Member attendance per event (declared, unused)"""
    __tablename__ = "event_attendance"

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(Integer, ForeignKey("events.id", ondelete="CASCADE"))
    member_id = Column(Integer, ForeignKey("members.id", ondelete="CASCADE"))
    attended = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)
