from __future__ import annotations

from datetime import date, datetime, timezone

import pytest
from sqlalchemy.exc import IntegrityError

from data import queries
from data.connection import StoreUnavailableError


def test_create_completed_event_round_trips_status_and_winner(store, make_event):
    created = make_event(status="completed", winner="Domaine Jamet 2019", participants=11)

    fetched = queries.get_event(store, created.id)
    assert fetched.status == "completed"
    assert fetched.winner == "Domaine Jamet 2019"
    assert fetched.participants == 11
    assert fetched.created_at is not None


def test_winner_is_dropped_unless_completed(store, make_event):
    event = make_event(status="upcoming", winner="Too early")
    assert event.winner is None

    done = queries.update_event(store, event.id, {"status": "completed", "winner": "Cornas 2018"})
    assert done.winner == "Cornas 2018"

    reopened = queries.update_event(store, event.id, {"status": "cancelled"})
    assert reopened.winner is None


def test_update_status_touches_only_that_row(store, make_event, monkeypatch):
    first = make_event(title="First")
    second = make_event(title="Second")
    later = datetime(2030, 1, 1, tzinfo=timezone.utc)
    monkeypatch.setattr(queries, "utcnow", lambda: later)

    updated = queries.update_event(store, first.id, {"status": "cancelled"})

    assert updated.status == "cancelled"
    assert updated.updated_at.replace(tzinfo=None) == later.replace(tzinfo=None)
    untouched = queries.get_event(store, second.id)
    assert untouched.status == "upcoming"
    assert untouched.updated_at == second.updated_at


def test_list_events_newest_first(store, make_event):
    make_event(title="Old", date=date(2023, 3, 1))
    make_event(title="New", date=date(2025, 3, 1))
    make_event(title="Middle", date="2024-03-01")

    assert [e.title for e in queries.list_events(store)] == ["New", "Middle", "Old"]


def test_missing_rows_return_none_or_false(store):
    assert queries.get_event(store, 404) is None
    assert queries.get_event_with_wines(store, 404) is None
    assert queries.update_event(store, 404, {"title": "x"}) is None
    assert queries.delete_event(store, 404) is False
    assert queries.delete_member(store, 404) is False
    assert queries.update_wine(store, 404, {"rating": 5}) is None


@pytest.mark.parametrize(
    "values, message",
    [
        ({"colour": "red"}, "Unknown field"),
        ({"status": "postponed"}, "Invalid status"),
    ],
)
def test_event_validation(store, make_event, values, message):
    event = make_event()
    with pytest.raises(ValueError, match=message):
        queries.update_event(store, event.id, values)


def test_member_role_and_email(store):
    member = queries.create_member(store, {"name": "Nok", "email": " Nok@Example.com "})
    assert member.email == "nok@example.com"
    assert member.role == "member"
    assert member.is_active

    with pytest.raises(ValueError, match="Invalid role"):
        queries.update_member(store, member.id, {"role": "sommelier"})
    with pytest.raises(IntegrityError):
        queries.create_member(store, {"name": "Nok again", "email": "nok@example.com"})


def test_wine_rating_range(store, make_event):
    event = make_event()
    with pytest.raises(ValueError, match="Rating must be between 1 and 10"):
        queries.create_wine(store, {"event_id": event.id, "name": "Too good", "rating": 11})
    with pytest.raises(ValueError, match="must belong to an event"):
        queries.create_wine(store, {"name": "Orphan"})


def test_delete_wine_keeps_event(store, make_event):
    event = make_event()
    keep = queries.create_wine(store, {"event_id": event.id, "name": "Keep", "rating": 8.5})
    drop = queries.create_wine(store, {"event_id": event.id, "name": "Drop", "rating": 6})

    assert queries.delete_wine(store, drop.id) is True

    assert [w.id for w in queries.list_wines_by_event(store, event.id)] == [keep.id]
    assert queries.get_event(store, event.id) is not None


def test_delete_event_cascades_to_wines(store, make_event):
    event = make_event()
    wine = queries.create_wine(store, {"event_id": event.id, "name": "Gone too"})

    assert queries.delete_event(store, event.id) is True

    assert queries.get_wine(store, wine.id) is None
    assert queries.count_stats(store).total_wines == 0


def test_winning_wine_and_detail(store, make_event):
    event = make_event(status="completed", winner="Winner")
    queries.create_wine(store, {"event_id": event.id, "name": "Runner up", "rating": 7.5})
    queries.create_wine(store, {"event_id": event.id, "name": "Winner", "rating": 9.25, "price": 1450, "is_winner": True})

    winner = queries.get_winning_wine(store, event.id)
    assert winner.name == "Winner"
    assert winner.rating == 9.25
    assert winner.price == 1450.0

    detail = queries.get_event_with_wines(store, event.id)
    assert detail.event.id == event.id
    assert {w.name for w in detail.wines} == {"Runner up", "Winner"}
    assert detail.winning_wine.name == "Winner"


def test_deleting_member_keeps_their_wines(store, make_event):
    event = make_event()
    member = queries.create_member(store, {"name": "Pim", "email": "pim@example.com"})
    wine = queries.create_wine(store, {"event_id": event.id, "member_id": member.id, "name": "Pim's pick"})

    assert queries.delete_member(store, member.id) is True

    assert queries.get_wine(store, wine.id).member_id is None


def test_count_stats_counts_active_members_only(store, make_event):
    make_event()
    queries.create_member(store, {"name": "A", "email": "a@example.com"})
    queries.create_member(store, {"name": "B", "email": "b@example.com", "is_active": False})

    stats = queries.count_stats(store)
    assert (stats.total_events, stats.active_members, stats.total_wines) == (1, 1, 0)


def test_no_store_raises():
    with pytest.raises(StoreUnavailableError):
        queries.list_events(None)
