from __future__ import annotations

from data import queries
from data.seed import INITIAL_EVENTS, SAMPLE_MEMBERS, seed_database


def test_seed_without_store():
    result = seed_database(None)

    assert not result.success
    assert result.error == "Database connection not available"


def test_seed_is_idempotent(store):
    first = seed_database(store)
    second = seed_database(store)

    assert first.success and second.success
    assert (second.events_count, second.members_count) == (len(INITIAL_EVENTS), len(SAMPLE_MEMBERS))
    stats = queries.count_stats(store)
    assert stats.total_events == len(INITIAL_EVENTS)
    assert stats.total_wines == len(INITIAL_EVENTS)


def test_each_seeded_event_has_its_winning_wine(store):
    seed_database(store)

    for event in queries.list_events(store):
        winner = queries.get_winning_wine(store, event.id)
        assert winner is not None
        assert winner.name == event.winner


def test_seed_leaves_existing_events_alone(store, make_event):
    make_event(title="Already here")

    result = seed_database(store)

    assert result.success
    assert [e.title for e in queries.list_events(store)] == ["Already here"]
    assert result.members_count == len(SAMPLE_MEMBERS)
