from __future__ import annotations

from datetime import date

import pytest
import streamlit as st

from config import AppConfig
from data import queries
from data.connection import create_store


@pytest.fixture(autouse=True)
def clear_streamlit_caches():
    st.cache_data.clear()
    st.cache_resource.clear()
    yield
    st.cache_data.clear()
    st.cache_resource.clear()


@pytest.fixture
def cfg() -> AppConfig:
    return AppConfig(
        database_url="sqlite://",
        admin_username="admin",
        admin_password="wine2024",
        session_ttl_hours=24,
        fallback_on_empty=True,
        log_level="INFO",
    )


@pytest.fixture
def store():
    s = create_store("sqlite://")
    s.init_schema()
    yield s
    s.engine.dispose()


@pytest.fixture
def broken_store(tmp_path):
    # Parent directory does not exist, so every connection attempt fails
    s = create_store(f"sqlite:///{tmp_path / 'missing' / 'club.db'}")
    yield s
    s.engine.dispose()


def event_values(**overrides) -> dict:
    values = {
        "title": "Rhône Rangers",
        "date": date(2025, 9, 12),
        "theme": "Northern Rhône Syrah",
        "budget": "1,800 THB",
        "location": "Casa Boo",
        "excerpt": "Peppery Syrah from Côte-Rôtie to Cornas.",
        "status": "upcoming",
    }
    values.update(overrides)
    return values


@pytest.fixture
def make_event(store):
    def _make(**overrides):
        return queries.create_event(store, event_values(**overrides))
    return _make
