from __future__ import annotations

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

import auth
from data import queries
from data.connection import create_store

APP_FILE = str(Path(__file__).resolve().parents[1] / "app" / "app.py")


@pytest.fixture
def app(monkeypatch) -> AppTest:
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("ADMIN_USERNAME", raising=False)
    monkeypatch.delenv("ADMIN_PASSWORD", raising=False)
    return AppTest.from_file(APP_FILE, default_timeout=30)


def _button(at: AppTest, label: str):
    return next(b for b in at.button if b.label == label)


def _signed_in(at: AppTest) -> bool:
    return auth.SESSION_KEY in at.session_state and bool(at.session_state[auth.SESSION_KEY])


def _login(at: AppTest, username: str, password: str) -> None:
    at.text_input(key="login_username").input(username)
    at.text_input(key="login_password").input(password)
    _button(at, "Sign in").click().run()


def test_home_renders_sample_data_without_database(app):
    app.run()

    assert not app.exception
    assert any("sample" in w.value.lower() for w in app.warning)
    assert app.button(key="home_open_1").label == "Read full report"


def test_read_full_report_opens_detail(app):
    app.run()

    app.button(key="home_open_1").click().run()

    assert not app.exception
    assert app.title[0].value == "French Rouges"
    _button(app, "← Back to events").click().run()
    assert not app.title
    assert app.button(key="completed_open_2")


def test_unknown_event_without_database_is_unavailable(app):
    app.session_state["nav"] = "events"
    app.session_state["event_id"] = 999
    app.run()

    assert not app.exception
    assert "temporarily unavailable" in app.error[0].value


@pytest.mark.parametrize("nav", ["events", "about", "join"])
def test_static_pages_render(app, nav):
    app.session_state["nav"] = nav
    app.run()

    assert not app.exception


def test_admin_login_rejects_wrong_password(app):
    app.session_state["nav"] = "admin"
    app.run()

    _login(app, "admin", "not-the-password")

    assert not app.exception
    assert app.error[0].value == "Invalid username or password."
    assert app.text_input(key="login_password").value == ""
    assert not _signed_in(app)
    assert not app.tabs


def test_admin_login_and_logout(app):
    app.session_state["nav"] = "admin"
    app.run()

    _login(app, "admin", "wine2024")

    assert not app.exception
    assert _signed_in(app)
    assert [t.label for t in app.tabs] == ["Events", "Members", "Wines", "Settings"]

    app.sidebar.button(key="logout_btn").click().run()
    assert not _signed_in(app)
    assert not app.tabs


def test_admin_runs_data_migration(app, monkeypatch, tmp_path):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'club.db'}")
    app.session_state["nav"] = "admin"
    app.run()
    _login(app, "admin", "wine2024")

    app.button(key="run_migration").click().run()

    assert not app.exception
    assert any("Migration complete: 3 events, 3 members." in s.value for s in app.success)


def _by_label(elements, label: str):
    return next(e for e in elements if e.label == label)


def test_admin_creates_event_through_form(app, monkeypatch, tmp_path):
    url = f"sqlite:///{tmp_path / 'club.db'}"
    monkeypatch.setenv("DATABASE_URL", url)
    app.session_state["nav"] = "admin"
    app.run()
    _login(app, "admin", "wine2024")

    _by_label(app.text_input, "Title *").input("Rhône Rangers")
    _by_label(app.text_input, "Theme *").input("Northern Rhône Syrah")
    _by_label(app.text_input, "Budget *").input("1,800 THB")
    _by_label(app.text_input, "Location *").input("Casa Boo")
    _by_label(app.text_area, "Excerpt *").input("Peppery Syrah from Côte-Rôtie to Cornas.")
    _button(app, "Create event").click().run()

    assert not app.exception
    assert any(s.value == "Created event 'Rhône Rangers'." for s in app.success)
    store = create_store(url)
    try:
        [event] = queries.list_events(store)
    finally:
        store.engine.dispose()
    assert (event.title, event.status, event.location) == ("Rhône Rangers", "upcoming", "Casa Boo")


def test_admin_form_reports_missing_fields(app, monkeypatch, tmp_path):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'club.db'}")
    app.session_state["nav"] = "admin"
    app.run()
    _login(app, "admin", "wine2024")

    _by_label(app.text_input, "Title *").input("Half an event")
    _button(app, "Create event").click().run()

    assert not app.exception
    assert any(e.value.startswith("Please fill in: theme") for e in app.error)
