from __future__ import annotations

import pytest

import auth


NOW = 1_760_000_000.0


def test_login_with_configured_pair(cfg):
    storage: dict = {}

    marker = auth.login(cfg, storage, "admin", "wine2024", now=NOW)

    assert marker == auth.SessionMarker(username="admin", role="admin", timestamp=NOW)
    assert auth.load_session(cfg, storage, now=NOW + 60) == marker


@pytest.mark.parametrize(
    "username, password",
    [("admin", "wine2023"), ("Admin", "wine2024"), ("", ""), ("admin", "wine2024 ")],
)
def test_login_rejects_anything_else(cfg, username, password):
    storage: dict = {}

    assert auth.login(cfg, storage, username, password, now=NOW) is None
    assert auth.SESSION_KEY not in storage


def test_session_expires_after_ttl(cfg):
    storage: dict = {}
    auth.login(cfg, storage, "admin", "wine2024", now=NOW)

    assert auth.load_session(cfg, storage, now=NOW + 24 * 3600 - 1) is not None
    assert auth.load_session(cfg, storage, now=NOW + 24 * 3600) is None
    assert auth.SESSION_KEY not in storage


def test_malformed_marker_is_discarded(cfg):
    storage = {auth.SESSION_KEY: '{"username": "admin"}'}

    assert auth.load_session(cfg, storage) is None
    assert auth.SESSION_KEY not in storage


def test_logout(cfg):
    storage: dict = {}
    auth.login(cfg, storage, "admin", "wine2024", now=NOW)

    auth.logout(storage)
    auth.logout(storage)

    assert auth.load_session(cfg, storage, now=NOW) is None
