from __future__ import annotations

import auth
from components.session_store import PENDING_KEY, CookieBackedStore, decode_cookie, encode_cookie

NOW = 1_760_000_000.0


def _store(session: dict, cookies: dict, ttl_hours: int = 24) -> CookieBackedStore:
    return CookieBackedStore(session, cookies, mirrored=(auth.SESSION_KEY,), max_age_hours=ttl_hours)


def _cookie_jar(session: dict) -> dict:
    """Apply queued cookie writes the way the browser would."""
    jar: dict = {}
    for op, key, value, _expires_at in session.get(PENDING_KEY, []):
        if op == "set":
            jar[key] = value
        else:
            jar.pop(key, None)
    return jar


def test_cookie_encoding_is_cookie_safe():
    raw = '{"username": "admin", "role": "admin", "timestamp": 1.5}'

    encoded = encode_cookie(raw)

    assert set(encoded) <= set("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_")
    assert decode_cookie(encoded) == raw
    assert decode_cookie("%%%") is None


def test_login_survives_a_fresh_session(cfg):
    first_tab: dict = {}
    marker = auth.login(cfg, _store(first_tab, {}), "admin", "wine2024", now=NOW)

    # A reload starts with an empty session; only the cookie is left
    reloaded = _store({}, _cookie_jar(first_tab))

    assert auth.load_session(cfg, reloaded, now=NOW + 3600) == marker


def test_login_queues_cookie_with_ttl_expiry(cfg):
    session: dict = {}
    auth.login(cfg, _store(session, {}), "admin", "wine2024", now=NOW)

    [(op, key, value, expires_at)] = session[PENDING_KEY]
    assert (op, key) == ("set", auth.SESSION_KEY)
    assert decode_cookie(value) == session[auth.SESSION_KEY]
    assert expires_at is not None


def test_reloaded_cookie_still_expires_after_ttl(cfg):
    first_tab: dict = {}
    auth.login(cfg, _store(first_tab, {}), "admin", "wine2024", now=NOW)
    cookies = _cookie_jar(first_tab)

    reloaded_session: dict = {}
    assert auth.load_session(cfg, _store(reloaded_session, cookies), now=NOW + 24 * 3600) is None
    assert reloaded_session[PENDING_KEY][-1][:2] == ("delete", auth.SESSION_KEY)


def test_logout_ignores_stale_request_cookie(cfg):
    first_tab: dict = {}
    auth.login(cfg, _store(first_tab, {}), "admin", "wine2024", now=NOW)
    cookies = _cookie_jar(first_tab)

    session: dict = {}
    storage = _store(session, cookies)
    assert auth.load_session(cfg, storage, now=NOW) is not None

    auth.logout(storage)

    # The request still carries the old cookie until the browser applies the delete
    assert auth.load_session(cfg, storage, now=NOW) is None
    assert _cookie_jar(session) == {}


def test_garbage_cookie_is_not_a_session(cfg):
    session: dict = {}
    storage = _store(session, {auth.SESSION_KEY: "not-base64-json!"})

    assert auth.load_session(cfg, storage, now=NOW) is None


def test_unmirrored_keys_stay_in_session():
    session: dict = {}
    storage = _store(session, {"other": encode_cookie("x")})

    storage["scratch"] = "value"

    assert session["scratch"] == "value"
    assert PENDING_KEY not in session
    assert "other" not in storage
