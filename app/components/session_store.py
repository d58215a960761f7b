"""
Browser-persistent session storage.

A MutableMapping over st.session_state whose mirrored keys are also kept in a
browser cookie, so a reload or a new tab finds them again:
- reads use the session first, then the request cookies (st.context.cookies)
- writes and deletes are queued in the session and flushed once per run
  through the CookieManager component (flush_cookie_ops)

Cookie values are unpadded urlsafe base64 so they survive cookie encoding.
"""
from __future__ import annotations

import base64
import binascii
from datetime import datetime, timedelta, timezone
from typing import Iterator, Mapping, MutableMapping, Optional

import extra_streamlit_components as stx
import streamlit as st

import auth
from config import AppConfig

PENDING_KEY = "_cookie_ops"
COOKIE_MANAGER_KEY = "bwc_cookie_manager"
_CLEARED = ""  # tombstone: logged out in this session, ignore the request cookie


def encode_cookie(value: str) -> str:
    return base64.urlsafe_b64encode(value.encode()).decode().rstrip("=")


def decode_cookie(raw: str) -> Optional[str]:
    try:
        padded = raw + "=" * (-len(raw) % 4)
        return base64.b64decode(padded, altchars=b"-_", validate=True).decode()
    except (binascii.Error, UnicodeDecodeError):
        return None


class CookieBackedStore(MutableMapping):
    def __init__(
        self,
        session: MutableMapping,
        cookies: Mapping[str, str],
        mirrored: tuple[str, ...],
        max_age_hours: int,
    ) -> None:
        self._session = session
        self._cookies = cookies
        self._mirrored = mirrored
        self._max_age = timedelta(hours=max_age_hours)

    def __getitem__(self, key: str) -> str:
        if key in self._session:
            value = self._session[key]
        elif key in self._mirrored and self._cookies.get(key):
            value = decode_cookie(self._cookies[key])
        else:
            value = None
        if not value:
            raise KeyError(key)
        return value

    def __setitem__(self, key: str, value: str) -> None:
        self._session[key] = value
        if key in self._mirrored:
            expires_at = datetime.now(timezone.utc) + self._max_age
            self._queue(("set", key, encode_cookie(value), expires_at))

    def __delitem__(self, key: str) -> None:
        if key not in self:
            raise KeyError(key)
        self._session[key] = _CLEARED
        if key in self._mirrored:
            self._queue(("delete", key, None, None))

    def __iter__(self) -> Iterator[str]:
        return iter([k for k in self._mirrored if k in self])

    def __len__(self) -> int:
        return len(list(iter(self)))

    def _queue(self, op: tuple) -> None:
        self._session[PENDING_KEY] = [*self._session.get(PENDING_KEY, []), op]


def browser_session(cfg: AppConfig) -> CookieBackedStore:
    return CookieBackedStore(
        st.session_state,
        st.context.cookies,
        mirrored=(auth.SESSION_KEY,),
        max_age_hours=cfg.session_ttl_hours,
    )


def flush_cookie_ops() -> None:
    ops = st.session_state.get(PENDING_KEY)
    if not ops:
        return
    del st.session_state[PENDING_KEY]
    manager = stx.CookieManager(key=COOKIE_MANAGER_KEY)
    for i, (op, key, value, expires_at) in enumerate(ops):
        if op == "set":
            manager.set(key, value, expires_at=expires_at, key=f"cookie_set_{i}")
        else:
            manager.delete(key, key=f"cookie_delete_{i}")
