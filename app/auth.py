"""
Admin login.

Placeholder scheme: two configured strings compared in process, and a session
marker {username, role, timestamp} kept as JSON under one key of the
per-browser session store (st.session_state). Markers expire after
cfg.session_ttl_hours. Not meant to protect anything valuable.
"""
from __future__ import annotations

import hmac
import json
import logging
import time
from dataclasses import asdict, dataclass
from typing import MutableMapping, Optional

from config import AppConfig

logger = logging.getLogger(__name__)

SESSION_KEY = "bwc_auth"
ADMIN_ROLE = "admin"


@dataclass(frozen=True)
class SessionMarker:
    username: str
    role: str
    timestamp: float  # epoch seconds at login

    def to_json(self) -> str:
        return json.dumps(asdict(self))

    @classmethod
    def from_json(cls, raw: str) -> "SessionMarker":
        data = json.loads(raw)
        return cls(username=str(data["username"]), role=str(data["role"]), timestamp=float(data["timestamp"]))

    def is_expired(self, ttl_hours: int, now: float) -> bool:
        return now - self.timestamp >= ttl_hours * 3600


def check_credentials(cfg: AppConfig, username: str, password: str) -> bool:
    user_ok = hmac.compare_digest(username.encode(), cfg.admin_username.encode())
    pass_ok = hmac.compare_digest(password.encode(), cfg.admin_password.encode())
    return user_ok and pass_ok


def login(
    cfg: AppConfig,
    storage: MutableMapping,
    username: str,
    password: str,
    now: Optional[float] = None,
) -> Optional[SessionMarker]:
    if not check_credentials(cfg, username, password):
        logger.info("Rejected admin login for %r", username)
        return None
    marker = SessionMarker(username=username, role=ADMIN_ROLE, timestamp=time.time() if now is None else now)
    storage[SESSION_KEY] = marker.to_json()
    return marker


def load_session(cfg: AppConfig, storage: MutableMapping, now: Optional[float] = None) -> Optional[SessionMarker]:
    """Current marker, or None. Expired and malformed markers are removed."""
    raw = storage.get(SESSION_KEY)
    if not raw:
        return None
    try:
        marker = SessionMarker.from_json(raw)
    except (ValueError, KeyError, TypeError):
        logout(storage)
        return None
    if marker.is_expired(cfg.session_ttl_hours, time.time() if now is None else now):
        logout(storage)
        return None
    return marker


def logout(storage: MutableMapping) -> None:
    if SESSION_KEY in storage:
        del storage[SESSION_KEY]
