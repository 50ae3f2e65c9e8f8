# skillswap/utils/session_store.py
"""
Server-side login state.

A store maps an opaque token (carried, signed, in the session cookie) to a
user id. Entries expire ``SESSION_MAX_AGE_HOURS`` after they are issued;
an expired entry reads as absent and is purged on that read.
"""

import logging
import secrets
import threading
from datetime import datetime, timedelta, UTC
from typing import Dict, Optional, Protocol, Tuple

from fastapi import Depends
from sqlalchemy.orm import Session

from skillswap.config import settings
from skillswap.database import get_db
from skillswap.models.auth_session import AuthSession

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    # Stored timestamps are naive UTC.
    return datetime.now(UTC).replace(tzinfo=None)


def session_max_age() -> timedelta:
    return timedelta(hours=settings.SESSION_MAX_AGE_HOURS)


def new_session_token() -> str:
    return secrets.token_urlsafe(32)


class SessionStore(Protocol):
    def get(self, token: str) -> Optional[int]: ...

    def set(self, token: str, user_id: int) -> None: ...

    def destroy(self, token: str) -> None: ...


class DatabaseSessionStore:
    """Keeps login state in the ``auth_sessions`` table."""

    def __init__(self, db: Session, max_age: Optional[timedelta] = None):
        self.db = db
        self.max_age = max_age or session_max_age()

    def get(self, token: str) -> Optional[int]:
        row = self.db.query(AuthSession).filter(AuthSession.token == token).first()
        if row is None:
            return None
        if row.expires_at <= _utcnow():
            self.db.delete(row)
            self.db.commit()
            return None
        return row.user_id

    def set(self, token: str, user_id: int) -> None:
        now = _utcnow()
        row = self.db.query(AuthSession).filter(AuthSession.token == token).first()
        if row is None:
            row = AuthSession(token=token, user_id=user_id)
            self.db.add(row)
        row.user_id = user_id
        row.created_at = now
        row.expires_at = now + self.max_age
        self.db.commit()

    def destroy(self, token: str) -> None:
        self.db.query(AuthSession).filter(AuthSession.token == token).delete(
            synchronize_session=False
        )
        self.db.commit()

    def purge_expired(self) -> int:
        removed = self.db.query(AuthSession).filter(
            AuthSession.expires_at <= _utcnow()
        ).delete(synchronize_session=False)
        self.db.commit()
        if removed:
            logger.info("Purged %s expired auth sessions", removed)
        return int(removed)


class InMemorySessionStore:
    """Process-local store for single-worker development and tests."""

    def __init__(self, max_age: Optional[timedelta] = None):
        self.max_age = max_age or session_max_age()
        self._entries: Dict[str, Tuple[int, datetime]] = {}
        self._lock = threading.Lock()

    def get(self, token: str) -> Optional[int]:
        with self._lock:
            entry = self._entries.get(token)
            if entry is None:
                return None
            user_id, expires_at = entry
            if expires_at <= _utcnow():
                del self._entries[token]
                return None
            return user_id

    def set(self, token: str, user_id: int) -> None:
        with self._lock:
            self._entries[token] = (user_id, _utcnow() + self.max_age)

    def destroy(self, token: str) -> None:
        with self._lock:
            self._entries.pop(token, None)


_memory_store = InMemorySessionStore()


def get_session_store(db: Session = Depends(get_db)) -> SessionStore:
    """FastAPI dependency selecting the configured backend."""
    if settings.SESSION_BACKEND == "memory":
        return _memory_store
    return DatabaseSessionStore(db)
