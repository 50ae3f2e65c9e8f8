from __future__ import annotations

from datetime import timedelta

import pytest

from factories import create_user
from skillswap.models.auth_session import AuthSession
from skillswap.utils import session_store
from skillswap.utils.security import decode_session_cookie, encode_session_cookie
from skillswap.utils.session_store import DatabaseSessionStore, InMemorySessionStore


@pytest.fixture(params=["memory", "database"])
def store(request, db_session):
    if request.param == "memory":
        return InMemorySessionStore()
    return DatabaseSessionStore(db_session)


def test_set_get_destroy(store, db_session):
    user = create_user(db_session, "alice")

    store.set("tok-1", user.id)
    assert store.get("tok-1") == user.id
    assert store.get("unknown") is None

    store.destroy("tok-1")
    assert store.get("tok-1") is None
    store.destroy("tok-1")


def test_entries_expire_after_max_age(store, db_session, monkeypatch):
    user = create_user(db_session, "alice")
    issued = session_store._utcnow()
    monkeypatch.setattr(session_store, "_utcnow", lambda: issued)
    store.set("tok", user.id)

    monkeypatch.setattr(session_store, "_utcnow", lambda: issued + timedelta(hours=23, minutes=59))
    assert store.get("tok") == user.id

    monkeypatch.setattr(session_store, "_utcnow", lambda: issued + timedelta(hours=24))
    assert store.get("tok") is None


def test_expired_database_rows_are_purged(db_session, monkeypatch):
    user = create_user(db_session, "alice")
    store = DatabaseSessionStore(db_session, max_age=timedelta(hours=1))
    store.set("old", user.id)
    store.set("fresh", user.id)

    later = session_store._utcnow() + timedelta(hours=2)
    monkeypatch.setattr(session_store, "_utcnow", lambda: later)
    store.set("fresh", user.id)

    assert store.purge_expired() == 1
    assert [row.token for row in db_session.query(AuthSession).all()] == ["fresh"]


def test_cookie_round_trip_and_tampering():
    cookie = encode_session_cookie("abc123")

    assert decode_session_cookie(cookie) == "abc123"
    assert decode_session_cookie(cookie[:-2] + "xx") is None
    assert decode_session_cookie("not-a-jwt") is None


def test_password_hash_refuses_more_than_72_bytes():
    from skillswap.utils.security import get_password_hash, verify_password

    at_limit = "a" * 70 + "é"
    assert verify_password(at_limit, get_password_hash(at_limit))

    with pytest.raises(ValueError):
        get_password_hash("a" * 71 + "é")
