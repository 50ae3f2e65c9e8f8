from datetime import datetime, UTC
from typing import Optional

from fastapi import Depends, HTTPException, Request, Response, status
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from skillswap import models
from skillswap.config import settings
from skillswap.database import get_db
from skillswap.utils.session_store import (
    SessionStore,
    get_session_store,
    new_session_token,
    session_max_age,
)


# ==========================
# AUTH CONFIG
# ==========================

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto"
)

BCRYPT_MAX_BYTES = 72


# ==========================
# PASSWORD UTILS
# ==========================

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """
    Bcrypt max input length = 72 bytes.
    Longer passwords are rejected rather than cut, so login sees the same input.
    """
    if len(password.encode("utf-8")) > BCRYPT_MAX_BYTES:
        raise ValueError(f"Password must be at most {BCRYPT_MAX_BYTES} bytes")

    return pwd_context.hash(password)


# ==========================
# SESSION COOKIE
# ==========================

def encode_session_cookie(token: str) -> str:
    """Sign the store token so a forged cookie never reaches the store."""
    expire = datetime.now(UTC) + session_max_age()
    return jwt.encode(
        {"sid": token, "exp": expire},
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
    )


def decode_session_cookie(value: str) -> Optional[str]:
    try:
        payload = jwt.decode(
            value,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
        )
    except JWTError:
        return None
    sid = payload.get("sid")
    return sid if isinstance(sid, str) else None


def start_session(response: Response, store: SessionStore, user_id: int) -> str:
    token = new_session_token()
    store.set(token, user_id)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=encode_session_cookie(token),
        max_age=int(session_max_age().total_seconds()),
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )
    return token


def end_session(request: Request, response: Response, store: SessionStore) -> None:
    raw = request.cookies.get(settings.SESSION_COOKIE_NAME)
    token = decode_session_cookie(raw) if raw else None
    if token:
        store.destroy(token)
    response.delete_cookie(settings.SESSION_COOKIE_NAME)


# ==========================
# AUTH HELPERS
# ==========================

def authenticate_user(db: Session, username: str, password: str):
    user = db.query(models.User).filter(
        models.User.username == username
    ).first()

    if not user:
        return False

    if not verify_password(password, user.password_hash):
        return False

    return user


def get_optional_user(
    request: Request,
    db: Session = Depends(get_db),
    store: SessionStore = Depends(get_session_store),
) -> Optional[models.User]:
    raw = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not raw:
        return None

    token = decode_session_cookie(raw)
    if token is None:
        return None

    user_id = store.get(token)
    if user_id is None:
        return None

    return db.query(models.User).filter(models.User.id == user_id).first()


def get_current_user(user: Optional[models.User] = Depends(get_optional_user)) -> models.User:
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
    return user


def require_admin(current_user: models.User = Depends(get_current_user)) -> models.User:
    # current_user is re-read from the database on every request
    if not current_user.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
    return current_user
