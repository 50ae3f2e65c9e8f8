"""
One-time creation of the first admin account.

Usage:
  ENABLE_ADMIN_BOOTSTRAP=true \
  ADMIN_BOOTSTRAP_CONFIRM=CREATE-FIRST-ADMIN \
  ADMIN_USERNAME=admin ADMIN_EMAIL=admin@example.com \
  ADMIN_FULL_NAME="Site Admin" ADMIN_PASSWORD='Str0ngPass' \
  python -m skillswap.scripts.bootstrap_admin
"""

import logging
import os
import re
import sys
from typing import Optional

from skillswap import models
from skillswap.database import Base, SessionLocal, engine
from skillswap.utils.security import get_password_hash

logger = logging.getLogger(__name__)

CONFIRM_PHRASE = "CREATE-FIRST-ADMIN"
EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
USERNAME_RE = re.compile(r"^\S{3,20}$")


def _is_truthy(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "y", "on"}


def _required_env(key: str) -> str:
    value = os.getenv(key, "").strip()
    if not value:
        raise ValueError(f"Missing required environment variable: {key}")
    return value


def _validate_password(password: str) -> None:
    if len(password) < 8:
        raise ValueError("ADMIN_PASSWORD must be at least 8 characters.")
    if len(password.encode("utf-8")) > 72:
        raise ValueError("ADMIN_PASSWORD must be <= 72 bytes (bcrypt limit).")
    if not re.search(r"[A-Z]", password):
        raise ValueError("ADMIN_PASSWORD must contain at least one uppercase letter.")
    if not re.search(r"[a-z]", password):
        raise ValueError("ADMIN_PASSWORD must contain at least one lowercase letter.")
    if not re.search(r"\d", password):
        raise ValueError("ADMIN_PASSWORD must contain at least one digit.")


def create_first_admin(db, *, username: str, email: str, full_name: str, password: str) -> models.User:
    """Insert an admin user; refuses when any admin already exists."""
    if db.query(models.User).filter(models.User.is_admin.is_(True)).count() > 0:
        raise ValueError(
            "Admin bootstrap blocked: an admin already exists. "
            "Promote further admins from the admin panel."
        )
    if db.query(models.User).filter(models.User.username == username).first():
        raise ValueError("ADMIN_USERNAME is already taken.")
    if db.query(models.User).filter(models.User.email == email).first():
        raise ValueError("ADMIN_EMAIL is already registered.")

    user = models.User(
        username=username,
        email=email,
        full_name=full_name,
        password_hash=get_password_hash(password),
        is_admin=True,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def bootstrap_admin() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    try:
        if not _is_truthy(os.getenv("ENABLE_ADMIN_BOOTSTRAP")):
            raise ValueError(
                "Bootstrap disabled. Set ENABLE_ADMIN_BOOTSTRAP=true to run."
            )
        confirm = _required_env("ADMIN_BOOTSTRAP_CONFIRM")
        if confirm != CONFIRM_PHRASE:
            raise ValueError(
                f"Invalid ADMIN_BOOTSTRAP_CONFIRM. Expected exact phrase: {CONFIRM_PHRASE}"
            )

        username = _required_env("ADMIN_USERNAME")
        email = _required_env("ADMIN_EMAIL").lower()
        full_name = _required_env("ADMIN_FULL_NAME")
        password = _required_env("ADMIN_PASSWORD")

        if not USERNAME_RE.match(username):
            raise ValueError("ADMIN_USERNAME must be 3-20 characters without spaces.")
        if not EMAIL_RE.match(email):
            raise ValueError("ADMIN_EMAIL is not a valid email format.")
        _validate_password(password)

        Base.metadata.create_all(bind=engine)
        db = SessionLocal()
        try:
            user = create_first_admin(
                db,
                username=username,
                email=email,
                full_name=full_name,
                password=password,
            )
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()
        logger.info("Admin created successfully: %s (%s)", user.username, email)
        return 0
    except Exception as exc:
        logger.error("Admin bootstrap failed: %s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(bootstrap_admin())
