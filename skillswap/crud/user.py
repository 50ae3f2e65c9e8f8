from typing import List, Optional

from sqlalchemy.orm import Session

from skillswap import models


def get_user(db: Session, user_id: int) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.id == user_id).first()


def get_user_by_username(db: Session, username: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.username == username).first()


def get_user_by_email(db: Session, email: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.email == email).first()


def list_users(db: Session) -> List[models.User]:
    return (
        db.query(models.User)
        .order_by(models.User.created_at.desc(), models.User.id.desc())
        .all()
    )


def create_user(
    db: Session,
    *,
    username: str,
    email: str,
    password_hash: str,
    full_name: str,
    bio: Optional[str] = None,
    avatar_url: Optional[str] = None,
    is_admin: bool = False,
) -> models.User:
    user = models.User(
        username=username,
        email=email,
        password_hash=password_hash,
        full_name=full_name,
        bio=bio,
        avatar_url=avatar_url,
        is_admin=is_admin,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def update_user(db: Session, user: models.User, **fields) -> models.User:
    """Apply the given column values. Pass only the fields to change; ``None`` clears a column."""
    for key, value in fields.items():
        setattr(user, key, value)
    db.commit()
    db.refresh(user)
    return user


def delete_user(db: Session, user: models.User) -> None:
    # ORM cascades remove skills, sessions, reviews and auth sessions.
    db.delete(user)
    db.commit()
