# skillswap/crud/session.py
from datetime import datetime
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from skillswap import models


def get_session(db: Session, session_id: int) -> Optional[models.Session]:
    return db.query(models.Session).filter(models.Session.id == session_id).first()


def create_session(
    db: Session,
    *,
    requester_id: int,
    provider_id: int,
    skill_id: int,
    message: Optional[str] = None,
    scheduled_at: Optional[datetime] = None,
) -> models.Session:
    session = models.Session(
        requester_id=requester_id,
        provider_id=provider_id,
        skill_id=skill_id,
        status=models.SessionStatus.PENDING.value,
        message=message,
        scheduled_at=scheduled_at,
    )
    db.add(session)
    db.commit()
    db.refresh(session)
    return session


def get_sessions_for_user(db: Session, user_id: int) -> List[models.Session]:
    """Sessions where the user is requester or provider, with both users and the skill loaded."""
    return (
        db.query(models.Session)
        .options(
            joinedload(models.Session.requester),
            joinedload(models.Session.provider),
            joinedload(models.Session.skill),
        )
        .filter(
            or_(
                models.Session.requester_id == user_id,
                models.Session.provider_id == user_id,
            )
        )
        .order_by(models.Session.created_at.desc(), models.Session.id.desc())
        .all()
    )


def update_status_if(
    db: Session,
    session_id: int,
    *,
    expected_status: str,
    new_status: str,
) -> int:
    """
    Conditional status write. Only succeeds while the row still carries
    ``expected_status``; returns the number of rows changed (0 or 1).
    """
    updated = (
        db.query(models.Session)
        .filter(
            models.Session.id == session_id,
            models.Session.status == expected_status,
        )
        .update({"status": new_status}, synchronize_session=False)
    )
    db.commit()
    return int(updated)


def count_completed_for_user(db: Session, user_id: int) -> int:
    return (
        db.query(models.Session)
        .filter(
            or_(
                models.Session.requester_id == user_id,
                models.Session.provider_id == user_id,
            ),
            models.Session.status == models.SessionStatus.COMPLETED.value,
        )
        .count()
    )
