# skillswap/api/session.py
"""
Session Management API
Request learning sessions and move them through their lifecycle.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from skillswap.database import get_db
from skillswap.models.user import User
from skillswap.schemas import Session as SessionSchema
from skillswap.schemas import SessionRequest, SessionStatusUpdate, SessionWithDetails
from skillswap.services import session_service
from skillswap.services.session_service import (
    InvalidSessionRequest,
    InvalidTransition,
    SessionNotFound,
    TransitionForbidden,
)
from skillswap.utils.security import get_current_user

router = APIRouter(prefix="/sessions", tags=["sessions"])


# ======================
# SESSION LISTING
# ======================
@router.get("/my", response_model=List[SessionWithDetails])
def get_my_sessions(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """All sessions the caller requested or provides, newest first."""
    return session_service.list_sessions_for_user(db, current_user.id)


# ======================
# CREATE SESSION REQUEST
# ======================
@router.post("/request", response_model=SessionSchema, status_code=status.HTTP_201_CREATED)
def create_session_request(
    payload: SessionRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return session_service.request_session(
            db,
            requester_id=current_user.id,
            skill_id=payload.skill_id,
            provider_id=payload.provider_id,
            message=payload.message,
            scheduled_at=payload.scheduled_at,
        )
    except InvalidSessionRequest as e:
        raise HTTPException(status_code=400, detail=str(e))


# ======================
# UPDATE SESSION STATUS
# ======================
@router.patch("/{session_id}", response_model=SessionSchema)
def update_session_status(
    session_id: int,
    payload: SessionStatusUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Accept, complete or cancel a session.

    - pending -> accepted: provider only
    - accepted -> completed: provider only
    - pending -> cancelled: requester or provider
    """
    try:
        return session_service.transition_session(
            db, session_id, payload.status, current_user.id
        )
    except SessionNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except TransitionForbidden as e:
        raise HTTPException(status_code=403, detail=str(e))
    except InvalidTransition as e:
        raise HTTPException(status_code=400, detail=str(e))
