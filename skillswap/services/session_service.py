# skillswap/services/session_service.py
"""
Session Lifecycle Service

Owns the status machine of a learning session and who may drive it:

    pending  -> accepted    provider
    accepted -> completed   provider
    pending  -> cancelled   requester or provider

Every other (from, to) pair is rejected, including ``accepted -> cancelled``.
"""

import logging
from datetime import datetime
from typing import Dict, FrozenSet, List, Optional, Tuple

from sqlalchemy.orm import Session

from skillswap import models
from skillswap.crud import session as session_crud
from skillswap.crud import skill as skill_crud
from skillswap.models.session import SessionStatus

logger = logging.getLogger(__name__)

REQUESTER = "requester"
PROVIDER = "provider"

TRANSITIONS: Dict[Tuple[str, str], FrozenSet[str]] = {
    (SessionStatus.PENDING.value, SessionStatus.ACCEPTED.value): frozenset({PROVIDER}),
    (SessionStatus.ACCEPTED.value, SessionStatus.COMPLETED.value): frozenset({PROVIDER}),
    (SessionStatus.PENDING.value, SessionStatus.CANCELLED.value): frozenset({REQUESTER, PROVIDER}),
}

RECOGNIZED_STATUSES = frozenset(status.value for status in SessionStatus)


# ======================
# ERRORS
# ======================

class SessionNotFound(LookupError):
    """No session with the given id."""


class InvalidTransition(ValueError):
    """Unknown target status, or an edge that is not in the transition table."""


class TransitionForbidden(PermissionError):
    """The caller does not hold the role the edge requires."""


class InvalidSessionRequest(ValueError):
    """A session request naming a mismatched skill/provider or the caller themself."""


# ======================
# HELPERS
# ======================

def participant_roles(session: models.Session, user_id: int) -> FrozenSet[str]:
    roles = set()
    if session.requester_id == user_id:
        roles.add(REQUESTER)
    if session.provider_id == user_id:
        roles.add(PROVIDER)
    return frozenset(roles)


def allowed_transitions(session: models.Session, user_id: int) -> List[str]:
    """Target statuses ``user_id`` may apply to ``session`` right now."""
    roles = participant_roles(session, user_id)
    return [
        target
        for (source, target), permitted in TRANSITIONS.items()
        if source == session.status and roles & permitted
    ]


def check_transition(session: models.Session, target_status: str, user_id: int) -> None:
    """
    Raise unless ``user_id`` may move ``session`` to ``target_status``.

    Order of checks: recognised target, participant, edge exists, role.
    """
    if target_status not in RECOGNIZED_STATUSES:
        raise InvalidTransition("Invalid status")

    roles = participant_roles(session, user_id)
    if not roles:
        raise TransitionForbidden("Not authorized")

    permitted = TRANSITIONS.get((session.status, target_status))
    if permitted is None:
        raise InvalidTransition(
            f"Cannot change a {session.status} session to {target_status}"
        )

    if not roles & permitted:
        if permitted == {PROVIDER}:
            raise TransitionForbidden("Only the provider can update this session")
        raise TransitionForbidden("Not authorized")


# ======================
# OPERATIONS
# ======================

def request_session(
    db: Session,
    *,
    requester_id: int,
    skill_id: int,
    provider_id: int,
    message: Optional[str] = None,
    scheduled_at: Optional[datetime] = None,
) -> models.Session:
    """Create a ``pending`` session for a skill owned by ``provider_id``."""
    skill = skill_crud.get_skill(db, skill_id)
    if not skill or skill.user_id != provider_id:
        raise InvalidSessionRequest("Invalid skill or provider")

    if provider_id == requester_id:
        raise InvalidSessionRequest("Cannot request session with yourself")

    session = session_crud.create_session(
        db,
        requester_id=requester_id,
        provider_id=provider_id,
        skill_id=skill_id,
        message=message,
        scheduled_at=scheduled_at,
    )
    logger.info(
        "Session %s requested by user %s from provider %s (skill %s)",
        session.id, requester_id, provider_id, skill_id,
    )
    return session


def transition_session(
    db: Session,
    session_id: int,
    target_status: str,
    user_id: int,
) -> models.Session:
    """
    Move a session to ``target_status`` on behalf of ``user_id``.

    The write is conditional on the status observed during the checks, so
    two conflicting transitions cannot both succeed.

    Raises:
        SessionNotFound: no such session
        InvalidTransition: unknown status, edge not in the table, or the
            session changed underneath this call
        TransitionForbidden: caller not allowed on this edge
    """
    session = session_crud.get_session(db, session_id)
    if not session:
        raise SessionNotFound("Session not found")

    observed_status = session.status
    try:
        check_transition(session, target_status, user_id)
    except (InvalidTransition, TransitionForbidden) as exc:
        logger.info(
            "Rejected transition of session %s from %s to %r by user %s: %s",
            session_id, observed_status, target_status, user_id, exc,
        )
        raise

    updated = session_crud.update_status_if(
        db,
        session_id,
        expected_status=observed_status,
        new_status=target_status,
    )
    if not updated:
        if session_crud.get_session(db, session_id) is None:
            raise SessionNotFound("Session not found")
        logger.warning(
            "Session %s changed concurrently; %s -> %s by user %s not applied",
            session_id, observed_status, target_status, user_id,
        )
        raise InvalidTransition("Session was updated by someone else; reload and try again")

    db.refresh(session)
    logger.info(
        "Session %s: %s -> %s by user %s",
        session_id, observed_status, target_status, user_id,
    )
    return session


def list_sessions_for_user(db: Session, user_id: int) -> List[dict]:
    """Every session the user takes part in, newest first, with details and available actions."""
    sessions = session_crud.get_sessions_for_user(db, user_id)
    return [
        {
            "id": s.id,
            "requester_id": s.requester_id,
            "provider_id": s.provider_id,
            "skill_id": s.skill_id,
            "status": s.status,
            "scheduled_at": s.scheduled_at,
            "message": s.message,
            "created_at": s.created_at,
            "requester": s.requester,
            "provider": s.provider,
            "skill": s.skill,
            "available_actions": allowed_transitions(s, user_id),
        }
        for s in sessions
    ]
