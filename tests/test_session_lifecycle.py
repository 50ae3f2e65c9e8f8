from __future__ import annotations

import pytest

from factories import create_session, create_skill, create_user
from skillswap.crud import session as session_crud
from skillswap.services import session_service
from skillswap.services.session_service import (
    InvalidSessionRequest,
    InvalidTransition,
    SessionNotFound,
    TransitionForbidden,
)


@pytest.fixture
def people(db_session):
    requester = create_user(db_session, "alice")
    provider = create_user(db_session, "bob")
    outsider = create_user(db_session, "carol")
    skill = create_skill(db_session, provider)
    return requester, provider, outsider, skill


# ======================
# REQUESTING
# ======================

def test_request_session_starts_pending(db_session, people):
    requester, provider, _, skill = people

    session = session_service.request_session(
        db_session,
        requester_id=requester.id,
        skill_id=skill.id,
        provider_id=provider.id,
        message="Can we start next week?",
    )

    assert session.status == "pending"
    assert session.requester_id == requester.id
    assert session.provider_id == provider.id
    assert session.message == "Can we start next week?"


def test_request_session_rejects_provider_not_owning_skill(db_session, people):
    requester, _, outsider, skill = people

    with pytest.raises(InvalidSessionRequest, match="Invalid skill or provider"):
        session_service.request_session(
            db_session,
            requester_id=requester.id,
            skill_id=skill.id,
            provider_id=outsider.id,
        )


def test_request_session_rejects_unknown_skill(db_session, people):
    requester, provider, _, _ = people

    with pytest.raises(InvalidSessionRequest):
        session_service.request_session(
            db_session,
            requester_id=requester.id,
            skill_id=9999,
            provider_id=provider.id,
        )


def test_request_session_rejects_self_request(db_session, people):
    _, provider, _, skill = people

    with pytest.raises(InvalidSessionRequest, match="yourself"):
        session_service.request_session(
            db_session,
            requester_id=provider.id,
            skill_id=skill.id,
            provider_id=provider.id,
        )


# ======================
# TRANSITIONS
# ======================

def test_provider_accepts_then_requester_cannot_complete(db_session, people):
    requester, provider, _, skill = people
    session = create_session(db_session, requester, provider, skill)

    accepted = session_service.transition_session(db_session, session.id, "accepted", provider.id)
    assert accepted.status == "accepted"

    with pytest.raises(TransitionForbidden):
        session_service.transition_session(db_session, session.id, "completed", requester.id)

    completed = session_service.transition_session(db_session, session.id, "completed", provider.id)
    assert completed.status == "completed"


@pytest.mark.parametrize("actor", ["requester", "outsider"])
def test_only_provider_can_accept(db_session, people, actor):
    requester, provider, outsider, skill = people
    session = create_session(db_session, requester, provider, skill)
    user = requester if actor == "requester" else outsider

    with pytest.raises(TransitionForbidden):
        session_service.transition_session(db_session, session.id, "accepted", user.id)

    db_session.refresh(session)
    assert session.status == "pending"


@pytest.mark.parametrize("actor", ["requester", "provider"])
def test_either_participant_can_cancel_pending(db_session, people, actor):
    requester, provider, _, skill = people
    session = create_session(db_session, requester, provider, skill)
    user = requester if actor == "requester" else provider

    cancelled = session_service.transition_session(db_session, session.id, "cancelled", user.id)

    assert cancelled.status == "cancelled"


def test_outsider_cannot_cancel(db_session, people):
    requester, provider, outsider, skill = people
    session = create_session(db_session, requester, provider, skill)

    with pytest.raises(TransitionForbidden):
        session_service.transition_session(db_session, session.id, "cancelled", outsider.id)


@pytest.mark.parametrize(
    "current, target",
    [
        ("accepted", "cancelled"),
        ("accepted", "accepted"),
        ("accepted", "pending"),
        ("pending", "completed"),
        ("pending", "pending"),
        ("completed", "accepted"),
        ("completed", "cancelled"),
        ("cancelled", "accepted"),
        ("cancelled", "completed"),
    ],
)
def test_edges_outside_table_are_rejected(db_session, people, current, target):
    requester, provider, _, skill = people
    session = create_session(db_session, requester, provider, skill, status=current)

    for actor in (requester, provider):
        with pytest.raises(InvalidTransition):
            session_service.transition_session(db_session, session.id, target, actor.id)

    db_session.refresh(session)
    assert session.status == current


def test_cancelled_session_is_terminal(db_session, people):
    requester, provider, _, skill = people
    session = create_session(db_session, requester, provider, skill)

    session_service.transition_session(db_session, session.id, "cancelled", requester.id)

    for target in ("accepted", "completed", "cancelled"):
        with pytest.raises(InvalidTransition):
            session_service.transition_session(db_session, session.id, target, provider.id)


def test_unknown_status_is_invalid(db_session, people):
    requester, provider, _, skill = people
    session = create_session(db_session, requester, provider, skill)

    with pytest.raises(InvalidTransition, match="Invalid status"):
        session_service.transition_session(db_session, session.id, "archived", provider.id)


def test_missing_session_is_not_found_before_status_check(db_session, people):
    _, provider, _, _ = people

    with pytest.raises(SessionNotFound):
        session_service.transition_session(db_session, 424242, "archived", provider.id)


def test_transition_changes_only_status(db_session, people):
    requester, provider, _, skill = people
    session = create_session(db_session, requester, provider, skill)
    before = (session.requester_id, session.provider_id, session.skill_id, session.message, session.created_at)

    updated = session_service.transition_session(db_session, session.id, "accepted", provider.id)

    assert (updated.requester_id, updated.provider_id, updated.skill_id, updated.message, updated.created_at) == before


# ======================
# CONDITIONAL WRITE
# ======================

def test_conditional_update_only_applies_to_expected_status(db_session, people):
    requester, provider, _, skill = people
    session = create_session(db_session, requester, provider, skill, status="cancelled")

    changed = session_crud.update_status_if(
        db_session, session.id, expected_status="pending", new_status="accepted"
    )

    assert changed == 0
    db_session.refresh(session)
    assert session.status == "cancelled"


def test_concurrent_change_is_reported_as_invalid_transition(db_session, people, monkeypatch):
    requester, provider, _, skill = people
    session = create_session(db_session, requester, provider, skill)
    real_update = session_crud.update_status_if

    def racing_update(db, session_id, *, expected_status, new_status):
        # The requester cancels between our read and our write.
        real_update(db, session_id, expected_status="pending", new_status="cancelled")
        return real_update(db, session_id, expected_status=expected_status, new_status=new_status)

    monkeypatch.setattr(session_service.session_crud, "update_status_if", racing_update)

    with pytest.raises(InvalidTransition, match="updated by someone else"):
        session_service.transition_session(db_session, session.id, "accepted", provider.id)

    db_session.refresh(session)
    assert session.status == "cancelled"


# ======================
# LISTING
# ======================

def test_allowed_transitions_per_role(db_session, people):
    requester, provider, outsider, skill = people
    pending = create_session(db_session, requester, provider, skill)
    accepted = create_session(db_session, requester, provider, skill, status="accepted")
    completed = create_session(db_session, requester, provider, skill, status="completed")

    assert sorted(session_service.allowed_transitions(pending, provider.id)) == ["accepted", "cancelled"]
    assert session_service.allowed_transitions(pending, requester.id) == ["cancelled"]
    assert session_service.allowed_transitions(pending, outsider.id) == []
    assert session_service.allowed_transitions(accepted, provider.id) == ["completed"]
    assert session_service.allowed_transitions(accepted, requester.id) == []
    assert session_service.allowed_transitions(completed, provider.id) == []


def test_list_sessions_for_user_includes_both_roles_newest_first(db_session, people):
    requester, provider, outsider, skill = people
    outsider_skill = create_skill(db_session, outsider, "Guitar", category="Music")

    as_requester = create_session(db_session, requester, provider, skill)
    as_provider_skill = create_skill(db_session, requester, "Spanish", category="Languages")
    as_provider = create_session(db_session, outsider, requester, as_provider_skill)
    create_session(db_session, provider, outsider, outsider_skill)  # not involving requester

    rows = session_service.list_sessions_for_user(db_session, requester.id)

    assert [row["id"] for row in rows] == [as_provider.id, as_requester.id]
    first = rows[0]
    assert first["requester"].username == "carol"
    assert first["provider"].username == "alice"
    assert first["skill"].name == "Spanish"
    assert first["available_actions"] == ["accepted", "cancelled"]
    assert rows[1]["available_actions"] == ["cancelled"]
