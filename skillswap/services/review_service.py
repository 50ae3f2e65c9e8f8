# skillswap/services/review_service.py
"""
Review Service Layer
Business rules for leaving feedback on a completed session.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from skillswap.crud import review as review_crud
from skillswap.crud import session as session_crud
from skillswap.models.review import Review
from skillswap.models.session import SessionStatus

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5


class InvalidReview(ValueError):
    """The review cannot be accepted."""


class ReviewForbidden(InvalidReview):
    """The reviewer did not take part in the session."""


def submit_review(
    db: Session,
    *,
    session_id: int,
    reviewer_id: int,
    reviewee_id: int,
    rating: int,
    comment: Optional[str] = None,
) -> Review:
    """
    Record a review of ``reviewee_id`` by ``reviewer_id`` for a session.

    Requirements:
    - Rating must be an integer from 1 to 5
    - Session must exist and be completed
    - Reviewer must be one of the two participants
    - Reviewee must be the other participant

    Repeat reviews of the same session by the same reviewer are accepted.

    Raises:
        InvalidReview: any rule above is broken (``ReviewForbidden`` for a
            reviewer outside the session)
    """
    if isinstance(rating, bool) or not isinstance(rating, int) or not (MIN_RATING <= rating <= MAX_RATING):
        raise InvalidReview("Rating must be between 1 and 5")

    session = session_crud.get_session(db, session_id)
    if not session or session.status != SessionStatus.COMPLETED.value:
        raise InvalidReview("Can only review completed sessions")

    participants = {session.requester_id, session.provider_id}
    if reviewer_id not in participants:
        raise ReviewForbidden("Not authorized to review this session")

    if reviewee_id not in participants or reviewee_id == reviewer_id:
        raise InvalidReview("Invalid reviewee")

    review = review_crud.create_review(
        db,
        session_id=session_id,
        reviewer_id=reviewer_id,
        reviewee_id=reviewee_id,
        rating=rating,
        comment=comment,
    )
    logger.info(
        "Review %s: user %s rated user %s %s/5 for session %s",
        review.id, reviewer_id, reviewee_id, rating, session_id,
    )
    return review
