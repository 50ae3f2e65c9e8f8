# skillswap/crud/review.py
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from skillswap.models.review import Review


def create_review(
    db: Session,
    *,
    session_id: int,
    reviewer_id: int,
    reviewee_id: int,
    rating: int,
    comment: Optional[str] = None,
) -> Review:
    review = Review(
        session_id=session_id,
        reviewer_id=reviewer_id,
        reviewee_id=reviewee_id,
        rating=rating,
        comment=comment,
    )
    db.add(review)
    db.commit()
    db.refresh(review)
    return review


def get_reviews_for_user(db: Session, user_id: int) -> List[Review]:
    """Reviews received by ``user_id``, newest first."""
    return (
        db.query(Review)
        .filter(Review.reviewee_id == user_id)
        .order_by(Review.created_at.desc(), Review.id.desc())
        .all()
    )


def get_rating_summary(db: Session, user_id: int) -> tuple[int, float]:
    """Return ``(review_count, average_rating)`` for reviews received by a user."""
    count, average = (
        db.query(func.count(Review.id), func.avg(Review.rating))
        .filter(Review.reviewee_id == user_id)
        .one()
    )
    return int(count or 0), float(average or 0.0)
