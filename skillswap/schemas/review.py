# skillswap/schemas/review.py
from datetime import datetime
from typing import Optional

from pydantic import StrictInt

from .common import APIModel


class ReviewCreate(APIModel):
    session_id: int
    reviewee_id: int
    # Strict: JSON true or "5" are not ratings. Range is enforced by the review service.
    rating: StrictInt
    comment: Optional[str] = None


class Review(APIModel):
    id: int
    session_id: int
    reviewer_id: int
    reviewee_id: int
    rating: int
    comment: Optional[str] = None
    created_at: datetime
