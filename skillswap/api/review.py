# skillswap/api/review.py
"""
Review & Rating API Router

Endpoints:
- POST /reviews - Submit a review for a completed session
- GET /reviews/{user_id} - Reviews a user has received
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from skillswap.crud import review as review_crud
from skillswap.database import get_db
from skillswap.models.user import User
from skillswap.schemas import Review, ReviewCreate
from skillswap.services import review_service
from skillswap.services.review_service import InvalidReview, ReviewForbidden
from skillswap.utils.security import get_current_user

router = APIRouter(prefix="/reviews", tags=["reviews"])


# ======================
# SUBMIT REVIEW
# ======================
@router.post("", response_model=Review, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=Review, status_code=status.HTTP_201_CREATED, include_in_schema=False)
def submit_review(
    review: ReviewCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Submit a review for a completed session.

    Requirements:
    - Session must be completed
    - Caller must have taken part in the session
    - Reviewee must be the other participant
    - Rating must be 1-5
    """
    try:
        return review_service.submit_review(
            db,
            session_id=review.session_id,
            reviewer_id=current_user.id,
            reviewee_id=review.reviewee_id,
            rating=review.rating,
            comment=review.comment,
        )
    except ReviewForbidden as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except InvalidReview as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


# ======================
# GET REVIEWS RECEIVED BY A USER
# ======================
@router.get("/{user_id}", response_model=List[Review])
def get_user_reviews(user_id: int, db: Session = Depends(get_db)):
    return review_crud.get_reviews_for_user(db, user_id)
