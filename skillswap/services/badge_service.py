# skillswap/services/badge_service.py
"""Achievement badges. Never stored; always derived from current counts."""

from typing import Any, Dict, List

from sqlalchemy.orm import Session

from skillswap.crud import review as review_crud
from skillswap.crud import session as session_crud
from skillswap.crud import skill as skill_crud
from skillswap.models.skill import SkillType

TOP_TUTOR = "top_tutor"
SKILL_MASTER = "skill_master"
GETTING_STARTED = "getting_started"
HIGHLY_RATED = "highly_rated"

TOP_TUTOR_MIN_COMPLETED = 5
SKILL_MASTER_MIN_OFFERING = 3
HIGHLY_RATED_MIN_AVERAGE = 4.5
HIGHLY_RATED_MIN_REVIEWS = 3


def derive_badges(
    *,
    completed_sessions: int,
    offering_skills: int,
    total_skills: int,
    average_rating: float,
    review_count: int,
) -> List[str]:
    badges = []
    if completed_sessions >= TOP_TUTOR_MIN_COMPLETED:
        badges.append(TOP_TUTOR)
    if offering_skills >= SKILL_MASTER_MIN_OFFERING:
        badges.append(SKILL_MASTER)
    if total_skills >= 1:
        badges.append(GETTING_STARTED)
    if average_rating >= HIGHLY_RATED_MIN_AVERAGE and review_count >= HIGHLY_RATED_MIN_REVIEWS:
        badges.append(HIGHLY_RATED)
    return badges


def get_user_stats(db: Session, user_id: int) -> Dict[str, Any]:
    skills = skill_crud.get_skills_by_user(db, user_id)
    offering = sum(1 for s in skills if s.type == SkillType.OFFERING.value)
    seeking = sum(1 for s in skills if s.type == SkillType.SEEKING.value)
    completed = session_crud.count_completed_for_user(db, user_id)
    review_count, average_rating = review_crud.get_rating_summary(db, user_id)

    return {
        "completed_sessions": completed,
        "offering_skills": offering,
        "seeking_skills": seeking,
        "average_rating": average_rating,
        "review_count": review_count,
        "badges": derive_badges(
            completed_sessions=completed,
            offering_skills=offering,
            total_skills=len(skills),
            average_rating=average_rating,
            review_count=review_count,
        ),
    }
