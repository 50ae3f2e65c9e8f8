import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from skillswap.crud import skill as skill_crud
from skillswap.database import get_db
from skillswap.models.user import User
from skillswap.schemas import MessageResponse, Skill, SkillCreate
from skillswap.utils.security import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/skills", tags=["Skills"])


# ======================
# GET: My skills
# ======================
@router.get("/my", response_model=List[Skill])
def get_my_skills(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return skill_crud.get_skills_by_user(db, current_user.id)


# ======================
# POST: Add a skill
# ======================
@router.post("", response_model=Skill, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=Skill, status_code=status.HTTP_201_CREATED, include_in_schema=False)
def add_skill(
    payload: SkillCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    skill = skill_crud.create_skill(
        db,
        user_id=current_user.id,
        name=payload.name,
        description=payload.description,
        category=payload.category,
        skill_type=payload.type.value,
        experience_level=payload.experience_level.value if payload.experience_level else None,
    )
    logger.info("User %s added %s skill %s", current_user.id, skill.type, skill.id)
    return skill


# ======================
# DELETE: Remove own skill
# ======================
@router.delete("/{skill_id}", response_model=MessageResponse)
def remove_skill(
    skill_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    skill = skill_crud.get_skill(db, skill_id)
    if not skill:
        raise HTTPException(404, "Skill not found")
    if skill.user_id != current_user.id:
        raise HTTPException(403, "Not authorized")

    skill_crud.delete_skill(db, skill)
    return {"message": "Skill deleted"}
