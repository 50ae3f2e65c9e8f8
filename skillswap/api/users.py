from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from skillswap.crud import skill as skill_crud
from skillswap.crud import user as user_crud
from skillswap.database import get_db
from skillswap.models.user import User
from skillswap.schemas import User as UserSchema
from skillswap.schemas import UserProfileUpdate, UserStats, UserWithSkills
from skillswap.services import badge_service
from skillswap.utils.security import get_current_user

router = APIRouter(prefix="/users", tags=["Users"])


# ======================
# PATCH: Update own profile
# ======================
@router.patch("/me", response_model=UserSchema)
def update_profile(
    payload: UserProfileUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    # Only the fields the client sent; an explicit null clears bio or avatarUrl
    update_data = payload.model_dump(exclude_unset=True)
    return user_crud.update_user(db, current_user, **update_data)


# ======================
# GET: Public profile with skills
# ======================
@router.get("/{user_id}", response_model=UserWithSkills)
def get_public_profile(user_id: int, db: Session = Depends(get_db)):
    user = user_crud.get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    profile = UserSchema.model_validate(user).model_dump()
    profile["skills"] = skill_crud.get_skills_by_user(db, user_id)
    return profile


# ======================
# GET: Badge stats
# ======================
@router.get("/{user_id}/stats", response_model=UserStats)
def get_user_stats(user_id: int, db: Session = Depends(get_db)):
    if not user_crud.get_user(db, user_id):
        raise HTTPException(status_code=404, detail="User not found")
    return badge_service.get_user_stats(db, user_id)
