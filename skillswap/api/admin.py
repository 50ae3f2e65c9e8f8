# skillswap/api/admin.py
"""
Admin endpoints: platform statistics and user management.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from skillswap.crud import user as user_crud
from skillswap.database import get_db
from skillswap.models.user import User
from skillswap.schemas import AdminUserUpdate, MessageResponse, PlatformStats
from skillswap.schemas import User as UserSchema
from skillswap.services import stats_service
from skillswap.utils.security import require_admin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"])


# ─────────────────────────────────────────
# GET /admin/stats  - Dashboard overview
# ─────────────────────────────────────────
@router.get("/stats", response_model=PlatformStats)
def get_dashboard_stats(
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    return stats_service.get_platform_stats(db)


# ─────────────────────────────────────────
# GET /admin/users  - All users, newest first
# ─────────────────────────────────────────
@router.get("/users", response_model=List[UserSchema])
def get_all_users(
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    return user_crud.list_users(db)


# ─────────────────────────────────────────
# PATCH /admin/users/{user_id}  - Toggle admin role
# ─────────────────────────────────────────
@router.patch("/users/{user_id}", response_model=UserSchema)
def update_user_role(
    user_id: int,
    payload: AdminUserUpdate,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    user = user_crud.get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    user = user_crud.update_user(db, user, is_admin=payload.is_admin)
    logger.info("Admin %s set is_admin=%s on user %s", admin.id, user.is_admin, user.id)
    return user


# ─────────────────────────────────────────
# DELETE /admin/users/{user_id}
# ─────────────────────────────────────────
@router.delete("/users/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: int,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    if user_id == admin.id:
        raise HTTPException(status_code=400, detail="Cannot delete yourself")

    user = user_crud.get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    user_crud.delete_user(db, user)
    logger.info("Admin %s deleted user %s", admin.id, user_id)
    return {"message": "User deleted"}
