from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from .common import APIModel
from .skill import Skill


# ======================
# USER RESPONSE SCHEMAS
# ======================

class User(APIModel):
    """Public view of a user. The password hash is never part of it."""
    id: int
    username: str
    email: str
    full_name: str
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    is_admin: bool
    created_at: datetime


class UserWithSkills(User):
    skills: List[Skill] = []


# ======================
# PROFILE UPDATE
# ======================

class UserProfileUpdate(APIModel):
    full_name: Optional[str] = Field(None, min_length=2)
    bio: Optional[str] = None
    avatar_url: Optional[str] = None

    @field_validator("full_name")
    @classmethod
    def full_name_not_null(cls, value: Optional[str]) -> str:
        if value is None:
            raise ValueError("Full name cannot be empty")
        return value


# ======================
# BADGES / STATS
# ======================

class UserStats(APIModel):
    completed_sessions: int
    offering_skills: int
    seeking_skills: int
    average_rating: float
    review_count: int
    badges: List[str]


# ======================
# ADMIN
# ======================

class AdminUserUpdate(APIModel):
    is_admin: bool
