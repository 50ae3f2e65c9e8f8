# skillswap/schemas/__init__.py

from .common import APIModel, MessageResponse

# User schemas
from .user import (
    User,
    UserWithSkills,
    UserProfileUpdate,
    UserStats,
    AdminUserUpdate,
)

# Auth schemas
from .auth import RegisterRequest, LoginRequest, AuthResponse

# Skill schemas
from .skill import Skill, SkillCreate
from .search import SkillSearchResult

# Session schemas
from .session import Session, SessionRequest, SessionStatusUpdate, SessionWithDetails

# Review schemas
from .review import Review, ReviewCreate

# Admin schemas
from .admin import CountBucket, PlatformStats

__all__ = [
    "APIModel",
    "MessageResponse",
    "User",
    "UserWithSkills",
    "UserProfileUpdate",
    "UserStats",
    "AdminUserUpdate",
    "RegisterRequest",
    "LoginRequest",
    "AuthResponse",
    "Skill",
    "SkillCreate",
    "SkillSearchResult",
    "Session",
    "SessionRequest",
    "SessionStatusUpdate",
    "SessionWithDetails",
    "Review",
    "ReviewCreate",
    "CountBucket",
    "PlatformStats",
]
