# skillswap/models/__init__.py
# Import models in dependency order
from .user import User
from .skill import Skill, SkillType, ExperienceLevel
from .session import Session, SessionStatus
from .review import Review
from .auth_session import AuthSession

__all__ = [
    "User",
    "Skill",
    "SkillType",
    "ExperienceLevel",
    "Session",
    "SessionStatus",
    "Review",
    "AuthSession",
]
