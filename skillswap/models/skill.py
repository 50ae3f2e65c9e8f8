# skillswap/models/skill.py
import enum

from sqlalchemy import Column, Integer, String, Text, ForeignKey, TIMESTAMP, func
from sqlalchemy.orm import relationship
from skillswap.database import Base


class SkillType(str, enum.Enum):
    OFFERING = "offering"
    SEEKING = "seeking"


class ExperienceLevel(str, enum.Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Skill(Base):
    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
        nullable=False
    )
    name = Column(String(100), nullable=False, index=True)
    description = Column(Text)
    category = Column(String(50), nullable=False, index=True)
    type = Column(String(20), nullable=False)  # 'offering' or 'seeking'
    experience_level = Column(String(20))
    created_at = Column(TIMESTAMP, server_default=func.now(), nullable=False)

    user = relationship("User", back_populates="skills")
    sessions = relationship("Session", back_populates="skill", cascade="all")
