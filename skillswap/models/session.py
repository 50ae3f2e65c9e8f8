# skillswap/models/session.py
import enum

from sqlalchemy import Column, Integer, String, Text, ForeignKey, TIMESTAMP, func
from sqlalchemy.orm import relationship
from skillswap.database import Base


class SessionStatus(str, enum.Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Session(Base):
    """A learning-session request between a requester and a skill provider."""

    __tablename__ = "sessions"

    id = Column(Integer, primary_key=True, index=True)
    requester_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    provider_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    skill_id = Column(Integer, ForeignKey("skills.id", ondelete="CASCADE"), nullable=False)
    status = Column(String(20), nullable=False, default=SessionStatus.PENDING.value, index=True)
    scheduled_at = Column(TIMESTAMP)
    message = Column(Text)
    created_at = Column(TIMESTAMP, server_default=func.now(), nullable=False)

    # Relationships
    requester = relationship("User", foreign_keys=[requester_id], back_populates="sessions_as_requester")
    provider = relationship("User", foreign_keys=[provider_id], back_populates="sessions_as_provider")
    skill = relationship("Skill", back_populates="sessions")
    reviews = relationship("Review", back_populates="session", cascade="all")
