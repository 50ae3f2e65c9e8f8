# skillswap/models/auth_session.py
from sqlalchemy import Column, Integer, String, ForeignKey, TIMESTAMP, func
from sqlalchemy.orm import relationship
from skillswap.database import Base


class AuthSession(Base):
    """Server-side login state, keyed by the token carried in the session cookie."""

    __tablename__ = "auth_sessions"

    token = Column(String(64), primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(TIMESTAMP, server_default=func.now(), nullable=False)
    expires_at = Column(TIMESTAMP, nullable=False, index=True)

    user = relationship("User", back_populates="auth_sessions")
