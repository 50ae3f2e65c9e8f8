from sqlalchemy import Column, Integer, String, Text, Boolean, TIMESTAMP, func
from sqlalchemy.orm import relationship
from skillswap.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(20), unique=True, index=True, nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    full_name = Column(String(100), nullable=False)
    bio = Column(Text)
    avatar_url = Column(String(500))
    is_admin = Column(Boolean, default=False, nullable=False)
    created_at = Column(TIMESTAMP, server_default=func.now(), nullable=False)

    # Deleting a user removes everything they own or took part in.
    skills = relationship("Skill", back_populates="user", cascade="all, delete-orphan")
    sessions_as_requester = relationship(
        "Session",
        foreign_keys="Session.requester_id",
        back_populates="requester",
        cascade="all",
    )
    sessions_as_provider = relationship(
        "Session",
        foreign_keys="Session.provider_id",
        back_populates="provider",
        cascade="all",
    )
    reviews_given = relationship(
        "Review",
        foreign_keys="Review.reviewer_id",
        back_populates="reviewer",
        cascade="all",
    )
    reviews_received = relationship(
        "Review",
        foreign_keys="Review.reviewee_id",
        back_populates="reviewee",
        cascade="all",
    )
    auth_sessions = relationship("AuthSession", back_populates="user", cascade="all, delete-orphan")
