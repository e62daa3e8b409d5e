"""
User SQLAlchemy model.
"""

from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship

from .base import BaseModel


class UserModel(BaseModel):
    """User database model."""

    __tablename__ = "users"

    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    bio = Column(Text, nullable=True)
    location = Column(String(100), nullable=True, index=True)
    profile_pic = Column(String(500), nullable=True)

    # Relationships
    skills_have = relationship(
        "UserSkillHaveModel", back_populates="user", cascade="all, delete-orphan"
    )
    skills_want = relationship(
        "UserSkillWantModel", back_populates="user", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
