"""
Skill catalog and user skill SQLAlchemy models.
"""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from .base import Base, BaseModel, utcnow


class SkillModel(BaseModel):
    """Skill catalog database model."""

    __tablename__ = "skills"

    skill_name = Column(String(100), nullable=False)
    normalized_name = Column(String(100), nullable=False, unique=True, index=True)
    category = Column(String(50), nullable=True)

    def __repr__(self) -> str:
        return f"<Skill(id={self.id}, name={self.skill_name})>"


class UserSkillHaveModel(Base):
    """Skill a user can teach."""

    __tablename__ = "user_skills_have"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    skill_id = Column(Integer, ForeignKey("skills.id", ondelete="CASCADE"), nullable=False)
    proficiency_level = Column(String(20), nullable=False, default="intermediate")  # beginner, intermediate, advanced, expert
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Relationships
    user = relationship("UserModel", back_populates="skills_have")
    skill = relationship("SkillModel", lazy="joined")

    __table_args__ = (
        UniqueConstraint("user_id", "skill_id", name="uq_user_skills_have_user_skill"),
        Index("idx_user_skills_have_skill", "skill_id"),
    )


class UserSkillWantModel(Base):
    """Skill a user wants to learn."""

    __tablename__ = "user_skills_want"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    skill_id = Column(Integer, ForeignKey("skills.id", ondelete="CASCADE"), nullable=False)
    urgency_level = Column(String(20), nullable=False, default="medium")  # low, medium, high
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Relationships
    user = relationship("UserModel", back_populates="skills_want")
    skill = relationship("SkillModel", lazy="joined")

    __table_args__ = (
        UniqueConstraint("user_id", "skill_id", name="uq_user_skills_want_user_skill"),
        Index("idx_user_skills_want_skill", "skill_id"),
    )
