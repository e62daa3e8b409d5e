"""
User and skill profile entities.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from skillswapper.domain.value_objects.skill_input import normalize_skill_name
from skillswapper.domain.value_objects.skill_level import ProficiencyLevel, UrgencyLevel


@dataclass
class User:
    """User domain entity."""

    name: str
    email: str
    password_hash: str = ""
    id: Optional[int] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    profile_pic: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Initialize timestamps."""
        if not self.created_at:
            self.created_at = datetime.now(timezone.utc)
        if not self.updated_at:
            self.updated_at = self.created_at

    def public_summary(self) -> Dict[str, Any]:
        """Fields safe to show to other users."""
        return {
            "id": self.id,
            "name": self.name,
            "bio": self.bio,
            "location": self.location,
            "profile_pic": self.profile_pic,
            "created_at": self.created_at,
        }


@dataclass
class Skill:
    """Catalog skill. Created lazily on first use, never deleted."""

    skill_name: str
    id: Optional[int] = None
    category: Optional[str] = None
    created_at: Optional[datetime] = None
    user_count: int = 0

    @property
    def normalized_name(self) -> str:
        return normalize_skill_name(self.skill_name)


@dataclass
class HaveSkill:
    """A skill a user can teach."""

    skill_id: int
    skill_name: str
    proficiency_level: ProficiencyLevel = ProficiencyLevel.INTERMEDIATE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.skill_id,
            "skill_name": self.skill_name,
            "proficiency_level": self.proficiency_level.value,
        }


@dataclass
class WantSkill:
    """A skill a user wants to learn."""

    skill_id: int
    skill_name: str
    urgency_level: UrgencyLevel = UrgencyLevel.MEDIUM

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.skill_id,
            "skill_name": self.skill_name,
            "urgency_level": self.urgency_level.value,
        }


@dataclass
class SkillProfile:
    """A user together with the skills they have and want."""

    user: User
    skills_have: List[HaveSkill] = field(default_factory=list)
    skills_want: List[WantSkill] = field(default_factory=list)

    @property
    def user_id(self) -> Optional[int]:
        return self.user.id

    def have_by_name(self) -> Dict[str, HaveSkill]:
        """Have-skills keyed by normalized name."""
        return {normalize_skill_name(s.skill_name): s for s in self.skills_have}

    def want_by_name(self) -> Dict[str, WantSkill]:
        """Want-skills keyed by normalized name."""
        return {normalize_skill_name(s.skill_name): s for s in self.skills_want}

    def to_dict(self, include_email: bool = False) -> Dict[str, Any]:
        data = self.user.public_summary()
        if include_email:
            data["email"] = self.user.email
            data["updated_at"] = self.user.updated_at
        data["skills_have"] = [s.to_dict() for s in self.skills_have]
        data["skills_want"] = [s.to_dict() for s in self.skills_want]
        return data
