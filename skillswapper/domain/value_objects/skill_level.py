"""
Skill level value objects.
"""

from enum import Enum
from typing import Optional


class ProficiencyLevel(str, Enum):
    """How well a user knows a skill they can teach."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"

    @property
    def rank(self) -> int:
        """Numeric rank used for level balancing (beginner=1 .. expert=4)."""
        return _PROFICIENCY_RANKS[self]

    @classmethod
    def rank_of(cls, value: Optional[str]) -> int:
        """Rank for a raw stored value, intermediate when unknown."""
        try:
            return cls(value).rank
        except ValueError:
            return cls.INTERMEDIATE.rank

    @classmethod
    def values(cls) -> list:
        return [level.value for level in cls]


_PROFICIENCY_RANKS = {
    ProficiencyLevel.BEGINNER: 1,
    ProficiencyLevel.INTERMEDIATE: 2,
    ProficiencyLevel.ADVANCED: 3,
    ProficiencyLevel.EXPERT: 4,
}


class UrgencyLevel(str, Enum):
    """How eager a user is to learn a skill they want."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def values(cls) -> list:
        return [level.value for level in cls]
