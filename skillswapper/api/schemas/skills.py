"""
Skill API schemas.

Skill entries arrive either as bare names or as objects with a level; they
are resolved into ``SkillInput`` values by the ``to_*_inputs`` helpers.
"""

from typing import List

from pydantic import BaseModel, Field

from skillswapper.domain.value_objects.skill_input import SkillInput
from skillswapper.domain.value_objects.skill_level import ProficiencyLevel, UrgencyLevel

from .auth import RawSkill


class AddSkillsSchema(BaseModel):
    """Batch of skills to add."""

    skills: List[RawSkill] = Field(default_factory=list)

    def to_have_inputs(self) -> List[SkillInput]:
        return [SkillInput.for_have(raw) for raw in self.skills]

    def to_want_inputs(self) -> List[SkillInput]:
        return [SkillInput.for_want(raw) for raw in self.skills]


class UpdateProficiencySchema(BaseModel):
    skill_id: int = Field(..., gt=0)
    proficiency_level: ProficiencyLevel


class UpdateUrgencySchema(BaseModel):
    skill_id: int = Field(..., gt=0)
    urgency_level: UrgencyLevel
