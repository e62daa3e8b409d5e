"""
Builders for domain objects used across tests.
"""

from skillswapper.domain.entities.user import HaveSkill, SkillProfile, User, WantSkill
from skillswapper.domain.value_objects.skill_level import ProficiencyLevel, UrgencyLevel


def make_profile(
    user_id: int,
    name: str,
    have=(),
    want=(),
    location=None,
    bio=None,
) -> SkillProfile:
    """Build a skill profile from (name, level) pairs or bare names."""
    skills_have = []
    for index, entry in enumerate(have):
        skill_name, level = entry if isinstance(entry, tuple) else (entry, "intermediate")
        skills_have.append(
            HaveSkill(
                skill_id=user_id * 100 + index,
                skill_name=skill_name,
                proficiency_level=ProficiencyLevel(level),
            )
        )
    skills_want = []
    for index, entry in enumerate(want):
        skill_name, urgency = entry if isinstance(entry, tuple) else (entry, "medium")
        skills_want.append(
            WantSkill(
                skill_id=user_id * 100 + 50 + index,
                skill_name=skill_name,
                urgency_level=UrgencyLevel(urgency),
            )
        )
    return SkillProfile(
        user=User(
            id=user_id,
            name=name,
            email=f"{name.split()[0].lower()}@example.com",
            location=location,
            bio=bio,
        ),
        skills_have=skills_have,
        skills_want=skills_want,
    )
