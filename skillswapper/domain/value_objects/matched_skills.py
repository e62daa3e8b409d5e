"""
Matched skills snapshot value object.

A snapshot records, from the initiator's point of view, which skills each
side of a connection can teach the other at proposal time. It is stored as
JSON on the connection record and converted only at that boundary.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Tuple


@dataclass(frozen=True)
class SkillSnapshot:
    """A single skill inside a snapshot."""

    name: str
    proficiency: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "proficiency": self.proficiency}

    @classmethod
    def from_dict(cls, data: Any) -> "SkillSnapshot":
        if isinstance(data, str):
            return cls(name=data)
        return cls(name=data.get("name", ""), proficiency=data.get("proficiency"))


def _sorted_skills(skills: Iterable[SkillSnapshot]) -> Tuple[SkillSnapshot, ...]:
    return tuple(sorted(skills, key=lambda s: (s.name.lower(), s.name)))


@dataclass(frozen=True)
class MatchedSkills:
    """Skills exchanged between initiator and target of a connection."""

    skills_you_can_teach_them: Tuple[SkillSnapshot, ...] = field(default_factory=tuple)
    skills_they_can_teach_you: Tuple[SkillSnapshot, ...] = field(default_factory=tuple)
    note: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(
            self, "skills_you_can_teach_them", _sorted_skills(self.skills_you_can_teach_them)
        )
        object.__setattr__(
            self, "skills_they_can_teach_you", _sorted_skills(self.skills_they_can_teach_you)
        )

    @property
    def match_score(self) -> int:
        return len(self.skills_you_can_teach_them) + len(self.skills_they_can_teach_you)

    def reversed(self) -> "MatchedSkills":
        """The same snapshot seen from the other party."""
        return MatchedSkills(
            skills_you_can_teach_them=self.skills_they_can_teach_you,
            skills_they_can_teach_you=self.skills_you_can_teach_them,
            note=self.note,
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "skillsYouCanTeachThem": [s.to_dict() for s in self.skills_you_can_teach_them],
            "skillsTheyCanTeachYou": [s.to_dict() for s in self.skills_they_can_teach_you],
            "matchScore": self.match_score,
        }
        if self.note:
            data["note"] = self.note
        return data

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "MatchedSkills":
        if not data:
            return cls()
        return cls(
            skills_you_can_teach_them=tuple(
                SkillSnapshot.from_dict(s) for s in data.get("skillsYouCanTeachThem") or []
            ),
            skills_they_can_teach_you=tuple(
                SkillSnapshot.from_dict(s) for s in data.get("skillsTheyCanTeachYou") or []
            ),
            note=data.get("note"),
        )
