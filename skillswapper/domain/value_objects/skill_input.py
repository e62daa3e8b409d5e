"""
Skill input value object.

Clients may send a skill either as a bare name or as an object carrying a
level. Both shapes are resolved here into one canonical form before any
business logic sees them.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Union

from skillswapper.domain.exceptions.validation_error import (
    InvalidLevelError,
    InvalidSkillError,
)
from skillswapper.domain.value_objects.skill_level import ProficiencyLevel, UrgencyLevel

MAX_SKILL_NAME_LENGTH = 100

SkillLevel = Union[ProficiencyLevel, UrgencyLevel]


def normalize_skill_name(name: str) -> str:
    """Case-insensitive key for a skill name."""
    return " ".join(name.split()).lower()


@dataclass(frozen=True)
class SkillInput:
    """A skill name paired with a proficiency (have) or urgency (want) level."""

    name: str
    level: SkillLevel

    def __post_init__(self):
        cleaned = " ".join(self.name.split()) if isinstance(self.name, str) else ""
        if not cleaned:
            raise InvalidSkillError(str(self.name), "name must not be empty")
        if len(cleaned) > MAX_SKILL_NAME_LENGTH:
            raise InvalidSkillError(
                cleaned[:20] + "...",
                f"name must be at most {MAX_SKILL_NAME_LENGTH} characters",
            )
        object.__setattr__(self, "name", cleaned)

    @property
    def normalized_name(self) -> str:
        return normalize_skill_name(self.name)

    @classmethod
    def for_have(cls, raw: Union[str, Mapping[str, Any]]) -> "SkillInput":
        """Resolve a skill the user can teach. Level defaults to intermediate."""
        return cls._resolve(raw, ProficiencyLevel, ProficiencyLevel.INTERMEDIATE, "proficiency")

    @classmethod
    def for_want(cls, raw: Union[str, Mapping[str, Any]]) -> "SkillInput":
        """Resolve a skill the user wants to learn. Urgency defaults to medium."""
        return cls._resolve(raw, UrgencyLevel, UrgencyLevel.MEDIUM, "urgency")

    @classmethod
    def _resolve(cls, raw, level_type, default_level, kind: str) -> "SkillInput":
        if isinstance(raw, str):
            return cls(name=raw, level=default_level)

        if isinstance(raw, Mapping):
            name = raw.get("name")
            if not isinstance(name, str):
                raise InvalidSkillError(str(name), "name must be a string")
            # Objects may carry the level under "level" or under the kind-specific key
            level_value = raw.get("level") or raw.get(kind) or raw.get(f"{kind}_level")
            if level_value is None:
                return cls(name=name, level=default_level)
            try:
                level = level_type(str(level_value).lower())
            except ValueError:
                raise InvalidLevelError(kind, str(level_value), level_type.values())
            return cls(name=name, level=level)

        raise InvalidSkillError(str(raw), "expected a string or an object with a name")
