"""
Skill repository implementation.
"""

from typing import List, Optional, Tuple

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from skillswapper.application.interfaces.repositories import SkillRepositoryInterface
from skillswapper.config.logging import get_logger
from skillswapper.domain.entities.user import Skill
from skillswapper.domain.value_objects.skill_input import normalize_skill_name
from skillswapper.domain.value_objects.skill_level import ProficiencyLevel, UrgencyLevel
from skillswapper.infrastructure.database.models import (
    SkillModel,
    UserSkillHaveModel,
    UserSkillWantModel,
)

from .mappers import skill_to_entity
from .statements import LIKE_ESCAPE, contains_pattern, dialect_insert

logger = get_logger(__name__)

MAX_CATALOG_LIMIT = 500


class SkillRepository(SkillRepositoryInterface):
    """Skill catalog and user skill repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_skills(
        self, search: Optional[str] = None, popular: bool = False, limit: int = 100
    ) -> List[Skill]:
        """List catalog skills, optionally ordered by how many users list them."""
        have_count = (
            select(func.count(UserSkillHaveModel.id))
            .where(UserSkillHaveModel.skill_id == SkillModel.id)
            .scalar_subquery()
        )
        want_count = (
            select(func.count(UserSkillWantModel.id))
            .where(UserSkillWantModel.skill_id == SkillModel.id)
            .scalar_subquery()
        )
        usage = (have_count + want_count).label("usage_count")

        stmt = select(SkillModel, usage)
        if search and search.strip():
            stmt = stmt.where(
                SkillModel.normalized_name.like(
                    contains_pattern(normalize_skill_name(search)), escape=LIKE_ESCAPE
                )
            )

        if popular:
            stmt = stmt.order_by(usage.desc(), SkillModel.skill_name.asc())
        else:
            stmt = stmt.order_by(SkillModel.skill_name.asc())

        stmt = stmt.limit(max(1, min(limit, MAX_CATALOG_LIMIT)))
        result = await self.db.execute(stmt)

        return [skill_to_entity(model, int(count or 0)) for model, count in result.all()]

    async def get_by_id(self, skill_id: int) -> Optional[Skill]:
        """Get skill by ID."""
        model = await self.db.get(SkillModel, skill_id)
        return skill_to_entity(model) if model else None

    async def find_or_create(self, name: str) -> Skill:
        """Find a skill by name (case-insensitive) or create it.

        The first spelling used becomes the canonical ``skill_name``.
        """
        normalized = normalize_skill_name(name)
        stmt = (
            dialect_insert(self.db, SkillModel)
            .values(skill_name=name.strip(), normalized_name=normalized)
            .on_conflict_do_nothing(index_elements=[SkillModel.normalized_name])
        )
        result = await self.db.execute(stmt)
        if result.rowcount:
            logger.info("Skill created", skill_name=name.strip())

        model = (
            await self.db.execute(select(SkillModel).where(SkillModel.normalized_name == normalized))
        ).scalar_one()
        return skill_to_entity(model)

    async def add_have(self, user_id: int, skill_id: int, level: ProficiencyLevel) -> None:
        """Add or update a skill the user can teach."""
        insert_stmt = dialect_insert(self.db, UserSkillHaveModel).values(
            user_id=user_id, skill_id=skill_id, proficiency_level=level.value
        )
        stmt = insert_stmt.on_conflict_do_update(
            index_elements=[UserSkillHaveModel.user_id, UserSkillHaveModel.skill_id],
            set_={"proficiency_level": insert_stmt.excluded.proficiency_level},
        )
        await self.db.execute(stmt)
        logger.debug("Have skill saved", user_id=user_id, skill_id=skill_id, level=level.value)

    async def add_want(self, user_id: int, skill_id: int, urgency: UrgencyLevel) -> None:
        """Add or update a skill the user wants to learn."""
        insert_stmt = dialect_insert(self.db, UserSkillWantModel).values(
            user_id=user_id, skill_id=skill_id, urgency_level=urgency.value
        )
        stmt = insert_stmt.on_conflict_do_update(
            index_elements=[UserSkillWantModel.user_id, UserSkillWantModel.skill_id],
            set_={"urgency_level": insert_stmt.excluded.urgency_level},
        )
        await self.db.execute(stmt)
        logger.debug("Want skill saved", user_id=user_id, skill_id=skill_id, urgency=urgency.value)

    async def remove_have(self, user_id: int, skill_id: int) -> bool:
        stmt = delete(UserSkillHaveModel).where(
            UserSkillHaveModel.user_id == user_id, UserSkillHaveModel.skill_id == skill_id
        )
        result = await self.db.execute(stmt)
        return result.rowcount > 0

    async def remove_want(self, user_id: int, skill_id: int) -> bool:
        stmt = delete(UserSkillWantModel).where(
            UserSkillWantModel.user_id == user_id, UserSkillWantModel.skill_id == skill_id
        )
        result = await self.db.execute(stmt)
        return result.rowcount > 0

    async def update_have_level(
        self, user_id: int, skill_id: int, level: ProficiencyLevel
    ) -> bool:
        stmt = (
            update(UserSkillHaveModel)
            .where(UserSkillHaveModel.user_id == user_id, UserSkillHaveModel.skill_id == skill_id)
            .values(proficiency_level=level.value)
        )
        result = await self.db.execute(stmt)
        return result.rowcount > 0

    async def update_want_urgency(
        self, user_id: int, skill_id: int, urgency: UrgencyLevel
    ) -> bool:
        stmt = (
            update(UserSkillWantModel)
            .where(UserSkillWantModel.user_id == user_id, UserSkillWantModel.skill_id == skill_id)
            .values(urgency_level=urgency.value)
        )
        result = await self.db.execute(stmt)
        return result.rowcount > 0

    async def top_offered(self, limit: int = 10) -> List[Tuple[str, int]]:
        """Most frequently offered skills with their user counts."""
        user_count = func.count(UserSkillHaveModel.user_id).label("user_count")
        stmt = (
            select(SkillModel.skill_name, user_count)
            .join(UserSkillHaveModel, UserSkillHaveModel.skill_id == SkillModel.id)
            .group_by(SkillModel.id, SkillModel.skill_name)
            .order_by(user_count.desc(), SkillModel.skill_name.asc())
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        return [(name, int(count)) for name, count in result.all()]
