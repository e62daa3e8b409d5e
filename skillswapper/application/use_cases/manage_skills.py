"""Skill catalog and user skill management use cases."""

from typing import Dict, List, Optional

from skillswapper.application.interfaces.repositories import (
    SkillRepositoryInterface,
    UserRepositoryInterface,
)
from skillswapper.application.interfaces.services import TransactionServiceInterface
from skillswapper.config.logging import get_logger
from skillswapper.config.settings import settings
from skillswapper.domain.entities.user import Skill, SkillProfile
from skillswapper.domain.exceptions.resource_error import NotFoundError
from skillswapper.domain.exceptions.validation_error import ValidationError
from skillswapper.domain.value_objects.skill_input import SkillInput
from skillswapper.domain.value_objects.skill_level import ProficiencyLevel, UrgencyLevel

logger = get_logger(__name__)


def _dedupe(skills: List[SkillInput]) -> List[SkillInput]:
    """Keep the last entry per case-insensitive name."""
    unique: Dict[str, SkillInput] = {}
    for skill in skills:
        unique.pop(skill.normalized_name, None)
        unique[skill.normalized_name] = skill
    return list(unique.values())


class ManageSkillsUseCase:
    """Use case for the skills a user has and wants."""

    def __init__(
        self,
        skill_repo: SkillRepositoryInterface,
        user_repo: UserRepositoryInterface,
        transaction_service: TransactionServiceInterface,
    ):
        self.skill_repo = skill_repo
        self.user_repo = user_repo
        self.transaction_service = transaction_service

    async def list_catalog(
        self, search: Optional[str] = None, popular: bool = False, limit: int = 100
    ) -> List[Skill]:
        return await self.skill_repo.list_skills(search=search, popular=popular, limit=limit)

    async def add_have(self, user_id: int, skills: List[SkillInput]) -> SkillProfile:
        """Add skills the user can teach. Existing entries get the new level."""
        self._check_batch(skills)

        async def operation():
            for skill in _dedupe(skills):
                catalog_skill = await self.skill_repo.find_or_create(skill.name)
                await self.skill_repo.add_have(user_id, catalog_skill.id, skill.level)

        await self.transaction_service.execute_in_transaction(operation)
        logger.info("Skills added to have list", user_id=user_id, count=len(skills))
        return await self._profile(user_id)

    async def add_want(self, user_id: int, skills: List[SkillInput]) -> SkillProfile:
        """Add skills the user wants to learn. Existing entries get the new urgency."""
        self._check_batch(skills)

        async def operation():
            for skill in _dedupe(skills):
                catalog_skill = await self.skill_repo.find_or_create(skill.name)
                await self.skill_repo.add_want(user_id, catalog_skill.id, skill.level)

        await self.transaction_service.execute_in_transaction(operation)
        logger.info("Skills added to want list", user_id=user_id, count=len(skills))
        return await self._profile(user_id)

    async def remove_have(self, user_id: int, skill_id: int) -> SkillProfile:
        removed = await self.transaction_service.execute_in_transaction(
            lambda: self.skill_repo.remove_have(user_id, skill_id)
        )
        if not removed:
            raise NotFoundError("Skill in your have list", skill_id)
        logger.info("Skill removed from have list", user_id=user_id, skill_id=skill_id)
        return await self._profile(user_id)

    async def remove_want(self, user_id: int, skill_id: int) -> SkillProfile:
        removed = await self.transaction_service.execute_in_transaction(
            lambda: self.skill_repo.remove_want(user_id, skill_id)
        )
        if not removed:
            raise NotFoundError("Skill in your want list", skill_id)
        logger.info("Skill removed from want list", user_id=user_id, skill_id=skill_id)
        return await self._profile(user_id)

    async def update_proficiency(
        self, user_id: int, skill_id: int, level: ProficiencyLevel
    ) -> SkillProfile:
        updated = await self.transaction_service.execute_in_transaction(
            lambda: self.skill_repo.update_have_level(user_id, skill_id, level)
        )
        if not updated:
            raise NotFoundError("Skill in your have list", skill_id)
        return await self._profile(user_id)

    async def update_urgency(
        self, user_id: int, skill_id: int, urgency: UrgencyLevel
    ) -> SkillProfile:
        updated = await self.transaction_service.execute_in_transaction(
            lambda: self.skill_repo.update_want_urgency(user_id, skill_id, urgency)
        )
        if not updated:
            raise NotFoundError("Skill in your want list", skill_id)
        return await self._profile(user_id)

    def _check_batch(self, skills: List[SkillInput]) -> None:
        if not skills:
            raise ValidationError("At least one skill is required")
        if len(skills) > settings.SKILLS_MAX_PER_REQUEST:
            raise ValidationError(
                f"Cannot add more than {settings.SKILLS_MAX_PER_REQUEST} skills at once"
            )

    async def _profile(self, user_id: int) -> SkillProfile:
        profile = await self.user_repo.get_profile(user_id)
        if profile is None:
            raise NotFoundError("User", user_id)
        return profile
