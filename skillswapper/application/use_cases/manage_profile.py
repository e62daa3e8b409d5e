"""User profile use case."""

from typing import Any, Dict

from skillswapper.application.interfaces.repositories import UserRepositoryInterface
from skillswapper.application.interfaces.services import TransactionServiceInterface
from skillswapper.config.logging import get_logger
from skillswapper.domain.entities.user import SkillProfile
from skillswapper.domain.exceptions.resource_error import NotFoundError
from skillswapper.domain.exceptions.validation_error import ValidationError

logger = get_logger(__name__)

EDITABLE_FIELDS = ("name", "bio", "location", "profile_pic")


class ManageProfileUseCase:
    """Use case for reading and editing user profiles."""

    def __init__(
        self,
        user_repo: UserRepositoryInterface,
        transaction_service: TransactionServiceInterface,
    ):
        self.user_repo = user_repo
        self.transaction_service = transaction_service

    async def get(self, user_id: int) -> SkillProfile:
        profile = await self.user_repo.get_profile(user_id)
        if profile is None:
            raise NotFoundError("User", user_id)
        return profile

    async def update(self, user_id: int, changes: Dict[str, Any]) -> SkillProfile:
        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValidationError(f"Cannot update fields: {', '.join(sorted(unknown))}")
        if not changes:
            return await self.get(user_id)

        user = await self.transaction_service.execute_in_transaction(
            lambda: self.user_repo.update_profile(user_id, changes)
        )
        if user is None:
            raise NotFoundError("User", user_id)

        logger.info("Profile updated", user_id=user_id, fields=sorted(changes))
        return await self.get(user_id)
