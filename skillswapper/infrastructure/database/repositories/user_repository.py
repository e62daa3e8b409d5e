"""
User repository implementation.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased, joinedload, selectinload

from skillswapper.application.interfaces.repositories import UserRepositoryInterface
from skillswapper.config.logging import get_logger
from skillswapper.domain.entities.user import SkillProfile, User
from skillswapper.infrastructure.database.models import (
    ConnectionModel,
    NotificationModel,
    UserModel,
    UserSkillHaveModel,
    UserSkillWantModel,
)

from .mappers import profile_to_entity, user_to_entity
from .statements import LIKE_ESCAPE, contains_pattern

logger = get_logger(__name__)

PROFILE_FIELDS = ("name", "bio", "location", "profile_pic")


def _with_skills():
    return (
        selectinload(UserModel.skills_have).joinedload(UserSkillHaveModel.skill),
        selectinload(UserModel.skills_want).joinedload(UserSkillWantModel.skill),
    )


class UserRepository(UserRepositoryInterface):
    """User repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, user: User) -> User:
        """Create a new user."""
        model = UserModel(
            name=user.name,
            email=user.email.lower(),
            password_hash=user.password_hash,
            bio=user.bio,
            location=user.location,
            profile_pic=user.profile_pic,
        )

        self.db.add(model)
        await self.db.flush()
        await self.db.refresh(model)

        logger.info("User created", user_id=model.id)
        return user_to_entity(model)

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        model = await self.db.get(UserModel, user_id)
        return user_to_entity(model) if model else None

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email (case-insensitive)."""
        stmt = select(UserModel).where(func.lower(UserModel.email) == email.strip().lower())
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        return user_to_entity(model) if model else None

    async def get_profile(self, user_id: int) -> Optional[SkillProfile]:
        """Get a user together with their have and want skills."""
        stmt = (
            select(UserModel)
            .where(UserModel.id == user_id)
            .options(*_with_skills())
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        return profile_to_entity(model) if model else None

    async def update_profile(self, user_id: int, changes: Dict[str, Any]) -> Optional[User]:
        """Update editable profile fields."""
        model = await self.db.get(UserModel, user_id)
        if model is None:
            return None

        for key, value in changes.items():
            if key in PROFILE_FIELDS:
                setattr(model, key, value)

        await self.db.flush()
        await self.db.refresh(model)

        logger.info("User profile updated", user_id=user_id, fields=sorted(changes))
        return user_to_entity(model)

    async def find_reciprocal_profiles(self, user_id: int) -> List[SkillProfile]:
        """Profiles of users sharing at least one skill in each direction.

        A candidate qualifies when it has a skill the requester wants and
        wants a skill the requester has. Scoring happens in the matcher.
        """
        candidate_have = aliased(UserSkillHaveModel)
        requester_want = aliased(UserSkillWantModel)
        candidate_want = aliased(UserSkillWantModel)
        requester_have = aliased(UserSkillHaveModel)

        they_can_teach = (
            select(candidate_have.id)
            .join(requester_want, requester_want.skill_id == candidate_have.skill_id)
            .where(candidate_have.user_id == UserModel.id, requester_want.user_id == user_id)
            .exists()
        )
        they_want_to_learn = (
            select(candidate_want.id)
            .join(requester_have, requester_have.skill_id == candidate_want.skill_id)
            .where(candidate_want.user_id == UserModel.id, requester_have.user_id == user_id)
            .exists()
        )

        stmt = (
            select(UserModel)
            .where(UserModel.id != user_id, they_can_teach, they_want_to_learn)
            .options(*_with_skills())
            .order_by(UserModel.id)
        )
        result = await self.db.execute(stmt)
        models = result.scalars().unique().all()

        logger.debug("Reciprocal candidates loaded", user_id=user_id, count=len(models))
        return [profile_to_entity(model) for model in models]

    async def list_users(
        self, search: Optional[str], limit: int, offset: int
    ) -> Tuple[List[Tuple[User, int]], int]:
        """List users with their connection counts, and the total count."""
        filters = []
        if search:
            pattern = contains_pattern(search.strip().lower())
            filters.append(
                or_(
                    func.lower(UserModel.name).like(pattern, escape=LIKE_ESCAPE),
                    func.lower(UserModel.email).like(pattern, escape=LIKE_ESCAPE),
                )
            )

        connection_count = (
            select(func.count(ConnectionModel.id))
            .where(or_(ConnectionModel.user1_id == UserModel.id, ConnectionModel.user2_id == UserModel.id))
            .scalar_subquery()
        )

        stmt = (
            select(UserModel, connection_count.label("connection_count"))
            .where(*filters)
            .order_by(UserModel.created_at.desc(), UserModel.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.db.execute(stmt)
        rows = [(user_to_entity(model), int(count or 0)) for model, count in result.all()]

        total_stmt = select(func.count(UserModel.id)).where(*filters)
        total = (await self.db.execute(total_stmt)).scalar_one()

        return rows, int(total)

    async def delete(self, user_id: int) -> bool:
        """Delete a user and everything they own."""
        # Dependent rows go first; SQLite does not enforce foreign keys by default
        await self.db.execute(
            delete(ConnectionModel).where(
                or_(ConnectionModel.user1_id == user_id, ConnectionModel.user2_id == user_id)
            )
        )
        await self.db.execute(delete(UserSkillHaveModel).where(UserSkillHaveModel.user_id == user_id))
        await self.db.execute(delete(UserSkillWantModel).where(UserSkillWantModel.user_id == user_id))

        await self.db.execute(delete(NotificationModel).where(NotificationModel.user_id == user_id))
        await self.db.execute(
            update(NotificationModel)
            .where(NotificationModel.from_user_id == user_id)
            .values(from_user_id=None)
        )

        result = await self.db.execute(delete(UserModel).where(UserModel.id == user_id))
        deleted = result.rowcount > 0

        if deleted:
            logger.info("User deleted", user_id=user_id)
        return deleted

    async def count(self, created_since: Optional[datetime] = None) -> int:
        """Count users, optionally only those created since a timestamp."""
        stmt = select(func.count(UserModel.id))
        if created_since is not None:
            stmt = stmt.where(UserModel.created_at >= created_since)
        result = await self.db.execute(stmt)
        return int(result.scalar_one())
