"""
Conversions between database models and domain entities.
"""

from typing import Optional

from skillswapper.domain.entities.connection import Connection
from skillswapper.domain.entities.notification import Notification
from skillswapper.domain.entities.user import HaveSkill, Skill, SkillProfile, User, WantSkill
from skillswapper.domain.value_objects.connection_status import ConnectionStatus
from skillswapper.domain.value_objects.matched_skills import MatchedSkills
from skillswapper.domain.value_objects.notification_type import NotificationType
from skillswapper.domain.value_objects.skill_level import ProficiencyLevel, UrgencyLevel
from skillswapper.infrastructure.database.models import (
    ConnectionModel,
    NotificationModel,
    SkillModel,
    UserModel,
)


def user_to_entity(model: UserModel) -> User:
    return User(
        id=model.id,
        name=model.name,
        email=model.email,
        password_hash=model.password_hash,
        bio=model.bio,
        location=model.location,
        profile_pic=model.profile_pic,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def skill_to_entity(model: SkillModel, user_count: int = 0) -> Skill:
    return Skill(
        id=model.id,
        skill_name=model.skill_name,
        category=model.category,
        created_at=model.created_at,
        user_count=user_count,
    )


def profile_to_entity(model: UserModel) -> SkillProfile:
    """Build a profile from a user loaded with both skill collections."""
    skills_have = [
        HaveSkill(
            skill_id=row.skill_id,
            skill_name=row.skill.skill_name,
            proficiency_level=ProficiencyLevel(row.proficiency_level),
        )
        for row in model.skills_have
    ]
    skills_want = [
        WantSkill(
            skill_id=row.skill_id,
            skill_name=row.skill.skill_name,
            urgency_level=UrgencyLevel(row.urgency_level),
        )
        for row in model.skills_want
    ]
    skills_have.sort(key=lambda s: (s.skill_name.lower(), s.skill_id))
    skills_want.sort(key=lambda s: (s.skill_name.lower(), s.skill_id))
    return SkillProfile(user=user_to_entity(model), skills_have=skills_have, skills_want=skills_want)


def connection_to_entity(model: ConnectionModel) -> Connection:
    return Connection(
        id=model.id,
        user1_id=model.user1_id,
        user2_id=model.user2_id,
        matched_skills=MatchedSkills.from_dict(model.matched_skills),
        status=ConnectionStatus(model.status),
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def notification_to_entity(model: NotificationModel) -> Notification:
    sender: Optional[UserModel] = model.from_user
    return Notification(
        id=model.id,
        user_id=model.user_id,
        from_user_id=model.from_user_id,
        type=NotificationType(model.type),
        title=model.title,
        message=model.message,
        data=model.data or {},
        is_read=bool(model.is_read),
        created_at=model.created_at,
        read_at=model.read_at,
        from_user_name=sender.name if sender else None,
        from_user_pic=sender.profile_pic if sender else None,
    )
