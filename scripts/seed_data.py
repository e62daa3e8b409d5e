#!/usr/bin/env python3
"""
Seed database with demo data for development.
"""

import asyncio

from sqlalchemy import func, select

from skillswapper.config.database import close_database_connections, get_async_session_factory
from skillswapper.config.logging import configure_logging, get_logger
from skillswapper.domain.entities.user import User
from skillswapper.domain.value_objects.skill_level import ProficiencyLevel, UrgencyLevel
from skillswapper.infrastructure.database.models import UserModel
from skillswapper.infrastructure.database.repositories import (
    SkillRepository,
    TransactionService,
    UserRepository,
)
from skillswapper.infrastructure.security.passwords import hash_password

configure_logging()
logger = get_logger(__name__)

DEMO_PASSWORD = "Password123!"

CATALOG = [
    "Python", "JavaScript", "React", "Node.js", "SQL", "Machine Learning",
    "Data Analysis", "Graphic Design", "Photography", "Video Editing",
    "Guitar", "Piano", "Spanish", "French", "Cooking", "Public Speaking",
    "Writing", "Marketing", "Yoga", "Drawing",
]

DEMO_USERS = [
    {
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "location": "San Francisco, CA",
        "bio": "Software engineer who loves teaching Python and wants to pick up music.",
        "have": [("Python", ProficiencyLevel.EXPERT), ("SQL", ProficiencyLevel.ADVANCED)],
        "want": [("Guitar", UrgencyLevel.HIGH), ("Spanish", UrgencyLevel.MEDIUM)],
    },
    {
        "name": "Bob Smith",
        "email": "bob@example.com",
        "location": "San Francisco, CA",
        "bio": "Session guitarist learning to code.",
        "have": [("Guitar", ProficiencyLevel.EXPERT), ("Piano", ProficiencyLevel.INTERMEDIATE)],
        "want": [("Python", UrgencyLevel.HIGH), ("JavaScript", UrgencyLevel.LOW)],
    },
    {
        "name": "Carla Gomez",
        "email": "carla@example.com",
        "location": "Austin, TX",
        "bio": "Native Spanish speaker and food lover.",
        "have": [("Spanish", ProficiencyLevel.EXPERT), ("Cooking", ProficiencyLevel.ADVANCED)],
        "want": [("Python", UrgencyLevel.MEDIUM), ("Photography", UrgencyLevel.LOW)],
    },
    {
        "name": "David Lee",
        "email": "david@example.com",
        "location": "New York, NY",
        "bio": "Photographer and video editor.",
        "have": [("Photography", ProficiencyLevel.ADVANCED), ("Video Editing", ProficiencyLevel.ADVANCED)],
        "want": [("Cooking", UrgencyLevel.MEDIUM), ("Marketing", UrgencyLevel.HIGH)],
    },
]


async def seed_database() -> None:
    """Seed database with demo data."""
    session_factory = get_async_session_factory()

    async with session_factory() as session:
        existing = (await session.execute(select(func.count(UserModel.id)))).scalar_one()
        if existing > 0:
            logger.info("Database already has data, skipping seed")
            return

        users = UserRepository(session)
        skills = SkillRepository(session)
        transactions = TransactionService(session)

        async def operation() -> None:
            for name in CATALOG:
                await skills.find_or_create(name)

            for entry in DEMO_USERS:
                user = await users.create(
                    User(
                        name=entry["name"],
                        email=entry["email"],
                        password_hash=hash_password(DEMO_PASSWORD),
                        bio=entry["bio"],
                        location=entry["location"],
                    )
                )
                for skill_name, level in entry["have"]:
                    skill = await skills.find_or_create(skill_name)
                    await skills.add_have(user.id, skill.id, level)
                for skill_name, urgency in entry["want"]:
                    skill = await skills.find_or_create(skill_name)
                    await skills.add_want(user.id, skill.id, urgency)

        await transactions.execute_in_transaction(operation)

    logger.info(
        "Database seeded",
        skills=len(CATALOG),
        users=len(DEMO_USERS),
        demo_password=DEMO_PASSWORD,
    )


async def main() -> None:
    try:
        await seed_database()
    finally:
        await close_database_connections()


if __name__ == "__main__":
    asyncio.run(main())
