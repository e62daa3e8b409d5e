"""
Integration tests for the SQLAlchemy repositories against SQLite.
"""

import asyncio

import pytest
import pytest_asyncio

from skillswapper.domain.entities.connection import Connection
from skillswapper.domain.entities.notification import Notification
from skillswapper.domain.entities.user import User
from skillswapper.domain.value_objects.connection_status import ConnectionStatus
from skillswapper.domain.value_objects.matched_skills import MatchedSkills, SkillSnapshot
from skillswapper.domain.value_objects.notification_type import NotificationType
from skillswapper.domain.value_objects.skill_level import ProficiencyLevel, UrgencyLevel
from skillswapper.infrastructure.database.repositories import (
    ConnectionRepository,
    NotificationRepository,
    SkillRepository,
    TransactionService,
    UserRepository,
)


@pytest_asyncio.fixture
async def repos(db_session):
    return {
        "users": UserRepository(db_session),
        "skills": SkillRepository(db_session),
        "connections": ConnectionRepository(db_session),
        "notifications": NotificationRepository(db_session),
    }


async def create_user(repos, name, have=(), want=(), location=None):
    user = await repos["users"].create(
        User(
            name=name,
            email=f"{name.lower()}@example.com",
            password_hash="x",
            location=location,
        )
    )
    for skill_name in have:
        skill = await repos["skills"].find_or_create(skill_name)
        await repos["skills"].add_have(user.id, skill.id, ProficiencyLevel.INTERMEDIATE)
    for skill_name in want:
        skill = await repos["skills"].find_or_create(skill_name)
        await repos["skills"].add_want(user.id, skill.id, UrgencyLevel.MEDIUM)
    return user


def snapshot(teach, learn, note=None):
    return MatchedSkills(
        skills_you_can_teach_them=tuple(SkillSnapshot(name) for name in teach),
        skills_they_can_teach_you=tuple(SkillSnapshot(name) for name in learn),
        note=note,
    )


class TestUserRepository:
    """Test cases for UserRepository."""

    @pytest.mark.asyncio
    async def test_email_lookup_is_case_insensitive(self, repos):
        user = await create_user(repos, "Alice")

        found = await repos["users"].get_by_email("ALICE@Example.com")

        assert found is not None
        assert found.id == user.id

    @pytest.mark.asyncio
    async def test_profile_lists_skills_sorted(self, repos):
        user = await create_user(repos, "Alice", have=["sql", "Python"], want=["Guitar"])

        profile = await repos["users"].get_profile(user.id)

        assert [s.skill_name for s in profile.skills_have] == ["Python", "sql"]
        assert [s.skill_name for s in profile.skills_want] == ["Guitar"]

    @pytest.mark.asyncio
    async def test_update_profile_ignores_unknown_fields(self, repos):
        user = await create_user(repos, "Alice")

        updated = await repos["users"].update_profile(
            user.id, {"bio": "Teacher", "email": "hacker@example.com"}
        )

        assert updated.bio == "Teacher"
        assert updated.email == "alice@example.com"

    @pytest.mark.asyncio
    async def test_find_reciprocal_profiles(self, repos):
        alice = await create_user(repos, "Alice", have=["Python"], want=["Guitar"])
        bob = await create_user(repos, "Bob", have=["guitar"], want=["python"])
        await create_user(repos, "Carla", have=["Guitar"], want=["Cooking"])
        await create_user(repos, "Dave", have=["Cooking"], want=["Python"])

        profiles = await repos["users"].find_reciprocal_profiles(alice.id)

        assert [p.user_id for p in profiles] == [bob.id]

    @pytest.mark.asyncio
    async def test_delete_removes_owned_rows(self, repos):
        alice = await create_user(repos, "Alice", have=["Python"])
        bob = await create_user(repos, "Bob")
        await repos["connections"].upsert_proposal(Connection(user1_id=alice.id, user2_id=bob.id))
        await repos["notifications"].create(
            Notification(
                user_id=bob.id,
                from_user_id=alice.id,
                type=NotificationType.CONNECTION_REQUEST,
                title="Hi",
                message="Hello",
            )
        )

        # Act
        deleted = await repos["users"].delete(alice.id)

        # Assert
        assert deleted is True
        assert await repos["users"].get_by_id(alice.id) is None
        assert await repos["connections"].get_between(alice.id, bob.id) is None
        remaining = await repos["notifications"].list_for_user(bob.id)
        assert len(remaining) == 1
        assert remaining[0].from_user_id is None
        assert await repos["users"].delete(alice.id) is False

    @pytest.mark.asyncio
    async def test_list_users_with_connection_counts(self, repos):
        alice = await create_user(repos, "Alice")
        bob = await create_user(repos, "Bob")
        await create_user(repos, "Carla")
        await repos["connections"].upsert_proposal(Connection(user1_id=alice.id, user2_id=bob.id))

        rows, total = await repos["users"].list_users("b", limit=10, offset=0)

        assert total == 1
        assert [(user.name, count) for user, count in rows] == [("Bob", 1)]

    @pytest.mark.asyncio
    async def test_list_users_search_treats_wildcards_literally(self, repos):
        await create_user(repos, "Alice")
        await create_user(repos, "Bob")

        rows, total = await repos["users"].list_users("%", limit=10, offset=0)

        assert total == 0
        assert rows == []


class TestSkillRepository:
    """Test cases for SkillRepository."""

    @pytest.mark.asyncio
    async def test_find_or_create_is_case_insensitive(self, repos):
        first = await repos["skills"].find_or_create("Python")
        second = await repos["skills"].find_or_create("  PYTHON ")

        assert first.id == second.id
        assert second.skill_name == "Python"

    @pytest.mark.asyncio
    async def test_add_have_updates_existing_level(self, repos):
        user = await create_user(repos, "Alice")
        skill = await repos["skills"].find_or_create("Python")

        await repos["skills"].add_have(user.id, skill.id, ProficiencyLevel.BEGINNER)
        await repos["skills"].add_have(user.id, skill.id, ProficiencyLevel.EXPERT)
        profile = await repos["users"].get_profile(user.id)

        assert len(profile.skills_have) == 1
        assert profile.skills_have[0].proficiency_level == ProficiencyLevel.EXPERT

    @pytest.mark.asyncio
    async def test_remove_and_update_report_missing_rows(self, repos):
        user = await create_user(repos, "Alice", want=["Guitar"])
        guitar = await repos["skills"].find_or_create("Guitar")

        assert await repos["skills"].update_want_urgency(user.id, guitar.id, UrgencyLevel.HIGH)
        assert not await repos["skills"].update_have_level(
            user.id, guitar.id, ProficiencyLevel.EXPERT
        )
        assert await repos["skills"].remove_want(user.id, guitar.id)
        assert not await repos["skills"].remove_want(user.id, guitar.id)

    @pytest.mark.asyncio
    async def test_catalog_search_and_popularity(self, repos):
        await create_user(repos, "Alice", have=["Python", "Piano"], want=["Guitar"])
        await create_user(repos, "Bob", have=["Guitar"], want=["Python"])

        searched = await repos["skills"].list_skills(search="p")
        popular = await repos["skills"].list_skills(popular=True)

        assert [s.skill_name for s in searched] == ["Piano", "Python"]
        assert [(s.skill_name, s.user_count) for s in popular] == [
            ("Guitar", 2),
            ("Python", 2),
            ("Piano", 1),
        ]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "term,expected",
        [("%", ["100% Python"]), ("_", ["my_skill"]), ("\\", ["back\\slash"])],
    )
    async def test_catalog_search_treats_wildcards_literally(self, repos, term, expected):
        for name in ["100% Python", "my_skill", "myXskill", "back\\slash", "Guitar"]:
            await repos["skills"].find_or_create(name)

        searched = await repos["skills"].list_skills(search=term)

        assert [s.skill_name for s in searched] == expected

    @pytest.mark.asyncio
    async def test_top_offered(self, repos):
        await create_user(repos, "Alice", have=["Python"])
        await create_user(repos, "Bob", have=["Python", "Guitar"])

        assert await repos["skills"].top_offered(limit=1) == [("Python", 2)]


class TestConnectionRepository:
    """Test cases for ConnectionRepository."""

    @pytest_asyncio.fixture
    async def pair(self, repos):
        alice = await create_user(repos, "Alice")
        bob = await create_user(repos, "Bob")
        return alice, bob

    @pytest.mark.asyncio
    async def test_one_row_per_unordered_pair(self, repos, pair):
        alice, bob = pair
        connections = repos["connections"]

        first = await connections.upsert_proposal(
            Connection(user1_id=alice.id, user2_id=bob.id, matched_skills=snapshot(["Python"], ["Guitar"]))
        )
        second = await connections.upsert_proposal(
            Connection(user1_id=alice.id, user2_id=bob.id, matched_skills=snapshot(["Python", "SQL"], ["Guitar"]))
        )

        assert first.id == second.id
        assert second.matched_skills.match_score == 3
        rows, total = await connections.list_for_user(alice.id)
        assert total == 1

    @pytest.mark.asyncio
    async def test_reverse_proposal_keeps_initiator_perspective(self, repos, pair):
        alice, bob = pair
        connections = repos["connections"]
        await connections.upsert_proposal(
            Connection(user1_id=alice.id, user2_id=bob.id, matched_skills=snapshot(["Python"], ["Guitar"]))
        )

        # Act
        stored = await connections.upsert_proposal(
            Connection(
                user1_id=bob.id,
                user2_id=alice.id,
                matched_skills=snapshot(["Guitar", "Piano"], ["Python"]),
            )
        )

        # Assert
        assert stored.user1_id == alice.id
        assert [s.name for s in stored.matched_skills.skills_you_can_teach_them] == ["Python"]
        assert [s.name for s in stored.matched_skills.skills_they_can_teach_you] == [
            "Guitar",
            "Piano",
        ]

    @pytest.mark.asyncio
    async def test_transition_only_from_pending(self, repos, pair):
        alice, bob = pair
        connections = repos["connections"]
        await connections.upsert_proposal(Connection(user1_id=alice.id, user2_id=bob.id))

        accepted = await connections.transition_pending(bob.id, alice.id, ConnectionStatus.ACCEPTED)
        again = await connections.transition_pending(bob.id, alice.id, ConnectionStatus.DECLINED)

        assert accepted.status == ConnectionStatus.ACCEPTED
        assert again is None
        assert (await connections.get_between(alice.id, bob.id)).status == ConnectionStatus.ACCEPTED

    @pytest.mark.asyncio
    async def test_reproposal_after_decline_keeps_status(self, repos, pair):
        alice, bob = pair
        connections = repos["connections"]
        await connections.upsert_proposal(Connection(user1_id=alice.id, user2_id=bob.id))
        await connections.transition_pending(bob.id, alice.id, ConnectionStatus.DECLINED)

        stored = await connections.upsert_proposal(
            Connection(user1_id=alice.id, user2_id=bob.id, matched_skills=snapshot(["Python"], []))
        )

        assert stored.status == ConnectionStatus.DECLINED
        assert stored.matched_skills.match_score == 1

    @pytest.mark.asyncio
    async def test_transition_without_connection(self, repos, pair):
        alice, bob = pair

        result = await repos["connections"].transition_pending(
            alice.id, bob.id, ConnectionStatus.ACCEPTED
        )

        assert result is None

    @pytest.mark.asyncio
    async def test_list_and_count_by_status(self, repos, pair):
        alice, bob = pair
        carla = await create_user(repos, "Carla")
        connections = repos["connections"]
        await connections.upsert_proposal(Connection(user1_id=alice.id, user2_id=bob.id))
        await connections.upsert_proposal(Connection(user1_id=carla.id, user2_id=alice.id))
        await connections.transition_pending(alice.id, carla.id, ConnectionStatus.ACCEPTED)

        rows, total = await connections.list_for_user(alice.id, status=ConnectionStatus.ACCEPTED)
        counts = await connections.count_by_status(alice.id)

        assert total == 1
        connection, other = rows[0]
        assert other.id == carla.id
        assert connection.is_initiator(alice.id) is False
        assert counts == {"pending": 1, "accepted": 1, "declined": 0, "expired": 0}


class TestNotificationRepository:
    """Test cases for NotificationRepository."""

    @pytest.mark.asyncio
    async def test_newest_first_and_sender_details(self, repos):
        alice = await create_user(repos, "Alice")
        bob = await create_user(repos, "Bob")
        notifications = repos["notifications"]

        for index in range(3):
            await notifications.create(
                Notification(
                    user_id=alice.id,
                    from_user_id=bob.id,
                    type=NotificationType.MESSAGE,
                    title=f"Message {index}",
                    message="Hello",
                )
            )
            await asyncio.sleep(0.001)

        listed = await notifications.list_for_user(alice.id, limit=2)

        assert [n.title for n in listed] == ["Message 2", "Message 1"]
        assert listed[0].from_user_name == "Bob"

    @pytest.mark.asyncio
    async def test_scoped_to_recipient(self, repos):
        alice = await create_user(repos, "Alice")
        bob = await create_user(repos, "Bob")
        notifications = repos["notifications"]
        created = await notifications.create(
            Notification(user_id=alice.id, type=NotificationType.SYSTEM, title="T", message="M")
        )

        assert await notifications.list_for_user(bob.id) == []
        assert await notifications.mark_read(created.id, bob.id) is False
        assert await notifications.delete(created.id, bob.id) is False
        assert await notifications.count_for_user(alice.id, unread_only=True) == 1

    @pytest.mark.asyncio
    async def test_mark_read(self, repos):
        alice = await create_user(repos, "Alice")
        notifications = repos["notifications"]
        for title in ("A", "B"):
            await notifications.create(
                Notification(user_id=alice.id, type=NotificationType.SYSTEM, title=title, message="M")
            )

        first = (await notifications.list_for_user(alice.id))[0]
        assert await notifications.mark_read(first.id, alice.id) is True
        assert await notifications.mark_all_read(alice.id) == 1
        assert await notifications.count_for_user(alice.id, unread_only=True) == 0


class TestTransactionService:
    """Test cases for TransactionService."""

    @pytest.mark.asyncio
    async def test_rolls_back_on_error(self, db_session, repos):
        transactions = TransactionService(db_session)

        async def operation():
            await repos["users"].create(User(name="Alice", email="alice@example.com", password_hash="x"))
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            await transactions.execute_in_transaction(operation)

        assert await repos["users"].get_by_email("alice@example.com") is None

    @pytest.mark.asyncio
    async def test_commits_result(self, db_session, repos):
        transactions = TransactionService(db_session)

        user = await transactions.execute_in_transaction(
            lambda: repos["users"].create(User(name="Alice", email="alice@example.com", password_hash="x"))
        )

        assert (await repos["users"].get_by_email("alice@example.com")).id == user.id
