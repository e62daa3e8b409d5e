"""
Unit tests for value objects.
"""

import dataclasses
from datetime import datetime, timedelta, timezone

import pytest

from skillswapper.domain.entities.connection import Connection, unordered_pair
from skillswapper.domain.entities.notification import time_ago
from skillswapper.domain.exceptions.validation_error import (
    InvalidLevelError,
    InvalidSkillError,
    ValidationError,
)
from skillswapper.domain.value_objects.connection_status import ConnectionStatus
from skillswapper.domain.value_objects.matched_skills import MatchedSkills, SkillSnapshot
from skillswapper.domain.value_objects.notification_type import NotificationType
from skillswapper.domain.value_objects.skill_input import SkillInput, normalize_skill_name
from skillswapper.domain.value_objects.skill_level import ProficiencyLevel, UrgencyLevel


class TestConnectionStatus:
    """Test ConnectionStatus value object."""

    def test_enum_values(self):
        """Test that all expected enum values exist."""
        expected_values = ["pending", "accepted", "declined", "expired"]
        actual_values = [status.value for status in ConnectionStatus]
        assert actual_values == expected_values

    def test_only_pending_can_transition(self):
        assert ConnectionStatus.PENDING.can_transition_to(ConnectionStatus.ACCEPTED) is True
        assert ConnectionStatus.PENDING.can_transition_to(ConnectionStatus.DECLINED) is True

        assert ConnectionStatus.PENDING.can_transition_to(ConnectionStatus.EXPIRED) is False
        assert ConnectionStatus.ACCEPTED.can_transition_to(ConnectionStatus.DECLINED) is False
        assert ConnectionStatus.DECLINED.can_transition_to(ConnectionStatus.ACCEPTED) is False

    def test_is_final(self):
        """Test is_final method for all statuses."""
        assert ConnectionStatus.PENDING.is_final() is False
        assert ConnectionStatus.ACCEPTED.is_final() is True
        assert ConnectionStatus.DECLINED.is_final() is True
        assert ConnectionStatus.EXPIRED.is_final() is True

    def test_string_conversion(self):
        assert ConnectionStatus("accepted") == ConnectionStatus.ACCEPTED
        assert ConnectionStatus.PENDING == "pending"

        with pytest.raises(ValueError):
            ConnectionStatus("invalid")


class TestNotificationType:
    """Test NotificationType value object."""

    def test_connection_events(self):
        assert NotificationType.CONNECTION_REQUEST.is_connection_event() is True
        assert NotificationType.CONNECTION_ACCEPTED.is_connection_event() is True
        assert NotificationType.CONNECTION_DECLINED.is_connection_event() is True
        assert NotificationType.MESSAGE.is_connection_event() is False
        assert NotificationType.SYSTEM.is_connection_event() is False


class TestSkillLevels:
    """Test proficiency and urgency levels."""

    def test_proficiency_ranks(self):
        assert [level.rank for level in ProficiencyLevel] == [1, 2, 3, 4]

    def test_rank_of_unknown_value_is_intermediate(self):
        assert ProficiencyLevel.rank_of("expert") == 4
        assert ProficiencyLevel.rank_of("guru") == 2
        assert ProficiencyLevel.rank_of(None) == 2

    def test_urgency_values(self):
        assert UrgencyLevel.values() == ["low", "medium", "high"]


class TestSkillInput:
    """Test SkillInput value object."""

    def test_bare_name_uses_default_levels(self):
        have = SkillInput.for_have("Python")
        want = SkillInput.for_want("Python")

        assert have.level == ProficiencyLevel.INTERMEDIATE
        assert want.level == UrgencyLevel.MEDIUM

    def test_object_with_level(self):
        skill = SkillInput.for_have({"name": "Guitar", "level": "Expert"})

        assert skill.name == "Guitar"
        assert skill.level == ProficiencyLevel.EXPERT

    def test_object_with_kind_specific_key(self):
        assert SkillInput.for_want({"name": "Spanish", "urgency": "high"}).level == UrgencyLevel.HIGH
        assert (
            SkillInput.for_have({"name": "SQL", "proficiency_level": "advanced"}).level
            == ProficiencyLevel.ADVANCED
        )

    def test_object_without_level_uses_default(self):
        assert SkillInput.for_want({"name": "Yoga"}).level == UrgencyLevel.MEDIUM

    def test_whitespace_is_collapsed(self):
        skill = SkillInput.for_have("  Machine   Learning ")

        assert skill.name == "Machine Learning"
        assert skill.normalized_name == "machine learning"

    def test_invalid_level_rejected(self):
        with pytest.raises(InvalidLevelError) as exc_info:
            SkillInput.for_have({"name": "Python", "level": "guru"})

        assert "expert" in str(exc_info.value)
        assert isinstance(exc_info.value, ValidationError)

    @pytest.mark.parametrize("raw", ["", "   ", {"name": ""}, {"name": 42}, 42, None])
    def test_invalid_entries_rejected(self, raw):
        with pytest.raises(InvalidSkillError):
            SkillInput.for_have(raw)

    def test_name_length_limit(self):
        with pytest.raises(InvalidSkillError):
            SkillInput.for_have("x" * 101)

    def test_immutability(self):
        skill = SkillInput.for_have("Python")

        with pytest.raises(dataclasses.FrozenInstanceError):
            skill.name = "Java"

    def test_normalize_skill_name(self):
        assert normalize_skill_name("PYTHON") == normalize_skill_name("python ")
        assert normalize_skill_name("Node.js") == "node.js"


class TestMatchedSkills:
    """Test MatchedSkills snapshot."""

    def test_skills_sorted_case_insensitively(self):
        snapshot = MatchedSkills(
            skills_you_can_teach_them=(SkillSnapshot("python"), SkillSnapshot("Go")),
        )

        assert [s.name for s in snapshot.skills_you_can_teach_them] == ["Go", "python"]

    def test_match_score(self):
        snapshot = MatchedSkills(
            skills_you_can_teach_them=(SkillSnapshot("Python"), SkillSnapshot("SQL")),
            skills_they_can_teach_you=(SkillSnapshot("Guitar"),),
        )

        assert snapshot.match_score == 3

    def test_reversed_swaps_directions(self):
        snapshot = MatchedSkills(
            skills_you_can_teach_them=(SkillSnapshot("Python", "expert"),),
            skills_they_can_teach_you=(SkillSnapshot("Guitar", "advanced"),),
            note="Hi",
        )

        reversed_snapshot = snapshot.reversed()

        assert reversed_snapshot.skills_you_can_teach_them == (SkillSnapshot("Guitar", "advanced"),)
        assert reversed_snapshot.skills_they_can_teach_you == (SkillSnapshot("Python", "expert"),)
        assert reversed_snapshot.note == "Hi"
        assert reversed_snapshot.reversed() == snapshot

    def test_dict_conversion(self):
        snapshot = MatchedSkills(
            skills_you_can_teach_them=(SkillSnapshot("Python", "expert"),),
            skills_they_can_teach_you=(SkillSnapshot("Guitar", "advanced"),),
        )

        data = snapshot.to_dict()

        assert data == {
            "skillsYouCanTeachThem": [{"name": "Python", "proficiency": "expert"}],
            "skillsTheyCanTeachYou": [{"name": "Guitar", "proficiency": "advanced"}],
            "matchScore": 2,
        }
        assert MatchedSkills.from_dict(data) == snapshot

    def test_from_dict_accepts_bare_names_and_empty_values(self):
        assert MatchedSkills.from_dict(None) == MatchedSkills()
        assert MatchedSkills.from_dict({"skillsYouCanTeachThem": ["Python"]}).skills_you_can_teach_them == (
            SkillSnapshot("Python"),
        )


class TestConnection:
    """Test Connection entity."""

    def test_unordered_pair(self):
        assert unordered_pair(5, 2) == (2, 5)
        assert unordered_pair(2, 5) == (2, 5)

    def test_self_connection_rejected(self):
        with pytest.raises(ValidationError):
            Connection(user1_id=1, user2_id=1)

    def test_defaults_to_pending(self):
        connection = Connection(user1_id=1, user2_id=2)

        assert connection.status == ConnectionStatus.PENDING
        assert connection.updated_at == connection.created_at

    def test_other_party(self):
        connection = Connection(user1_id=1, user2_id=2)

        assert connection.other_party(1) == 2
        assert connection.other_party(2) == 1
        with pytest.raises(ValidationError):
            connection.other_party(3)

    def test_skills_for_each_party(self):
        snapshot = MatchedSkills(
            skills_you_can_teach_them=(SkillSnapshot("Python"),),
            skills_they_can_teach_you=(SkillSnapshot("Guitar"),),
        )
        connection = Connection(user1_id=1, user2_id=2, matched_skills=snapshot)

        assert connection.skills_for(1) == snapshot
        assert connection.skills_for(2) == snapshot.reversed()


class TestTimeAgo:
    """Test relative timestamps on notifications."""

    NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        "delta,expected",
        [
            (timedelta(seconds=30), "Just now"),
            (timedelta(minutes=1), "1 minute ago"),
            (timedelta(minutes=5), "5 minutes ago"),
            (timedelta(hours=2), "2 hours ago"),
            (timedelta(days=1), "1 day ago"),
        ],
    )
    def test_relative_labels(self, delta, expected):
        assert time_ago(self.NOW - delta, now=self.NOW) == expected

    def test_naive_timestamps_treated_as_utc(self):
        naive = datetime(2024, 6, 1, 11, 0)

        assert time_ago(naive, now=self.NOW) == "1 hour ago"

    def test_old_timestamps_show_date(self):
        assert time_ago(self.NOW - timedelta(days=45), now=self.NOW) == "2024-04-17"
