"""
Unit tests for SkillMatcher.
"""

import itertools

import pytest

from skillswapper.application.services.skill_matcher import (
    MatchFilters,
    SkillMatcher,
    SkillOverlap,
)
from tests.factories import make_profile

SWAP_PROFILES = [
    make_profile(1, "Alice", have=["Guitar", "Python"], want=["Spanish"]),
    make_profile(2, "Bob", have=["spanish"], want=["guitar", "PYTHON"]),
    make_profile(3, "Carla", have=["PYTHON", "Cooking"], want=["GUITAR", "Spanish"]),
    make_profile(4, "David", have=["python"]),
    make_profile(5, "Erin"),
]


class TestSkillMatcher:
    """Test cases for SkillMatcher."""

    @pytest.fixture
    def matcher(self):
        return SkillMatcher()

    @pytest.fixture
    def alice(self):
        """Requester who teaches Python and SQL and wants Guitar and Spanish."""
        return make_profile(
            1,
            "Alice",
            have=[("Python", "expert"), ("SQL", "advanced")],
            want=[("Guitar", "high"), ("Spanish", "low")],
            location="San Francisco, CA",
        )

    def test_compare_is_case_insensitive(self, matcher, alice):
        bob = make_profile(2, "Bob", have=["guitar"], want=["PYTHON"])

        overlap = matcher.compare(alice, bob)

        assert [s.name for s in overlap.teach] == ["Python"]
        assert [s.name for s in overlap.learn] == ["guitar"]
        assert overlap.is_reciprocal is True

    def test_compare_records_levels(self, matcher, alice):
        bob = make_profile(2, "Bob", have=[("Guitar", "beginner")], want=[("Python", "low")])

        overlap = matcher.compare(alice, bob)

        assert overlap.teach[0].proficiency == "expert"
        assert overlap.teach[0].urgency == "low"
        assert overlap.learn[0].proficiency == "beginner"
        assert overlap.learn[0].urgency == "high"

    @pytest.mark.parametrize(
        "first,second",
        list(itertools.permutations(SWAP_PROFILES, 2)),
        ids=lambda p: p.user.name,
    )
    def test_compare_is_symmetric(self, matcher, first, second):
        forward = matcher.compare(first, second)
        backward = matcher.compare(second, first)

        assert forward.is_reciprocal == backward.is_reciprocal
        assert [n.lower() for n in forward.teach_names()] == [
            n.lower() for n in backward.learn_names()
        ]
        assert [n.lower() for n in forward.learn_names()] == [
            n.lower() for n in backward.teach_names()
        ]
        assert forward.match_score == backward.match_score

    @pytest.mark.parametrize(
        "teach,learn,expected",
        [
            (0, 3, 0),
            (3, 0, 0),
            (1, 1, 60),
            (2, 1, 60),
            (2, 2, 90),
            (3, 3, 100),
            (3, 1, 70),
            (4, 1, 78),
        ],
    )
    def test_compatibility(self, teach, learn, expected):
        assert SkillMatcher.compatibility(teach, learn) == expected

    def test_rank_candidates_requires_reciprocity(self, matcher, alice):
        one_way = make_profile(2, "Bob", have=["Cooking"], want=["Python"])
        reciprocal = make_profile(3, "Carla", have=["Spanish"], want=["SQL"])

        ranked = matcher.rank_candidates(alice, [one_way, reciprocal], MatchFilters())

        assert [m.profile.user_id for m in ranked] == [3]

    def test_rank_candidates_excludes_requester(self, matcher, alice):
        ranked = matcher.rank_candidates(alice, [alice], MatchFilters())

        assert ranked == []

    def test_rank_candidates_orders_by_score_then_name(self, matcher, alice):
        dave = make_profile(4, "dave", have=["Guitar"], want=["Python"])
        bob = make_profile(2, "Bob", have=["Guitar"], want=["Python"])
        carla = make_profile(3, "Carla", have=["Guitar", "Spanish"], want=["Python", "SQL"])

        ranked = matcher.rank_candidates(alice, [dave, bob, carla], MatchFilters())

        assert [m.profile.user.name for m in ranked] == ["Carla", "Bob", "dave"]
        assert ranked[0].match_score == 4
        assert ranked[0].compatibility == 90

    def test_min_score_applies_to_both_directions(self, matcher, alice):
        lopsided = make_profile(2, "Bob", have=["Guitar"], want=["Python", "SQL"])
        balanced = make_profile(3, "Carla", have=["Guitar", "Spanish"], want=["Python", "SQL"])

        ranked = matcher.rank_candidates(alice, [lopsided, balanced], MatchFilters(min_score=2))

        assert [m.profile.user_id for m in ranked] == [3]

    def test_location_filter_is_substring_match(self, matcher, alice):
        local = make_profile(2, "Bob", have=["Guitar"], want=["Python"], location="San Francisco, CA")
        remote = make_profile(3, "Carla", have=["Guitar"], want=["Python"], location="Austin, TX")
        unknown = make_profile(4, "Dave", have=["Guitar"], want=["Python"])

        ranked = matcher.rank_candidates(
            alice, [local, remote, unknown], MatchFilters(location="francisco")
        )

        assert [m.profile.user_id for m in ranked] == [2]

    def test_skill_filter_checks_either_direction(self, matcher, alice):
        bob = make_profile(2, "Bob", have=["Guitar"], want=["Python"])
        carla = make_profile(3, "Carla", have=["Spanish"], want=["SQL"])

        by_learned = matcher.rank_candidates(alice, [bob, carla], MatchFilters(skill="guit"))
        by_taught = matcher.rank_candidates(alice, [bob, carla], MatchFilters(skill="sql"))

        assert [m.profile.user_id for m in by_learned] == [2]
        assert [m.profile.user_id for m in by_taught] == [3]

    def test_find_candidates_paginates(self, matcher, alice):
        profiles = [
            make_profile(i, f"User {chr(64 + i)}", have=["Guitar"], want=["Python"])
            for i in range(2, 7)
        ]

        page = matcher.find_candidates(alice, profiles, MatchFilters(limit=2, offset=2))

        assert page.total == 5
        assert [c.profile.user_id for c in page.candidates] == [4, 5]
        assert page.has_more is True
        assert page.pagination() == {
            "total": 5,
            "limit": 2,
            "offset": 2,
            "hasMore": True,
            "totalPages": 3,
            "currentPage": 2,
        }

    def test_candidate_dict(self, matcher, alice):
        bob = make_profile(2, "Bob", have=["Guitar"], want=["Python", "SQL"])

        candidate = matcher.rank_candidates(alice, [bob], MatchFilters())[0]
        data = candidate.to_dict()

        assert data["id"] == 2
        assert data["skillsYouCanTeachThem"] == ["Python", "SQL"]
        assert data["skillsTheyCanTeachYou"] == ["Guitar"]
        assert data["matchScore"] == 3
        assert data["mutualSkillsCount"] == 1
        assert data["compatibility"] == 60
        assert "email" not in data


class TestMatchAnalysis:
    """Test cases for pairwise analysis."""

    @pytest.fixture
    def matcher(self):
        return SkillMatcher()

    def test_reciprocal_pair_in_same_location(self, matcher):
        alice = make_profile(1, "Alice", have=[("Python", "expert")], want=["Guitar"], location="Austin")
        bob = make_profile(2, "Bob", have=[("Guitar", "beginner")], want=["Python"], location=" austin ")

        analysis = matcher.analyze(alice, bob)
        data = analysis.to_dict()["matchAnalysis"]

        assert data["isValidMatch"] is True
        assert data["compatibility"] == 60
        assert data["skillLevelCompatibility"] == {
            "yourAverageLevel": 4.0,
            "theirAverageLevel": 1.0,
            "levelBalance": "unbalanced",
        }
        messages = [hint["message"] for hint in data["recommendations"]]
        assert any("mutual match" in m for m in messages)
        assert any("same location" in m for m in messages)

    def test_one_sided_pair_gets_warnings(self, matcher):
        alice = make_profile(1, "Alice", have=["Python"], want=["Guitar"])
        bob = make_profile(2, "Bob", have=["Cooking"], want=["Python"])

        analysis = matcher.analyze(alice, bob)

        assert analysis.is_valid_match is False
        assert analysis.compatibility == 0
        assert [hint["type"] for hint in analysis.recommendations] == ["warning"]

    def test_level_balance_good_within_one_rank(self):
        overlap = SkillOverlap()

        levels = SkillMatcher.skill_level_compatibility(overlap)

        assert levels == {"yourAverageLevel": 0.0, "theirAverageLevel": 0.0, "levelBalance": "good"}


class TestMatchStatistics:
    """Test cases for statistics aggregation."""

    def test_summarize(self):
        matcher = SkillMatcher()
        alice = make_profile(
            1, "Alice", have=["Python", "SQL"], want=["Guitar", "Spanish"], location="Austin"
        )
        bob = make_profile(2, "Bob", have=["Guitar"], want=["Python"])
        carla = make_profile(3, "Carla", have=["Guitar", "Spanish"], want=["Python", "SQL"])

        candidates = matcher.rank_candidates(alice, [bob, carla], MatchFilters())
        stats = matcher.summarize(alice, candidates)

        assert stats["totalPotentialMatches"] == 2
        assert stats["averageMatchScore"] == 3.0
        assert stats["topMatchingSkills"][0] == {"skill": "Python", "demandCount": 2}
        assert stats["matchQualityDistribution"] == {
            "excellent": 0,
            "good": 1,
            "average": 1,
            "basic": 0,
        }
        assert set(stats["skillsYouCanTeach"]) == {"Python", "SQL"}
        assert set(stats["skillsYouCanLearn"]) == {"Guitar", "Spanish"}

    def test_profile_recommendations_for_empty_profile(self):
        profile = make_profile(1, "Alice")

        hints = SkillMatcher.profile_recommendations(profile, match_count=0)

        assert len(hints) == 5
        assert hints[-1]["type"] == "suggestion"
