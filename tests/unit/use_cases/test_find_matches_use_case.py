"""
Unit tests for the match discovery use cases.
"""

from unittest.mock import AsyncMock

import pytest

from skillswapper.application.services.skill_matcher import MatchFilters, SkillMatcher
from skillswapper.application.use_cases.find_matches import (
    AnalyzeMatchUseCase,
    FindMatchesUseCase,
    MatchStatisticsUseCase,
)
from skillswapper.domain.exceptions.resource_error import NotFoundError
from skillswapper.domain.exceptions.validation_error import ValidationError
from tests.factories import make_profile


class TestFindMatchesUseCase:
    """Test cases for FindMatchesUseCase."""

    @pytest.mark.asyncio
    async def test_requester_without_skills_gets_empty_page(self, mock_user_repository):
        mock_user_repository.get_profile = AsyncMock(
            return_value=make_profile(1, "Alice", have=["Python"])
        )
        use_case = FindMatchesUseCase(mock_user_repository, SkillMatcher())

        # Act
        page = await use_case.execute(1, MatchFilters())

        # Assert
        assert page.total == 0
        assert page.candidates == []
        mock_user_repository.find_reciprocal_profiles.assert_not_called()

    @pytest.mark.asyncio
    async def test_ranks_reciprocal_profiles(self, mock_user_repository):
        mock_user_repository.get_profile = AsyncMock(
            return_value=make_profile(1, "Alice", have=["Python"], want=["Guitar"])
        )
        mock_user_repository.find_reciprocal_profiles = AsyncMock(
            return_value=[make_profile(2, "Bob", have=["Guitar"], want=["Python"])]
        )
        use_case = FindMatchesUseCase(mock_user_repository, SkillMatcher())

        page = await use_case.execute(1, MatchFilters())

        assert page.total == 1
        assert page.candidates[0].profile.user_id == 2

    @pytest.mark.asyncio
    async def test_unknown_requester(self, mock_user_repository):
        use_case = FindMatchesUseCase(mock_user_repository, SkillMatcher())

        with pytest.raises(NotFoundError):
            await use_case.execute(1, MatchFilters())


class TestAnalyzeMatchUseCase:
    """Test cases for AnalyzeMatchUseCase."""

    @pytest.mark.asyncio
    async def test_self_analysis_rejected(self, mock_user_repository):
        use_case = AnalyzeMatchUseCase(mock_user_repository, SkillMatcher())

        with pytest.raises(ValidationError):
            await use_case.execute(1, 1)

    @pytest.mark.asyncio
    async def test_unknown_target(self, mock_user_repository):
        mock_user_repository.get_profile = AsyncMock(
            side_effect=lambda uid: make_profile(1, "Alice") if uid == 1 else None
        )
        use_case = AnalyzeMatchUseCase(mock_user_repository, SkillMatcher())

        with pytest.raises(NotFoundError):
            await use_case.execute(1, 2)


class TestMatchStatisticsUseCase:
    """Test cases for MatchStatisticsUseCase."""

    @pytest.mark.asyncio
    async def test_includes_saved_match_counts(
        self, mock_user_repository, mock_connection_repository
    ):
        mock_user_repository.get_profile = AsyncMock(
            return_value=make_profile(1, "Alice", have=["Python"], want=["Guitar"])
        )
        mock_user_repository.find_reciprocal_profiles = AsyncMock(
            return_value=[make_profile(2, "Bob", have=["Guitar"], want=["Python"])]
        )
        mock_connection_repository.count_by_status = AsyncMock(
            return_value={"pending": 2, "accepted": 1, "declined": 0, "expired": 0}
        )
        use_case = MatchStatisticsUseCase(
            mock_user_repository, mock_connection_repository, SkillMatcher()
        )

        stats = await use_case.execute(1)

        assert stats["totalPotentialMatches"] == 1
        assert stats["savedMatches"]["total"] == 3
        assert stats["savedMatches"]["accepted"] == 1
