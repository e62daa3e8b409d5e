"""Find matches, analyze a match and match statistics use cases."""

from typing import Any, Dict

from skillswapper.application.interfaces.repositories import (
    ConnectionRepositoryInterface,
    UserRepositoryInterface,
)
from skillswapper.application.services.skill_matcher import (
    MatchAnalysis,
    MatchFilters,
    MatchPage,
    SkillMatcher,
)
from skillswapper.config.logging import get_logger
from skillswapper.domain.entities.user import SkillProfile
from skillswapper.domain.exceptions.resource_error import NotFoundError
from skillswapper.domain.exceptions.validation_error import ValidationError
from skillswapper.infrastructure.monitoring.metrics import record_match_search

logger = get_logger(__name__)


async def _load_profile(user_repo: UserRepositoryInterface, user_id: int) -> SkillProfile:
    profile = await user_repo.get_profile(user_id)
    if profile is None:
        raise NotFoundError("User", user_id)
    return profile


class FindMatchesUseCase:
    """Use case for listing reciprocal skill-swap candidates."""

    def __init__(self, user_repo: UserRepositoryInterface, matcher: SkillMatcher):
        self.user_repo = user_repo
        self.matcher = matcher

    async def execute(self, user_id: int, filters: MatchFilters) -> MatchPage:
        requester = await _load_profile(self.user_repo, user_id)
        if not requester.skills_have or not requester.skills_want:
            return MatchPage(candidates=[], total=0, filters=filters)

        profiles = await self.user_repo.find_reciprocal_profiles(user_id)
        page = self.matcher.find_candidates(requester, profiles, filters)
        record_match_search(page.total)
        return page


class AnalyzeMatchUseCase:
    """Use case for the detailed analysis of one potential partner."""

    def __init__(self, user_repo: UserRepositoryInterface, matcher: SkillMatcher):
        self.user_repo = user_repo
        self.matcher = matcher

    async def execute(self, user_id: int, target_id: int) -> MatchAnalysis:
        if user_id == target_id:
            raise ValidationError("Cannot analyze match with yourself")

        requester = await _load_profile(self.user_repo, user_id)
        target = await self.user_repo.get_profile(target_id)
        if target is None:
            raise NotFoundError("User", target_id)

        analysis = self.matcher.analyze(requester, target)
        logger.info(
            "Match analyzed",
            user_id=user_id,
            target_id=target_id,
            match_score=analysis.overlap.match_score,
            is_valid_match=analysis.is_valid_match,
        )
        return analysis


class MatchStatisticsUseCase:
    """Use case for a user's matching statistics."""

    def __init__(
        self,
        user_repo: UserRepositoryInterface,
        connection_repo: ConnectionRepositoryInterface,
        matcher: SkillMatcher,
    ):
        self.user_repo = user_repo
        self.connection_repo = connection_repo
        self.matcher = matcher

    async def execute(self, user_id: int) -> Dict[str, Any]:
        requester = await _load_profile(self.user_repo, user_id)

        candidates = []
        if requester.skills_have and requester.skills_want:
            profiles = await self.user_repo.find_reciprocal_profiles(user_id)
            candidates = self.matcher.rank_candidates(requester, profiles, MatchFilters())

        saved = dict(await self.connection_repo.count_by_status(user_id))
        saved["total"] = sum(saved.values())

        statistics = self.matcher.summarize(requester, candidates)
        statistics["savedMatches"] = saved
        return statistics
