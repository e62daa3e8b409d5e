"""
Application services package.
"""

from .connection_notifier import ConnectionNotifier
from .skill_matcher import (
    CandidateMatch,
    ExchangeSkill,
    MatchAnalysis,
    MatchFilters,
    MatchPage,
    SkillMatcher,
    SkillOverlap,
)

__all__ = [
    "ConnectionNotifier",
    "CandidateMatch",
    "ExchangeSkill",
    "MatchAnalysis",
    "MatchFilters",
    "MatchPage",
    "SkillMatcher",
    "SkillOverlap",
]
