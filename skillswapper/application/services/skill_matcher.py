"""
Skill matcher: reciprocal candidate search and pairwise match analysis.

A user U is a candidate for requester R when R can teach U something U wants
to learn and U can teach R something R wants to learn. Skill names compare
case-insensitively.
"""

import math
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from skillswapper.config.logging import get_logger
from skillswapper.domain.entities.user import SkillProfile
from skillswapper.domain.value_objects.matched_skills import MatchedSkills, SkillSnapshot
from skillswapper.domain.value_objects.skill_level import ProficiencyLevel

logger = get_logger(__name__)


@dataclass(frozen=True)
class ExchangeSkill:
    """One skill flowing from the user who offers it to a learner."""

    skill_id: int
    name: str
    proficiency: str  # level of the user offering it
    urgency: str  # learner's urgency level


@dataclass
class SkillOverlap:
    """Both directions of skill exchange between requester and candidate."""

    teach: List[ExchangeSkill] = field(default_factory=list)  # requester -> candidate
    learn: List[ExchangeSkill] = field(default_factory=list)  # candidate -> requester

    @property
    def match_score(self) -> int:
        return len(self.teach) + len(self.learn)

    @property
    def mutual_skills_count(self) -> int:
        return min(len(self.teach), len(self.learn))

    @property
    def is_reciprocal(self) -> bool:
        return bool(self.teach) and bool(self.learn)

    def teach_names(self) -> List[str]:
        return [s.name for s in self.teach]

    def learn_names(self) -> List[str]:
        return [s.name for s in self.learn]

    def snapshot(self, note: Optional[str] = None) -> MatchedSkills:
        """Snapshot of this overlap from the requester's perspective."""
        return MatchedSkills(
            skills_you_can_teach_them=tuple(
                SkillSnapshot(name=s.name, proficiency=s.proficiency) for s in self.teach
            ),
            skills_they_can_teach_you=tuple(
                SkillSnapshot(name=s.name, proficiency=s.proficiency) for s in self.learn
            ),
            note=note,
        )


@dataclass
class MatchFilters:
    """Candidate search filters."""

    location: Optional[str] = None
    skill: Optional[str] = None
    min_score: int = 1
    limit: int = 10
    offset: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "location": self.location,
            "skill": self.skill,
            "minScore": self.min_score,
        }


@dataclass
class CandidateMatch:
    """A ranked candidate for a requester."""

    profile: SkillProfile
    overlap: SkillOverlap
    compatibility: int

    @property
    def match_score(self) -> int:
        return self.overlap.match_score

    def to_dict(self) -> Dict[str, Any]:
        data = self.profile.user.public_summary()
        data.update(
            {
                "skillsYouCanTeachThem": self.overlap.teach_names(),
                "skillsTheyCanTeachYou": self.overlap.learn_names(),
                "matchScore": self.overlap.match_score,
                "mutualSkillsCount": self.overlap.mutual_skills_count,
                "compatibility": self.compatibility,
            }
        )
        return data


@dataclass
class MatchPage:
    """One page of ranked candidates."""

    candidates: List[CandidateMatch]
    total: int
    filters: MatchFilters

    @property
    def has_more(self) -> bool:
        return self.filters.offset + len(self.candidates) < self.total

    def pagination(self) -> Dict[str, Any]:
        limit = self.filters.limit
        return {
            "total": self.total,
            "limit": limit,
            "offset": self.filters.offset,
            "hasMore": self.has_more,
            "totalPages": math.ceil(self.total / limit) if limit else 0,
            "currentPage": self.filters.offset // limit + 1 if limit else 1,
        }


@dataclass
class MatchAnalysis:
    """Detailed pairwise analysis between requester and target."""

    target: SkillProfile
    overlap: SkillOverlap
    compatibility: int
    skill_level_compatibility: Dict[str, Any]
    recommendations: List[Dict[str, str]]

    @property
    def is_valid_match(self) -> bool:
        return self.overlap.is_reciprocal

    def to_dict(self) -> Dict[str, Any]:
        return {
            "user": self.target.to_dict(),
            "matchAnalysis": {
                "isValidMatch": self.is_valid_match,
                "matchScore": self.overlap.match_score,
                "compatibility": self.compatibility,
                "skillsYouCanTeachThem": [
                    {
                        "id": s.skill_id,
                        "skill_name": s.name,
                        "proficiency_level": s.proficiency,
                        "demandLevel": s.urgency,
                    }
                    for s in self.overlap.teach
                ],
                "skillsTheyCanTeachYou": [
                    {
                        "id": s.skill_id,
                        "skill_name": s.name,
                        "proficiency_level": s.proficiency,
                        "yourInterestLevel": s.urgency,
                    }
                    for s in self.overlap.learn
                ],
                "skillLevelCompatibility": self.skill_level_compatibility,
                "mutualBenefit": {
                    "yourSkillsTheyWant": len(self.overlap.teach),
                    "theirSkillsYouWant": len(self.overlap.learn),
                    "balanceScore": abs(len(self.overlap.teach) - len(self.overlap.learn)),
                },
                "recommendations": self.recommendations,
            },
        }


def _round_half_up(value: float, digits: int = 0) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def _contains(haystack: Optional[str], needle: str) -> bool:
    return bool(haystack) and needle.lower() in haystack.lower()


class SkillMatcher:
    """Computes reciprocal skill matches between user profiles."""

    def __init__(self):
        self.logger = logger

    def compare(self, requester: SkillProfile, candidate: SkillProfile) -> SkillOverlap:
        """Compute both exchange directions between two profiles."""
        requester_have = requester.have_by_name()
        requester_want = requester.want_by_name()
        candidate_have = candidate.have_by_name()
        candidate_want = candidate.want_by_name()

        teach = [
            ExchangeSkill(
                skill_id=have.skill_id,
                name=have.skill_name,
                proficiency=have.proficiency_level.value,
                urgency=candidate_want[key].urgency_level.value,
            )
            for key, have in requester_have.items()
            if key in candidate_want
        ]
        learn = [
            ExchangeSkill(
                skill_id=have.skill_id,
                name=have.skill_name,
                proficiency=have.proficiency_level.value,
                urgency=requester_want[key].urgency_level.value,
            )
            for key, have in candidate_have.items()
            if key in requester_want
        ]

        teach.sort(key=lambda s: s.name.lower())
        learn.sort(key=lambda s: s.name.lower())
        return SkillOverlap(teach=teach, learn=learn)

    @staticmethod
    def compatibility(teach_count: int, learn_count: int) -> int:
        """Compatibility percentage (0-100) for a pair of overlap sizes.

        Up to 70 points for the total overlap (15 per skill) plus up to 30
        points for how balanced the two directions are.
        """
        if teach_count == 0 or learn_count == 0:
            return 0

        base = min((teach_count + learn_count) * 15, 70)
        balance = (1 - abs(teach_count - learn_count) / max(teach_count, learn_count)) * 30
        return int(_round_half_up(base + balance))

    @staticmethod
    def skill_level_compatibility(overlap: SkillOverlap) -> Dict[str, Any]:
        """Average proficiency on each side and whether they are balanced."""

        def average(skills: List[ExchangeSkill]) -> float:
            if not skills:
                return 0.0
            return sum(ProficiencyLevel.rank_of(s.proficiency) for s in skills) / len(skills)

        yours = average(overlap.teach)
        theirs = average(overlap.learn)
        return {
            "yourAverageLevel": _round_half_up(yours, 1),
            "theirAverageLevel": _round_half_up(theirs, 1),
            "levelBalance": "good" if abs(yours - theirs) <= 1 else "unbalanced",
        }

    @staticmethod
    def recommendations(
        requester: SkillProfile, target: SkillProfile, overlap: SkillOverlap
    ) -> List[Dict[str, str]]:
        hints = []
        if not overlap.teach:
            hints.append(
                {"type": "warning", "message": "You have no skills that this user wants to learn"}
            )
        if not overlap.learn:
            hints.append(
                {"type": "warning", "message": "This user has no skills that you want to learn"}
            )
        if overlap.is_reciprocal:
            hints.append(
                {
                    "type": "success",
                    "message": "Great mutual match! You can both teach and learn from each other",
                }
            )

        mine, theirs = requester.user.location, target.user.location
        if mine and theirs and mine.strip().lower() == theirs.strip().lower():
            hints.append(
                {
                    "type": "info",
                    "message": "You're both in the same location - perfect for in-person sessions!",
                }
            )
        return hints

    def analyze(self, requester: SkillProfile, target: SkillProfile) -> MatchAnalysis:
        """Detailed analysis of a single pair."""
        overlap = self.compare(requester, target)
        return MatchAnalysis(
            target=target,
            overlap=overlap,
            compatibility=self.compatibility(len(overlap.teach), len(overlap.learn)),
            skill_level_compatibility=self.skill_level_compatibility(overlap),
            recommendations=self.recommendations(requester, target, overlap),
        )

    def rank_candidates(
        self, requester: SkillProfile, profiles: Iterable[SkillProfile], filters: MatchFilters
    ) -> List[CandidateMatch]:
        """All reciprocal candidates passing the filters, best first."""
        min_score = max(filters.min_score, 1)
        matches = []

        for profile in profiles:
            if profile.user_id == requester.user_id:
                continue
            if filters.location and not _contains(profile.user.location, filters.location):
                continue

            overlap = self.compare(requester, profile)
            if len(overlap.teach) < min_score or len(overlap.learn) < min_score:
                continue
            if filters.skill and not any(
                _contains(name, filters.skill)
                for name in overlap.teach_names() + overlap.learn_names()
            ):
                continue

            matches.append(
                CandidateMatch(
                    profile=profile,
                    overlap=overlap,
                    compatibility=self.compatibility(len(overlap.teach), len(overlap.learn)),
                )
            )

        matches.sort(
            key=lambda m: (
                -m.match_score,
                m.profile.user.name.lower(),
                m.profile.user.name,
                m.profile.user_id or 0,
            )
        )
        return matches

    def find_candidates(
        self, requester: SkillProfile, profiles: Iterable[SkillProfile], filters: MatchFilters
    ) -> MatchPage:
        """Ranked, filtered and paginated candidates for a requester."""
        self.logger.info(
            "Finding skill matches",
            user_id=requester.user_id,
            location=filters.location,
            skill=filters.skill,
            min_score=filters.min_score,
        )

        ranked = self.rank_candidates(requester, profiles, filters)
        page = ranked[filters.offset : filters.offset + filters.limit]

        self.logger.info(
            "Found skill matches",
            user_id=requester.user_id,
            total_matches=len(ranked),
            top_score=ranked[0].match_score if ranked else 0,
        )
        return MatchPage(candidates=page, total=len(ranked), filters=filters)

    def summarize(
        self, requester: SkillProfile, candidates: List[CandidateMatch]
    ) -> Dict[str, Any]:
        """Aggregate statistics over a requester's full candidate list."""
        can_teach: Dict[str, None] = {}
        can_learn: Dict[str, None] = {}
        demand: Counter = Counter()
        distribution = {"excellent": 0, "good": 0, "average": 0, "basic": 0}

        for candidate in candidates:
            for name in candidate.overlap.teach_names():
                can_teach.setdefault(name, None)
                demand[name] += 1
            for name in candidate.overlap.learn_names():
                can_learn.setdefault(name, None)

            score = candidate.match_score
            if score >= 5:
                distribution["excellent"] += 1
            elif score >= 3:
                distribution["good"] += 1
            elif score >= 2:
                distribution["average"] += 1
            else:
                distribution["basic"] += 1

        total_score = sum(c.match_score for c in candidates)
        average = _round_half_up(total_score / len(candidates), 2) if candidates else 0

        return {
            "totalPotentialMatches": len(candidates),
            "skillsYouCanTeach": list(can_teach),
            "skillsYouCanLearn": list(can_learn),
            "averageMatchScore": average,
            "topMatchingSkills": [
                {"skill": skill, "demandCount": count}
                for skill, count in demand.most_common(10)
            ],
            "matchQualityDistribution": distribution,
            "profileRecommendations": self.profile_recommendations(requester, len(candidates)),
        }

    @staticmethod
    def profile_recommendations(profile: SkillProfile, match_count: int) -> List[Dict[str, str]]:
        user = profile.user
        hints = []
        if not user.bio or len(user.bio.strip()) < 50:
            hints.append(
                {
                    "type": "improvement",
                    "message": "Add a detailed bio to attract more matches",
                    "impact": "medium",
                }
            )
        if not user.location:
            hints.append(
                {
                    "type": "improvement",
                    "message": "Add your location to find nearby skill partners",
                    "impact": "high",
                }
            )
        if len(profile.skills_have) < 3:
            hints.append(
                {
                    "type": "improvement",
                    "message": "Add more skills you can teach to increase match opportunities",
                    "impact": "high",
                }
            )
        if len(profile.skills_want) < 3:
            hints.append(
                {
                    "type": "improvement",
                    "message": "Add more skills you want to learn to find better matches",
                    "impact": "medium",
                }
            )
        if match_count == 0:
            hints.append(
                {
                    "type": "suggestion",
                    "message": "Try adding more popular skills or adjusting your skill preferences",
                    "impact": "high",
                }
            )
        return hints
