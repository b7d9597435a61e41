#!/usr/bin/env python3
"""
Scoring Service - rule-based relevance of opportunities for a volunteer.

Composes the independent rules in core.scorer.rules into one immutable
MatchScore per opportunity. Reasons keep rubric order:
skills, interests, location, availability (recency adds no reason).

Holds no database access; callers prefetch skills and categories.
"""

from datetime import datetime, timezone
from typing import List, Optional, Any, Dict, Callable, Iterable, Mapping
import logging

from database.models import Profile, Opportunity, Category
from core.scorer import rules
from core.scorer.models import MatchScore, ScoredOpportunity

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def score_opportunity(
    opportunity: Opportunity,
    profile: Profile,
    volunteer_skill_ids: Iterable[Any],
    opportunity_skill_ids: Iterable[Any],
    category: Optional[Category],
    now: datetime
) -> MatchScore:
    """Calculate the total score and reasons of one opportunity.

    The total is the plain sum of the sub-scores; only the skill
    sub-score is capped, so a total above 100 is possible.

    Args:
        opportunity: Opportunity being scored
        profile: Volunteer profile (location, interests, availability)
        volunteer_skill_ids: Skill ids the volunteer claims
        opportunity_skill_ids: Skill ids the opportunity asks for
        category: Category of the opportunity, or None if it cannot be resolved
        now: Reference time for the recency bonus

    Returns:
        MatchScore with score and ordered reasons
    """
    return MatchScore.combine(
        rules.skill_score(volunteer_skill_ids, opportunity_skill_ids),
        rules.interest_score(profile.interests or [], category.name if category else None),
        rules.location_score(profile.location, opportunity.location, bool(opportunity.is_remote)),
        rules.availability_score(profile.availability or []),
        rules.recency_score(opportunity.start_date, now),
    )


class ScoringService:
    """
    Scores a batch of opportunities for one volunteer and keeps the qualifying ones.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self.clock = clock or utc_now

    def score_opportunities(
        self,
        profile: Profile,
        opportunities: List[Opportunity],
        volunteer_skill_ids: Iterable[Any],
        opportunity_skill_ids: Mapping[Any, Iterable[Any]],
        categories: Iterable[Category]
    ) -> List[ScoredOpportunity]:
        """Score every opportunity and return those at or above the qualifying score.

        Args:
            profile: Volunteer profile
            opportunities: Active opportunities
            volunteer_skill_ids: Skill ids the volunteer claims
            opportunity_skill_ids: Map of opportunity id -> skill ids
            categories: All categories

        Returns:
            Qualifying opportunities sorted by score (highest first)
        """
        now = self.clock()
        volunteer_skill_ids = set(volunteer_skill_ids)
        categories_by_id: Dict[Any, Category] = {c.id: c for c in categories}

        qualifying = []
        for opportunity in opportunities:
            result = score_opportunity(
                opportunity=opportunity,
                profile=profile,
                volunteer_skill_ids=volunteer_skill_ids,
                opportunity_skill_ids=opportunity_skill_ids.get(opportunity.id, ()),
                category=categories_by_id.get(opportunity.category_id),
                now=now
            )
            logger.debug(f"Opportunity {opportunity.id}: score={result.score}, reasons={list(result.reasons)}")

            if result.qualifies:
                qualifying.append(ScoredOpportunity(
                    opportunity_id=opportunity.id,
                    score=result.score,
                    reasons=result.reasons
                ))

        qualifying.sort(key=lambda s: s.score, reverse=True)
        return qualifying
