#!/usr/bin/env python3
"""
Match Engine - scores active opportunities for a volunteer and upserts the qualifying ones.

Run once after onboarding and again whenever the profile or skills change.
One run:
1. Reads active opportunities, the volunteer's skill ids and all categories
2. Prefetches opportunity skills with a single batched query
3. Scores each opportunity independently (core.scorer)
4. Upserts qualifying results keyed by (profile_id, opportunity_id)

Runs fail soft: errors are logged and returned in MatchRunResult, never raised.
Matches that no longer qualify are left in place.
"""
from datetime import datetime
from typing import Callable, Optional
import logging

from database.models import Profile
from database.repository import VolunteerRepository
from core.scorer import ScoringService
from core.matcher.models import MatchRunResult, MatchRunStatus

logger = logging.getLogger(__name__)


class MatchEngine:
    """
    Generates and persists volunteer/opportunity matches.

    Holds no state between runs; reruns with unchanged data rewrite the
    same scores and reasons onto the same rows.
    """

    def __init__(
        self,
        repo: VolunteerRepository,
        clock: Optional[Callable[[], datetime]] = None
    ):
        """
        Initialize the engine with its dependencies.

        Args:
            repo: Data access façade (reads + match upsert)
            clock: Optional callable returning the current UTC time
        """
        self.repo = repo
        self.scoring_service = ScoringService(clock=clock)

    def generate_matches(self, profile: Profile) -> MatchRunResult:
        """
        Compute and persist matches for one volunteer.

        Args:
            profile: Volunteer profile with id, location, interests and availability

        Returns:
            MatchRunResult; status FAILED with the error text if any read or write failed
        """
        profile_id = None
        try:
            profile_id = profile.id
            opportunities = self.repo.list_active_opportunities()
            volunteer_skill_ids = self.repo.list_skill_ids_for_profile(profile_id)
            categories = self.repo.list_categories()

            skills_by_opportunity = self.repo.list_opportunity_skills_for(
                [opp.id for opp in opportunities]
            )
            opportunity_skill_ids = {
                opp_id: [row.skill_id for row in rows]
                for opp_id, rows in skills_by_opportunity.items()
            }

            qualifying = self.scoring_service.score_opportunities(
                profile=profile,
                opportunities=opportunities,
                volunteer_skill_ids=volunteer_skill_ids,
                opportunity_skill_ids=opportunity_skill_ids,
                categories=categories
            )

            if qualifying:
                self.repo.upsert_matches([
                    {
                        'profile_id': profile_id,
                        'opportunity_id': scored.opportunity_id,
                        'match_score': scored.score,
                        'match_reasons': list(scored.reasons),
                    }
                    for scored in qualifying
                ])
                self.repo.commit()

        except Exception as e:
            logger.exception(f"Error generating matches for profile {profile_id}: {e}")
            self._safe_rollback()
            return MatchRunResult(
                profile_id=profile_id,
                status=MatchRunStatus.FAILED,
                error=str(e) or e.__class__.__name__
            )

        logger.info(
            f"Generated matches for profile {profile_id}: "
            f"{len(qualifying)} of {len(opportunities)} opportunities qualified"
        )
        return MatchRunResult(
            profile_id=profile_id,
            status=MatchRunStatus.COMPLETED,
            evaluated=len(opportunities),
            matches=tuple(qualifying)
        )

    def _safe_rollback(self) -> None:
        try:
            self.repo.rollback()
        except Exception as e:
            logger.warning(f"Rollback after failed match run also failed: {e}")
