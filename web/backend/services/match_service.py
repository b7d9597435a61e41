#!/usr/bin/env python3
"""
Match service - business logic for volunteer match operations.
"""

import logging
import uuid
from typing import List, Optional

from sqlalchemy.orm import Session

from database.models import Match
from database.repository import VolunteerRepository
from core.matcher import MatchEngine, MatchRunResult
from core.onboarding import OnboardingService, OnboardingData, ProfileNotFoundError
from ..models.requests import OnboardingRequest
from ..models.responses import MatchSummary, MatchRunResponse, ScoredMatch, MatchFlagResponse
from ..utils import safe_str, safe_list, safe_datetime_iso
from ..exceptions import MatchNotFoundException, ProfileNotFoundException

logger = logging.getLogger(__name__)


def _run_response(result: MatchRunResult) -> MatchRunResponse:
    return MatchRunResponse(
        success=result.ok,
        profile_id=str(result.profile_id),
        status=result.status.value,
        evaluated=result.evaluated,
        written=result.written,
        matches=[
            ScoredMatch(
                opportunity_id=str(scored.opportunity_id),
                match_score=scored.score,
                match_reasons=list(scored.reasons)
            )
            for scored in result.matches
        ],
        error=result.error
    )


class MatchService:
    """Service for generating and managing volunteer matches."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = VolunteerRepository(db)

    def _get_profile(self, profile_id: uuid.UUID):
        profile = self.repo.get_profile(profile_id)
        if profile is None:
            raise ProfileNotFoundException(f"Profile not found: {profile_id}")
        return profile

    def _get_match(self, match_id: uuid.UUID) -> Match:
        match = self.repo.get_match(match_id)
        if match is None:
            raise MatchNotFoundException(f"Match not found: {match_id}")
        return match

    def generate(self, profile_id: uuid.UUID) -> MatchRunResponse:
        """Run the match engine for a profile."""
        profile = self._get_profile(profile_id)
        return _run_response(MatchEngine(self.repo).generate_matches(profile))

    def complete_onboarding(self, profile_id: uuid.UUID, request: OnboardingRequest) -> MatchRunResponse:
        """Save onboarding answers and run the match engine."""
        service = OnboardingService(self.repo)
        try:
            result = service.complete_onboarding(
                profile_id,
                OnboardingData(**request.model_dump())
            )
        except ProfileNotFoundError as e:
            raise ProfileNotFoundException(str(e))
        return _run_response(result)

    def get_matches(
        self,
        profile_id: uuid.UUID,
        include_dismissed: bool = False,
        min_score: Optional[int] = None
    ) -> List[MatchSummary]:
        """
        Get a profile's matches, highest score first.

        Args:
            profile_id: Volunteer profile id.
            include_dismissed: Include matches the volunteer dismissed.
            min_score: Only return matches scoring at least this much.

        Returns:
            List of match summaries.
        """
        self._get_profile(profile_id)
        matches = self.repo.list_matches_for_profile(
            profile_id, include_dismissed=include_dismissed, min_score=min_score
        )

        summaries = []
        for match in matches:
            opportunity = match.opportunity
            summaries.append(MatchSummary(
                match_id=str(match.id),
                profile_id=str(match.profile_id),
                opportunity_id=str(match.opportunity_id),
                title=safe_str(opportunity.title if opportunity else None),
                organization=safe_str(opportunity.organization if opportunity else None),
                location=opportunity.location if opportunity else None,
                is_remote=bool(opportunity.is_remote) if opportunity else False,
                match_score=match.match_score,
                match_reasons=safe_list(match.match_reasons),
                viewed=bool(match.viewed),
                dismissed=bool(match.dismissed),
                created_at=safe_datetime_iso(match.created_at),
                updated_at=safe_datetime_iso(match.updated_at)
            ))
        return summaries

    def mark_viewed(self, match_id: uuid.UUID) -> MatchFlagResponse:
        match = self._get_match(match_id)
        self.repo.mark_viewed(match)
        self.repo.commit()
        return MatchFlagResponse(success=True, match_id=str(match.id), viewed=match.viewed, dismissed=match.dismissed)

    def dismiss(self, match_id: uuid.UUID) -> MatchFlagResponse:
        match = self._get_match(match_id)
        self.repo.set_dismissed(match, True)
        self.repo.commit()
        return MatchFlagResponse(success=True, match_id=str(match.id), viewed=match.viewed, dismissed=match.dismissed)
