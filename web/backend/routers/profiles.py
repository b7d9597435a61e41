#!/usr/bin/env python3
"""
Profile endpoints - onboarding, match generation and the match list.
"""

import logging
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..dependencies import get_db
from ..services.match_service import MatchService
from ..models.requests import OnboardingRequest
from ..models.responses import MatchesResponse, MatchRunResponse
from ..utils import parse_uuid

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/profiles", tags=["profiles"])


@router.post("/{profile_id}/onboarding", response_model=MatchRunResponse)
def complete_onboarding(
    profile_id: str,
    request: OnboardingRequest,
    db: Session = Depends(get_db)
):
    """
    Save onboarding answers and generate matches.

    A failed match run is reported in the body; the onboarding itself
    still succeeds.
    """
    service = MatchService(db)
    return service.complete_onboarding(parse_uuid(profile_id, "profile_id"), request)


@router.post("/{profile_id}/matches/generate", response_model=MatchRunResponse)
def generate_matches(
    profile_id: str,
    db: Session = Depends(get_db)
):
    """Recompute matches for a profile after its interests, availability or skills changed."""
    service = MatchService(db)
    return service.generate(parse_uuid(profile_id, "profile_id"))


@router.get("/{profile_id}/matches", response_model=MatchesResponse)
def get_matches(
    profile_id: str,
    include_dismissed: bool = Query(default=False, description="Include dismissed matches"),
    min_score: int = Query(default=None, ge=0, description="Minimum match score filter"),
    db: Session = Depends(get_db)
):
    """
    Get a profile's matches sorted by score (highest first).
    """
    service = MatchService(db)
    matches = service.get_matches(
        parse_uuid(profile_id, "profile_id"),
        include_dismissed=include_dismissed,
        min_score=min_score
    )

    return MatchesResponse(
        success=True,
        count=len(matches),
        matches=matches
    )
