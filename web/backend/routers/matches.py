#!/usr/bin/env python3
"""
Match endpoints - mark matches viewed or dismissed.
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..dependencies import get_db
from ..services.match_service import MatchService
from ..models.responses import MatchFlagResponse
from ..utils import parse_uuid

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/matches", tags=["matches"])


@router.post("/{match_id}/view", response_model=MatchFlagResponse)
def mark_match_viewed(
    match_id: str,
    db: Session = Depends(get_db)
):
    """Mark a match as viewed."""
    service = MatchService(db)
    return service.mark_viewed(parse_uuid(match_id, "match_id"))


@router.post("/{match_id}/dismiss", response_model=MatchFlagResponse)
def dismiss_match(
    match_id: str,
    db: Session = Depends(get_db)
):
    """
    Dismiss a match.

    Dismissed matches are hidden from the default list and stay
    dismissed when matches are regenerated.
    """
    service = MatchService(db)
    return service.dismiss(parse_uuid(match_id, "match_id"))
