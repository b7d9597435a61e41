#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class MatchSummary(BaseModel):
    """A persisted match with the opportunity fields the dashboard shows."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "match_id": "550e8400-e29b-41d4-a716-446655440000",
                "profile_id": "9b2f4c1e-3d4a-4b8e-8f1a-2c7d5e6f7a8b",
                "opportunity_id": "6ba7b810-9dad-11d1-80b4-00c04fd430c8",
                "title": "Dog Walking Volunteer",
                "organization": "Austin Animal Shelter",
                "location": "Austin Animal Shelter",
                "is_remote": False,
                "match_score": 80,
                "match_reasons": ["1 matching skill", "Matches your interests", "In your area", "Fits your availability"],
                "viewed": False,
                "dismissed": False,
                "created_at": "2026-02-01T12:00:00",
                "updated_at": "2026-02-01T12:00:00"
            }
        }
    )

    match_id: str
    profile_id: str
    opportunity_id: str
    title: str
    organization: str
    location: Optional[str]
    is_remote: bool
    # Totals are not clamped, so scores above 100 are valid
    match_score: int = Field(ge=0)
    match_reasons: List[str]
    viewed: bool = False
    dismissed: bool = False
    created_at: Optional[str]
    updated_at: Optional[str]


class MatchesResponse(BaseModel):
    """Response for match list."""
    success: bool
    count: int
    matches: List[MatchSummary]


class ScoredMatch(BaseModel):
    """A qualifying opportunity written by a match run."""
    opportunity_id: str
    match_score: int
    match_reasons: List[str]


class MatchRunResponse(BaseModel):
    """Outcome of a match generation run. Engine failures are reported, not raised."""
    success: bool
    profile_id: str
    status: str
    evaluated: int = 0
    written: int = 0
    matches: List[ScoredMatch] = Field(default_factory=list)
    error: Optional[str] = None


class MatchFlagResponse(BaseModel):
    """Response after marking a match viewed or dismissed."""
    success: bool
    match_id: str
    viewed: bool
    dismissed: bool
