#!/usr/bin/env python3
"""
Onboarding Service - saves the profile answers and triggers match generation.

Profile and skill persistence errors propagate to the caller; match
generation afterwards is fail-soft and only reported in the result.
"""

from typing import List, Any, Optional, Callable
from datetime import datetime
import logging

from pydantic import BaseModel, Field

from database.repository import VolunteerRepository
from core.matcher import MatchEngine, MatchRunResult

logger = logging.getLogger(__name__)


class ProfileNotFoundError(Exception):
    """Raised when a profile id does not exist."""
    pass


class OnboardingData(BaseModel):
    """Answers collected by the onboarding flow."""
    location: str = ""
    bio: str = ""
    interests: List[str] = Field(default_factory=list)
    availability: List[str] = Field(default_factory=list)
    skill_ids: List[Any] = Field(default_factory=list)


class OnboardingService:
    def __init__(
        self,
        repo: VolunteerRepository,
        clock: Optional[Callable[[], datetime]] = None
    ):
        self.repo = repo
        self.engine = MatchEngine(repo, clock=clock)

    def complete_onboarding(self, profile_id: Any, data: OnboardingData) -> MatchRunResult:
        """
        Save onboarding answers, replace the volunteer's skills and generate matches.

        Raises:
            ProfileNotFoundError: if the profile does not exist
        """
        profile = self.repo.get_profile(profile_id)
        if profile is None:
            raise ProfileNotFoundError(f"Profile {profile_id} not found")

        try:
            self.repo.update_profile(
                profile,
                location=data.location,
                bio=data.bio,
                interests=list(data.interests),
                availability=list(data.availability),
            )
            self.repo.replace_volunteer_skills(profile.id, data.skill_ids)
            self.repo.commit()
        except Exception:
            self.repo.rollback()
            raise

        logger.info(f"Onboarding saved for profile {profile.id}; generating matches")
        return self.engine.generate_matches(profile)
