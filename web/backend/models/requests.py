#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

import uuid
from pydantic import BaseModel, Field
from typing import List


class OnboardingRequest(BaseModel):
    """Answers submitted at the end of onboarding."""
    location: str = Field(default="", description="Free text, e.g. 'Austin, TX'")
    bio: str = Field(default="")
    interests: List[str] = Field(default_factory=list, description="Interest labels")
    availability: List[str] = Field(default_factory=list, description="Time-slot labels")
    skill_ids: List[uuid.UUID] = Field(default_factory=list, description="Skills the volunteer claims")
