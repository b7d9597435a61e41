#!/usr/bin/env python3
"""
Scoring Rules - Independent sub-score calculators.

Each rule is a pure function of its inputs and returns a SubScore:
- skill_score: shared skills between volunteer and opportunity (capped)
- interest_score: volunteer interests vs opportunity category name
- location_score: remote bonus, or local bonus on city match
- availability_score: flat bonus when any availability is given
- recency_score: silent bonus for opportunities starting 1-4 weeks out
"""

from datetime import date, datetime, timedelta, timezone
from typing import Iterable, Optional, Sequence, Any

from core.scorer.constants import (
    SKILL_POINTS, SKILL_POINTS_CAP, INTEREST_POINTS, REMOTE_POINTS, LOCAL_POINTS,
    AVAILABILITY_POINTS, RECENCY_POINTS, RECENCY_MIN_DAYS, RECENCY_MAX_DAYS,
)
from core.scorer.models import SubScore, NO_SCORE

REASON_INTERESTS = "Matches your interests"
REASON_REMOTE = "Remote opportunity"
REASON_LOCAL = "In your area"
REASON_AVAILABILITY = "Fits your availability"


def skill_reason(match_count: int) -> str:
    return f"{match_count} matching skill{'s' if match_count > 1 else ''}"


def skill_score(
    volunteer_skill_ids: Iterable[Any],
    opportunity_skill_ids: Iterable[Any]
) -> SubScore:
    """
    Score shared skills. Required and optional skills count the same.

    Formula: min(SKILL_POINTS_CAP, shared * SKILL_POINTS)
    """
    match_count = len(set(volunteer_skill_ids) & set(opportunity_skill_ids))
    if match_count == 0:
        return NO_SCORE
    return SubScore(min(SKILL_POINTS_CAP, match_count * SKILL_POINTS), skill_reason(match_count))


def interest_matches_category(interest: str, category_name: str) -> bool:
    interest = interest.lower()
    category_name = category_name.lower()
    return category_name in interest or interest in category_name


def interest_score(interests: Sequence[str], category_name: Optional[str]) -> SubScore:
    """Award interest points once if any interest and the category name contain one another."""
    if category_name is None:
        return NO_SCORE
    if any(interest_matches_category(interest, category_name) for interest in interests or ()):
        return SubScore(INTEREST_POINTS, REASON_INTERESTS)
    return NO_SCORE


def location_score(
    volunteer_location: Optional[str],
    opportunity_location: Optional[str],
    is_remote: bool
) -> SubScore:
    """
    Remote opportunities get the remote bonus and never the local one.

    Otherwise the first comma-separated segment of the volunteer's location
    (the city) must appear in the opportunity location, case-insensitively.
    """
    if is_remote:
        return SubScore(REMOTE_POINTS, REASON_REMOTE)

    volunteer_location = (volunteer_location or '').lower()
    if not volunteer_location:
        return NO_SCORE

    city = volunteer_location.split(',')[0]
    if city in (opportunity_location or '').lower():
        return SubScore(LOCAL_POINTS, REASON_LOCAL)
    return NO_SCORE


def availability_score(availability: Sequence[str]) -> SubScore:
    # Presence only; slots are not compared against the opportunity schedule
    if availability:
        return SubScore(AVAILABILITY_POINTS, REASON_AVAILABILITY)
    return NO_SCORE


def _as_utc(value: Any) -> datetime:
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def days_until(start_date: Any, now: datetime) -> int:
    """Whole days from now until start_date, rounded down (negative when past)."""
    return (_as_utc(start_date) - _as_utc(now)) // timedelta(days=1)


def recency_score(start_date: Optional[date], now: datetime) -> SubScore:
    """Silent bonus (no reason) for opportunities starting between 7 and 30 days out."""
    if start_date is None:
        return NO_SCORE
    if RECENCY_MIN_DAYS <= days_until(start_date, now) <= RECENCY_MAX_DAYS:
        return SubScore(RECENCY_POINTS)
    return NO_SCORE
