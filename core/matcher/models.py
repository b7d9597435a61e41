"""Outcome of a match generation run."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Tuple

from core.scorer.models import ScoredOpportunity


class MatchRunStatus(str, Enum):
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True)
class MatchRunResult:
    """
    Observable result of MatchEngine.generate_matches.

    A failed run carries the error text instead of raising, so callers
    (onboarding, CLI, HTTP) can continue and tests can assert on it.
    """
    profile_id: Any
    status: MatchRunStatus
    evaluated: int = 0
    matches: Tuple[ScoredOpportunity, ...] = field(default_factory=tuple)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == MatchRunStatus.COMPLETED

    @property
    def written(self) -> int:
        return len(self.matches)
