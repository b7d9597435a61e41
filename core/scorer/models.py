#!/usr/bin/env python3
"""
Scoring Models - Immutable values produced by the scoring rules.
"""

from typing import Optional, Tuple, Any
from dataclasses import dataclass, field

from core.scorer.constants import QUALIFYING_SCORE


@dataclass(frozen=True)
class SubScore:
    """Points awarded by one rule, with the reason shown to the volunteer (if any)."""
    points: int = 0
    reason: Optional[str] = None


NO_SCORE = SubScore()


@dataclass(frozen=True)
class MatchScore:
    """Total score of one opportunity for one volunteer."""
    score: int = 0
    reasons: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def combine(cls, *parts: SubScore) -> "MatchScore":
        return cls(
            score=sum(p.points for p in parts),
            reasons=tuple(p.reason for p in parts if p.reason)
        )

    @property
    def qualifies(self) -> bool:
        return self.score >= QUALIFYING_SCORE


@dataclass(frozen=True)
class ScoredOpportunity:
    """A qualifying opportunity ready to be written as a Match row."""
    opportunity_id: Any
    score: int
    reasons: Tuple[str, ...]
