#!/usr/bin/env python3
"""
Scoring Module - rule-based match scoring.

Public API:
- ScoringService: scores a batch of opportunities for one volunteer
- score_opportunity: scores a single opportunity
- MatchScore / SubScore / ScoredOpportunity: immutable results

Split into focused modules:

- constants.py: Fixed rubric weights and the qualifying score
- rules.py: Independent sub-score calculators
- models.py: Result value types
- service.py: Composition of the rules
"""

from core.scorer.models import SubScore, MatchScore, ScoredOpportunity
from core.scorer.service import ScoringService, score_opportunity

__all__ = ['ScoringService', 'score_opportunity', 'SubScore', 'MatchScore', 'ScoredOpportunity']
