"""Matcher Module - match generation and persistence."""
from core.matcher.models import MatchRunResult, MatchRunStatus
from core.matcher.service import MatchEngine

__all__ = ['MatchEngine', 'MatchRunResult', 'MatchRunStatus']
