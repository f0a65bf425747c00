from .engine import explain_match, filter_entities
from .tiers import (
    BEST_MATCH_MIN_SCORE,
    PARTIAL_MATCH_MIN_SCORE,
    InvalidScoreError,
    TierPresentation,
    classify_match_score,
    present_match_score,
)
from .types import FilterCriteria, MatchTier

__all__ = [
    "filter_entities",
    "explain_match",
    "classify_match_score",
    "present_match_score",
    "FilterCriteria",
    "MatchTier",
    "TierPresentation",
    "InvalidScoreError",
    "BEST_MATCH_MIN_SCORE",
    "PARTIAL_MATCH_MIN_SCORE",
]
