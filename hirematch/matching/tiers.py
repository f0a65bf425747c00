from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from hirematch.models import NumericRange, ValidationError

from .types import MatchTier

MIN_SCORE = 0
MAX_SCORE = 100
BEST_MATCH_MIN_SCORE = 85
PARTIAL_MATCH_MIN_SCORE = 70

_TIER_LABELS: Dict[MatchTier, str] = {
    MatchTier.BEST: "Best Match (85%+)",
    MatchTier.PARTIAL: "Partial Match (70-84%)",
    MatchTier.LOW: "Low Match (Below 70%)",
}

_TIER_TONES: Dict[MatchTier, str] = {
    MatchTier.BEST: "green",
    MatchTier.PARTIAL: "yellow",
    MatchTier.LOW: "red",
}


class InvalidScoreError(ValidationError):
    """A match score outside [0, 100], or not an integer at all."""


@dataclass(frozen=True)
class TierPresentation:
    score: int
    tier: MatchTier
    label: str       # badge text, e.g. "95% Match"
    tier_label: str  # tab text, e.g. "Best Match (85%+)"
    tone: str        # badge colour

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "tier": self.tier.value,
            "label": self.label,
            "tier_label": self.tier_label,
            "tone": self.tone,
        }


def _check(score: Any) -> int:
    # Whole percentages only.
    if isinstance(score, bool) or not isinstance(score, int):
        raise InvalidScoreError(f"Match score must be an integer, got {score!r}")
    if not (MIN_SCORE <= score <= MAX_SCORE):
        raise InvalidScoreError(f"Match score must be within [{MIN_SCORE}, {MAX_SCORE}], got {score}")
    return score


def classify_match_score(score: Any) -> MatchTier:
    """
    Bucket an externally computed 0-100 score into a MatchTier.
    Out-of-range input raises InvalidScoreError; nothing is clamped.
    """
    s = _check(score)
    if s >= BEST_MATCH_MIN_SCORE:
        return MatchTier.BEST
    if s >= PARTIAL_MATCH_MIN_SCORE:
        return MatchTier.PARTIAL
    return MatchTier.LOW


def tier_bounds(tier: MatchTier) -> NumericRange:
    if tier is MatchTier.BEST:
        return NumericRange(BEST_MATCH_MIN_SCORE, MAX_SCORE)
    if tier is MatchTier.PARTIAL:
        return NumericRange(PARTIAL_MATCH_MIN_SCORE, BEST_MATCH_MIN_SCORE - 1)
    return NumericRange(MIN_SCORE, PARTIAL_MATCH_MIN_SCORE - 1)


def present_match_score(score: Any) -> TierPresentation:
    tier = classify_match_score(score)
    return TierPresentation(
        score=score,
        tier=tier,
        label=f"{score}% Match",
        tier_label=_TIER_LABELS[tier],
        tone=_TIER_TONES[tier],
    )
