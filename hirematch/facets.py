from __future__ import annotations

import re
from typing import Any, Dict, List, Sequence

from hirematch.core.text_processing import fold
from hirematch.matching.tiers import classify_match_score
from hirematch.matching.types import MatchTier
from hirematch.models import ApplicationStatus

# "Austin, TX (Hybrid)" -> "Austin, TX"
_WORK_MODE_SUFFIX_RE = re.compile(r"\s*\([^)]*\)\s*$")


def _first_seen_folded(values: Sequence[str]) -> List[str]:
    seen = set()
    out: List[str] = []
    for v in values:
        key = fold(v)
        if key and key not in seen:
            out.append(v)
            seen.add(key)
    return out


def available_skills(entities: Sequence[Any]) -> List[str]:
    """Skill pick-list for the filter panel, in first-seen order."""
    return _first_seen_folded([s for e in entities for s in (getattr(e, "skills", None) or [])])


def base_location(location: str) -> str:
    return _WORK_MODE_SUFFIX_RE.sub("", location or "").strip()


def available_locations(entities: Sequence[Any]) -> List[str]:
    return _first_seen_folded([base_location(getattr(e, "location", "") or "") for e in entities])


def tier_counts(entities: Sequence[Any]) -> Dict[str, int]:
    """
    Counts behind the "All / Best / Partial / Low" tabs.
    Entities without a match score only count towards "all".
    """
    counts = {"all": len(entities)}
    for tier in MatchTier:
        counts[tier.value] = 0
    for e in entities:
        score = getattr(e, "match_score", None)
        if score is None:
            continue
        counts[classify_match_score(score).value] += 1
    return counts


def status_counts(applications: Sequence[Any]) -> Dict[str, int]:
    """
    Figures for the application summary card.
    "active" is pending + reviewing + interview; "offers" is offered + accepted.
    """
    statuses = [ApplicationStatus.parse(getattr(a, "status", None)) for a in applications]
    return {
        "total": len(statuses),
        "active": sum(1 for s in statuses if s.is_active),
        "interview": statuses.count(ApplicationStatus.INTERVIEW),
        "offers": sum(1 for s in statuses if s in (ApplicationStatus.OFFERED, ApplicationStatus.ACCEPTED)),
        "rejected": statuses.count(ApplicationStatus.REJECTED),
    }
