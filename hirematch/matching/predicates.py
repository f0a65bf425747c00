from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence

from hirematch.core.text_processing import contains_folded, fold
from hirematch.models import ApplicationStatus, EmploymentType, NumericRange

from .tiers import classify_match_score
from .types import MatchTier


def _field_values(entity: Any, field_name: str) -> Iterable[str]:
    value = getattr(entity, field_name, None)
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple, set, frozenset)):
        return [v for v in value if isinstance(v, str)]
    return [str(value)]


def matches_search_term(entity: Any, term: Optional[str], fields: Sequence[str]) -> bool:
    """Term is a substring of any searchable field; list fields are checked item by item."""
    if not term:
        return True
    return any(contains_folded(v, term) for f in fields for v in _field_values(entity, f))


def _as_range(value: Any) -> Optional[NumericRange]:
    if value is None or isinstance(value, NumericRange):
        return value
    return NumericRange.coerce(value)


def within_range(value: Any, bounds: Optional[NumericRange]) -> bool:
    """
    Inclusive check of an entity value against a filter range.
    Ranged entity values (job experience "4-6 years") use their lower bound.
    A missing entity value fails an active range.
    """
    if bounds is None:
        return True
    r = _as_range(value)
    if r is None:
        return False
    return bounds.contains(r.representative)


def has_all_skills(entity_skills: Optional[Sequence[str]], required: Sequence[str]) -> bool:
    if not required:
        return True
    owned = {fold(s) for s in entity_skills or []}
    return all(fold(s) in owned for s in required)


def matches_location(entity_location: Optional[str], selected: Optional[str]) -> bool:
    if not selected:
        return True
    return contains_folded(entity_location or "", selected)


def matches_resume_keyword(keywords: Optional[Sequence[str]], term: Optional[str]) -> bool:
    if not term:
        return True
    if keywords is None:
        return False
    return any(contains_folded(k, term) for k in keywords)


def matches_tier(score: Optional[int], tier: Optional[MatchTier]) -> bool:
    if tier is None:
        return True
    if score is None:
        return False
    return classify_match_score(score) is tier


def matches_employment_type(entity_type: Optional[EmploymentType], wanted: Optional[EmploymentType]) -> bool:
    if wanted is None:
        return True
    if entity_type is None:
        return False
    return EmploymentType.parse(entity_type) is wanted


def matches_status(entity_status: Optional[ApplicationStatus], wanted: Optional[ApplicationStatus]) -> bool:
    if wanted is None:
        return True
    if entity_status is None:
        return False
    return ApplicationStatus.parse(entity_status) is wanted
