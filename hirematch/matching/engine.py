from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from hirematch.models import Application, CandidateProfile, JobPosting, ValidationError

from .predicates import (
    has_all_skills,
    matches_employment_type,
    matches_location,
    matches_resume_keyword,
    matches_search_term,
    matches_status,
    matches_tier,
    within_range,
)
from .types import FilterCriteria

DEFAULT_JOB_SEARCH_FIELDS: Tuple[str, ...] = ("title", "company", "description", "skills")
DEFAULT_CANDIDATE_SEARCH_FIELDS: Tuple[str, ...] = ("name", "title", "skills")
DEFAULT_APPLICATION_SEARCH_FIELDS: Tuple[str, ...] = ("job_title", "company", "location")

CriteriaLike = Union[FilterCriteria, Mapping[str, Any], None]


def coerce_criteria(criteria: CriteriaLike) -> FilterCriteria:
    if criteria is None:
        return FilterCriteria()
    if isinstance(criteria, FilterCriteria):
        criteria.validate()
        return criteria
    if isinstance(criteria, Mapping):
        return FilterCriteria.from_dict(criteria)
    raise ValidationError(f"Unsupported criteria type: {type(criteria).__name__}")


def default_search_fields(entity: Any) -> Tuple[str, ...]:
    if isinstance(entity, CandidateProfile):
        return DEFAULT_CANDIDATE_SEARCH_FIELDS
    if isinstance(entity, JobPosting):
        return DEFAULT_JOB_SEARCH_FIELDS
    if isinstance(entity, Application):
        return DEFAULT_APPLICATION_SEARCH_FIELDS
    # Duck-typed records: applications have a job_title, candidates a name, jobs a company.
    if hasattr(entity, "job_title"):
        return DEFAULT_APPLICATION_SEARCH_FIELDS
    if hasattr(entity, "name") and not hasattr(entity, "company"):
        return DEFAULT_CANDIDATE_SEARCH_FIELDS
    return DEFAULT_JOB_SEARCH_FIELDS


def _checks(
        criteria: FilterCriteria,
        search_fields: Optional[Sequence[str]],
) -> List[Tuple[str, Callable[[Any], bool]]]:
    """One (name, predicate) pair per active filter, in evaluation order."""
    checks: List[Tuple[str, Callable[[Any], bool]]] = []
    if criteria.search_term:
        checks.append((
            "search_term",
            lambda e: matches_search_term(e, criteria.search_term, search_fields or default_search_fields(e)),
        ))
    if criteria.experience is not None:
        checks.append(("experience", lambda e: within_range(getattr(e, "experience", None), criteria.experience)))
    if criteria.salary is not None:
        checks.append(("salary", lambda e: within_range(getattr(e, "salary", None), criteria.salary)))
    if criteria.skills:
        checks.append(("skills", lambda e: has_all_skills(getattr(e, "skills", None), criteria.skills)))
    if criteria.location:
        checks.append(("location", lambda e: matches_location(getattr(e, "location", None), criteria.location)))
    if criteria.resume_keyword:
        checks.append((
            "resume_keyword",
            lambda e: matches_resume_keyword(getattr(e, "resume_keywords", None), criteria.resume_keyword),
        ))
    if criteria.match_tier is not None:
        checks.append(("match_tier", lambda e: matches_tier(getattr(e, "match_score", None), criteria.match_tier)))
    if criteria.employment_type is not None:
        checks.append((
            "employment_type",
            lambda e: matches_employment_type(getattr(e, "employment_type", None), criteria.employment_type),
        ))
    if criteria.status is not None:
        checks.append(("status", lambda e: matches_status(getattr(e, "status", None), criteria.status)))
    return checks


def filter_entities(
        entities: Sequence[Any],
        criteria: CriteriaLike = None,
        *,
        search_fields: Optional[Sequence[str]] = None,
) -> List[Any]:
    """
    Stable conjunctive filter: keep every entity that passes all active
    filters, in input order. Criteria are validated before any entity is read.
    """
    c = coerce_criteria(criteria)
    checks = _checks(c, search_fields)
    if not checks:
        return list(entities)
    return [e for e in entities if all(check(e) for _, check in checks)]


def explain_match(
        entity: Any,
        criteria: CriteriaLike,
        *,
        search_fields: Optional[Sequence[str]] = None,
) -> Dict[str, bool]:
    """Pass/fail per active filter, e.g. {"skills": True, "location": False}."""
    c = coerce_criteria(criteria)
    return {name: check(entity) for name, check in _checks(c, search_fields)}
