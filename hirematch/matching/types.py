from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

from hirematch.models import (
    ApplicationStatus,
    EmploymentType,
    NumericRange,
    ValidationError,
    dedupe_tags,
    normalize_whitespace,
)

# Dropdown values that mean "no constraint". Free-text fields only treat blank input that way.
_NO_CONSTRAINT = {"", "all", "any"}


class MatchTier(str, Enum):
    BEST = "best"
    PARTIAL = "partial"
    LOW = "low"


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    v = normalize_whitespace(str(value))
    return v or None


def _selection_to_none(value: Optional[str]) -> Optional[str]:
    v = _blank_to_none(value)
    return None if v is None or v.lower() in _NO_CONSTRAINT else v


def _coerce_tier(raw: Any) -> Optional[MatchTier]:
    if raw is None or isinstance(raw, MatchTier):
        return raw
    key = normalize_whitespace(str(raw)).lower()
    if key in _NO_CONSTRAINT:
        return None
    try:
        return MatchTier(key)
    except ValueError:
        raise ValidationError(f"Unknown match tier: {raw!r}") from None


def _coerce_employment_type(raw: Any) -> Optional[EmploymentType]:
    if raw is None or isinstance(raw, EmploymentType):
        return raw
    if normalize_whitespace(str(raw)).lower() in _NO_CONSTRAINT:
        return None
    return EmploymentType.parse(raw)


def _coerce_status(raw: Any) -> Optional[ApplicationStatus]:
    if raw is None or isinstance(raw, ApplicationStatus):
        return raw
    if normalize_whitespace(str(raw)).lower() in _NO_CONSTRAINT:
        return None
    return ApplicationStatus.parse(raw)


@dataclass(frozen=True)
class FilterCriteria:
    """
    Narrowing constraints for one search interaction.
    Every field is optional; None (or blank) means the field imposes nothing.
    """
    search_term: Optional[str] = None
    experience: Optional[NumericRange] = None
    salary: Optional[NumericRange] = None
    skills: Tuple[str, ...] = field(default_factory=tuple)
    location: Optional[str] = None
    resume_keyword: Optional[str] = None
    match_tier: Optional[MatchTier] = None
    employment_type: Optional[EmploymentType] = None
    status: Optional[ApplicationStatus] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "search_term", _blank_to_none(self.search_term))
        object.__setattr__(self, "location", _selection_to_none(self.location))
        object.__setattr__(self, "resume_keyword", _blank_to_none(self.resume_keyword))
        skills = [self.skills] if isinstance(self.skills, str) else self.skills
        object.__setattr__(self, "skills", tuple(dedupe_tags(skills)))
        object.__setattr__(self, "match_tier", _coerce_tier(self.match_tier))
        object.__setattr__(self, "employment_type", _coerce_employment_type(self.employment_type))
        object.__setattr__(self, "status", _coerce_status(self.status))
        object.__setattr__(self, "experience", NumericRange.coerce(self.experience))
        object.__setattr__(self, "salary", NumericRange.coerce(self.salary))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FilterCriteria":
        """
        Build criteria from a plain mapping (query string, JSON body, UI state).
        Accepts camelCase and snake_case keys. Unknown keys are rejected so a
        typo doesn't silently widen the result.
        """
        aliases = {
            "search": "search_term",
            "searchTerm": "search_term",
            "search_term": "search_term",
            "experience": "experience",
            "experienceRange": "experience",
            "salary": "salary",
            "salaryRange": "salary",
            "skills": "skills",
            "location": "location",
            "resumeKeyword": "resume_keyword",
            "resumeKeywords": "resume_keyword",
            "resume_keyword": "resume_keyword",
            "matchTier": "match_tier",
            "matchCategory": "match_tier",
            "match_tier": "match_tier",
            "employmentType": "employment_type",
            "employment_type": "employment_type",
            "type": "employment_type",
            "status": "status",
            "statusFilter": "status",
        }
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            target = aliases.get(key)
            if target is None:
                raise ValidationError(f"Unknown filter field: {key!r}")
            kwargs[target] = value
        return cls(**kwargs)

    def validate(self) -> None:
        # Re-checks ranges in case a caller bypassed __post_init__ via object.__setattr__.
        for name in ("experience", "salary"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, NumericRange):
                raise ValidationError(f"{name} must be a NumericRange, got {value!r}")
            if value is not None and value.low > value.high:
                raise ValidationError(f"Invalid {name} range: min {value.low} is greater than max {value.high}")

    def active_filters(self) -> List[str]:
        active = []
        if self.search_term:
            active.append("search_term")
        if self.experience is not None:
            active.append("experience")
        if self.salary is not None:
            active.append("salary")
        if self.skills:
            active.append("skills")
        if self.location:
            active.append("location")
        if self.resume_keyword:
            active.append("resume_keyword")
        if self.match_tier is not None:
            active.append("match_tier")
        if self.employment_type is not None:
            active.append("employment_type")
        if self.status is not None:
            active.append("status")
        return active

    @property
    def is_empty(self) -> bool:
        return not self.active_filters()

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for name in self.active_filters():
            value = getattr(self, name)
            if isinstance(value, NumericRange):
                value = value.to_dict()
            elif isinstance(value, Enum):
                value = value.value
            elif isinstance(value, tuple):
                value = list(value)
            out[name] = value
        return out
