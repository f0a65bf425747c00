from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence


class ValidationError(ValueError):
    """Raised when a record, range, criteria object or score breaks an invariant."""


class EmploymentType(str, Enum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CONTRACT = "contract"
    FREELANCE = "freelance"
    INTERNSHIP = "internship"

    @classmethod
    def parse(cls, raw: Any) -> "EmploymentType":
        if isinstance(raw, cls):
            return raw
        key = normalize_whitespace(str(raw or "")).lower().replace("_", "-").replace(" ", "-")
        for member in cls:
            if member.value == key:
                return member
        raise ValidationError(f"Unknown employment type: {raw!r}")


class ApplicationStatus(str, Enum):
    PENDING = "pending"
    REVIEWING = "reviewing"
    INTERVIEW = "interview"
    REJECTED = "rejected"
    OFFERED = "offered"
    ACCEPTED = "accepted"
    WITHDRAWN = "withdrawn"

    @classmethod
    def parse(cls, raw: Any) -> "ApplicationStatus":
        if isinstance(raw, cls):
            return raw
        key = normalize_whitespace(str(raw or "")).lower()
        for member in cls:
            if member.value == key:
                return member
        raise ValidationError(f"Unknown application status: {raw!r}")

    @property
    def is_active(self) -> bool:
        return self in (ApplicationStatus.PENDING, ApplicationStatus.REVIEWING, ApplicationStatus.INTERVIEW)


def normalize_whitespace(text: str) -> str:
    return " ".join((text or "").split()).strip()


def dedupe_tags(tags: Optional[Sequence[str]]) -> List[str]:
    """Trim tags and drop blanks and case-insensitive repeats (first spelling wins)."""
    out: List[str] = []
    seen = set()
    for t in tags or []:
        nt = normalize_whitespace(t)
        key = nt.lower()
        if nt and key not in seen:
            out.append(nt)
            seen.add(key)
    return out


@dataclass(frozen=True)
class NumericRange:
    """
    Inclusive [low, high] range. Single values are stored as low == high.
    `high` may be math.inf for open-ended filter ranges.
    """
    low: float
    high: float

    def __post_init__(self) -> None:
        for name in ("low", "high"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or math.isnan(value):
                raise ValidationError(f"Range {name} must be a number, got {value!r}")
        if self.low < 0:
            raise ValidationError(f"Range lower bound must be >= 0, got {self.low}")
        if self.low > self.high:
            raise ValidationError(f"Invalid range: min {self.low} is greater than max {self.high}")

    @classmethod
    def exact(cls, value: float) -> "NumericRange":
        return cls(value, value)

    @classmethod
    def at_least(cls, value: float) -> "NumericRange":
        return cls(value, math.inf)

    @classmethod
    def coerce(cls, raw: Any) -> Optional["NumericRange"]:
        """
        Accepts a NumericRange, {"min": .., "max": ..}, a [min, max] pair or a single number.
        None (or an empty mapping/list) means "no range".
        """
        if raw is None or isinstance(raw, cls):
            return raw
        if isinstance(raw, Mapping):
            if not raw:
                return None
            low = raw.get("min", raw.get("low"))
            high = raw.get("max", raw.get("high"))
            if low is None and high is None:
                return None
            return cls(0 if low is None else low, math.inf if high is None else high)
        if isinstance(raw, (list, tuple)):
            if not raw:
                return None
            if len(raw) != 2:
                raise ValidationError(f"Range must have exactly two bounds, got {list(raw)!r}")
            low, high = raw
            return cls(0 if low is None else low, math.inf if high is None else high)
        if isinstance(raw, (int, float)) and not isinstance(raw, bool):
            return cls.exact(raw)
        raise ValidationError(f"Cannot interpret {raw!r} as a numeric range")

    @property
    def representative(self) -> float:
        # Ranged entity values are compared through their lower bound.
        return self.low

    @property
    def is_open(self) -> bool:
        return math.isinf(self.high)

    def contains(self, value: float) -> bool:
        return self.low <= value <= self.high

    def to_dict(self) -> Dict[str, Any]:
        return {"min": self.low, "max": None if self.is_open else self.high}


def _check_score(score: Optional[int]) -> None:
    if score is None:
        return
    if isinstance(score, bool) or not isinstance(score, int) or not (0 <= score <= 100):
        raise ValidationError(f"match_score must be an integer within [0, 100], got {score!r}")


def _parse_dt(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError as exc:
        raise ValidationError(f"Invalid timestamp: {value!r}") from exc


def _pick(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for k in keys:
        if k in data and data[k] is not None:
            return data[k]
    return default


@dataclass(frozen=True)
class JobPosting:
    """
    A job listing as stored in the document store.
    Salary is annual USD; experience is the required years range.
    """
    job_id: str
    title: str
    company: str
    location: str
    employment_type: EmploymentType
    experience: NumericRange
    description: str = ""
    skills: List[str] = field(default_factory=list)
    salary: Optional[NumericRange] = None
    company_logo: Optional[str] = None
    posted_at: Optional[datetime] = None
    match_score: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "title", normalize_whitespace(self.title))
        object.__setattr__(self, "company", normalize_whitespace(self.company))
        object.__setattr__(self, "location", normalize_whitespace(self.location))
        object.__setattr__(self, "description", normalize_whitespace(self.description))
        object.__setattr__(self, "employment_type", EmploymentType.parse(self.employment_type))
        object.__setattr__(self, "skills", dedupe_tags(self.skills))

        if not isinstance(self.experience, NumericRange):
            object.__setattr__(self, "experience", NumericRange.coerce(self.experience))
        if self.experience is None:
            raise ValidationError(f"Job {self.job_id!r} has no experience range")
        if self.salary is not None and not isinstance(self.salary, NumericRange):
            object.__setattr__(self, "salary", NumericRange.coerce(self.salary))

        if self.posted_at is not None and self.posted_at.tzinfo is None:
            object.__setattr__(self, "posted_at", self.posted_at.replace(tzinfo=timezone.utc))
        _check_score(self.match_score)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "JobPosting":
        return cls(
            job_id=str(_pick(data, "id", "job_id", default="")),
            title=data["title"],
            company=data["company"],
            location=_pick(data, "location", default=""),
            employment_type=_pick(data, "type", "employment_type", "employmentType"),
            experience=NumericRange.coerce(data["experience"]),
            description=_pick(data, "description", default=""),
            skills=list(_pick(data, "skills", default=[])),
            salary=NumericRange.coerce(data.get("salary")),
            company_logo=_pick(data, "companyLogo", "company_logo"),
            posted_at=_parse_dt(_pick(data, "postedAt", "posted_at")),
            match_score=_pick(data, "matchScore", "match_score"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.job_id,
            "title": self.title,
            "company": self.company,
            "companyLogo": self.company_logo,
            "location": self.location,
            "type": self.employment_type.value,
            "postedAt": self.posted_at.isoformat() if self.posted_at else None,
            "salary": self.salary.to_dict() if self.salary else None,
            "experience": self.experience.to_dict(),
            "skills": list(self.skills),
            "description": self.description,
            "matchScore": self.match_score,
        }


@dataclass(frozen=True)
class CandidateProfile:
    """
    A candidate as seen by employers. match_score is computed elsewhere
    against one job and only carried here.
    """
    candidate_id: str
    name: str
    title: str
    location: str
    experience_years: int
    skills: List[str] = field(default_factory=list)
    education: str = ""
    resume_keywords: Optional[List[str]] = None  # None = never extracted
    match_score: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", normalize_whitespace(self.name))
        object.__setattr__(self, "title", normalize_whitespace(self.title))
        object.__setattr__(self, "location", normalize_whitespace(self.location))
        object.__setattr__(self, "education", normalize_whitespace(self.education))
        object.__setattr__(self, "skills", dedupe_tags(self.skills))
        if self.resume_keywords is not None:
            object.__setattr__(self, "resume_keywords", dedupe_tags(self.resume_keywords))

        years = self.experience_years
        if isinstance(years, bool) or not isinstance(years, int) or years < 0:
            raise ValidationError(f"experience_years must be a non-negative integer, got {years!r}")
        _check_score(self.match_score)

    @property
    def experience(self) -> NumericRange:
        return NumericRange.exact(self.experience_years)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CandidateProfile":
        keywords = _pick(data, "resumeKeywords", "resume_keywords")
        return cls(
            candidate_id=str(_pick(data, "id", "candidate_id", default="")),
            name=data["name"],
            title=_pick(data, "title", default=""),
            location=_pick(data, "location", default=""),
            experience_years=_pick(data, "experience", "experience_years", default=0),
            skills=list(_pick(data, "skills", default=[])),
            education=_pick(data, "education", default=""),
            resume_keywords=list(keywords) if keywords is not None else None,
            match_score=_pick(data, "matchScore", "match_score"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.candidate_id,
            "name": self.name,
            "title": self.title,
            "location": self.location,
            "experience": self.experience_years,
            "skills": list(self.skills),
            "education": self.education,
            "resumeKeywords": list(self.resume_keywords) if self.resume_keywords is not None else None,
            "matchScore": self.match_score,
        }


@dataclass(frozen=True)
class Application:
    """
    A candidate's application to one job, as listed on their applications page.
    applied_date is display text from the store ("2 days ago"), kept verbatim.
    """
    application_id: str
    job_title: str
    company: str
    location: str
    status: ApplicationStatus = ApplicationStatus.PENDING
    applied_date: str = ""
    company_logo: Optional[str] = None
    match_score: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "job_title", normalize_whitespace(self.job_title))
        object.__setattr__(self, "company", normalize_whitespace(self.company))
        object.__setattr__(self, "location", normalize_whitespace(self.location))
        object.__setattr__(self, "applied_date", normalize_whitespace(self.applied_date))
        object.__setattr__(self, "status", ApplicationStatus.parse(self.status))
        _check_score(self.match_score)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Application":
        return cls(
            application_id=str(_pick(data, "id", "application_id", default="")),
            job_title=_pick(data, "jobTitle", "job_title", default=""),
            company=data["company"],
            location=_pick(data, "location", default=""),
            status=_pick(data, "status", default=ApplicationStatus.PENDING),
            applied_date=_pick(data, "appliedDate", "applied_date", default=""),
            company_logo=_pick(data, "companyLogo", "company_logo"),
            match_score=_pick(data, "matchScore", "match_score"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.application_id,
            "jobTitle": self.job_title,
            "company": self.company,
            "companyLogo": self.company_logo,
            "location": self.location,
            "appliedDate": self.applied_date,
            "status": self.status.value,
            "matchScore": self.match_score,
        }
