from __future__ import annotations

import math
from datetime import datetime, timezone

import pytest

from hirematch.models import (
    Application,
    ApplicationStatus,
    CandidateProfile,
    EmploymentType,
    JobPosting,
    NumericRange,
    ValidationError,
)


def _job(**overrides) -> JobPosting:
    fields = dict(
        job_id="j1",
        title="  Backend   Engineer ",
        company="DataSystems",
        location="Austin, TX (Hybrid)",
        employment_type="Full-time",
        experience=NumericRange(4, 6),
        skills=["Go", "go", " PostgreSQL ", ""],
        salary=[110000, 140000],
    )
    fields.update(overrides)
    return JobPosting(**fields)


def test_numeric_range_rejects_min_above_max():
    with pytest.raises(ValidationError):
        NumericRange(10, 5)


def test_numeric_range_rejects_negative_and_non_numbers():
    with pytest.raises(ValidationError):
        NumericRange(-1, 5)
    with pytest.raises(ValidationError):
        NumericRange("3", 5)
    with pytest.raises(ValidationError):
        NumericRange(True, 5)


def test_numeric_range_exact_and_contains_inclusive():
    r = NumericRange(5, 10)
    assert r.contains(5) and r.contains(10)
    assert not r.contains(4.99)
    assert NumericRange.exact(7) == NumericRange(7, 7)
    assert NumericRange.exact(7).representative == 7


def test_numeric_range_coerce_shapes():
    assert NumericRange.coerce({"min": 1, "max": 3}) == NumericRange(1, 3)
    assert NumericRange.coerce([2, 4]) == NumericRange(2, 4)
    assert NumericRange.coerce(5) == NumericRange(5, 5)
    assert NumericRange.coerce(None) is None
    assert NumericRange.coerce({}) is None
    open_ended = NumericRange.coerce({"min": 3, "max": None})
    assert open_ended.high == math.inf and open_ended.is_open
    assert open_ended.to_dict() == {"min": 3, "max": None}
    with pytest.raises(ValidationError):
        NumericRange.coerce([1, 2, 3])
    with pytest.raises(ValidationError):
        NumericRange.coerce("4-6 years")


def test_employment_type_parse_accepts_display_spellings():
    assert EmploymentType.parse("Full-time") is EmploymentType.FULL_TIME
    assert EmploymentType.parse("part_time") is EmploymentType.PART_TIME
    assert EmploymentType.parse("FREELANCE") is EmploymentType.FREELANCE
    with pytest.raises(ValidationError):
        EmploymentType.parse("gig")


def test_job_posting_normalizes_fields():
    job = _job()
    assert job.title == "Backend Engineer"
    assert job.employment_type is EmploymentType.FULL_TIME
    assert job.skills == ["Go", "PostgreSQL"]
    assert job.salary == NumericRange(110000, 140000)


def test_job_posting_naive_posted_at_becomes_utc():
    job = _job(posted_at=datetime(2026, 10, 1, 9, 0))
    assert job.posted_at.tzinfo == timezone.utc


def test_job_posting_rejects_bad_score_and_inverted_salary():
    with pytest.raises(ValidationError):
        _job(match_score=101)
    with pytest.raises(ValidationError):
        _job(match_score=84.5)
    with pytest.raises(ValidationError):
        _job(salary=[150000, 100000])


def test_job_posting_dict_round_trip():
    job = _job(match_score=88, posted_at=datetime(2026, 10, 1, tzinfo=timezone.utc))
    again = JobPosting.from_dict(job.to_dict())
    assert again == job


def test_candidate_profile_experience_is_exact_range():
    c = CandidateProfile(candidate_id="c1", name="Jane", title="Designer", location="New York, NY", experience_years=5)
    assert c.experience == NumericRange(5, 5)
    assert c.resume_keywords is None


def test_candidate_profile_rejects_negative_or_fractional_years():
    with pytest.raises(ValidationError):
        CandidateProfile(candidate_id="c1", name="Jane", title="", location="", experience_years=-1)
    with pytest.raises(ValidationError):
        CandidateProfile(candidate_id="c1", name="Jane", title="", location="", experience_years=2.5)


def test_candidate_from_dict_keeps_absent_vs_empty_keywords():
    absent = CandidateProfile.from_dict({"id": "1", "name": "A", "experience": 1})
    empty = CandidateProfile.from_dict({"id": "2", "name": "B", "experience": 1, "resumeKeywords": []})
    assert absent.resume_keywords is None
    assert empty.resume_keywords == []


def test_application_from_store_document():
    app = Application.from_dict({
        "id": 3,
        "jobTitle": " Backend  Engineer",
        "company": "DataSystems",
        "location": "Austin, TX (Hybrid)",
        "appliedDate": "3 days ago",
        "status": "Rejected",
        "matchScore": 70,
    })
    assert app.application_id == "3"
    assert app.job_title == "Backend Engineer"
    assert app.status is ApplicationStatus.REJECTED
    assert Application.from_dict(app.to_dict()) == app


def test_application_status_defaults_to_pending_and_rejects_unknown():
    assert Application.from_dict({"id": 1, "company": "X"}).status is ApplicationStatus.PENDING
    with pytest.raises(ValidationError):
        Application(application_id="1", job_title="Dev", company="X", location="", status="ghosted")


def test_active_application_statuses():
    active = {s for s in ApplicationStatus if s.is_active}
    assert active == {ApplicationStatus.PENDING, ApplicationStatus.REVIEWING, ApplicationStatus.INTERVIEW}
