from __future__ import annotations

import argparse
import json
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from hirematch import config
from hirematch.facets import status_counts, tier_counts
from hirematch.io.entity_loader import load_entities
from hirematch.io.resume_loader import load_resume_text
from hirematch.log import get_logger
from hirematch.matching.engine import CriteriaLike, coerce_criteria, filter_entities
from hirematch.matching.tiers import TierPresentation, present_match_score
from hirematch.matching.types import FilterCriteria
from hirematch.models import Application, CandidateProfile, JobPosting, NumericRange, ValidationError
from hirematch.resume_keywords import extract_resume_keywords, with_resume_keywords
from hirematch.session import EntityKind, SessionContext, UserRole

log = get_logger(__name__)


@dataclass(frozen=True)
class SearchMatch:
    entity: Any  # JobPosting, CandidateProfile or Application
    presentation: Optional[TierPresentation] = None  # None when the entity carries no score

    def to_dict(self) -> Dict[str, Any]:
        return {
            "entity": self.entity.to_dict(),
            "match": self.presentation.to_dict() if self.presentation else None,
        }


@dataclass(frozen=True)
class SearchResult:
    user_id: str
    role: UserRole
    kind: EntityKind
    total: int
    matches: List[SearchMatch]
    criteria: FilterCriteria
    tier_counts: Dict[str, int]
    duration_ms: int

    @property
    def is_empty(self) -> bool:
        return not self.matches

    def to_dict(self) -> Dict[str, Any]:
        return {
            "user_id": self.user_id,
            "role": self.role.value,
            "kind": self.kind.value,
            "total": self.total,
            "returned": len(self.matches),
            "criteria": self.criteria.to_dict(),
            "tier_counts": self.tier_counts,
            "matches": [m.to_dict() for m in self.matches],
            "duration_ms": self.duration_ms,
        }


def run_search(
        *,
        session: SessionContext,
        entities: Sequence[Any],
        criteria: CriteriaLike = None,
        search_fields: Optional[Sequence[str]] = None,
        kind: Optional[EntityKind] = None,
) -> SearchResult:
    """
    Filter the collection the session's role browses and attach tier badges.
    `kind` defaults to session.searchable_kind(); it must be one of the
    role's browsable kinds. ValidationError from bad criteria propagates;
    an empty result does not raise.
    """
    start = time.time()
    kind = session.searchable_kind() if kind is None else EntityKind(kind)
    if kind not in session.browsable_kinds():
        raise ValidationError(f"A {session.role.value} cannot browse {kind.value}")
    c = coerce_criteria(criteria)

    kept = filter_entities(entities, c, search_fields=search_fields)

    matches = []
    for e in kept:
        score = getattr(e, "match_score", None)
        matches.append(SearchMatch(entity=e, presentation=present_match_score(score) if score is not None else None))

    return SearchResult(
        user_id=session.user_id,
        role=session.role,
        kind=kind,
        total=len(entities),
        matches=matches,
        criteria=c,
        tier_counts=tier_counts(kept),
        duration_ms=int((time.time() - start) * 1000),
    )


def _format_range(r: Optional[NumericRange], unit: str = "") -> str:
    if r is None:
        return "-"
    if r.low == r.high:
        return f"{r.low:g}{unit}"
    if r.is_open:
        return f"{r.low:g}+{unit}"
    return f"{r.low:g}-{r.high:g}{unit}"


def print_human_summary(result: SearchResult) -> None:
    noun = result.kind.value
    print(f"\n=== HireMatch: {noun.title()} ===")
    print(f"User: {result.user_id} ({result.role.value})")
    active = result.criteria.to_dict()
    print(f"Filters: {json.dumps(active) if active else 'none'}")

    if result.is_empty:
        print(f"\nNo {noun} found. Try clearing some filters.")
        return

    print(f"Showing {len(result.matches)} of {result.total} {noun}")
    if result.kind is EntityKind.APPLICATIONS:
        counts = status_counts([m.entity for m in result.matches])
        print("Summary: " + ", ".join(f"{k} {v}" for k, v in counts.items()))
    for idx, m in enumerate(result.matches, start=1):
        e = m.entity
        badge = f"  [{m.presentation.label}]" if m.presentation else ""
        if isinstance(e, JobPosting):
            print(f"\n{idx}) {e.title} @ {e.company} - {e.location}{badge}")
            print(f"   type: {e.employment_type.value} | experience: {_format_range(e.experience, ' yrs')}"
                  f" | salary: {_format_range(e.salary)}")
        elif isinstance(e, CandidateProfile):
            print(f"\n{idx}) {e.name}, {e.title} - {e.location}{badge}")
            print(f"   experience: {e.experience_years} yrs | {e.education}")
        elif isinstance(e, Application):
            print(f"\n{idx}) {e.job_title} @ {e.company} - {e.location}{badge}")
            print(f"   status: {e.status.value} | applied: {e.applied_date or '-'}")
        if getattr(e, "skills", None):
            print(f"   skills: {', '.join(e.skills)}")


def _criteria_from_args(args: argparse.Namespace) -> FilterCriteria:
    def _range(low: Optional[float], high: Optional[float]) -> Optional[NumericRange]:
        if low is None and high is None:
            return None
        return NumericRange.coerce([low, high])

    return FilterCriteria(
        search_term=args.search,
        experience=_range(args.min_exp, args.max_exp),
        salary=_range(args.min_salary, args.max_salary),
        skills=tuple(args.skill or ()),
        location=args.location,
        resume_keyword=args.resume_keyword,
        match_tier=args.tier,
        employment_type=args.type,
        status=args.status,
    )


def _attach_resume(entities: List[Any], kind: EntityKind, resume: str, owner_id: str) -> List[Any]:
    if kind is not EntityKind.CANDIDATES:
        log.warning("--resume ignored: only employers browsing candidates can attach resume keywords")
        return entities
    if not any(e.candidate_id == owner_id for e in entities):
        log.warning("--resume ignored: no candidate with id %r (set --resume-for)", owner_id)
        return entities

    loaded = load_resume_text(resume)
    updated = []
    for e in entities:
        if e.candidate_id == owner_id and loaded.text:
            e = with_resume_keywords(e, extract_resume_keywords(loaded.text, skills=e.skills))
            log.info("Attached %d resume keywords to candidate %s", len(e.resume_keywords), e.candidate_id)
        updated.append(e)
    return updated


def main(argv: Optional[Sequence[str]] = None) -> int:
    cand_lo, cand_hi = config.DEFAULT_CANDIDATE_EXPERIENCE
    job_lo, job_hi = config.DEFAULT_JOB_EXPERIENCE
    sal_lo, sal_hi = config.DEFAULT_SALARY

    parser = argparse.ArgumentParser(description="HireMatch: filter jobs, candidates or applications from a local snapshot")
    parser.add_argument("--user-id", default="local-user", help="User identifier")
    parser.add_argument("--role", choices=[r.value for r in UserRole], default=UserRole.CANDIDATE.value,
                        help="candidate browses jobs (or their applications), employer browses candidates")
    parser.add_argument("--jobs", type=str, default="", help="Path to jobs.json snapshot")
    parser.add_argument("--candidates", type=str, default="", help="Path to candidates.json snapshot")
    parser.add_argument("--applications", type=str, default="",
                        help="Path to applications.json snapshot; a candidate browses applications instead of jobs")
    parser.add_argument("--search", type=str, default=None, help="Free-text search term")
    parser.add_argument("--min-exp", type=float, default=None,
                        help=f"Minimum years (slider spans {job_lo}-{job_hi} for jobs, {cand_lo}-{cand_hi} for candidates)")
    parser.add_argument("--max-exp", type=float, default=None, help="Maximum years")
    parser.add_argument("--min-salary", type=float, default=None,
                        help=f"Minimum annual USD (slider spans {sal_lo}-{sal_hi})")
    parser.add_argument("--max-salary", type=float, default=None, help="Maximum annual USD")
    parser.add_argument("--skill", action="append", help="Required skill (repeatable)")
    parser.add_argument("--location", type=str, default=None)
    parser.add_argument("--resume-keyword", type=str, default=None)
    parser.add_argument("--tier", choices=["all", "best", "partial", "low"], default=None)
    parser.add_argument("--type", type=str, default=None, help="Employment type, e.g. full-time")
    parser.add_argument("--status", type=str, default=None, help="Application status, e.g. interview")
    parser.add_argument("--resume", type=str, default="",
                        help="Resume .txt/.pdf; keywords are attached to the candidate given by --resume-for")
    parser.add_argument("--resume-for", type=str, default="", help="Candidate id that owns --resume")
    parser.add_argument("--json", action="store_true", help="Print JSON only (machine-readable)")
    args = parser.parse_args(argv)

    try:
        criteria = _criteria_from_args(args)
    except ValidationError as exc:
        print(f"[HireMatch] Invalid filter: {exc}", file=sys.stderr)
        return 2

    session = SessionContext(user_id=args.user_id, role=UserRole(args.role))
    kind = session.searchable_kind()
    if args.applications and EntityKind.APPLICATIONS in session.browsable_kinds():
        kind = EntityKind.APPLICATIONS

    snapshots = {
        EntityKind.JOBS: (args.jobs, config.default_jobs_path),
        EntityKind.CANDIDATES: (args.candidates, config.default_candidates_path),
        EntityKind.APPLICATIONS: (args.applications, config.default_applications_path),
    }
    raw_path, default_path = snapshots[kind]
    path = Path(raw_path) if raw_path else default_path()
    if not path.exists():
        print(f"\n[HireMatch] {kind.value} snapshot not found: {path}", file=sys.stderr)
        return 2

    try:
        entities = load_entities(path, kind)
    except ValidationError as exc:
        print(f"[HireMatch] Invalid snapshot: {exc}", file=sys.stderr)
        return 2

    if args.resume:
        entities = _attach_resume(entities, kind, args.resume, args.resume_for)

    result = run_search(session=session, entities=entities, criteria=criteria, kind=kind)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print_human_summary(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
