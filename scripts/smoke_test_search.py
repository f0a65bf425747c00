from __future__ import annotations

import sys
from pathlib import Path
from pprint import pprint

from hirematch.facets import available_locations, available_skills
from hirematch.io.entity_loader import load_entities
from hirematch.matching import FilterCriteria
from hirematch.search import run_search
from hirematch.session import EntityKind, SessionContext, UserRole

FIXTURES = Path(__file__).resolve().parent.parent / "tests" / "fixtures"


def main() -> int:
    jobs_path = FIXTURES / "jobs.json"
    candidates_path = FIXTURES / "candidates.json"
    if not jobs_path.exists() or not candidates_path.exists():
        print(f"ERROR: fixtures not found under {FIXTURES}")
        return 2

    print("=== HireMatch Smoke Test: Search ===")

    # --- Candidate browsing jobs ---
    jobs = load_entities(jobs_path, EntityKind.JOBS)
    print(f"Jobs loaded: {len(jobs)}")
    print(f"Skill facets: {available_skills(jobs)}")
    result = run_search(
        session=SessionContext(user_id="smoke-candidate", role=UserRole.CANDIDATE),
        entities=jobs,
        criteria=FilterCriteria(location="remote", salary=[100000, 150000]),
    )
    print(f"Remote jobs paying 100k-150k: {len(result.matches)}")
    if result.matches:
        pprint(result.matches[0].to_dict())
    print("")

    # --- Employer browsing candidates ---
    candidates = load_entities(candidates_path, EntityKind.CANDIDATES)
    print(f"Candidates loaded: {len(candidates)}")
    print(f"Location facets: {available_locations(candidates)}")
    result = run_search(
        session=SessionContext(user_id="smoke-employer", role=UserRole.EMPLOYER),
        entities=candidates,
        criteria={"skills": ["React"], "matchTier": "best"},
    )
    print(f"Best-match React candidates: {[m.entity.name for m in result.matches]}")
    print("")

    # --- Basic assertions ---
    print(">>> Running basic assertions...")
    assert run_search(
        session=SessionContext(user_id="smoke-employer", role=UserRole.EMPLOYER),
        entities=candidates,
    ).total == len(candidates)
    for m in result.matches:
        assert m.presentation is not None and m.presentation.tier.value == "best"
    print("OK")

    return 0


if __name__ == "__main__":
    sys.exit(main())
