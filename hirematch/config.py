# hirematch/config.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Tuple

# --- Filter defaults (slider bounds shown before the user narrows anything) ---

DEFAULT_CANDIDATE_EXPERIENCE: Tuple[int, int] = (0, 15)
DEFAULT_JOB_EXPERIENCE: Tuple[int, int] = (0, 10)
DEFAULT_SALARY: Tuple[int, int] = (30_000, 150_000)  # annual USD


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# --- Logging ---

HIREMATCH_LOG_LEVEL: str = (os.environ.get("HIREMATCH_LOG_LEVEL") or "INFO").strip().upper()

# --- Local data (JSON snapshots exported from the document store) ---

HIREMATCH_DATA_DIR: Path = Path(os.environ.get("HIREMATCH_DATA_DIR") or ".hirematch")

# --- Resume keyword extraction ---

RESUME_MAX_KEYWORDS: int = _env_int("HIREMATCH_RESUME_MAX_KEYWORDS", 12)

# Uploads above this size are rejected by the resume review screen.
RESUME_MAX_BYTES: int = _env_int("HIREMATCH_RESUME_MAX_BYTES", 5 * 1024 * 1024)


def default_jobs_path() -> Path:
    return HIREMATCH_DATA_DIR / "jobs.json"


def default_candidates_path() -> Path:
    return HIREMATCH_DATA_DIR / "candidates.json"


def default_applications_path() -> Path:
    return HIREMATCH_DATA_DIR / "applications.json"
