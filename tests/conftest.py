import json
from pathlib import Path
import pytest

from hirematch.io.entity_loader import parse_applications, parse_candidates, parse_jobs

# Path to tests/fixtures directory
FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def load_text(fixtures_dir):
    """
    Fixture that returns a function: load_text("file.ext") -> str
    """
    def _load(name: str) -> str:
        return (fixtures_dir / name).read_text(encoding="utf-8")
    return _load


@pytest.fixture
def load_json(load_text):
    def _load(name: str):
        return json.loads(load_text(name))
    return _load


@pytest.fixture
def jobs(load_json):
    """The job board mock data, parsed into JobPosting records."""
    return parse_jobs(load_json("jobs.json"))


@pytest.fixture
def candidates(load_json):
    return parse_candidates(load_json("candidates.json"))


@pytest.fixture
def applications(load_json):
    return parse_applications(load_json("applications.json"))
