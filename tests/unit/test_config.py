"""
tests/unit/test_config.py

Environment-driven settings are read at import time, so each test reloads
the module after adjusting the environment.
"""
import importlib
from pathlib import Path

import pytest


@pytest.fixture
def reload_config(monkeypatch):
    def _reload(**env):
        for key in ("HIREMATCH_LOG_LEVEL", "HIREMATCH_DATA_DIR", "HIREMATCH_RESUME_MAX_KEYWORDS"):
            monkeypatch.delenv(key, raising=False)
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        import hirematch.config as cfg
        return importlib.reload(cfg)

    yield _reload

    # leave the module as the rest of the suite expects it
    monkeypatch.undo()
    import hirematch.config as cfg
    importlib.reload(cfg)


def test_defaults(reload_config):
    cfg = reload_config()
    assert cfg.HIREMATCH_LOG_LEVEL == "INFO"
    assert cfg.HIREMATCH_DATA_DIR == Path(".hirematch")
    assert cfg.RESUME_MAX_KEYWORDS == 12
    assert cfg.DEFAULT_CANDIDATE_EXPERIENCE == (0, 15)
    assert cfg.DEFAULT_JOB_EXPERIENCE == (0, 10)
    assert cfg.DEFAULT_SALARY == (30_000, 150_000)


def test_env_overrides(reload_config, tmp_path):
    cfg = reload_config(
        HIREMATCH_LOG_LEVEL="debug",
        HIREMATCH_DATA_DIR=str(tmp_path),
        HIREMATCH_RESUME_MAX_KEYWORDS="5",
    )
    assert cfg.HIREMATCH_LOG_LEVEL == "DEBUG"
    assert cfg.default_jobs_path() == tmp_path / "jobs.json"
    assert cfg.default_candidates_path() == tmp_path / "candidates.json"
    assert cfg.RESUME_MAX_KEYWORDS == 5


def test_bad_int_falls_back_to_default(reload_config):
    cfg = reload_config(HIREMATCH_RESUME_MAX_KEYWORDS="lots")
    assert cfg.RESUME_MAX_KEYWORDS == 12
