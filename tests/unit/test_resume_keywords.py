from __future__ import annotations

from pathlib import Path

from hirematch.io.resume_loader import load_resume_text
from hirematch.resume_keywords import extract_resume_keywords, with_resume_keywords


def test_repeated_phrases_come_first(load_text):
    kws = extract_resume_keywords(load_text("resume_frontend.txt"), max_keywords=8)
    assert "accessible user interfaces" in kws
    assert "responsive design" in kws
    # contained in the trigram above
    assert "user interfaces" not in kws
    assert len(kws) <= 8


def test_declared_skills_are_not_repeated_as_single_tokens(load_text):
    kws = extract_resume_keywords(load_text("resume_frontend.txt"), skills=["React", "TypeScript"])
    assert "react" not in kws
    assert "typescript" not in kws


def test_extraction_is_deterministic(load_text):
    text = load_text("resume_frontend.txt")
    assert extract_resume_keywords(text) == extract_resume_keywords(text)


def test_empty_text_or_zero_limit_yields_nothing():
    assert extract_resume_keywords("") == []
    assert extract_resume_keywords("Python developer", max_keywords=0) == []


def test_limit_defaults_to_config(monkeypatch, load_text):
    from hirematch import config
    monkeypatch.setattr(config, "RESUME_MAX_KEYWORDS", 2)
    assert len(extract_resume_keywords(load_text("resume_frontend.txt"))) == 2


def test_with_resume_keywords_returns_new_record(candidates):
    priya = candidates[5]
    assert priya.resume_keywords is None
    tagged = with_resume_keywords(priya, ["responsive design"])
    assert tagged.resume_keywords == ["responsive design"]
    assert priya.resume_keywords is None
    assert tagged.candidate_id == priya.candidate_id


def test_load_resume_text_reads_txt(fixtures_dir):
    loaded = load_resume_text(str(fixtures_dir / "resume_frontend.txt"))
    assert loaded.source == "text"
    assert "responsive design" in loaded.text


def test_load_resume_text_missing_file_is_best_effort(tmp_path: Path, caplog):
    loaded = load_resume_text(str(tmp_path / "nope.txt"))
    assert loaded.source == "none"
    assert loaded.text == ""
    assert "Could not read resume" in caplog.text


def test_load_resume_text_bad_pdf_is_best_effort(tmp_path: Path):
    bogus = tmp_path / "resume.pdf"
    bogus.write_bytes(b"not a pdf at all")
    loaded = load_resume_text(str(bogus))
    assert loaded.source == "none"


def test_load_resume_text_rejects_oversized_file(tmp_path: Path, monkeypatch):
    from hirematch import config
    monkeypatch.setattr(config, "RESUME_MAX_BYTES", 10)
    big = tmp_path / "resume.txt"
    big.write_text("x" * 100, encoding="utf-8")
    assert load_resume_text(str(big)).source == "none"


def test_load_resume_text_without_path():
    assert load_resume_text(None).source == "none"
