from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from hirematch import config
from hirematch.log import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class LoadedResume:
    text: str
    source: str  # "text" | "pdf" | "none"
    path: Optional[str] = None


def _too_large(p: Path) -> bool:
    try:
        return p.stat().st_size > config.RESUME_MAX_BYTES
    except OSError:
        return False


def load_resume_text(path: Optional[str]) -> LoadedResume:
    """
    Load resume text from a .txt or .pdf file.
    Best-effort: unreadable or oversized files return source='none' with empty
    text and a logged warning; the candidate simply gets no keyword tags.
    """
    if not path:
        return LoadedResume(text="", source="none", path=None)

    p = Path(path)
    if _too_large(p):
        log.warning("Resume %s exceeds %d bytes, skipping", p, config.RESUME_MAX_BYTES)
        return LoadedResume(text="", source="none", path=str(p))

    if p.suffix.lower() == ".pdf":
        try:
            reader = PdfReader(str(p))
            parts = []
            for page in reader.pages:
                t = page.extract_text() or ""
                if t.strip():
                    parts.append(t)
        except (OSError, ValueError, PdfReadError) as exc:
            log.warning("Could not read resume PDF %s: %s", p, exc)
            return LoadedResume(text="", source="none", path=str(p))
        text = "\n".join(parts).strip()
        if not text:
            log.warning("Resume PDF %s has no extractable text", p)
            return LoadedResume(text="", source="none", path=str(p))
        return LoadedResume(text=text, source="pdf", path=str(p))

    try:
        return LoadedResume(text=p.read_text(encoding="utf-8"), source="text", path=str(p))
    except (OSError, UnicodeDecodeError) as exc:
        log.warning("Could not read resume file %s: %s", p, exc)
        return LoadedResume(text="", source="none", path=str(p))
