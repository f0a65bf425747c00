from __future__ import annotations

import dataclasses
from collections import Counter
from typing import List, Optional, Sequence

from hirematch import config
from hirematch.core.text_processing import extract_phrases, tokenize_stream
from hirematch.models import CandidateProfile


def extract_resume_keywords(
        text: str,
        *,
        max_keywords: Optional[int] = None,
        skills: Optional[Sequence[str]] = None,
) -> List[str]:
    """
    Deterministic keyword tags for a resume.

    - phrases (bigrams/trigrams) that occur more than once, first-seen order
    - then recurring single tokens by frequency (ties keep first-seen order),
      skipping tokens already inside a chosen phrase, numbers, and declared
      skills (the skills filter already covers those)
    """
    limit = config.RESUME_MAX_KEYWORDS if max_keywords is None else max_keywords
    if limit <= 0:
        return []

    stream = tokenize_stream(text)
    if not stream:
        return []

    joined = " " + " ".join(stream) + " "
    phrases = extract_phrases(stream, ngrams=(3, 2), max_phrases=500)

    out: List[str] = []
    covered = set()
    for p in phrases:
        if len(out) >= limit:
            return out
        if joined.count(" " + p + " ") < 2:
            continue
        # "design systems" is redundant once "responsive design systems" is in
        if any(p in chosen for chosen in out):
            continue
        out.append(p)
        covered.update(p.split())

    skill_keys = {s.lower() for s in skills or []}
    counts = Counter(stream)
    first_seen = {}
    for i, tok in enumerate(stream):
        first_seen.setdefault(tok, i)

    for tok in sorted(counts, key=lambda t: (-counts[t], first_seen[t])):
        if len(out) >= limit or counts[tok] < 2:
            break
        if tok in covered or tok in skill_keys or tok.isdigit():
            continue
        out.append(tok)

    return out


def with_resume_keywords(candidate: CandidateProfile, keywords: Sequence[str]) -> CandidateProfile:
    """Return a copy of the candidate carrying the given keyword tags."""
    return dataclasses.replace(candidate, resume_keywords=list(keywords))
