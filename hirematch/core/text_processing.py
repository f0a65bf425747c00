from __future__ import annotations

import re
import unicodedata
from typing import List, Sequence, Tuple

# Shared by the filter predicates (case-insensitive comparisons) and
# resume keyword extraction. Keep both on the same normalization.

# Token pattern:
# - alphanumerics
# - allows internal separators like + # . - (e.g., c#, c++, node.js, full-stack)
_WORD_RE = re.compile(r"[a-z0-9]+(?:[#+.-][a-z0-9]+)*", re.IGNORECASE)

_STOPWORDS = {
    "a", "an", "the", "and", "or", "to", "of", "in", "for", "on", "with", "as", "at", "by", "from",
    "is", "are", "be", "been", "being", "was", "were", "am",
    "this", "that", "these", "those", "it", "its", "they", "them", "their", "you", "your", "we", "our", "i", "me", "my",
    "will", "can", "may", "must", "should", "could", "would",
    "not", "no", "yes",
    "into", "over", "under", "between", "within", "without", "across", "per",
    "about", "also", "such", "than", "then", "there", "here",
    # resume boilerplate
    "resume", "cv", "curriculum", "vitae", "references", "available", "request",
    "responsible", "responsibilities", "duties", "including", "various",
    "experience", "skills", "skill", "summary", "education", "work",
    # URL / contact noise from resume headers
    "https", "http", "www", "linkedin", "github", "gmail", "com", "email", "phone",
}


def normalize_text(text: str) -> str:
    """
    Deterministic normalization:
    - NFKC (smart quotes, full-width forms)
    - non-breaking spaces and unicode dashes folded to ASCII
    - collapsed whitespace
    """
    if not text:
        return ""
    t = unicodedata.normalize("NFKC", text)
    t = t.replace("\u00a0", " ")
    t = re.sub("[\u2010-\u2015]", "-", t)
    return " ".join(t.split())


def fold(text: str) -> str:
    """Case-insensitive comparison key."""
    return normalize_text(text).casefold()


def contains_folded(haystack: str, needle: str) -> bool:
    return fold(needle) in fold(haystack)


def tokenize_stream(text: str) -> List[str]:
    """Ordered token stream (deterministic)."""
    if not text:
        return []
    normalized = normalize_text(text).lower()
    out: List[str] = []
    for m in _WORD_RE.finditer(normalized):
        tok = m.group(0).strip(".-")
        if len(tok) < 2:
            continue
        if tok in _STOPWORDS:
            continue
        out.append(tok)
    return out


def extract_phrases(
        tokens: Sequence[str],
        *,
        ngrams: Tuple[int, ...] = (2, 3),
        max_phrases: int = 50,
) -> List[str]:
    """
    Deterministic n-gram phrases from an ordered token stream.
    First-seen order; mostly-numeric phrases are skipped.
    """
    if not tokens:
        return []

    out: List[str] = []
    seen = set()

    def _is_mostly_numeric(phrase_tokens: Sequence[str]) -> bool:
        numeric = sum(1 for t in phrase_tokens if t.isdigit())
        return numeric >= max(1, len(phrase_tokens) - 1)

    for n in ngrams:
        if n < 2 or len(tokens) < n:
            continue
        for i in range(0, len(tokens) - n + 1):
            chunk = tokens[i : i + n]
            if _is_mostly_numeric(chunk):
                continue
            phrase = " ".join(chunk)
            if phrase in seen:
                continue
            seen.add(phrase)
            out.append(phrase)
            if len(out) >= max_phrases:
                return out

    return out
