from __future__ import annotations

import re
from typing import Iterable, List, Optional

# NOTE: Shared by the matching engine (skills, bio, experience, job text).
# Keep the stop-word list and the length floor stable: every score depends on them.

# Anything that is not a letter, digit or whitespace becomes a separator.
# `\w` would also keep "_", so it is stripped explicitly.
_NON_WORD_RE = re.compile(r"[^\w\s]|_")

MIN_TERM_LENGTH = 3

# Closed list of English function words. Not configurable.
STOPWORDS = frozenset({
    "the", "and", "for", "with", "that", "have", "this", "from",
    "not", "are", "was", "were", "will", "been", "has", "had",
    "can", "may", "should", "would", "could", "you", "they",
    "their", "them", "some", "our", "your", "his", "her", "its",
})


def dedupe_first_seen(items: Iterable[str]) -> List[str]:
    seen = set()
    out: List[str] = []
    for it in items:
        if it and it not in seen:
            out.append(it)
            seen.add(it)
    return out


def tokenize_stream(text: Optional[str]) -> List[str]:
    """Ordered token stream with duplicates kept."""
    if not text:
        return []
    lowered = text.lower()
    out: List[str] = []
    for tok in _NON_WORD_RE.sub(" ", lowered).split():
        if len(tok) < MIN_TERM_LENGTH:
            continue
        if tok in STOPWORDS:
            continue
        out.append(tok)
    return out


def extract_terms(text: Optional[str]) -> List[str]:
    """
    Significant terms of a free-text field, unique, in first-seen order.

    >>> extract_terms("The Quick, Brown Fox!! jumps.")
    ['quick', 'brown', 'fox', 'jumps']
    """
    return dedupe_first_seen(tokenize_stream(text))


def terms_from_fields(*fields: Optional[str]) -> List[str]:
    """extract_terms over several fields joined by a single space."""
    return extract_terms(" ".join(f or "" for f in fields))
