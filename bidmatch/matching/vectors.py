from __future__ import annotations

import math
from typing import Dict, Iterable, Optional

from bidmatch.core.text_processing import MIN_TERM_LENGTH, extract_terms

# Sparse term -> frequency map. Built per comparison, never persisted.
TermVector = Dict[str, int]


def vectorize(terms: Iterable[str]) -> TermVector:
    """
    Count term occurrences.

    Terms are taken as given (callers lower-case upstream). Empty terms and
    terms shorter than MIN_TERM_LENGTH are skipped; raw skills and titles
    flow through here without going through extract_terms.
    """
    vec: TermVector = {}
    for term in terms:
        key = (term or "").strip()
        if len(key) < MIN_TERM_LENGTH:
            continue
        vec[key] = vec.get(key, 0) + 1
    return vec


def cosine_similarity(vec_a: TermVector, vec_b: TermVector) -> float:
    """Plain cosine over raw frequencies; 0.0 when either vector has no magnitude."""
    dot = 0.0
    mag_a = 0.0
    mag_b = 0.0
    for term in set(vec_a) | set(vec_b):
        a = vec_a.get(term, 0)
        b = vec_b.get(term, 0)
        dot += a * b
        mag_a += a * a
        mag_b += b * b

    mag_a = math.sqrt(mag_a)
    mag_b = math.sqrt(mag_b)
    if mag_a == 0 or mag_b == 0:
        return 0.0
    return dot / (mag_a * mag_b)


def weighted_text_similarity(text_a: Optional[str], text_b: Optional[str]) -> float:
    """
    Importance-weighted cosine between two free texts.

    Every term of the comparison gets the same weight, 1 / log(2 + |union|),
    so this is not corpus IDF: the weight cancels in the ratio and the result
    equals plain cosine over the two (deduplicated) term sets.
    """
    if not text_a or not text_b:
        return 0.0

    tf_a = vectorize(extract_terms(text_a))
    tf_b = vectorize(extract_terms(text_b))

    all_terms = set(tf_a) | set(tf_b)
    if not all_terms:
        return 0.0
    importance = 1.0 / math.log(2 + len(all_terms))

    dot = 0.0
    norm_a = 0.0
    norm_b = 0.0
    for term in all_terms:
        a = tf_a.get(term, 0)
        b = tf_b.get(term, 0)
        dot += a * b * importance
        norm_a += a * a * importance
        norm_b += b * b * importance

    norm_a = math.sqrt(norm_a)
    norm_b = math.sqrt(norm_b)
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return dot / (norm_a * norm_b)
