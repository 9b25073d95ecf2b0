from __future__ import annotations

import math
from typing import Any, Dict, Iterable, List, Optional, Sequence

from bidmatch.core.text_processing import extract_terms, terms_from_fields
from bidmatch.models import record_field

# Fixed blend of the four signals. Sums to 1.0.
MATCH_WEIGHTS: Dict[str, float] = {
    "overall": 0.20,
    "skills": 0.40,
    "bio": 0.15,
    "experience": 0.25,
}

PARTIAL_SKILL_CREDIT = 0.8

# (min ratio, bonus), checked in order
SKILL_COVERAGE_BONUSES = ((0.8, 0.15), (0.5, 0.10))

MATCH_LABELS = (
    (90, "Perfect Match"),
    (80, "Excellent Match"),
    (70, "Strong Match"),
    (60, "Good Match"),
    (50, "Moderate Match"),
)
DEFAULT_MATCH_LABEL = "Potential Match"


def clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else (1.0 if x > 1.0 else x)


def to_percent(x: float) -> int:
    """0-1 float to an integer percentage; halves round up."""
    return int(math.floor(clamp01(x) * 100 + 0.5))


def _lower_set(items: Iterable[str]) -> List[str]:
    # Ordered and deduped: partial matching scans job skills in first-seen order.
    out: List[str] = []
    seen = set()
    for it in items or []:
        s = (it or "").strip().lower()
        if s and s not in seen:
            out.append(s)
            seen.add(s)
    return out


def direct_skill_match(job_skills: Sequence[str], user_skills: Sequence[str]) -> float:
    """
    Overlap between required and offered skills, in [0, 1].

    - exact (case-insensitive) hit: 1.0
    - otherwise the first job skill that contains, or is contained in,
      the user skill: PARTIAL_SKILL_CREDIT, and scanning stops
    - coverage bonus on top, then capped at 1.0
    """
    job_set = _lower_set(job_skills)
    user_set = _lower_set(user_skills)
    if not job_set or not user_set:
        return 0.0

    job_lookup = set(job_set)
    matches = 0.0
    for skill in user_set:
        if skill in job_lookup:
            matches += 1.0
            continue
        for job_skill in job_set:
            if skill in job_skill or job_skill in skill:
                matches += PARTIAL_SKILL_CREDIT
                break

    # Partial credits may push this above 1.0; only the final result is capped.
    ratio = matches / len(job_set)

    bonus = 0.0
    for min_ratio, value in SKILL_COVERAGE_BONUSES:
        if ratio >= min_ratio:
            bonus = value
            break

    return min(ratio + bonus, 1.0)


def experience_relevance(experience: Optional[Sequence[Any]], job: Any) -> float:
    """
    Best single experience entry against the job's title + description.

    Each entry scores the share of its terms that also occur in the job;
    the highest entry wins.
    """
    job_description = record_field(job, "description", default="")
    if not experience or not job_description:
        return 0.0

    job_terms = set(extract_terms(job_description + " " + record_field(job, "title", default="")))

    scores = [0.0]
    for entry in experience:
        exp_terms = terms_from_fields(
            record_field(entry, "title", default=""),
            record_field(entry, "description", default=""),
        )
        overlap = sum(1 for t in exp_terms if t in job_terms)
        scores.append(overlap / max(len(exp_terms), 1))
    return max(scores)


def combine_scores(
        overall_similarity: float,
        skill_score: float,
        bio_similarity: float,
        experience_score: float,
) -> float:
    return (
            overall_similarity * MATCH_WEIGHTS["overall"]
            + skill_score * MATCH_WEIGHTS["skills"]
            + bio_similarity * MATCH_WEIGHTS["bio"]
            + experience_score * MATCH_WEIGHTS["experience"]
    )


def match_label(score: int) -> str:
    for floor, label in MATCH_LABELS:
        if score >= floor:
            return label
    return DEFAULT_MATCH_LABEL
