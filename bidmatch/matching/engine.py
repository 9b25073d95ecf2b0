from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

from bidmatch import config
from bidmatch.core.text_processing import extract_terms, terms_from_fields
from bidmatch.models import InvalidMatchInput, record_field

from .scoring import (
    combine_scores,
    direct_skill_match,
    experience_relevance,
    to_percent,
)
from .types import MatchCategories, MatchResult, MatchSignals
from .vectors import TermVector, cosine_similarity, vectorize, weighted_text_similarity

logger = logging.getLogger(__name__)


def _check_record(record: Any, what: str) -> None:
    # Mappings and attribute objects are both fine; scalars are not.
    if record is None or isinstance(record, (str, bytes, int, float, bool, list, tuple)):
        raise InvalidMatchInput(f"{what} must be a mapping or an object, got {type(record).__name__}")


def _check_threshold(threshold: Any) -> int:
    if isinstance(threshold, bool) or not isinstance(threshold, int):
        raise InvalidMatchInput(f"threshold must be an integer percentage, got {threshold!r}")
    if not 0 <= threshold <= 100:
        raise InvalidMatchInput(f"threshold must be within [0, 100], got {threshold}")
    return threshold


def _profile_parts(profile: Any):
    skills = list(record_field(profile, "skills", default=[]))
    bio = record_field(profile, "bio", default="")
    experience = list(record_field(profile, "experience", default=[]))
    return skills, bio, experience


def _job_skills(job: Any) -> List[str]:
    return list(record_field(job, "skills_required", "skillsRequired", default=[]))


def build_candidate_vector(profile: Any) -> TermVector:
    """
    Candidate bag of words:
    - skills (lower-cased, as given)
    - bio terms
    - terms of all experience entries taken together
    """
    skills, bio, experience = _profile_parts(profile)
    experience_terms = terms_from_fields(
        *(
            f"{record_field(e, 'title', default='')} {record_field(e, 'description', default='')}"
            for e in experience
        )
    )
    terms = [s.lower() for s in skills if s] + extract_terms(bio) + experience_terms
    return vectorize(terms)


def build_job_vector(job: Any) -> TermVector:
    """Required skills + description terms + the whole title as one term."""
    terms = [s.lower() for s in _job_skills(job) if s]
    terms += extract_terms(record_field(job, "description", default=""))
    terms.append(record_field(job, "title", default="").lower())
    return vectorize(terms)


def _score(profile: Any, job: Any, candidate_vector: TermVector) -> MatchResult:
    skills, bio, experience = _profile_parts(profile)

    overall = cosine_similarity(candidate_vector, build_job_vector(job))
    skill_score = direct_skill_match(_job_skills(job), skills)
    bio_similarity = weighted_text_similarity(bio, record_field(job, "description", default=""))
    experience_score = experience_relevance(experience, job)

    combined = combine_scores(overall, skill_score, bio_similarity, experience_score)

    return MatchResult(
        job=job,
        match_score=to_percent(combined),
        match_categories=MatchCategories(
            skills=to_percent(skill_score),
            relevance=to_percent(bio_similarity),
            experience=to_percent(experience_score),
        ),
        signals=MatchSignals(
            overall_similarity=overall,
            skill_score=skill_score,
            bio_similarity=bio_similarity,
            experience_score=experience_score,
        ),
    )


def score_job(profile: Any, job: Any) -> MatchResult:
    """Score a single job for a profile. Neither input is modified."""
    _check_record(profile, "profile")
    _check_record(job, "job")
    return _score(profile, job, build_candidate_vector(profile))


def rank_jobs(profile: Any, jobs: Sequence[Any], threshold: Optional[int] = None) -> List[MatchResult]:
    """
    Score every job, order by match_score (highest first, ties keep input
    order) and keep those at or above `threshold`.

    threshold=None uses config.BIDMATCH_MIN_MATCH_THRESHOLD.
    """
    if not isinstance(jobs, (list, tuple)):
        raise InvalidMatchInput(f"jobs must be a list or tuple, got {type(jobs).__name__}")
    _check_record(profile, "profile")
    limit = _check_threshold(config.BIDMATCH_MIN_MATCH_THRESHOLD if threshold is None else threshold)

    candidate_vector = build_candidate_vector(profile)

    scored: List[MatchResult] = []
    for job in jobs:
        _check_record(job, "job")
        result = _score(profile, job, candidate_vector)
        logger.debug(
            "scored job %s: %d (skills=%d relevance=%d experience=%d)",
            record_field(job, "id", "_id", default="?"),
            result.match_score,
            result.match_categories.skills,
            result.match_categories.relevance,
            result.match_categories.experience,
        )
        scored.append(result)

    scored.sort(key=lambda r: r.match_score, reverse=True)
    kept = [r for r in scored if r.match_score >= limit]
    logger.debug("kept %d of %d jobs at threshold %d", len(kept), len(scored), limit)
    return kept
