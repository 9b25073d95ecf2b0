from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping

from .scoring import match_label


@dataclass(frozen=True)
class MatchCategories:
    """Displayed sub-scores, integer percentages."""
    skills: int
    relevance: int
    experience: int


@dataclass(frozen=True)
class MatchSignals:
    # Raw 0-1 signals behind a result. overall_similarity feeds the headline
    # score but has no displayed category.
    overall_similarity: float
    skill_score: float
    bio_similarity: float
    experience_score: float


@dataclass(frozen=True)
class MatchResult:
    job: Any  # JobPosting, or whatever record the caller passed in
    match_score: int
    match_categories: MatchCategories
    signals: MatchSignals

    @property
    def label(self) -> str:
        return match_label(self.match_score)

    def to_dict(self) -> Dict[str, Any]:
        """The job's own fields plus matchScore / matchCategories / matchLabel."""
        if hasattr(self.job, "to_dict"):
            d = dict(self.job.to_dict())
        elif isinstance(self.job, Mapping):
            d = dict(self.job)
        else:
            d = dict(vars(self.job))
        d["matchScore"] = self.match_score
        d["matchCategories"] = asdict(self.match_categories)
        d["matchLabel"] = self.label
        return d
