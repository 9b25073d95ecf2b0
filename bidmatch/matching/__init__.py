from bidmatch.models import InvalidMatchInput

from .engine import rank_jobs, score_job
from .types import MatchCategories, MatchResult, MatchSignals

__all__ = ["rank_jobs", "score_job", "MatchResult", "MatchCategories", "MatchSignals", "InvalidMatchInput"]
