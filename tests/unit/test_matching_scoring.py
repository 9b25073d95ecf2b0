import pytest

from bidmatch.matching.scoring import (
    MATCH_WEIGHTS,
    clamp01,
    combine_scores,
    direct_skill_match,
    experience_relevance,
    match_label,
    to_percent,
)
from bidmatch.models import ExperienceEntry, JobPosting


# ------------------------------------------------------------------
# direct_skill_match
# ------------------------------------------------------------------

def test_identical_skills_case_insensitive_is_full_match():
    assert direct_skill_match(["React", "Node"], ["react", "node"]) == 1.0


def test_no_overlap_is_zero():
    assert direct_skill_match(["Welding"], ["Python"]) == 0.0


def test_empty_lists_are_zero():
    assert direct_skill_match([], ["python"]) == 0.0
    assert direct_skill_match(["python"], []) == 0.0
    assert direct_skill_match(["", "  "], ["python"]) == 0.0


def test_partial_substring_credit_either_direction():
    # "react" is contained in "react.js": 0.8 of one required skill out of two
    assert direct_skill_match(["React.js", "MongoDB"], ["react"]) == pytest.approx(0.4)
    # user skill containing the required one counts too

    assert direct_skill_match(["Postgres", "Docker"], ["PostgreSQL"]) == pytest.approx(0.4)


def test_partial_credit_first_match_only():
    # "java" is a substring of both required skills, but only one partial hit counts
    assert direct_skill_match(["JavaScript", "Java EE"], ["java"]) == pytest.approx(0.4)


def test_exact_match_wins_over_partial():
    # exact member: 1.0, no extra partial credit for "javascript"
    assert direct_skill_match(["JavaScript", "Java"], ["java"]) == pytest.approx(0.5 + 0.10)


def test_bonus_tiers():
    job = ["python", "django", "postgres", "docker", "redis"]
    # 1/5 = 0.2 -> no bonus
    assert direct_skill_match(job, ["python"]) == pytest.approx(0.2)
    # 3/5 = 0.6 -> +0.10
    assert direct_skill_match(job, ["python", "django", "docker"]) == pytest.approx(0.7)
    # 4/5 = 0.8 -> +0.15
    assert direct_skill_match(job, ["python", "django", "docker", "redis"]) == pytest.approx(0.95)


def test_partial_credits_can_exceed_skill_count_before_cap():
    # two partial hits against a single required skill: 1.6 + 0.15, capped to 1.0
    assert direct_skill_match(["React Native"], ["react", "native"]) == 1.0


def test_duplicate_user_skills_count_once():
    assert direct_skill_match(["python", "django"], ["Python", "python", "PYTHON"]) == pytest.approx(0.6)


# ------------------------------------------------------------------
# experience_relevance
# ------------------------------------------------------------------

def _job(**kw):
    base = dict(id="j", title="Frontend Developer", description="React dashboards for analytics")
    base.update(kw)
    return JobPosting(**base)


def test_experience_best_entry_wins():
    experience = [
        ExperienceEntry(title="Barista", description="Coffee and customer service"),
        ExperienceEntry(title="Frontend Developer", description="Built React dashboards"),
    ]
    # frontend developer built react dashboards: 4 of 5 terms are in the job
    assert experience_relevance(experience, _job()) == pytest.approx(0.8)


def test_experience_is_not_averaged():
    strong = [ExperienceEntry(title="Frontend Developer", description="React dashboards")]
    mixed = strong + [ExperienceEntry(title="Plumber", description="Fixed pipes")]
    assert experience_relevance(mixed, _job()) == experience_relevance(strong, _job()) == 1.0


def test_experience_empty_inputs_are_zero():
    assert experience_relevance([], _job()) == 0.0
    assert experience_relevance(None, _job()) == 0.0
    exp = [ExperienceEntry(title="Frontend Developer")]
    assert experience_relevance(exp, _job(description="")) == 0.0


def test_experience_entry_without_terms_scores_zero():
    exp = [ExperienceEntry(title="", description="")]
    assert experience_relevance(exp, _job()) == 0.0


def test_experience_accepts_plain_dicts():
    exp = [{"title": "Frontend Developer", "description": None}]
    job = {"title": "Senior Frontend Developer", "description": "Lead the frontend team"}
    assert experience_relevance(exp, job) == 1.0


def test_experience_uses_job_title_terms():
    exp = [ExperienceEntry(title="Kubernetes operator")]
    job = _job(title="Kubernetes operator", description="Keep clusters healthy")
    assert experience_relevance(exp, job) == 1.0


# ------------------------------------------------------------------
# combine / percent / labels
# ------------------------------------------------------------------

def test_weights_sum_to_one():
    assert sum(MATCH_WEIGHTS.values()) == pytest.approx(1.0)


def test_combine_scores_weighted_blend():
    assert combine_scores(1.0, 0.0, 0.0, 0.0) == pytest.approx(0.20)
    assert combine_scores(0.0, 1.0, 0.0, 0.0) == pytest.approx(0.40)
    assert combine_scores(0.0, 0.0, 1.0, 0.0) == pytest.approx(0.15)
    assert combine_scores(0.0, 0.0, 0.0, 1.0) == pytest.approx(0.25)
    assert combine_scores(1.0, 1.0, 1.0, 1.0) == pytest.approx(1.0)


def test_to_percent_rounds_half_up_and_clamps():
    assert to_percent(0.125) == 13
    assert to_percent(0.124) == 12
    assert to_percent(0.0) == 0
    assert to_percent(1.0) == 100
    assert to_percent(1.2) == 100
    assert to_percent(-0.1) == 0


def test_match_labels():
    assert match_label(95) == "Perfect Match"
    assert match_label(90) == "Perfect Match"
    assert match_label(85) == "Excellent Match"
    assert match_label(70) == "Strong Match"
    assert match_label(60) == "Good Match"
    assert match_label(50) == "Moderate Match"
    assert match_label(49) == "Potential Match"
    assert match_label(0) == "Potential Match"


def test_clamp01():
    assert clamp01(-1) == 0.0
    assert clamp01(2) == 1.0
    assert clamp01(0.25) == 0.25
