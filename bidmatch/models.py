from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Mapping, Optional


class InvalidMatchInput(TypeError):
    """Raised when a profile, job list or threshold is structurally unusable."""


def normalize_whitespace(text: Optional[str]) -> str:
    return " ".join((text or "").split()).strip()


def _clean_list(items: Optional[List[str]]) -> List[str]:
    # Trims and drops blanks; case is preserved on purpose (skills are free-form tags).
    out: List[str] = []
    for it in items or []:
        if it is None:
            continue
        s = normalize_whitespace(str(it))
        if s:
            out.append(s)
    return out


def _pick(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    """First present, non-None value among snake_case / camelCase aliases."""
    for k in keys:
        v = data.get(k)
        if v is not None:
            return v
    return default


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise InvalidMatchInput(f"{what} must be a mapping, got {type(data).__name__}")
    return data


@dataclass(frozen=True)
class ExperienceEntry:
    title: str = ""
    description: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "title", normalize_whitespace(self.title))
        object.__setattr__(self, "description", normalize_whitespace(self.description))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ExperienceEntry":
        data = _require_mapping(data, "experience entry")
        return cls(title=data.get("title") or "", description=data.get("description") or "")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CandidateProfile:
    """
    Freelancer profile as seen by the matching engine.
    Every field is optional; missing values behave as empty.
    """
    skills: List[str] = field(default_factory=list)
    bio: str = ""
    experience: List[ExperienceEntry] = field(default_factory=list)

    def __post_init__(self) -> None:
        object.__setattr__(self, "skills", _clean_list(self.skills))
        object.__setattr__(self, "bio", (self.bio or "").strip())
        object.__setattr__(self, "experience", list(self.experience or []))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CandidateProfile":
        data = _require_mapping(data, "profile")
        return cls(
            skills=list(data.get("skills") or []),
            bio=data.get("bio") or "",
            experience=[ExperienceEntry.from_dict(e) for e in data.get("experience") or []],
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class JobPosting:
    """
    A job as returned by the marketplace API.

    Only title, description and skills_required feed scoring. Text is kept
    exactly as received; tokenization normalizes it when scoring. `raw` holds
    the original record and is what to_dict() hands back.
    """
    id: Any
    title: str = ""
    description: str = ""
    skills_required: List[str] = field(default_factory=list)

    budget: Optional[float] = None
    deadline: Optional[str] = None
    posted_by: Optional[str] = None
    status: Optional[str] = None

    raw: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "title", self.title or "")
        object.__setattr__(self, "description", self.description or "")
        object.__setattr__(self, "skills_required", _clean_list(self.skills_required))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "JobPosting":
        data = _require_mapping(data, "job")
        return cls(
            id=_pick(data, "id", "_id"),
            title=data.get("title") or "",
            description=data.get("description") or "",
            skills_required=list(_pick(data, "skills_required", "skillsRequired", default=[])),
            budget=data.get("budget"),
            deadline=data.get("deadline"),
            posted_by=_pick(data, "posted_by", "postedBy"),
            status=data.get("status"),
            raw=data,
        )

    def to_dict(self) -> Dict[str, Any]:
        if self.raw:
            return dict(self.raw)
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "skillsRequired": list(self.skills_required),
            "budget": self.budget,
            "deadline": self.deadline,
            "postedBy": self.posted_by,
            "status": self.status,
        }


def record_field(record: Any, *names: str, default: Any = None) -> Any:
    """
    Read a field from a dataclass, plain object or mapping.

    `names` are aliases tried in order (e.g. "skills_required", "skillsRequired").
    None and missing values both fall back to `default`.
    """
    for name in names:
        if isinstance(record, Mapping):
            value = record.get(name)
        else:
            value = getattr(record, name, None)
        if value is not None:
            return value
    return default
