from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Union

from pypdf import PdfReader

from bidmatch.models import CandidateProfile, InvalidMatchInput, JobPosting

PathLike = Union[str, Path]


@dataclass(frozen=True)
class LoadedBio:
    text: str
    source: str  # "text" | "pdf" | "none"
    path: Optional[str] = None


def _read_json(path: PathLike) -> Any:
    return json.loads(Path(path).read_text(encoding="utf-8"))


def load_profile(path: PathLike) -> CandidateProfile:
    """Profile JSON as served by the marketplace API (skills, bio, experience)."""
    return CandidateProfile.from_dict(_read_json(path))


def load_jobs(path: PathLike) -> List[JobPosting]:
    """
    Jobs JSON: either a bare list or {"jobs": [...]}.
    """
    data = _read_json(path)
    if isinstance(data, dict):
        data = data.get("jobs")
    if not isinstance(data, list):
        raise InvalidMatchInput(f"{path}: expected a list of jobs")
    return [JobPosting.from_dict(j) for j in data]


def load_bio_text(*, bio_text_path: Optional[str] = None, bio_pdf_path: Optional[str] = None) -> LoadedBio:
    """
    Load a freelancer bio / resume from disk.
    Precedence:
      1) bio_text_path (.txt)
      2) bio_pdf_path (.pdf)
      3) none
    Best-effort: unreadable files return source='none' and empty text.
    """
    if bio_text_path:
        p = Path(bio_text_path)
        try:
            return LoadedBio(text=p.read_text(encoding="utf-8").strip(), source="text", path=str(p))
        except (OSError, UnicodeDecodeError):
            return LoadedBio(text="", source="none", path=str(p))

    if bio_pdf_path:
        p = Path(bio_pdf_path)
        try:
            reader = PdfReader(str(p))
            parts = []
            for page in reader.pages:
                t = page.extract_text() or ""
                if t.strip():
                    parts.append(t)
            text = "\n".join(parts).strip()
        except Exception:
            # pypdf raises a wide range of errors on damaged files
            return LoadedBio(text="", source="none", path=str(p))
        if not text:
            return LoadedBio(text="", source="none", path=str(p))
        return LoadedBio(text=text, source="pdf", path=str(p))

    return LoadedBio(text="", source="none", path=None)
