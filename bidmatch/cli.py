from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from bidmatch import config
from bidmatch.io.loaders import load_bio_text, load_jobs, load_profile
from bidmatch.matching.engine import rank_jobs
from bidmatch.matching.types import MatchResult
from bidmatch.models import InvalidMatchInput


def print_human_summary(results: List[MatchResult], *, threshold: int, considered: int) -> None:
    print("\n=== Job Matches ===")
    print(f"Jobs considered: {considered} | Matches at >= {threshold}%: {len(results)}")

    if not results:
        print(f"\nNo job matches found with at least {threshold}% match. Update your profile to improve matches.")
        return

    for idx, r in enumerate(results, start=1):
        j = r.job
        c = r.match_categories
        print(f"\n{idx}) {j.title}  [id={j.id}]")
        print(f"   score: {r.match_score}% ({r.label})")
        print(f"   skills: {c.skills}% | relevance: {c.relevance}% | experience: {c.experience}%")
        if j.skills_required:
            print(f"   requires: {', '.join(j.skills_required)}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rank marketplace jobs against a freelancer profile")
    parser.add_argument("--profile", required=True, help="Path to profile.json (skills, bio, experience)")
    parser.add_argument("--jobs", required=True, help="Path to jobs.json (list of jobs)")
    parser.add_argument(
        "--threshold",
        type=int,
        default=None,
        help=f"Minimum match percentage (default: {config.BIDMATCH_MIN_MATCH_THRESHOLD})",
    )
    parser.add_argument("--limit", type=int, default=0, help="Show only the first N matches (0 = all)")
    parser.add_argument("--bio-text", type=str, default="", help="Optional .txt used when the profile has no bio")
    parser.add_argument("--bio-pdf", type=str, default="", help="Optional .pdf used when the profile has no bio")
    parser.add_argument("--json", action="store_true", help="Print JSON only (machine-readable)")
    parser.add_argument("--verbose", action="store_true", help="Log per-job scores to stderr")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    for raw in (args.profile, args.jobs):
        if not Path(raw).exists():
            print(f"[bidmatch] File not found: {raw}", file=sys.stderr)
            return 2

    threshold = config.load_match_config().threshold if args.threshold is None else args.threshold

    try:
        profile = load_profile(args.profile)
        jobs = load_jobs(args.jobs)

        if not profile.bio and (args.bio_text or args.bio_pdf):
            loaded = load_bio_text(bio_text_path=args.bio_text or None, bio_pdf_path=args.bio_pdf or None)
            if loaded.text:
                profile = dataclasses.replace(profile, bio=loaded.text)
            else:
                print(f"[bidmatch] Could not read bio from {loaded.path}, continuing without it.", file=sys.stderr)

        results = rank_jobs(profile, jobs, threshold=threshold)
    except (InvalidMatchInput, json.JSONDecodeError, OSError, UnicodeDecodeError) as exc:
        print(f"[bidmatch] Invalid input: {exc}", file=sys.stderr)
        return 2

    if args.limit > 0:
        results = results[: args.limit]

    if args.json:
        print(json.dumps([r.to_dict() for r in results], indent=2))
    else:
        print_human_summary(results, threshold=threshold, considered=len(jobs))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
