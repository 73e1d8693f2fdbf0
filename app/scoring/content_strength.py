from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from app.schemas.resume import ResumeDocument, as_resume

from .text import count_digit_runs, experience_bullets, non_blank

# (minimum, points) pairs per bucket, highest tier first; the first tier reached wins.
_SUMMARY_TIERS: tuple[tuple[int, int], ...] = ((101, 20), (51, 10))
_BULLET_TIERS: tuple[tuple[int, int], ...] = ((6, 30), (3, 20), (1, 10))
_SKILL_TIERS: tuple[tuple[int, int], ...] = ((10, 20), (5, 15), (3, 10))
_DIGIT_TIERS: tuple[tuple[int, int], ...] = ((5, 20), (3, 15), (1, 10))
_EDUCATION_POINTS = 10
MAX_CONTENT_STRENGTH = 100


def _tier(value: int, tiers: tuple[tuple[int, int], ...]) -> int:
    for minimum, points in tiers:
        if value >= minimum:
            return points
    return 0


def calculate_content_strength(resume: ResumeDocument | Mapping[str, Any] | None) -> int:
    doc = as_resume(resume)
    bullets = experience_bullets(doc)
    skill_count = len(non_blank(doc.skills.technical)) + len(non_blank(doc.skills.soft))
    digit_runs = count_digit_runs(" ".join([doc.summary, *bullets]))

    score = (
        _tier(len(doc.summary.strip()), _SUMMARY_TIERS)
        + _tier(len(bullets), _BULLET_TIERS)
        + _tier(skill_count, _SKILL_TIERS)
        + _tier(digit_runs, _DIGIT_TIERS)
        + (_EDUCATION_POINTS if doc.education else 0)
    )
    return min(score, MAX_CONTENT_STRENGTH)
