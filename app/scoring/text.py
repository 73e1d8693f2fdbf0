from __future__ import annotations

import math
import re
from collections.abc import Iterable

from app.schemas.resume import ResumeDocument

_DIGIT_RUN_RE = re.compile(r"\d+")


def round_half_up(value: float) -> int:
    # Scores were first published with browser Math.round; keep .5 rounding upward.
    return int(math.floor(value + 0.5))


def count_digit_runs(text: str) -> int:
    return len(_DIGIT_RUN_RE.findall(text or ""))


def non_blank(items: Iterable[str]) -> list[str]:
    return [item for item in items if item and item.strip()]


def experience_bullets(resume: ResumeDocument) -> list[str]:
    bullets: list[str] = []
    for entry in resume.experience:
        bullets.extend(non_blank(entry.description))
    return bullets


def combined_text(resume: ResumeDocument) -> str:
    """Summary, experience bullets and both skill lists as one space-joined string."""
    chunks = [resume.summary]
    chunks.extend(experience_bullets(resume))
    chunks.extend(resume.skills.technical)
    chunks.extend(resume.skills.soft)
    return " ".join(chunk for chunk in chunks if chunk)


def matching_text(resume: ResumeDocument) -> str:
    """Text searched for job-description keywords; keeps original casing."""
    experience = " ".join(
        f"{entry.position} {entry.company} {' '.join(entry.description)}" for entry in resume.experience
    )
    education = " ".join(f"{entry.degree} {entry.school}" for entry in resume.education)
    return " ".join(
        [
            resume.summary,
            experience,
            " ".join(resume.skills.technical),
            " ".join(resume.skills.soft),
            education,
        ]
    )


def resume_fields(resume: ResumeDocument) -> list[str]:
    """The fields behind ``matching_text``, one string each, in the same order."""
    fields = [resume.summary]
    for entry in resume.experience:
        fields.extend([entry.position, entry.company, *entry.description])
    fields.extend(resume.skills.technical)
    fields.extend(resume.skills.soft)
    for entry in resume.education:
        fields.extend([entry.degree, entry.school])
    return [field for field in fields if field and field.strip()]
