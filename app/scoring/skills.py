from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from app.schemas.resume import ResumeDocument, as_resume

TECHNICAL_MARKERS: tuple[str, ...] = (
    "javascript",
    "python",
    "react",
    "node",
    "aws",
    "docker",
    "sql",
    "api",
    "git",
    "linux",
    "typescript",
    "java",
    "c++",
    "vue",
    "angular",
    "mongodb",
    "postgresql",
    "kubernetes",
    "graphql",
)


def is_technical_skill(skill: str) -> bool:
    lowered = (skill or "").lower()
    return any(marker in lowered for marker in TECHNICAL_MARKERS)


def add_missing_skill(resume: ResumeDocument | Mapping[str, Any] | None, skill: str) -> ResumeDocument:
    """Return a copy of the resume with ``skill`` filed under technical or soft skills."""
    doc = as_resume(resume)
    cleaned = (skill or "").strip()
    if not cleaned:
        return doc

    bucket = "technical" if is_technical_skill(cleaned) else "soft"
    current = list(getattr(doc.skills, bucket))
    if cleaned in current:
        return doc

    skills = doc.skills.model_copy(update={bucket: [*current, cleaned]})
    return doc.model_copy(update={"skills": skills})
