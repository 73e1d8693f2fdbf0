from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

from app.schemas.resume import ExperienceEntry
from app.schemas.scoring import QuantifiedMetrics

# "k\b" also catches any word ending in k (e.g. "framework"); kept as-is so counts stay comparable.
_METRIC_RE = re.compile(r"\d|%|\$|percent|dollar|million|thousand|k\b", re.IGNORECASE)
MAX_SUGGESTIONS = 5
PREVIEW_CHARS = 50
SUGGESTION_TEMPLATE = 'Add a metric to "{preview}..." (e.g. team size, % improvement, time or money saved)'


def has_metric(bullet: str) -> bool:
    return bool(_METRIC_RE.search(bullet or ""))


def _entries(experience: Sequence[ExperienceEntry | Mapping[str, Any]] | None) -> list[ExperienceEntry]:
    if not isinstance(experience, (list, tuple)):
        return []
    entries: list[ExperienceEntry] = []
    for item in experience:
        if isinstance(item, ExperienceEntry):
            entries.append(item)
        elif isinstance(item, Mapping):
            entries.append(ExperienceEntry.model_validate(item))
    return entries


def scan_quantified_metrics(
    experience: Sequence[ExperienceEntry | Mapping[str, Any]] | None,
) -> QuantifiedMetrics:
    metric_count = 0
    without: list[str] = []
    for entry in _entries(experience):
        for bullet in entry.description:
            if not bullet.strip():
                continue
            if has_metric(bullet):
                metric_count += 1
            else:
                without.append(bullet.strip())

    suggestions = [
        SUGGESTION_TEMPLATE.format(preview=bullet[:PREVIEW_CHARS]) for bullet in without[:MAX_SUGGESTIONS]
    ]
    return QuantifiedMetrics(
        has_metrics=metric_count > 0,
        metric_count=metric_count,
        bullets_without_metrics=len(without),
        suggestions=suggestions,
    )
