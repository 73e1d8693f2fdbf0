from __future__ import annotations

from types import MappingProxyType

from app.schemas.scoring import ATSScore

from .text import round_half_up

# Formatting weight reads the ATS formatting sub-score, not the ATS overall.
OVERALL_WEIGHTS = MappingProxyType(
    {
        "jd_match": 0.40,
        "formatting": 0.30,
        "content_strength": 0.20,
        "length": 0.10,
    }
)


def calculate_overall_score(
    ats_score: ATSScore,
    jd_match_score: float,
    content_strength: float,
    length_score: float,
) -> int:
    return round_half_up(
        jd_match_score * OVERALL_WEIGHTS["jd_match"]
        + ats_score.sections.formatting * OVERALL_WEIGHTS["formatting"]
        + content_strength * OVERALL_WEIGHTS["content_strength"]
        + length_score * OVERALL_WEIGHTS["length"]
    )
