from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from app.core.config.scoring import get_score_bands, get_scoring_value
from app.schemas.resume import JobDescription, ResumeDocument, as_job_description, as_resume
from app.schemas.scoring import AnalysisRecord, KeywordMatchResult, ResumeAnalysis

from .aggregate import calculate_overall_score
from .ats import calculate_ats_score
from .content_strength import calculate_content_strength
from .jd_match import calculate_jd_match
from .metrics import scan_quantified_metrics
from .overused_words import detect_overused_words
from .text import combined_text

logger = logging.getLogger(__name__)

_DEFAULT_BANDS: tuple[tuple[str, int], ...] = (
    ("excellent", 80),
    ("good", 60),
    ("fair", 40),
    ("needs_work", 0),
)


def score_band(score: int) -> str:
    bands = get_score_bands() or _DEFAULT_BANDS
    for name, minimum in bands:
        if score >= minimum:
            return name
    return bands[-1][0]


def analyze_resume(
    resume: ResumeDocument | Mapping[str, Any] | None,
    job_description: JobDescription | Mapping[str, Any] | str | None = None,
    *,
    length_score: float | None = None,
) -> ResumeAnalysis:
    doc = as_resume(resume)
    jd = as_job_description(job_description)

    ats = calculate_ats_score(doc)
    keyword_match = calculate_jd_match(doc, jd) if jd.description.strip() else KeywordMatchResult()
    content_strength = calculate_content_strength(doc)
    effective_length = float(ats.sections.length if length_score is None else length_score)
    overall = calculate_overall_score(ats, keyword_match.score, content_strength, effective_length)

    missing_limit = int(get_scoring_value("report.missing_skills_limit", 10))
    analysis = ResumeAnalysis(
        overall=overall,
        band=score_band(overall),
        ats=ats,
        keyword_match=keyword_match,
        content_strength=content_strength,
        length_score=effective_length,
        overused_words=detect_overused_words(combined_text(doc)),
        quantified_metrics=scan_quantified_metrics(doc.experience),
        missing_skills=keyword_match.missing[:missing_limit],
    )
    logger.debug(
        "resume_analysis overall=%s ats=%s jd=%s content=%s length=%s",
        overall,
        ats.overall,
        keyword_match.score,
        content_strength,
        effective_length,
    )
    return analysis


def build_analysis_record(
    analysis: ResumeAnalysis,
    resume: ResumeDocument | Mapping[str, Any] | None,
    job_description: JobDescription | Mapping[str, Any] | str | None = None,
) -> AnalysisRecord:
    doc = as_resume(resume)
    jd = as_job_description(job_description)
    return AnalysisRecord(
        full_name=doc.personal_info.full_name,
        email=doc.personal_info.email,
        job_title=jd.title,
        company_name=jd.company,
        job_description=jd.description,
        overall_score=analysis.overall,
        keyword_match=analysis.keyword_match.score,
        ats_compatibility=analysis.ats.overall,
        content_strength=analysis.content_strength,
        length_score=analysis.length_score,
        missing_skills=list(analysis.keyword_match.missing),
        overused_words=[item.word for item in analysis.overused_words],
    )


def _format_score(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else f"{value:.1f}"


def render_match_report(analysis: ResumeAnalysis) -> list[str]:
    """Plain lines for the downloadable match report, in print order."""
    shown = int(get_scoring_value("report.overused_suggestions_shown", 2))
    lines = [
        "Resume Match Report",
        f"Overall Resume Score: {analysis.overall}/100",
        f"Keyword Match: {analysis.keyword_match.score}%",
        f"ATS Compatibility: {analysis.ats.overall}%",
        f"Content Strength: {analysis.content_strength}%",
        f"Length Score: {_format_score(analysis.length_score)}%",
    ]

    if analysis.missing_skills:
        lines.append("Missing Skills:")
        lines.extend(f"• {skill}" for skill in analysis.missing_skills)

    if analysis.overused_words:
        lines.append("Overused Words:")
        for item in analysis.overused_words:
            lines.append(f'"{item.word}" ({item.count}x) - Try: {", ".join(item.suggestions[:shown])}')

    metrics = analysis.quantified_metrics
    if metrics.bullets_without_metrics > 0:
        lines.append("Quantified Metrics:")
        lines.append(
            f"{metrics.bullets_without_metrics} bullet points lack metrics. Add numbers to show impact."
        )
    return lines
