"""Rule-based ATS compatibility checklist.

Twenty-four checks worth one point each. The overall score is the share of
points earned; the ``sections`` sub-scores are separate ratios, each computed
from its own subset of signals, so the UI can draw them as independent bars.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from app.schemas.resume import ResumeDocument, as_resume
from app.schemas.scoring import ATSScore, ATSSections

from .text import combined_text, count_digit_runs, non_blank, round_half_up

logger = logging.getLogger(__name__)

MAX_POINTS = 24
POSITIVE_FEEDBACK = "Resume looks great! All key sections are present."

ATS_VOCABULARY: tuple[str, ...] = (
    "experience",
    "skills",
    "achievement",
    "lead",
    "develop",
    "manage",
    "improve",
    "increase",
    "reduce",
    "project",
    "team",
    "deliver",
)
ATS_VOCABULARY_TARGET = 6

ACTION_VERBS: tuple[str, ...] = (
    "led",
    "developed",
    "managed",
    "created",
    "designed",
    "implemented",
    "built",
    "launched",
    "improved",
    "increased",
    "reduced",
    "delivered",
    "achieved",
    "optimized",
    "streamlined",
    "coordinated",
    "spearheaded",
    "established",
)
ACTION_VERB_TARGET = 3
_ACTION_VERB_RE = re.compile(r"\b(" + "|".join(ACTION_VERBS) + r")\b", re.IGNORECASE)

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_MONEY_OR_PERCENT_RE = re.compile(r"%|\$|\b(?:percent|dollar|million|thousand)", re.IGNORECASE)

SUMMARY_MIN_CHARS = 50
SUMMARY_MAX_CHARS = 500
MIN_TECHNICAL_SKILLS = 5
MIN_DIGIT_RUNS = 3
MIN_WORDS = 300
MAX_WORDS = 800
WORDS_PER_PAGE = 250


def _vocabulary_hits(lowered: str) -> int:
    return sum(1 for term in ATS_VOCABULARY if term in lowered)


def _action_verb_hits(text: str) -> int:
    return len({match.group(1).lower() for match in _ACTION_VERB_RE.finditer(text)})


def _length_ratio(word_count: int) -> int:
    if MIN_WORDS <= word_count <= MAX_WORDS:
        return 100
    if word_count < MIN_WORDS:
        return round_half_up(word_count / MIN_WORDS * 100)
    return max(0, round_half_up(100 - (word_count - MAX_WORDS) / 200 * 100))


def calculate_ats_score(resume: ResumeDocument | Mapping[str, Any] | None) -> ATSScore:
    doc = as_resume(resume)
    info = doc.personal_info
    feedback: list[str] = []
    points = 0

    def check(passed: bool, message: str | None) -> bool:
        nonlocal points
        if passed:
            points += 1
        elif message:
            feedback.append(message)
        return passed

    technical = non_blank(doc.skills.technical)
    soft = non_blank(doc.skills.soft)
    summary = doc.summary.strip()
    has_experience = len(doc.experience) > 0
    has_education = len(doc.education) > 0

    # Contact and basic info
    contact_checks = [
        check(bool(_EMAIL_RE.match(info.email.strip())), "Add a valid email address to your contact information"),
        check(bool(info.phone.strip()), "Add a phone number to your contact information"),
        check(bool(info.location.strip()), "Add your location (city and state or country)"),
        check(
            bool(info.linkedin.strip() or info.portfolio.strip()),
            "Add a LinkedIn profile or portfolio URL",
        ),
    ]

    # Content sections
    check(
        SUMMARY_MIN_CHARS <= len(summary) < SUMMARY_MAX_CHARS,
        "Professional summary is missing or not optimal (should be 50-500 characters)",
    )
    check(has_experience, "No work experience listed")
    check(
        any(non_blank(entry.description) for entry in doc.experience),
        "Work experience entries lack detailed descriptions",
    )
    check(has_education, "No education information provided")
    check(bool(technical or soft), "No skills listed")

    # Formatting and structure. Heading characters, tables and images cannot be
    # seen in structured data, so those three are assumed clean and always
    # awarded once the document has any content. Kept for score compatibility.
    has_content = not doc.is_blank()
    formatting_checks = [
        check(has_experience and has_education, "Include both work experience and education sections"),
        check(
            any(entry.start_date.strip() or entry.end_date.strip() for entry in doc.experience),
            "Add start and end dates to your work experience",
        ),
        check(has_content, None),
        check(
            # a single bullet already passes the description check above; this wants a list
            any(len(non_blank(entry.description)) >= 2 for entry in doc.experience),
            "Describe each role with bullet points (at least two per role)",
        ),
        check(has_content, None),
        check(has_content, None),
    ]

    # Keywords and optimization
    text = combined_text(doc)
    lowered = text.lower()
    vocabulary_hits = _vocabulary_hits(lowered)
    check(vocabulary_hits >= ATS_VOCABULARY_TARGET, "Resume could benefit from more ATS-friendly keywords")
    check(
        _action_verb_hits(text) >= ACTION_VERB_TARGET,
        "Start bullet points with strong action verbs (e.g. Led, Developed, Increased)",
    )
    check(len(technical) >= MIN_TECHNICAL_SKILLS, "List at least 5 technical skills")
    check(bool(soft), "Consider adding soft skills")

    # Quantifiable metrics
    digit_runs = count_digit_runs(text)
    check(digit_runs > 0, "Add quantifiable metrics (numbers, percentages, dollar amounts) to achievements")
    check(digit_runs >= MIN_DIGIT_RUNS, "Include at least 3 measurable results to demonstrate impact")
    check(bool(_MONEY_OR_PERCENT_RE.search(text)), "Express impact with percentages or dollar amounts")

    # Length and completeness
    word_count = len(text.split())
    check(
        MIN_WORDS <= word_count <= MAX_WORDS,
        f"Resume length may not be optimal (currently ~{round_half_up(word_count / WORDS_PER_PAGE)} pages)",
    )
    core_sections = [bool(summary), has_experience, has_education, bool(technical)]
    check(
        sum(core_sections) >= 4,
        "Complete all core sections: summary, experience, education and skills",
    )

    overall = round_half_up(points / MAX_POINTS * 100)
    sections = ATSSections(
        keywords=round_half_up(min(vocabulary_hits, ATS_VOCABULARY_TARGET) / ATS_VOCABULARY_TARGET * 100),
        formatting=round_half_up(sum(formatting_checks) / len(formatting_checks) * 100),
        contact=round_half_up(sum(contact_checks) / len(contact_checks) * 100),
        length=_length_ratio(word_count),
        sections=sum(core_sections) * 25,
    )
    logger.debug("ats_score points=%s overall=%s failed=%s", points, overall, len(feedback))
    return ATSScore(
        overall=overall,
        sections=sections,
        feedback=feedback or [POSITIVE_FEEDBACK],
    )
