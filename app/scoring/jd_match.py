from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from app.schemas.resume import JobDescription, ResumeDocument, as_job_description, as_resume
from app.schemas.scoring import KeywordMatch, KeywordMatchResult

from .keywords import MAX_KEYWORDS, extract_keywords
from .text import matching_text, resume_fields, round_half_up

logger = logging.getLogger(__name__)


def _resume_keywords(doc: ResumeDocument) -> list[str]:
    # Per field, so capitalised names in neighbouring fields do not merge into one run.
    keywords: list[str] = []
    for field in resume_fields(doc):
        for keyword in extract_keywords(field):
            if keyword not in keywords:
                keywords.append(keyword)
    return keywords[:MAX_KEYWORDS]


def calculate_jd_match(
    resume: ResumeDocument | Mapping[str, Any] | None,
    job_description: JobDescription | Mapping[str, Any] | str | None,
) -> KeywordMatchResult:
    doc = as_resume(resume)
    jd = as_job_description(job_description)

    jd_keywords = extract_keywords(jd.description)
    resume_text = matching_text(doc)
    haystack = resume_text.lower()

    matches: list[KeywordMatch] = []
    for keyword in jd_keywords:
        # keywords come out lowercased and are matched as literals
        count = haystack.count(keyword)
        matches.append(KeywordMatch(keyword=keyword, found=count > 0, count=count))

    found_count = sum(1 for match in matches if match.found)
    score = round_half_up(found_count / len(jd_keywords) * 100) if jd_keywords else 0
    missing = [match.keyword for match in matches if not match.found]

    # Informational only: resume terms the posting never mentions. Not scored.
    jd_lookup = {keyword.casefold() for keyword in jd_keywords}
    extra = [keyword for keyword in _resume_keywords(doc) if keyword.casefold() not in jd_lookup]

    logger.debug(
        "jd_match keywords=%s found=%s score=%s extra=%s",
        len(jd_keywords),
        found_count,
        score,
        len(extra),
    )
    return KeywordMatchResult(score=score, matches=matches, missing=missing, extra=extra)
