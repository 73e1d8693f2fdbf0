from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from app.schemas.resume import JobDescription, ResumeDocument, as_job_description, as_resume

from . import prompts
from .client import AITextClient, AITextError

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"^```(?:json)?\s*|\s*```$")


def strip_code_fences(text: str) -> str:
    return _FENCE_RE.sub("", (text or "").strip())


def _load_json(text: str) -> Any:
    try:
        return json.loads(strip_code_fences(text))
    except ValueError as exc:
        raise AITextError("AI provider returned malformed JSON. Try again.", code="invalid_json") from exc


async def generate_summary(client: AITextClient, resume: ResumeDocument | Mapping[str, Any]) -> str:
    return await client.complete(prompts.summary_prompt(as_resume(resume)))


async def generate_bullet_points(
    client: AITextClient,
    position: str,
    company: str,
    bullets: list[str],
) -> list[str]:
    raw = await client.complete(prompts.bullet_points_prompt(position, company, bullets))
    parsed = _load_json(raw)
    if not isinstance(parsed, list):
        raise AITextError("AI provider did not return a list of bullet points.", code="invalid_json")
    return [str(item).strip() for item in parsed if str(item).strip()]


async def generate_cover_letter(
    client: AITextClient,
    resume: ResumeDocument | Mapping[str, Any],
    job: JobDescription | Mapping[str, Any] | str,
) -> str:
    return await client.complete(prompts.cover_letter_prompt(as_resume(resume), as_job_description(job)))


async def improve_text(client: AITextClient, text: str) -> str:
    return await client.complete(prompts.improve_text_prompt(text))


async def quantify_achievement(client: AITextClient, achievement: str) -> str:
    return await client.complete(prompts.quantify_prompt(achievement))


async def parse_resume_text(client: AITextClient, text: str) -> ResumeDocument:
    raw = await client.complete(prompts.parse_resume_prompt(text))
    parsed = _load_json(raw)
    if not isinstance(parsed, dict):
        raise AITextError("AI provider did not return a resume object.", code="invalid_json")
    try:
        return ResumeDocument.model_validate(parsed)
    except ValidationError as exc:
        logger.warning("ai_resume_parse_invalid errors=%s", exc.error_count())
        raise AITextError("AI provider returned an unusable resume structure.", code="invalid_json") from exc
