from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _ScoreModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ATSSections(_ScoreModel):
    keywords: int = Field(ge=0, le=100)
    formatting: int = Field(ge=0, le=100)
    contact: int = Field(ge=0, le=100)
    length: int = Field(ge=0, le=100)
    sections: int = Field(ge=0, le=100)


class ATSScore(_ScoreModel):
    overall: int = Field(ge=0, le=100)
    sections: ATSSections
    feedback: list[str] = Field(min_length=1)


class KeywordMatch(_ScoreModel):
    keyword: str
    found: bool
    count: int = Field(ge=0)


class KeywordMatchResult(_ScoreModel):
    score: int = Field(default=0, ge=0, le=100)
    matches: list[KeywordMatch] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)
    extra: list[str] = Field(default_factory=list)


class OverusedWord(_ScoreModel):
    word: str
    count: int = Field(ge=2)
    suggestions: list[str] = Field(default_factory=list)


class QuantifiedMetrics(_ScoreModel):
    has_metrics: bool = False
    metric_count: int = Field(default=0, ge=0)
    bullets_without_metrics: int = Field(default=0, ge=0)
    suggestions: list[str] = Field(default_factory=list)


class ResumeAnalysis(_ScoreModel):
    overall: int = Field(ge=0, le=100)
    band: str
    ats: ATSScore
    keyword_match: KeywordMatchResult
    content_strength: int = Field(ge=0, le=100)
    length_score: float = Field(ge=0, le=100)
    overused_words: list[OverusedWord] = Field(default_factory=list)
    quantified_metrics: QuantifiedMetrics
    missing_skills: list[str] = Field(default_factory=list)


class AnalysisRecord(_ScoreModel):
    """Flat row handed to persistence and the admin listing."""

    full_name: str = ""
    email: str = ""
    job_title: str = ""
    company_name: str = ""
    job_description: str = ""
    overall_score: int = Field(ge=0, le=100)
    keyword_match: int = Field(ge=0, le=100)
    ats_compatibility: int = Field(ge=0, le=100)
    content_strength: int = Field(ge=0, le=100)
    length_score: float = Field(ge=0, le=100)
    missing_skills: list[str] = Field(default_factory=list)
    overused_words: list[str] = Field(default_factory=list)
    analyzed_at: str | None = None
