from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .resume import JobDescription, ResumeDocument


class _Body(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ATSRequest(_Body):
    resume: ResumeDocument = Field(default_factory=ResumeDocument)


class JDMatchRequest(_Body):
    resume: ResumeDocument = Field(default_factory=ResumeDocument)
    job_description: JobDescription = Field(default_factory=JobDescription)


class KeywordsRequest(_Body):
    text: str = Field(default="", max_length=50000)


class KeywordsResponse(_Body):
    keywords: list[str]


class ReportRequest(_Body):
    resume: ResumeDocument = Field(default_factory=ResumeDocument)
    job_description: JobDescription | None = None
    length_score: float | None = Field(default=None, ge=0, le=100)
    save: bool = False


class ReportLinesResponse(_Body):
    lines: list[str]


class AddSkillRequest(_Body):
    resume: ResumeDocument = Field(default_factory=ResumeDocument)
    skill: str = Field(min_length=1, max_length=120)


class ResumeRequest(_Body):
    resume: ResumeDocument = Field(default_factory=ResumeDocument)


class BulletsRequest(_Body):
    position: str = Field(default="", max_length=200)
    company: str = Field(default="", max_length=200)
    bullets: list[str] = Field(default_factory=list, max_length=30)


class BulletsResponse(_Body):
    bullets: list[str]


class CoverLetterRequest(_Body):
    resume: ResumeDocument = Field(default_factory=ResumeDocument)
    job_description: JobDescription = Field(default_factory=JobDescription)


class TextRequest(_Body):
    text: str = Field(min_length=1, max_length=50000)


class TextResponse(_Body):
    text: str
