from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def _as_text_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value.strip() else []
    if not isinstance(value, (list, tuple)):
        return []
    return [_as_text(item) for item in value if item is not None]


def _as_record_list(value: Any) -> list[Any]:
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, (Mapping, BaseModel))]


class _ResumeRecord(BaseModel):
    # Parser output is taken as-is: camelCase keys, extra keys ignored, no mutation after build.
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class PersonalInfo(_ResumeRecord):
    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    portfolio: str = ""

    @field_validator("full_name", "email", "phone", "location", "linkedin", "portfolio", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        return _as_text(value)


class ExperienceEntry(_ResumeRecord):
    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: str = ""
    location: str = ""
    current: bool = False
    description: list[str] = Field(default_factory=list)

    @field_validator("company", "position", "start_date", "end_date", "location", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        return _as_text(value)

    @field_validator("current", mode="before")
    @classmethod
    def _flag(cls, value: Any) -> bool:
        return value is True or (isinstance(value, str) and value.strip().lower() in {"true", "yes"})

    @field_validator("description", mode="before")
    @classmethod
    def _bullets(cls, value: Any) -> list[str]:
        return _as_text_list(value)


class EducationEntry(_ResumeRecord):
    degree: str = ""
    school: str = ""
    gpa: str = ""
    graduation_date: str = ""

    @field_validator("degree", "school", "gpa", "graduation_date", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        return _as_text(value)


class Skills(_ResumeRecord):
    technical: list[str] = Field(default_factory=list)
    soft: list[str] = Field(default_factory=list)

    @field_validator("technical", "soft", mode="before")
    @classmethod
    def _items(cls, value: Any) -> list[str]:
        return _as_text_list(value)


class ProjectEntry(_ResumeRecord):
    name: str = ""
    description: str = ""

    @field_validator("name", "description", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        return _as_text(value)


class CertificationEntry(_ResumeRecord):
    name: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        return _as_text(value)


class AchievementEntry(_ResumeRecord):
    name: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        return _as_text(value)


class ResumeDocument(_ResumeRecord):
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    summary: str = ""
    experience: list[ExperienceEntry] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    skills: Skills = Field(default_factory=Skills)
    projects: list[ProjectEntry] = Field(default_factory=list)
    certifications: list[CertificationEntry] = Field(default_factory=list)
    achievements: list[AchievementEntry] = Field(default_factory=list)

    @field_validator("personal_info", "skills", mode="before")
    @classmethod
    def _nested(cls, value: Any) -> Any:
        if isinstance(value, (Mapping, BaseModel)):
            return value
        return {}

    @field_validator("summary", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        return _as_text(value)

    @field_validator("experience", "education", "projects", "certifications", "achievements", mode="before")
    @classmethod
    def _records(cls, value: Any) -> list[Any]:
        return _as_record_list(value)

    def is_blank(self) -> bool:
        """True when no field carries any non-whitespace content."""
        info = self.personal_info
        texts = [
            info.full_name,
            info.email,
            info.phone,
            info.location,
            info.linkedin,
            info.portfolio,
            self.summary,
            *self.skills.technical,
            *self.skills.soft,
        ]
        if any(text.strip() for text in texts):
            return False
        return not (
            self.experience or self.education or self.projects or self.certifications or self.achievements
        )


class JobDescription(_ResumeRecord):
    title: str = ""
    description: str = ""
    company: str = ""
    required_skills: list[str] = Field(default_factory=list)

    @field_validator("title", "description", "company", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        return _as_text(value)

    @field_validator("required_skills", mode="before")
    @classmethod
    def _items(cls, value: Any) -> list[str]:
        return _as_text_list(value)


def as_resume(value: ResumeDocument | Mapping[str, Any] | None) -> ResumeDocument:
    if isinstance(value, ResumeDocument):
        return value
    if isinstance(value, Mapping):
        return ResumeDocument.model_validate(value)
    return ResumeDocument()


def as_job_description(value: JobDescription | Mapping[str, Any] | str | None) -> JobDescription:
    if isinstance(value, JobDescription):
        return value
    if isinstance(value, str):
        return JobDescription(description=value)
    if isinstance(value, Mapping):
        return JobDescription.model_validate(value)
    return JobDescription()
