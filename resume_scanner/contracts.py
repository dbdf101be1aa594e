"""Serialized ATS result document contracts."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Document(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class EducationDocument(_Document):
    degree_label: str
    institution: str
    year: str
    gpa: Optional[str] = None


class ExperienceDocument(_Document):
    title: str
    company: str
    duration: str
    description: list[str]


class ProjectDocument(_Document):
    name: str
    description: str
    technologies: list[str] = Field(max_length=10)


class SkillsDocument(_Document):
    technical: list[str]
    soft: list[str]
    languages: list[str]


class ExtractedInfoDocument(_Document):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    linkedin_handle: Optional[str] = None
    github_handle: Optional[str] = None
    website_url: Optional[str] = None
    education: list[EducationDocument] = Field(max_length=5)
    experience: list[ExperienceDocument] = Field(max_length=6)
    skills: SkillsDocument
    projects: list[ProjectDocument] = Field(max_length=5)
    certifications: list[str] = Field(max_length=8)
    summary: Optional[str] = Field(default=None, max_length=400)
    total_years_experience: int = Field(ge=0)
    languages: list[str]


class KeywordsDocument(_Document):
    found: list[str]
    missing: list[str]
    relevance_score: int = Field(ge=0, le=100)


class SuggestionDocument(_Document):
    priority: Literal["High", "Medium", "Low"]
    text: str


class FormattingDocument(_Document):
    score: int = Field(ge=0, le=100)
    issues: list[str]
    strengths: list[str]


class SectionDocument(_Document):
    name: str
    present: bool
    score: int = Field(ge=0, le=100)
    details: str
    weight: float = Field(ge=0, le=1)


class ActionVerbsDocument(_Document):
    found: list[str]
    missing: list[str] = Field(max_length=8)


class ATSResultDocument(_Document):
    score: int = Field(ge=0, le=100)
    experience_level: Literal["fresher", "experienced"]
    extracted_info: ExtractedInfoDocument
    keywords: KeywordsDocument
    suggestions: list[SuggestionDocument] = Field(min_length=1)
    formatting: FormattingDocument
    sections: list[SectionDocument]
    action_verbs: ActionVerbsDocument
    quantifiable_achievements: list[str] = Field(max_length=8)
    readability_score: int = Field(ge=0, le=100)
    bullet_point_count: int = Field(ge=0)
    word_count: int = Field(ge=0)


def to_json(document: dict, indent: int = 2) -> str:
    """Validate a result ``to_dict()`` document and dump it as camelCase JSON."""
    return ATSResultDocument.model_validate(document).model_dump_json(by_alias=True, indent=indent)
