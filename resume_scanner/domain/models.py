"""Result types for resume analysis.

Every structure is a frozen dataclass holding tuples, created fresh per
analysis call.  ``to_dict()`` renders the plain key-value document handed to
callers (camelCase keys, lists instead of tuples).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class ExperienceLevel(Enum):
    FRESHER = "fresher"
    EXPERIENCED = "experienced"


class Priority(Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


# ---------------------------------------------------------------------------
# Extracted profile
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EducationEntry:
    degree_label: str
    institution: str = ""
    year: str = ""
    gpa: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "degreeLabel": self.degree_label,
            "institution": self.institution,
            "year": self.year,
            "gpa": self.gpa,
        }


@dataclass(frozen=True)
class ExperienceEntry:
    title: str
    company: str
    duration: str
    description: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "company": self.company,
            "duration": self.duration,
            "description": list(self.description),
        }


@dataclass(frozen=True)
class ProjectEntry:
    name: str
    description: str = ""
    technologies: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "technologies": list(self.technologies),
        }


@dataclass(frozen=True)
class SkillSet:
    technical: Tuple[str, ...] = ()
    soft: Tuple[str, ...] = ()
    languages: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "technical": list(self.technical),
            "soft": list(self.soft),
            "languages": list(self.languages),
        }


@dataclass(frozen=True)
class ContactInfo:
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    linkedin_handle: Optional[str] = None
    github_handle: Optional[str] = None
    website_url: Optional[str] = None


@dataclass(frozen=True)
class ExtractedProfile:
    """Structured candidate profile produced by the extractor stage."""

    contact: ContactInfo = field(default_factory=ContactInfo)
    education: Tuple[EducationEntry, ...] = ()
    experience: Tuple[ExperienceEntry, ...] = ()
    skills: SkillSet = field(default_factory=SkillSet)
    projects: Tuple[ProjectEntry, ...] = ()
    certifications: Tuple[str, ...] = ()
    summary: Optional[str] = None
    total_years_experience: int = 0

    # Flat accessors for the contact fields.
    @property
    def name(self) -> Optional[str]:
        return self.contact.name

    @property
    def email(self) -> Optional[str]:
        return self.contact.email

    @property
    def phone(self) -> Optional[str]:
        return self.contact.phone

    @property
    def location(self) -> Optional[str]:
        return self.contact.location

    @property
    def linkedin_handle(self) -> Optional[str]:
        return self.contact.linkedin_handle

    @property
    def github_handle(self) -> Optional[str]:
        return self.contact.github_handle

    @property
    def website_url(self) -> Optional[str]:
        return self.contact.website_url

    @property
    def languages(self) -> Tuple[str, ...]:
        return self.skills.languages

    @property
    def has_gpa(self) -> bool:
        return any(entry.gpa for entry in self.education)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "location": self.location,
            "linkedinHandle": self.linkedin_handle,
            "githubHandle": self.github_handle,
            "websiteUrl": self.website_url,
            "education": [e.to_dict() for e in self.education],
            "experience": [e.to_dict() for e in self.experience],
            "skills": self.skills.to_dict(),
            "projects": [p.to_dict() for p in self.projects],
            "certifications": list(self.certifications),
            "summary": self.summary,
            "totalYearsExperience": self.total_years_experience,
            "languages": list(self.languages),
        }


# ---------------------------------------------------------------------------
# Analysis results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SectionAnalysis:
    name: str
    present: bool
    score: int
    details: str
    weight: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "present": self.present,
            "score": self.score,
            "details": self.details,
            "weight": self.weight,
        }


@dataclass(frozen=True)
class KeywordAnalysis:
    found: Tuple[str, ...]
    missing: Tuple[str, ...]
    relevance_score: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "found": list(self.found),
            "missing": list(self.missing),
            "relevanceScore": self.relevance_score,
        }


@dataclass(frozen=True)
class ActionVerbAnalysis:
    found: Tuple[str, ...]
    missing: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {"found": list(self.found), "missing": list(self.missing)}


@dataclass(frozen=True)
class FormattingAnalysis:
    score: int
    issues: Tuple[str, ...] = ()
    strengths: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "issues": list(self.issues),
            "strengths": list(self.strengths),
        }


@dataclass(frozen=True)
class Suggestion:
    priority: Priority
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {"priority": self.priority.value, "text": self.text}


@dataclass(frozen=True)
class ATSResult:
    """Full output of :func:`resume_scanner.domain.analyze`."""

    score: int
    extracted_info: ExtractedProfile
    keywords: KeywordAnalysis
    suggestions: Tuple[Suggestion, ...]
    formatting: FormattingAnalysis
    sections: Tuple[SectionAnalysis, ...]
    action_verbs: ActionVerbAnalysis
    quantifiable_achievements: Tuple[str, ...]
    readability_score: int
    bullet_point_count: int
    word_count: int
    experience_level: ExperienceLevel = ExperienceLevel.FRESHER

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "experienceLevel": self.experience_level.value,
            "extractedInfo": self.extracted_info.to_dict(),
            "keywords": self.keywords.to_dict(),
            "suggestions": [s.to_dict() for s in self.suggestions],
            "formatting": self.formatting.to_dict(),
            "sections": [s.to_dict() for s in self.sections],
            "actionVerbs": self.action_verbs.to_dict(),
            "quantifiableAchievements": list(self.quantifiable_achievements),
            "readabilityScore": self.readability_score,
            "bulletPointCount": self.bullet_point_count,
            "wordCount": self.word_count,
        }
