"""Field extractors.

Each extractor is an independent pure function of the résumé text.
"""

from __future__ import annotations

from ..models import ExtractedProfile
from .achievements import detect_achievements
from .certifications import extract_certifications
from .contact import extract_contact
from .duration import estimate_years_experience, normalize_year
from .education import extract_education
from .experience import extract_experience
from .projects import extract_projects
from .skills import classify_skills, find_terms
from .summary import extract_summary


def extract_profile(text: str) -> ExtractedProfile:
    """Run every field extractor over *text* and assemble the profile."""
    return ExtractedProfile(
        contact=extract_contact(text),
        education=extract_education(text),
        experience=extract_experience(text),
        skills=classify_skills(text),
        projects=extract_projects(text),
        certifications=extract_certifications(text),
        summary=extract_summary(text),
        total_years_experience=estimate_years_experience(text),
    )


__all__ = [
    "extract_profile",
    "extract_contact",
    "extract_education",
    "extract_experience",
    "classify_skills",
    "find_terms",
    "extract_projects",
    "extract_certifications",
    "detect_achievements",
    "estimate_years_experience",
    "normalize_year",
    "extract_summary",
]
