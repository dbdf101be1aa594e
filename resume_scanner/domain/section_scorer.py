"""Per-section scoring with experience-level weight tables.

All functions operate on extracted data -- no file I/O.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Sequence, Tuple

from .models import ExperienceLevel, ExtractedProfile, SectionAnalysis

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

CONTACT = "contact"
SUMMARY = "summary"
EXPERIENCE = "experience"
EDUCATION = "education"
TECHNICAL_SKILLS = "technical_skills"
SOFT_SKILLS = "soft_skills"
CERTIFICATIONS = "certifications"
LANGUAGES = "languages"

SECTION_ORDER: Tuple[str, ...] = (
    CONTACT,
    SUMMARY,
    EXPERIENCE,
    EDUCATION,
    TECHNICAL_SKILLS,
    SOFT_SKILLS,
    CERTIFICATIONS,
    LANGUAGES,
)

SECTION_WEIGHTS: Dict[ExperienceLevel, Dict[str, float]] = {
    ExperienceLevel.FRESHER: {
        CONTACT: 0.15,
        SUMMARY: 0.10,
        EXPERIENCE: 0.25,
        EDUCATION: 0.20,
        TECHNICAL_SKILLS: 0.15,
        SOFT_SKILLS: 0.05,
        CERTIFICATIONS: 0.05,
        LANGUAGES: 0.05,
    },
    ExperienceLevel.EXPERIENCED: {
        CONTACT: 0.15,
        SUMMARY: 0.15,
        EXPERIENCE: 0.30,
        EDUCATION: 0.10,
        TECHNICAL_SKILLS: 0.15,
        SOFT_SKILLS: 0.05,
        CERTIFICATIONS: 0.05,
        LANGUAGES: 0.05,
    },
}

CONTACT_POINTS: Dict[str, int] = {
    "email": 30,
    "phone": 25,
    "name": 15,
    "linkedin": 15,
    "location": 10,
    "web": 5,
}

MAX_SCORED_YEARS = 10


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def section_name(section: str, level: ExperienceLevel) -> str:
    """Display name of *section*; the experience section depends on *level*."""
    if section == EXPERIENCE:
        return "Projects/Internships" if level is ExperienceLevel.FRESHER else "Work Experience"
    return _DISPLAY_NAMES[section]


def score_sections(
    profile: ExtractedProfile,
    level: ExperienceLevel,
    achievements: Sequence[str],
) -> Tuple[SectionAnalysis, ...]:
    """Score all eight sections in a fixed order, each in [0, 100]."""
    weights = SECTION_WEIGHTS[level]
    analyses: List[SectionAnalysis] = []
    for section in SECTION_ORDER:
        present, score, details = _SCORERS[section](profile, level, achievements)
        analyses.append(
            SectionAnalysis(
                name=section_name(section, level),
                present=present,
                score=max(0, min(100, score)),
                details=details,
                weight=weights[section],
            )
        )
    return tuple(analyses)


def weighted_section_total(sections: Sequence[SectionAnalysis]) -> float:
    return sum(section.score * section.weight for section in sections)


# ---------------------------------------------------------------------------
# Section formulas
# ---------------------------------------------------------------------------

_Scored = Tuple[bool, int, str]


def _score_contact(profile: ExtractedProfile, level: ExperienceLevel, achievements: Sequence[str]) -> _Scored:
    fields = {
        "email": profile.email,
        "phone": profile.phone,
        "name": profile.name,
        "linkedin": profile.linkedin_handle,
        "location": profile.location,
        "web": profile.github_handle or profile.website_url,
    }
    score = sum(CONTACT_POINTS[key] for key, value in fields.items() if value)
    missing = [key for key in ("email", "phone") if not fields[key]]
    details = "Email and phone found" if not missing else f"Missing {' and '.join(missing)}"
    return bool(profile.email or profile.phone), score, details


def _score_summary(profile: ExtractedProfile, level: ExperienceLevel, achievements: Sequence[str]) -> _Scored:
    if not profile.summary:
        return False, 0, "Add a professional summary"
    length = len(profile.summary)
    if length >= 200:
        score = 100
    elif length >= 100:
        score = 85
    else:
        score = 60
    return True, score, f"Summary found ({length} characters)"


def _score_experience(profile: ExtractedProfile, level: ExperienceLevel, achievements: Sequence[str]) -> _Scored:
    jobs = len(profile.experience)
    if level is ExperienceLevel.FRESHER:
        projects = len(profile.projects)
        score = projects * 20 + jobs * 20 + len(achievements) * 5
        present = bool(jobs or projects)
        details = f"{projects} projects and {jobs} positions found" if present else "Add projects or internships"
        return present, score, details

    years = min(profile.total_years_experience, MAX_SCORED_YEARS)
    score = jobs * 20 + years * 3 + len(achievements) * 5
    details = f"{jobs} positions found" if jobs else "Add work experience"
    return bool(jobs), score, details


def _score_education(profile: ExtractedProfile, level: ExperienceLevel, achievements: Sequence[str]) -> _Scored:
    entries = profile.education
    if not entries:
        return False, 0, "Add education details"
    score = 50 + 15 * (len(entries) - 1)
    if any(entry.institution for entry in entries):
        score += 15
    if any(entry.year for entry in entries):
        score += 10
    if profile.has_gpa:
        score += 10
    return True, score, f"{len(entries)} qualifications found"


def _score_technical(profile: ExtractedProfile, level: ExperienceLevel, achievements: Sequence[str]) -> _Scored:
    count = len(profile.skills.technical)
    details = f"{count} technical skills identified" if count else "Add relevant technical skills"
    return bool(count), count * 10, details


def _score_soft(profile: ExtractedProfile, level: ExperienceLevel, achievements: Sequence[str]) -> _Scored:
    count = len(profile.skills.soft)
    details = f"{count} soft skills identified" if count else "Mention soft skills such as teamwork or leadership"
    return bool(count), count * 20, details


def _score_certifications(profile: ExtractedProfile, level: ExperienceLevel, achievements: Sequence[str]) -> _Scored:
    count = len(profile.certifications)
    details = f"{count} certifications found" if count else "Consider adding certifications"
    return bool(count), count * 35, details


def _score_languages(profile: ExtractedProfile, level: ExperienceLevel, achievements: Sequence[str]) -> _Scored:
    count = len(profile.languages)
    details = f"{count} languages listed" if count else "List the languages you speak"
    return bool(count), count * 50, details


_SCORERS: Dict[str, Callable[[ExtractedProfile, ExperienceLevel, Sequence[str]], _Scored]] = {
    CONTACT: _score_contact,
    SUMMARY: _score_summary,
    EXPERIENCE: _score_experience,
    EDUCATION: _score_education,
    TECHNICAL_SKILLS: _score_technical,
    SOFT_SKILLS: _score_soft,
    CERTIFICATIONS: _score_certifications,
    LANGUAGES: _score_languages,
}

_DISPLAY_NAMES: Dict[str, str] = {
    CONTACT: "Contact Information",
    SUMMARY: "Professional Summary",
    EDUCATION: "Education",
    TECHNICAL_SKILLS: "Technical Skills",
    SOFT_SKILLS: "Soft Skills",
    CERTIFICATIONS: "Certifications",
    LANGUAGES: "Languages",
}
