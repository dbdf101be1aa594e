"""Resume Scanner Domain - Pure analysis logic for résumé text.

This package contains pure functions with no file system, CLI or third-party
dependencies. All I/O is handled by the tools layer; this package operates on
strings and returns immutable result objects.
"""

from .ats_scorer import SIGNAL_WEIGHTS, analyze, format_ats_report, score_label
from .extractors import extract_profile
from .models import (
    ActionVerbAnalysis,
    ATSResult,
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    ExperienceLevel,
    ExtractedProfile,
    FormattingAnalysis,
    KeywordAnalysis,
    Priority,
    ProjectEntry,
    SectionAnalysis,
    SkillSet,
    Suggestion,
)
from .section_scorer import SECTION_WEIGHTS, score_sections
from .signals import analyze_action_verbs, analyze_formatting, analyze_keywords, score_readability
from .suggestions import generate_suggestions
from .windows import section_window

__all__ = [
    # Engine
    "analyze",
    "score_label",
    "format_ats_report",
    "SIGNAL_WEIGHTS",
    # Extraction
    "extract_profile",
    "section_window",
    # Scoring
    "score_sections",
    "SECTION_WEIGHTS",
    "analyze_keywords",
    "analyze_action_verbs",
    "analyze_formatting",
    "score_readability",
    "generate_suggestions",
    # Models
    "ATSResult",
    "ActionVerbAnalysis",
    "ContactInfo",
    "EducationEntry",
    "ExperienceEntry",
    "ExperienceLevel",
    "ExtractedProfile",
    "FormattingAnalysis",
    "KeywordAnalysis",
    "Priority",
    "ProjectEntry",
    "SectionAnalysis",
    "SkillSet",
    "Suggestion",
]
