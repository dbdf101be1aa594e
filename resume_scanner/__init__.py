"""Resume Scanner - deterministic ATS compatibility analysis for résumé text."""

from .domain import ATSResult, ExperienceLevel, analyze, format_ats_report, score_label

__version__ = "0.1.0"

__all__ = ["ATSResult", "ExperienceLevel", "analyze", "format_ats_report", "score_label", "__version__"]
