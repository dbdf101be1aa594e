"""ATS compatibility analysis: the single entry point of the engine.

All functions operate on content strings -- no file I/O.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Union

from .extractors import detect_achievements, extract_profile
from .models import ATSResult, ExperienceLevel, Priority
from .section_scorer import score_sections, weighted_section_total
from .signals import (
    analyze_action_verbs,
    analyze_formatting,
    analyze_keywords,
    count_bullets,
    count_words,
    score_readability,
)
from .suggestions import generate_suggestions

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SIGNAL_WEIGHTS: Dict[str, float] = {
    "keywords": 0.15,
    "action_verbs": 0.10,
    "achievements": 0.10,
    "readability": 0.05,
    "formatting": 0.05,
}

ACTION_VERB_TARGET = 12
ACHIEVEMENT_POINTS = 12


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def analyze(
    text: Optional[str],
    level: Union[ExperienceLevel, str] = ExperienceLevel.FRESHER,
) -> ATSResult:
    """Analyze résumé *text* for ATS compatibility at the given *level*.

    Never raises on text input: a missing or empty text yields a low but
    valid result.  An unknown *level* string raises :class:`ValueError`.
    CRLF and CR line endings are read as plain newlines.
    """
    level = ExperienceLevel(level)
    text = (text or "").replace("\r\n", "\n").replace("\r", "\n")

    profile = extract_profile(text)
    achievements = detect_achievements(text)
    logger.debug(
        f"Extracted {len(profile.education)} education, {len(profile.experience)} experience, "
        f"{len(profile.projects)} project entries and {len(achievements)} achievements"
    )

    keywords = analyze_keywords(text, level)
    action_verbs = analyze_action_verbs(text)
    word_count = count_words(text)
    bullet_count = count_bullets(text)
    readability = score_readability(text)
    formatting = analyze_formatting(
        profile,
        level,
        word_count=word_count,
        bullet_count=bullet_count,
        action_verb_count=len(action_verbs.found),
        achievement_count=len(achievements),
    )
    sections = score_sections(profile, level, achievements)

    verb_score = min(len(action_verbs.found) / ACTION_VERB_TARGET * 100, 100)
    achievement_score = min(len(achievements) * ACHIEVEMENT_POINTS, 100)
    total = (
        weighted_section_total(sections)
        + keywords.relevance_score * SIGNAL_WEIGHTS["keywords"]
        + verb_score * SIGNAL_WEIGHTS["action_verbs"]
        + achievement_score * SIGNAL_WEIGHTS["achievements"]
        + readability * SIGNAL_WEIGHTS["readability"]
        + formatting.score * SIGNAL_WEIGHTS["formatting"]
    )
    score = max(0, min(100, round(total)))

    suggestions = generate_suggestions(
        profile,
        level,
        keywords=keywords,
        action_verbs=action_verbs,
        achievements=achievements,
        word_count=word_count,
        bullet_count=bullet_count,
        readability_score=readability,
    )
    logger.debug(f"ATS score {score} ({level.value}), {len(suggestions)} suggestions")

    return ATSResult(
        score=score,
        extracted_info=profile,
        keywords=keywords,
        suggestions=suggestions,
        formatting=formatting,
        sections=sections,
        action_verbs=action_verbs,
        quantifiable_achievements=achievements,
        readability_score=readability,
        bullet_point_count=bullet_count,
        word_count=word_count,
        experience_level=level,
    )


def score_label(score: int) -> str:
    """Map an overall score to its label."""
    if score >= 80:
        return "Excellent"
    elif score >= 60:
        return "Good"
    elif score >= 40:
        return "Needs Improvement"
    else:
        return "Poor"


# ---------------------------------------------------------------------------
# Formatting report (pure string output)
# ---------------------------------------------------------------------------


def format_ats_report(result: ATSResult) -> str:
    """Render an :class:`ATSResult` as a human-readable Markdown report."""
    info = result.extracted_info
    lines = [
        f"## ATS Score: {result.score}/100 {score_label(result.score)}",
        _score_bar(result.score),
        "",
        f"Experience level: {result.experience_level.value}",
        "",
        "| Section | Score | Weight |",
        "|---------|-------|--------|",
    ]
    for section in result.sections:
        marker = "" if section.present else " (missing)"
        lines.append(f"| {section.name}{marker} | {section.score:3d} | {section.weight:.0%} |")

    lines.extend(
        [
            "",
            "### Signals",
            f"- Keyword relevance: {result.keywords.relevance_score}/100 "
            f"({len(result.keywords.found)} found, {len(result.keywords.missing)} missing)",
            f"- Action verbs: {len(result.action_verbs.found)} found",
            f"- Quantified achievements: {len(result.quantifiable_achievements)}",
            f"- Readability: {result.readability_score}/100",
            f"- Formatting: {result.formatting.score}/100",
            f"- Words: {result.word_count}, bullet points: {result.bullet_point_count}",
        ]
    )

    contact = [value for value in (info.name, info.email, info.phone, info.location) if value]
    if contact:
        lines.append("")
        lines.append("### Contact")
        lines.append(" | ".join(contact))

    if result.formatting.issues:
        lines.append("")
        lines.append("### Formatting Issues")
        for issue in result.formatting.issues:
            lines.append(f"- {issue}")

    if result.suggestions:
        lines.append("")
        lines.append("### Suggestions")
        for i, s in enumerate(result.suggestions, 1):
            lines.append(f"{i}. {_PRIORITY_TAGS[s.priority]} {s.text}")

    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_PRIORITY_TAGS: Dict[Priority, str] = {
    Priority.HIGH: "[High]",
    Priority.MEDIUM: "[Medium]",
    Priority.LOW: "[Low]",
}


def _score_bar(score: int, width: int = 20) -> str:
    filled = round(score / 100 * width)
    return f"[{'=' * filled}{' ' * (width - filled)}]"

