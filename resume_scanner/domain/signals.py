"""Signal analyzers: keywords, action verbs, readability and formatting.

All functions operate on content strings -- no file I/O.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import List, Tuple

from .extractors.skills import find_terms
from .knowledge_base import (
    ACTION_VERBS,
    EXPERIENCED_KEYWORDS,
    FRESHER_KEYWORDS,
    FRESHER_SOFT_SAMPLE,
    FRESHER_TECHNICAL_SAMPLE,
    IRREGULAR_VERB_FORMS,
    SOFT_SKILLS,
    TECHNICAL_SKILLS,
)
from .models import ActionVerbAnalysis, ExperienceLevel, ExtractedProfile, FormattingAnalysis, KeywordAnalysis
from .windows import bullet_text

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

MAX_RELEVANCE_DENOMINATOR = 25
MAX_MISSING_VERBS = 8

MIN_WORDS = 200
IDEAL_MIN_WORDS = 400
MAX_WORDS = 1200
MIN_BULLETS = 5
MIN_ACTION_VERBS = 5
STRONG_ACTION_VERBS = 6
MIN_ACHIEVEMENTS = 2
MIN_TECHNICAL_SKILLS = 5
STRONG_TECHNICAL_SKILLS = 8
MIN_FRESHER_PROJECTS = 2
MIN_EXPERIENCED_ACHIEVEMENTS = 4

ISSUE_PENALTY = 8
STRENGTH_BONUS = 5

NEUTRAL_READABILITY = 50

_SENTENCE_SPLIT = re.compile(r"[.!?]+|\n")
_WORD = re.compile(r"[A-Za-z]+")
_VOWEL_GROUP = re.compile(r"[aeiouy]+")


# ---------------------------------------------------------------------------
# Keywords
# ---------------------------------------------------------------------------


def relevant_keywords(level: ExperienceLevel) -> Tuple[str, ...]:
    """Return the keyword set scored for *level*, deduplicated in order."""
    if level is ExperienceLevel.FRESHER:
        terms = (
            FRESHER_KEYWORDS
            + TECHNICAL_SKILLS[:FRESHER_TECHNICAL_SAMPLE]
            + SOFT_SKILLS[:FRESHER_SOFT_SAMPLE]
        )
    else:
        terms = EXPERIENCED_KEYWORDS + TECHNICAL_SKILLS + SOFT_SKILLS
    return tuple(dict.fromkeys(term.lower() for term in terms))


def analyze_keywords(text: str, level: ExperienceLevel) -> KeywordAnalysis:
    """Match the level's keyword set against *text*.

    Relevance is ``found / min(set size, 25) * 100``, capped at 100, so a
    document does not need every term of a large set to reach full marks.
    """
    keywords = relevant_keywords(level)
    found = find_terms(text.lower(), keywords)
    missing = tuple(term for term in keywords if term not in found)
    denominator = min(len(keywords), MAX_RELEVANCE_DENOMINATOR)
    relevance = min(round(len(found) / denominator * 100), 100) if denominator else 0
    return KeywordAnalysis(found=found, missing=missing, relevance_score=relevance)


# ---------------------------------------------------------------------------
# Action verbs
# ---------------------------------------------------------------------------


def analyze_action_verbs(text: str) -> ActionVerbAnalysis:
    """Find action verbs in base or inflected form ("develop", "developed", "led")."""
    found: List[str] = []
    missing: List[str] = []
    for verb in ACTION_VERBS:
        if _verb_pattern(verb).search(text):
            found.append(verb)
        else:
            missing.append(verb)
    return ActionVerbAnalysis(found=tuple(found), missing=tuple(missing[:MAX_MISSING_VERBS]))


@lru_cache(maxsize=None)
def _verb_pattern(verb: str) -> re.Pattern:
    if verb.endswith("e") and not verb.endswith("ee"):
        forms = rf"{re.escape(verb[:-1])}(?:e|ed|es|ing)"
    else:
        forms = rf"{re.escape(verb)}(?:ed|ing|s)?"
    irregular = "".join(f"|{re.escape(form)}" for form in IRREGULAR_VERB_FORMS.get(verb, ()))
    return re.compile(rf"\b(?:{forms}{irregular})\b", re.IGNORECASE)


# ---------------------------------------------------------------------------
# Counters
# ---------------------------------------------------------------------------


def count_words(text: str) -> int:
    return len(text.split())


def count_bullets(text: str) -> int:
    """Count bulleted or numbered lines."""
    return sum(1 for line in text.splitlines() if bullet_text(line) is not None)


# ---------------------------------------------------------------------------
# Readability
# ---------------------------------------------------------------------------


def score_readability(text: str) -> int:
    """Flesch Reading Ease, clamped to [0, 100] and re-centered for résumés.

    Syllables are approximated by vowel groups.  Text without sentences or
    words scores a neutral 50.
    """
    sentences = [s for s in _SENTENCE_SPLIT.split(text) if _WORD.search(s)]
    words = _WORD.findall(text)
    if not sentences or not words:
        return NEUTRAL_READABILITY

    syllables = sum(_count_syllables(word) for word in words)
    flesch = 206.835 - 1.015 * (len(words) / len(sentences)) - 84.6 * (syllables / len(words))
    flesch = max(0.0, min(100.0, flesch))
    return round((flesch + 50) / 1.5)


def _count_syllables(word: str) -> int:
    return max(1, len(_VOWEL_GROUP.findall(word.lower())))


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


def analyze_formatting(
    profile: ExtractedProfile,
    level: ExperienceLevel,
    *,
    word_count: int,
    bullet_count: int,
    action_verb_count: int,
    achievement_count: int,
) -> FormattingAnalysis:
    """Rule-based issue and strength list.

    Score is ``100 - 8 * issues + 5 * strengths`` clamped to [0, 100].
    """
    issues: List[str] = []
    strengths: List[str] = []

    if word_count < MIN_WORDS:
        issues.append(f"Resume is too short ({word_count} words). Add more details about your experience and skills.")
    elif word_count > MAX_WORDS:
        issues.append(f"Resume is too long ({word_count} words). Keep it concise (ideally 1-2 pages).")
    elif word_count >= IDEAL_MIN_WORDS:
        strengths.append(f"Good length ({word_count} words)")

    if bullet_count < MIN_BULLETS:
        issues.append("Use bullet points to list responsibilities and achievements.")

    if action_verb_count < MIN_ACTION_VERBS:
        issues.append("Use more action verbs (achieved, developed, managed, etc.).")
    elif action_verb_count >= STRONG_ACTION_VERBS:
        strengths.append(f"Strong use of action verbs ({action_verb_count} found)")

    if achievement_count < MIN_ACHIEVEMENTS:
        issues.append("Add quantifiable achievements with numbers and metrics.")

    if not profile.email:
        issues.append("Email address not found. Add contact information.")
    if not profile.phone:
        issues.append("Phone number not found. Add contact information.")
    if profile.linkedin_handle:
        strengths.append("LinkedIn profile included")

    technical_count = len(profile.skills.technical)
    if technical_count < MIN_TECHNICAL_SKILLS:
        issues.append("Add more relevant technical skills to improve keyword matching.")
    elif technical_count >= STRONG_TECHNICAL_SKILLS:
        strengths.append(f"Broad technical skill set ({technical_count} skills)")

    if level is ExperienceLevel.FRESHER:
        if len(profile.projects) < MIN_FRESHER_PROJECTS:
            issues.append("As a fresher, highlight at least two projects or internships.")
        if not profile.has_gpa:
            issues.append("Consider adding your GPA/CGPA if it's strong.")
    else:
        if profile.total_years_experience == 0:
            issues.append("Clearly mention your years of experience.")
        if achievement_count < MIN_EXPERIENCED_ACHIEVEMENTS:
            issues.append("Experienced professionals should highlight measurable achievements.")

    score = 100 - ISSUE_PENALTY * len(issues) + STRENGTH_BONUS * len(strengths)
    return FormattingAnalysis(
        score=max(0, min(100, score)),
        issues=tuple(issues),
        strengths=tuple(strengths),
    )
