"""Quantified achievement detection."""

from __future__ import annotations

import re
from typing import List, Sequence, Tuple

from ..windows import bullet_text

MAX_ACHIEVEMENTS = 8
MIN_FRAGMENT_LENGTH = 30
MAX_FRAGMENT_LENGTH = 200

# Sentence terminators; a period between two digits ("3.8", "$1.2M") does not split.
FRAGMENT_SPLIT = re.compile(r"[!?\n]|(?<!\d)\.|\.(?!\d)")

QUANTIFIED_PATTERNS: Sequence[re.Pattern] = (
    # Percentages, currency and magnitudes.
    re.compile(
        r"\d+(?:\.\d+)?\s*%|[$€£₹]\s?\d[\d,]*(?:\.\d+)?\s*[kmb]?\b"
        r"|\b\d+(?:\.\d+)?\s*(?:percent|million|billion|thousand|k\b|m\b)",
        re.IGNORECASE,
    ),
    # Multipliers such as "3x faster".
    re.compile(r"\b\d+(?:\.\d+)?x\b", re.IGNORECASE),
    # An impact verb with a number at most three words later.
    re.compile(
        r"\b(?:increas|reduc|decreas|improv|grew|grow|sav|cut|boost|generat|achiev|deliver|manag|led|lead|"
        r"train|mentor|launch|scal|optimiz|accelerat|expand)\w*\W+(?:\w+\W+){0,3}?\$?\d",
        re.IGNORECASE,
    ),
    # Counts of people, users or work items.
    re.compile(
        r"\b\d[\d,]*\+?\s*(?:users|customers|clients|people|employees|members|engineers|developers|"
        r"projects|students|teams?|countries|downloads|transactions|requests|applications|stores)\b",
        re.IGNORECASE,
    ),
    # Superlatives.
    re.compile(r"#\s?1\b|\bno\.\s?1\b|\btop\b|\bfirst[ \t]+place\b|\bbest\b", re.IGNORECASE),
)


def detect_achievements(text: str) -> Tuple[str, ...]:
    """Return up to eight sentence fragments that carry a quantified claim."""
    achievements: List[str] = []
    seen = set()
    for raw in FRAGMENT_SPLIT.split(text):
        fragment = (bullet_text(raw) or raw).strip()
        fragment = re.sub(r"\s+", " ", fragment)
        if not MIN_FRAGMENT_LENGTH <= len(fragment) <= MAX_FRAGMENT_LENGTH:
            continue
        if not any(pattern.search(fragment) for pattern in QUANTIFIED_PATTERNS):
            continue
        key = fragment.lower()
        if key in seen:
            continue
        seen.add(key)
        achievements.append(fragment)
        if len(achievements) >= MAX_ACHIEVEMENTS:
            break
    return tuple(achievements)
