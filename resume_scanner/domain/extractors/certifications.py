"""Professional certifications matched by vendor and credential rules."""

from __future__ import annotations

import re
from typing import List, Sequence, Tuple

MAX_CERTIFICATIONS = 8
MAX_CERTIFICATION_LENGTH = 80

# Up to six capitalized words (or dashes/short connectors) after the keyword.
_TAIL = r"(?:[ \t]+(?:[A-Z0-9][\w+#.\-]*|-|–|of|and|in|for|&)){0,6}"

CERTIFICATION_PATTERNS: Sequence[re.Pattern] = tuple(
    re.compile(pattern)
    for pattern in (
        r"(?i:\b(?:aws|amazon[ \t]+web[ \t]+services)[ \t]+certified)" + _TAIL,
        r"(?i:\b(?:microsoft|azure)[ \t]+certified)" + _TAIL,
        r"(?i:\bgoogle(?:[ \t]+cloud)?[ \t]+(?:certified|professional))" + _TAIL,
        r"(?i:\boracle[ \t]+certified)" + _TAIL,
        r"(?i:\b(?:cisco[ \t]+)?(?:ccna|ccnp|ccie)\b)" + _TAIL,
        r"(?i:\bcomptia)" + _TAIL,
        r"(?i:\b(?:pmp|capm|prince2)\b)",
        r"(?i:\b(?:csm|cspo|psm[ \t]*i*)\b)",
        r"(?i:\bcertified[ \t]+scrum[ \t]*master)",
        r"(?i:\bcertified)[ \t]+[A-Z][\w+#.\-]*" + _TAIL,
    )
)
_TRAILING_CONNECTORS = re.compile(r"(?:[ \t]+(?:-|–|of|and|in|for|&))+$")


def extract_certifications(text: str) -> Tuple[str, ...]:
    """Return up to eight certifications, deduplicated case-insensitively.

    A candidate that is contained in an already-kept certification (e.g. the
    generic "Certified Solutions Architect" inside "AWS Certified Solutions
    Architect") is dropped.
    """
    kept: List[str] = []
    for pattern in CERTIFICATION_PATTERNS:
        for match in pattern.finditer(text):
            candidate = _clean(match.group(0))
            if not candidate:
                continue
            lowered = candidate.lower()
            if any(lowered in existing.lower() for existing in kept):
                continue
            kept.append(candidate)
            if len(kept) >= MAX_CERTIFICATIONS:
                return tuple(kept)
    return tuple(kept)


def _clean(raw: str) -> str:
    value = re.sub(r"\s+", " ", raw).strip()
    value = _TRAILING_CONNECTORS.sub("", value).strip()
    return value[:MAX_CERTIFICATION_LENGTH].strip()
