"""Contact details: name, email, phone, location and profile links."""

from __future__ import annotations

import re
from typing import List, Optional, Sequence

from ..models import ContactInfo
from ..windows import non_empty_lines

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
PHONE_PATTERN = re.compile(r"(?<![\d/])(?:\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}(?!\d)")

LINKEDIN_PATTERNS: Sequence[re.Pattern] = (
    re.compile(r"linkedin\.com/in/([A-Za-z0-9_-]+)", re.IGNORECASE),
    re.compile(r"\blinkedin\s*:\s*([A-Za-z0-9_-]+)", re.IGNORECASE),
)
GITHUB_PATTERNS: Sequence[re.Pattern] = (
    re.compile(r"github\.com/([A-Za-z0-9-]+)", re.IGNORECASE),
    re.compile(r"\bgithub\s*:\s*([A-Za-z0-9-]+)", re.IGNORECASE),
)
WEBSITE_PATTERNS: Sequence[re.Pattern] = (
    re.compile(r"\b(?:website|portfolio|blog)\s*:\s*(\S+)", re.IGNORECASE),
    re.compile(r"(https?://[^\s,;|)]+)", re.IGNORECASE),
    re.compile(r"\b(www\.[^\s,;|)]+)", re.IGNORECASE),
)

NAME_LABEL_PATTERN = re.compile(r"^\s*name\s*:\s*([A-Za-z][A-Za-z .'-]{2,50})$", re.IGNORECASE | re.MULTILINE)
TITLE_CASE_NAME_PATTERN = re.compile(r"^[A-Z][a-zA-Z'-]+(?:\s+[A-Z]\.)?(?:\s+[A-Z][a-zA-Z'-]+){1,3}$")
PLAIN_NAME_PATTERN = re.compile(r"^[A-Za-z\s]{3,50}$")
_NOT_A_NAME = {
    "resume",
    "curriculum",
    "vitae",
    "summary",
    "objective",
    "profile",
    "experience",
    "education",
    "skills",
    "projects",
    "contact",
    "certifications",
}

LOCATION_LABEL_PATTERN = re.compile(r"\b(?:location|address|city)\s*:\s*([^\n|•]+)", re.IGNORECASE)
HEADER_LOCATION_PATTERNS: Sequence[re.Pattern] = (
    re.compile(r"\b([A-Z][a-zA-Z]+(?:[ \t][A-Z][a-zA-Z]+)*,[ \t]*[A-Z]{2}(?:[ \t]+\d{5}(?:-\d{4})?)?)\b"),
    re.compile(r"\b([A-Z][a-zA-Z]+(?:[ \t][A-Z][a-zA-Z]+)?,[ \t]*[A-Z][a-zA-Z]+(?:[ \t][A-Z][a-zA-Z]+)?)\b"),
)

_HEADER_LINES = 8
_NAME_LINES = 5


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def extract_contact(text: str) -> ContactInfo:
    """Extract contact fields; each one is ``None`` when nothing matches."""
    lines = non_empty_lines(text)
    return ContactInfo(
        name=_extract_name(text, lines),
        email=_first_match(EMAIL_PATTERN, text),
        phone=_first_match(PHONE_PATTERN, text),
        location=_extract_location(text, lines),
        linkedin_handle=_first_group(LINKEDIN_PATTERNS, text),
        github_handle=_first_group(GITHUB_PATTERNS, text),
        website_url=_extract_website(text),
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _first_match(pattern: re.Pattern, text: str) -> Optional[str]:
    match = pattern.search(text)
    return match.group(0).strip() if match else None


def _first_group(patterns: Sequence[re.Pattern], text: str) -> Optional[str]:
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            return match.group(1)
    return None


def _extract_name(text: str, lines: List[str]) -> Optional[str]:
    labelled = NAME_LABEL_PATTERN.search(text)
    if labelled:
        return labelled.group(1).strip()

    candidates = [re.sub(r"^#+\s*", "", line) for line in lines[:_NAME_LINES]]
    for line in candidates:
        if TITLE_CASE_NAME_PATTERN.match(line) and not _looks_like_heading(line):
            return line

    for line in candidates:
        words = line.split()
        if not PLAIN_NAME_PATTERN.match(line) or not 2 <= len(words) <= 4:
            continue
        lowered = line.lower()
        if "resume" in lowered or "curriculum" in lowered:
            continue
        return line
    return None


def _looks_like_heading(line: str) -> bool:
    return any(word.lower() in _NOT_A_NAME for word in line.split())


def _extract_location(text: str, lines: List[str]) -> Optional[str]:
    labelled = LOCATION_LABEL_PATTERN.search(text)
    if labelled and len(labelled.group(1).strip()) > 3:
        return labelled.group(1).strip()

    header = "\n".join(lines[:_HEADER_LINES])
    for pattern in HEADER_LOCATION_PATTERNS:
        for match in pattern.finditer(header):
            value = match.group(1).strip()
            if len(value) > 3:
                return value
    return None


def _extract_website(text: str) -> Optional[str]:
    for pattern in WEBSITE_PATTERNS:
        for match in pattern.finditer(text):
            url = match.group(1).rstrip(".")
            lowered = url.lower()
            if "linkedin.com" in lowered or "github.com" in lowered or "@" in url:
                continue
            return url
    return None
