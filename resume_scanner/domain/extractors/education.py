"""Education entries: degree, institution, year and GPA.

The education window is cut into blocks first and every field is read from
inside the block that holds the degree phrase, so a degree is never paired
with another entry's institution or year.
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence, Tuple

from ..models import EducationEntry
from ..windows import headings_except, headings_for, section_window, split_blocks

MAX_EDUCATION_ENTRIES = 5
MAX_FIELD_LENGTH = 50

# Field of study: capitalized words joined by short connectors, case-sensitive.
_FIELD = r"(?:[ \t]*,?[ \t]*(?:(?i:of|in)[ \t]+)?(?P<field>[A-Z][A-Za-z&]*(?:[ \t]+(?:[A-Z][A-Za-z&]*|of|and|in|&))*))?"

#: Degree rules in priority order: (label, keyword pattern).
DEGREE_RULES: Sequence[Tuple[str, re.Pattern]] = tuple(
    (label, re.compile(keyword + _FIELD))
    for label, keyword in (
        ("Doctorate", r"(?i:\b(?:ph\.?\s?d\b\.?|doctorate|doctor[ \t]+of[ \t]+philosophy))"),
        ("Master's", r"(?i:\b(?:(?<!scrum[ \t])master(?:'s)?(?:[ \t]+degree)?|m\.[ \t]?s\.|m\.?sc\b|m\.?[ \t]?tech\b|m\.[ \t]?a\.|m\.[ \t]?e\.|mba\b))"),
        ("Bachelor's", r"(?i:\b(?:bachelor(?:'s)?(?:[ \t]+degree)?|b\.[ \t]?s\.|b\.?sc\b|b\.?[ \t]?tech\b|b\.[ \t]?a\.|b\.[ \t]?e\.|bba\b))"),
        ("Associate's", r"(?i:\b(?:associate(?:'s)?[ \t]+(?:degree|of)|a\.[ \t]?a\.|a\.[ \t]?s\.))"),
        ("Diploma", r"(?i:\bdiploma\b)"),
        ("Certificate", r"(?i:\bcertificate\b)"),
    )
)

INSTITUTION_PATTERN = re.compile(
    r"(?:[A-Z][A-Za-z.&'-]*[ \t]+){0,4}(?:University|College|Institute|School|Academy)"
    r"(?:[ \t]+of(?:[ \t]+[A-Z][A-Za-z.&'-]*){1,4})?"
)
YEAR_PATTERN = re.compile(
    r"\b((?:19|20)\d{2})(?:[ \t]*(?:-|–|—|to)[ \t]*((?:19|20)\d{2}|present|current))?\b",
    re.IGNORECASE,
)
GPA_PATTERN = re.compile(
    r"\b(?:c?gpa|grade)\s*[:\-]?\s*(\d{1,2}(?:\.\d{1,2})?(?:\s*/\s*\d{1,3}(?:\.\d{1,2})?)?)",
    re.IGNORECASE,
)

_INSTITUTION_WORDS = re.compile(r"\b(?:University|College|Institute|School|Academy)\b")
_TRAILING_CONNECTORS = re.compile(r"(?:[ \t]+(?:of|and|in|&))+$")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def extract_education(text: str) -> Tuple[EducationEntry, ...]:
    """Extract up to five education entries in the order they appear."""
    window = section_window(
        text,
        headings_for("education"),
        headings_except("education"),
    )

    entries: List[EducationEntry] = []
    for block in _degree_blocks(window):
        entry = _parse_block(block)
        if entry is not None:
            entries.append(entry)
        if len(entries) >= MAX_EDUCATION_ENTRIES:
            break

    if entries and entries[0].gpa is None and not any(e.gpa for e in entries):
        document_gpa = _find_gpa(text)
        if document_gpa:
            first = entries[0]
            entries[0] = EducationEntry(first.degree_label, first.institution, first.year, document_gpa)

    return tuple(entries)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _degree_blocks(window: str) -> List[str]:
    """Split the window into blocks holding at most one degree line each."""
    blocks: List[str] = []
    for block in split_blocks(window):
        current: List[str] = []
        has_degree = False
        for line in block.splitlines():
            line_has_degree = _match_degree(line) is not None
            if line_has_degree and has_degree:
                blocks.append("\n".join(current))
                current = []
                has_degree = False
            current.append(line)
            has_degree = has_degree or line_has_degree
        if current:
            blocks.append("\n".join(current))
    return blocks


def _match_degree(text: str) -> Optional[Tuple[str, re.Match]]:
    for label, pattern in DEGREE_RULES:
        match = pattern.search(text)
        if match:
            return label, match
    return None


def _parse_block(block: str) -> Optional[EducationEntry]:
    found = _match_degree(block)
    if found is None:
        return None
    label, match = found

    study_field = _clean_field(match.group("field"))
    degree_label = f"{label} in {study_field}" if study_field else label

    institution = INSTITUTION_PATTERN.search(block)
    return EducationEntry(
        degree_label=degree_label,
        institution=institution.group(0).strip() if institution else "",
        year=_find_year(block),
        gpa=_find_gpa(block),
    )


def _clean_field(raw: Optional[str]) -> str:
    if not raw:
        return ""
    value = raw.strip()
    institution = _INSTITUTION_WORDS.search(value)
    if institution:
        value = value[: institution.start()]
    if " in " in value:
        value = value.rsplit(" in ", 1)[1]
    value = _TRAILING_CONNECTORS.sub("", value.strip()).strip()
    return value[:MAX_FIELD_LENGTH].strip()


def _find_year(block: str) -> str:
    match = YEAR_PATTERN.search(block)
    if not match:
        return ""
    if match.group(2):
        return f"{match.group(1)} - {match.group(2).capitalize()}"
    return match.group(1)


def _find_gpa(text: str) -> Optional[str]:
    match = GPA_PATTERN.search(text)
    if not match:
        return None
    return re.sub(r"\s+", "", match.group(1))
