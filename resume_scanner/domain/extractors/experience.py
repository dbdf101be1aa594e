"""Work experience entries: title, company, duration and bullet points.

Each line holding a job title opens a block that runs until the next title
line.  Company, date range and bullets are all read from that block.
"""

from __future__ import annotations

import re
from typing import List, Optional, Set, Tuple

from ..models import ExperienceEntry
from ..windows import bullet_text, headings_except, headings_for, section_window
from .certifications import CERTIFICATION_PATTERNS
from .duration import DATE_RANGE_PATTERN

MAX_EXPERIENCE_ENTRIES = 6
COMPANY_NEIGHBORHOOD = 100
MAX_TITLE_LINE_LENGTH = 150

UNKNOWN_COMPANY = "Company not specified"
UNKNOWN_DURATION = "Duration not specified"

_SENIORITY = r"(?:senior|sr\.?|junior|jr\.?|lead|principal|staff|chief|head|associate|assistant)"
_DOMAIN = (
    r"(?:software|data|machine[ \t]+learning|ml|ai|frontend|front-end|backend|back-end|full[ \t-]?stack|"
    r"devops|cloud|qa|test|product|project|program|marketing|sales|business|systems?|network|security|"
    r"research|mobile|web|ui/ux|ux|ui|graphic|technical|engineering|operations|hr|account|financial|"
    r"site[ \t]+reliability|database|solutions)"
)
_ROLE = (
    r"(?:engineer|developer|architect|manager|analyst|designer|consultant|specialist|scientist|"
    r"administrator|director|coordinator|intern|trainee|officer|executive|lead)"
)

TITLE_PATTERN = re.compile(
    rf"\b(?:{_SENIORITY}[ \t]+)?(?:{_DOMAIN}[ \t]+){{0,3}}{_ROLE}s?\b",
    re.IGNORECASE,
)

_CORPORATE_SUFFIX = r"(?:Inc|LLC|Ltd|Corp|Company|Co|Technologies|Tech|Solutions)\.?"
COMPANY_AFTER_PATTERN = re.compile(
    r"(?:\bat\b|@|,|\||—|–|[ \t]-[ \t])[ \t]*"
    r"(?P<company>[A-Z][A-Za-z0-9&.'-]*(?:[ \t]+[A-Z][A-Za-z0-9&.'-]*){0,4}"
    rf"(?:[ \t]+{_CORPORATE_SUFFIX})?)"
)
COMPANY_BEFORE_PATTERN = re.compile(
    r"(?P<company>[A-Z][A-Za-z0-9&.'-]*(?:[ \t]+[A-Z][A-Za-z0-9&.'-]*){0,4}"
    rf"[ \t]+{_CORPORATE_SUFFIX})"
)
_CERTIFICATION_WORD = re.compile(r"\bcertif(?:ied|icate|icates|ication|ications)\b", re.IGNORECASE)
_MONTH_WORD = re.compile(r"^(?:jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*\.?$", re.IGNORECASE)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def extract_experience(text: str) -> Tuple[ExperienceEntry, ...]:
    """Extract up to six experience entries, earliest first."""
    window = section_window(
        text,
        headings_for("experience"),
        headings_except("experience"),
    )

    entries: List[ExperienceEntry] = []
    seen: Set[str] = set()
    for title, block, title_offset in _title_blocks(window):
        key = title.lower()
        if key in seen:
            continue
        seen.add(key)
        entries.append(
            ExperienceEntry(
                title=title,
                company=_find_company(block, title_offset, title_offset + len(title)) or UNKNOWN_COMPANY,
                duration=_find_duration(block),
                description=tuple(b for b in (bullet_text(line) for line in block.splitlines()) if b),
            )
        )
        if len(entries) >= MAX_EXPERIENCE_ENTRIES:
            break
    return tuple(entries)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _title_blocks(window: str) -> List[Tuple[str, str, int]]:
    """Cut the window at title lines.

    Returns ``(title, block_text, title_offset_in_block)`` triples.  Bullet
    lines never open a block, so "Led a team" inside a bullet is not a title.
    Neither do lines where a certification precedes the title ("AWS Certified
    Solutions Architect"); "Project Manager, PMP" is still a title line.
    """
    lines = window.splitlines()
    starts: List[Tuple[int, str, int]] = []
    for index, line in enumerate(lines):
        if bullet_text(line) is not None or len(line) > MAX_TITLE_LINE_LENGTH:
            continue
        match = TITLE_PATTERN.search(line)
        if match and not _certification_leads(line, match.start()):
            starts.append((index, _clean_title(match.group(0)), match.start()))

    blocks: List[Tuple[str, str, int]] = []
    for position, (index, title, column) in enumerate(starts):
        end = starts[position + 1][0] if position + 1 < len(starts) else len(lines)
        blocks.append((title, "\n".join(lines[index:end]), column))
    return blocks


def _certification_leads(line: str, title_start: int) -> bool:
    matches = [_CERTIFICATION_WORD.search(line)] + [p.search(line) for p in CERTIFICATION_PATTERNS]
    return any(m is not None and m.start() <= title_start for m in matches)


def _clean_title(raw: str) -> str:
    return re.sub(r"\s+", " ", raw).strip()


def _find_company(block: str, title_start: int, title_end: int) -> Optional[str]:
    after = block[title_end : title_end + COMPANY_NEIGHBORHOOD]
    for match in COMPANY_AFTER_PATTERN.finditer(after):
        company = _clean_company(match.group("company"))
        if company:
            return company

    before = block[max(0, title_start - COMPANY_NEIGHBORHOOD) : title_start]
    match = COMPANY_BEFORE_PATTERN.search(before)
    if match:
        return _clean_company(match.group("company"))
    return None


def _clean_company(raw: str) -> Optional[str]:
    words = raw.split()
    # A date range directly after the title is not a company.
    while words and (_MONTH_WORD.match(words[-1]) or words[-1].isdigit()):
        words.pop()
    if not words or _MONTH_WORD.match(words[0]) or words[0].lower() in {"present", "current", "now"}:
        return None
    return " ".join(words)


def _find_duration(block: str) -> str:
    match = DATE_RANGE_PATTERN.search(block)
    if not match:
        return UNKNOWN_DURATION
    return re.sub(r"\s+", " ", match.group(0)).strip()
