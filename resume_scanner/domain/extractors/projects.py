"""Project entries from the projects/portfolio section."""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from ..models import ProjectEntry
from ..windows import bullet_text, headings_except, headings_for, section_window

MAX_PROJECTS = 5
MAX_TECHNOLOGIES = 10
MAX_DESCRIPTION_LENGTH = 200
MIN_NAME_LENGTH = 3
MAX_NAME_LENGTH = 100

TECHNOLOGY_PATTERN = re.compile(
    r"\b(?:technologies(?:[ \t]+used)?|tech[ \t]+stack|built[ \t]+with|using|tools)\b[ \t]*[:\-]?[ \t]*([^\n]+)",
    re.IGNORECASE,
)
_TECH_SPLIT = re.compile(r"\s*(?:,|/|;|\||\band\b|&)\s*", re.IGNORECASE)
_CAPITALIZED_COLON_LINE = re.compile(r"^[A-Z][^\n]{1,98}:$")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def extract_projects(text: str) -> Tuple[ProjectEntry, ...]:
    """Extract up to five projects; empty when there is no projects heading."""
    window = section_window(
        text,
        headings_for("projects"),
        headings_except("projects"),
        fallback_to_full=False,
    )
    if not window:
        return ()

    projects: List[ProjectEntry] = []
    for block in _project_blocks(window):
        project = _parse_block(block)
        if project is not None:
            projects.append(project)
        if len(projects) >= MAX_PROJECTS:
            break
    return tuple(projects)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _project_blocks(window: str) -> List[List[str]]:
    blocks: List[List[str]] = []
    for raw in window.splitlines():
        line = raw.strip()
        if not line:
            continue
        if _starts_block(line) or not blocks:
            blocks.append([line])
        else:
            blocks[-1].append(line)
    return blocks


def _starts_block(line: str) -> bool:
    if TECHNOLOGY_PATTERN.match(bullet_text(line) or line):
        return False
    return bullet_text(line) is not None or bool(_CAPITALIZED_COLON_LINE.match(line))


def _parse_block(lines: List[str]) -> Optional[ProjectEntry]:
    first = (bullet_text(lines[0]) or lines[0]).strip()
    rest = [bullet_text(line) or line for line in lines[1:]]

    name = first.rstrip(":").strip()
    head, sep, tail = first.partition(":")
    if sep and tail.strip() and len(head.strip()) >= MIN_NAME_LENGTH:
        name = head.strip()
        rest.insert(0, tail.strip())

    if not MIN_NAME_LENGTH <= len(name) <= MAX_NAME_LENGTH:
        return None

    description = " ".join(part.strip() for part in rest if part.strip())
    return ProjectEntry(
        name=name,
        description=description[:MAX_DESCRIPTION_LENGTH].strip(),
        technologies=_find_technologies("\n".join(lines)),
    )


def _find_technologies(block: str) -> Tuple[str, ...]:
    match = TECHNOLOGY_PATTERN.search(block)
    if not match:
        return ()
    items: List[str] = []
    for raw in _TECH_SPLIT.split(match.group(1)):
        item = raw.strip().strip(".()[]").strip()
        if not 1 <= len(item) <= 30 or len(item.split()) > 3:
            continue
        if item.lower() not in {i.lower() for i in items}:
            items.append(item)
        if len(items) >= MAX_TECHNOLOGIES:
            break
    return tuple(items)
