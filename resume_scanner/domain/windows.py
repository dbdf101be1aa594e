"""Heading-bounded extraction windows shared by the field extractors.

All functions operate on content strings -- no file I/O.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterable, List, Optional, Tuple

from .knowledge_base import SECTION_HEADINGS

BULLET_PATTERN = re.compile(r"^\s*(?:[-*•●▪◦‣–]|\d{1,2}[.)])\s+(.*)$")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def headings_for(*sections: str) -> Tuple[str, ...]:
    """Return the heading synonyms of the named sections."""
    out: List[str] = []
    for section in sections:
        out.extend(SECTION_HEADINGS[section])
    return tuple(out)


def headings_except(*sections: str) -> Tuple[str, ...]:
    """Return the heading synonyms of every section not named."""
    return headings_for(*[name for name in SECTION_HEADINGS if name not in sections])


def find_heading(text: str, synonyms: Iterable[str], pos: int = 0) -> Optional[re.Match]:
    """Find the first heading line at or after *pos* matching one of *synonyms*.

    A heading line is up to two capitalized qualifier words followed by a synonym, with
    an optional Markdown ``#`` prefix and an optional ``: inline content``
    suffix (``"Professional Experience"``, ``"## Skills"``, ``"Summary: ..."``).
    """
    return _heading_pattern(tuple(synonyms)).search(text, pos)


def section_window(
    text: str,
    start_headings: Iterable[str],
    stop_headings: Optional[Iterable[str]] = None,
    fallback_to_full: bool = True,
) -> str:
    """Return the text between a start heading and the next stop heading.

    Inline content after a heading colon belongs to the window.  When no
    start heading exists the whole *text* is returned, or ``""`` when
    *fallback_to_full* is false.  *stop_headings* defaults to every known
    heading that is not one of *start_headings*.
    """
    start_headings = tuple(start_headings)
    start = find_heading(text, start_headings)
    if start is None:
        return text if fallback_to_full else ""

    if stop_headings is None:
        stop_headings = tuple(h for h in _all_headings() if h not in start_headings)

    body_start = start.start("inline") if start.group("inline") is not None else start.end()
    stop = find_heading(text, stop_headings, start.end())
    body_end = stop.start() if stop else len(text)
    return text[body_start:body_end].strip()


def split_blocks(window: str) -> List[str]:
    """Split a window into blank-line separated blocks."""
    return [block.strip() for block in re.split(r"\n[ \t]*\n", window) if block.strip()]


def bullet_text(line: str) -> Optional[str]:
    """Return the content of a bulleted or numbered line, else ``None``."""
    match = BULLET_PATTERN.match(line)
    if not match:
        return None
    text = match.group(1).strip()
    return text or None


def non_empty_lines(text: str) -> List[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


@lru_cache(maxsize=64)
def _heading_pattern(synonyms: Tuple[str, ...]) -> re.Pattern:
    ordered = sorted(set(synonyms), key=len, reverse=True)
    alternatives = "|".join(r"[ \t]+".join(re.escape(word) for word in s.split()) for s in ordered)
    # Qualifier words must be capitalized and are only accepted on bare heading
    # lines, so neither prose ending in a synonym ("Delivered several projects")
    # nor a label such as "LinkedIn Profile: ..." reads as a heading.
    return re.compile(
        r"^[ \t]*(?:#{1,3}[ \t]*)?"
        rf"(?:(?:(?-i:[A-Z][A-Za-z&]*|&)[ \t]+){{0,2}}(?:{alternatives})s?[ \t]*:?"
        rf"|(?:{alternatives})s?[ \t]*:(?P<inline>[^\n]*))[ \t]*$",
        re.IGNORECASE | re.MULTILINE,
    )


def _all_headings() -> Tuple[str, ...]:
    return headings_except()
