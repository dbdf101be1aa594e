"""Professional summary / objective paragraph."""

from __future__ import annotations

import re
from typing import Optional

from ..windows import headings_except, headings_for, section_window

MIN_SUMMARY_LENGTH = 20
MAX_SUMMARY_LENGTH = 400


def extract_summary(text: str) -> Optional[str]:
    """Return the summary paragraph, or ``None`` when there is no summary heading."""
    window = section_window(
        text,
        headings_for("summary"),
        headings_except("summary"),
        fallback_to_full=False,
    )
    summary = re.sub(r"\s+", " ", window).strip()
    if len(summary) <= MIN_SUMMARY_LENGTH:
        return None
    return summary[:MAX_SUMMARY_LENGTH].strip()
