"""Total years of experience, from an explicit phrase or summed date ranges."""

from __future__ import annotations

import re
from typing import Optional

_MONTHS = ("jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec")
_MONTH = r"(?:jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*\.?"

DATE_RANGE_PATTERN = re.compile(
    rf"\b(?P<start_month>{_MONTH})[ \t]*,?[ \t]*'?(?P<start_year>\d{{4}}|\d{{2}})\b[ \t]*(?:-|–|—|to)[ \t]*"
    rf"(?:(?P<present>present|current|now|date)\b|(?P<end_month>{_MONTH})[ \t]*,?[ \t]*'?(?P<end_year>\d{{4}}|\d{{2}})\b)",
    re.IGNORECASE,
)
YEARS_PHRASE_PATTERN = re.compile(r"(\d+)\+?\s*(?:years?|yrs?)\s*(?:of)?\s*(?:experience|exp)\b", re.IGNORECASE)
FOUR_DIGIT_YEAR_PATTERN = re.compile(r"\b(?:19|20)\d{2}\b")

MIN_SPAN_MONTHS = 6


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def estimate_years_experience(text: str) -> int:
    """Estimate total years of experience.

    An explicit "N years of experience" phrase wins.  Otherwise every
    month-year range is converted to a month span (at least six months),
    the spans are summed and rounded to whole years.  "Present" resolves to
    December of the latest four-digit year mentioned in *text* (closed-range
    end years included), so the result never depends on the current date.  A
    lone "Jan 2012 - Present" with no later year therefore counts as one year.
    """
    phrase = YEARS_PHRASE_PATTERN.search(text)
    if phrase and int(phrase.group(1)) > 0:
        return int(phrase.group(1))

    reference_year = _latest_year(text)
    total_months = 0
    for match in DATE_RANGE_PATTERN.finditer(text):
        start = _month_index(match.group("start_month"), match.group("start_year"))
        if match.group("present"):
            end_year = max(reference_year or 0, start // 12)
            end = end_year * 12 + 11
        else:
            end = _month_index(match.group("end_month"), match.group("end_year"))
        total_months += max(end - start, MIN_SPAN_MONTHS)

    return int(total_months / 12 + 0.5)


def normalize_year(raw: str) -> int:
    """Expand two-digit years: above 50 is 19xx, otherwise 20xx."""
    year = int(raw)
    if year < 100:
        return 1900 + year if year > 50 else 2000 + year
    return year


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _month_index(month: str, year: str) -> int:
    return normalize_year(year) * 12 + _MONTHS.index(month[:3].lower())


def _latest_year(text: str) -> Optional[int]:
    years = [int(y) for y in FOUR_DIGIT_YEAR_PATTERN.findall(text)]
    return max(years) if years else None
