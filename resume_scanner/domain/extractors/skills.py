"""Vocabulary-membership skill classification."""

from __future__ import annotations

from typing import Iterable, Tuple

from ..knowledge_base import SOFT_SKILLS, SPOKEN_LANGUAGES, TECHNICAL_SKILLS
from ..models import SkillSet


def classify_skills(text: str) -> SkillSet:
    """Classify skills by case-insensitive substring membership.

    No stemming and no context: a term is present when it occurs anywhere in
    the text, including inside a longer word.
    """
    lowered = text.lower()
    return SkillSet(
        technical=find_terms(lowered, TECHNICAL_SKILLS),
        soft=find_terms(lowered, SOFT_SKILLS),
        languages=find_terms(lowered, SPOKEN_LANGUAGES),
    )


def find_terms(lowered_text: str, vocabulary: Iterable[str]) -> Tuple[str, ...]:
    """Return the vocabulary terms found in *lowered_text*, in vocabulary order."""
    found = [term.lower() for term in vocabulary if term.lower() in lowered_text]
    return tuple(dict.fromkeys(found))
