"""Prioritized improvement suggestions.

A fixed rule ladder: every High rule is evaluated before every Medium rule,
and every Medium rule before every Low rule.  Emission order is ladder order.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from .models import ActionVerbAnalysis, ExperienceLevel, ExtractedProfile, KeywordAnalysis, Priority, Suggestion
from .signals import MAX_WORDS, MIN_BULLETS, MIN_TECHNICAL_SKILLS, MIN_WORDS, STRONG_ACTION_VERBS

MIN_ACHIEVEMENTS = 3
MAX_MISSING_KEYWORDS = 5
NAMED_VERBS = 4
NAMED_KEYWORDS = 5
LOW_READABILITY = 40

LEADERSHIP_VERBS = frozenset({"lead", "manage", "mentor", "supervise", "oversee", "spearhead"})

ALL_GOOD = "Your resume looks well-optimized! Keep it updated with your latest achievements."


def generate_suggestions(
    profile: ExtractedProfile,
    level: ExperienceLevel,
    *,
    keywords: KeywordAnalysis,
    action_verbs: ActionVerbAnalysis,
    achievements: Sequence[str],
    word_count: int,
    bullet_count: int,
    readability_score: int,
) -> Tuple[Suggestion, ...]:
    """Run the rule ladder and return the deduplicated suggestions."""
    fresher = level is ExperienceLevel.FRESHER
    out: List[Suggestion] = []

    def add(priority: Priority, text: str) -> None:
        if all(existing.text != text for existing in out):
            out.append(Suggestion(priority=priority, text=text))

    # High
    if not profile.summary:
        add(Priority.HIGH, "Add a compelling professional summary at the top highlighting your key strengths.")
    if not profile.email:
        add(Priority.HIGH, "Add a professional email address so recruiters can reach you.")
    if not profile.phone:
        add(Priority.HIGH, "Add a phone number to your contact details.")
    if len(achievements) < MIN_ACHIEVEMENTS:
        add(Priority.HIGH, "Quantify your achievements with numbers (e.g., 'Increased sales by 25%').")
    if fresher and not profile.experience and not profile.projects:
        add(Priority.HIGH, "Add projects or internships that show hands-on experience.")
    elif not fresher and not profile.experience:
        add(Priority.HIGH, "Add your work experience with job titles, companies and dates.")

    # Medium
    if len(action_verbs.found) < STRONG_ACTION_VERBS and action_verbs.missing:
        add(Priority.MEDIUM, f"Use more action verbs like: {', '.join(action_verbs.missing[:NAMED_VERBS])}.")
    if len(keywords.missing) > MAX_MISSING_KEYWORDS:
        add(Priority.MEDIUM, f"Consider adding keywords: {', '.join(keywords.missing[:NAMED_KEYWORDS])}.")
    if len(profile.skills.technical) < MIN_TECHNICAL_SKILLS:
        add(Priority.MEDIUM, "Expand your skills section with more relevant technical skills.")
    if not profile.education:
        add(Priority.MEDIUM, "Add your education details: degree, institution and graduation year.")
    if word_count < MIN_WORDS:
        add(Priority.MEDIUM, f"Your resume is short ({word_count} words). Aim for 400-1200 words.")
    elif word_count > MAX_WORDS:
        add(Priority.MEDIUM, f"Your resume is long ({word_count} words). Trim it to 1-2 pages.")
    if bullet_count < MIN_BULLETS:
        add(Priority.MEDIUM, "Use bullet points to describe responsibilities and achievements.")
    if not fresher and profile.total_years_experience == 0:
        add(Priority.MEDIUM, "Clearly mention your years of experience (e.g., '5 years of experience').")
    if not fresher and not _has_leadership_signal(profile, action_verbs):
        add(Priority.MEDIUM, "Highlight leadership experience and team management skills.")

    # Low
    if not profile.linkedin_handle:
        add(Priority.LOW, "Add your LinkedIn profile URL for better networking opportunities.")
    if fresher and not profile.certifications:
        add(Priority.LOW, "Add relevant certifications or online courses to strengthen your profile.")
    if fresher and not profile.has_gpa:
        add(Priority.LOW, "Consider adding your GPA/CGPA if it's strong.")
    if not profile.languages:
        add(Priority.LOW, "List the languages you speak.")
    if readability_score < LOW_READABILITY:
        add(Priority.LOW, "Shorten long sentences to improve readability.")

    if not out:
        add(Priority.LOW, ALL_GOOD)
    return tuple(out)


def _has_leadership_signal(profile: ExtractedProfile, action_verbs: ActionVerbAnalysis) -> bool:
    return "leadership" in profile.skills.soft or bool(LEADERSHIP_VERBS & set(action_verbs.found))
