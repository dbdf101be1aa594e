"""Static vocabularies used by the extractors and signal analyzers.

Terms are matched as case-insensitive substrings, so each entry is a whole
multi-character token or phrase. Short terms can still collide with longer
words (``"java"`` inside ``"javascript"``, a language name inside a place
name); that is a known limitation of the heuristic, not something the
matchers try to correct.
"""

from __future__ import annotations

from typing import Dict, Tuple

# ---------------------------------------------------------------------------
# Skills
# ---------------------------------------------------------------------------

TECHNICAL_SKILLS: Tuple[str, ...] = (
    "javascript",
    "python",
    "java",
    "react",
    "node.js",
    "sql",
    "aws",
    "docker",
    "kubernetes",
    "git",
    "html",
    "css",
    "typescript",
    "mongodb",
    "postgresql",
    "rest api",
    "graphql",
    "machine learning",
    "data analysis",
    "cloud",
    "agile",
    "scrum",
    "devops",
    "ci/cd",
    "linux",
    "azure",
    "gcp",
    "c++",
    "c#",
    "django",
    "flask",
    "fastapi",
    "spring boot",
    "angular",
    "vue.js",
    "redis",
    "terraform",
    "jenkins",
    "tensorflow",
    "pytorch",
    "pandas",
    "numpy",
    "deep learning",
    "tableau",
    "power bi",
    "microservices",
    "kafka",
    "figma",
)

SOFT_SKILLS: Tuple[str, ...] = (
    "leadership",
    "teamwork",
    "communication",
    "problem-solving",
    "analytical",
    "collaboration",
    "innovation",
    "detail-oriented",
    "time management",
    "adaptability",
    "critical thinking",
    "creativity",
    "interpersonal",
    "negotiation",
    "presentation",
    "mentoring",
    "strategic planning",
    "decision making",
    "conflict resolution",
    "public speaking",
)

SPOKEN_LANGUAGES: Tuple[str, ...] = (
    "english",
    "spanish",
    "french",
    "german",
    "hindi",
    "mandarin",
    "chinese",
    "japanese",
    "korean",
    "arabic",
    "portuguese",
    "russian",
    "italian",
    "bengali",
    "urdu",
    "tamil",
    "telugu",
    "marathi",
    "kannada",
    "malayalam",
    "gujarati",
    "punjabi",
    "dutch",
    "turkish",
    "swahili",
)

# ---------------------------------------------------------------------------
# Action verbs
# ---------------------------------------------------------------------------

#: Base forms; inflections (-ed/-ing/-s) are matched by the analyzer.
ACTION_VERBS: Tuple[str, ...] = (
    "achieve",
    "develop",
    "implement",
    "manage",
    "lead",
    "create",
    "design",
    "improve",
    "increase",
    "reduce",
    "deliver",
    "launch",
    "optimize",
    "streamline",
    "spearhead",
    "coordinate",
    "establish",
    "execute",
    "generate",
    "initiate",
    "maintain",
    "negotiate",
    "organize",
    "oversee",
    "produce",
    "resolve",
    "supervise",
    "train",
    "build",
    "analyze",
    "automate",
    "mentor",
)

IRREGULAR_VERB_FORMS: Dict[str, Tuple[str, ...]] = {
    "lead": ("led",),
    "build": ("built",),
    "oversee": ("oversaw", "overseen"),
}

# ---------------------------------------------------------------------------
# Experience-level keyword sets
# ---------------------------------------------------------------------------

FRESHER_KEYWORDS: Tuple[str, ...] = (
    "internship",
    "projects",
    "coursework",
    "academic",
    "gpa",
    "cgpa",
    "graduate",
    "undergraduate",
    "thesis",
    "research",
    "extracurricular",
    "volunteer",
    "certification",
    "training",
    "workshop",
    "competition",
)

EXPERIENCED_KEYWORDS: Tuple[str, ...] = (
    "years of experience",
    "senior",
    "lead",
    "manager",
    "director",
    "architect",
    "principal",
    "team lead",
    "budget",
    "revenue",
    "p&l",
    "stakeholder",
    "strategy",
    "roadmap",
    "growth",
    "transformation",
)

#: How many technical / soft-skill terms join the fresher keyword set.
FRESHER_TECHNICAL_SAMPLE = 15
FRESHER_SOFT_SAMPLE = 8

# ---------------------------------------------------------------------------
# Section headings
# ---------------------------------------------------------------------------

SECTION_HEADINGS: Dict[str, Tuple[str, ...]] = {
    "summary": (
        "professional summary",
        "career objective",
        "summary",
        "objective",
        "profile",
        "about me",
    ),
    "experience": (
        "work experience",
        "professional experience",
        "experience",
        "employment history",
        "employment",
        "work history",
        "internships",
    ),
    "education": (
        "education",
        "academic background",
        "academic qualifications",
        "academics",
    ),
    "skills": (
        "technical skills",
        "skills",
        "core competencies",
        "competencies",
    ),
    "projects": (
        "projects",
        "personal projects",
        "academic projects",
        "portfolio",
    ),
    "certifications": (
        "certifications",
        "certificates",
        "licenses",
    ),
    "achievements": (
        "achievements",
        "awards",
        "honors",
        "accomplishments",
    ),
    "languages": ("languages",),
    "other": (
        "interests",
        "hobbies",
        "references",
        "publications",
        "volunteering",
        "activities",
    ),
}
