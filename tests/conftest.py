"""Global pytest fixtures for deterministic test environment."""

from __future__ import annotations

import pytest

RICH_RESUME = """Jane Doe
jane.doe@example.com | (555) 123-4567 | San Francisco, CA 94105
linkedin.com/in/janedoe | github.com/janedoe

Professional Summary
Software engineer with 6 years of experience building scalable web platforms in Python and JavaScript.
Passionate about clean architecture, mentoring and delivering measurable business results.

Work Experience
Senior Software Engineer at Acme Corp
Jan 2020 - Present
- Led a team of 6 engineers to deliver a payments platform used by 50,000 users
- Reduced API latency by 40% through caching and query optimization
- Automated deployment pipelines with Docker and Kubernetes, cutting release time by 3x

Software Engineer | Globex Inc
Jun 2017 - Dec 2019
- Developed REST API services in Python and Django for 20 enterprise clients
- Improved test coverage from 55% to 90% across 4 core services
- Mentored 3 junior developers and organized weekly code reviews

Education
Bachelor of Science in Computer Science
Stanford University, 2013 - 2017
GPA: 3.8/4.0

Technical Skills
Python, JavaScript, TypeScript, React, Node.js, SQL, PostgreSQL, AWS, Docker, Kubernetes, Git, GraphQL

Soft Skills
Leadership, teamwork, communication, problem-solving, collaboration

Projects
- Budget Tracker: Personal finance app for tracking expenses
  Technologies: React, Node.js, MongoDB
- Weather Dashboard: Real-time weather visualization
  Tech Stack: Python, Flask, Redis

Certifications
AWS Certified Solutions Architect - Associate

Languages
English, Spanish
"""


@pytest.fixture(autouse=True)
def _isolate_runtime_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear local runtime env that can leak into tests on developer machines."""
    for key in ("RESUME_SCANNER_LEVEL",):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def rich_resume_text() -> str:
    return RICH_RESUME


@pytest.fixture
def rich_resume_file(tmp_path):
    path = tmp_path / "resume.md"
    path.write_text(RICH_RESUME, encoding="utf-8")
    return path
