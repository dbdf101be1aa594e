"""Tests for the ATS analysis entry point and report."""

import pytest

from resume_scanner.domain import SIGNAL_WEIGHTS, SECTION_WEIGHTS, analyze, format_ats_report, score_label
from resume_scanner.domain.models import ExperienceLevel, Priority
from resume_scanner.domain.signals import relevant_keywords

PRIORITY_RANK = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}

ONE_JOB_RESUME = """John Carter
john.carter@email.com | +1 (555) 987-6543 | Seattle, WA
linkedin.com/in/johncarter

Professional Summary
Senior software engineer with 8 years of experience designing distributed systems and leading teams.

Experience
Senior Software Engineer at ABC Technologies (Jan 2020 - Present)
- Led a team of 8 engineers and delivered a billing platform serving 2 million users
- Reduced infrastructure costs by 35% by migrating services to Kubernetes
- Mentored 5 developers and established code review standards
- Increased throughput by 40% with asynchronous job queues

Education
Bachelor of Science in Computer Science, University of Technology, 2018, GPA: 3.8/4.0

Skills
Python, Java, SQL, AWS, Docker, Kubernetes, Git, React, leadership, communication

Certifications
AWS Certified Solutions Architect
"""


def _caps_resume():
    summary = "Results-driven engineer focused on reliable delivery. " * 20
    degrees = [f"B.Tech in Computer Science, College {i}" for i in range(7)]
    titles = [
        "Software Engineer",
        "Data Engineer",
        "Backend Developer",
        "Frontend Developer",
        "QA Analyst",
        "Product Manager",
        "Cloud Architect",
        "Security Consultant",
    ]
    projects = [f"- Project Alpha {i}: Small utility written over a weekend" for i in range(7)]
    achievements = [f"- Increased revenue by {i + 10}% across the regional sales org" for i in range(12)]
    certifications = [
        "AWS Certified Developer",
        "Microsoft Certified Azure Fundamentals",
        "Google Cloud Professional Data Engineer",
        "Oracle Certified Java Programmer",
        "CCNA Routing",
        "CompTIA Security+",
        "PMP",
        "CSM",
        "Certified Kubernetes Administrator",
        "PRINCE2 Foundation",
    ]
    parts = [
        "Professional Summary",
        summary,
        "",
        "Education",
        *degrees,
        "",
        "Experience",
        *titles,
        "",
        "Projects",
        *projects,
        "",
        "Achievements",
        *achievements,
        "",
        "Certifications",
        *certifications,
    ]
    return "\n".join(parts)


class TestWeights:
    @pytest.mark.parametrize("level", list(ExperienceLevel))
    def test_section_weights_sum_to_one(self, level):
        assert sum(SECTION_WEIGHTS[level].values()) == pytest.approx(1.0)

    def test_signal_weights(self):
        assert sum(SIGNAL_WEIGHTS.values()) == pytest.approx(0.45)


class TestAnalyze:
    def test_minimal_resume(self):
        result = analyze("John Smith\njohn@x.com")
        assert result.score < 40
        assert result.extracted_info.name == "John Smith"
        assert result.extracted_info.email == "john@x.com"
        assert score_label(result.score) == "Poor"

    def test_rich_resume_experienced(self, rich_resume_text):
        result = analyze(rich_resume_text, ExperienceLevel.EXPERIENCED)
        assert result.score >= 70
        assert result.experience_level is ExperienceLevel.EXPERIENCED
        assert result.extracted_info.total_years_experience == 6
        assert len(result.quantifiable_achievements) == 5
        assert result.bullet_point_count == 8
        assert {"lead", "reduce", "automate", "develop", "improve", "mentor"} <= set(result.action_verbs.found)

    def test_rich_resume_fresher(self, rich_resume_text):
        result = analyze(rich_resume_text)
        assert result.experience_level is ExperienceLevel.FRESHER
        assert [s.name for s in result.sections][2] == "Projects/Internships"
        assert 0 <= result.score <= 100

    def test_title_line_with_company_and_dates(self):
        result = analyze(ONE_JOB_RESUME, "experienced")
        (job,) = result.extracted_info.experience
        assert job.title == "Senior Software Engineer"
        assert job.company == "ABC Technologies"
        assert job.duration == "Jan 2020 - Present"
        (degree,) = result.extracted_info.education
        assert degree.degree_label == "Bachelor's in Computer Science"
        assert degree.institution == "University of Technology"
        assert degree.year == "2018"
        assert degree.gpa == "3.8/4.0"
        assert result.extracted_info.total_years_experience == 8
        assert result.score >= 60
        assert any("aws" in c.lower() for c in result.extracted_info.certifications)
        assert any("40%" in a for a in result.quantifiable_achievements)

    @pytest.mark.parametrize("text", ["", None, "   \n\n  "])
    def test_empty_input_is_safe(self, text):
        result = analyze(text)
        assert 0 <= result.score <= 100
        assert result.word_count == 0
        assert result.extracted_info.name is None
        assert result.suggestions
        assert result.suggestions[0].priority is Priority.HIGH

    @pytest.mark.parametrize("level", list(ExperienceLevel))
    def test_deterministic(self, rich_resume_text, level):
        assert analyze(rich_resume_text, level).to_dict() == analyze(rich_resume_text, level).to_dict()

    def test_caps(self):
        result = analyze(_caps_resume())
        info = result.extracted_info
        assert len(info.education) == 5
        assert len(info.experience) == 6
        assert len(info.projects) == 5
        assert len(info.certifications) == 8
        assert len(result.quantifiable_achievements) == 8
        assert len(info.summary) <= 400
        assert len(result.action_verbs.missing) <= 8

    def test_keyword_relevance_bounds(self):
        assert analyze("Hello. I enjoy cooking pasta and hiking on weekends with my dog.").keywords.relevance_score == 0
        full = " ".join(relevant_keywords(ExperienceLevel.FRESHER))
        assert analyze(full).keywords.relevance_score == 100

    @pytest.mark.parametrize("level", list(ExperienceLevel))
    def test_suggestions_follow_priority_ladder(self, level):
        for text in ("", "John Smith\njohn@x.com", ONE_JOB_RESUME):
            ranks = [PRIORITY_RANK[s.priority] for s in analyze(text, level).suggestions]
            assert ranks == sorted(ranks)

    def test_crlf_line_endings_match_plain_newlines(self, rich_resume_text):
        crlf = rich_resume_text.replace("\n", "\r\n")
        assert analyze(crlf).to_dict() == analyze(rich_resume_text).to_dict()

    def test_certification_line_without_headings_is_not_a_job(self):
        text = (
            "Senior Software Engineer at ABC Technologies (Jan 2020 - Present)\n"
            "AWS Certified Solutions Architect\n"
            "Increased throughput by 40%\n"
            "Bachelor of Science in Computer Science, University of Technology, 2018\n"
        )
        info = analyze(text, "experienced").extracted_info
        assert [job.title for job in info.experience] == ["Senior Software Engineer"]
        assert any("aws" in c.lower() for c in info.certifications)

    def test_level_string_is_accepted(self, rich_resume_text):
        assert analyze(rich_resume_text, "experienced").experience_level is ExperienceLevel.EXPERIENCED

    def test_unknown_level_raises(self):
        with pytest.raises(ValueError):
            analyze("John Smith", "senior")

    def test_section_scores_in_range(self, rich_resume_text):
        for section in analyze(rich_resume_text).sections:
            assert 0 <= section.score <= 100


class TestScoreLabel:
    @pytest.mark.parametrize(
        "score,label",
        [
            (100, "Excellent"),
            (80, "Excellent"),
            (79, "Good"),
            (60, "Good"),
            (59, "Needs Improvement"),
            (40, "Needs Improvement"),
            (39, "Poor"),
            (0, "Poor"),
        ],
    )
    def test_thresholds(self, score, label):
        assert score_label(score) == label


class TestFormatReport:
    def test_rich_report(self, rich_resume_text):
        result = analyze(rich_resume_text, ExperienceLevel.EXPERIENCED)
        report = format_ats_report(result)
        assert report.startswith(f"## ATS Score: {result.score}/100")
        assert "Experience level: experienced" in report
        assert "| Work Experience |" in report
        assert "### Signals" in report
        assert "Jane Doe | jane.doe@example.com" in report

    def test_minimal_report_marks_missing_sections(self):
        report = format_ats_report(analyze("John Smith\njohn@x.com"))
        assert "| Professional Summary (missing) |" in report
        assert "### Formatting Issues" in report
        assert "1. [High] " in report


class TestLadderScenario:
    def test_missing_summary_and_email_lead_the_list(self):
        result = analyze("Priya Sharma\n+91 98765 43210\n\nSkills\nPython, SQL")
        first, second = result.suggestions[:2]
        assert first.priority is Priority.HIGH and "summary" in first.text
        assert second.priority is Priority.HIGH and "email" in second.text
