"""Tests for contact extraction."""

from resume_scanner.domain.extractors import extract_contact


class TestContactExtraction:
    def test_rich_header(self, rich_resume_text):
        contact = extract_contact(rich_resume_text)
        assert contact.name == "Jane Doe"
        assert contact.email == "jane.doe@example.com"
        assert contact.phone == "(555) 123-4567"
        assert contact.location == "San Francisco, CA 94105"
        assert contact.linkedin_handle == "janedoe"
        assert contact.github_handle == "janedoe"
        assert contact.website_url is None

    def test_minimal_input(self):
        contact = extract_contact("John Smith\njohn@x.com")
        assert contact.name == "John Smith"
        assert contact.email == "john@x.com"
        assert contact.phone is None
        assert contact.location is None

    def test_empty_text_yields_all_none(self):
        contact = extract_contact("")
        assert contact.name is None
        assert contact.email is None
        assert contact.phone is None
        assert contact.location is None
        assert contact.linkedin_handle is None
        assert contact.github_handle is None
        assert contact.website_url is None

    def test_labels(self):
        text = "Name: Priya Sharma\nLocation: Austin, Texas\nLinkedIn: priya-sharma\nGitHub: psharma\nPortfolio: https://priya.dev"
        contact = extract_contact(text)
        assert contact.name == "Priya Sharma"
        assert contact.location == "Austin, Texas"
        assert contact.linkedin_handle == "priya-sharma"
        assert contact.github_handle == "psharma"
        assert contact.website_url == "https://priya.dev"

    def test_website_skips_profile_links(self):
        text = "Sam Lee\nhttps://www.linkedin.com/in/samlee https://github.com/samlee https://samlee.io"
        contact = extract_contact(text)
        assert contact.website_url == "https://samlee.io"

    def test_heading_line_is_not_a_name(self):
        contact = extract_contact("Curriculum Vitae\nMaria Garcia\nmaria@example.com")
        assert contact.name == "Maria Garcia"

    def test_location_only_read_from_header(self):
        lines = ["Alex Kim", "alex@example.com"] + [f"Line number {i}" for i in range(10)] + ["Denver, CO"]
        assert extract_contact("\n".join(lines)).location is None
