"""Tests for the resume-scanner command line."""

import json

import pytest

from resume_scanner.cli import build_parser, main


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("experience_level: fresher\noutput_format: markdown\n", encoding="utf-8")
    return path


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args(["resume.txt"])
        assert args.path == "resume.txt"
        assert args.level is None
        assert not args.json and not args.quiet and not args.verbose

    def test_rejects_unknown_level(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["resume.txt", "--level", "guru"])


class TestMain:
    def test_json_output(self, rich_resume_file, config_file, capsys):
        code = main([str(rich_resume_file), "--json", "--config", str(config_file)])
        assert code == 0
        document = json.loads(capsys.readouterr().out)
        assert document["experienceLevel"] == "fresher"
        assert document["extractedInfo"]["email"] == "jane.doe@example.com"
        assert 0 <= document["score"] <= 100

    def test_level_flag(self, rich_resume_file, config_file, capsys):
        main([str(rich_resume_file), "--json", "--level", "experienced", "--config", str(config_file)])
        assert json.loads(capsys.readouterr().out)["experienceLevel"] == "experienced"

    def test_env_level(self, rich_resume_file, config_file, capsys, monkeypatch):
        monkeypatch.setenv("RESUME_SCANNER_LEVEL", "experienced")
        main([str(rich_resume_file), "--json", "--config", str(config_file)])
        assert json.loads(capsys.readouterr().out)["experienceLevel"] == "experienced"

    def test_quiet(self, rich_resume_file, config_file, capsys):
        assert main([str(rich_resume_file), "--quiet", "--config", str(config_file)]) == 0
        score, label = capsys.readouterr().out.strip().split(" ", 1)
        assert 0 <= int(score) <= 100
        assert label in {"Excellent", "Good", "Needs Improvement", "Poor"}

    def test_markdown_report(self, rich_resume_file, config_file, capsys):
        assert main([str(rich_resume_file), "--config", str(config_file)]) == 0
        assert "ATS Score" in capsys.readouterr().out

    def test_missing_resume(self, tmp_path, config_file, capsys):
        assert main([str(tmp_path / "nope.txt"), "--config", str(config_file)]) == 1
        assert "File not found" in capsys.readouterr().out

    def test_invalid_config(self, rich_resume_file, tmp_path, capsys):
        bad = tmp_path / "bad.yaml"
        bad.write_text("experience_level: guru\n", encoding="utf-8")
        assert main([str(rich_resume_file), "--config", str(bad)]) == 1
        assert "experience_level" in capsys.readouterr().out

    def test_missing_config_falls_back_to_defaults(self, rich_resume_file, tmp_path, capsys):
        code = main([str(rich_resume_file), "--quiet", "--config", str(tmp_path / "absent.yaml")])
        assert code == 0
        assert "Config file not found" in capsys.readouterr().out
