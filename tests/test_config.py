"""Tests for scanner configuration loading and validation."""

import pytest

from resume_scanner.config import (
    LEVEL_ENV_VAR,
    ScannerConfig,
    Severity,
    config_from_mapping,
    has_errors,
    load_config,
    load_raw_config,
    validate_config,
)


def _write(tmp_path, body):
    path = tmp_path / "config.yaml"
    path.write_text(body, encoding="utf-8")
    return path


class TestLoadConfig:
    def test_repository_default_config(self):
        config = load_config()
        assert config == ScannerConfig()

    def test_values_from_file(self, tmp_path):
        path = _write(tmp_path, "experience_level: experienced\noutput_format: json\nshort_text_threshold: 10\n")
        config = load_config(str(path))
        assert config.experience_level == "experienced"
        assert config.output_format == "json"
        assert config.short_text_threshold == 10
        assert config.verbose is False

    def test_empty_file_uses_defaults(self, tmp_path):
        assert load_raw_config(str(_write(tmp_path, ""))) == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_raw_config(str(tmp_path / "nope.yaml"))

    def test_non_mapping(self, tmp_path):
        with pytest.raises(ValueError):
            load_raw_config(str(_write(tmp_path, "- just\n- a list\n")))

    def test_env_overrides_level(self, monkeypatch):
        monkeypatch.setenv(LEVEL_ENV_VAR, "experienced")
        assert config_from_mapping({"experience_level": "fresher"}).experience_level == "experienced"


class TestValidateConfig:
    def test_valid(self):
        assert validate_config({"experience_level": "fresher", "output_format": "markdown"}) == []

    def test_empty_is_valid(self):
        assert not has_errors(validate_config({}))

    @pytest.mark.parametrize(
        "raw,field",
        [
            ({"experience_level": "senior"}, "experience_level"),
            ({"output_format": "xml"}, "output_format"),
            ({"short_text_threshold": 0}, "short_text_threshold"),
            ({"short_text_threshold": True}, "short_text_threshold"),
            ({"short_text_threshold": "50"}, "short_text_threshold"),
        ],
    )
    def test_errors(self, raw, field):
        issues = validate_config(raw)
        assert has_errors(issues)
        assert [i.field for i in issues if i.severity == Severity.ERROR] == [field]

    def test_invalid_env_level(self, monkeypatch):
        monkeypatch.setenv(LEVEL_ENV_VAR, "guru")
        issues = validate_config({})
        assert [i.field for i in issues] == [LEVEL_ENV_VAR]

    def test_warnings_only(self):
        issues = validate_config({"verbose": "yes", "theme": "dark"})
        assert not has_errors(issues)
        assert {i.field for i in issues} == {"verbose", "theme"}
        assert all(i.severity == Severity.WARNING for i in issues)
