"""Tests for configuration loading and validation."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from genome_annotation.config import Settings, load_env_file


class TestSettings:
    """Test cases for Settings loading and validation."""

    def test_default_values(self):
        """Test that default values are set correctly."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()
            assert settings.log_level == "INFO"
            assert settings.json_indent == 2
            assert settings.sort_extensions is False

    def test_environment_variable_loading(self):
        """Test that environment variables are loaded correctly."""
        with patch.dict(
            os.environ,
            {
                "LOG_LEVEL": "debug",
                "GENOME_ANNOTATION_JSON_INDENT": "4",
                "GENOME_ANNOTATION_SORT_EXTENSIONS": "TRUE",
            },
        ):
            settings = Settings()
            assert settings.log_level == "DEBUG"
            assert settings.json_indent == 4
            assert settings.sort_extensions is True

    def test_validate_success(self):
        """Test that the default settings validate."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        # Should not raise any exception
        settings.validate()

    def test_validate_unknown_log_level(self):
        """Test validation failure for an unknown log level."""
        settings = Settings()
        settings.log_level = "LOUD"

        with pytest.raises(ValueError, match="Invalid log level: 'LOUD'"):
            settings.validate()

    def test_validate_negative_indent(self):
        """Test validation failure for a negative JSON indent."""
        settings = Settings()
        settings.log_level = "INFO"

        for indent in [-1, -4]:
            settings.json_indent = indent
            with pytest.raises(ValueError, match=f"Invalid JSON indent: {indent}"):
                settings.validate()

    def test_zero_indent_is_valid(self):
        settings = Settings()
        settings.log_level = "INFO"
        settings.json_indent = 0
        settings.validate()  # Should not raise

    def test_non_integer_indent_is_reported_by_validate(self):
        """Test that a bad indent does not fail on load but on validation."""
        with patch.dict(
            os.environ, {"GENOME_ANNOTATION_JSON_INDENT": "abc"}, clear=True
        ):
            settings = Settings()

        assert settings.json_indent == "abc"
        with pytest.raises(
            ValueError, match="Invalid GENOME_ANNOTATION_JSON_INDENT value: 'abc'"
        ):
            settings.validate()


class TestLoadEnvFile:
    """Test cases for .env file loading."""

    def test_missing_file_is_ignored(self, tmp_path):
        with patch.dict(os.environ, {}, clear=True):
            load_env_file(tmp_path / "missing.env")
            assert os.environ == {}

    def test_loads_values_without_overriding_environment(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text(
            "# comment\n"
            "\n"
            "GENOME_ANNOTATION_JSON_INDENT = 8\n"
            "LOG_LEVEL=ERROR\n"
            "not a pair\n"
        )
        with patch.dict(os.environ, {"LOG_LEVEL": "DEBUG"}, clear=True):
            load_env_file(env_file)
            assert os.environ["GENOME_ANNOTATION_JSON_INDENT"] == "8"
            assert os.environ["LOG_LEVEL"] == "DEBUG"
            assert "not a pair" not in os.environ

    def test_strips_export_prefix_and_quotes(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text(
            "export LOG_LEVEL=WARNING\n"
            "GENOME_ANNOTATION_JSON_INDENT='4'\n"
            'GENOME_ANNOTATION_SORT_EXTENSIONS="true"\n'
        )
        with patch.dict(os.environ, {}, clear=True):
            load_env_file(env_file)
            assert os.environ["LOG_LEVEL"] == "WARNING"
            assert os.environ["GENOME_ANNOTATION_JSON_INDENT"] == "4"
            assert os.environ["GENOME_ANNOTATION_SORT_EXTENSIONS"] == "true"
            settings = Settings()
            assert settings.json_indent == 4
            assert settings.sort_extensions is True
