"""Integration tests for configuration module."""

from pathlib import Path

import pytest

from skillmatch.config import (
    AppConfig,
    ConfigurationError,
    load_config,
    load_environment_config,
    parse_config,
    validate_config_file,
)

# Test fixtures directory
FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    """Run from an empty directory with no config-related environment."""
    monkeypatch.chdir(tmp_path)
    for name in ("SKILLMATCH_CONFIG", "LOG_LEVEL", "LOG_FORMAT", "ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


class TestConfigurationLoading:
    """Test configuration loading from YAML files."""

    def test_load_valid_config(self, isolated_cwd):
        """Test loading a configuration that sets every section."""
        app_config = load_config(FIXTURES_DIR / "valid_config.yaml")

        assert app_config.vocabulary.terms is None
        assert app_config.vocabulary.extra_terms == ["graphql", "terraform"]
        assert app_config.scoring.declared_skill_weight == 60
        assert app_config.scoring.keyword_bonus_per_term == 10
        assert app_config.scoring.keyword_bonus_cap == 40
        assert app_config.scoring.max_score == 100
        assert app_config.recommendations.min_score == 30
        assert app_config.connections.common_skill_points == 25
        assert app_config.connections.bio_overlap_points == 10
        assert app_config.connections.limit == 3
        assert app_config.connections.case_sensitive_common_skills is False
        assert app_config.logging.level == "DEBUG"
        assert app_config.logging.format == "json"

    def test_load_minimal_config(self, isolated_cwd):
        """Test omitted sections fall back to defaults."""
        app_config = load_config(FIXTURES_DIR / "minimal_config.yaml")

        assert app_config.scoring.declared_skill_weight == 70
        assert app_config.connections.limit == 5
        assert app_config.connections.case_sensitive_common_skills is True
        assert app_config.logging.level == "INFO"
        assert app_config.logging.format == "key-value"

    def test_defaults_when_no_file_found(self, isolated_cwd):
        """Test built-in defaults are used when no config file exists."""
        assert load_config() == AppConfig()

    def test_default_location_is_used(self, isolated_cwd):
        """Test skillmatch.yaml in the working directory is picked up."""
        (isolated_cwd / "skillmatch.yaml").write_text("recommendations:\n  min_score: 42\n")

        assert load_config().recommendations.min_score == 42

    def test_config_dir_location_is_used(self, isolated_cwd):
        """Test config/skillmatch.yaml is picked up."""
        (isolated_cwd / "config").mkdir()
        (isolated_cwd / "config" / "skillmatch.yaml").write_text("connections:\n  limit: 2\n")

        assert load_config().connections.limit == 2

    def test_environment_variable_location(self, isolated_cwd, monkeypatch):
        """Test SKILLMATCH_CONFIG points at the config file."""
        monkeypatch.setenv("SKILLMATCH_CONFIG", str(FIXTURES_DIR / "valid_config.yaml"))

        assert load_config().recommendations.min_score == 30

    def test_empty_file_means_defaults(self, isolated_cwd):
        """Test an empty YAML file is a valid all-defaults configuration."""
        config_file = isolated_cwd / "empty.yaml"
        config_file.write_text("")

        assert load_config(config_file) == AppConfig()

    def test_missing_explicit_file(self, isolated_cwd):
        """Test an explicitly requested file must exist."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(isolated_cwd / "nope.yaml")

        assert "not found" in str(exc_info.value)

    def test_invalid_values(self, isolated_cwd):
        """Test validation errors are collected into ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(FIXTURES_DIR / "invalid_config.yaml")

        error = exc_info.value
        assert error.message == "Configuration validation failed"
        assert len(error.errors) == 4
        assert "Unknown field: unknown_section" in error.errors
        assert any("declared_skill_weight" in e for e in error.errors)
        assert any("limit" in e for e in error.errors)
        assert "Validation Errors:" in str(error)

    def test_malformed_yaml(self, isolated_cwd):
        """Test YAML syntax errors are reported."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(FIXTURES_DIR / "malformed_config.yaml")

        assert "Failed to parse YAML" in exc_info.value.message

    def test_non_mapping_root(self, isolated_cwd):
        """Test a YAML list at the root is rejected."""
        config_file = isolated_cwd / "list.yaml"
        config_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError):
            load_config(config_file)

    def test_empty_replacement_vocabulary_rejected(self):
        """Test vocabulary.terms cannot be emptied without extra terms."""
        with pytest.raises(ConfigurationError):
            parse_config({"vocabulary": {"terms": ["  "]}})

    def test_warns_when_weights_exceed_max_score(self, isolated_cwd):
        """Test a warning is emitted for weights the clamp will cut."""
        config_file = isolated_cwd / "weights.yaml"
        config_file.write_text("scoring:\n  declared_skill_weight: 80\n  keyword_bonus_cap: 30\n")

        with pytest.warns(UserWarning, match="exceeds max_score"):
            load_config(config_file)

    def test_warns_on_duplicate_vocabulary_terms(self, isolated_cwd):
        """Test duplicate vocabulary terms produce a warning."""
        config_file = isolated_cwd / "dupes.yaml"
        config_file.write_text("vocabulary:\n  extra_terms: [GraphQL, graphql]\n")

        with pytest.warns(UserWarning, match="graphql"):
            app_config = load_config(config_file)

        assert app_config.vocabulary.extra_terms == ["graphql", "graphql"]


class TestValidateConfigFile:
    """Tests for validate_config_file."""

    def test_valid_file(self, isolated_cwd, capsys):
        """Test a valid file reports success."""
        assert validate_config_file(FIXTURES_DIR / "valid_config.yaml") is True
        assert "is valid" in capsys.readouterr().out

    def test_invalid_file(self, isolated_cwd, capsys):
        """Test an invalid file reports the errors."""
        assert validate_config_file(FIXTURES_DIR / "invalid_config.yaml") is False
        assert "Configuration validation failed" in capsys.readouterr().out


class TestEnvironmentConfig:
    """Tests for load_environment_config."""

    def test_defaults(self, isolated_cwd):
        """Test all environment variables are optional."""
        env_config = load_environment_config()

        assert env_config.config_path is None
        assert env_config.log_level is None
        assert env_config.log_format is None
        assert env_config.environment == "local"

    def test_values_are_normalized(self, isolated_cwd, monkeypatch):
        """Test case normalization of log settings."""
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FORMAT", "JSON")
        monkeypatch.setenv("ENVIRONMENT", "staging")

        env_config = load_environment_config()

        assert env_config.log_level == "DEBUG"
        assert env_config.log_format == "json"
        assert env_config.environment == "staging"

    def test_invalid_values(self, isolated_cwd, monkeypatch):
        """Test invalid values are all reported together."""
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        monkeypatch.setenv("LOG_FORMAT", "xml")
        monkeypatch.setenv("SKILLMATCH_CONFIG", str(isolated_cwd / "missing.yaml"))

        with pytest.raises(ConfigurationError) as exc_info:
            load_environment_config()

        assert len(exc_info.value.errors) == 3


class TestConfigurationError:
    """Tests for ConfigurationError formatting."""

    def test_message_only(self):
        """Test an error without details."""
        assert str(ConfigurationError("Broken")) == "Broken"

    def test_errors_and_suggestions(self):
        """Test errors are numbered and suggestions bulleted."""
        error = ConfigurationError("Broken", errors=["first", "second"], suggestions=["fix it"])

        assert str(error) == (
            "Broken\n"
            "\nValidation Errors:\n"
            "  1. first\n"
            "  2. second\n"
            "\nSuggestions:\n"
            "  - fix it"
        )
