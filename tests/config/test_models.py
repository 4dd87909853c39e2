"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from sonar_cleaner.config import CleanupConfig, InvalidConfigurationError


def make_config(**overrides: object) -> CleanupConfig:
    """Create a configuration with test defaults."""
    values: dict[str, object] = {
        "bitbucket_url": "https://bitbucket.example.com",
        "bitbucket_token": "bb-token",
        "sonarqube_url": "https://sonar.example.com",
        "sonarqube_token": "sq-token",
        "protected_branches": "master,develop",
    }
    values.update(overrides)
    return CleanupConfig(**values)  # type: ignore[arg-type]


class TestCleanupConfig:
    """Tests for CleanupConfig model."""

    def test_valid_config(self) -> None:
        """Test creating a complete configuration."""
        config = make_config()

        assert config.bitbucket_url == "https://bitbucket.example.com"
        assert config.bitbucket_token == "bb-token"
        assert config.sonarqube_url == "https://sonar.example.com"
        assert config.sonarqube_token == "sq-token"
        assert config.protected_branches == frozenset({"master", "develop"})

    def test_missing_token(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        """Test that tokens are required."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("SONARQUBE_TOKEN", raising=False)

        with pytest.raises(ValidationError):
            CleanupConfig(
                bitbucket_url="https://bitbucket.example.com",
                bitbucket_token="bb-token",
                sonarqube_url="https://sonar.example.com",
            )

    def test_url_normalization_trailing_slash(self) -> None:
        """Test that trailing slashes are removed from both URLs."""
        config = make_config(
            bitbucket_url="https://bitbucket.example.com/",
            sonarqube_url="https://sonar.example.com///",
        )

        assert config.bitbucket_url == "https://bitbucket.example.com"
        assert config.sonarqube_url == "https://sonar.example.com"

    def test_is_frozen(self) -> None:
        """Test that configuration cannot be changed after loading."""
        config = make_config()

        with pytest.raises(ValidationError):
            config.sonarqube_token = "other"  # type: ignore[misc]


class TestProtectedBranches:
    """Tests for protected branch parsing."""

    def test_lowercases_names(self) -> None:
        """Test that branch names are lower-cased."""
        config = make_config(protected_branches="Master,DEVELOP,Release")

        assert config.protected_branches == frozenset({"master", "develop", "release"})

    def test_strips_whitespace_and_blanks(self) -> None:
        """Test that spaces around names and empty entries are dropped."""
        config = make_config(protected_branches=" master , ,develop,")

        assert config.protected_branches == frozenset({"master", "develop"})

    def test_accepts_iterables(self) -> None:
        """Test passing names as a list."""
        config = make_config(protected_branches=["Main", "hotfix"])

        assert config.protected_branches == frozenset({"main", "hotfix"})

    def test_empty_string(self) -> None:
        """Test that an empty list protects nothing."""
        config = make_config(protected_branches="")

        assert config.protected_branches == frozenset()

    def test_defaults_to_empty(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        """Test that protected branches are optional."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("PROTECTED_BRANCHES", raising=False)

        config = CleanupConfig(
            bitbucket_url="https://bitbucket.example.com",
            bitbucket_token="bb-token",
            sonarqube_url="https://sonar.example.com",
            sonarqube_token="sq-token",
        )

        assert config.protected_branches == frozenset()

    def test_invalid_type(self) -> None:
        """Test that unsupported types are rejected."""
        with pytest.raises(InvalidConfigurationError, match="Invalid protected branches type"):
            make_config(protected_branches=42)


class TestDisabledConfig:
    """Tests for CleanupConfig.disabled."""

    def test_disabled(self) -> None:
        """Test that the disabled configuration protects no branch."""
        config = CleanupConfig.disabled()

        assert config.protected_branches == frozenset()
        assert config.bitbucket_url == ""
        assert config.sonarqube_url == ""
        assert config.bitbucket_token == ""
        assert config.sonarqube_token == ""
