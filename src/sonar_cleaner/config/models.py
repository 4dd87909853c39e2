"""Configuration models."""

import logging
from pathlib import Path
from typing import Annotated, Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    DotEnvSettingsSource,
    NoDecode,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from sonar_cleaner.config.exceptions import ConfigurationError, InvalidConfigurationError

logger = logging.getLogger(__name__)


class CleanupConfig(BaseSettings):
    """Settings for the merge cleanup hook.

    Loaded once at startup and never mutated afterwards; the same instance is
    shared by every merge event the hook handles.
    """

    # Bitbucket settings
    bitbucket_url: str = Field(description="Bitbucket server base URL")
    bitbucket_token: str = Field(description="Bitbucket HTTP access token")

    # SonarQube settings
    sonarqube_url: str = Field(description="SonarQube server base URL")
    sonarqube_token: str = Field(description="SonarQube user token with project admin rights")

    protected_branches: Annotated[frozenset[str], NoDecode] = Field(
        default_factory=frozenset,
        description="Comma-separated branch names whose merges trigger cleanup",
    )

    model_config = SettingsConfigDict(
        env_file=[".env.sonarcleaner", ".env"],
        env_file_encoding="utf-8",
        env_prefix="",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    def __init__(
        self,
        _env_file: str | Path | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize configuration.

        Args:
            _env_file: Optional path to custom env file (use env_file for public API)
            **kwargs: Additional configuration values

        Raises:
            InvalidConfigurationError: If an env file is specified but does not exist
        """
        env_file = kwargs.pop("env_file", _env_file)

        if env_file is not None:
            env_path = Path(env_file)
            if not env_path.exists():
                raise InvalidConfigurationError(f"Environment file not found: {env_file}")
            kwargs["_custom_env_file"] = env_path

        super().__init__(**kwargs)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Order the sources the hook reads its settings from.

        Without an explicit env file, environment variables beat
        ``.env.sonarcleaner`` and ``.env``. An explicit env file replaces both
        default files and beats the environment.

        Args:
            settings_cls: CleanupConfig
            init_settings: Keyword arguments, always highest priority
            env_settings: Process environment
            dotenv_settings: Default ``.env.sonarcleaner`` / ``.env`` files
            file_secret_settings: Secret files

        Returns:
            Sources, highest priority first
        """
        init_kwargs = init_settings.init_kwargs  # type: ignore[attr-defined]
        custom_env_path = init_kwargs.get("_custom_env_file")

        if custom_env_path is not None:
            custom_dotenv = DotEnvSettingsSource(
                settings_cls,
                env_file=custom_env_path,
                env_file_encoding="utf-8",
            )
            return (init_settings, custom_dotenv, env_settings, file_secret_settings)

        return (init_settings, env_settings, dotenv_settings, file_secret_settings)

    @field_validator("bitbucket_url", "sonarqube_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Ensure URL doesn't have trailing slash.

        Args:
            v: URL value

        Returns:
            Normalized URL without trailing slash
        """
        return v.rstrip("/")

    @field_validator("protected_branches", mode="before")
    @classmethod
    def parse_protected_branches(cls, v: str | list[str] | set[str] | frozenset[str] | None) -> frozenset[str]:
        """Parse the protected branch list.

        Accepts a comma-separated string (as found in env files) or any iterable
        of names. Names are stripped and lower-cased; blank entries are dropped.

        Args:
            v: Raw value

        Returns:
            Lower-cased branch names

        Raises:
            InvalidConfigurationError: If the value has an unsupported type
        """
        if v is None:
            return frozenset()
        if isinstance(v, str):
            names: list[str] = v.split(",")
        elif isinstance(v, list | set | frozenset | tuple):
            names = [str(name) for name in v]
        else:
            raise InvalidConfigurationError(f"Invalid protected branches type: {type(v)}")
        return frozenset(name.strip().lower() for name in names if name.strip())

    @classmethod
    def disabled(cls) -> "CleanupConfig":
        """Build a configuration that protects no branch.

        Used when real settings cannot be loaded, so that every merge event is
        skipped instead of failing the host.

        Returns:
            Configuration with empty endpoints and no protected branches
        """
        return cls.model_construct(
            bitbucket_url="",
            bitbucket_token="",
            sonarqube_url="",
            sonarqube_token="",
            protected_branches=frozenset(),
        )


def load_config(env_file: str | Path | None = None) -> CleanupConfig:
    """Load configuration, degrading to a disabled configuration on failure.

    Args:
        env_file: Optional path to a custom env file

    Returns:
        Loaded configuration, or ``CleanupConfig.disabled()`` if loading failed
    """
    try:
        config = CleanupConfig(env_file=env_file)
    except (ConfigurationError, ValidationError) as e:
        logger.error(f"Unable to load cleanup configuration, cleanup is disabled: {e}")
        return CleanupConfig.disabled()

    if not config.protected_branches:
        logger.warning("No protected branches configured; merges will not trigger cleanup")
    else:
        logger.debug(f"Protected branches: {sorted(config.protected_branches)}")

    return config
