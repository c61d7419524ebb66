"""Configuration management for Wizard Duel.

Settings are loaded with pydantic-settings from environment variables and an
optional .env file. They cover who fights and how the program reports; the
rules of the duel itself are fixed in wizard_duel.core.constants.

Example:
    >>> from wizard_duel.core.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.duel.player_name)
    'Player'

Environment Variables:
    WIZARD_DUEL_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    WIZARD_DUEL_LOG_JSON: Emit JSON log lines instead of console output
    WIZARD_DUEL_DUEL_PLAYER_NAME: Display name of the first wizard
    WIZARD_DUEL_DUEL_ENEMY_NAME: Display name of the second wizard
    WIZARD_DUEL_DUEL_PLAYER_STRATEGY: 'interactive' or 'rule_based'
    WIZARD_DUEL_DUEL_ENEMY_STRATEGY: 'interactive' or 'rule_based'
    WIZARD_DUEL_DUEL_MAX_ROUNDS: Round cap before the duel is called off
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wizard_duel.core.exceptions import ConfigurationError


StrategyName = Literal["interactive", "rule_based"]


class DuelSettings(BaseSettings):
    """Configuration for a single duel.

    Attributes:
        player_name: Name of the wizard who acts first.
        enemy_name: Name of the wizard who acts second.
        player_strategy: Strategy controlling the first wizard.
        enemy_strategy: Strategy controlling the second wizard.
        max_rounds: Number of rounds after which the duel is called off.
    """

    model_config = SettingsConfigDict(
        env_prefix="WIZARD_DUEL_DUEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    player_name: str = Field(
        default="Player",
        min_length=1,
        max_length=40,
        description="Name of the wizard who acts first",
    )
    enemy_name: str = Field(
        default="Enemy",
        min_length=1,
        max_length=40,
        description="Name of the wizard who acts second",
    )
    player_strategy: StrategyName = Field(
        default="interactive",
        description="Strategy controlling the first wizard",
    )
    enemy_strategy: StrategyName = Field(
        default="rule_based",
        description="Strategy controlling the second wizard",
    )
    max_rounds: int = Field(
        default=1000,
        ge=1,
        le=100_000,
        description="Round cap before the duel is called off",
    )

    @model_validator(mode="after")
    def validate_distinct_names(self) -> "DuelSettings":
        """Ensure the two wizards can be told apart in the transcript.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If both wizards share a name.
        """
        if self.player_name == self.enemy_name:
            raise ConfigurationError(
                f"player_name and enemy_name must differ (both are {self.player_name!r})",
                config_key="enemy_name",
            )
        return self


class Settings(BaseSettings):
    """Main application settings.

    Attributes:
        debug: Enable debug mode.
        log_level: Application logging level.
        log_json: Render log lines as JSON.
        duel: Duel settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="WIZARD_DUEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level",
    )
    log_json: bool = Field(
        default=False,
        description="Render log lines as JSON",
    )

    duel: DuelSettings = Field(default_factory=DuelSettings)

    @property
    def effective_log_level(self) -> str:
        """Log level after applying debug mode.

        Returns:
            'DEBUG' in debug mode, otherwise the configured level.
        """
        return "DEBUG" if self.debug else self.log_level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "StrategyName",
    "DuelSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
