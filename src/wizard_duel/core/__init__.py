"""Core module providing configuration, logging, constants and exceptions.

Exports:
    Exceptions:
        WizardDuelError: Base exception for all application errors.
        ConfigurationError: Configuration-related errors.
        GameEngineError: Duel engine errors.

    Configuration:
        Settings: Main application settings class.
        DuelSettings: Per-duel settings.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from wizard_duel.core.config import (
    DuelSettings,
    Settings,
    StrategyName,
    clear_settings_cache,
    get_settings,
)
from wizard_duel.core.exceptions import (
    CombatError,
    ConfigurationError,
    GameEngineError,
    InputClosedError,
    InputError,
    InvalidGameStateError,
    TurnStrategyError,
    WizardDuelError,
)
from wizard_duel.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Base exception
    "WizardDuelError",
    # Configuration exceptions
    "ConfigurationError",
    # Game engine exceptions
    "GameEngineError",
    "InvalidGameStateError",
    "CombatError",
    "TurnStrategyError",
    # Input exceptions
    "InputError",
    "InputClosedError",
    # Configuration
    "Settings",
    "DuelSettings",
    "StrategyName",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
