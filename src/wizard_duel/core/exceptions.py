"""Custom exception hierarchy for Wizard Duel.

Game conditions such as running out of mana or typing a bad menu choice
are not exceptions; they are reported as part of the turn transcript.
The classes below cover configuration mistakes, engine misuse and a
closed console, and all inherit from WizardDuelError so the CLI can
handle them at a single boundary.

Example:
    >>> from wizard_duel.core.exceptions import CombatError
    >>> raise CombatError("No effect registered", spell_name="Fireball")
"""

from __future__ import annotations

from typing import Any


class WizardDuelError(Exception):
    """Base exception for all Wizard Duel errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(WizardDuelError):
    """Raised when application configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


# =============================================================================
# Game Engine Exceptions
# =============================================================================


class GameEngineError(WizardDuelError):
    """Base exception for all duel engine errors."""


class InvalidGameStateError(GameEngineError):
    """Raised when the duel is driven from a state that does not allow it.

    For example, asking a finished duel to play another turn.
    """

    def __init__(
        self,
        message: str,
        *,
        current_state: str | None = None,
        expected_states: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize invalid game state error with state context.

        Args:
            message: Human-readable error description.
            current_state: The current state identifier.
            expected_states: List of states that were expected.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if current_state:
            combined_details["current_state"] = current_state
        if expected_states:
            combined_details["expected_states"] = expected_states
        super().__init__(message, details=combined_details)


class CombatError(GameEngineError):
    """Raised when spell resolution cannot proceed.

    This signals a wiring problem (such as a spell kind with no registered
    effect), never a lack of mana.
    """

    def __init__(
        self,
        message: str,
        *,
        spell_name: str | None = None,
        caster: str | None = None,
        round_number: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize combat error with combat context.

        Args:
            message: Human-readable error description.
            spell_name: Name of the spell involved.
            caster: Name of the casting wizard.
            round_number: Current round when the error occurred.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if spell_name:
            combined_details["spell_name"] = spell_name
        if caster:
            combined_details["caster"] = caster
        if round_number is not None:
            combined_details["round_number"] = round_number
        super().__init__(message, details=combined_details)


class TurnStrategyError(GameEngineError):
    """Raised when a turn strategy is built or used incorrectly."""


# =============================================================================
# Input Exceptions
# =============================================================================


class InputError(WizardDuelError):
    """Base exception for console input failures."""


class InputClosedError(InputError):
    """Raised when the console input stream ends while a choice is pending."""

    def __init__(
        self,
        message: str = "Input stream closed while waiting for a spell choice",
        *,
        prompt: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize input closed error.

        Args:
            message: Human-readable error description.
            prompt: The prompt that was awaiting an answer.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if prompt:
            combined_details["prompt"] = prompt
        super().__init__(message, details=combined_details)


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
]
