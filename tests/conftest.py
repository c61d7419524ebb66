"""Pytest configuration and shared fixtures.

This module provides common fixtures for the Wizard Duel test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

import pytest


if TYPE_CHECKING:
    from collections.abc import Generator

    from wizard_duel.models import Spell, Wizard


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def configure_test_logging() -> None:
    """Route log output to stderr once for the whole session."""
    from wizard_duel.core.logging import configure_logging

    configure_logging(level="WARNING")


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from wizard_duel.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "WIZARD_DUEL_DEBUG": "true",
        "WIZARD_DUEL_LOG_LEVEL": "ERROR",
        "WIZARD_DUEL_DUEL_PLAYER_NAME": "Merlin",
        "WIZARD_DUEL_DUEL_ENEMY_NAME": "Morgana",
        "WIZARD_DUEL_DUEL_PLAYER_STRATEGY": "rule_based",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def spellbook() -> list[Spell]:
    """Provide a fresh default spellbook."""
    from wizard_duel.engine.catalog import create_default_spellbook

    return create_default_spellbook()


@pytest.fixture
def make_wizard() -> Callable[..., Wizard]:
    """Factory for wizards with the default spellbook and custom stats.

    Returns:
        Function taking a name and optional health, mana and shield.
    """
    from wizard_duel.engine.catalog import create_default_spellbook
    from wizard_duel.models import create_wizard

    def _make(
        name: str = "Player",
        *,
        health: int | None = None,
        mana: int | None = None,
        shield: int = 0,
        with_spells: bool = True,
    ) -> Wizard:
        wizard = create_wizard(name, create_default_spellbook() if with_spells else [])
        if health is not None:
            wizard.health = health
        if mana is not None:
            wizard.mana = mana
        wizard.shield = shield
        return wizard

    return _make


@pytest.fixture
def player(make_wizard: Callable[..., Wizard]) -> Wizard:
    """Player wizard at full health and mana."""
    return make_wizard("Player")


@pytest.fixture
def enemy(make_wizard: Callable[..., Wizard]) -> Wizard:
    """Enemy wizard at full health and mana."""
    return make_wizard("Enemy")
