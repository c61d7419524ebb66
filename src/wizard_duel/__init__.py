"""Wizard Duel - turn-based spell dueling between two wizards.

Two wizards take turns casting spells from identical spellbooks until one
of them runs out of health. The engine is deterministic: the only input is
the spell each side chooses.

Example:
    >>> from wizard_duel import DuelSettings, RuleBasedStrategy, create_duel
    >>>
    >>> duel = create_duel(DuelSettings(), RuleBasedStrategy(), RuleBasedStrategy())
    >>> result = duel.run()
    >>> print(result.outcome, result.rounds)

Modules:
    core: Configuration, logging, constants and exceptions.
    models: Pydantic V2 schemas (Spell, Wizard).
    engine: Spell catalog, effects, turn strategies and the duel controller.
    ui: Console strategy and transcript reporter.
"""

from __future__ import annotations

# Core
from wizard_duel.core.config import DuelSettings, Settings, get_settings
from wizard_duel.core.exceptions import WizardDuelError
from wizard_duel.core.logging import configure_logging, get_logger

# Models
from wizard_duel.models import Spell, SpellKind, Wizard, create_wizard

# Engine
from wizard_duel.engine import (
    CastResult,
    Duel,
    DuelOutcome,
    DuelResult,
    RuleBasedStrategy,
    ScriptedStrategy,
    TurnResult,
    TurnStrategy,
    cast_spell,
    create_default_spellbook,
    create_duel,
)


__version__ = "0.1.0"
__all__ = [
    # Version info
    "__version__",
    # Core
    "WizardDuelError",
    "Settings",
    "DuelSettings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Models
    "Spell",
    "SpellKind",
    "Wizard",
    "create_wizard",
    # Engine
    "CastResult",
    "Duel",
    "DuelOutcome",
    "DuelResult",
    "TurnResult",
    "TurnStrategy",
    "RuleBasedStrategy",
    "ScriptedStrategy",
    "cast_spell",
    "create_default_spellbook",
    "create_duel",
]
