"""Duel engine for Wizard Duel.

Submodules:
    catalog: The default spellbook
    effects: Spell effects and cast resolution
    strategy: Turn strategies (rule-based AI, scripted)
    duel: The duel controller and outcome rules

Example:
    >>> from wizard_duel.core import DuelSettings
    >>> from wizard_duel.engine import RuleBasedStrategy, create_duel
    >>>
    >>> duel = create_duel(DuelSettings(), RuleBasedStrategy(), RuleBasedStrategy())
    >>> result = duel.run()
    >>> print(result.message)
"""

from __future__ import annotations

# =============================================================================
# Spell Catalog
# =============================================================================
from wizard_duel.engine.catalog import (
    create_default_spellbook,
    find_spell_index,
)

# =============================================================================
# Spell Effects
# =============================================================================
from wizard_duel.engine.effects import (
    CastResult,
    EffectOutcome,
    cast_spell,
    effect,
    get_effect,
    registered_kinds,
)

# =============================================================================
# Turn Strategies
# =============================================================================
from wizard_duel.engine.strategy import (
    RuleBasedStrategy,
    ScriptedStrategy,
    TurnStrategy,
)

# =============================================================================
# Duel Controller
# =============================================================================
from wizard_duel.engine.duel import (
    Duel,
    DuelOutcome,
    DuelResult,
    TurnResult,
    create_duel,
    resolve_outcome,
    turn_banner,
)


__all__ = [
    # Catalog
    "create_default_spellbook",
    "find_spell_index",
    # Effects
    "CastResult",
    "EffectOutcome",
    "cast_spell",
    "effect",
    "get_effect",
    "registered_kinds",
    # Strategies
    "TurnStrategy",
    "RuleBasedStrategy",
    "ScriptedStrategy",
    # Duel
    "DuelOutcome",
    "TurnResult",
    "DuelResult",
    "Duel",
    "create_duel",
    "resolve_outcome",
    "turn_banner",
]
