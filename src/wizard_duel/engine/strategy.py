"""Turn strategies: how a wizard picks the spell to cast.

A strategy receives the acting wizard, the opponent and the acting wizard's
spellbook, and answers with an index into that spellbook. It must not
mutate either wizard. The duel controller treats an index outside the
spellbook as a skipped turn.

Strategies:
    RuleBasedStrategy: Fixed priority list (heal, shield, drain, damage)
    ScriptedStrategy: Replays a fixed list of indices
    ConsoleStrategy: Human choice from a menu (wizard_duel.ui.console)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from wizard_duel.core import constants as c
from wizard_duel.core.exceptions import TurnStrategyError
from wizard_duel.core.logging import get_logger
from wizard_duel.engine.catalog import find_spell_index
from wizard_duel.models import Spell, SpellKind, Wizard


logger = get_logger(__name__)


class TurnStrategy(ABC):
    """Decision policy selecting which spell a wizard casts."""

    name: str = "strategy"

    @abstractmethod
    def choose_spell_index(
        self,
        wizard: Wizard,
        opponent: Wizard,
        spells: Sequence[Spell],
    ) -> int:
        """Pick a spell for this turn.

        Args:
            wizard: The wizard whose turn it is.
            opponent: The other wizard.
            spells: The acting wizard's spellbook.

        Returns:
            Index into spells.
        """


# =============================================================================
# Rule-Based AI
# =============================================================================


class RuleBasedStrategy(TurnStrategy):
    """Deterministic AI evaluating a fixed list of rules, first match wins.

    1. Heal with Healing Light at or below 40 health.
    2. Raise Magic Shield when no shield is up.
    3. Mana Drain an opponent holding 15 or more mana.
    4. Cheapest affordable damage spell.
    5. Cheapest spell overall, affordable or not.

    Rules 1-3 look spells up by name; a spellbook without the named spell
    skips that rule. Rule 5 may pick a spell the wizard cannot pay for,
    which simply produces a failed cast.
    """

    name = "rule_based"

    def choose_spell_index(
        self,
        wizard: Wizard,
        opponent: Wizard,
        spells: Sequence[Spell],
    ) -> int:
        heal_index = self._affordable(wizard, spells, c.HEALING_LIGHT)
        if wizard.health <= c.AI_HEAL_THRESHOLD and heal_index is not None:
            return self._decide(wizard, spells, heal_index, "low_health")

        shield_index = self._affordable(wizard, spells, c.MAGIC_SHIELD)
        if wizard.shield == 0 and shield_index is not None:
            return self._decide(wizard, spells, shield_index, "no_shield")

        drain_index = self._affordable(wizard, spells, c.MANA_DRAIN)
        if opponent.mana >= c.AI_DRAIN_THRESHOLD and drain_index is not None:
            return self._decide(wizard, spells, drain_index, "opponent_mana_high")

        damage_index = self._cheapest_affordable_damage(wizard, spells)
        if damage_index is not None:
            return self._decide(wizard, spells, damage_index, "cheapest_damage")

        return self._decide(wizard, spells, self._cheapest(spells), "fallback_cheapest")

    @staticmethod
    def _affordable(wizard: Wizard, spells: Sequence[Spell], name: str) -> int | None:
        index = find_spell_index(list(spells), name)
        if index is None or not wizard.has_enough_mana(spells[index].mana_cost):
            return None
        return index

    @staticmethod
    def _cheapest_affordable_damage(wizard: Wizard, spells: Sequence[Spell]) -> int | None:
        best_index: int | None = None
        for index, spell in enumerate(spells):
            if spell.kind != SpellKind.DAMAGE or not wizard.has_enough_mana(spell.mana_cost):
                continue
            # strict comparison keeps the first spell among equal costs
            if best_index is None or spell.mana_cost < spells[best_index].mana_cost:
                best_index = index
        return best_index

    @staticmethod
    def _cheapest(spells: Sequence[Spell]) -> int:
        best_index = 0
        for index, spell in enumerate(spells):
            if spell.mana_cost < spells[best_index].mana_cost:
                best_index = index
        return best_index

    @staticmethod
    def _decide(wizard: Wizard, spells: Sequence[Spell], index: int, rule: str) -> int:
        logger.debug(
            "AI decision",
            wizard=wizard.name,
            rule=rule,
            spell=spells[index].name if index < len(spells) else None,
        )
        return index


# =============================================================================
# Scripted
# =============================================================================


class ScriptedStrategy(TurnStrategy):
    """Replays a fixed sequence of spell indices, starting over at the end.

    Useful for regression duels and for standing in for a human in tests.
    Indices are returned as given, so an out-of-range entry produces a
    skipped turn.
    """

    name = "scripted"

    def __init__(self, indices: Sequence[int]) -> None:
        """Initialize the script.

        Args:
            indices: Spell indices to play, in order.

        Raises:
            TurnStrategyError: If the script is empty.
        """
        if not indices:
            raise TurnStrategyError("A scripted strategy needs at least one index")
        self._indices = list(indices)
        self._position = 0

    @property
    def turns_played(self) -> int:
        """Number of choices made so far."""
        return self._position

    def choose_spell_index(
        self,
        wizard: Wizard,
        opponent: Wizard,
        spells: Sequence[Spell],
    ) -> int:
        index = self._indices[self._position % len(self._indices)]
        self._position += 1
        return index


__all__ = [
    "TurnStrategy",
    "RuleBasedStrategy",
    "ScriptedStrategy",
]
