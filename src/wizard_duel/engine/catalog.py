"""Default spell catalog.

Every call builds a fresh list, so each wizard gets its own spellbook
while the selection indices stay identical on both sides.
"""

from __future__ import annotations

from wizard_duel.core import constants as c
from wizard_duel.models import Spell, SpellKind


def create_default_spellbook() -> list[Spell]:
    """Build the six standard spells in menu order.

    Returns:
        Fireball, Ice Spike, Healing Light, Magic Shield, Mana Drain, Mana Surge.
    """
    return [
        Spell(
            name=c.FIREBALL,
            kind=SpellKind.DAMAGE,
            mana_cost=c.FIREBALL_COST,
            magnitude=c.FIREBALL_DAMAGE,
        ),
        Spell(
            name=c.ICE_SPIKE,
            kind=SpellKind.DAMAGE,
            mana_cost=c.ICE_SPIKE_COST,
            magnitude=c.ICE_SPIKE_DAMAGE,
        ),
        Spell(
            name=c.HEALING_LIGHT,
            kind=SpellKind.HEAL,
            mana_cost=c.HEAL_COST,
            magnitude=c.HEAL_AMOUNT,
        ),
        Spell(
            name=c.MAGIC_SHIELD,
            kind=SpellKind.SHIELD,
            mana_cost=c.SHIELD_COST,
            magnitude=c.SHIELD_AMOUNT,
        ),
        Spell(
            name=c.MANA_DRAIN,
            kind=SpellKind.MANA_DRAIN,
            mana_cost=c.MANA_DRAIN_COST,
            magnitude=c.MANA_DRAIN_AMOUNT,
        ),
        Spell(
            name=c.MANA_SURGE,
            kind=SpellKind.MANA_REGEN,
            mana_cost=c.MANA_SURGE_COST,
            magnitude=c.MANA_SURGE_AMOUNT,
        ),
    ]


def find_spell_index(spells: list[Spell], name: str) -> int | None:
    """Locate a spell by name.

    Args:
        spells: Spellbook to search.
        name: Exact spell name.

    Returns:
        Index of the first match, or None.
    """
    for index, spell in enumerate(spells):
        if spell.name == name:
            return index
    return None


__all__ = [
    "create_default_spellbook",
    "find_spell_index",
]
