"""Enumeration types for Wizard Duel."""

from __future__ import annotations

from enum import StrEnum


class SpellKind(StrEnum):
    """Behaviour tag selecting which effect a spell applies.

    The magnitude carried by a spell is interpreted according to its kind.
    """

    DAMAGE = "damage"
    """Deal damage to the target (shield absorbs first)."""

    HEAL = "heal"
    """Restore the caster's health."""

    SHIELD = "shield"
    """Add to the caster's damage-absorbing shield."""

    MANA_DRAIN = "mana_drain"
    """Take mana from the target; half of it flows to the caster."""

    MANA_REGEN = "mana_regen"
    """Restore the caster's mana."""

    @property
    def targets_self(self) -> bool:
        """Whether the effect only touches the caster.

        Returns:
            True for heal, shield and mana regeneration.
        """
        return self in (SpellKind.HEAL, SpellKind.SHIELD, SpellKind.MANA_REGEN)


__all__ = [
    "SpellKind",
]
