"""Pydantic V2 schema for a dueling wizard.

The wizard owns its health, mana, shield and spellbook. State only changes
through the methods below, which clamp every value into range. Field
constraints back this up: with validate_assignment enabled, a direct
assignment outside the allowed range raises a pydantic ValidationError.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, computed_field

from wizard_duel.core.constants import MAX_HEALTH, MAX_MANA
from wizard_duel.models.spell import Spell


class Wizard(BaseModel):
    """A duel participant.

    Attributes:
        name: Display name; cannot change after creation.
        health: Current health, 0..MAX_HEALTH.
        mana: Current mana, 0..MAX_MANA.
        shield: Damage absorbed before health is touched, never negative.
        spellbook: Spells in display and selection order.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
    )

    name: str = Field(min_length=1, max_length=40, frozen=True, description="Display name")
    health: Annotated[int, Field(ge=0, le=MAX_HEALTH, description="Current health")] = MAX_HEALTH
    mana: Annotated[int, Field(ge=0, le=MAX_MANA, description="Current mana")] = MAX_MANA
    shield: Annotated[int, Field(ge=0, description="Shield points")] = 0
    spellbook: list[Spell] = Field(default_factory=list, description="Known spells")

    @computed_field(description="Whether the wizard is still standing")
    @property
    def is_alive(self) -> bool:
        return self.health > 0

    # -------------------------------------------------------------------------
    # Mana
    # -------------------------------------------------------------------------

    def has_enough_mana(self, cost: int) -> bool:
        """Check whether a spell of the given cost can be paid for."""
        return self.mana >= cost

    def spend_mana(self, cost: int) -> None:
        """Pay mana, stopping at zero.

        Callers are expected to check has_enough_mana first; overspending
        clamps rather than raising.
        """
        self.mana = max(0, self.mana - cost)

    def regenerate_mana(self, amount: int) -> None:
        """Regain mana up to MAX_MANA."""
        self.mana = min(MAX_MANA, self.mana + amount)

    def change_mana(self, delta: int) -> None:
        """Shift mana by a signed amount, clamped to [0, MAX_MANA]."""
        self.mana = max(0, min(MAX_MANA, self.mana + delta))

    # -------------------------------------------------------------------------
    # Health and shield
    # -------------------------------------------------------------------------

    def receive_damage(self, amount: int) -> int:
        """Apply incoming damage, shield first.

        Args:
            amount: Raw damage. Zero or negative amounts do nothing.

        Returns:
            Health actually lost.
        """
        if amount <= 0 or not self.is_alive:
            return 0

        remaining = amount
        if self.shield > 0:
            absorbed = min(self.shield, remaining)
            self.shield -= absorbed
            remaining -= absorbed

        if remaining <= 0:
            return 0

        before = self.health
        self.health = max(0, self.health - remaining)
        return before - self.health

    def heal(self, amount: int) -> int:
        """Restore health up to MAX_HEALTH.

        Returns:
            Health actually restored (0 if dead).
        """
        if not self.is_alive:
            return 0
        before = self.health
        self.health = max(0, min(MAX_HEALTH, self.health + amount))
        return self.health - before

    def add_shield(self, amount: int) -> None:
        """Grow the shield. Dead wizards gain nothing."""
        if not self.is_alive:
            return
        self.shield = max(0, self.shield + amount)

    # -------------------------------------------------------------------------
    # Spellbook
    # -------------------------------------------------------------------------

    def add_spell(self, spell: Spell) -> None:
        """Append a spell to the end of the spellbook."""
        self.spellbook.append(spell)

    def status_line(self) -> str:
        """One-line summary used by the console status block."""
        return (
            f"{self.name} | HP: {self.health} | Mana: {self.mana} | Shield: {self.shield}"
        )


def create_wizard(name: str, spells: list[Spell] | None = None) -> Wizard:
    """Create a wizard at full health and mana with an empty shield.

    Args:
        name: Display name.
        spells: Spells to place in the spellbook, in order.

    Returns:
        The new Wizard.
    """
    wizard = Wizard(name=name)
    for spell in spells or []:
        wizard.add_spell(spell)
    return wizard


__all__ = [
    "Wizard",
    "create_wizard",
]
