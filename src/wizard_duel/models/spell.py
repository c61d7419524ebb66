"""Pydantic V2 schema for spells.

A spell is an immutable value: a name, a mana cost, a magnitude and the
kind tag that decides how the magnitude is applied. The same instance may
sit in several spellbooks since casting never changes it.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from wizard_duel.models.enums import SpellKind


class Spell(BaseModel):
    """A castable spell.

    Attributes:
        name: Display name, also used by the rule-based strategy to find spells.
        kind: Which effect the spell applies.
        mana_cost: Mana spent on a successful cast.
        magnitude: Damage, heal, shield, drain or restore amount depending on kind.
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid",
    )

    name: str = Field(min_length=1, max_length=60, description="Spell name")
    kind: SpellKind = Field(description="Effect selector")
    mana_cost: Annotated[int, Field(ge=0, description="Mana cost")]
    magnitude: Annotated[int, Field(ge=0, description="Kind-specific amount")]

    def __str__(self) -> str:
        return f"{self.name} (cost: {self.mana_cost} mana)"


__all__ = [
    "Spell",
]
