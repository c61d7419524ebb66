"""Pydantic V2 schemas for Wizard Duel.

Submodules:
    enums: SpellKind behaviour tags.
    spell: Immutable Spell values.
    wizard: Wizard state with clamping mutators.

Example:
    >>> from wizard_duel.models import Spell, SpellKind, create_wizard
    >>> bolt = Spell(name="Bolt", kind=SpellKind.DAMAGE, mana_cost=3, magnitude=9)
    >>> merlin = create_wizard("Merlin", [bolt])
"""

from __future__ import annotations

from wizard_duel.models.enums import SpellKind
from wizard_duel.models.spell import Spell
from wizard_duel.models.wizard import Wizard, create_wizard


__all__ = [
    "SpellKind",
    "Spell",
    "Wizard",
    "create_wizard",
]
