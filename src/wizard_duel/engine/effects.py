"""Spell effects and cast resolution.

Each SpellKind maps to one effect function registered with the @effect
decorator. cast_spell() checks mana, pays the cost, runs the effect and
returns a CastResult describing what happened. Nothing here prints; the
result message is handed to whoever reports the turn.

Effects:
    damage: Target takes the spell's magnitude as damage
    heal: Caster regains health
    shield: Caster gains shield points
    mana_drain: Target loses mana; the caster gets half of it
    mana_regen: Caster regains mana
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from wizard_duel.core.exceptions import CombatError
from wizard_duel.core.logging import get_logger
from wizard_duel.models import Spell, SpellKind, Wizard


logger = get_logger(__name__)

EffectFunction = Callable[[Spell, Wizard, Wizard], "EffectOutcome"]


# =============================================================================
# Results
# =============================================================================


@dataclass(frozen=True)
class EffectOutcome:
    """What an effect did once mana had been paid.

    Attributes:
        amount: The amount reported for the effect (damage, heal, drain...).
        message: Transcript line describing the effect.
    """

    amount: int
    message: str


@dataclass(frozen=True)
class CastResult:
    """Outcome of a cast attempt.

    Attributes:
        spell_name: Name of the spell.
        kind: Behaviour tag of the spell.
        caster: Name of the casting wizard.
        target: Name of the opposing wizard.
        success: False when the caster could not pay the cost.
        mana_spent: Mana paid (0 on failure).
        amount: Amount reported by the effect (0 on failure).
        message: Transcript line.
        affected: Name of the wizard the effect landed on (caster for
            self-targeted kinds, empty on failure).
    """

    spell_name: str
    kind: SpellKind
    caster: str
    target: str
    success: bool
    mana_spent: int = 0
    amount: int = 0
    message: str = ""
    affected: str = ""


# =============================================================================
# Effect Registry
# =============================================================================


_effect_registry: dict[SpellKind, EffectFunction] = {}


def effect(kind: SpellKind) -> Callable[[EffectFunction], EffectFunction]:
    """Decorator to register the effect applied by a spell kind.

    Args:
        kind: Spell kind handled by the decorated function.

    Returns:
        Decorator that registers and returns the function unchanged.
    """

    def decorator(func: EffectFunction) -> EffectFunction:
        _effect_registry[kind] = func
        return func

    return decorator


def get_effect(kind: SpellKind) -> EffectFunction | None:
    """Get the effect registered for a spell kind."""
    return _effect_registry.get(kind)


def registered_kinds() -> list[SpellKind]:
    """Get all spell kinds with a registered effect."""
    return list(_effect_registry)


# =============================================================================
# Effects
# =============================================================================


@effect(SpellKind.DAMAGE)
def apply_damage(spell: Spell, caster: Wizard, target: Wizard) -> EffectOutcome:
    target.receive_damage(spell.magnitude)
    return EffectOutcome(
        amount=spell.magnitude,
        message=f"{caster.name} casts {spell.name} and deals {spell.magnitude} damage.",
    )


@effect(SpellKind.HEAL)
def apply_heal(spell: Spell, caster: Wizard, target: Wizard) -> EffectOutcome:
    caster.heal(spell.magnitude)
    return EffectOutcome(
        amount=spell.magnitude,
        message=f"{caster.name} casts {spell.name} and heals {spell.magnitude} HP.",
    )


@effect(SpellKind.SHIELD)
def apply_shield(spell: Spell, caster: Wizard, target: Wizard) -> EffectOutcome:
    caster.add_shield(spell.magnitude)
    return EffectOutcome(
        amount=spell.magnitude,
        message=(
            f"{caster.name} casts {spell.name} and gains a shield of "
            f"{spell.magnitude} points."
        ),
    )


@effect(SpellKind.MANA_DRAIN)
def apply_mana_drain(spell: Spell, caster: Wizard, target: Wizard) -> EffectOutcome:
    """Move mana from target to caster.

    The drain is capped by what the target holds, and the caster only
    receives half of it (rounded down).
    """
    actual_drain = min(spell.magnitude, target.mana)
    target.change_mana(-actual_drain)
    caster.change_mana(actual_drain // 2)
    return EffectOutcome(
        amount=actual_drain,
        message=(
            f"{caster.name} casts {spell.name} and drains {actual_drain} mana "
            f"from {target.name} (half is restored to the caster)."
        ),
    )


@effect(SpellKind.MANA_REGEN)
def apply_mana_regen(spell: Spell, caster: Wizard, target: Wizard) -> EffectOutcome:
    caster.change_mana(spell.magnitude)
    return EffectOutcome(
        amount=spell.magnitude,
        message=f"{caster.name} casts {spell.name} and restores {spell.magnitude} mana.",
    )


# =============================================================================
# Casting
# =============================================================================


def cast_spell(spell: Spell, caster: Wizard, target: Wizard) -> CastResult:
    """Cast a spell from caster at target.

    When the caster cannot afford the spell nothing changes on either side
    and a failed result is returned.

    Args:
        spell: The spell to cast.
        caster: Wizard paying for and casting the spell.
        target: The opposing wizard.

    Returns:
        CastResult describing the attempt.

    Raises:
        CombatError: If no effect is registered for the spell's kind.
    """
    handler = get_effect(spell.kind)
    if handler is None:
        raise CombatError(
            f"No effect registered for spell kind {spell.kind!r}",
            spell_name=spell.name,
            caster=caster.name,
        )

    if not caster.has_enough_mana(spell.mana_cost):
        logger.info(
            "Cast failed: not enough mana",
            caster=caster.name,
            spell=spell.name,
            cost=spell.mana_cost,
            mana=caster.mana,
        )
        return CastResult(
            spell_name=spell.name,
            kind=spell.kind,
            caster=caster.name,
            target=target.name,
            success=False,
            message=f"{caster.name} does not have enough mana for {spell.name}!",
        )

    caster.spend_mana(spell.mana_cost)
    outcome = handler(spell, caster, target)
    affected = caster if spell.kind.targets_self else target

    logger.info(
        "Spell cast",
        caster=caster.name,
        affected=affected.name,
        spell=spell.name,
        kind=spell.kind.value,
        amount=outcome.amount,
    )

    return CastResult(
        spell_name=spell.name,
        kind=spell.kind,
        caster=caster.name,
        target=target.name,
        success=True,
        mana_spent=spell.mana_cost,
        amount=outcome.amount,
        message=outcome.message,
        affected=affected.name,
    )


__all__ = [
    "EffectFunction",
    "EffectOutcome",
    "CastResult",
    "effect",
    "get_effect",
    "registered_kinds",
    "apply_damage",
    "apply_heal",
    "apply_shield",
    "apply_mana_drain",
    "apply_mana_regen",
    "cast_spell",
]
