"""Fixed rule constants for Wizard Duel.

These values define the game and are deliberately not exposed through
settings.
"""

from __future__ import annotations

# =============================================================================
# Wizard Limits
# =============================================================================

MAX_HEALTH = 100
"""Starting and maximum health of a wizard."""

MAX_MANA = 50
"""Starting and maximum mana of a wizard."""

MANA_REGEN_PER_TURN = 4
"""Mana regained at the end of every completed turn."""

# =============================================================================
# Spell Parameters
# =============================================================================

FIREBALL_DAMAGE = 25
FIREBALL_COST = 10

ICE_SPIKE_DAMAGE = 15
ICE_SPIKE_COST = 6

HEAL_AMOUNT = 20
HEAL_COST = 8

SHIELD_AMOUNT = 18
SHIELD_COST = 7

MANA_DRAIN_AMOUNT = 12
MANA_DRAIN_COST = 5

MANA_SURGE_AMOUNT = 15
MANA_SURGE_COST = 1

# =============================================================================
# Spell Names
# =============================================================================

FIREBALL = "Fireball"
ICE_SPIKE = "Ice Spike"
HEALING_LIGHT = "Healing Light"
MAGIC_SHIELD = "Magic Shield"
MANA_DRAIN = "Mana Drain"
MANA_SURGE = "Mana Surge"

# =============================================================================
# Rule-Based Strategy Thresholds
# =============================================================================

AI_HEAL_THRESHOLD = 40
"""Heal when health is at or below this value."""

AI_DRAIN_THRESHOLD = 15
"""Drain when the opponent holds at least this much mana."""


__all__ = [
    # Wizard limits
    "MAX_HEALTH",
    "MAX_MANA",
    "MANA_REGEN_PER_TURN",
    # Spell parameters
    "FIREBALL_DAMAGE",
    "FIREBALL_COST",
    "ICE_SPIKE_DAMAGE",
    "ICE_SPIKE_COST",
    "HEAL_AMOUNT",
    "HEAL_COST",
    "SHIELD_AMOUNT",
    "SHIELD_COST",
    "MANA_DRAIN_AMOUNT",
    "MANA_DRAIN_COST",
    "MANA_SURGE_AMOUNT",
    "MANA_SURGE_COST",
    # Spell names
    "FIREBALL",
    "ICE_SPIKE",
    "HEALING_LIGHT",
    "MAGIC_SHIELD",
    "MANA_DRAIN",
    "MANA_SURGE",
    # Strategy thresholds
    "AI_HEAL_THRESHOLD",
    "AI_DRAIN_THRESHOLD",
]
