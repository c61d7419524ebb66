"""Duel controller for turn-based spell combat.

The Duel drives the loop between two wizards:

- asks the acting wizard's strategy for a spell index
- casts the chosen spell against the opponent
- regenerates the caster's mana at the end of the turn
- checks both wizards and decides whether the duel is over

The player always acts first in a round. If the player's turn leaves the
enemy dead, the enemy does not act. Turn starts and turn results are handed
to registered callbacks as they happen, so the console can print them while
the engine itself stays free of I/O.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Callable

from wizard_duel.core.config import DuelSettings
from wizard_duel.core.constants import MANA_REGEN_PER_TURN
from wizard_duel.core.exceptions import InvalidGameStateError
from wizard_duel.core.logging import bind_context, get_logger
from wizard_duel.engine.catalog import create_default_spellbook
from wizard_duel.engine.effects import CastResult, cast_spell
from wizard_duel.engine.strategy import TurnStrategy
from wizard_duel.models import Wizard, create_wizard


logger = get_logger(__name__)


# =============================================================================
# Duel Outcome
# =============================================================================


class DuelOutcome(StrEnum):
    """State of the duel."""

    IN_PROGRESS = "in_progress"
    """Both wizards are standing."""

    PLAYER_WON = "player_won"
    """The enemy has fallen, the player is standing."""

    ENEMY_WON = "enemy_won"
    """The player has fallen, the enemy is standing."""

    DRAW = "draw"
    """Both wizards have fallen."""

    STALEMATE = "stalemate"
    """The round cap was reached with both wizards standing."""

    @property
    def is_terminal(self) -> bool:
        return self != DuelOutcome.IN_PROGRESS


def turn_banner(name: str) -> str:
    """Banner line opening a wizard's turn."""
    return f"--- {name}'s turn ---"


def resolve_outcome(player: Wizard, enemy: Wizard) -> DuelOutcome:
    """Decide the duel state from the two wizards' health.

    Args:
        player: The wizard acting first.
        enemy: The wizard acting second.

    Returns:
        IN_PROGRESS while both stand, otherwise the matching terminal state.
    """
    if player.is_alive and enemy.is_alive:
        return DuelOutcome.IN_PROGRESS
    if player.is_alive:
        return DuelOutcome.PLAYER_WON
    if enemy.is_alive:
        return DuelOutcome.ENEMY_WON
    return DuelOutcome.DRAW


# =============================================================================
# Results
# =============================================================================


@dataclass
class TurnResult:
    """Result of one wizard's turn.

    Attributes:
        round_number: Round the turn belongs to.
        caster: Name of the acting wizard.
        target: Name of the opposing wizard.
        spell_index: Index returned by the strategy, None for an empty spellbook.
        cast: Cast result, None when the turn was skipped.
        mana_regenerated: Mana actually regained at the end of the turn.
        skipped: True when no spell was attempted.
        messages: Transcript lines for this turn, in order.
    """

    round_number: int
    caster: str
    target: str
    spell_index: int | None = None
    cast: CastResult | None = None
    mana_regenerated: int = 0
    skipped: bool = False
    messages: list[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        """All transcript lines joined with newlines."""
        return "\n".join(self.messages)

    @property
    def body(self) -> str:
        """Transcript lines after the turn banner."""
        return "\n".join(self.messages[1:])


@dataclass
class DuelResult:
    """Final result of a duel.

    Attributes:
        outcome: Terminal outcome.
        rounds: Number of rounds started.
        turns: Every turn played, in order.
        message: Result line for the transcript.
    """

    outcome: DuelOutcome
    rounds: int
    turns: list[TurnResult] = field(default_factory=list)
    message: str = ""


# =============================================================================
# Duel Controller
# =============================================================================


class Duel:
    """Turn loop between two wizards.

    Attributes:
        player: Wizard acting first in each round.
        enemy: Wizard acting second.
        outcome: Current duel state.
        current_round: Number of rounds started so far.
    """

    def __init__(
        self,
        player: Wizard,
        enemy: Wizard,
        player_strategy: TurnStrategy,
        enemy_strategy: TurnStrategy,
        *,
        max_rounds: int | None = None,
    ) -> None:
        """Initialize the duel.

        Args:
            player: Wizard acting first.
            enemy: Wizard acting second.
            player_strategy: Strategy choosing the player's spells.
            enemy_strategy: Strategy choosing the enemy's spells.
            max_rounds: Optional round cap; reaching it ends the duel as a
                stalemate.
        """
        self._player = player
        self._enemy = enemy
        self._player_strategy = player_strategy
        self._enemy_strategy = enemy_strategy
        self._max_rounds = max_rounds
        self._round = 0
        self._outcome = resolve_outcome(player, enemy)
        self._turns: list[TurnResult] = []
        self._turn_callbacks: list[Callable[[TurnResult], None]] = []
        self._turn_start_callbacks: list[Callable[[Wizard, Wizard], None]] = []

        logger.info(
            "Duel initialized",
            player=player.name,
            enemy=enemy.name,
            player_strategy=player_strategy.name,
            enemy_strategy=enemy_strategy.name,
            max_rounds=max_rounds,
        )

    @property
    def player(self) -> Wizard:
        return self._player

    @property
    def enemy(self) -> Wizard:
        return self._enemy

    @property
    def outcome(self) -> DuelOutcome:
        return self._outcome

    @property
    def current_round(self) -> int:
        return self._round

    @property
    def is_over(self) -> bool:
        return self._outcome.is_terminal

    @property
    def turns(self) -> list[TurnResult]:
        """Get the turns played so far."""
        return self._turns.copy()

    @property
    def result_message(self) -> str:
        """Result line for the current outcome.

        Returns:
            Winner announcement, draw or stalemate line, or an empty string
            while the duel is in progress.
        """
        if self._outcome == DuelOutcome.PLAYER_WON:
            return f"{self._player.name} wins!"
        if self._outcome == DuelOutcome.ENEMY_WON:
            return f"{self._enemy.name} wins!"
        if self._outcome == DuelOutcome.DRAW:
            return "Both wizards have fallen. It's a draw."
        if self._outcome == DuelOutcome.STALEMATE:
            return f"The duel was called off after {self._round} rounds."
        return ""

    def add_turn_callback(self, callback: Callable[[TurnResult], None]) -> None:
        """Add a callback to be invoked after each turn.

        Args:
            callback: Function to call with the TurnResult.
        """
        self._turn_callbacks.append(callback)

    def add_turn_start_callback(self, callback: Callable[[Wizard, Wizard], None]) -> None:
        """Add a callback invoked when a turn begins, before a spell is chosen.

        Args:
            callback: Function to call with the caster and the target.
        """
        self._turn_start_callbacks.append(callback)

    def _invoke_start_callbacks(self, caster: Wizard, target: Wizard) -> None:
        for callback in self._turn_start_callbacks:
            try:
                callback(caster, target)
            except Exception:
                logger.exception("Turn start callback failed", caster=caster.name)

    def _invoke_callbacks(self, result: TurnResult) -> None:
        for callback in self._turn_callbacks:
            try:
                callback(result)
            except Exception:
                logger.exception("Turn callback failed", caster=result.caster)

    def _require_in_progress(self) -> None:
        if self.is_over:
            raise InvalidGameStateError(
                "The duel is already over",
                current_state=self._outcome.value,
                expected_states=[DuelOutcome.IN_PROGRESS.value],
            )

    def play_turn(self, caster: Wizard, target: Wizard, strategy: TurnStrategy) -> TurnResult:
        """Play a single turn for caster.

        An empty spellbook or an out-of-range index skips the turn without
        mana regeneration. Otherwise the spell is cast (successfully or not)
        and the caster regenerates MANA_REGEN_PER_TURN mana.

        Args:
            caster: Wizard whose turn it is.
            target: The opposing wizard.
            strategy: Strategy choosing the caster's spell.

        Returns:
            TurnResult describing the turn.
        """
        result = TurnResult(
            round_number=self._round,
            caster=caster.name,
            target=target.name,
            messages=[turn_banner(caster.name)],
        )
        self._invoke_start_callbacks(caster, target)

        spells = caster.spellbook
        if not spells:
            logger.warning("Turn skipped: empty spellbook", caster=caster.name)
            result.skipped = True
            result.messages.append(f"{caster.name} has no spells!")
            return self._record(result)

        index = strategy.choose_spell_index(caster, target, spells)
        result.spell_index = index

        if index < 0 or index >= len(spells):
            logger.warning(
                "Turn skipped: invalid spell index",
                caster=caster.name,
                index=index,
                spellbook_size=len(spells),
            )
            result.skipped = True
            result.messages.append("Invalid spell index. Turn skipped.")
            return self._record(result)

        cast = cast_spell(spells[index], caster, target)
        result.cast = cast
        result.messages.append(cast.message)

        mana_before = caster.mana
        caster.regenerate_mana(MANA_REGEN_PER_TURN)
        result.mana_regenerated = caster.mana - mana_before
        result.messages.append(f"{caster.name} regenerates {MANA_REGEN_PER_TURN} mana.")

        return self._record(result)

    def _record(self, result: TurnResult) -> TurnResult:
        self._turns.append(result)
        self._invoke_callbacks(result)
        return result

    def play_round(self) -> list[TurnResult]:
        """Play one round: the player's turn, then the enemy's if still alive.

        Returns:
            The turns played in this round.

        Raises:
            InvalidGameStateError: If the duel is already over.
        """
        self._require_in_progress()

        self._round += 1
        logger.debug("Round started", round=self._round)

        played = [self.play_turn(self._player, self._enemy, self._player_strategy)]
        self._outcome = resolve_outcome(self._player, self._enemy)

        if self._enemy.is_alive:
            played.append(self.play_turn(self._enemy, self._player, self._enemy_strategy))
            self._outcome = resolve_outcome(self._player, self._enemy)

        if self.is_over:
            logger.info("Duel ended", outcome=self._outcome.value, round=self._round)
        return played

    def run(self) -> DuelResult:
        """Play rounds until the duel ends.

        Returns:
            DuelResult with the outcome and every turn played.

        Raises:
            InvalidGameStateError: If the duel is already over.
        """
        self._require_in_progress()
        bind_context(duel=f"{self._player.name} vs {self._enemy.name}")

        while not self.is_over:
            if self._max_rounds is not None and self._round >= self._max_rounds:
                self._outcome = DuelOutcome.STALEMATE
                logger.warning("Round cap reached", rounds=self._round)
                break
            self.play_round()

        return DuelResult(
            outcome=self._outcome,
            rounds=self._round,
            turns=self.turns,
            message=self.result_message,
        )


def create_duel(
    settings: DuelSettings,
    player_strategy: TurnStrategy,
    enemy_strategy: TurnStrategy,
) -> Duel:
    """Create a duel between two fresh wizards with the default spellbook.

    Each wizard gets its own spellbook instance in the same order, so menu
    indices mean the same spell on both sides.

    Args:
        settings: Duel settings (names and round cap).
        player_strategy: Strategy for the wizard acting first.
        enemy_strategy: Strategy for the wizard acting second.

    Returns:
        A Duel ready to run.
    """
    player = create_wizard(settings.player_name, create_default_spellbook())
    enemy = create_wizard(settings.enemy_name, create_default_spellbook())
    return Duel(
        player,
        enemy,
        player_strategy,
        enemy_strategy,
        max_rounds=settings.max_rounds,
    )


__all__ = [
    "DuelOutcome",
    "turn_banner",
    "resolve_outcome",
    "TurnResult",
    "DuelResult",
    "Duel",
    "create_duel",
]
