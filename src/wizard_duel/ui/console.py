"""Console adapter for Wizard Duel.

This is the only place that reads from or writes to the terminal.

- ConsoleStrategy: the human turn strategy (status block, spell menu,
  validated number input)
- ConsoleReporter: prints the duel transcript from turn results

Both take their input and output functions as arguments, so tests can
drive them with scripted answers and capture the text.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Callable

from wizard_duel.core.exceptions import InputClosedError, TurnStrategyError
from wizard_duel.core.logging import get_logger
from wizard_duel.engine.duel import Duel, DuelResult, TurnResult, turn_banner
from wizard_duel.engine.strategy import TurnStrategy
from wizard_duel.models import Spell, Wizard


logger = get_logger(__name__)

InputFunc = Callable[[str], str]
OutputFunc = Callable[[str], None]

TITLE = "=== Wizard Duel ==="
GAME_OVER = "=== Duel Over ==="


# =============================================================================
# Rendering
# =============================================================================


def render_status(wizard: Wizard, opponent: Wizard) -> str:
    """Render the status block shown before the spell menu."""
    return "\n".join(
        [
            "",
            "===== Duel =====",
            wizard.status_line(),
            opponent.status_line(),
            "",
        ]
    )


def render_menu(wizard: Wizard, spells: Sequence[Spell]) -> str:
    """Render the numbered spell menu.

    Spells the wizard cannot currently pay for are marked
    "[too expensive]" but stay selectable.
    """
    lines = ["Choose your spell:"]
    for number, spell in enumerate(spells, start=1):
        line = f"{number}) {spell}"
        if not wizard.has_enough_mana(spell.mana_cost):
            line += " [too expensive]"
        lines.append(line)
    return "\n".join(lines)


def parse_choice(raw: str, minimum: int, maximum: int) -> tuple[int | None, str]:
    """Validate one line of menu input.

    Args:
        raw: The line as typed.
        minimum: Lowest accepted number.
        maximum: Highest accepted number.

    Returns:
        (value, "") when valid, otherwise (None, error message).
    """
    try:
        value = int(raw.strip())
    except ValueError:
        return None, "Invalid input. Try again."
    if value < minimum or value > maximum:
        return None, f"Number must be between {minimum} and {maximum}."
    return value, ""


# =============================================================================
# Interactive Strategy
# =============================================================================


class ConsoleStrategy(TurnStrategy):
    """Let a human pick spells from a numbered menu.

    Invalid answers are rejected and the prompt repeats until a number in
    range is given.
    """

    name = "interactive"

    def __init__(
        self,
        *,
        input_func: InputFunc = input,
        output: OutputFunc = print,
    ) -> None:
        """Initialize the console strategy.

        Args:
            input_func: Prompting line reader, input() by default.
            output: Line writer, print() by default.
        """
        self._input = input_func
        self._output = output

    def choose_spell_index(
        self,
        wizard: Wizard,
        opponent: Wizard,
        spells: Sequence[Spell],
    ) -> int:
        if not spells:
            raise TurnStrategyError(
                "Cannot offer a menu for an empty spellbook",
                details={"wizard": wizard.name},
            )

        self._output(render_status(wizard, opponent))
        self._output(render_menu(wizard, spells))
        return self.read_choice(1, len(spells)) - 1

    def read_choice(self, minimum: int, maximum: int) -> int:
        """Prompt until a number in [minimum, maximum] is entered.

        Raises:
            InputClosedError: If the input stream ends.
        """
        prompt = f"Enter a number ({minimum}-{maximum}): "
        while True:
            try:
                raw = self._input(prompt)
            except EOFError as exc:
                raise InputClosedError(prompt=prompt) from exc

            value, error = parse_choice(raw, minimum, maximum)
            if value is not None:
                return value

            logger.debug("Rejected menu input", raw=raw)
            self._output(error)


# =============================================================================
# Transcript
# =============================================================================


class ConsoleReporter:
    """Print the duel transcript.

    Register on_turn_start as a duel turn start callback and on_turn as a
    turn callback. The banner is printed before the acting strategy shows
    its menu; the rest of the turn follows once it is resolved.
    """

    def __init__(self, output: OutputFunc = print) -> None:
        self._output = output

    def attach(self, duel: Duel) -> None:
        """Register both transcript callbacks on a duel."""
        duel.add_turn_start_callback(self.on_turn_start)
        duel.add_turn_callback(self.on_turn)

    def show_title(self) -> None:
        self._output(TITLE)

    def on_turn_start(self, caster: Wizard, target: Wizard) -> None:
        self._output("")
        self._output(turn_banner(caster.name))

    def on_turn(self, result: TurnResult) -> None:
        self._output(result.body)

    def show_result(self, result: DuelResult) -> None:
        self._output("")
        self._output(GAME_OVER)
        self._output(result.message)


__all__ = [
    "InputFunc",
    "OutputFunc",
    "TITLE",
    "GAME_OVER",
    "render_status",
    "render_menu",
    "parse_choice",
    "ConsoleStrategy",
    "ConsoleReporter",
]
