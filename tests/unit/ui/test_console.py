"""Tests for the console adapter."""

from __future__ import annotations

from typing import Callable

import pytest

from wizard_duel.core.exceptions import InputClosedError, TurnStrategyError
from wizard_duel.engine.duel import DuelOutcome, DuelResult, TurnResult
from wizard_duel.models import Wizard
from wizard_duel.ui.console import (
    GAME_OVER,
    TITLE,
    ConsoleReporter,
    ConsoleStrategy,
    parse_choice,
    render_menu,
    render_status,
)


def _answers(*lines: str) -> Callable[[str], str]:
    iterator = iter(lines)
    return lambda prompt: next(iterator)


class TestRendering:
    """Tests for the status block and menu."""

    def test_status_block(self, make_wizard: Callable[..., Wizard]) -> None:
        """Test the status block lists the acting wizard first."""
        wizard = make_wizard("Merlin", health=80, mana=12, shield=3)
        opponent = make_wizard("Morgana")
        assert render_status(wizard, opponent).split("\n") == [
            "",
            "===== Duel =====",
            "Merlin | HP: 80 | Mana: 12 | Shield: 3",
            "Morgana | HP: 100 | Mana: 50 | Shield: 0",
            "",
        ]

    def test_menu_marks_expensive_spells(self, make_wizard: Callable[..., Wizard]) -> None:
        """Test unaffordable spells are tagged but still listed."""
        wizard = make_wizard("Merlin", mana=8)
        assert render_menu(wizard, wizard.spellbook).split("\n") == [
            "Choose your spell:",
            "1) Fireball (cost: 10 mana) [too expensive]",
            "2) Ice Spike (cost: 6 mana)",
            "3) Healing Light (cost: 8 mana)",
            "4) Magic Shield (cost: 7 mana)",
            "5) Mana Drain (cost: 5 mana)",
            "6) Mana Surge (cost: 1 mana)",
        ]


class TestParseChoice:
    """Tests for parse_choice."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("1", (1, "")),
            (" 6 \n", (6, "")),
            ("abc", (None, "Invalid input. Try again.")),
            ("", (None, "Invalid input. Try again.")),
            ("2.5", (None, "Invalid input. Try again.")),
            ("0", (None, "Number must be between 1 and 6.")),
            ("7", (None, "Number must be between 1 and 6.")),
            ("-3", (None, "Number must be between 1 and 6.")),
        ],
    )
    def test_parse(self, raw: str, expected: tuple[int | None, str]) -> None:
        """Test valid numbers, garbage and out-of-range numbers."""
        assert parse_choice(raw, 1, 6) == expected


class TestConsoleStrategy:
    """Tests for the interactive strategy."""

    def test_returns_zero_based_index(self, player: Wizard, enemy: Wizard) -> None:
        """Test menu number 4 maps to index 3."""
        output: list[str] = []
        strategy = ConsoleStrategy(input_func=_answers("4"), output=output.append)

        assert strategy.choose_spell_index(player, enemy, player.spellbook) == 3
        assert "Choose your spell:" in output[1]

    def test_reprompts_until_valid(self, player: Wizard, enemy: Wizard) -> None:
        """Test invalid answers print an error and ask again."""
        output: list[str] = []
        prompts: list[str] = []
        answers = iter(["fire", "9", "2"])

        def read(prompt: str) -> str:
            prompts.append(prompt)
            return next(answers)

        strategy = ConsoleStrategy(input_func=read, output=output.append)

        assert strategy.choose_spell_index(player, enemy, player.spellbook) == 1
        assert prompts == ["Enter a number (1-6): "] * 3
        assert output[-2:] == [
            "Invalid input. Try again.",
            "Number must be between 1 and 6.",
        ]

    def test_expensive_spell_can_be_chosen(
        self,
        make_wizard: Callable[..., Wizard],
        enemy: Wizard,
    ) -> None:
        """Test the menu does not block unaffordable spells."""
        wizard = make_wizard(mana=0)
        strategy = ConsoleStrategy(input_func=_answers("1"), output=lambda line: None)
        assert strategy.choose_spell_index(wizard, enemy, wizard.spellbook) == 0

    def test_closed_input(self, player: Wizard, enemy: Wizard) -> None:
        """Test end of input becomes InputClosedError."""

        def closed(prompt: str) -> str:
            raise EOFError

        strategy = ConsoleStrategy(input_func=closed, output=lambda line: None)

        with pytest.raises(InputClosedError) as exc_info:
            strategy.choose_spell_index(player, enemy, player.spellbook)

        assert exc_info.value.details["prompt"] == "Enter a number (1-6): "

    def test_empty_spellbook_rejected(self, make_wizard: Callable[..., Wizard], enemy: Wizard) -> None:
        """Test there is no menu for an empty spellbook."""
        wizard = make_wizard(with_spells=False)
        strategy = ConsoleStrategy(input_func=_answers("1"), output=lambda line: None)
        with pytest.raises(TurnStrategyError):
            strategy.choose_spell_index(wizard, enemy, wizard.spellbook)


class TestConsoleReporter:
    """Tests for the transcript reporter."""

    def test_transcript_lines(self, player: Wizard, enemy: Wizard) -> None:
        """Test title, banner, turn body and result output."""
        output: list[str] = []
        reporter = ConsoleReporter(output.append)
        turn = TurnResult(
            round_number=1,
            caster="Player",
            target="Enemy",
            skipped=True,
            messages=["--- Player's turn ---", "Invalid spell index. Turn skipped."],
        )

        reporter.show_title()
        reporter.on_turn_start(player, enemy)
        reporter.on_turn(turn)
        reporter.show_result(
            DuelResult(outcome=DuelOutcome.PLAYER_WON, rounds=1, message="Player wins!")
        )

        assert output == [
            TITLE,
            "",
            "--- Player's turn ---",
            "Invalid spell index. Turn skipped.",
            "",
            GAME_OVER,
            "Player wins!",
        ]
