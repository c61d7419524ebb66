"""Tests for the command-line entry point."""

from __future__ import annotations

import io

import pytest

from wizard_duel import main as main_module
from wizard_duel.core.config import Settings
from wizard_duel.core.exceptions import ConfigurationError, WizardDuelError
from wizard_duel.engine.duel import DuelOutcome
from wizard_duel.engine.strategy import RuleBasedStrategy
from wizard_duel.main import build_strategy, main, run_duel
from wizard_duel.ui.console import GAME_OVER, TITLE, ConsoleStrategy


@pytest.fixture
def quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep main() from reconfiguring logging against captured streams."""
    monkeypatch.setattr(main_module, "configure_logging", lambda **kwargs: None)


class TestBuildStrategy:
    """Tests for build_strategy."""

    def test_known_names(self) -> None:
        """Test each configured name maps to its strategy."""
        assert isinstance(build_strategy("interactive"), ConsoleStrategy)
        assert isinstance(build_strategy("rule_based"), RuleBasedStrategy)

    def test_unknown_name(self) -> None:
        """Test an unknown name is a configuration error."""
        with pytest.raises(ConfigurationError):
            build_strategy("random")  # type: ignore[arg-type]


class TestRunDuel:
    """Tests for run_duel."""

    def test_interactive_player(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a scripted human plays a full duel against the AI."""
        monkeypatch.setenv("WIZARD_DUEL_DUEL_MAX_ROUNDS", "200")
        output: list[str] = []

        result = run_duel(Settings(), input_func=lambda prompt: "1", output=output.append)

        assert result.outcome.is_terminal
        assert output[0] == TITLE
        assert output[-2] == GAME_OVER
        assert output[-1] == result.message
        assert any("Choose your spell:" in line for line in output)
        assert any(line.startswith("--- Enemy's turn ---") for line in output)

    def test_banner_precedes_menu(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the turn banner is printed before the human is asked to choose."""
        monkeypatch.setenv("WIZARD_DUEL_DUEL_MAX_ROUNDS", "1")
        output: list[str] = []

        run_duel(Settings(), input_func=lambda prompt: "1", output=output.append)

        banner_index = output.index("--- Player's turn ---")
        menu_index = next(i for i, line in enumerate(output) if "Choose your spell:" in line)
        cast_index = output.index(
            "Player casts Fireball and deals 25 damage.\nPlayer regenerates 4 mana."
        )
        assert banner_index < menu_index < cast_index
        assert output.index("--- Enemy's turn ---") > cast_index

    def test_names_come_from_settings(self, mock_env_vars: dict[str, str]) -> None:
        """Test configured names show up in the transcript."""
        output: list[str] = []

        result = run_duel(
            Settings(),
            input_func=lambda prompt: "1",
            output=output.append,
        )

        assert result.turns[0].caster == "Merlin"
        assert result.turns[1].caster == "Morgana"
        assert "--- Merlin's turn ---" in output[2]


class TestMain:
    """Tests for main()."""

    def test_completed_duel(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        quiet_logging: None,
    ) -> None:
        """Test an AI-only duel exits with 0 and prints the transcript."""
        monkeypatch.setenv("WIZARD_DUEL_DUEL_PLAYER_STRATEGY", "rule_based")
        monkeypatch.setenv("WIZARD_DUEL_DUEL_MAX_ROUNDS", "50")

        assert main() == 0

        out = capsys.readouterr().out
        assert out.startswith(TITLE)
        assert GAME_OVER in out

    def test_configuration_error(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        quiet_logging: None,
    ) -> None:
        """Test invalid settings exit with 1 before the duel starts."""
        monkeypatch.setenv("WIZARD_DUEL_DUEL_PLAYER_NAME", "Twin")
        monkeypatch.setenv("WIZARD_DUEL_DUEL_ENEMY_NAME", "Twin")

        assert main() == 1

        captured = capsys.readouterr()
        assert "Configuration error" in captured.err
        assert TITLE not in captured.out

    def test_invalid_log_level(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        quiet_logging: None,
    ) -> None:
        """Test a validation failure is reported as a configuration error."""
        monkeypatch.setenv("WIZARD_DUEL_LOG_LEVEL", "LOUD")

        assert main() == 1
        assert "Configuration error" in capsys.readouterr().err

    def test_closed_stdin(
        self,
        monkeypatch: pytest.MonkeyPatch,
        quiet_logging: None,
    ) -> None:
        """Test running out of input ends the program with 1."""
        monkeypatch.setattr("sys.stdin", io.StringIO(""))

        assert main() == 1

    def test_error_details_with_reserved_keys(
        self,
        monkeypatch: pytest.MonkeyPatch,
        quiet_logging: None,
    ) -> None:
        """Test error details named like log fields do not break reporting."""

        def failing(settings: Settings, **kwargs: object) -> None:
            raise WizardDuelError("Broken duel", details={"error": "x", "event": "y"})

        monkeypatch.setattr(main_module, "run_duel", failing)

        assert main() == 1

    def test_interrupted(
        self,
        monkeypatch: pytest.MonkeyPatch,
        quiet_logging: None,
    ) -> None:
        """Test Ctrl+C exits with 130."""

        def interrupted(settings: Settings, **kwargs: object) -> None:
            raise KeyboardInterrupt

        monkeypatch.setattr(main_module, "run_duel", interrupted)

        assert main() == 130


def test_outcome_values_are_stable() -> None:
    """Test the outcome names used in log lines."""
    assert [o.value for o in DuelOutcome] == [
        "in_progress",
        "player_won",
        "enemy_won",
        "draw",
        "stalemate",
    ]
