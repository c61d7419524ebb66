"""Command-line entry point for Wizard Duel.

Runs a single duel immediately: no arguments, transcript on stdout,
choices on stdin. Who plays which side is taken from settings.
"""

from __future__ import annotations

import sys

from wizard_duel.core.config import Settings, StrategyName, get_settings
from wizard_duel.core.exceptions import ConfigurationError, WizardDuelError
from wizard_duel.core.logging import clear_context, configure_logging, get_logger
from wizard_duel.engine.duel import DuelResult, create_duel
from wizard_duel.engine.strategy import RuleBasedStrategy, TurnStrategy
from wizard_duel.ui.console import ConsoleReporter, ConsoleStrategy, InputFunc, OutputFunc


logger = get_logger(__name__)


def build_strategy(
    name: StrategyName,
    *,
    input_func: InputFunc = input,
    output: OutputFunc = print,
) -> TurnStrategy:
    """Create the turn strategy configured under name.

    Args:
        name: 'interactive' or 'rule_based'.
        input_func: Line reader for the interactive strategy.
        output: Line writer for the interactive strategy.

    Returns:
        A new TurnStrategy.

    Raises:
        ConfigurationError: If name is not a known strategy.
    """
    if name == "interactive":
        return ConsoleStrategy(input_func=input_func, output=output)
    if name == "rule_based":
        return RuleBasedStrategy()
    raise ConfigurationError(f"Unknown turn strategy: {name!r}", config_key="strategy")


def run_duel(
    settings: Settings,
    *,
    input_func: InputFunc = input,
    output: OutputFunc = print,
) -> DuelResult:
    """Set up a duel from settings and play it to the end on the console.

    Args:
        settings: Application settings.
        input_func: Line reader for interactive turns.
        output: Line writer for the transcript.

    Returns:
        The final DuelResult.
    """
    duel_settings = settings.duel
    duel = create_duel(
        duel_settings,
        build_strategy(duel_settings.player_strategy, input_func=input_func, output=output),
        build_strategy(duel_settings.enemy_strategy, input_func=input_func, output=output),
    )

    reporter = ConsoleReporter(output)
    reporter.attach(duel)

    reporter.show_title()
    result = duel.run()
    reporter.show_result(result)
    return result


def main() -> int:
    """Run the program.

    Returns:
        Process exit code: 0 after a completed duel, 1 on an application
        error, 130 when interrupted.
    """
    try:
        settings = get_settings()
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1

    configure_logging(level=settings.effective_log_level, json_format=settings.log_json)

    try:
        result = run_duel(settings)
    except KeyboardInterrupt:
        logger.info("Duel interrupted")
        return 130
    except WizardDuelError as exc:
        logger.error("Duel aborted", error=exc.message, details=exc.details)
        return 1
    finally:
        clear_context()

    logger.info("Duel finished", outcome=result.outcome.value, rounds=result.rounds)
    return 0


__all__ = [
    "build_strategy",
    "run_duel",
    "main",
]
