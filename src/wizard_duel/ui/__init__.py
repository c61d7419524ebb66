"""Console interface for Wizard Duel."""

from __future__ import annotations

from wizard_duel.ui.console import (
    ConsoleReporter,
    ConsoleStrategy,
    parse_choice,
    render_menu,
    render_status,
)


__all__ = [
    "ConsoleReporter",
    "ConsoleStrategy",
    "parse_choice",
    "render_menu",
    "render_status",
]
