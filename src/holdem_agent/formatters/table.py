"""Rich table formatting for terminal output."""

from typing import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from holdem_agent.models.action import ActionType, Decision
from holdem_agent.models.card import Card
from holdem_agent.simulation.evaluator import HandRank
from holdem_agent.strategy.preflop import HandTier, PreflopRecommendation

_ACTION_STYLES = {
    ActionType.FOLD: "red",
    ActionType.CHECK: "white",
    ActionType.CALL: "yellow",
    ActionType.RAISE: "green",
    ActionType.ALL_IN: "bold magenta",
}

_TIER_STYLES = {
    HandTier.PREMIUM: "bold green",
    HandTier.STRONG: "green",
    HandTier.PLAYABLE: "yellow",
    HandTier.MARGINAL: "dark_orange",
    HandTier.TRASH: "red",
}


def format_cards(cards: Sequence[Card]) -> str:
    return " ".join(str(c) for c in cards) or "-"


class TableFormatter:
    """Format engine output as Rich tables for terminal display."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def print_hand(self, cards: Sequence[Card], rank: HandRank) -> None:
        """Print an evaluated hand."""
        table = Table(title="Hand Evaluation")
        table.add_column("Cards", style="cyan")
        table.add_column("Hand", style="green")
        table.add_column("Kickers", justify="right")
        table.add_row(format_cards(cards), rank.name, " ".join(str(k) for k in rank.kickers))
        self.console.print(table)

    def print_equity(self, hole: Sequence[Card], board: Sequence[Card],
                     equity: float, simulations: int) -> None:
        table = Table(title="Equity vs Random Hand")
        table.add_column("Hole", style="cyan")
        table.add_column("Board", style="cyan")
        table.add_column("Trials", justify="right")
        table.add_column("Equity", justify="right", style="green")
        table.add_row(format_cards(hole), format_cards(board), str(simulations), f"{equity:.1%}")
        self.console.print(table)

    def print_recommendation(self, hole: Sequence[Card], rec: PreflopRecommendation) -> None:
        tier_style = _TIER_STYLES[rec.tier]
        action_style = _ACTION_STYLES[rec.action]
        table = Table(title="Preflop Recommendation")
        table.add_column("Hole", style="cyan")
        table.add_column("Strength", justify="right")
        table.add_column("Tier")
        table.add_column("Action")
        table.add_column("Size", justify="right")
        size = f"{rec.raise_multiplier:g}x BB" if rec.raise_multiplier else "-"
        table.add_row(
            format_cards(hole),
            f"{rec.strength:.0f}",
            f"[{tier_style}]{rec.tier.value}[/{tier_style}]",
            f"[{action_style}]{rec.action.value}[/{action_style}]",
            size,
        )
        self.console.print(table)
        self.console.print(f"[dim]{rec.reasoning}[/dim]")

    def print_decision(self, decision: Decision) -> None:
        style = _ACTION_STYLES[decision.action]
        amount = "" if decision.amount is None else f" {decision.amount}"
        body = (
            f"[{style}]{decision.action.value.upper()}{amount}[/{style}]\n"
            f"Confidence: {decision.confidence:.0%}\n"
            f"[dim]{decision.reasoning}[/dim]"
        )
        self.console.print(Panel(body, title="Decision", expand=False))

