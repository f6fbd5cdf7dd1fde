"""Hold'em agent CLI: Typer-based command line interface."""

import random
from typing import List, Optional

import typer
from rich.console import Console

from holdem_agent import config
from holdem_agent.logging_config import configure_logging
from holdem_agent.models.card import Card, parse_cards

app = typer.Typer(
    name="holdem-agent",
    help="Heads-up Texas Hold'em decision engine",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    log_level: str = typer.Option(config.LOG_LEVEL, help="Logging level"),
):
    configure_logging(log_level)


def _parse(cards: List[str]) -> List[Card]:
    try:
        return parse_cards(cards)
    except ValueError as e:
        console.print(f"[red]Invalid card:[/red] {e}")
        raise typer.Exit(1)


def _rng(seed: Optional[int]) -> random.Random:
    return random.Random(seed) if seed is not None else random.Random()


@app.command()
def evaluate(
    cards: List[str] = typer.Argument(..., help="5-7 cards, e.g. Ah Kh Qh Jh Th"),
):
    """Evaluate the best five-card hand."""
    from holdem_agent.formatters.table import TableFormatter
    from holdem_agent.simulation.evaluator import HandEvaluator

    parsed = _parse(cards)
    try:
        rank = HandEvaluator.evaluate(parsed)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    TableFormatter(console).print_hand(parsed, rank)


@app.command()
def equity(
    hole: List[str] = typer.Argument(..., help="Two hole cards, e.g. As Ad"),
    board: List[str] = typer.Option([], "--board", "-b", help="Community card (repeatable)"),
    simulations: int = typer.Option(config.DISPLAY_SIMULATIONS, help="Monte Carlo trials"),
    seed: Optional[int] = typer.Option(None, help="Random seed"),
):
    """Estimate equity against a random hand."""
    from holdem_agent.formatters.table import TableFormatter
    from holdem_agent.simulation.equity import EquityCalculator

    hole_cards, board_cards = _parse(hole), _parse(board)
    calc = EquityCalculator(rng=_rng(seed))
    try:
        value = calc.calculate_equity(hole_cards, board_cards, simulations)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    TableFormatter(console).print_equity(hole_cards, board_cards, value, simulations)


@app.command()
def preflop(
    hole: List[str] = typer.Argument(..., help="Two hole cards"),
    position: str = typer.Option("BTN", help="Seat label (BTN, SB, BB, UTG, ...)"),
    facing_raise: bool = typer.Option(False, help="Opponent has raised"),
    to_call: int = typer.Option(0, min=0, help="Amount to call"),
    pot: int = typer.Option(30, min=0, help="Pot size"),
    seed: Optional[int] = typer.Option(None, help="Random seed"),
):
    """Show the preflop recommendation for two hole cards."""
    from holdem_agent.formatters.table import TableFormatter
    from holdem_agent.models.position import Position
    from holdem_agent.strategy.preflop import PreflopStrategy

    hole_cards = _parse(hole)
    try:
        seat = Position.from_seat_label(position)
        rec = PreflopStrategy(_rng(seed)).get_recommendation(
            hole_cards, seat, facing_raise, to_call, pot
        )
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    TableFormatter(console).print_recommendation(hole_cards, rec)


@app.command()
def decide(
    hole: List[str] = typer.Argument(..., help="Two hole cards"),
    board: List[str] = typer.Option([], "--board", "-b", help="Community card (repeatable)"),
    position: str = typer.Option("BTN", help="Seat label (BTN, SB, BB, UTG, ...)"),
    pot: int = typer.Option(..., min=0, help="Pot size"),
    current_bet: int = typer.Option(0, min=0, help="Current bet to match"),
    to_call: int = typer.Option(0, min=0, help="Amount to call"),
    chips: int = typer.Option(..., min=0, help="Our remaining stack"),
    opponent_chips: int = typer.Option(0, min=0, help="Opponent's remaining stack"),
    seed: Optional[int] = typer.Option(None, help="Random seed"),
):
    """Run the strategy engine on one spot."""
    from holdem_agent.formatters.table import TableFormatter
    from holdem_agent.models.action import GamePhase
    from holdem_agent.models.context import build_context
    from holdem_agent.models.position import Position
    from holdem_agent.strategy.engine import StrategyEngine

    hole_cards, board_cards = _parse(hole), _parse(board)
    phases = {0: GamePhase.PREFLOP, 3: GamePhase.FLOP, 4: GamePhase.TURN, 5: GamePhase.RIVER}
    if len(board_cards) not in phases:
        console.print(f"[red]Board must have 0, 3, 4 or 5 cards, got {len(board_cards)}[/red]")
        raise typer.Exit(1)

    try:
        context = build_context(
            phase=phases[len(board_cards)],
            hole_cards=hole_cards,
            community_cards=board_cards,
            position=Position.from_seat_label(position),
            pot_size=pot,
            current_bet=current_bet,
            my_chips=chips,
            opponent_chips=opponent_chips,
            to_call=to_call,
        )
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    decision = StrategyEngine(rng=_rng(seed)).decide(context)
    TableFormatter(console).print_decision(decision)


@app.command()
def kelly(
    balance: int = typer.Option(..., min=0, help="Available balance"),
    win_prob: float = typer.Option(..., min=0.0, max=1.0, help="Estimated win probability"),
    payout: float = typer.Option(1.0, help="Payout ratio"),
    kelly_fraction: Optional[float] = typer.Option(None, help="Fractional Kelly multiplier"),
    max_risk: Optional[float] = typer.Option(None, help="Max risk per match, percent"),
    opponent_unknown: bool = typer.Option(False, help="No history on the opponent"),
    joining: bool = typer.Option(False, help="Joining an existing game"),
):
    """Suggest a match stake with fractional Kelly sizing."""
    from holdem_agent.bankroll.manager import BankrollManager

    try:
        manager = BankrollManager(balance, kelly_fraction=kelly_fraction, max_risk_percent=max_risk)
        wager = manager.calculate_optimal_wager(win_prob, payout)
        verdict = manager.should_play_match(wager, win_prob, opponent_unknown, joining)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    console.print(f"Suggested wager: [green]{wager}[/green] of {balance}")
    style = "green" if verdict else "red"
    label = "play" if verdict else "skip"
    console.print(f"Verdict: [{style}]{label}[/{style}] ({verdict.reason})")


if __name__ == "__main__":
    app()
