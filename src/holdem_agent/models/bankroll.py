"""Bankroll and session statistics models."""

from dataclasses import dataclass, field
import time


@dataclass
class BankrollState:
    """Wallet balances in integer monetary units."""
    total_balance: int
    available_balance: int
    in_play: int = 0
    session_profit: int = 0
    all_time_profit: int = 0

    @property
    def is_consistent(self) -> bool:
        return self.total_balance == self.available_balance + self.in_play


@dataclass
class SessionStats:
    """Per-process session accumulators."""
    start_balance: int
    current_balance: int
    games_played: int = 0
    wins: int = 0
    losses: int = 0
    biggest_win: int = 0
    biggest_loss: int = 0
    start_time: float = field(default_factory=time.time)
