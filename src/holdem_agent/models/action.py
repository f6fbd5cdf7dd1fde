"""Action, phase and decision models."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class GamePhase(str, Enum):
    PREFLOP = "preflop"
    FLOP = "flop"
    TURN = "turn"
    RIVER = "river"

    @property
    def order(self) -> int:
        return ["preflop", "flop", "turn", "river"].index(self.value)

    @property
    def board_size(self) -> int:
        """Number of community cards dealt by the start of this phase."""
        return (0, 3, 4, 5)[self.order]

    @property
    def is_postflop(self) -> bool:
        return self is not GamePhase.PREFLOP


class ActionType(str, Enum):
    FOLD = "fold"
    CHECK = "check"
    CALL = "call"
    RAISE = "raise"
    ALL_IN = "all_in"

    @property
    def is_aggressive(self) -> bool:
        return self in (ActionType.RAISE, ActionType.ALL_IN)


@dataclass(frozen=True)
class Decision:
    """A single action chosen by the strategy engine."""
    action: ActionType
    amount: Optional[int] = None
    confidence: float = 0.0
    reasoning: str = ""

    def __post_init__(self):
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Confidence must be within [0, 1], got {self.confidence}")
        if self.amount is not None and (isinstance(self.amount, bool) or not isinstance(self.amount, int)):
            raise TypeError(f"Decision amount must be an int, got {type(self.amount).__name__}")
        if self.action.is_aggressive and (self.amount is None or self.amount <= 0):
            raise ValueError(f"{self.action.value} requires a positive amount")
        if self.amount is not None and self.amount < 0:
            raise ValueError(f"Decision amount cannot be negative: {self.amount}")

    def __str__(self) -> str:
        if self.amount is None:
            return f"{self.action.value} ({self.confidence:.0%})"
        return f"{self.action.value} {self.amount} ({self.confidence:.0%})"
