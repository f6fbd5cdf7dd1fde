"""Decision contexts handed to the strategy engine, one variant per street type."""

from dataclasses import dataclass
from typing import Sequence, Tuple, Union

from holdem_agent.models.action import GamePhase
from holdem_agent.models.card import Card, validate_hole_cards
from holdem_agent.models.position import Position

_MONEY_FIELDS = ("pot_size", "current_bet", "my_chips", "opponent_chips", "to_call")


def require_amount(name: str, value: int) -> int:
    """Reject anything that is not a non-negative integer amount."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} cannot be negative: {value}")
    return value


@dataclass(frozen=True)
class _BettingContext:
    hole_cards: Tuple[Card, Card]
    position: Position
    pot_size: int
    current_bet: int
    my_chips: int
    opponent_chips: int
    to_call: int

    def _validate_betting(self):
        object.__setattr__(self, "hole_cards", validate_hole_cards(tuple(self.hole_cards)))
        if not isinstance(self.position, Position):
            object.__setattr__(self, "position", Position(self.position))
        for name in _MONEY_FIELDS:
            require_amount(name, getattr(self, name))

    @property
    def facing_bet(self) -> bool:
        return self.to_call > 0


@dataclass(frozen=True)
class PreflopContext(_BettingContext):
    """Betting state before any community card is dealt."""
    game_id: str = ""

    def __post_init__(self):
        self._validate_betting()

    @property
    def phase(self) -> GamePhase:
        return GamePhase.PREFLOP

    @property
    def community_cards(self) -> Tuple[Card, ...]:
        return ()

    @property
    def effective_big_blind(self) -> int:
        """Big blind approximated from the pot, which holds the posted blinds."""
        return max(1, self.pot_size // 3)


@dataclass(frozen=True)
class PostflopContext(_BettingContext):
    """Betting state on the flop, turn or river."""
    phase: GamePhase
    community_cards: Tuple[Card, ...]
    game_id: str = ""

    def __post_init__(self):
        self._validate_betting()
        phase = GamePhase(self.phase)
        if not phase.is_postflop:
            raise ValueError("PostflopContext requires flop, turn or river; use PreflopContext")
        object.__setattr__(self, "phase", phase)

        board = tuple(self.community_cards)
        if len(board) != phase.board_size:
            raise ValueError(
                f"{phase.value} expects {phase.board_size} community cards, got {len(board)}"
            )
        for c in board:
            if not isinstance(c, Card):
                raise TypeError(f"Expected Card, got {type(c).__name__}")
        if len(set(board) | set(self.hole_cards)) != len(board) + 2:
            raise ValueError(f"Duplicate cards between hole {self.hole_cards} and board {board}")
        object.__setattr__(self, "community_cards", board)


DecisionContext = Union[PreflopContext, PostflopContext]


def build_context(
    phase: Union[GamePhase, str],
    hole_cards: Sequence[Card],
    community_cards: Sequence[Card],
    position: Union[Position, str],
    pot_size: int,
    current_bet: int,
    my_chips: int,
    opponent_chips: int,
    to_call: int,
    game_id: str = "",
) -> DecisionContext:
    """Build the context variant matching ``phase``.

    Raises:
        ValueError: On a non-canonical phase, a preflop board that is not
            empty, or any invalid field.
    """
    phase = GamePhase(phase)
    common = dict(
        hole_cards=tuple(hole_cards),
        position=Position(position),
        pot_size=pot_size,
        current_bet=current_bet,
        my_chips=my_chips,
        opponent_chips=opponent_chips,
        to_call=to_call,
        game_id=game_id,
    )
    if phase is GamePhase.PREFLOP:
        if community_cards:
            raise ValueError("Preflop context cannot carry community cards")
        return PreflopContext(**common)
    return PostflopContext(phase=phase, community_cards=tuple(community_cards), **common)
