"""Data models for the hold'em agent."""

from holdem_agent.models.card import (
    Card, Rank, Suit, full_deck, hole_cards_notation, parse_cards, validate_hole_cards
)
from holdem_agent.models.action import ActionType, GamePhase, Decision
from holdem_agent.models.position import Position
from holdem_agent.models.context import (
    PreflopContext, PostflopContext, DecisionContext, build_context
)
from holdem_agent.models.bankroll import BankrollState, SessionStats

__all__ = [
    "Card", "Rank", "Suit", "full_deck", "hole_cards_notation", "parse_cards",
    "validate_hole_cards",
    "ActionType", "GamePhase", "Decision",
    "Position",
    "PreflopContext", "PostflopContext", "DecisionContext", "build_context",
    "BankrollState", "SessionStats",
]
