"""Preflop hand strength and heads-up opening/defending strategy."""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from holdem_agent.models.action import ActionType
from holdem_agent.models.card import Card, hole_cards_notation, validate_hole_cards
from holdem_agent.models.position import Position
from holdem_agent.simulation.equity import EquityCalculator
from holdem_agent.strategy import constants as C


class HandTier(str, Enum):
    """Preflop strength buckets."""
    PREMIUM = "premium"
    STRONG = "strong"
    PLAYABLE = "playable"
    MARGINAL = "marginal"
    TRASH = "trash"


@dataclass(frozen=True)
class PreflopRecommendation:
    """Suggested preflop action; raise sizes are big blind multiples."""
    tier: HandTier
    strength: float
    action: ActionType
    raise_multiplier: Optional[float] = None
    reasoning: str = ""


# Starting-hand classes ordered by heads-up strength. Classes missing here
# are scored by PreflopStrategy.estimate_strength.
PREFLOP_STRENGTHS = {
    # Premium
    "AA": 100, "KK": 98, "QQ": 95, "AKs": 93, "JJ": 91, "AKo": 90,

    # Strong
    "AQs": 89, "TT": 88, "AQo": 87, "AJs": 86, "99": 85, "KQs": 84,
    "ATs": 83, "KQo": 82, "AJo": 81, "88": 80,

    # Playable
    "KJs": 79, "QJs": 78, "ATo": 77, "A9s": 76, "77": 75, "KTs": 74,
    "KJo": 73, "QTs": 72, "A8s": 71, "QJo": 70, "JTs": 69, "66": 68,
    "A7s": 67, "KTo": 66, "A5s": 65,
    "A6s": 64, "A4s": 63, "QTo": 62, "55": 61, "A3s": 60, "K9s": 59,
    "JTo": 58, "A2s": 57, "Q9s": 56, "44": 55,

    # Marginal
    "J9s": 54, "K8s": 53, "T9s": 52, "A9o": 51, "K9o": 50,
    "K7s": 49, "33": 48, "Q8s": 47, "T8s": 46, "J8s": 45, "98s": 44,
    "K6s": 43, "A8o": 42, "Q9o": 41, "22": 40, "K5s": 39, "J9o": 38,
    "87s": 37, "K4s": 36, "T9o": 35,

    # Trash
    "Q7s": 34, "K3s": 33, "97s": 32, "J7s": 31, "76s": 30, "K2s": 29,
    "Q6s": 28, "T7s": 27, "86s": 26, "65s": 25, "Q5s": 24, "A7o": 23,
    "96s": 22, "75s": 21, "54s": 20,
    "Q4s": 19, "Q3s": 18, "T6s": 17, "64s": 16, "Q2s": 15, "85s": 14,
    "J6s": 13, "53s": 12, "J5s": 11, "74s": 10, "J4s": 9, "95s": 8,
    "J3s": 7, "63s": 6, "J2s": 5, "84s": 4, "43s": 3, "T5s": 2,
}


class PreflopStrategy:
    """Scores starting hands and recommends a preflop action."""

    def __init__(self, rng: Optional[random.Random] = None):
        """Initialize the strategy.

        Args:
            rng: Random source for the mixed-strategy branches.
        """
        self.rng = rng or random.Random()

    def get_hand_strength(self, hole_cards: Sequence[Card]) -> float:
        """Strength 0-100 for two hole cards."""
        notation = hole_cards_notation(hole_cards)
        if notation in PREFLOP_STRENGTHS:
            return float(PREFLOP_STRENGTHS[notation])
        return self.estimate_strength(hole_cards)

    @staticmethod
    def estimate_strength(hole_cards: Sequence[Card]) -> float:
        """Heuristic score for classes missing from the table."""
        c1, c2 = validate_hole_cards(hole_cards)
        r1, r2 = c1.rank.numeric_value, c2.rank.numeric_value

        if r1 == r2:
            return float(min(100, 20 + r1 * 5))

        high, low = max(r1, r2), min(r1, r2)
        gap = high - low

        strength = (high * 2 + low) / 3
        if c1.suit == c2.suit:
            strength += 4
        strength -= gap * 2
        if gap == 1:
            strength += 3
        elif gap == 2:
            strength += 1

        return max(0.0, min(100.0, strength * 3))

    @staticmethod
    def get_hand_tier(strength: float) -> HandTier:
        if strength >= C.PREMIUM_STRENGTH:
            return HandTier.PREMIUM
        if strength >= C.STRONG_STRENGTH:
            return HandTier.STRONG
        if strength >= C.PLAYABLE_STRENGTH:
            return HandTier.PLAYABLE
        if strength >= C.MARGINAL_STRENGTH:
            return HandTier.MARGINAL
        return HandTier.TRASH

    def is_in_range(self, hole_cards: Sequence[Card], min_strength: float) -> bool:
        return self.get_hand_strength(hole_cards) >= min_strength

    def get_recommendation(
        self,
        hole_cards: Sequence[Card],
        position: Position,
        facing_raise: bool,
        to_call: int,
        pot_size: int,
    ) -> PreflopRecommendation:
        """Recommend a preflop action.

        Args:
            hole_cards: Our two hole cards.
            position: Button or big blind; other seats should be folded onto
                big blind with ``Position.from_seat_label``.
            facing_raise: Whether the opponent has raised.
            to_call: Amount needed to call.
            pot_size: Pot before our call.

        Returns:
            A PreflopRecommendation.
        """
        strength = self.get_hand_strength(hole_cards)
        tier = self.get_hand_tier(strength)

        if Position(position) is Position.BUTTON:
            return self._button_strategy(strength, tier, facing_raise)
        return self._big_blind_strategy(strength, tier, facing_raise, to_call, pot_size)

    def _button_strategy(self, strength: float, tier: HandTier,
                         facing_raise: bool) -> PreflopRecommendation:
        def rec(action, reasoning, multiplier=None):
            return PreflopRecommendation(tier, strength, action, multiplier, reasoning)

        if not facing_raise:
            if tier == HandTier.PREMIUM:
                return rec(ActionType.RAISE, "Premium hand, raise for value from button", 3)
            if tier in (HandTier.STRONG, HandTier.PLAYABLE):
                return rec(ActionType.RAISE, "Playable hand, steal attempt from button", 2.5)
            if tier == HandTier.MARGINAL and self.rng.random() < C.BUTTON_MARGINAL_STEAL_FREQUENCY:
                return rec(ActionType.RAISE, "Marginal hand, occasional steal attempt", 2)
            return rec(ActionType.FOLD, "Weak hand, fold even from button")

        if tier == HandTier.PREMIUM:
            return rec(ActionType.RAISE, "Premium hand, 3-bet for value", 3)
        if tier == HandTier.STRONG:
            if self.rng.random() < C.BUTTON_STRONG_3BET_FREQUENCY:
                return rec(ActionType.RAISE, "Strong hand, occasional 3-bet", 3)
            return rec(ActionType.CALL, "Strong hand, call to see flop")
        if tier == HandTier.PLAYABLE:
            return rec(ActionType.CALL, "Playable hand with position, call")
        return rec(ActionType.FOLD, "Weak hand facing raise, fold")

    def _big_blind_strategy(self, strength: float, tier: HandTier, facing_raise: bool,
                            to_call: int, pot_size: int) -> PreflopRecommendation:
        def rec(action, reasoning, multiplier=None):
            return PreflopRecommendation(tier, strength, action, multiplier, reasoning)

        if not facing_raise:
            if tier in (HandTier.PREMIUM, HandTier.STRONG):
                return rec(ActionType.RAISE, "Strong hand in BB, raise for value", 3)
            return rec(ActionType.CHECK, "Check option in big blind")

        pot_odds = EquityCalculator.calculate_pot_odds(to_call, pot_size)

        if tier == HandTier.PREMIUM:
            return rec(ActionType.RAISE, "Premium hand, 3-bet from big blind", 3)
        if tier == HandTier.STRONG:
            if self.rng.random() < C.BIG_BLIND_STRONG_3BET_FREQUENCY:
                return rec(ActionType.RAISE, "Strong hand, occasional 3-bet", 3)
            return rec(ActionType.CALL, "Strong hand, defend big blind")
        if tier == HandTier.PLAYABLE and pot_odds < C.BIG_BLIND_PLAYABLE_CALL_ODDS:
            return rec(ActionType.CALL, "Playable hand with good pot odds")
        if tier == HandTier.MARGINAL and pot_odds < C.BIG_BLIND_MARGINAL_CALL_ODDS:
            return rec(ActionType.CALL, "Marginal hand with great pot odds")
        return rec(ActionType.FOLD, "Weak hand facing raise, fold")
