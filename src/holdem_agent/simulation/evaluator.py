"""Hand evaluation: best five-card hand out of five to seven cards."""

from dataclasses import dataclass
from enum import IntEnum
from itertools import combinations
from typing import Dict, Hashable, List, Sequence, Tuple

from holdem_agent.models.card import Card


class HandCategory(IntEnum):
    """Hand categories from worst to best."""
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8


@dataclass(frozen=True, order=True)
class HandRank:
    """Comparable hand value: category first, then kicker ranks high to low."""
    category: HandCategory
    kickers: Tuple[int, ...]

    @property
    def is_royal(self) -> bool:
        return self.category == HandCategory.STRAIGHT_FLUSH and self.kickers[0] == 14

    @property
    def name(self) -> str:
        return HandEvaluator.get_rank_name(self)


_NAMES = {
    HandCategory.HIGH_CARD: "High Card",
    HandCategory.ONE_PAIR: "One Pair",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FLUSH: "Flush",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
}


def _classify(ranks: Tuple[int, ...], is_flush: bool) -> Tuple[int, ...]:
    """Score five ranks sorted high to low as ``(category, *kickers)``."""
    r0, r1, r2, r3, r4 = ranks

    if r0 > r1 > r2 > r3 > r4:
        if r0 - r4 == 4:
            straight_high = r0
        elif r0 == 14 and r1 == 5:
            # A-5-4-3-2 plays as a five-high straight
            straight_high = 5
        else:
            straight_high = 0

        if straight_high:
            if is_flush:
                return (HandCategory.STRAIGHT_FLUSH, straight_high)
            return (HandCategory.STRAIGHT, straight_high)
        if is_flush:
            return (HandCategory.FLUSH,) + ranks
        return (HandCategory.HIGH_CARD,) + ranks

    # Paired boards cannot be flushes without duplicate cards.
    groups = sorted(((ranks.count(v), v) for v in set(ranks)), reverse=True)
    top_count = groups[0][0]
    values = tuple(v for _, v in groups)

    if top_count == 4:
        return (HandCategory.FOUR_OF_A_KIND,) + values
    if top_count == 3:
        if groups[1][0] == 2:
            return (HandCategory.FULL_HOUSE,) + values
        return (HandCategory.THREE_OF_A_KIND,) + values
    if groups[1][0] == 2:
        return (HandCategory.TWO_PAIR,) + values
    return (HandCategory.ONE_PAIR,) + values


def _check_cards(cards: Sequence[Card]) -> None:
    if not 5 <= len(cards) <= 7:
        raise ValueError(f"Need 5 to 7 cards to evaluate, got {len(cards)}")
    for c in cards:
        if not isinstance(c, Card):
            raise TypeError(f"Expected Card, got {type(c).__name__}")
    if len(set(cards)) != len(cards):
        raise ValueError(f"Duplicate cards in hand: {list(cards)}")


class HandEvaluator:
    """Evaluates poker hands."""

    @staticmethod
    def evaluate(cards: Sequence[Card]) -> HandRank:
        """Evaluate five to seven cards and return the best five-card hand.

        Args:
            cards: Hole cards plus community cards, 5-7 distinct cards.

        Returns:
            The HandRank of the best five-card subset.

        Raises:
            ValueError: On a wrong card count or duplicate cards.
        """
        _check_cards(cards)

        # Sorting once keeps every combination sorted high to low.
        ordered = sorted(cards, key=lambda c: c.rank.numeric_value, reverse=True)
        ranks = [c.rank.numeric_value for c in ordered]
        suits = [c.suit for c in ordered]

        best: Tuple[int, ...] = ()
        for combo in combinations(range(len(ordered)), 5):
            first_suit = suits[combo[0]]
            is_flush = all(suits[i] == first_suit for i in combo)
            score = _classify(tuple(ranks[i] for i in combo), is_flush)
            if score > best:
                best = score

        return HandRank(HandCategory(best[0]), tuple(best[1:]))

    @staticmethod
    def compare_hands(hand1: HandRank, hand2: HandRank) -> int:
        """Compare two evaluated hands.

        Returns:
            1 if hand1 wins, -1 if hand2 wins, 0 if tie.
        """
        if hand1 > hand2:
            return 1
        if hand1 < hand2:
            return -1
        return 0

    @staticmethod
    def compare(cards1: Sequence[Card], cards2: Sequence[Card]) -> int:
        """Evaluate and compare two card sets (1, -1 or 0)."""
        return HandEvaluator.compare_hands(
            HandEvaluator.evaluate(cards1), HandEvaluator.evaluate(cards2)
        )

    @staticmethod
    def get_winners(board: Sequence[Card],
                    player_cards: Dict[Hashable, Sequence[Card]]) -> List[Hashable]:
        """Get the winning seat(s) from a group of players.

        Args:
            board: Community cards.
            player_cards: Mapping from seat to player's hole cards.

        Returns:
            List of winning seats (may be multiple for ties).
        """
        if not player_cards:
            return []

        evaluations = {
            seat: HandEvaluator.evaluate(list(cards) + list(board))
            for seat, cards in player_cards.items()
        }
        best = max(evaluations.values())
        return [seat for seat, rank in evaluations.items() if rank == best]

    @staticmethod
    def get_rank_name(rank: HandRank) -> str:
        """Get a human-readable name for a hand rank."""
        if rank.is_royal:
            return "Royal Flush"
        return _NAMES[rank.category]
