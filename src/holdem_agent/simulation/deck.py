"""Deck management for simulations."""

import random
from typing import Iterable, List, Optional

from holdem_agent.models.card import Card, full_deck


class Deck:
    """A standard 52-card deck with an injectable random source."""

    def __init__(self, rng: Optional[random.Random] = None, exclude: Iterable[Card] = ()):
        """Initialize a new deck.

        Args:
            rng: Random source; a fresh ``random.Random`` when omitted.
            exclude: Cards already known (dealt or on the board) to leave out.
        """
        self.rng = rng or random.Random()
        self._excluded = frozenset(exclude)
        self.cards: List[Card] = []
        self._reset()

    def _reset(self):
        """Reset the deck to every card not excluded."""
        self.cards = [c for c in full_deck() if c not in self._excluded]

    def shuffle(self):
        """Shuffle the deck in place."""
        self.rng.shuffle(self.cards)

    def deal(self, count: int = 1) -> List[Card]:
        """Deal cards from the top of the deck.

        Args:
            count: Number of cards to deal.

        Returns:
            List of dealt cards.
        """
        if count > len(self.cards):
            raise ValueError(f"Not enough cards in deck. Need {count}, have {len(self.cards)}")

        dealt = self.cards[:count]
        self.cards = self.cards[count:]
        return dealt

    def deal_one(self) -> Card:
        return self.deal(1)[0]

    def sample(self, count: int) -> List[Card]:
        """Draw ``count`` random cards without removing them from the deck."""
        if count > len(self.cards):
            raise ValueError(f"Not enough cards in deck. Need {count}, have {len(self.cards)}")
        return self.rng.sample(self.cards, count)

    def reset(self):
        """Reset and shuffle the deck."""
        self._reset()
        self.shuffle()

    def __len__(self) -> int:
        return len(self.cards)

    def __repr__(self) -> str:
        return f"Deck(remaining={len(self.cards)})"
