"""Card, Rank, and Suit models."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Sequence, Tuple


class Suit(str, Enum):
    HEARTS = "h"
    DIAMONDS = "d"
    CLUBS = "c"
    SPADES = "s"

    @classmethod
    def from_symbol(cls, s: str) -> "Suit":
        mapping = {
            "h": cls.HEARTS, "hearts": cls.HEARTS, "♥": cls.HEARTS,
            "d": cls.DIAMONDS, "diamonds": cls.DIAMONDS, "♦": cls.DIAMONDS,
            "c": cls.CLUBS, "clubs": cls.CLUBS, "♣": cls.CLUBS,
            "s": cls.SPADES, "spades": cls.SPADES, "♠": cls.SPADES,
        }
        key = s.lower()
        if key in mapping:
            return mapping[key]
        raise ValueError(f"Unknown suit: {s}")

    @property
    def symbol(self) -> str:
        return {"h": "♥", "d": "♦", "c": "♣", "s": "♠"}[self.value]

    @property
    def ordinal(self) -> int:
        return _SUIT_ORDER.index(self)


class Rank(str, Enum):
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "T"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"

    @property
    def numeric_value(self) -> int:
        return _RANK_VALUES[self.value]

    @property
    def ordinal(self) -> int:
        return self.numeric_value - 2

    @classmethod
    def from_char(cls, c: str) -> "Rank":
        if c == "10":
            return cls.TEN
        for r in cls:
            if r.value == c.upper():
                return r
        raise ValueError(f"Unknown rank: {c}")

    @classmethod
    def from_value(cls, value: int) -> "Rank":
        for r in cls:
            if r.numeric_value == value:
                return r
        raise ValueError(f"Unknown rank value: {value}")


_RANK_VALUES = {
    "2": 2, "3": 3, "4": 4, "5": 5, "6": 6, "7": 7, "8": 8,
    "9": 9, "T": 10, "J": 11, "Q": 12, "K": 13, "A": 14,
}

# Deck order used by Card.index: spades, hearts, diamonds, clubs.
_SUIT_ORDER = (Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS)


@dataclass(frozen=True)
class Card:
    """A single playing card."""
    rank: Rank
    suit: Suit

    @classmethod
    def parse(cls, s: str) -> "Card":
        """Parse a card string like 'Ah', 'Ts', '2c', '10d' or 'K♠'."""
        s = s.strip()
        if len(s) == 2:
            return cls(Rank.from_char(s[0]), Suit.from_symbol(s[1]))
        elif len(s) == 3 and s[:2] == "10":
            return cls(Rank.TEN, Suit.from_symbol(s[2]))
        raise ValueError(f"Cannot parse card: {s}")

    @classmethod
    def from_index(cls, index: int) -> "Card":
        """Build a card from its deck index (0-51)."""
        if not 0 <= index <= 51:
            raise ValueError(f"Invalid card index: {index}")
        return cls(Rank.from_value(index // 4 + 2), _SUIT_ORDER[index % 4])

    @property
    def index(self) -> int:
        """Deck index: rank_index * 4 + suit_index."""
        return self.rank.ordinal * 4 + self.suit.ordinal

    def __repr__(self) -> str:
        return f"{self.rank.value}{self.suit.value}"

    def __str__(self) -> str:
        return f"{self.rank.value}{self.suit.symbol}"


def parse_cards(text: Iterable[str]) -> List[Card]:
    """Parse several card strings, e.g. ``["Ah", "Kd"]``."""
    return [Card.parse(t) for t in text]


def full_deck() -> List[Card]:
    """All 52 cards in index order."""
    return [Card.from_index(i) for i in range(52)]


def validate_hole_cards(cards: Sequence[Card]) -> Tuple[Card, Card]:
    """Check that ``cards`` is exactly two distinct cards and return them as a tuple."""
    if len(cards) != 2:
        raise ValueError(f"Hole cards must be exactly 2 cards, got {len(cards)}")
    for c in cards:
        if not isinstance(c, Card):
            raise TypeError(f"Expected Card, got {type(c).__name__}")
    if cards[0] == cards[1]:
        raise ValueError(f"Duplicate hole card: {cards[0]!r}")
    return cards[0], cards[1]


def hole_cards_notation(cards: Sequence[Card]) -> str:
    """Canonical starting-hand class, e.g. 'AA', 'AKs', 'T9o'."""
    c1, c2 = validate_hole_cards(cards)
    high, low = (c1, c2) if c1.rank.numeric_value >= c2.rank.numeric_value else (c2, c1)
    if high.rank == low.rank:
        return f"{high.rank.value}{low.rank.value}"
    suffix = "s" if high.suit == low.suit else "o"
    return f"{high.rank.value}{low.rank.value}{suffix}"
