"""Heads-up position model and seat label folding."""

from enum import Enum

# Full-ring seat labels as they appear in hand histories and table clients.
SEAT_LABELS = ("UTG", "UTG+1", "MP", "MP+1", "HJ", "CO", "BTN", "SB", "BB")


class Position(str, Enum):
    BUTTON = "button"
    BIG_BLIND = "big_blind"

    @classmethod
    def from_seat_label(cls, label: str) -> "Position":
        """Fold a seat label onto the two-way button/big-blind split.

        ``BTN`` (or ``button``/``dealer``) is the button; every other seat
        gets the conservative big blind treatment.
        """
        normalized = label.strip().upper()
        if normalized in ("BTN", "BUTTON", "DEALER", "D"):
            return cls.BUTTON
        if normalized in SEAT_LABELS or normalized in ("BIG_BLIND", "SMALL_BLIND"):
            return cls.BIG_BLIND
        raise ValueError(f"Unknown seat label: {label}")
