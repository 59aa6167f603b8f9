from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

VALUES: Tuple[str, ...] = ("A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")
SUITS: Tuple[str, ...] = ("spades", "hearts", "clubs", "diamonds")
RED_SUITS = frozenset({"hearts", "diamonds"})

SUIT_SYMBOLS: Dict[str, str] = {"spades": "♠", "hearts": "♥", "clubs": "♣", "diamonds": "♦"}
SUIT_LETTERS: Dict[str, str] = {"spades": "S", "hearts": "H", "clubs": "C", "diamonds": "D"}
_LETTER_SUITS: Dict[str, str] = {v: k for k, v in SUIT_LETTERS.items()}

# Ace is always high.
_FACE_RANKS: Dict[str, int] = {"J": 11, "Q": 12, "K": 13, "A": 14}


def rank(value: str) -> int:
    """Numeric rank used by every higher/lower and inside/outside comparison."""
    if value in _FACE_RANKS:
        return _FACE_RANKS[value]
    if value not in VALUES:
        raise ValueError(f"Invalid card value: {value!r}")
    return int(value)


@dataclass(frozen=True)
class Card:
    value: str
    suit: str

    def __post_init__(self) -> None:
        if self.value not in VALUES:
            raise ValueError(f"Invalid card value: {self.value!r}")
        if self.suit not in SUITS:
            raise ValueError(f"Invalid suit: {self.suit!r}")

    @property
    def rank(self) -> int:
        return rank(self.value)

    @property
    def is_red(self) -> bool:
        return self.suit in RED_SUITS

    @property
    def code(self) -> str:
        """Two-character lookup code, e.g. 'AS', '0H' for the ten of hearts, 'QD'."""
        val = "0" if self.value == "10" else self.value
        return f"{val}{SUIT_LETTERS[self.suit]}"

    def __str__(self) -> str:
        return f"{self.value}{SUIT_SYMBOLS[self.suit]}"


def card_from_code(code: str) -> Card:
    """Inverse of Card.code."""
    if len(code) != 2:
        raise ValueError(f"Invalid card code: {code!r}")
    val, letter = code[0].upper(), code[1].upper()
    if letter not in _LETTER_SUITS:
        raise ValueError(f"Invalid card code: {code!r}")
    return Card("10" if val == "0" else val, _LETTER_SUITS[letter])


def standard_deck() -> List[Card]:
    """All 52 cards in a fixed, unshuffled order."""
    return [Card(value, suit) for value in VALUES for suit in SUITS]
