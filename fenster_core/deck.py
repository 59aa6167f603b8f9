from __future__ import annotations

import random
from typing import Iterable, List, MutableSequence, Optional, Tuple, TypeVar

from .cards import Card, standard_deck
from .errors import EmptyDeckError

T = TypeVar("T")


def shuffle(cards: MutableSequence[T], rng: Optional[random.Random] = None) -> MutableSequence[T]:
    """Shuffles in place with Fisher-Yates, walking the index down from the end, and returns the sequence."""
    rng = rng or random.Random()
    i = len(cards) - 1
    while i > 0:
        j = rng.randrange(i + 1)
        cards[i], cards[j] = cards[j], cards[i]
        i -= 1
    return cards


class Deck:
    """Ordered pile of the cards not currently on the board. The top of the deck is the end of the list."""

    def __init__(self, cards: Iterable[Card] = (), rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()
        self._cards: List[Card] = list(cards)

    @classmethod
    def standard(cls, rng: Optional[random.Random] = None) -> 'Deck':
        """Creates a shuffled 52-card deck."""
        deck = cls(standard_deck(), rng=rng)
        deck.shuffle()
        return deck

    def __len__(self) -> int:
        return len(self._cards)

    @property
    def cards(self) -> Tuple[Card, ...]:
        return tuple(self._cards)

    def shuffle(self) -> None:
        shuffle(self._cards, self._rng)

    def draw(self) -> Card:
        if not self._cards:
            raise EmptyDeckError("Cannot draw from an empty deck")
        return self._cards.pop()

    def return_and_reshuffle(self, cards: Iterable[Card]) -> None:
        self._cards.extend(cards)
        self.shuffle()
