from __future__ import annotations

from typing import Optional, Tuple

from .cards import SUITS, Card
from .errors import InvalidGuessError
from .topology import CENTER, INNER_EDGE, OUTER, Window

HIGHER = "higher"
LOWER = "lower"
INSIDE = "inside"
OUTSIDE = "outside"
RED = "red"
BLACK = "black"

RANGE_TOKENS: Tuple[str, ...] = (INSIDE, OUTSIDE)
COMPARE_TOKENS: Tuple[str, ...] = (HIGHER, LOWER)
COLOUR_TOKENS: Tuple[str, ...] = (RED, BLACK)
SUIT_TOKENS: Tuple[str, ...] = SUITS


def guess_tokens(cell_role: str, window: Optional[Window]) -> Tuple[str, ...]:
    """The token alphabet a cell accepts, given its role and current betweenness window."""
    if cell_role == OUTER:
        return RANGE_TOKENS if window is not None else COMPARE_TOKENS
    if cell_role == INNER_EDGE:
        return COLOUR_TOKENS
    if cell_role == CENTER:
        return SUIT_TOKENS
    raise ValueError(f"Unknown cell role: {cell_role!r}")


def is_correct(
    card: Card,
    cell_role: str,
    token: str,
    window: Optional[Window] = None,
    anchor: Optional[Card] = None,
) -> bool:
    """
    Decides a guess about `card`.

    Raises InvalidGuessError when the token is not in the cell's alphabet, or
    when a higher/lower guess has no anchor to compare against.
    """
    allowed = guess_tokens(cell_role, window)
    if token not in allowed:
        raise InvalidGuessError(f"{token!r} is not a valid guess here; expected one of {', '.join(allowed)}")

    if cell_role == OUTER:
        val = card.rank
        if window is not None:
            lo, hi = window
            inside = lo <= val <= hi
            return inside if token == INSIDE else not inside
        if anchor is None:
            raise InvalidGuessError("Choose a start card before guessing higher or lower")
        if token == HIGHER:
            return val > anchor.rank
        return val < anchor.rank

    if cell_role == INNER_EDGE:
        return card.is_red == (token == RED)

    return card.suit == token
