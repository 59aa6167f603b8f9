from __future__ import annotations

from typing import Iterable, Tuple

from .errors import PlayerRegistrationError, TurnError

MIN_STREAK_TO_PASS = 2


def normalize_players(names: Iterable[str]) -> Tuple[str, ...]:
    """Trims names and checks the list is non-empty with distinct, non-empty entries."""
    players = []
    for raw in names:
        if not isinstance(raw, str):
            raise PlayerRegistrationError(f"Player name must be a string, got {raw!r}")
        name = raw.strip()
        if not name:
            raise PlayerRegistrationError("Player names must not be empty")
        if name in players:
            raise PlayerRegistrationError(f"Duplicate player name: {name!r}")
        players.append(name)
    if not players:
        raise PlayerRegistrationError("At least one player is required")
    return tuple(players)


class TurnController:
    """Tracks whose turn it is and how many correct guesses they have made in a row."""

    def __init__(self, players: Iterable[str]) -> None:
        self._players = normalize_players(players)
        self._index = 0
        self.streak = 0

    @property
    def players(self) -> Tuple[str, ...]:
        return self._players

    @property
    def index(self) -> int:
        return self._index

    @property
    def current(self) -> str:
        return self._players[self._index]

    def record_correct(self) -> None:
        self.streak += 1

    def record_wrong(self) -> None:
        self.streak = 0

    def blocked_reason(self, locked: bool, finished: bool) -> str:
        """Empty string when the turn may pass, otherwise why it may not."""
        if finished:
            return "the game is finished"
        if locked:
            return "the board is locked"
        if self.streak < MIN_STREAK_TO_PASS:
            return f"{MIN_STREAK_TO_PASS} correct guesses in a row are needed to pass"
        return ""

    def can_advance(self, locked: bool, finished: bool) -> bool:
        return not self.blocked_reason(locked, finished)

    def advance(self, locked: bool, finished: bool) -> str:
        """Moves to the next player and returns their name. Raises TurnError when gated."""
        reason = self.blocked_reason(locked, finished)
        if reason:
            raise TurnError(f"Cannot pass the turn: {reason}")
        self._index = (self._index + 1) % len(self._players)
        self.streak = 0
        return self.current
