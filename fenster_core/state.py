from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple

from .board import CellView
from .cards import Card
from .topology import CellId

CHOOSE_TO_START = "choose-to-start"
CORRECT_CONTINUE = "correct-continue"
WRONG = "wrong"
READY = "ready"
FINISHED = "finished"


def wrong_message(drinks: int) -> str:
    return f"{WRONG}:{drinks}"


@dataclass(frozen=True)
class GameEvent:
    """Result published after a guess, a penalty redeal or a turn change."""
    kind: str
    cell_id: Optional[CellId] = None
    card: Optional[Card] = None
    cluster: FrozenSet[CellId] = frozenset()
    player: Optional[str] = None

    @property
    def correct(self) -> bool:
        return self.kind in (CORRECT_CONTINUE, FINISHED)

    @property
    def drink_count(self) -> int:
        return len(self.cluster) if self.kind == WRONG else 0

    @property
    def message(self) -> str:
        if self.kind == WRONG:
            return wrong_message(self.drink_count)
        return self.kind


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only copy of everything the presentation layer renders."""
    cells: Tuple[CellView, ...]
    players: Tuple[str, ...]
    current_player: str
    message: str
    locked: bool
    finished: bool
    correct_streak: int
    can_pass: bool
    anchor: Optional[Card]
    anchor_id: Optional[CellId]
    deck_size: int
