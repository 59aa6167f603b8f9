from __future__ import annotations

# Facade module that re-exports the Fenster core API.
# Used by the Flask app, the tools and the tests.
# Single-responsibility modules live under fenster_core/*.

from fenster_core.board import Board, Cell, CellView  # noqa: F401
from fenster_core.cards import (  # noqa: F401
    RED_SUITS,
    SUIT_SYMBOLS,
    SUITS,
    VALUES,
    Card,
    card_from_code,
    rank,
    standard_deck,
)
from fenster_core.cluster import connected_face_up  # noqa: F401
from fenster_core.deck import Deck, shuffle  # noqa: F401
from fenster_core.engine import FensterGame  # noqa: F401
from fenster_core.errors import (  # noqa: F401
    EmptyDeckError,
    FensterError,
    InvalidGuessError,
    LockedStateError,
    PlayerRegistrationError,
    TurnError,
    UnknownCellError,
)
from fenster_core.rules import guess_tokens, is_correct  # noqa: F401
from fenster_core.scheduler import ManualScheduler, PenaltyHandle, ThreadingScheduler  # noqa: F401
from fenster_core.state import (  # noqa: F401
    CHOOSE_TO_START,
    CORRECT_CONTINUE,
    FINISHED,
    READY,
    WRONG,
    GameEvent,
    GameSnapshot,
)
from fenster_core.topology import (  # noqa: F401
    AXIS_LINES,
    CELL_IDS,
    CENTER_ID,
    CORNER_IDS,
    EDGES,
    GRID_LAYOUT,
    INNER_EDGE_IDS,
    OUTER_IDS,
    betweenness,
    is_adjacent,
    neighbours,
    role,
)
from fenster_core.turns import TurnController  # noqa: F401


def main() -> None:
    # CLI driver delegated to fenster_core.cli
    from fenster_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
