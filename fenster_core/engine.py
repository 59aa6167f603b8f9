from __future__ import annotations

import logging
import math
import random
import threading
from functools import partial
from typing import Callable, FrozenSet, Iterable, List, Optional, Sequence, Tuple

from . import config
from .board import Board, Cell, CellView
from .cards import Card, standard_deck
from .cluster import connected_face_up
from .deck import Deck
from .errors import InvalidGuessError, LockedStateError, TurnError
from .rules import guess_tokens, is_correct
from .scheduler import PenaltyHandle, ThreadingScheduler
from .state import (
    CHOOSE_TO_START,
    CORRECT_CONTINUE,
    FINISHED,
    READY,
    WRONG,
    GameEvent,
    GameSnapshot,
)
from .topology import (
    CELL_COUNT,
    CELL_IDS,
    CENTER,
    CENTER_ID,
    CORNER_IDS,
    INNER_EDGE,
    INNER_EDGE_IDS,
    OUTER,
    OUTER_IDS,
    CellId,
    betweenness,
    check_cell_id,
    is_adjacent,
    role,
)
from .turns import TurnController

logger = logging.getLogger(__name__)

Listener = Callable[[GameEvent], None]

_RING_AND_DIAMOND: Tuple[CellId, ...] = OUTER_IDS + INNER_EDGE_IDS


class FensterGame:
    """
    The rules engine for one game of Fenster.

    Commands (`select_start_card`, `evaluate_guess`, `next_player`) mutate the
    game atomically: a rejected command raises a FensterError subclass and
    leaves every piece of state untouched. While the board is locked by a
    penalty every command raises LockedStateError.

    A wrong guess schedules the penalty redeal through `scheduler` after
    `penalty_delay` seconds. The pending handle is exposed as `penalty` and is
    cancelled by `close()`.
    """

    def __init__(
        self,
        players: Iterable[str],
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        penalty_delay: Optional[float] = None,
        strict_start: Optional[bool] = None,
        scheduler=None,
        deck: Optional[Deck] = None,
        board: Optional[Board] = None,
    ) -> None:
        self.turns = TurnController(players)
        self._rng = rng or random.Random(seed)
        self._deck = deck if deck is not None else Deck.standard(self._rng)
        self._board = board if board is not None else Board.deal(self._deck)
        self.penalty_delay = config.PENALTY_DELAY if penalty_delay is None else float(penalty_delay)
        if not math.isfinite(self.penalty_delay) or self.penalty_delay < 0:
            raise ValueError(f"penalty_delay must be a finite, non-negative number of seconds, got {penalty_delay!r}")
        self.strict_start = config.STRICT_START if strict_start is None else bool(strict_start)
        self._scheduler = scheduler or ThreadingScheduler()
        self._lock = threading.RLock()
        self._listeners: List[Listener] = []
        self._anchor: Optional[Card] = None
        self._anchor_id: Optional[CellId] = None
        self._locked = False
        self._finished = False
        self._closed = False
        self._penalty: Optional[PenaltyHandle] = None
        self._message = CHOOSE_TO_START
        logger.info("New game for %s", ", ".join(self.turns.players))

    @classmethod
    def from_layout(
        cls,
        players: Iterable[str],
        cards: Sequence[Card],
        face_up: Iterable[CellId] = CORNER_IDS,
        **kwargs,
    ) -> 'FensterGame':
        """Starts a game with `cards[i]` on cell i; the rest of the 52 cards form the shuffled deck."""
        if len(cards) != CELL_COUNT or len(set(cards)) != CELL_COUNT:
            raise ValueError(f"Expected {CELL_COUNT} distinct cards")
        shown = set(face_up)
        board = Board([Cell(cid, cards[cid], cid in shown) for cid in CELL_IDS])
        rng = kwargs.pop("rng", None) or random.Random(kwargs.pop("seed", None))
        on_board = set(cards)
        deck = Deck([c for c in standard_deck() if c not in on_board], rng=rng)
        deck.shuffle()
        return cls(players, rng=rng, deck=deck, board=board, **kwargs)

    # ---------- queries ----------

    @property
    def players(self) -> Tuple[str, ...]:
        return self.turns.players

    @property
    def current_player(self) -> str:
        return self.turns.current

    @property
    def correct_streak(self) -> int:
        return self.turns.streak

    @property
    def locked(self) -> bool:
        return self._locked

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def message(self) -> str:
        return self._message

    @property
    def anchor(self) -> Optional[Card]:
        return self._anchor

    @property
    def anchor_id(self) -> Optional[CellId]:
        return self._anchor_id

    @property
    def penalty(self) -> Optional[PenaltyHandle]:
        return self._penalty

    @property
    def deck(self) -> Tuple[Card, ...]:
        return self._deck.cards

    @property
    def board(self) -> Board:
        return self._board

    def cell(self, cell_id: CellId) -> CellView:
        c = self._board[cell_id]
        return CellView(c.id, c.card, c.face_up)

    def can_pass(self) -> bool:
        return self.turns.can_advance(self._locked, self._finished)

    def snapshot(self) -> GameSnapshot:
        with self._lock:
            return GameSnapshot(
                cells=self._board.views(),
                players=self.turns.players,
                current_player=self.turns.current,
                message=self._message,
                locked=self._locked,
                finished=self._finished,
                correct_streak=self.turns.streak,
                can_pass=self.can_pass(),
                anchor=self._anchor,
                anchor_id=self._anchor_id,
                deck_size=len(self._deck),
            )

    def available_guesses(self, cell_id: CellId) -> Tuple[str, ...]:
        """Tokens the table should be offered for a cell right now; empty when it cannot be played."""
        with self._lock:
            cell = self._board[cell_id]
            if self._locked or self._finished or cell.face_up:
                return ()
            cell_role = role(cell_id)
            if cell_role == OUTER:
                if self._anchor_id is None or not is_adjacent(self._anchor_id, cell_id):
                    return ()
                return guess_tokens(OUTER, betweenness(cell_id, self._board))
            if cell_role == INNER_EDGE:
                return guess_tokens(INNER_EDGE, None) if self._board.all_face_up(OUTER_IDS) else ()
            return guess_tokens(CENTER, None) if self._board.all_face_up(INNER_EDGE_IDS) else ()

    # ---------- listeners ----------

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, event: GameEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Listener %r failed on %s", listener, event.kind)

    # ---------- commands ----------

    def _ensure_unlocked(self, action: str) -> None:
        if self._locked:
            logger.debug("Rejected %s: board locked", action)
            raise LockedStateError(f"Cannot {action} while the penalty is running")

    def select_start_card(self, cell_id: CellId) -> GameEvent:
        """
        Sets the anchor card used for higher/lower guesses.

        By default any cell may be chosen, face-up or not. With
        `strict_start` a face-down cell raises InvalidGuessError.
        Raises LockedStateError while locked and TurnError once the game is
        finished.
        """
        with self._lock:
            check_cell_id(cell_id)
            self._ensure_unlocked("choose a start card")
            if self._finished:
                raise TurnError("The game is finished")
            cell = self._board[cell_id]
            if self.strict_start and not cell.face_up:
                raise InvalidGuessError(f"Cell {cell_id} is face-down and cannot be a start card")
            self._anchor, self._anchor_id = cell.card, cell_id
            self._message = READY
            event = GameEvent(READY, cell_id=cell_id, card=cell.card, player=self.turns.current)
            logger.debug("%s starts from cell %d (%s)", self.turns.current, cell_id, cell.card)
        self._emit(event)
        return event

    def evaluate_guess(self, cell_id: CellId, token: str) -> GameEvent:
        """
        Flips `cell_id` and judges `token` against it.

        Raises LockedStateError while locked, TurnError once the game is
        finished, and InvalidGuessError for a token the cell does not accept
        (or higher/lower with no anchor). Nothing changes when it raises.
        """
        with self._lock:
            check_cell_id(cell_id)
            self._ensure_unlocked("guess")
            if self._finished:
                raise TurnError("The game is finished")
            cell = self._board[cell_id]
            cell_role = role(cell_id)
            window = betweenness(cell_id, self._board) if cell_role == OUTER else None
            correct = is_correct(cell.card, cell_role, token, window, self._anchor)

            cell.face_up = True
            player = self.turns.current
            logger.debug("%s guessed %s on cell %d (%s): %s", player, token, cell_id, cell.card,
                         "correct" if correct else "wrong")
            if correct:
                self._anchor, self._anchor_id = cell.card, cell_id
                self.turns.record_correct()
                if cell_id == CENTER_ID and self._board.all_face_up(_RING_AND_DIAMOND):
                    self._finished = True
                    event = GameEvent(FINISHED, cell_id=cell_id, card=cell.card, player=player)
                    logger.info("Game finished by %s", player)
                else:
                    event = GameEvent(CORRECT_CONTINUE, cell_id=cell_id, card=cell.card, player=player)
            else:
                cluster = connected_face_up(self._board, cell_id)
                self.turns.record_wrong()
                self._locked = True
                event = GameEvent(WRONG, cell_id=cell_id, card=cell.card, cluster=cluster, player=player)
                logger.info("%s drinks %d; redealing cells %s in %.1fs", player, len(cluster),
                            sorted(cluster), self.penalty_delay)
                self._penalty = self._scheduler.schedule(self.penalty_delay, partial(self._redeal, cluster))
            self._message = event.message
        self._emit(event)
        return event

    def _redeal(self, cluster: FrozenSet[CellId]) -> None:
        with self._lock:
            if self._closed:
                return
            ids = sorted(cluster)
            self._deck.return_and_reshuffle([self._board[cid].card for cid in ids])
            for cid in ids:
                cell = self._board[cid]
                cell.card = self._deck.draw()
                cell.face_up = cid in CORNER_IDS
            self._anchor, self._anchor_id = None, None
            self._locked = False
            self._penalty = None
            self._message = READY
            event = GameEvent(READY, cluster=cluster, player=self.turns.current)
            logger.info("Penalty over; cells %s redealt", ids)
        self._emit(event)

    def next_player(self) -> str:
        """
        Passes the turn. Needs at least two correct guesses in a row.

        Raises LockedStateError while locked and TurnError when the streak is
        too short or the game is finished.
        """
        with self._lock:
            self._ensure_unlocked("pass the turn")
            player = self.turns.advance(self._locked, self._finished)
            self._anchor, self._anchor_id = None, None
            self._message = CHOOSE_TO_START
            event = GameEvent(CHOOSE_TO_START, player=player)
            logger.info("Turn passes to %s", player)
        self._emit(event)
        return player

    def wait_for_penalty(self, timeout: Optional[float] = None) -> bool:
        """Blocks until a pending penalty has been resolved. True when nothing is pending any more."""
        handle = self._penalty
        if handle is None:
            return True
        return handle.wait(timeout)

    def close(self) -> None:
        """Cancels a pending penalty. The game accepts no redeal afterwards."""
        with self._lock:
            self._closed = True
            handle, self._penalty = self._penalty, None
        if handle is not None and handle.cancel():
            logger.info("Pending penalty cancelled on close")

    def __enter__(self) -> 'FensterGame':
        return self

    def __exit__(self, *exc) -> None:
        self.close()
