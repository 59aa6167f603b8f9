from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from .cards import Card
from .deck import Deck
from .topology import CELL_IDS, CORNER_IDS, GRID_LAYOUT, GRID_WIDTH, CellId, check_cell_id


@dataclass
class Cell:
    """One board position. Only `card` and `face_up` ever change."""
    id: CellId
    card: Card
    face_up: bool = False


@dataclass(frozen=True)
class CellView:
    id: CellId
    card: Card
    face_up: bool


class Board:
    """The 21 cells of a game, indexed by cell id."""

    def __init__(self, cells: List[Cell]) -> None:
        if [c.id for c in cells] != list(CELL_IDS):
            raise ValueError("Board needs exactly one cell per id, in id order")
        self._cells = cells

    @classmethod
    def deal(cls, deck: Deck) -> 'Board':
        """Deals one card per cell from the top of the deck; corners start face-up."""
        return cls([Cell(cid, deck.draw(), cid in CORNER_IDS) for cid in CELL_IDS])

    def __getitem__(self, cell_id: CellId) -> Cell:
        return self._cells[check_cell_id(cell_id)]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def cards(self) -> List[Card]:
        return [c.card for c in self._cells]

    def all_face_up(self, ids: Iterable[CellId]) -> bool:
        return all(self._cells[cid].face_up for cid in ids)

    def face_up_ids(self) -> Tuple[CellId, ...]:
        return tuple(c.id for c in self._cells if c.face_up)

    def views(self) -> Tuple[CellView, ...]:
        return tuple(CellView(c.id, c.card, c.face_up) for c in self._cells)

    def pretty(self, anchor_id: Optional[CellId] = None, show_ids: bool = False) -> str:
        """Generates a human-readable 5x5 rendering; face-down cards show as '##' (or their id)."""
        lines: List[str] = []
        for start in range(0, len(GRID_LAYOUT), GRID_WIDTH):
            row: List[str] = []
            for cid in GRID_LAYOUT[start:start + GRID_WIDTH]:
                if cid is None:
                    row.append("    ")
                    continue
                cell = self._cells[cid]
                if cell.face_up:
                    text = str(cell.card)
                elif show_ids:
                    text = f"{cid:>2}"
                else:
                    text = "##"
                mark = "*" if cid == anchor_id else " "
                row.append(f"{text:>3}{mark}")
            lines.append(" ".join(row).rstrip())
        return "\n".join(lines)
