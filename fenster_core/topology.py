from __future__ import annotations

from typing import Dict, FrozenSet, Optional, Sequence, Tuple

from .errors import UnknownCellError

CellId = int
Window = Tuple[int, int]  # inclusive (min_rank, max_rank)

CELL_COUNT = 21
CELL_IDS: Tuple[CellId, ...] = tuple(range(CELL_COUNT))

# 5x5 grid, row-major; None marks the four empty slots of the diamond.
GRID_LAYOUT: Tuple[Optional[CellId], ...] = (
    0, 1, 2, 3, 4,
    5, None, 6, None, 7,
    8, 9, 10, 11, 12,
    13, None, 14, None, 15,
    16, 17, 18, 19, 20,
)
GRID_WIDTH = 5

OUTER_IDS: Tuple[CellId, ...] = (0, 1, 2, 3, 4, 5, 7, 8, 12, 13, 15, 16, 17, 18, 19, 20)
INNER_EDGE_IDS: Tuple[CellId, ...] = (6, 9, 11, 14)
CENTER_ID: CellId = 10
CORNER_IDS: Tuple[CellId, ...] = (0, 4, 16, 20)

OUTER = "outer"
INNER_EDGE = "inner"
CENTER = "center"

EDGES: Tuple[Tuple[CellId, CellId], ...] = (
    (0, 1), (1, 2), (2, 3), (3, 4), (0, 5), (4, 7), (5, 8), (6, 9), (6, 11), (7, 12),
    (8, 9), (9, 10), (10, 11), (11, 12), (8, 13), (12, 15), (13, 16), (14, 17), (14, 19),
    (15, 20), (16, 17), (17, 18), (18, 19), (19, 20),
)

# Two horizontal lines, then two vertical ones.
AXIS_LINES: Tuple[Tuple[CellId, ...], ...] = (
    (0, 1, 2, 3, 4),
    (16, 17, 18, 19, 20),
    (0, 5, 8, 13, 16),
    (4, 7, 12, 15, 20),
)


def _build_neighbours() -> Dict[CellId, FrozenSet[CellId]]:
    acc: Dict[CellId, set] = {cid: set() for cid in CELL_IDS}
    for a, b in EDGES:
        acc[a].add(b)
        acc[b].add(a)
    return {cid: frozenset(ns) for cid, ns in acc.items()}


NEIGHBOURS: Dict[CellId, FrozenSet[CellId]] = _build_neighbours()
_EDGE_SET: FrozenSet[FrozenSet[CellId]] = frozenset(frozenset(e) for e in EDGES)


def check_cell_id(cell_id: CellId) -> CellId:
    if not isinstance(cell_id, int) or isinstance(cell_id, bool) or not 0 <= cell_id < CELL_COUNT:
        raise UnknownCellError(f"No such cell: {cell_id!r}")
    return cell_id


def role(cell_id: CellId) -> str:
    """Returns OUTER, INNER_EDGE or CENTER for a cell id."""
    check_cell_id(cell_id)
    if cell_id == CENTER_ID:
        return CENTER
    if cell_id in INNER_EDGE_IDS:
        return INNER_EDGE
    return OUTER


def is_adjacent(a: CellId, b: CellId) -> bool:
    return frozenset((a, b)) in _EDGE_SET


def neighbours(cell_id: CellId) -> FrozenSet[CellId]:
    return NEIGHBOURS[check_cell_id(cell_id)]


def betweenness(cell_id: CellId, cells: Sequence) -> Optional[Window]:
    """
    Finds the inside/outside window for an outer cell.

    `cells` is indexed by cell id; each entry exposes `face_up` and `card`.
    The first axis line on which both immediate neighbours of `cell_id` are
    face-up gives the window. Two face-up corners never form a window.
    """
    for line in AXIS_LINES:
        if cell_id not in line:
            continue
        idx = line.index(cell_id)
        if idx == 0 or idx == len(line) - 1:
            continue
        prev_id, next_id = line[idx - 1], line[idx + 1]
        prev_cell, next_cell = cells[prev_id], cells[next_id]
        if prev_cell.face_up and next_cell.face_up:
            if prev_id in CORNER_IDS and next_id in CORNER_IDS:
                return None
            lo, hi = sorted((prev_cell.card.rank, next_cell.card.rank))
            return lo, hi
    return None
