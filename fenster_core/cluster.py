from __future__ import annotations

from typing import FrozenSet, List, Sequence, Set

from .topology import CellId, neighbours


def connected_face_up(cells: Sequence, start_id: CellId) -> FrozenSet[CellId]:
    """
    Collects every face-up cell reachable from `start_id` through adjacent face-up cells.
    The start cell is always included. Uses an explicit stack, so depth is bounded by the board.
    """
    visited: Set[CellId] = set()
    stack: List[CellId] = [start_id]
    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)
        for nxt in neighbours(current):
            if nxt not in visited and cells[nxt].face_up:
                stack.append(nxt)
    return frozenset(visited)
