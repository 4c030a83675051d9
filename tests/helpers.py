from __future__ import annotations

from typing import Mapping

from sumrise.components.block import Block
from sumrise.components.board import Board, Coord
from sumrise.constants import GRID_COLS, GRID_ROWS
from sumrise.systems.round_system import RoundSystem


def make_board(
    values: Mapping[Coord, int],
    rows: int = GRID_ROWS,
    cols: int = GRID_COLS,
) -> Board:
    """Build a board holding only the given ``{(row, col): value}`` blocks."""

    cells = []
    for r in range(rows):
        row = []
        for c in range(cols):
            value = values.get((r, c))
            row.append(Block(id=f"t{r}_{c}", value=value) if value is not None else None)
        cells.append(tuple(row))
    return Board(rows=rows, cols=cols, cells=tuple(cells))


def install_state(system: RoundSystem, **changes) -> None:
    """Replace fields of the controller's current snapshot to stage a scenario."""

    system._state = system.state.evolve(**changes)
