"""Pure board transitions: row generation, rising, and clearing cells.

Every function returns a new Board and leaves its input untouched.
"""
from __future__ import annotations

import itertools
import random
from typing import Iterable, Iterator, Optional, Tuple

from sumrise.components.block import Block
from sumrise.components.board import Board, Coord, Row
from sumrise.constants import (
    BLOCK_VALUE_MAX,
    BLOCK_VALUE_MIN,
    GRID_COLS,
    GRID_ROWS,
    INITIAL_ROWS,
    TARGET_MAX,
    TARGET_MIN,
)


class BlockFactory:
    """Creates blocks with uniformly random values and never-repeating ids."""

    def __init__(self, rng: Optional[random.Random] = None, *, prefix: str = "b") -> None:
        self.rng = rng or random.Random()
        self._prefix = prefix
        self._ids: Iterator[int] = itertools.count(1)

    def new_block(self) -> Block:
        value = self.rng.randint(BLOCK_VALUE_MIN, BLOCK_VALUE_MAX)
        return Block(id=f"{self._prefix}{next(self._ids)}", value=value)

    def generate_row(self, cols: int = GRID_COLS) -> Tuple[Block, ...]:
        return tuple(self.new_block() for _ in range(cols))


def random_target(rng: random.Random, low: int = TARGET_MIN, high: int = TARGET_MAX) -> int:
    return rng.randint(low, high)


def initial_board(
    factory: BlockFactory,
    rows: int = GRID_ROWS,
    cols: int = GRID_COLS,
    filled_rows: int = INITIAL_ROWS,
) -> Board:
    """Empty board whose bottom ``filled_rows`` rows are freshly generated."""
    first_filled = rows - filled_rows
    cells: list[Row] = []
    for r in range(rows):
        if r >= first_filled:
            cells.append(factory.generate_row(cols))
        else:
            cells.append((None,) * cols)
    return Board(rows=rows, cols=cols, cells=tuple(cells))


def is_top_row_occupied(board: Board) -> bool:
    return any(cell is not None for cell in board.cells[0])


def shift_up(board: Board, factory: BlockFactory) -> Board:
    """Drop row 0, move every other row up one index and append a new bottom row.

    Blocks in row 0 are discarded, so callers check ``is_top_row_occupied`` first.
    """
    new_row = factory.generate_row(board.cols)
    return Board(rows=board.rows, cols=board.cols, cells=board.cells[1:] + (new_row,))


def remove_cells(board: Board, coords: Iterable[Coord]) -> Board:
    """Empty the given cells; nothing else moves (there is no gravity)."""
    targets = {(r, c) for r, c in coords if board.in_bounds(r, c)}
    if not targets:
        return board
    cells = tuple(
        tuple(None if (r, c) in targets else cell for c, cell in enumerate(row))
        for r, row in enumerate(board.cells)
    )
    return Board(rows=board.rows, cols=board.cols, cells=cells)


def shift_coords_up(coords: Iterable[Coord]) -> Tuple[Coord, ...]:
    """Follow selected cells through a rise; anything that would leave the top is dropped."""
    return tuple((r - 1, c) for r, c in coords if r - 1 >= 0)
