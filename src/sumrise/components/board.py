from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from sumrise.components.block import Block

Coord = Tuple[int, int]
Row = Tuple[Optional[Block], ...]


@dataclass(frozen=True, slots=True)
class Board:
    """Immutable rows x cols grid of optional blocks.

    Row 0 is the top (loss) edge and row ``rows - 1`` the bottom edge where new rows
    enter. Every mutation in ``sumrise.systems.board_ops`` returns a new Board.
    """
    rows: int
    cols: int
    cells: Tuple[Row, ...]

    def __post_init__(self) -> None:
        if len(self.cells) != self.rows or any(len(row) != self.cols for row in self.cells):
            raise ValueError(f"Board cells do not match {self.rows}x{self.cols}")

    @classmethod
    def empty(cls, rows: int, cols: int) -> Board:
        return cls(rows=rows, cols=cols, cells=tuple((None,) * cols for _ in range(rows)))

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def at(self, row: int, col: int) -> Optional[Block]:
        if not self.in_bounds(row, col):
            return None
        return self.cells[row][col]

    def is_occupied(self, row: int, col: int) -> bool:
        return self.at(row, col) is not None

    def occupied(self) -> Iterator[Tuple[Coord, Block]]:
        for r, row in enumerate(self.cells):
            for c, block in enumerate(row):
                if block is not None:
                    yield (r, c), block

    def block_count(self) -> int:
        return sum(1 for _ in self.occupied())
