from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Tuple

from sumrise.components.block import Block
from sumrise.components.board import Board, Coord
from sumrise.components.game_state import GamePhase, PlayMode


@dataclass(frozen=True, slots=True)
class RoundState:
    """Snapshot of everything a renderer needs after one accepted intent.

    Snapshots are never mutated; the round controller replaces its current snapshot
    with a new one on each transition. ``round_id`` increases with every started
    round so deferred work can tell which round it belongs to.
    """
    phase: GamePhase
    mode: PlayMode
    board: Board
    target: int
    selection: Tuple[Coord, ...]
    score: int
    best_score: int
    time_remaining: int
    round_id: int

    @property
    def current_sum(self) -> int:
        return sum(block.value for block in self.selected_blocks())

    @property
    def is_playing(self) -> bool:
        return self.phase == GamePhase.PLAYING

    @property
    def is_timed(self) -> bool:
        return self.mode == PlayMode.TIMED

    def is_selected(self, row: int, col: int) -> bool:
        return (row, col) in self.selection

    def selected_blocks(self) -> List[Block]:
        blocks: List[Block] = []
        for row, col in self.selection:
            block = self.board.at(row, col)
            if block is not None:
                blocks.append(block)
        return blocks

    def evolve(self, **changes) -> RoundState:
        return replace(self, **changes)
