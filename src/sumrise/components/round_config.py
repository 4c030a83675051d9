from dataclasses import dataclass

from sumrise.constants import (
    GRID_COLS,
    GRID_ROWS,
    INITIAL_ROWS,
    POINTS_PER_BLOCK,
    RISE_DELAY,
    TARGET_MAX,
    TARGET_MIN,
    TIME_MODE_SECONDS,
)


@dataclass(frozen=True, slots=True)
class RoundConfig:
    """Fixed engine parameters read once when the round controller is built.

    ``rise_delay`` of 0 applies the classic-mode rise in the same transition as the
    match instead of scheduling it.
    """
    rows: int = GRID_ROWS
    cols: int = GRID_COLS
    initial_rows: int = INITIAL_ROWS
    target_min: int = TARGET_MIN
    target_max: int = TARGET_MAX
    points_per_block: int = POINTS_PER_BLOCK
    time_limit: int = TIME_MODE_SECONDS
    rise_delay: float = RISE_DELAY

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board needs at least one row and one column")
        if not 0 <= self.initial_rows <= self.rows:
            raise ValueError(f"initial_rows must be within [0, {self.rows}]")
        if self.target_min > self.target_max:
            raise ValueError("target_min must not exceed target_max")
        if self.time_limit < 1:
            raise ValueError("time_limit must be at least one second")
        if self.rise_delay < 0:
            raise ValueError("rise_delay must not be negative")
