from dataclasses import dataclass

from sumrise.constants import BLOCK_VALUE_MAX, BLOCK_VALUE_MIN

@dataclass(frozen=True, slots=True)
class Block:
    """Numbered occupant of a board cell.

    ``id`` is assigned once when the block is generated and never changes; renderers
    key animations on it. The engine only relies on it being unique within a board.
    """
    id: str
    value: int

    def __post_init__(self) -> None:
        if not BLOCK_VALUE_MIN <= self.value <= BLOCK_VALUE_MAX:
            raise ValueError(f"Block value {self.value} outside [{BLOCK_VALUE_MIN}, {BLOCK_VALUE_MAX}]")
