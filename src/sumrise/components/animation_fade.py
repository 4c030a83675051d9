from dataclasses import dataclass
from typing import Tuple

@dataclass(slots=True)
class FadeAnimation:
    """Ghost of a matched block drawn while it fades out of its old cell."""
    pos: Tuple[int,int]
    value: int
    block_id: str
    alpha: float = 1.0
