"""Game state resource describing the active high-level phase."""
from dataclasses import dataclass
from enum import Enum, auto


class GamePhase(Enum):
    """High-level phases that drive which systems accept input."""
    MENU = auto()
    PLAYING = auto()
    GAME_OVER = auto()


class PlayMode(Enum):
    """Pacing rule for a round: rise after every match, or rise on a countdown."""
    CLASSIC = "classic"
    TIMED = "timed"


@dataclass
class GameState:
    """Singleton component mirroring the round controller's current phase."""
    phase: GamePhase = GamePhase.MENU
