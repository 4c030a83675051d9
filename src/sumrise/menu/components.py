"""Components used by the menu and game-over screens."""
from dataclasses import dataclass
from enum import Enum, auto


class MenuAction(Enum):
    """Actions that a menu button can trigger."""
    START_CLASSIC = auto()
    START_TIMED = auto()
    RETRY = auto()
    MAIN_MENU = auto()


class MenuScreen(Enum):
    MAIN = auto()
    GAME_OVER = auto()


@dataclass
class MenuButton:
    """Interactive button; ``label_key`` is looked up in the translation table when drawn."""
    label_key: str
    action: MenuAction
    x: float
    y: float
    width: float = 260.0
    height: float = 64.0


@dataclass
class MenuBackground:
    """Which screen the current menu entities belong to."""
    screen: MenuScreen = MenuScreen.MAIN


@dataclass
class MenuTag:
    """Marker component so menu entities can be cleaned up together."""
    pass
