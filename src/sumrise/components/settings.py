from dataclasses import dataclass

from sumrise.ui.text import DEFAULT_LANGUAGE
from sumrise.ui.theme import DEFAULT_THEME

@dataclass
class Settings:
    """Player-facing presentation preferences (kept in memory only)."""
    language: str = DEFAULT_LANGUAGE
    theme: str = DEFAULT_THEME
    music_on: bool = True
