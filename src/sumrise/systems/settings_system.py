from __future__ import annotations

from typing import Any

from esper import World

from sumrise.components.settings import Settings
from sumrise.events.bus import EVENT_SETTINGS_CHANGED, EventBus
from sumrise.ui.text import next_language
from sumrise.ui.theme import next_theme

# Raw arcade key codes, kept here so this module does not import arcade.
KEY_L = 108
KEY_M = 109
KEY_T = 116


class SettingsSystem:
    """Cycles language and theme and toggles sound from keyboard shortcuts."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus

    def settings(self) -> Settings:
        for _, settings in self.world.get_component(Settings):
            return settings
        settings = Settings()
        self.world.create_entity(settings)
        return settings

    def handle_key_press(self, symbol: int, modifiers: int = 0) -> bool:
        if symbol == KEY_L:
            self.cycle_language()
        elif symbol == KEY_T:
            self.cycle_theme()
        elif symbol == KEY_M:
            self.toggle_music()
        else:
            return False
        return True

    def cycle_language(self) -> None:
        settings = self.settings()
        settings.language = next_language(settings.language)
        self._emit(settings)

    def cycle_theme(self) -> None:
        settings = self.settings()
        settings.theme = next_theme(settings.theme)
        self._emit(settings)

    def toggle_music(self) -> None:
        settings = self.settings()
        settings.music_on = not settings.music_on
        self._emit(settings)

    def _emit(self, settings: Settings) -> None:
        payload: dict[str, Any] = {
            "language": settings.language,
            "theme": settings.theme,
            "music_on": settings.music_on,
        }
        self.event_bus.emit(EVENT_SETTINGS_CHANGED, **payload)
