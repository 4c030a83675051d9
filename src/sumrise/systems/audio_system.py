from __future__ import annotations

import logging
from typing import Any, Callable, Dict

from esper import World

from sumrise.components.settings import Settings
from sumrise.events.bus import (
    EventBus,
    EVENT_MATCH_SUCCESS,
    EVENT_OVERSHOOT,
    EVENT_SETTINGS_CHANGED,
    EVENT_TILE_SELECTED,
)

logger = logging.getLogger(__name__)

# Built-in arcade resources; no asset files ship with the game.
SOUND_FILES: Dict[str, str] = {
    "select": ":resources:sounds/hit3.wav",
    "success": ":resources:sounds/coin5.wav",
    "error": ":resources:sounds/error4.wav",
}
SOUND_VOLUMES: Dict[str, float] = {
    "select": 0.4,
    "success": 0.4,
    "error": 0.2,
}
MUSIC_FILE = ":resources:music/funkyrobot.mp3"
MUSIC_VOLUME = 0.1


def _arcade_loader(path: str, streaming: bool = False) -> Any:
    import arcade
    return arcade.load_sound(path, streaming=streaming)


def _arcade_player(sound: Any, volume: float, loop: bool = False) -> Any:
    import arcade
    return arcade.play_sound(sound, volume=volume, loop=loop)


def _arcade_stopper(player: Any) -> None:
    import arcade
    arcade.stop_sound(player)


class AudioSystem:
    """Plays feedback sounds for selection, match and overshoot signals.

    Sound is fire-and-forget: load or playback errors are logged and swallowed here
    so they can never reach the round controller.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        loader: Callable[..., Any] | None = None,
        player: Callable[..., Any] | None = None,
        stopper: Callable[[Any], None] | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._loader = loader or _arcade_loader
        self._player = player or _arcade_player
        self._stopper = stopper or _arcade_stopper
        self._sounds: Dict[str, Any] = {}
        self._failed: set[str] = set()
        self._music: Any = None
        self._music_player: Any = None
        self.event_bus.subscribe(EVENT_TILE_SELECTED, self.on_tile_selected)
        self.event_bus.subscribe(EVENT_MATCH_SUCCESS, self.on_match_success)
        self.event_bus.subscribe(EVENT_OVERSHOOT, self.on_overshoot)
        self.event_bus.subscribe(EVENT_SETTINGS_CHANGED, self.on_settings_changed)

    def on_tile_selected(self, sender, **kwargs):
        self.play("select")

    def on_match_success(self, sender, **kwargs):
        self.play("success")

    def on_overshoot(self, sender, **kwargs):
        self.play("error")

    def on_settings_changed(self, sender, **kwargs):
        if kwargs.get("music_on"):
            self.start_music()
        else:
            self.stop_music()

    def sound_enabled(self) -> bool:
        for _, settings in self.world.get_component(Settings):
            return settings.music_on
        return True

    def play(self, name: str) -> bool:
        if not self.sound_enabled():
            return False
        sound = self._sound(name)
        if sound is None:
            return False
        try:
            self._player(sound, SOUND_VOLUMES.get(name, 0.4))
        except Exception as exc:
            logger.warning("Playback of %s sound failed: %s", name, exc)
            return False
        return True

    def start_music(self) -> None:
        if not self.sound_enabled() or self._music_player is not None:
            return
        try:
            if self._music is None:
                self._music = self._loader(MUSIC_FILE, streaming=True)
            self._music_player = self._player(self._music, MUSIC_VOLUME, loop=True)
        except Exception as exc:
            logger.warning("Background music unavailable: %s", exc)
            self._music_player = None

    def stop_music(self) -> None:
        if self._music_player is None:
            return
        player, self._music_player = self._music_player, None
        try:
            self._stopper(player)
        except Exception as exc:
            logger.warning("Could not stop background music: %s", exc)

    def _sound(self, name: str) -> Any:
        if name in self._sounds:
            return self._sounds[name]
        if name in self._failed or name not in SOUND_FILES:
            return None
        try:
            sound = self._loader(SOUND_FILES[name])
        except Exception as exc:
            logger.warning("Could not load %s sound: %s", name, exc)
            self._failed.add(name)
            return None
        self._sounds[name] = sound
        return sound
