from typing import Any

from esper import World

from sumrise.components.animation_fade import FadeAnimation
from sumrise.constants import FADE_DURATION
from sumrise.events.bus import (EVENT_TICK, EventBus, EVENT_MATCH_SUCCESS,
                                EVENT_ROUND_STARTED, EVENT_ROW_ADVANCED)


class AnimationSystem:
    """Keeps fading ghosts of matched blocks alive for a short time after a match."""
    def __init__(self, world: World, event_bus: EventBus, duration: float = FADE_DURATION):
        self.world = world
        self.event_bus = event_bus
        self.duration = max(duration, 1e-6)
        event_bus.subscribe(EVENT_TICK, self.on_tick)
        event_bus.subscribe(EVENT_MATCH_SUCCESS, self.on_match_success)
        event_bus.subscribe(EVENT_ROW_ADVANCED, self.on_row_advanced)
        event_bus.subscribe(EVENT_ROUND_STARTED, self.on_round_started)

    def fades(self) -> list[FadeAnimation]:
        return [fade for _, fade in self.world.get_component(FadeAnimation)]

    def on_match_success(self, sender, **kwargs: Any):
        positions = kwargs.get('positions') or []
        values = kwargs.get('values') or []
        block_ids = kwargs.get('block_ids') or [''] * len(positions)
        for pos, value, block_id in zip(positions, values, block_ids):
            self.world.create_entity(FadeAnimation(pos=tuple(pos), value=int(value), block_id=block_id))

    def on_row_advanced(self, sender, **kwargs: Any):
        # Ghosts ride along with the rows they were cleared from.
        for _, fade in self.world.get_component(FadeAnimation):
            fade.pos = (fade.pos[0] - 1, fade.pos[1])

    def on_round_started(self, sender, **kwargs: Any):
        self.clear()

    def on_tick(self, sender, **kwargs: Any):
        dt = kwargs.get('dt', 1/60)
        try:
            step = float(dt) / self.duration
        except (TypeError, ValueError):
            step = (1/60) / self.duration
        finished = []
        for ent, fade in self.world.get_component(FadeAnimation):
            fade.alpha -= step
            if fade.alpha <= 0.0:
                finished.append(ent)
        for ent in finished:
            self.world.delete_entity(ent, immediate=True)

    def clear(self):
        for ent, _ in list(self.world.get_component(FadeAnimation)):
            self.world.delete_entity(ent, immediate=True)
