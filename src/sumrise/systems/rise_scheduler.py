from __future__ import annotations

from typing import Any

from esper import World

from sumrise.components.game_state import GamePhase
from sumrise.components.pending_rise import PendingRise
from sumrise.events.bus import (
    EventBus,
    EVENT_GAME_PHASE_CHANGED,
    EVENT_RISE_DUE,
    EVENT_RISE_SCHEDULED,
    EVENT_ROUND_STARTED,
    EVENT_TICK,
)


class RiseSchedulerSystem:
    """Runs the short pause between a classic-mode match and the rise it triggers.

    Each scheduled rise is a PendingRise entity counted down on frame ticks. All of
    them are deleted as soon as a new round starts or the phase leaves PLAYING, so a
    rise never lands on a board it was not scheduled for.
    """

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_RISE_SCHEDULED, self.on_rise_scheduled)
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_ROUND_STARTED, self.on_round_started)
        self.event_bus.subscribe(EVENT_GAME_PHASE_CHANGED, self.on_phase_changed)

    def pending(self) -> list[PendingRise]:
        return [pending for _, pending in self.world.get_component(PendingRise)]

    def on_rise_scheduled(self, sender: Any, **payload: Any) -> None:
        round_id = payload.get("round_id")
        if round_id is None:
            return
        delay = max(0.0, float(payload.get("delay", 0.0)))
        self.world.create_entity(PendingRise(round_id=int(round_id), remaining=delay))

    def on_tick(self, sender: Any, **payload: Any) -> None:
        dt = payload.get("dt", 1/60)
        try:
            dt = float(dt)
        except (TypeError, ValueError):
            dt = 1/60
        due: list[tuple[int, int]] = []
        for ent, pending in self.world.get_component(PendingRise):
            pending.remaining -= dt
            if pending.remaining <= 0.0:
                due.append((ent, pending.round_id))
        for ent, round_id in due:
            # The handler may already have cancelled everything (round over).
            if not self.world.entity_exists(ent):
                continue
            self.world.delete_entity(ent, immediate=True)
            self.event_bus.emit(EVENT_RISE_DUE, round_id=round_id)

    def on_round_started(self, sender: Any, **payload: Any) -> None:
        self.cancel_all()

    def on_phase_changed(self, sender: Any, **payload: Any) -> None:
        if payload.get("new_phase") != GamePhase.PLAYING:
            self.cancel_all()

    def cancel_all(self) -> None:
        for ent, _ in list(self.world.get_component(PendingRise)):
            self.world.delete_entity(ent, immediate=True)
