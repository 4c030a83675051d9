from __future__ import annotations

from typing import Any

from sumrise.components.round_state import RoundState
from sumrise.constants import COUNTDOWN_PERIOD
from sumrise.events.bus import EventBus, EVENT_COUNTDOWN_TICK, EVENT_ROUND_SNAPSHOT, EVENT_TICK


class CountdownSystem:
    """Turns frame time into one countdown tick per second for timed rounds.

    The countdown is armed only while the latest snapshot is a playing, timed round.
    Disarming drops any partial second, and a new round re-arms from zero.
    """

    def __init__(self, event_bus: EventBus, *, period: float = COUNTDOWN_PERIOD) -> None:
        if period <= 0:
            raise ValueError("Countdown period must be positive")
        self.event_bus = event_bus
        self.period = float(period)
        self._armed = False
        self._round_id: int | None = None
        self._elapsed = 0.0
        self.event_bus.subscribe(EVENT_ROUND_SNAPSHOT, self.on_snapshot)
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    @property
    def armed(self) -> bool:
        return self._armed

    @property
    def elapsed(self) -> float:
        return self._elapsed

    def on_snapshot(self, sender: Any, **payload: Any) -> None:
        snapshot: RoundState | None = payload.get("snapshot")
        if snapshot is None:
            return
        should_arm = snapshot.is_playing and snapshot.is_timed
        if not should_arm:
            self._armed = False
            self._elapsed = 0.0
            self._round_id = None
            return
        if not self._armed or self._round_id != snapshot.round_id:
            self._armed = True
            self._elapsed = 0.0
            self._round_id = snapshot.round_id

    def on_tick(self, sender: Any, **payload: Any) -> None:
        if not self._armed:
            return
        dt = payload.get("dt", 1/60)
        try:
            self._elapsed += float(dt)
        except (TypeError, ValueError):
            self._elapsed += 1/60
        # Each countdown tick can end the round and disarm us mid-loop.
        while self._armed and self._elapsed >= self.period:
            self._elapsed -= self.period
            self.event_bus.emit(EVENT_COUNTDOWN_TICK)
