import pytest

from sumrise.events.bus import (
    EventBus,
    EVENT_MATCH_SUCCESS,
    EVENT_ROUND_STARTED,
    EVENT_ROW_ADVANCED,
    EVENT_TICK,
)
from sumrise.systems.animation import AnimationSystem
from sumrise.world import create_world


def _setup():
    bus = EventBus()
    world = create_world(bus)
    system = AnimationSystem(world, bus, duration=0.5)
    return bus, world, system


def _emit_match(bus):
    bus.emit(
        EVENT_MATCH_SUCCESS,
        positions=[(9, 0), (9, 1)],
        values=[4, 6],
        block_ids=["b1", "b2"],
        points=20,
        score=20,
        target=17,
    )


def test_match_spawns_fading_ghosts():
    bus, world, system = _setup()
    _emit_match(bus)
    fades = system.fades()
    assert sorted(f.block_id for f in fades) == ["b1", "b2"]
    assert all(f.alpha == 1.0 for f in fades)

    bus.emit(EVENT_TICK, dt=0.25)
    assert all(f.alpha == pytest.approx(0.5) for f in system.fades())

    bus.emit(EVENT_TICK, dt=0.3)
    assert system.fades() == []


def test_ghosts_follow_rising_rows():
    bus, world, system = _setup()
    _emit_match(bus)
    bus.emit(EVENT_ROW_ADVANCED, round_id=1, reason="match")
    assert sorted(f.pos for f in system.fades()) == [(8, 0), (8, 1)]


def test_new_round_clears_ghosts():
    bus, world, system = _setup()
    _emit_match(bus)
    bus.emit(EVENT_ROUND_STARTED, round_id=2, mode=None)
    assert system.fades() == []
