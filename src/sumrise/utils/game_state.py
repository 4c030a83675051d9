from __future__ import annotations

from esper import World

from sumrise.components.game_state import GamePhase, GameState
from sumrise.events.bus import EVENT_GAME_PHASE_CHANGED, EventBus


def get_game_state(world: World) -> GameState | None:
    for _, state in world.get_component(GameState):
        return state
    return None


def current_phase(world: World) -> GamePhase:
    state = get_game_state(world)
    if state is None:
        return GamePhase.MENU
    return state.phase


def set_game_phase(world: World, event_bus: EventBus, phase: GamePhase) -> None:
    """Update the global game phase and emit a change event when it differs."""

    state = get_game_state(world)
    if state is not None:
        previous_phase = state.phase
        if previous_phase == phase:
            return
        state.phase = phase
        event_bus.emit(EVENT_GAME_PHASE_CHANGED, previous_phase=previous_phase, new_phase=phase)
        return
    # No existing GameState component; create a new one.
    world.create_entity(GameState(phase=phase))
    event_bus.emit(EVENT_GAME_PHASE_CHANGED, previous_phase=None, new_phase=phase)
