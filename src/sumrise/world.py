import random

from esper import World
from .events.bus import EventBus
from sumrise.components.game_state import GamePhase, GameState
from sumrise.components.settings import Settings


def create_world(
    event_bus: EventBus,
    initial_phase: GamePhase = GamePhase.MENU,
    *,
    settings: Settings | None = None,
    rng: random.Random | None = None,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())

    # Singleton entity carrying the phase and presentation preferences.
    world.create_entity(GameState(phase=initial_phase), settings or Settings())
    return world


def get_settings(world: World) -> Settings:
    for _, settings in world.get_component(Settings):
        return settings
    raise RuntimeError("Settings component not found")
