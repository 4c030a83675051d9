"""Entry point for the Sumrise number-matching puzzle.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, run, set_background_color, color
from sumrise.world import create_world
from sumrise.constants import WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from sumrise.events.bus import EVENT_TICK, EventBus, EVENT_MOUSE_PRESS
from sumrise.components.game_state import GamePhase
from sumrise.menu.input_system import MenuInputSystem
from sumrise.menu.render_system import MenuRenderSystem
from sumrise.systems.animation import AnimationSystem
from sumrise.systems.audio_system import AudioSystem
from sumrise.systems.best_score_system import BestScoreSystem
from sumrise.systems.countdown_system import CountdownSystem
from sumrise.systems.input import InputSystem
from sumrise.systems.render import RenderSystem
from sumrise.systems.rise_scheduler import RiseSchedulerSystem
from sumrise.systems.round_system import RoundSystem
from sumrise.systems.settings_system import SettingsSystem
from sumrise.utils.game_state import current_phase


class SumriseWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus, initial_phase=GamePhase.MENU)

        # Persistence and round control
        self.best_score_system = BestScoreSystem(self.event_bus)
        self.round_system = RoundSystem(
            self.world,
            self.event_bus,
            best_score=self.best_score_system.best_score,
        )

        # Timing systems
        self.rise_scheduler_system = RiseSchedulerSystem(self.world, self.event_bus)
        self.countdown_system = CountdownSystem(self.event_bus)

        # Feedback systems
        self.animation_system = AnimationSystem(self.world, self.event_bus)
        self.audio_system = AudioSystem(self.world, self.event_bus)
        self.settings_system = SettingsSystem(self.world, self.event_bus)

        # Menu systems
        self.menu_input_system = MenuInputSystem(
            self.world,
            self.event_bus,
            menu_size_provider=lambda: (self.width, self.height),
        )
        self.menu_render_system = MenuRenderSystem(self.world, self, lambda: self.round_system.state)

        # Interface systems
        self.input_system = InputSystem(self.event_bus, self, self.world)
        self.render_system = RenderSystem(self.world, self.event_bus, self, self.round_system.state)

        set_background_color(color.BLACK)
        self.audio_system.start_music()

    def on_draw(self):
        self.clear()
        phase = current_phase(self.world)
        if phase == GamePhase.MENU:
            self.menu_render_system.process()
            return
        self.render_system.process()
        if phase == GamePhase.GAME_OVER:
            self.menu_render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        # Route by the phase at press time so a click that starts a round is not also a tile click.
        if current_phase(self.world) == GamePhase.PLAYING:
            self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button, modifiers=modifiers)
        else:
            self.menu_input_system.handle_mouse_press(x, y, button)

    def on_key_press(self, symbol: int, modifiers: int):
        if self.settings_system.handle_key_press(symbol, modifiers):
            return
        if current_phase(self.world) == GamePhase.PLAYING:
            self.input_system.handle_key_press(symbol, modifiers)
        else:
            self.menu_input_system.handle_key_press(symbol, modifiers)


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    window = SumriseWindow()
    run()


if __name__ == "__main__":
    main()
