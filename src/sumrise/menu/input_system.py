"""Input handling for the main menu and game-over screens."""
from typing import Callable

from esper import World

from sumrise.components.game_state import GamePhase, PlayMode
from sumrise.events.bus import (
    EVENT_GAME_PHASE_CHANGED,
    EVENT_RETURN_TO_MENU_REQUEST,
    EVENT_ROUND_RESTART_REQUEST,
    EVENT_ROUND_START_REQUEST,
    EventBus,
)
from sumrise.menu.components import MenuAction, MenuButton
from sumrise.menu.factory import clear_menu, spawn_game_over_menu, spawn_main_menu
from sumrise.utils.game_state import current_phase

# arcade.key codes, avoided as imports to keep loose coupling.
KEY_ENTER = 65421  # keypad enter
KEY_RETURN = 65293
KEY_ESCAPE = 65307
KEY_1 = 49
KEY_2 = 50
KEY_R = 114


class MenuInputSystem:
    """Keeps the menu entities in step with the phase and turns button presses into intents."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        menu_size_provider: Callable[[], tuple[float, float]] | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._menu_size_provider = menu_size_provider or (lambda: (480.0, 800.0))
        event_bus.subscribe(EVENT_GAME_PHASE_CHANGED, self.on_phase_changed)
        self._spawn_for_phase(current_phase(self.world))

    def on_phase_changed(self, sender, **payload) -> None:
        new_phase = payload.get("new_phase")
        if isinstance(new_phase, GamePhase):
            self._spawn_for_phase(new_phase)

    def handle_mouse_press(self, x: float, y: float, button: int) -> None:
        """Activate the button under the cursor."""
        if current_phase(self.world) == GamePhase.PLAYING:
            return
        for _, menu_button in list(self.world.get_component(MenuButton)):
            if self._point_inside_button(x, y, menu_button):
                self.activate(menu_button.action)
                return

    def handle_key_press(self, symbol: int, modifiers: int = 0) -> bool:
        phase = current_phase(self.world)
        if phase == GamePhase.MENU:
            if symbol in (KEY_1, KEY_ENTER, KEY_RETURN):
                self.activate(MenuAction.START_CLASSIC)
                return True
            if symbol == KEY_2:
                self.activate(MenuAction.START_TIMED)
                return True
        elif phase == GamePhase.GAME_OVER:
            if symbol in (KEY_R, KEY_ENTER, KEY_RETURN):
                self.activate(MenuAction.RETRY)
                return True
            if symbol == KEY_ESCAPE:
                self.activate(MenuAction.MAIN_MENU)
                return True
        return False

    def activate(self, action: MenuAction) -> None:
        if action == MenuAction.START_CLASSIC:
            self.event_bus.emit(EVENT_ROUND_START_REQUEST, mode=PlayMode.CLASSIC)
        elif action == MenuAction.START_TIMED:
            self.event_bus.emit(EVENT_ROUND_START_REQUEST, mode=PlayMode.TIMED)
        elif action == MenuAction.RETRY:
            self.event_bus.emit(EVENT_ROUND_RESTART_REQUEST)
        elif action == MenuAction.MAIN_MENU:
            self.event_bus.emit(EVENT_RETURN_TO_MENU_REQUEST)

    def _spawn_for_phase(self, phase: GamePhase) -> None:
        clear_menu(self.world)
        width, height = self._menu_size_provider()
        if phase == GamePhase.MENU:
            spawn_main_menu(self.world, width, height)
        elif phase == GamePhase.GAME_OVER:
            spawn_game_over_menu(self.world, width, height)

    @staticmethod
    def _point_inside_button(x: float, y: float, button: MenuButton) -> bool:
        half_w = button.width / 2
        half_h = button.height / 2
        return (
            button.x - half_w <= x <= button.x + half_w
            and button.y - half_h <= y <= button.y + half_h
        )
