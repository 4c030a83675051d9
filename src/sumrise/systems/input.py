from sumrise.events.bus import (
    EventBus,
    EVENT_MOUSE_PRESS,
    EVENT_RETURN_TO_MENU_REQUEST,
    EVENT_SELECTION_CLEAR_REQUEST,
    EVENT_TILE_CLICK,
)
from sumrise.components.game_state import GamePhase
from sumrise.ui.layout import cell_at_point, clear_button_rect, point_in_rect
from sumrise.utils.game_state import current_phase

# arcade.MOUSE_BUTTON_LEFT / arcade.MOUSE_BUTTON_RIGHT
MOUSE_BUTTON_LEFT = 1
MOUSE_BUTTON_RIGHT = 4
# arcade.key.ESCAPE, arcade.key.BACKSPACE, arcade.key.C
KEY_ESCAPE = 65307
KEY_BACKSPACE = 65288
KEY_C = 99


class InputSystem:
    """Translates window input into round intents while a round is being played."""
    def __init__(self, event_bus: EventBus, window, world=None):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        if not self._playing():
            return
        # Right click always drops the current selection.
        if button == MOUSE_BUTTON_RIGHT:
            self.event_bus.emit(EVENT_SELECTION_CLEAR_REQUEST)
            return
        if button != MOUSE_BUTTON_LEFT:
            return
        width, height = self.window.width, self.window.height
        if point_in_rect(x, y, clear_button_rect(width, height)):
            self.event_bus.emit(EVENT_SELECTION_CLEAR_REQUEST)
            return
        cell = cell_at_point(x, y, width, height)
        if cell is not None:
            row, col = cell
            self.event_bus.emit(EVENT_TILE_CLICK, row=row, col=col)

    def handle_key_press(self, symbol: int, modifiers: int = 0) -> bool:
        if not self._playing():
            return False
        if symbol == KEY_ESCAPE:
            self.event_bus.emit(EVENT_RETURN_TO_MENU_REQUEST)
            return True
        if symbol in (KEY_C, KEY_BACKSPACE):
            self.event_bus.emit(EVENT_SELECTION_CLEAR_REQUEST)
            return True
        return False

    def _playing(self) -> bool:
        if self.world is None:
            return True
        return current_phase(self.world) == GamePhase.PLAYING
