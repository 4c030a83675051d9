import random

import pytest

from sumrise.components.game_state import GamePhase, PlayMode
from sumrise.events.bus import (
    EventBus,
    EVENT_MOUSE_PRESS,
    EVENT_SELECTION_CLEAR_REQUEST,
    EVENT_TILE_CLICK,
)
from sumrise.systems.input import KEY_C, KEY_ESCAPE, InputSystem
from sumrise.systems.round_system import RoundSystem
from sumrise.ui.layout import cell_center, clear_button_rect, compute_board_geometry
from sumrise.world import create_world
from tests.helpers import install_state, make_board


class DummyWindow:
    width = 480
    height = 800


@pytest.fixture
def setup_input():
    bus = EventBus()
    world = create_world(bus)
    window = DummyWindow()
    rounds = RoundSystem(world, bus, rng=random.Random(2))
    input_system = InputSystem(bus, window, world)
    return bus, world, window, rounds, input_system


def _center(window, row, col):
    tile, start_x, start_y = compute_board_geometry(window.width, window.height)
    return cell_center(row, col, tile, start_x, start_y)


def test_left_click_on_cell_selects_block(setup_input):
    bus, world, window, rounds, input_system = setup_input
    rounds.start_round(PlayMode.CLASSIC)
    install_state(rounds, board=make_board({(9, 2): 3, (4, 5): 1}), target=30)
    clicks = []
    bus.subscribe(EVENT_TILE_CLICK, lambda sender, **payload: clicks.append((payload["row"], payload["col"])))

    x, y = _center(window, 9, 2)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)
    x, y = _center(window, 4, 5)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)

    assert clicks == [(9, 2), (4, 5)]
    assert rounds.state.selection == ((9, 2), (4, 5))


def test_right_click_and_clear_button_clear_selection(setup_input):
    bus, world, window, rounds, input_system = setup_input
    rounds.start_round(PlayMode.CLASSIC)
    install_state(rounds, board=make_board({(9, 2): 3}), target=30)
    rounds.select_cell(9, 2)

    bus.emit(EVENT_MOUSE_PRESS, x=0, y=0, button=4)
    assert rounds.state.selection == ()

    rounds.select_cell(9, 2)
    left, bottom, w, h = clear_button_rect(window.width, window.height)
    bus.emit(EVENT_MOUSE_PRESS, x=left + w / 2, y=bottom + h / 2, button=1)
    assert rounds.state.selection == ()


def test_clicks_outside_board_ignored(setup_input):
    bus, world, window, rounds, input_system = setup_input
    rounds.start_round(PlayMode.CLASSIC)
    clicks = []
    bus.subscribe(EVENT_TILE_CLICK, lambda sender, **payload: clicks.append(payload))
    bus.emit(EVENT_MOUSE_PRESS, x=window.width - 1, y=window.height - 1, button=1)
    assert clicks == []


def test_mouse_ignored_outside_playing(setup_input):
    bus, world, window, rounds, input_system = setup_input
    requests = []
    bus.subscribe(EVENT_SELECTION_CLEAR_REQUEST, lambda sender, **payload: requests.append(payload))
    bus.emit(EVENT_MOUSE_PRESS, x=0, y=0, button=4)
    assert requests == []


def test_keys_map_to_round_intents(setup_input):
    bus, world, window, rounds, input_system = setup_input
    assert input_system.handle_key_press(KEY_C) is False

    rounds.start_round(PlayMode.CLASSIC)
    install_state(rounds, board=make_board({(9, 2): 3}), target=30)
    rounds.select_cell(9, 2)
    assert input_system.handle_key_press(KEY_C) is True
    assert rounds.state.selection == ()

    assert input_system.handle_key_press(KEY_ESCAPE) is True
    assert rounds.state.phase == GamePhase.MENU
