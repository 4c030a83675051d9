from types import SimpleNamespace

import pytest

from sumrise.events.bus import EventBus
from sumrise.menu import render_system
from sumrise.menu.input_system import MenuInputSystem
from sumrise.menu.render_system import MenuRenderSystem
from sumrise.systems.round_system import RoundSystem
from sumrise.ui.text import how_to_play_lines
from sumrise.world import create_world, get_settings


class DummyWindow:
    width = 480
    height = 800


class RecordingArcade:
    """Stands in for the arcade drawing functions and keeps every drawn string."""

    color = SimpleNamespace(WHITE=(255, 255, 255), DARK_SLATE_BLUE=(72, 61, 139))

    def __init__(self):
        self.texts = []

    def draw_text(self, text, *args, **kwargs):
        self.texts.append(text)

    def draw_lrbt_rectangle_filled(self, *args, **kwargs):
        pass

    def draw_lbwh_rectangle_filled(self, *args, **kwargs):
        pass

    def draw_lbwh_rectangle_outline(self, *args, **kwargs):
        pass


@pytest.fixture
def menu_setup(monkeypatch):
    fake = RecordingArcade()
    monkeypatch.setattr(render_system, "arcade", fake)
    bus = EventBus()
    world = create_world(bus)
    window = DummyWindow()
    rounds = RoundSystem(world, bus)
    MenuInputSystem(world, bus, menu_size_provider=lambda: (window.width, window.height))
    menu_render = MenuRenderSystem(world, window, lambda: rounds.state)
    return world, fake, menu_render


def test_main_menu_draws_how_to_play_steps(menu_setup):
    world, fake, menu_render = menu_setup
    menu_render.process()

    heading, *steps = how_to_play_lines("en")
    assert heading.upper() in fake.texts
    for step in steps:
        assert step in fake.texts


def test_how_to_play_follows_language_setting(menu_setup):
    world, fake, menu_render = menu_setup
    get_settings(world).language = "zh"
    menu_render.process()

    for step in how_to_play_lines("zh")[1:]:
        assert step in fake.texts
