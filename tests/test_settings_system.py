from sumrise.events.bus import EventBus, EVENT_SETTINGS_CHANGED
from sumrise.systems.settings_system import KEY_L, KEY_M, KEY_T, SettingsSystem
from sumrise.ui.text import available_languages
from sumrise.ui.theme import theme_names
from sumrise.world import create_world, get_settings


def test_keys_cycle_language_theme_and_music():
    bus = EventBus()
    world = create_world(bus)
    system = SettingsSystem(world, bus)
    changes = []
    bus.subscribe(EVENT_SETTINGS_CHANGED, lambda sender, **payload: changes.append(payload))
    settings = get_settings(world)
    start_language = settings.language
    start_theme = settings.theme

    assert system.handle_key_press(KEY_L)
    assert system.handle_key_press(KEY_T)
    assert system.handle_key_press(KEY_M)
    assert not system.handle_key_press(0)

    assert settings.language != start_language
    assert settings.theme != start_theme
    assert settings.music_on is False
    assert changes[-1] == {
        "language": settings.language,
        "theme": settings.theme,
        "music_on": False,
    }


def test_language_cycle_wraps_around():
    bus = EventBus()
    world = create_world(bus)
    system = SettingsSystem(world, bus)
    settings = get_settings(world)
    start_language = settings.language
    start_theme = settings.theme
    for _ in range(len(available_languages())):
        system.cycle_language()
    for _ in range(len(theme_names())):
        system.cycle_theme()
    assert settings.language == start_language
    assert settings.theme == start_theme
