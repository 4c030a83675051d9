"""Factory helpers for creating menu and game-over entities."""
from esper import World

from sumrise.menu.components import MenuAction, MenuBackground, MenuButton, MenuScreen, MenuTag


def spawn_main_menu(world: World, width: float, height: float) -> None:
    """Create the background and the two mode buttons."""
    center_x = width / 2
    center_y = height / 2

    world.create_entity(MenuBackground(screen=MenuScreen.MAIN), MenuTag())
    button_specs = (
        ("classic_mode", MenuAction.START_CLASSIC, center_y + 10.0),
        ("time_rush", MenuAction.START_TIMED, center_y - 74.0),
    )
    for label_key, action, y_position in button_specs:
        world.create_entity(
            MenuButton(label_key=label_key, action=action, x=center_x, y=y_position),
            MenuTag(),
        )


def spawn_game_over_menu(world: World, width: float, height: float) -> None:
    """Create the retry / main menu buttons shown after the blocks reach the top."""
    center_x = width / 2
    center_y = height / 2

    world.create_entity(MenuBackground(screen=MenuScreen.GAME_OVER), MenuTag())
    button_specs = (
        ("try_again", MenuAction.RETRY, center_y - 60.0),
        ("main_menu", MenuAction.MAIN_MENU, center_y - 140.0),
    )
    for label_key, action, y_position in button_specs:
        world.create_entity(
            MenuButton(label_key=label_key, action=action, x=center_x, y=y_position),
            MenuTag(),
        )


def clear_menu(world: World) -> None:
    """Remove all entities that are part of a menu screen."""
    to_delete: set[int] = set()
    for ent, _ in world.get_component(MenuButton):
        to_delete.add(ent)
    for ent, _ in world.get_component(MenuBackground):
        to_delete.add(ent)
    for ent, _ in world.get_component(MenuTag):
        to_delete.add(ent)
    for ent in to_delete:
        world.delete_entity(ent, immediate=True)


def current_screen(world: World) -> MenuScreen | None:
    for _, background in world.get_component(MenuBackground):
        return background.screen
    return None
