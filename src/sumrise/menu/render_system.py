"""Rendering system responsible for drawing the menu and game-over screens."""
from typing import Callable

import arcade
from esper import World

from sumrise.components.game_state import GamePhase
from sumrise.components.round_state import RoundState
from sumrise.menu.components import MenuBackground, MenuButton, MenuScreen
from sumrise.ui.text import how_to_play_lines, translate
from sumrise.ui.theme import ACCENT_COLOR, HUD_TEXT_COLOR, background_for
from sumrise.utils.game_state import current_phase
from sumrise.world import get_settings


class MenuRenderSystem:
    """Renders menu entities while no round is being played."""

    def __init__(self, world: World, window, snapshot_provider: Callable[[], RoundState]) -> None:
        self.world = world
        self.window = window
        self._snapshot_provider = snapshot_provider

    def process(self) -> None:
        """Draw the main menu, or the game-over overlay above the frozen board."""
        if current_phase(self.world) == GamePhase.PLAYING:
            return
        settings = get_settings(self.world)
        lang = settings.language
        snapshot = self._snapshot_provider()
        width = self.window.width
        height = self.window.height

        for _, background in self.world.get_component(MenuBackground):
            if background.screen == MenuScreen.MAIN:
                arcade.draw_lrbt_rectangle_filled(0, width, 0, height, background_for(settings.theme))
                self._draw_title(lang, snapshot)
            else:
                arcade.draw_lrbt_rectangle_filled(0, width, 0, height, (0, 0, 0, 190))
                self._draw_game_over(lang, snapshot)

        for _, button in self.world.get_component(MenuButton):
            left = button.x - button.width / 2
            bottom = button.y - button.height / 2
            arcade.draw_lbwh_rectangle_filled(left, bottom, button.width, button.height, arcade.color.DARK_SLATE_BLUE)
            arcade.draw_lbwh_rectangle_outline(
                left,
                bottom,
                button.width,
                button.height,
                arcade.color.WHITE,
                border_width=2,
            )
            arcade.draw_text(
                translate(lang, button.label_key),
                button.x,
                button.y,
                arcade.color.WHITE,
                22,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )

        hint = f"L: {translate(lang, 'language')}   T: {translate(lang, 'theme_color')}   M: {translate(lang, 'music')} " + (
            translate(lang, "on") if settings.music_on else translate(lang, "off")
        )
        arcade.draw_text(hint, width / 2, 24, HUD_TEXT_COLOR, 12, anchor_x="center")

    def _draw_title(self, lang: str, snapshot: RoundState) -> None:
        cx = self.window.width / 2
        top = self.window.height
        arcade.draw_text("SUMRISE", cx, top - 140, ACCENT_COLOR, 44, anchor_x="center", bold=True)
        arcade.draw_text(
            translate(lang, "description"),
            cx,
            top - 200,
            HUD_TEXT_COLOR,
            14,
            anchor_x="center",
            align="center",
            multiline=True,
            width=int(self.window.width * 0.8),
        )
        arcade.draw_text(
            f"{translate(lang, 'best')}: {snapshot.best_score}",
            cx,
            top / 2 + 90,
            HUD_TEXT_COLOR,
            18,
            anchor_x="center",
        )
        self._draw_how_to_play(lang)

    def _draw_how_to_play(self, lang: str) -> None:
        # Panel sits below the Time Rush button.
        width = self.window.width
        panel_w = width * 0.8
        left = (width - panel_w) / 2
        top = self.window.height / 2 - 120
        heading, *steps = how_to_play_lines(lang)
        panel_h = 36 + 26 * len(steps)
        arcade.draw_lbwh_rectangle_filled(left, top - panel_h, panel_w, panel_h, (255, 255, 255, 13))
        arcade.draw_text(heading.upper(), left + 16, top - 22, (255, 255, 255, 110), 10, bold=True)
        for index, line in enumerate(steps):
            arcade.draw_text(line, left + 16, top - 48 - 26 * index, (255, 255, 255, 160), 11)

    def _draw_game_over(self, lang: str, snapshot: RoundState) -> None:
        cx = self.window.width / 2
        cy = self.window.height / 2
        arcade.draw_text(translate(lang, "game_over"), cx, cy + 170, arcade.color.WHITE, 36, anchor_x="center", bold=True)
        arcade.draw_text(translate(lang, "reached_top"), cx, cy + 130, HUD_TEXT_COLOR, 16, anchor_x="center")
        arcade.draw_text(
            f"{translate(lang, 'final_score')}: {snapshot.score}",
            cx,
            cy + 70,
            ACCENT_COLOR,
            24,
            anchor_x="center",
        )
        arcade.draw_text(
            f"{translate(lang, 'best_score')}: {snapshot.best_score}",
            cx,
            cy + 30,
            HUD_TEXT_COLOR,
            18,
            anchor_x="center",
        )
