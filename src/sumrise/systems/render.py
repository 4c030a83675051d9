from typing import Any

from esper import World

from sumrise.components.animation_fade import FadeAnimation
from sumrise.components.game_state import GamePhase
from sumrise.components.round_state import RoundState
from sumrise.events.bus import EventBus, EVENT_ROUND_SNAPSHOT, EVENT_TICK
from sumrise.ui.layout import cell_center, clear_button_rect, compute_board_geometry
from sumrise.ui.text import translate
from sumrise.ui.theme import (
    ACCENT_COLOR,
    BLOCK_COLOR,
    BLOCK_SELECTED_COLOR,
    BLOCK_TEXT_COLOR,
    DANGER_COLOR,
    GRID_LINE_COLOR,
    HUD_TEXT_COLOR,
    background_for,
)
from sumrise.utils.game_state import current_phase
from sumrise.world import get_settings

PADDING = 4


class RenderSystem:
    """Draws the board and HUD from the latest round snapshot only."""

    def __init__(self, world: World, event_bus: EventBus, window, snapshot: RoundState | None = None):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.snapshot: RoundState | None = snapshot
        self._time = 0.0
        self._last_tile_layout: dict[tuple[int, int], dict[str, Any]] = {}
        self.event_bus.subscribe(EVENT_ROUND_SNAPSHOT, self.on_snapshot)
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    def on_snapshot(self, sender, **kwargs):
        snapshot = kwargs.get('snapshot')
        if snapshot is not None:
            self.snapshot = snapshot

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        try:
            self._time += float(dt)
        except (TypeError, ValueError):
            self._time += 1/60

    @property
    def tile_layout(self) -> dict[tuple[int, int], dict[str, Any]]:
        return self._last_tile_layout

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        snapshot = self.snapshot
        if snapshot is None or current_phase(self.world) == GamePhase.MENU:
            self._last_tile_layout = {}
            return
        board = snapshot.board
        tile_size, start_x, start_y = compute_board_geometry(
            self.window.width, self.window.height, board.rows, board.cols
        )
        self._build_layout(snapshot, tile_size, start_x, start_y)
        if headless:
            return

        settings = get_settings(self.world)
        lang = settings.language
        arcade.draw_lrbt_rectangle_filled(0, self.window.width, 0, self.window.height, background_for(settings.theme))
        board_w = board.cols * tile_size
        board_h = board.rows * tile_size
        arcade.draw_lbwh_rectangle_filled(start_x, start_y, board_w, board_h, (0, 0, 0, 90))
        arcade.draw_lbwh_rectangle_outline(start_x, start_y, board_w, board_h, GRID_LINE_COLOR, border_width=2)
        # Danger line under the top row: a rise with anything above it ends the round.
        danger_y = start_y + (board.rows - 1) * tile_size
        arcade.draw_line(start_x, danger_y, start_x + board_w, danger_y, (*DANGER_COLOR, 160), 2)

        draw_size = max(tile_size - PADDING, 4)
        font_size = max(int(tile_size * 0.38), 10)
        for (row, col), entry in self._last_tile_layout.items():
            cx, cy = entry["center"]
            fill = BLOCK_SELECTED_COLOR if entry["selected"] else BLOCK_COLOR
            if row == 0:
                fill = DANGER_COLOR
            arcade.draw_lbwh_rectangle_filled(cx - draw_size / 2, cy - draw_size / 2, draw_size, draw_size, fill)
            if entry["selected"]:
                arcade.draw_lbwh_rectangle_outline(
                    cx - draw_size / 2, cy - draw_size / 2, draw_size, draw_size, arcade.color.WHITE, border_width=3
                )
            arcade.draw_text(
                str(entry["value"]), cx, cy, BLOCK_TEXT_COLOR, font_size,
                anchor_x="center", anchor_y="center", bold=True,
            )

        for _, fade in self.world.get_component(FadeAnimation):
            row, col = fade.pos
            if not board.in_bounds(row, col):
                continue
            cx, cy = cell_center(row, col, tile_size, start_x, start_y, board.rows)
            alpha = max(0, min(255, int(255 * fade.alpha)))
            arcade.draw_lbwh_rectangle_filled(
                cx - draw_size / 2, cy - draw_size / 2, draw_size, draw_size, (*BLOCK_SELECTED_COLOR, alpha)
            )
            arcade.draw_text(
                str(fade.value), cx, cy, (*BLOCK_TEXT_COLOR, alpha), font_size,
                anchor_x="center", anchor_y="center", bold=True,
            )

        self._render_hud(arcade, snapshot, lang, start_y + board_h)
        self._render_clear_button(arcade, snapshot, lang)

    def _build_layout(self, snapshot: RoundState, tile_size: float, start_x: float, start_y: float) -> None:
        layout: dict[tuple[int, int], dict[str, Any]] = {}
        for (row, col), block in snapshot.board.occupied():
            layout[(row, col)] = {
                "block_id": block.id,
                "value": block.value,
                "center": cell_center(row, col, tile_size, start_x, start_y, snapshot.board.rows),
                "size": tile_size,
                "selected": snapshot.is_selected(row, col),
            }
        self._last_tile_layout = layout

    def _render_hud(self, arcade, snapshot: RoundState, lang: str, board_top: float) -> None:
        width = self.window.width
        top = self.window.height
        arcade.draw_text(f"{translate(lang, 'score')}: {snapshot.score}", 16, top - 36, HUD_TEXT_COLOR, 16)
        arcade.draw_text(
            f"{translate(lang, 'best')}: {snapshot.best_score}", width - 16, top - 36, HUD_TEXT_COLOR, 16,
            anchor_x="right",
        )
        arcade.draw_text(translate(lang, "target"), width / 2, top - 40, HUD_TEXT_COLOR, 14, anchor_x="center")
        arcade.draw_text(
            str(snapshot.target), width / 2, top - 92, ACCENT_COLOR, 40, anchor_x="center", bold=True
        )
        arcade.draw_text(
            f"{translate(lang, 'current_sum')}: {snapshot.current_sum}",
            16, board_top + 12, HUD_TEXT_COLOR, 14,
        )
        if snapshot.is_timed:
            # Pulse the clock during the last three seconds.
            urgent = snapshot.time_remaining <= 3 and int(self._time * 4) % 2 == 0
            arcade.draw_text(
                f"{translate(lang, 'time_left')}: {snapshot.time_remaining}",
                width - 16, board_top + 12, DANGER_COLOR if urgent else HUD_TEXT_COLOR, 14,
                anchor_x="right",
            )

    def _render_clear_button(self, arcade, snapshot: RoundState, lang: str) -> None:
        left, bottom, w, h = clear_button_rect(self.window.width, self.window.height)
        label = translate(lang, "clear_selection") if snapshot.selection else translate(lang, "tap_to_select")
        color = arcade.color.WHITE if snapshot.selection else arcade.color.GRAY
        arcade.draw_lbwh_rectangle_outline(left, bottom, w, h, color, border_width=2)
        arcade.draw_text(label, left + w / 2, bottom + h / 2, color, 14, anchor_x="center", anchor_y="center")
