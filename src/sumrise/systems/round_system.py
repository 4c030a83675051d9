from __future__ import annotations

import logging
import random
from typing import Any, Tuple

from esper import World

from sumrise.components.board import Board, Coord
from sumrise.components.game_state import GamePhase, PlayMode
from sumrise.components.round_config import RoundConfig
from sumrise.components.round_state import RoundState
from sumrise.events.bus import (
    EventBus,
    EVENT_COUNTDOWN_TICK,
    EVENT_MATCH_SUCCESS,
    EVENT_OVERSHOOT,
    EVENT_RETURN_TO_MENU_REQUEST,
    EVENT_RISE_DUE,
    EVENT_RISE_SCHEDULED,
    EVENT_ROUND_OVER,
    EVENT_ROUND_RESTART_REQUEST,
    EVENT_ROUND_SNAPSHOT,
    EVENT_ROUND_START_REQUEST,
    EVENT_ROUND_STARTED,
    EVENT_ROW_ADVANCED,
    EVENT_SELECTION_CLEAR_REQUEST,
    EVENT_SELECTION_CLEARED,
    EVENT_TILE_CLICK,
    EVENT_TILE_SELECTED,
)
from sumrise.systems.board_ops import (
    BlockFactory,
    initial_board,
    is_top_row_occupied,
    random_target,
    remove_cells,
    shift_coords_up,
    shift_up,
)
from sumrise.utils.game_state import set_game_phase

logger = logging.getLogger(__name__)


class RoundSystem:
    """Round controller: the only owner of the current RoundState.

    Each intent (start, click, clear, countdown tick, rise, restart, menu) is handled to
    completion, replaces the snapshot and publishes it on ``EVENT_ROUND_SNAPSHOT``.
    Board and timer intents outside the playing phase are ignored.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        config: RoundConfig | None = None,
        best_score: int = 0,
        rng: random.Random | None = None,
        factory: BlockFactory | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.config = config or RoundConfig()
        self.rng = rng or getattr(world, "random", None) or random.Random()
        self.factory = factory or BlockFactory(self.rng)
        self._round_counter = 0
        self._state = RoundState(
            phase=GamePhase.MENU,
            mode=PlayMode.CLASSIC,
            board=Board.empty(self.config.rows, self.config.cols),
            target=0,
            selection=(),
            score=0,
            best_score=max(0, int(best_score)),
            time_remaining=self.config.time_limit,
            round_id=0,
        )
        set_game_phase(self.world, self.event_bus, GamePhase.MENU)

        self.event_bus.subscribe(EVENT_ROUND_START_REQUEST, self._on_round_start_request)
        self.event_bus.subscribe(EVENT_ROUND_RESTART_REQUEST, self._on_restart_request)
        self.event_bus.subscribe(EVENT_RETURN_TO_MENU_REQUEST, self._on_return_to_menu_request)
        self.event_bus.subscribe(EVENT_TILE_CLICK, self._on_tile_click)
        self.event_bus.subscribe(EVENT_SELECTION_CLEAR_REQUEST, self._on_selection_clear_request)
        self.event_bus.subscribe(EVENT_COUNTDOWN_TICK, self._on_countdown_tick)
        self.event_bus.subscribe(EVENT_RISE_DUE, self._on_rise_due)

    @property
    def state(self) -> RoundState:
        return self._state

    @property
    def best_score(self) -> int:
        return self._state.best_score

    # ------------------------------------------------------------------
    # Intents
    # ------------------------------------------------------------------
    def start_round(self, mode: PlayMode) -> None:
        self._round_counter += 1
        cfg = self.config
        state = RoundState(
            phase=GamePhase.PLAYING,
            mode=mode,
            board=initial_board(self.factory, cfg.rows, cfg.cols, cfg.initial_rows),
            target=self._draw_target(),
            selection=(),
            score=0,
            best_score=max(self._state.best_score, self._state.score),
            time_remaining=cfg.time_limit,
            round_id=self._round_counter,
        )
        logger.debug("Starting round %d in %s mode", state.round_id, mode.value)
        self._commit(state)
        self.event_bus.emit(EVENT_ROUND_STARTED, round_id=state.round_id, mode=mode)
        self._publish()

    def restart(self) -> None:
        if self._state.phase != GamePhase.GAME_OVER:
            return
        self.start_round(self._state.mode)

    def return_to_menu(self) -> None:
        state = self._state
        if state.phase == GamePhase.MENU:
            return
        self._commit(
            state.evolve(
                phase=GamePhase.MENU,
                selection=(),
                best_score=max(state.best_score, state.score),
            )
        )
        self._publish()

    def select_cell(self, row: int, col: int) -> None:
        state = self._state
        if not state.is_playing or not state.board.is_occupied(row, col):
            return
        coord = (row, col)
        if coord in state.selection:
            selection = tuple(pos for pos in state.selection if pos != coord)
            selected = False
        else:
            selection = state.selection + (coord,)
            selected = True
        total = self._sum_of(state.board, selection)
        self.event_bus.emit(
            EVENT_TILE_SELECTED,
            row=row,
            col=col,
            selected=selected,
            current_sum=total,
        )
        if total == state.target:
            self._resolve_match(selection)
        elif total > state.target:
            self._resolve_overshoot(selection, total)
        else:
            self._commit(state.evolve(selection=selection))
            self._publish()

    def clear_selection(self) -> None:
        state = self._state
        if not state.is_playing:
            return
        self._commit(state.evolve(selection=()))
        self.event_bus.emit(EVENT_SELECTION_CLEARED, reason="player")
        self._publish()

    def tick(self) -> None:
        """One timed-mode second; at the last second the board rises and the clock resets."""
        state = self._state
        if not state.is_playing or not state.is_timed:
            return
        if state.time_remaining <= 1:
            risen = self._rise(state).evolve(time_remaining=self.config.time_limit)
            self._finish_rise(risen, reason="timeout")
            return
        self._commit(state.evolve(time_remaining=state.time_remaining - 1))
        self._publish()

    def row_advance(self, *, round_id: int | None = None, reason: str = "manual") -> None:
        """Rise the board unless the top row is occupied, in which case the round ends.

        ``round_id`` ties a deferred rise to the round that scheduled it.
        """
        state = self._state
        if not state.is_playing:
            return
        if round_id is not None and round_id != state.round_id:
            return
        self._finish_rise(self._rise(state), reason=reason)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def _resolve_match(self, selection: Tuple[Coord, ...]) -> None:
        state = self._state
        cfg = self.config
        blocks = [state.board.at(r, c) for r, c in selection]
        values = [block.value for block in blocks]
        points = cfg.points_per_block * len(selection)
        score = state.score + points
        matched = state.evolve(
            board=remove_cells(state.board, selection),
            selection=(),
            score=score,
            best_score=max(state.best_score, score),
            target=self._draw_target(),
        )
        rise_now = False
        if matched.is_timed:
            matched = matched.evolve(time_remaining=cfg.time_limit)
        elif cfg.rise_delay <= 0:
            matched = self._rise(matched)
            rise_now = True
        self._commit(matched)
        self.event_bus.emit(
            EVENT_MATCH_SUCCESS,
            positions=list(selection),
            values=values,
            block_ids=[block.id for block in blocks],
            points=points,
            score=matched.score,
            target=matched.target,
        )
        if rise_now:
            self._emit_rise_outcome(matched, reason="match")
        elif not matched.is_timed:
            self.event_bus.emit(EVENT_RISE_SCHEDULED, round_id=matched.round_id, delay=cfg.rise_delay)
        self._publish()

    def _resolve_overshoot(self, selection: Tuple[Coord, ...], total: int) -> None:
        state = self._state
        self._commit(state.evolve(selection=()))
        self.event_bus.emit(EVENT_OVERSHOOT, positions=list(selection), total=total, target=state.target)
        self._publish()

    def _rise(self, state: RoundState) -> RoundState:
        # The loss check runs on the board as it is now; shifting first would drop row 0 silently.
        if is_top_row_occupied(state.board):
            return state.evolve(
                phase=GamePhase.GAME_OVER,
                selection=(),
                best_score=max(state.best_score, state.score),
            )
        return state.evolve(
            board=shift_up(state.board, self.factory),
            selection=shift_coords_up(state.selection),
        )

    def _finish_rise(self, state: RoundState, *, reason: str) -> None:
        self._commit(state)
        self._emit_rise_outcome(state, reason=reason)
        self._publish()

    def _emit_rise_outcome(self, state: RoundState, *, reason: str) -> None:
        if state.phase == GamePhase.GAME_OVER:
            logger.debug("Round %d over with score %d", state.round_id, state.score)
            self.event_bus.emit(
                EVENT_ROUND_OVER,
                round_id=state.round_id,
                score=state.score,
                best_score=state.best_score,
            )
        else:
            self.event_bus.emit(EVENT_ROW_ADVANCED, round_id=state.round_id, reason=reason)

    def _commit(self, state: RoundState) -> None:
        self._state = state
        set_game_phase(self.world, self.event_bus, state.phase)

    def _publish(self) -> None:
        self.event_bus.emit(EVENT_ROUND_SNAPSHOT, snapshot=self._state)

    def _draw_target(self) -> int:
        return random_target(self.rng, self.config.target_min, self.config.target_max)

    @staticmethod
    def _sum_of(board: Board, selection: Tuple[Coord, ...]) -> int:
        total = 0
        for r, c in selection:
            block = board.at(r, c)
            if block is not None:
                total += block.value
        return total

    # ------------------------------------------------------------------
    # Event bus adapters
    # ------------------------------------------------------------------
    def _on_round_start_request(self, sender: Any, **payload: Any) -> None:
        mode = payload.get("mode")
        if isinstance(mode, str):
            try:
                mode = PlayMode(mode)
            except ValueError:
                return
        if not isinstance(mode, PlayMode):
            return
        self.start_round(mode)

    def _on_restart_request(self, sender: Any, **payload: Any) -> None:
        self.restart()

    def _on_return_to_menu_request(self, sender: Any, **payload: Any) -> None:
        self.return_to_menu()

    def _on_tile_click(self, sender: Any, **payload: Any) -> None:
        row = payload.get("row")
        col = payload.get("col")
        if row is None or col is None:
            return
        self.select_cell(int(row), int(col))

    def _on_selection_clear_request(self, sender: Any, **payload: Any) -> None:
        self.clear_selection()

    def _on_countdown_tick(self, sender: Any, **payload: Any) -> None:
        self.tick()

    def _on_rise_due(self, sender: Any, **payload: Any) -> None:
        round_id = payload.get("round_id")
        if round_id is None:
            return
        self.row_advance(round_id=int(round_id), reason="match")
