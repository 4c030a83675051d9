from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                        # payload: dt=float (seconds since last frame)
EVENT_COUNTDOWN_TICK = "countdown_tick"    # payload: None (one timed-mode second elapsed)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button
EVENT_TILE_CLICK = "tile_click"            # payload: row, col


# ============================================================================
# ROUND LIFECYCLE (intents)
# ============================================================================
EVENT_ROUND_START_REQUEST = "round_start_request"          # payload: mode=PlayMode
EVENT_ROUND_RESTART_REQUEST = "round_restart_request"      # payload: None
EVENT_RETURN_TO_MENU_REQUEST = "return_to_menu_request"    # payload: None
EVENT_SELECTION_CLEAR_REQUEST = "selection_clear_request"  # payload: None


# ============================================================================
# BOARD & SCORING (outbound)
# ============================================================================
EVENT_ROUND_SNAPSHOT = "round_snapshot"    # payload: snapshot=RoundState
EVENT_ROUND_STARTED = "round_started"      # payload: round_id=int, mode=PlayMode
EVENT_ROUND_OVER = "round_over"            # payload: round_id=int, score=int, best_score=int
EVENT_TILE_SELECTED = "tile_selected"      # payload: row, col, selected=bool, current_sum=int
EVENT_SELECTION_CLEARED = "selection_cleared"  # payload: reason=str
EVENT_MATCH_SUCCESS = "match_success"      # payload: positions=[(r,c),...], values=[int,...], block_ids=[str,...], points=int, score=int, target=int
EVENT_OVERSHOOT = "overshoot"              # payload: positions=[(r,c),...], total=int, target=int
EVENT_ROW_ADVANCED = "row_advanced"        # payload: round_id=int, reason=str
EVENT_RISE_SCHEDULED = "rise_scheduled"    # payload: round_id=int, delay=float
EVENT_RISE_DUE = "rise_due"                # payload: round_id=int


# ============================================================================
# GAME FLOW & SETTINGS
# ============================================================================
EVENT_GAME_PHASE_CHANGED = "game_phase_changed"    # payload: previous_phase=GamePhase|None, new_phase=GamePhase
EVENT_SETTINGS_CHANGED = "settings_changed"        # payload: language=str, theme=str, music_on=bool
