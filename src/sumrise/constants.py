GRID_ROWS = 10
GRID_COLS = 6
# Rows filled with blocks when a round starts (counted from the bottom edge).
INITIAL_ROWS = 4

BLOCK_VALUE_MIN = 1
BLOCK_VALUE_MAX = 9
TARGET_MIN = 10
TARGET_MAX = 30
POINTS_PER_BLOCK = 10

# Timed mode countdown, in whole seconds, and the wall-clock length of one second.
TIME_MODE_SECONDS = 10
COUNTDOWN_PERIOD = 1.0
# Pause between a classic-mode match and the row rise that follows it.
RISE_DELAY = 0.3

WINDOW_WIDTH = 480
WINDOW_HEIGHT = 800
WINDOW_TITLE = "Sumrise"
BOTTOM_MARGIN = 90
# Space reserved above the board for the score / target header.
HUD_HEIGHT = 150

# Board maximum footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.92
BOARD_MAX_HEIGHT_PCT = 0.95

# Seconds a matched block keeps fading after it leaves the board.
FADE_DURATION = 0.35

DEFAULT_BEST_SCORE_FILE = "best_score.json"
