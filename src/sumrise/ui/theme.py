from typing import Dict, List, Tuple

Color = Tuple[int, int, int]

DEFAULT_THEME = "dark"

# Background colours the player can cycle through.
THEME_COLORS: Dict[str, Color] = {
    "dark":        (18, 18, 20),     # #121214
    "midnight":    (15, 23, 42),     # #0f172a
    "forest":      (6, 78, 59),      # #064e3b
    "deep_purple": (46, 16, 101),    # #2e1065
    "slate":       (30, 41, 59),     # #1e293b
}

BLOCK_COLOR: Color = (51, 65, 85)
BLOCK_SELECTED_COLOR: Color = (16, 185, 129)
BLOCK_TEXT_COLOR: Color = (241, 245, 249)
GRID_LINE_COLOR: Color = (71, 85, 105)
DANGER_COLOR: Color = (239, 68, 68)
HUD_TEXT_COLOR: Color = (226, 232, 240)
ACCENT_COLOR: Color = (245, 158, 11)


def theme_names() -> List[str]:
    return list(THEME_COLORS.keys())


def background_for(theme: str) -> Color:
    return THEME_COLORS.get(theme, THEME_COLORS[DEFAULT_THEME])


def next_theme(theme: str) -> str:
    names = theme_names()
    if theme not in names:
        return DEFAULT_THEME
    return names[(names.index(theme) + 1) % len(names)]
