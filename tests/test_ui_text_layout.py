from sumrise.ui.layout import cell_at_point, cell_center, compute_board_geometry, point_in_rect
from sumrise.ui.text import HOW_TO_PLAY_STEPS, TRANSLATIONS, how_to_play_lines, next_language, translate
from sumrise.ui.theme import DEFAULT_THEME, THEME_COLORS, background_for, next_theme


def test_every_language_has_every_key():
    keys = set(TRANSLATIONS["en"])
    for language, table in TRANSLATIONS.items():
        assert set(table) == keys, language


def test_translate_falls_back_to_english_then_key():
    assert translate("zh", "score") == "分数"
    assert translate("klingon", "score") == "Score"
    assert translate("en", "no_such_key") == "no_such_key"


def test_language_and_theme_cycles():
    assert next_language("en") == "zh"
    assert next_language("unknown") == "en"
    assert next_theme("slate") == "dark"
    assert next_theme("unknown") == DEFAULT_THEME
    assert background_for("forest") == THEME_COLORS["forest"]
    assert background_for("neon") == THEME_COLORS[DEFAULT_THEME]


def test_row_zero_is_drawn_at_the_top():
    tile, start_x, start_y = compute_board_geometry(480, 800)
    _, top_y = cell_center(0, 0, tile, start_x, start_y)
    _, bottom_y = cell_center(9, 0, tile, start_x, start_y)
    assert top_y > bottom_y
    assert bottom_y == start_y + tile / 2


def test_cell_at_point_outside_board_is_none():
    tile, start_x, start_y = compute_board_geometry(480, 800)
    assert cell_at_point(start_x - 1, start_y + 1, 480, 800) is None
    assert cell_at_point(start_x + 1, start_y - 1, 480, 800) is None
    assert cell_at_point(start_x + 1, start_y + 1, 480, 800) == (9, 0)


def test_point_in_rect_inclusive_edges():
    rect = (10, 20, 100, 40)
    assert point_in_rect(10, 20, rect)
    assert point_in_rect(110, 60, rect)
    assert not point_in_rect(111, 60, rect)


def test_how_to_play_lines_are_translated_and_numbered():
    for language, table in TRANSLATIONS.items():
        lines = how_to_play_lines(language)
        assert lines[0] == table["how_to_play"]
        assert lines[1:] == [
            f"{index:02d}  {table[key]}" for index, key in enumerate(HOW_TO_PLAY_STEPS, start=1)
        ]
