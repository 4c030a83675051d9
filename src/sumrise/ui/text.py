"""Translated UI strings for the supported languages."""
from typing import Dict, List

DEFAULT_LANGUAGE = "en"

# Numbered rules shown under the mode buttons on the main menu.
HOW_TO_PLAY_STEPS = ("step1", "step2", "step3")

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "en": {
        "score": "Score",
        "target": "Target",
        "time_left": "Time Left",
        "current_sum": "Current Sum",
        "classic_mode": "Classic Mode",
        "time_rush": "Time Rush",
        "how_to_play": "How to Play",
        "step1": "Select numbers that add up to the target.",
        "step2": "Numbers don't need to be adjacent.",
        "step3": "Clear blocks before they reach the top!",
        "best": "Best",
        "game_over": "Game Over",
        "reached_top": "The blocks reached the top!",
        "final_score": "Final Score",
        "best_score": "Best Score",
        "try_again": "Try Again",
        "main_menu": "Main Menu",
        "tap_to_select": "Tap to select",
        "clear_selection": "Clear selection",
        "language": "Language",
        "theme_color": "Theme Color",
        "music": "Music",
        "on": "On",
        "off": "Off",
        "description": "Combine numbers to reach the target.\nDon't let them reach the top!",
    },
    "zh": {
        "score": "分数",
        "target": "目标",
        "time_left": "剩余时间",
        "current_sum": "当前总和",
        "classic_mode": "经典模式",
        "time_rush": "计时模式",
        "how_to_play": "玩法介绍",
        "step1": "选择数字，使其总和等于目标数字。",
        "step2": "数字无需相邻，可任意组合。",
        "step3": "在方块到达顶部前将其消除！",
        "best": "最高",
        "game_over": "游戏结束",
        "reached_top": "方块已触顶！",
        "final_score": "最终得分",
        "best_score": "最高得分",
        "try_again": "再试一次",
        "main_menu": "主菜单",
        "tap_to_select": "点击选择数字",
        "clear_selection": "清除选择",
        "language": "语言",
        "theme_color": "主题颜色",
        "music": "背景音乐",
        "on": "开启",
        "off": "关闭",
        "description": "组合数字以达到目标。\n不要让它们到达顶部！",
    },
    "zh-tw": {
        "score": "分數",
        "target": "目標",
        "time_left": "剩餘時間",
        "current_sum": "當前總和",
        "classic_mode": "經典模式",
        "time_rush": "計時模式",
        "how_to_play": "玩法介紹",
        "step1": "選擇數字，使其總和等於目標數字。",
        "step2": "數字無需相鄰，可任意組合。",
        "step3": "在方塊到達頂部前將其消除！",
        "best": "最高",
        "game_over": "遊戲結束",
        "reached_top": "方塊已觸頂！",
        "final_score": "最終得分",
        "best_score": "最高得分",
        "try_again": "再試一次",
        "main_menu": "主菜單",
        "tap_to_select": "點擊選擇數字",
        "clear_selection": "清除選擇",
        "language": "語言",
        "theme_color": "主題顏色",
        "music": "背景音樂",
        "on": "開啟",
        "off": "關閉",
        "description": "組合數字以達到目標。\n不要讓它們到達頂部！",
    },
}


def available_languages() -> List[str]:
    return list(TRANSLATIONS.keys())


def translate(language: str, key: str) -> str:
    """Look up ``key`` for ``language``, falling back to English and then the key itself."""
    table = TRANSLATIONS.get(language) or TRANSLATIONS[DEFAULT_LANGUAGE]
    if key in table:
        return table[key]
    return TRANSLATIONS[DEFAULT_LANGUAGE].get(key, key)


def next_language(language: str) -> str:
    languages = available_languages()
    if language not in languages:
        return DEFAULT_LANGUAGE
    return languages[(languages.index(language) + 1) % len(languages)]


def how_to_play_lines(language: str) -> List[str]:
    """Heading followed by the numbered steps, e.g. ``"01  Select numbers..."``."""
    lines = [translate(language, "how_to_play")]
    for index, key in enumerate(HOW_TO_PLAY_STEPS, start=1):
        lines.append(f"{index:02d}  {translate(language, key)}")
    return lines
