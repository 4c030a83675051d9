from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from sumrise.components.round_state import RoundState
from sumrise.constants import DEFAULT_BEST_SCORE_FILE
from sumrise.events.bus import EVENT_ROUND_OVER, EVENT_ROUND_SNAPSHOT, EventBus

logger = logging.getLogger(__name__)


def default_best_score_path(module_file: Path | str = __file__) -> Path:
    """Project ``data/`` dir for a source checkout, else ``data/`` under the working directory.

    An installed package lives in site-packages, where ``parents[3]`` is not a project root.
    """
    checkout_root = Path(module_file).resolve().parents[3]
    if (checkout_root / "pyproject.toml").is_file():
        return checkout_root / "data" / DEFAULT_BEST_SCORE_FILE
    return Path.cwd() / "data" / DEFAULT_BEST_SCORE_FILE


def load_best_score(path: Path) -> int:
    """Read the stored best score; a missing or unreadable file counts as 0."""
    try:
        with Path(path).open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except FileNotFoundError:
        return 0
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Ignoring unreadable best score file %s: %s", path, exc)
        return 0
    if not isinstance(payload, dict):
        return 0
    try:
        return max(0, int(payload.get("best_score", 0)))
    except (TypeError, ValueError):
        return 0


class BestScoreSystem:
    """Persists the single best-score scalar whenever a snapshot raises it."""

    def __init__(self, event_bus: EventBus, *, save_path: Path | None = None) -> None:
        self.event_bus = event_bus
        self._save_path = Path(save_path) if save_path is not None else default_best_score_path()
        self._best_score = load_best_score(self._save_path)
        self.event_bus.subscribe(EVENT_ROUND_SNAPSHOT, self._on_snapshot)
        self.event_bus.subscribe(EVENT_ROUND_OVER, self._on_round_over)

    @property
    def best_score(self) -> int:
        return self._best_score

    @property
    def save_path(self) -> Path:
        return self._save_path

    def _on_snapshot(self, sender: Any, **payload: Any) -> None:
        snapshot: RoundState | None = payload.get("snapshot")
        if snapshot is None:
            return
        self.record(snapshot.best_score)

    def _on_round_over(self, sender: Any, **payload: Any) -> None:
        best = payload.get("best_score")
        if best is None:
            return
        self.record(int(best))

    def record(self, score: int) -> bool:
        if score <= self._best_score:
            return False
        self._best_score = score
        self.save()
        return True

    def save(self) -> None:
        try:
            self._save_path.parent.mkdir(parents=True, exist_ok=True)
            with self._save_path.open("w", encoding="utf-8") as handle:
                json.dump({"best_score": self._best_score}, handle)
        except OSError as exc:
            logger.warning("Could not save best score to %s: %s", self._save_path, exc)
