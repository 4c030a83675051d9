import json
import random

from sumrise.components.game_state import PlayMode
from sumrise.events.bus import EventBus
from sumrise.systems.best_score_system import BestScoreSystem, default_best_score_path, load_best_score
from sumrise.systems.round_system import RoundSystem
from sumrise.world import create_world
from tests.helpers import install_state, make_board


def test_missing_file_loads_as_zero(tmp_path):
    assert load_best_score(tmp_path / "nope.json") == 0


def test_corrupt_file_loads_as_zero(tmp_path):
    path = tmp_path / "best.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_best_score(path) == 0
    path.write_text(json.dumps([1, 2]), encoding="utf-8")
    assert load_best_score(path) == 0


def test_new_best_score_is_saved_on_round_over(tmp_path):
    path = tmp_path / "data" / "best.json"
    bus = EventBus()
    world = create_world(bus)
    store = BestScoreSystem(bus, save_path=path)
    rounds = RoundSystem(world, bus, best_score=store.best_score, rng=random.Random(1))
    rounds.start_round(PlayMode.CLASSIC)
    install_state(rounds, board=make_board({(0, 0): 1}), score=130)

    rounds.row_advance()

    assert store.best_score == 130
    assert json.loads(path.read_text(encoding="utf-8")) == {"best_score": 130}
    assert BestScoreSystem(EventBus(), save_path=path).best_score == 130


def test_lower_scores_do_not_overwrite(tmp_path):
    path = tmp_path / "best.json"
    path.write_text(json.dumps({"best_score": 500}), encoding="utf-8")
    store = BestScoreSystem(EventBus(), save_path=path)
    assert store.record(200) is False
    assert store.best_score == 500
    assert json.loads(path.read_text(encoding="utf-8")) == {"best_score": 500}


def test_write_failure_is_logged_not_raised(tmp_path, caplog):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    store = BestScoreSystem(EventBus(), save_path=blocker / "best.json")

    assert store.record(40) is True
    assert store.best_score == 40
    assert "Could not save best score" in caplog.text


def test_default_path_uses_checkout_data_dir(tmp_path):
    (tmp_path / "pyproject.toml").write_text("", encoding="utf-8")
    module_file = tmp_path / "src" / "sumrise" / "systems" / "best_score_system.py"
    assert default_best_score_path(module_file) == tmp_path.resolve() / "data" / "best_score.json"


def test_default_path_outside_checkout_uses_working_directory(tmp_path, monkeypatch):
    installed = tmp_path / "lib" / "python3.12" / "site-packages"
    module_file = installed / "sumrise" / "systems" / "best_score_system.py"
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    path = default_best_score_path(module_file)

    assert path == workdir.resolve() / "data" / "best_score.json"
    assert installed not in path.parents
