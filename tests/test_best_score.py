from __future__ import annotations

from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from best_score import BestScoreTracker, MemoryStore, browser_tracker
from config import BEST_SCORE_KEY


def test_load_without_stored_value_is_absent():
    assert BestScoreTracker(MemoryStore()).load() is None


def test_load_treats_malformed_value_as_absent():
    store = MemoryStore({BEST_SCORE_KEY: "not-a-number"})
    assert BestScoreTracker(store).load() is None


def test_commit_keeps_the_maximum():
    tracker = BestScoreTracker(MemoryStore())
    assert tracker.commit(480) == 480
    assert tracker.commit(300) == 480
    assert tracker.commit(720) == 720
    assert tracker.load() == 720


def test_commit_is_idempotent_and_never_decreases():
    store = MemoryStore()
    tracker = BestScoreTracker(store)
    tracker.commit(650)
    stored = store.get(BEST_SCORE_KEY)
    tracker.commit(650)
    tracker.commit(100)
    assert store.get(BEST_SCORE_KEY) == stored == "650"


def test_commit_over_malformed_value_starts_from_zero():
    store = MemoryStore({BEST_SCORE_KEY: "NaN"})
    assert BestScoreTracker(store).commit(12) == 12


class RacingStore(MemoryStore):
    """첫 compare_and_set 직전에 다른 탭이 더 높은 점수를 써 넣는 상황."""

    def __init__(self, rival: str):
        super().__init__()
        self.rival = rival
        self.raced = False

    def compare_and_set(self, key, expected, value):
        if not self.raced:
            self.raced = True
            self.set(key, self.rival)
        return super().compare_and_set(key, expected, value)


def test_commit_retries_when_another_writer_wins():
    store = RacingStore(rival="900")
    tracker = BestScoreTracker(store)
    assert tracker.commit(500) == 900
    assert store.get(BEST_SCORE_KEY) == "900"


class AlwaysConflictingStore(MemoryStore):
    def compare_and_set(self, key, expected, value):
        return False


def test_commit_gives_up_after_repeated_conflicts():
    tracker = BestScoreTracker(AlwaysConflictingStore(), max_attempts=3)
    with pytest.raises(RuntimeError):
        tracker.commit(10)


def test_memory_store_compare_and_set():
    store = MemoryStore()
    assert store.compare_and_set("k", None, "1")
    assert not store.compare_and_set("k", None, "2")
    assert store.compare_and_set("k", "1", "3")
    assert store.get("k") == "3"


def test_browser_trackers_do_not_share_saves():
    browser_a = {}
    browser_b = {}
    tracker_a = browser_tracker(browser_a)
    tracker_a.commit(1000)
    assert tracker_a.snapshot() == {BEST_SCORE_KEY: "1000"}
    assert browser_tracker(browser_b).load() is None
    # 원래 dict 는 건드리지 않고 snapshot 으로만 돌려준다
    assert browser_a == {}


def test_browser_tracker_commit_keeps_other_keys():
    tracker = browser_tracker({"theme": "dark", BEST_SCORE_KEY: 300})
    assert tracker.load() == 300
    assert tracker.commit(450) == 450
    assert tracker.snapshot() == {"theme": "dark", BEST_SCORE_KEY: "450"}


@pytest.mark.parametrize("browser_data", [None, "v60_best_score=900", ["900"], 900])
def test_browser_tracker_treats_malformed_data_as_empty(browser_data):
    tracker = browser_tracker(browser_data)
    assert tracker.load() is None
    assert tracker.commit(120) == 120
    assert tracker.snapshot() == {BEST_SCORE_KEY: "120"}
