from __future__ import annotations

from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from best_score import BestScoreTracker, MemoryStore
from brew_session import SAVED_TOAST, BrewSession
from config import BEST_SCORE_KEY
from messaging import GREETING_TEXT
from notifications import ToastChannel
from recipe import Recipe

IDEAL = Recipe(grind=6.75, temp=94, dose=15, water=250, bloom=35, total=180, pours=4)


def test_new_session_starts_hidden_on_default_recipe():
    session = BrewSession()
    assert not session.revealed
    assert session.score == 480
    assert session.share_link("123") is None
    assert session.cta_message() == GREETING_TEXT


def test_update_clamps_and_hides_result():
    session = BrewSession().reveal().update("temp", 130)
    assert session.recipe.temp == 100
    assert not session.revealed


def test_save_before_reveal_is_a_noop():
    store = MemoryStore()
    seen = []
    toasts = ToastChannel(sink=lambda message, duration: seen.append(message))
    session = BrewSession()
    assert session.save_best(BestScoreTracker(store), toasts) is session
    assert store.get(BEST_SCORE_KEY) is None
    assert seen == []


def test_save_after_reveal_commits_and_toasts():
    store = MemoryStore({BEST_SCORE_KEY: "900"})
    seen = []
    toasts = ToastChannel(sink=lambda message, duration: seen.append(message))
    session = BrewSession(recipe=IDEAL).reveal().save_best(BestScoreTracker(store), toasts)
    assert session.best == 1000
    assert store.get(BEST_SCORE_KEY) == "1000"
    assert seen == [SAVED_TOAST]

    lower = session.update("pours", 1).reveal().save_best(BestScoreTracker(store), toasts)
    assert lower.best == 1000
    assert store.get(BEST_SCORE_KEY) == "1000"


def test_share_link_and_cta_after_reveal():
    session = BrewSession().reveal()
    assert session.share_link("123") == "https://wa.me/123?text=My%20V60%20score%20is%20480%2F1000"
    assert session.cta_message() == "My V60 score is 480/1000"


def test_pours_slider_value_becomes_integer():
    session = BrewSession().update("pours", 4.0)
    assert session.recipe.pours == 4
    assert isinstance(session.recipe.pours, int)
    assert session.breakdown.pours == 100
