"""앱 핸들러 테스트: 최고 점수가 브라우저별로만 남는지"""
from __future__ import annotations

from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import app
from brew_session import BrewSession
from config import BEST_SCORE_KEY
from messaging import INTERESTS
from recipe import Recipe

IDEAL = Recipe(grind=6.75, temp=94, dose=15, water=250, bloom=35, total=180, pours=4)


def test_save_returns_updated_browser_data():
    outputs = app.on_save(BrewSession(recipe=IDEAL).reveal(), {})
    session, browser_data = outputs[0], outputs[-1]
    assert session.best == 1000
    assert browser_data == {BEST_SCORE_KEY: "1000"}


def test_saved_best_stays_in_its_own_browser():
    browser_a = app.on_save(BrewSession(recipe=IDEAL).reveal(), {})[-1]

    session_b = app.on_load(BrewSession(), {})[0]
    assert session_b.best is None
    message_b, _ = app.on_lead_change("Lina", INTERESTS[0], "", "", session_b, {})
    assert "score" not in message_b

    session_a = app.on_load(BrewSession(), browser_a)[0]
    assert session_a.best == 1000
    message_a, _ = app.on_lead_change("Omar", INTERESTS[0], "", "", BrewSession(), browser_a)
    assert "My latest V60 score: 1000/1000" in message_a


def test_save_before_reveal_leaves_browser_data_alone():
    outputs = app.on_save(BrewSession(recipe=IDEAL), {"theme": "dark"})
    assert outputs[0].best is None
    assert outputs[-1] == {"theme": "dark"}


def test_lower_score_does_not_replace_browser_best():
    outputs = app.on_save(BrewSession().reveal(), {BEST_SCORE_KEY: "900"})
    assert outputs[0].best == 900
    assert outputs[-1] == {BEST_SCORE_KEY: "900"}
