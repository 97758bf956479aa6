"""brew_utils / recipe 보조 함수 테스트"""
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from brew_utils import clamp_field, format_value, round_half_up, slider_fill_percent
from recipe import DEFAULT_RECIPE, Recipe, clamp_recipe


def test_round_half_up_matches_browser_rounding():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(845.4999) == 845
    assert round_half_up(0.0) == 0


def test_clamp_field_pins_values_into_slider_range():
    assert clamp_field("temp", 120) == 100
    assert clamp_field("grind", 0.2) == 1.0
    assert clamp_field("pours", 4.6) == 5
    assert isinstance(clamp_field("pours", 2.2), int)


def test_clamp_field_rejects_unknown_field():
    with pytest.raises(KeyError):
        clamp_field("milk", 10)


def test_clamp_recipe_keeps_in_domain_values():
    wild = Recipe(grind=12, temp=70, dose=5, water=400, bloom=35, total=100, pours=9)
    clamped = clamp_recipe(wild)
    assert clamped == Recipe(grind=10, temp=85, dose=10, water=350, bloom=35, total=120, pours=6)
    assert clamp_recipe(DEFAULT_RECIPE) == DEFAULT_RECIPE


def test_slider_fill_percent():
    assert slider_fill_percent("temp", 85) == 0
    assert slider_fill_percent("temp", 100) == 100
    assert slider_fill_percent("water", 250) == 50
    assert slider_fill_percent("grind", 3.5) == 28


def test_format_value_uses_slider_units():
    assert format_value("grind", 3.5) == "3.5"
    assert format_value("temp", 88.0) == "88°C"
    assert format_value("dose", 13.5) == "13.5g"
    assert format_value("total", 150) == "150s"
    assert format_value("pours", 5) == "5"


def test_recipe_replace_returns_new_value():
    changed = DEFAULT_RECIPE.replace("temp", 94)
    assert changed.temp == 94
    assert DEFAULT_RECIPE.temp == 88
    with pytest.raises(KeyError):
        DEFAULT_RECIPE.replace("sugar", 1)


def test_recipe_from_mapping_requires_every_field():
    values = DEFAULT_RECIPE.to_dict()
    assert Recipe.from_mapping(values) == DEFAULT_RECIPE
    values.pop("bloom")
    with pytest.raises(KeyError):
        Recipe.from_mapping(values)
