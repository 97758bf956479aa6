"""레시피 값 범위/포맷 유틸"""
from __future__ import annotations

import math
from typing import Dict, Tuple

# 필드 → (최솟값, 최댓값, 슬라이더 step)
RECIPE_BOUNDS: Dict[str, Tuple[float, float, float]] = {
    "grind": (1.0, 10.0, 0.1),
    "temp": (85.0, 100.0, 1.0),
    "dose": (10.0, 25.0, 0.5),
    "water": (150.0, 350.0, 5.0),
    "bloom": (10.0, 60.0, 1.0),
    "total": (120.0, 300.0, 5.0),
    "pours": (1.0, 6.0, 1.0),
}

UNITS = {
    "grind": "",
    "temp": "°C",
    "dose": "g",
    "water": "g",
    "bloom": "s",
    "total": "s",
    "pours": "",
}


def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def round_half_up(x: float) -> int:
    """브라우저 Math.round 와 같게 .5는 위로 올린다."""
    return int(math.floor(x + 0.5))


def clamp_field(name: str, value: float) -> float:
    if name not in RECIPE_BOUNDS:
        raise KeyError(f"알 수 없는 레시피 항목이야: {name}")
    lo, hi, _ = RECIPE_BOUNDS[name]
    clamped = clamp(float(value), lo, hi)
    if name == "pours":
        return round_half_up(clamped)
    return clamped


def slider_fill_percent(name: str, value: float) -> int:
    lo, hi, _ = RECIPE_BOUNDS[name]
    return round_half_up((clamp(value, lo, hi) - lo) / (hi - lo) * 100)


def format_value(name: str, value: float) -> str:
    if name == "grind":
        return f"{value:.1f}"
    if name == "pours":
        return str(int(value))
    if float(value).is_integer():
        text = str(int(value))
    else:
        text = f"{value:g}"
    return text + UNITS.get(name, "")
