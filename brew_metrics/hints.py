"""슬라이더 안내 문구와 개선 제안"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from brew_utils import RECIPE_BOUNDS
from brew_metrics.scoring import DIMENSIONS, ScoreBreakdown
from config import IDEAL_RECIPE
from recipe import Recipe


@dataclass(frozen=True)
class SliderSpec:
    field: str
    label: str
    minimum: float
    maximum: float
    step: float
    hint: str


def _spec(field: str, label: str, hint: str) -> SliderSpec:
    lo, hi, step = RECIPE_BOUNDS[field]
    return SliderSpec(field=field, label=label, minimum=lo, maximum=hi, step=step, hint=hint)


SLIDERS: List[SliderSpec] = [
    _spec("grind", "Grind (1–10)", "Sweet spot: 6–7.5"),
    _spec("temp", "Temperature (°C)", "Target: 94°C (±4)"),
    _spec("dose", "Dose (g)", "Baseline: 15g"),
    _spec("water", "Water (g)", "Baseline: 250g"),
    _spec("bloom", "Bloom (s)", "Target: 35s (±10)"),
    _spec("total", "Total Time (s)", "Target: 180s (±30)"),
    _spec("pours", "Pours", "Target: 4 pours"),
]

DIMENSION_LABELS = {
    "ratio": "Brew ratio",
    "temp": "Temperature",
    "bloom": "Bloom",
    "pours": "Pours",
    "total": "Total time",
    "grind": "Grind",
}


@dataclass
class Suggestion:
    dimension: str
    label: str
    lost_points: float
    direction: str


def _direction(dimension: str, recipe: Recipe) -> str:
    ideal = IDEAL_RECIPE
    if dimension == "ratio":
        ratio = recipe.water / recipe.dose if recipe.dose > 0 else float("inf")
        if ratio > ideal.ratio:
            return "use less water per gram (aim for 1:16.7)"
        return "use more water per gram (aim for 1:16.7)"
    if dimension == "temp":
        return "raise the temperature" if recipe.temp < ideal.temp else "lower the temperature"
    if dimension == "bloom":
        return "bloom longer" if recipe.bloom < ideal.bloom else "shorten the bloom"
    if dimension == "pours":
        return "add pours" if recipe.pours < ideal.pours else "use fewer pours"
    if dimension == "total":
        return "extend the total time" if recipe.total < ideal.total else "finish the brew sooner"
    if dimension == "grind":
        return "grind coarser" if recipe.grind < ideal.grind_min else "grind finer"
    raise KeyError(dimension)


def suggest_adjustments(
    recipe: Recipe,
    breakdown: ScoreBreakdown,
    limit: int = 3,
) -> List[Suggestion]:
    candidates = []
    for dimension in DIMENSIONS:
        lost = breakdown.lost(dimension)
        if lost <= 0:
            continue
        candidates.append((lost, dimension))
    # 감점이 큰 순, 동점이면 DIMENSIONS 순서 유지
    candidates.sort(key=lambda x: -x[0])
    results: List[Suggestion] = []
    for lost, dimension in candidates[:limit]:
        results.append(
            Suggestion(
                dimension=dimension,
                label=DIMENSION_LABELS[dimension],
                lost_points=lost,
                direction=_direction(dimension, recipe),
            )
        )
    return results
