"""V60 레시피 채점 로직"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict

from config import DEFAULT_CONFIG, IDEAL_RECIPE, IdealRecipe, ScoringConfig
from brew_utils import clamp, round_half_up
from recipe import Recipe

logger = logging.getLogger("v60_brew")

DIMENSIONS = ("ratio", "temp", "bloom", "pours", "total", "grind")


@dataclass(frozen=True)
class ScoreBreakdown:
    score: int
    ratio: float
    temp: float
    bloom: float
    pours: float
    total: float
    grind: float
    ratio_value: float
    maxima: Dict[str, float]

    def points(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in DIMENSIONS}

    def lost(self, name: str) -> float:
        return self.maxima[name] - getattr(self, name)


def _taper(err: float, max_pts: float, tolerance: float, taper: float) -> float:
    """허용폭 안이면 만점, 밖이면 taper 거리만큼 선형으로 0점까지 내려간다."""
    # NaN, inf 는 0점
    if not math.isfinite(err):
        return 0.0
    if err <= tolerance:
        return max_pts
    return clamp(max_pts - (err - tolerance) * (max_pts / taper), 0.0, max_pts)


def ratio_points(recipe: Recipe, ideal: IdealRecipe, cfg: ScoringConfig) -> float:
    if recipe.dose <= 0:
        return 0.0
    err = abs(recipe.water / recipe.dose - ideal.ratio)
    if not math.isfinite(err):
        return 0.0
    if err <= cfg.ratio_tolerance:
        return cfg.ratio_max
    return clamp(cfg.ratio_max - (err - cfg.ratio_tolerance) * cfg.ratio_slope, 0.0, cfg.ratio_max)


def temp_points(recipe: Recipe, ideal: IdealRecipe, cfg: ScoringConfig) -> float:
    return _taper(abs(recipe.temp - ideal.temp), cfg.temp_max, cfg.temp_tolerance, cfg.temp_taper)


def bloom_points(recipe: Recipe, ideal: IdealRecipe, cfg: ScoringConfig) -> float:
    return _taper(abs(recipe.bloom - ideal.bloom), cfg.bloom_max, cfg.bloom_tolerance, cfg.bloom_taper)


def total_points(recipe: Recipe, ideal: IdealRecipe, cfg: ScoringConfig) -> float:
    return _taper(abs(recipe.total - ideal.total), cfg.total_max, cfg.total_tolerance, cfg.total_taper)


def pours_points(recipe: Recipe, ideal: IdealRecipe, cfg: ScoringConfig) -> float:
    # 테이블에 없는 거리(5 이상, 정수가 아닌 값)는 0점
    distance = abs(recipe.pours - ideal.pours)
    return clamp(cfg.pours_table.get(distance, 0.0), 0.0, cfg.pours_max)


def grind_points(recipe: Recipe, ideal: IdealRecipe, cfg: ScoringConfig) -> float:
    if not math.isfinite(recipe.grind):
        return 0.0
    if ideal.grind_min <= recipe.grind <= ideal.grind_max:
        return cfg.grind_max
    if recipe.grind < ideal.grind_min:
        distance = ideal.grind_min - recipe.grind
    else:
        distance = recipe.grind - ideal.grind_max
    return clamp(cfg.grind_max - (distance / cfg.grind_taper) * cfg.grind_max, 0.0, cfg.grind_max)


def evaluate_recipe(
    recipe: Recipe,
    ideal: IdealRecipe | None = None,
    config: ScoringConfig | None = None,
) -> ScoreBreakdown:
    ideal = ideal or IDEAL_RECIPE
    cfg = config or DEFAULT_CONFIG

    ratio = ratio_points(recipe, ideal, cfg)
    temp = temp_points(recipe, ideal, cfg)
    bloom = bloom_points(recipe, ideal, cfg)
    pours = pours_points(recipe, ideal, cfg)
    total = total_points(recipe, ideal, cfg)
    grind = grind_points(recipe, ideal, cfg)

    final_score = clamp(ratio + temp + bloom + pours + total + grind, 0.0, cfg.score_cap)
    score_int = round_half_up(final_score)

    ratio_value = recipe.water / recipe.dose if recipe.dose > 0 else float("inf")
    logger.debug(
        "[정보] 비율=%.1f(1:%.2f), 온도=%.1f, 뜸=%.1f, 푸어=%.0f, 총시간=%.1f, 분쇄=%.1f → 최종 %d점",
        ratio,
        ratio_value,
        temp,
        bloom,
        pours,
        total,
        grind,
        score_int,
    )

    return ScoreBreakdown(
        score=score_int,
        ratio=ratio,
        temp=temp,
        bloom=bloom,
        pours=pours,
        total=total,
        grind=grind,
        ratio_value=ratio_value,
        maxima={
            "ratio": cfg.ratio_max,
            "temp": cfg.temp_max,
            "bloom": cfg.bloom_max,
            "pours": cfg.pours_max,
            "total": cfg.total_max,
            "grind": cfg.grind_max,
        },
    )


def score_recipe(recipe: Recipe) -> int:
    """레시피 → 0~1000 정수 점수. 같은 입력이면 항상 같은 점수."""
    return evaluate_recipe(recipe).score
