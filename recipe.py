"""브루잉 레시피 값 타입"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Dict, Mapping

from brew_utils import RECIPE_BOUNDS, clamp_field
from config import DEFAULT_RECIPE_VALUES

FIELDS = tuple(RECIPE_BOUNDS.keys())


@dataclass(frozen=True)
class Recipe:
    grind: float
    temp: float
    dose: float
    water: float
    bloom: float
    total: float
    pours: int

    @classmethod
    def from_mapping(cls, values: Mapping[str, float]) -> "Recipe":
        missing = [name for name in FIELDS if name not in values]
        if missing:
            raise KeyError(f"레시피 항목이 빠졌어: {', '.join(missing)}")
        data = {name: float(values[name]) for name in FIELDS}
        data["pours"] = int(values["pours"])
        return cls(**data)

    def to_dict(self) -> Dict[str, float]:
        return dataclasses.asdict(self)

    def replace(self, name: str, value: float) -> "Recipe":
        if name not in FIELDS:
            raise KeyError(f"알 수 없는 레시피 항목이야: {name}")
        if name == "pours":
            value = int(value)
        return dataclasses.replace(self, **{name: value})


def clamp_recipe(recipe: Recipe) -> Recipe:
    """입력 화면 쪽 책임: 모든 항목을 슬라이더 범위 안으로 고정한다."""
    values = {name: clamp_field(name, getattr(recipe, name)) for name in FIELDS}
    return Recipe.from_mapping(values)


DEFAULT_RECIPE = Recipe.from_mapping(DEFAULT_RECIPE_VALUES)
