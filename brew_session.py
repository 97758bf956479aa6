"""결과 공개/최고 점수 저장 게이트"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Optional

from best_score import BestScoreTracker
from brew_metrics.scoring import ScoreBreakdown, evaluate_recipe
from brew_utils import clamp_field
from messaging import GREETING_TEXT, WHATSAPP_BASE_URL, build_deep_link, share_text
from notifications import ToastChannel
from recipe import DEFAULT_RECIPE, Recipe

SAVED_TOAST = "Saved!"


@dataclass(frozen=True)
class BrewSession:
    recipe: Recipe = DEFAULT_RECIPE
    revealed: bool = False
    best: Optional[int] = None

    @property
    def breakdown(self) -> ScoreBreakdown:
        return evaluate_recipe(self.recipe)

    @property
    def score(self) -> int:
        return self.breakdown.score

    def update(self, name: str, value: float) -> "BrewSession":
        # 값을 바꾸면 다시 공개할 때까지 결과를 숨긴다
        recipe = self.recipe.replace(name, clamp_field(name, value))
        return dataclasses.replace(self, recipe=recipe, revealed=False)

    def reveal(self) -> "BrewSession":
        return dataclasses.replace(self, revealed=True)

    def save_best(self, tracker: BestScoreTracker, toasts: Optional[ToastChannel] = None) -> "BrewSession":
        if not self.revealed:
            return self
        best = tracker.commit(self.score)
        if toasts is not None:
            toasts.publish(SAVED_TOAST)
        return dataclasses.replace(self, best=best)

    def share_link(self, destination_id: str, base_url: str = WHATSAPP_BASE_URL) -> Optional[str]:
        if not self.revealed:
            return None
        return build_deep_link(destination_id, share_text(self.score), base_url)

    def cta_message(self) -> str:
        return share_text(self.score) if self.revealed else GREETING_TEXT
