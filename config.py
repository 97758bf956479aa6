"""앱 전역 설정과 채점 파라미터"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv

# 프로젝트 루트의 .env 로드 (배포 시 WhatsApp 번호 주입용)
load_dotenv(Path(__file__).resolve().parent / ".env")


@dataclass(frozen=True)
class IdealRecipe:
    grind_min: float = 6.0
    grind_max: float = 7.5
    temp: float = 94.0
    dose: float = 15.0
    water: float = 250.0
    bloom: float = 35.0
    total: float = 180.0
    pours: int = 4

    @property
    def ratio(self) -> float:
        return self.water / self.dose


IDEAL_RECIPE = IdealRecipe()


@dataclass(frozen=True)
class ScoringConfig:
    ratio_max: float = 250.0
    ratio_tolerance: float = 0.8
    ratio_slope: float = 120.0  # 허용폭 밖 오차 1당 감점
    temp_max: float = 150.0
    temp_tolerance: float = 4.0
    temp_taper: float = 6.0  # 허용폭 밖에서 0점까지의 거리
    bloom_max: float = 150.0
    bloom_tolerance: float = 10.0
    bloom_taper: float = 15.0
    total_max: float = 200.0
    total_tolerance: float = 30.0
    total_taper: float = 50.0
    grind_max: float = 150.0
    grind_taper: float = 2.5
    pours_max: float = 100.0
    # |pours - 4| → 점수. 거리 4의 20점은 의도된 하한이라 공식으로 바꾸지 않는다.
    pours_table: Dict[int, float] = field(
        default_factory=lambda: {0: 100.0, 1: 80.0, 2: 60.0, 3: 40.0, 4: 20.0}
    )
    score_cap: float = 1000.0


DEFAULT_CONFIG = ScoringConfig()


@dataclass(frozen=True)
class AppSettings:
    whatsapp_number: str = os.getenv("WHATSAPP_NUMBER", "")
    whatsapp_base_url: str = os.getenv("WHATSAPP_BASE_URL", "https://wa.me")
    toast_duration: float = 1.6


SETTINGS = AppSettings()

BEST_SCORE_KEY = "v60_best_score"
# gr.BrowserState 가 브라우저 localStorage 에 쓰는 이름
BROWSER_STORAGE_KEY = "pasa_v60_brew"

# 기본값은 일부러 400~500점대에 머물도록 잡아둔 레시피
DEFAULT_RECIPE_VALUES = {
    "grind": 3.5,
    "temp": 88.0,
    "dose": 13.0,
    "water": 270.0,
    "bloom": 50.0,
    "total": 150.0,
    "pours": 5,
}

BASELINE_TIPS = [
    "Baseline: <b>15g</b> → <b>250g</b>, <b>94°C</b>, bloom <b>35s</b>, <b>4 pours</b>, total ~<b>180s</b>, grind <b>6–7.5</b>.",
    "Keep movements steady; aim for an even bed and consistent flow.",
]
