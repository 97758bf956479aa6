"""항목별 점수 레이더 차트 미니 뷰 생성"""
from __future__ import annotations

from typing import List, Tuple

import numpy as np
from PIL import Image, ImageDraw

from brew_metrics.hints import DIMENSION_LABELS
from brew_metrics.scoring import DIMENSIONS, ScoreBreakdown


def _vertices(cx: float, cy: float, radius: float, fractions: np.ndarray) -> List[Tuple[float, float]]:
    # 12시 방향에서 시계 방향으로 축을 배치
    angles = -np.pi / 2 + np.arange(len(fractions)) * (2 * np.pi / len(fractions))
    xs = cx + np.cos(angles) * radius * fractions
    ys = cy + np.sin(angles) * radius * fractions
    return [(float(x), float(y)) for x, y in zip(xs, ys)]


def score_fractions(breakdown: ScoreBreakdown) -> np.ndarray:
    points = np.array([getattr(breakdown, name) for name in DIMENSIONS], dtype=float)
    maxima = np.array([breakdown.maxima[name] for name in DIMENSIONS], dtype=float)
    return np.clip(points / maxima, 0.0, 1.0)


def generate_radar_image(breakdown: ScoreBreakdown, size: int = 320) -> Image.Image:
    canvas = Image.new("RGBA", (size, size), (22, 19, 16, 255))
    draw = ImageDraw.Draw(canvas)
    cx = cy = size / 2
    radius = size / 2 - 42
    n = len(DIMENSIONS)

    # 눈금 육각형
    for level in (0.25, 0.5, 0.75, 1.0):
        ring = _vertices(cx, cy, radius, np.full(n, level))
        draw.polygon(ring, outline=(90, 80, 70, 255))
    for x, y in _vertices(cx, cy, radius, np.ones(n)):
        draw.line((cx, cy, x, y), fill=(70, 62, 54, 255))

    fractions = score_fractions(breakdown)
    overlay = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
    ov_draw = ImageDraw.Draw(overlay)
    shape = _vertices(cx, cy, radius, fractions)
    ov_draw.polygon(shape, fill=(201, 140, 76, 150), outline=(240, 190, 120, 255))
    canvas = Image.alpha_composite(canvas, overlay)

    draw = ImageDraw.Draw(canvas)
    for (px, py), frac in zip(shape, fractions):
        color = (62, 167, 106) if frac >= 1.0 else (240, 190, 120)
        draw.ellipse((px - 4, py - 4, px + 4, py + 4), fill=color, outline=(0, 0, 0))

    for name, (lx, ly) in zip(DIMENSIONS, _vertices(cx, cy, radius + 22, np.ones(n))):
        label = DIMENSION_LABELS[name]
        pts = getattr(breakdown, name)
        text = f"{label} {pts:.0f}"
        width = draw.textlength(text)
        draw.text((lx - width / 2, ly - 6), text, fill=(230, 220, 205))

    return canvas
