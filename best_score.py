"""최고 점수 저장소 (브라우저 localStorage 대응)"""
from __future__ import annotations

import logging
import threading
from typing import Dict, Mapping, Optional

from config import BEST_SCORE_KEY

logger = logging.getLogger("v60_brew")


class KeyValueStore:
    """문자열 키/값 저장소 인터페이스."""

    def get(self, key: str) -> Optional[str]:  # pragma: no cover - 간단 인터페이스
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:  # pragma: no cover - 간단 인터페이스
        raise NotImplementedError

    def compare_and_set(self, key: str, expected: Optional[str], value: str) -> bool:  # pragma: no cover
        raise NotImplementedError


class MemoryStore(KeyValueStore):
    """
    dict 하나를 감싼 저장소.

    앱에서는 gr.BrowserState 에 담긴 브라우저별 dict 로 만들고, 바뀐 내용은
    snapshot() 으로 다시 브라우저에 돌려준다. 세션끼리 공유하는 값은 없다.
    """

    def __init__(self, initial: Optional[Mapping[str, object]] = None):
        self._data: Dict[str, str] = {
            str(k): str(v) for k, v in (initial or {}).items() if v is not None
        }
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def compare_and_set(self, key: str, expected: Optional[str], value: str) -> bool:
        with self._lock:
            if self._data.get(key) != expected:
                return False
            self._data[key] = value
            return True

    def snapshot(self) -> Dict[str, str]:
        with self._lock:
            return dict(self._data)


def _parse_score(raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    try:
        return int(float(raw))
    except (ValueError, OverflowError):
        logger.warning("[경고] 저장된 최고 점수가 숫자가 아니야: %r", raw)
        return None


class BestScoreTracker:
    def __init__(self, store: KeyValueStore, key: str = BEST_SCORE_KEY, max_attempts: int = 8):
        self.store = store
        self.key = key
        self.max_attempts = max_attempts

    def load(self) -> Optional[int]:
        return _parse_score(self.store.get(self.key))

    def commit(self, candidate: int) -> int:
        """max(기존값 또는 0, candidate) 를 저장하고 돌려준다."""
        for _ in range(self.max_attempts):
            raw = self.store.get(self.key)
            previous = _parse_score(raw)
            best = max(previous or 0, int(candidate))
            if previous is not None and best == previous:
                return best
            if self.store.compare_and_set(self.key, raw, str(best)):
                logger.info("[정보] 최고 점수 저장: %s → %d", previous, best)
                return best
        raise RuntimeError(f"최고 점수 저장 충돌이 계속돼서 포기했어: key={self.key}")

    def snapshot(self) -> Dict[str, str]:
        """브라우저에 돌려줄 저장소 내용."""
        if isinstance(self.store, MemoryStore):
            return self.store.snapshot()
        raw = self.store.get(self.key)
        return {} if raw is None else {self.key: raw}


def browser_tracker(browser_data: object) -> BestScoreTracker:
    """gr.BrowserState 값 → 그 브라우저 전용 트래커. 형식이 이상하면 빈 저장소."""
    if not isinstance(browser_data, Mapping):
        if browser_data is not None:
            logger.warning("[경고] 브라우저 저장 값 형식이 올바르지 않아: %r", browser_data)
        browser_data = {}
    return BestScoreTracker(MemoryStore(browser_data))
