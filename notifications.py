"""짧게 떴다 사라지는 토스트 알림"""
from __future__ import annotations

import logging
import time
from typing import Callable, Optional

logger = logging.getLogger("v60_brew")

ToastSink = Callable[[str, float], None]


class ToastChannel:
    """한 번에 하나만 보이고, duration 초 뒤 자동으로 사라진다."""

    def __init__(
        self,
        sink: Optional[ToastSink] = None,
        duration: float = 1.6,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.sink = sink
        self.duration = duration
        self._clock = clock
        self._message: Optional[str] = None
        self._expires_at = 0.0

    def publish(self, message: str) -> None:
        # 이전 토스트는 덮어쓴다
        self._message = message
        self._expires_at = self._clock() + self.duration
        logger.info("[정보] 토스트: %s", message)
        if self.sink is not None:
            self.sink(message, self.duration)

    def current(self) -> Optional[str]:
        if self._message is not None and self._clock() >= self._expires_at:
            self._message = None
        return self._message

    def dismiss(self) -> None:
        self._message = None
