"""
도메인 공통: 현재 시각 공급자 (외부 라이브러리 없음)

잠금 창(lock window) 판정은 항상 Clock.now() 기준. 테스트/재처리는 FixedClock 사용.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime:
        """timezone-aware UTC datetime."""
        ...


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """고정 시각. advance()로 앞으로만 이동."""

    def __init__(self, at: datetime) -> None:
        if at.tzinfo is None:
            at = at.replace(tzinfo=timezone.utc)
        self._at = at

    def now(self) -> datetime:
        return self._at

    def advance(self, delta) -> None:
        self._at = self._at + delta


SYSTEM_CLOCK = SystemClock()
