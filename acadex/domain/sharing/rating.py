"""
평점 집계: 현재 존재하는 리뷰 전체로부터 매번 새로 계산 (증분 갱신 없음)
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

MIN_RATING = 1
MAX_RATING = 5
MAX_COMMENT_LENGTH = 1000

_ONE_DECIMAL = Decimal("0.1")


def compute_rating_aggregate(ratings: Iterable[int]) -> tuple[Decimal, int]:
    """(평균, 개수). 평균은 소수 첫째 자리 반올림(half-up). 리뷰가 없으면 (0, 0)."""
    values = list(ratings)
    count = len(values)
    if count == 0:
        return Decimal("0"), 0
    average = (Decimal(sum(values)) / Decimal(count)).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)
    return average, count


def is_valid_rating(value) -> bool:
    # bool 은 int 하위 타입이라 별도 제외
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return MIN_RATING <= value <= MAX_RATING
