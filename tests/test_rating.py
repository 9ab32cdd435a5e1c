"""평점 집계 계산 단위 테스트."""

from decimal import Decimal

import pytest

from acadex.domain.sharing.rating import compute_rating_aggregate, is_valid_rating


class TestComputeRatingAggregate:

    def test_empty_is_zero(self):
        assert compute_rating_aggregate([]) == (Decimal("0"), 0)

    def test_mean_of_two(self):
        assert compute_rating_aggregate([5, 3]) == (Decimal("4.0"), 2)

    @pytest.mark.parametrize(
        "ratings, expected",
        [
            ([4, 4, 5], Decimal("4.3")),   # 4.333...
            ([1, 2], Decimal("1.5")),
            ([5, 4, 4, 4], Decimal("4.3")),  # 4.25 -> half-up
            ([1, 1, 2, 2, 2, 2, 2, 2], Decimal("1.8")),  # 1.75 -> half-up
        ],
    )
    def test_rounds_half_up_to_one_decimal(self, ratings, expected):
        average, count = compute_rating_aggregate(ratings)
        assert average == expected
        assert count == len(ratings)

    def test_accepts_generator(self):
        assert compute_rating_aggregate(r for r in [2, 3]) == (Decimal("2.5"), 2)


class TestIsValidRating:

    @pytest.mark.parametrize("value", [1, 2, 3, 4, 5])
    def test_in_range(self, value):
        assert is_valid_rating(value)

    @pytest.mark.parametrize("value", [0, 6, -1, 4.5, "4", None, True])
    def test_rejected(self, value):
        assert not is_valid_rating(value)
