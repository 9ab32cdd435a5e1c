"""
리뷰 Use Case: 1인 1리뷰 + 평점 집계 재계산

리뷰 기록과 집계 기록은 같은 UoW(트랜잭션) 안에서 처리. 집계 대상 Resource 는
row lock 후 현재 리뷰 전체를 다시 읽어 계산하므로 동시 수정 순서와 무관하게 수렴한다.
집계 실패 시 AggregateRefreshError 로 작업 전체 실패 (리뷰 기록도 롤백).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from acadex.application.ports.unit_of_work import UnitOfWork
from acadex.domain.shared.clock import SYSTEM_CLOCK, Clock
from acadex.domain.sharing.entities import Review, Viewer
from acadex.domain.sharing.errors import (
    AccessDeniedError,
    AggregateRefreshError,
    DuplicateReviewError,
    NotFoundError,
    SharingDomainError,
    ValidationFailedError,
)
from acadex.domain.sharing.lock import ensure_can_mutate
from acadex.domain.sharing.rating import (
    MAX_COMMENT_LENGTH,
    MAX_RATING,
    MIN_RATING,
    compute_rating_aggregate,
    is_valid_rating,
)
from acadex.domain.sharing.visibility import can_view

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RatingAggregate:
    resource_id: int
    average: Decimal
    count: int


@dataclass
class ReviewWrite:
    """submit/update 결과. aggregate 는 같은 트랜잭션에서 반영된 값."""
    review: Review
    aggregate: RatingAggregate


def _validate_rating(rating: Any) -> int:
    if not is_valid_rating(rating):
        raise ValidationFailedError(f"rating must be an integer between {MIN_RATING} and {MAX_RATING}.")
    return rating


def _validate_comment(comment: Any) -> str:
    if comment is None:
        return ""
    if not isinstance(comment, str):
        raise ValidationFailedError("comment must be a string.")
    if len(comment) > MAX_COMMENT_LENGTH:
        raise ValidationFailedError(f"comment must be at most {MAX_COMMENT_LENGTH} characters.")
    return comment


def refresh_resource_rating(uow: UnitOfWork, resource_id: int) -> RatingAggregate:
    """
    열린 UoW 안에서 호출. 현재 리뷰 전체로 평균/개수 재계산 후 저장.
    저장소 오류는 AggregateRefreshError 로 감싸 호출자에게 전달.
    """
    try:
        ratings = uow.reviews.ratings_for_resource(resource_id)
        average, count = compute_rating_aggregate(ratings)
        uow.resources.save_rating(resource_id, average, count)
    except SharingDomainError:
        raise
    except Exception as exc:
        logger.exception("Rating refresh failed | resource_id=%s", resource_id)
        raise AggregateRefreshError() from exc
    return RatingAggregate(resource_id=resource_id, average=average, count=count)


def submit_review(
    uow: UnitOfWork,
    reviewer: Optional[Viewer],
    resource_id: int,
    rating: Any,
    comment: Any = "",
) -> ReviewWrite:
    """
    (resource, reviewer) 당 1건. 사전 조회 + 저장소 유니크 제약 둘 다로 보장.
    본인 자료 리뷰는 막지 않는다.
    """
    if reviewer is None:
        raise AccessDeniedError("Authentication required to review.")
    rating = _validate_rating(rating)
    comment = _validate_comment(comment)

    with uow:
        resource = uow.resources.get_for_update(resource_id)
        if resource is None:
            raise NotFoundError("Resource not found.")
        if not can_view(reviewer, resource):
            raise AccessDeniedError()
        if uow.reviews.get_by_resource_and_reviewer(resource_id, reviewer.id) is not None:
            raise DuplicateReviewError()
        review = uow.reviews.add(
            Review(id=None, resource_id=resource_id, reviewer_id=reviewer.id, rating=rating, comment=comment)
        )
        aggregate = refresh_resource_rating(uow, resource_id)

    logger.info(
        "Review submitted | review_id=%s resource_id=%s reviewer_id=%s rating=%s",
        review.id, resource_id, reviewer.id, rating,
    )
    return ReviewWrite(review=review, aggregate=aggregate)


def update_review(
    uow: UnitOfWork,
    viewer: Optional[Viewer],
    review_id: int,
    changes: dict[str, Any],
    clock: Clock = SYSTEM_CLOCK,
) -> ReviewWrite:
    """rating / comment 부분 수정. 작성자 본인 + 생성 후 24시간 이내."""
    fields = []
    if "rating" in changes:
        changes = {**changes, "rating": _validate_rating(changes["rating"])}
        fields.append("rating")
    if "comment" in changes:
        changes = {**changes, "comment": _validate_comment(changes["comment"])}
        fields.append("comment")

    with uow:
        review = uow.reviews.get(review_id)
        if review is None:
            raise NotFoundError("Review not found.")
        ensure_can_mutate(viewer, review, clock.now())
        uow.resources.get_for_update(review.resource_id)
        for name in fields:
            setattr(review, name, changes[name])
        if fields:
            review = uow.reviews.update(review, fields)
        aggregate = refresh_resource_rating(uow, review.resource_id)

    logger.info("Review updated | review_id=%s fields=%s", review_id, ",".join(fields))
    return ReviewWrite(review=review, aggregate=aggregate)


def delete_review(
    uow: UnitOfWork,
    viewer: Optional[Viewer],
    review_id: int,
    clock: Clock = SYSTEM_CLOCK,
) -> RatingAggregate:
    with uow:
        review = uow.reviews.get(review_id)
        if review is None:
            raise NotFoundError("Review not found.")
        ensure_can_mutate(viewer, review, clock.now())
        uow.resources.get_for_update(review.resource_id)
        uow.reviews.delete(review_id)
        aggregate = refresh_resource_rating(uow, review.resource_id)

    logger.info("Review deleted | review_id=%s resource_id=%s", review_id, review.resource_id)
    return aggregate


def list_reviews(uow: UnitOfWork, viewer: Optional[Viewer], resource_id: int) -> list[Review]:
    """자료를 볼 수 있는 viewer 에게만 리뷰 목록 (최신순)."""
    with uow:
        resource = uow.resources.get(resource_id)
        if resource is None:
            raise NotFoundError("Resource not found.")
        if not can_view(viewer, resource):
            raise AccessDeniedError()
        return uow.reviews.list_for_resource(resource_id)
