"""
Review Repository: Django ORM 구현

(resource, user) 유니크 제약 위반(IntegrityError)만 DuplicateReviewError 로 변환.
insert 는 savepoint 안에서 수행해 바깥 UoW 트랜잭션이 깨지지 않게 한다.
"""
from __future__ import annotations

from typing import Iterable, Optional

from acadex.domain.sharing.entities import Review
from acadex.domain.sharing.errors import DuplicateReviewError

_FIELD_MAP = {
    "reviewer_id": "user_id",
}


def _model_to_entity(m) -> Optional[Review]:
    if m is None:
        return None
    user = getattr(m, "user", None)
    return Review(
        id=m.id,
        resource_id=m.resource_id,
        reviewer_id=m.user_id,
        rating=int(m.rating),
        comment=m.comment or "",
        created_at=m.created_at,
        reviewer_name=(user.name or user.username) if user is not None else "",
    )


class DjangoReviewRepository:
    """ReviewRepository 구현."""

    def get(self, review_id: int) -> Optional[Review]:
        from apps.domains.reviews.models import Review as ReviewModel
        m = ReviewModel.objects.filter(id=review_id).select_related("user").first()
        return _model_to_entity(m)

    def get_by_resource_and_reviewer(self, resource_id: int, reviewer_id: int) -> Optional[Review]:
        from apps.domains.reviews.models import Review as ReviewModel
        m = ReviewModel.objects.filter(resource_id=resource_id, user_id=reviewer_id).first()
        return _model_to_entity(m)

    def list_for_resource(self, resource_id: int) -> list[Review]:
        from apps.domains.reviews.models import Review as ReviewModel
        qs = (
            ReviewModel.objects.filter(resource_id=resource_id)
            .select_related("user")
            .order_by("-created_at", "-id")
        )
        return [_model_to_entity(m) for m in qs]

    def ratings_for_resource(self, resource_id: int) -> list[int]:
        from apps.domains.reviews.models import Review as ReviewModel
        return list(ReviewModel.objects.filter(resource_id=resource_id).values_list("rating", flat=True))

    def add(self, review: Review) -> Review:
        from django.db import IntegrityError, transaction
        from apps.domains.reviews.models import Review as ReviewModel
        try:
            with transaction.atomic():
                m = ReviewModel.objects.create(
                    resource_id=review.resource_id,
                    user_id=review.reviewer_id,
                    rating=review.rating,
                    comment=review.comment or "",
                )
        except IntegrityError as exc:
            # savepoint 롤백 후 재조회. 중복이 아니면 (평점 범위, FK) 그대로 전달
            if self.get_by_resource_and_reviewer(review.resource_id, review.reviewer_id) is None:
                raise
            raise DuplicateReviewError() from exc
        return self.get(m.id)

    def update(self, review: Review, fields: Iterable[str]) -> Review:
        from apps.domains.reviews.models import Review as ReviewModel
        fields = list(fields)
        m = ReviewModel.objects.get(id=review.id)
        for name in fields:
            setattr(m, _FIELD_MAP.get(name, name), getattr(review, name))
        m.save(update_fields=[_FIELD_MAP.get(name, name) for name in fields] + ["updated_at"])
        return self.get(review.id)

    def delete(self, review_id: int) -> None:
        from apps.domains.reviews.models import Review as ReviewModel
        ReviewModel.objects.filter(id=review_id).delete()
