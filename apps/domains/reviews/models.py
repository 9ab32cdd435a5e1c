# PATH: apps/domains/reviews/models.py

from django.conf import settings
from django.core.validators import MaxLengthValidator, MaxValueValidator, MinValueValidator
from django.db import models

from apps.core.models import TimestampModel


class Review(TimestampModel):
    """
    자료 평점/코멘트.
    (resource, user) 당 1건: DB 유니크 제약으로 강제 (동시 제출 경합 포함).
    """

    resource = models.ForeignKey(
        "resources.Resource",
        on_delete=models.CASCADE,
        related_name="reviews",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="reviews",
    )

    rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(5)],
    )
    comment = models.TextField(blank=True, default="", validators=[MaxLengthValidator(1000)])

    class Meta:
        ordering = ["-created_at", "-id"]
        constraints = [
            models.UniqueConstraint(
                fields=("resource", "user"),
                name="uniq_review_per_user_per_resource",
            ),
            models.CheckConstraint(
                condition=models.Q(rating__gte=1) & models.Q(rating__lte=5),
                name="review_rating_between_1_and_5",
            ),
        ]

    def __str__(self):
        return f"Review#{self.pk} of Resource#{self.resource_id}"
