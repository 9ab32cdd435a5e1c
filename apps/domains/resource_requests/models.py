# PATH: apps/domains/resource_requests/models.py

from django.conf import settings
from django.db import models

from apps.core.models import TimestampModel


class ResourceRequest(TimestampModel):
    """
    "이 자료 있는 사람?" 커뮤니티 요청.
    open -> fulfilled 단방향. fulfilled_resource 는 존재 검증 없이 id 만 기록 (db_constraint=False).
    """

    class Status(models.TextChoices):
        OPEN = "open", "Open"
        FULFILLED = "fulfilled", "Fulfilled"

    requester = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="resource_requests",
    )

    title = models.CharField(max_length=255)
    subject = models.CharField(max_length=255)
    semester = models.CharField(max_length=20)
    description = models.TextField(blank=True, default="")

    status = models.CharField(
        max_length=10,
        choices=Status.choices,
        default=Status.OPEN,
        db_index=True,
    )
    fulfilled_resource = models.ForeignKey(
        "resources.Resource",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        db_constraint=False,
        related_name="fulfilled_requests",
    )

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return self.title
