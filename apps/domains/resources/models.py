# PATH: apps/domains/resources/models.py

from django.conf import settings
from django.db import models

from apps.core.models import TimestampModel


class Resource(TimestampModel):
    """
    공유 학습 자료.

    - college: 업로더 프로필 college 스냅샷 (생성 시 1회 복사, 이후 불변)
    - average_rating / total_ratings: 파생값. reviews 집계기만 기록한다.
    - 수정/삭제: 업로더 본인 + created_at 기준 24시간 이내
    """

    class Privacy(models.TextChoices):
        PUBLIC = "public", "Public"
        PRIVATE = "private", "Private"

    uploader = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="resources",
    )

    title = models.CharField(max_length=255)
    subject = models.CharField(max_length=255)
    semester = models.CharField(max_length=20)
    course = models.CharField(max_length=100)
    branch = models.CharField(max_length=100, default="General")
    resource_type = models.CharField(max_length=50)
    year = models.CharField(max_length=10)
    tags = models.JSONField(default=list, blank=True)
    description = models.TextField(blank=True, default="")
    privacy = models.CharField(max_length=10, choices=Privacy.choices)

    # 파일 저장소는 범위 밖. 위치 문자열만 보관.
    file_url = models.CharField(max_length=500, blank=True, null=True)
    drive_link = models.URLField(max_length=500, blank=True, null=True)

    college = models.CharField(max_length=200)

    average_rating = models.DecimalField(max_digits=3, decimal_places=1, default=0)
    total_ratings = models.PositiveIntegerField(default=0)

    is_exam_important = models.BooleanField(default=False)

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["course", "branch", "semester"], name="resource_course_branch_sem_idx"),
            models.Index(fields=["privacy"], name="resource_privacy_idx"),
        ]

    def __str__(self):
        return self.title
