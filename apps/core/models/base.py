# PATH: apps/core/models/base.py
"""
공통 베이스 모델 (TimestampModel)

도메인 앱(resources / reviews / resource_requests) 공유.
"""
from django.db import models


class TimestampModel(models.Model):
    """생성/수정 시간 자동 기록 추상 모델. created_at 은 잠금 창 기준 시각."""
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
