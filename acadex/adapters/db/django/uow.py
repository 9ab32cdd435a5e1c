"""
Django Unit of Work: transaction.atomic 래퍼 (lazy import)
"""
from __future__ import annotations


class DjangoUnitOfWork:
    """Django transaction.atomic으로 트랜잭션 경계. 메서드 내부에서 Django import."""

    def __init__(self) -> None:
        self._atomic = None
        self._profiles = None
        self._resources = None
        self._reviews = None
        self._requests = None

    @property
    def profiles(self):
        from acadex.adapters.db.django.repositories_profiles import DjangoProfileRepository
        if self._profiles is None:
            self._profiles = DjangoProfileRepository()
        return self._profiles

    @property
    def resources(self):
        from acadex.adapters.db.django.repositories_resources import DjangoResourceRepository
        if self._resources is None:
            self._resources = DjangoResourceRepository()
        return self._resources

    @property
    def reviews(self):
        from acadex.adapters.db.django.repositories_reviews import DjangoReviewRepository
        if self._reviews is None:
            self._reviews = DjangoReviewRepository()
        return self._reviews

    @property
    def requests(self):
        from acadex.adapters.db.django.repositories_requests import DjangoResourceRequestRepository
        if self._requests is None:
            self._requests = DjangoResourceRequestRepository()
        return self._requests

    def __enter__(self) -> DjangoUnitOfWork:
        from django.db import transaction
        self._atomic = transaction.atomic()
        self._atomic.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._atomic is not None:
            self._atomic.__exit__(exc_type, exc_val, exc_tb)
            self._atomic = None

    def commit(self) -> None:
        # atomic() 블록 내에서는 명시적 commit 없음; __exit__ 시 자동
        pass

    def rollback(self) -> None:
        from django.db import transaction
        transaction.set_rollback(True)
