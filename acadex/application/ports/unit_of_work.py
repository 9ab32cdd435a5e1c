"""
Unit of Work 포트: 트랜잭션 경계 (Django 미사용)
"""
from __future__ import annotations

from typing import Protocol

from acadex.application.ports.repositories import (
    ProfileRepository,
    ResourceRepository,
    ResourceRequestRepository,
    ReviewRepository,
)


class UnitOfWork(Protocol):
    """트랜잭션 단위. __enter__에서 시작, __exit__에서 commit/rollback (예외 시 rollback)."""

    @property
    def profiles(self) -> ProfileRepository:
        ...

    @property
    def resources(self) -> ResourceRepository:
        ...

    @property
    def reviews(self) -> ReviewRepository:
        ...

    @property
    def requests(self) -> ResourceRequestRepository:
        ...

    def __enter__(self) -> "UnitOfWork":
        ...

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        ...

    def commit(self) -> None:
        ...

    def rollback(self) -> None:
        ...
