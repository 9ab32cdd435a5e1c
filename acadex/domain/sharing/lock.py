"""
소유자 + 24시간 잠금 판정 (Resource / Review 공통)

잠금 창은 최초 생성 시각 기준. 수정해도 갱신되지 않는다.
"""
from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional, Union

from acadex.domain.sharing.entities import MutationOutcome, Resource, Review, Viewer
from acadex.domain.sharing.errors import LockExpiredError, NotOwnerError

LOCK_WINDOW = timedelta(hours=24)

Lockable = Union[Resource, Review]


def record_owner_id(record: Lockable) -> int:
    if isinstance(record, Review):
        return record.reviewer_id
    return record.owner_id


def can_mutate(viewer: Optional[Viewer], record: Lockable, now: datetime) -> MutationOutcome:
    if viewer is None or viewer.id != record_owner_id(record):
        return MutationOutcome.NOT_OWNER
    if record.created_at is None:
        raise ValueError(f"{type(record).__name__} {record.id} has no created_at")
    elapsed = now - record.created_at
    if elapsed > LOCK_WINDOW:
        return MutationOutcome.LOCK_EXPIRED
    return MutationOutcome.ALLOWED


def ensure_can_mutate(viewer: Optional[Viewer], record: Lockable, now: datetime) -> None:
    """can_mutate 결과가 ALLOWED 가 아니면 해당 도메인 오류."""
    outcome = can_mutate(viewer, record, now)
    if outcome == MutationOutcome.ALLOWED:
        return
    kind = "review" if isinstance(record, Review) else "resource"
    if outcome == MutationOutcome.NOT_OWNER:
        raise NotOwnerError(f"You can only modify your own {kind}.")
    raise LockExpiredError(f"The {kind} edit lock is 24 hours.")
