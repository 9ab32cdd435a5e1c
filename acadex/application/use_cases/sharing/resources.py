"""
Resource 생명주기 Use Case: 도메인/포트만 사용 (Django 미사용)

조회는 가시성 정책, 수정/삭제는 소유자 + 24시간 잠금 가드를 먼저 통과해야 한다.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from acadex.application.ports.unit_of_work import UnitOfWork
from acadex.domain.shared.clock import SYSTEM_CLOCK, Clock
from acadex.domain.sharing.entities import (
    EDITABLE_RESOURCE_FIELDS,
    Resource,
    ResourceQuery,
    Viewer,
    Visibility,
)
from acadex.domain.sharing.errors import (
    AccessDeniedError,
    NotFoundError,
    ValidationFailedError,
)
from acadex.domain.sharing.lock import ensure_can_mutate
from acadex.domain.sharing.scoring import points_for
from acadex.domain.sharing.visibility import can_view, filter_visible

logger = logging.getLogger(__name__)


@dataclass
class CreatedResource:
    resource: Resource
    points_awarded: int


def _parse_visibility(value: Any) -> Visibility:
    try:
        return Visibility(value)
    except ValueError:
        raise ValidationFailedError(f"Invalid visibility: {value!r}")


def create_resource(uow: UnitOfWork, owner: Optional[Viewer], data: dict[str, Any]) -> CreatedResource:
    """
    업로더 프로필의 college 를 affiliation 으로 복사해 생성.
    평점 집계는 0/0 으로 시작.
    """
    if owner is None:
        raise AccessDeniedError("Authentication required to upload a resource.")
    title = (data.get("title") or "").strip()
    if not title:
        raise ValidationFailedError("title is required.")
    visibility = _parse_visibility(data.get("visibility"))

    attrs = {k: v for k, v in data.items() if k in EDITABLE_RESOURCE_FIELDS and v is not None}
    attrs["title"] = title
    attrs["visibility"] = visibility

    with uow:
        profile = uow.profiles.get(owner.id)
        if profile is None:
            raise NotFoundError("User profile not found.")
        resource = uow.resources.add(
            Resource(id=None, owner_id=profile.id, affiliation=profile.college, **attrs)
        )

    logger.info(
        "Resource created | resource_id=%s owner_id=%s visibility=%s",
        resource.id, resource.owner_id, resource.visibility.value,
    )
    return CreatedResource(resource=resource, points_awarded=points_for(resource.visibility))


def get_resource(uow: UnitOfWork, viewer: Optional[Viewer], resource_id: int) -> Resource:
    with uow:
        resource = uow.resources.get(resource_id)
    if resource is None:
        raise NotFoundError("Resource not found.")
    if not can_view(viewer, resource):
        raise AccessDeniedError()
    return resource


def list_resources(
    uow: UnitOfWork,
    viewer: Optional[Viewer],
    query: Optional[ResourceQuery] = None,
) -> list[Resource]:
    """필터 + created_at 내림차순 -> 항목별 가시성 필터. 페이지네이션은 호출자."""
    with uow:
        candidates = uow.resources.search(query or ResourceQuery())
    return filter_visible(viewer, candidates)


def update_resource(
    uow: UnitOfWork,
    viewer: Optional[Viewer],
    resource_id: int,
    changes: dict[str, Any],
    clock: Clock = SYSTEM_CLOCK,
) -> Resource:
    """부분 수정. 잠금 창은 최초 created_at 기준 (수정으로 연장되지 않음)."""
    fields = [k for k in changes if k in EDITABLE_RESOURCE_FIELDS]
    if "title" in changes:
        title = (changes.get("title") or "").strip()
        if not title:
            raise ValidationFailedError("title must not be empty.")
        changes = {**changes, "title": title}

    with uow:
        resource = uow.resources.get_for_update(resource_id)
        if resource is None:
            raise NotFoundError("Resource not found.")
        ensure_can_mutate(viewer, resource, clock.now())
        if not fields:
            return resource
        for name in fields:
            value = changes[name]
            if name == "visibility":
                value = _parse_visibility(value)
            setattr(resource, name, value)
        resource = uow.resources.update(resource, fields)

    logger.info("Resource updated | resource_id=%s fields=%s", resource_id, ",".join(fields))
    return resource


def delete_resource(
    uow: UnitOfWork,
    viewer: Optional[Viewer],
    resource_id: int,
    clock: Clock = SYSTEM_CLOCK,
) -> None:
    with uow:
        resource = uow.resources.get_for_update(resource_id)
        if resource is None:
            raise NotFoundError("Resource not found.")
        ensure_can_mutate(viewer, resource, clock.now())
        uow.resources.delete(resource_id)
    logger.info("Resource deleted | resource_id=%s owner_id=%s", resource_id, resource.owner_id)
