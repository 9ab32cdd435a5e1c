"""
자료 요청 Use Case: open -> fulfilled 상태 머신

fulfill 은 요청자 본인 확인 / 자료 존재 확인을 하지 않는다. 이미 fulfilled 인 요청도
다시 fulfill 가능 (연결 자료 id 덮어쓰기).
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from acadex.application.ports.unit_of_work import UnitOfWork
from acadex.domain.sharing.entities import ResourceRequest, Viewer
from acadex.domain.sharing.errors import AccessDeniedError, NotFoundError, ValidationFailedError

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("title", "subject", "semester")


def create_request(uow: UnitOfWork, requester: Optional[Viewer], data: dict[str, Any]) -> ResourceRequest:
    if requester is None:
        raise AccessDeniedError("Authentication required to create a request.")
    values = {name: (data.get(name) or "").strip() for name in _REQUIRED_FIELDS}
    missing = [name for name, value in values.items() if not value]
    if missing:
        raise ValidationFailedError(f"Missing required fields: {', '.join(missing)}")

    with uow:
        request = uow.requests.add(
            ResourceRequest(
                id=None,
                requester_id=requester.id,
                description=data.get("description") or "",
                **values,
            )
        )
    logger.info("Resource request created | request_id=%s requester_id=%s", request.id, requester.id)
    return request


def list_requests(uow: UnitOfWork) -> list[ResourceRequest]:
    with uow:
        return uow.requests.list_all()


def fulfill_request(
    uow: UnitOfWork,
    viewer: Optional[Viewer],
    request_id: int,
    resource_id: Any,
) -> ResourceRequest:
    if viewer is None:
        raise AccessDeniedError("Authentication required to fulfill a request.")
    if resource_id in (None, ""):
        raise ValidationFailedError("resource_id is required.")
    try:
        resource_id = int(resource_id)
    except (TypeError, ValueError):
        raise ValidationFailedError("resource_id must be an integer.")

    with uow:
        request = uow.requests.get_for_update(request_id)
        if request is None:
            raise NotFoundError("Request not found.")
        previous = request.fulfilled_resource_id if request.is_fulfilled() else None
        request.fulfill(resource_id)
        request = uow.requests.save(request)

    if previous is not None:
        logger.info(
            "Resource request re-fulfilled | request_id=%s resource_id=%s previous=%s by=%s",
            request_id, resource_id, previous, viewer.id,
        )
    else:
        logger.info(
            "Resource request fulfilled | request_id=%s resource_id=%s by=%s",
            request_id, resource_id, viewer.id,
        )
    return request
