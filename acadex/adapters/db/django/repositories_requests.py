"""
ResourceRequest Repository: Django ORM 구현
"""
from __future__ import annotations

from typing import Optional

from acadex.domain.sharing.entities import RequestStatus, ResourceRequest


def _model_to_entity(m) -> Optional[ResourceRequest]:
    if m is None:
        return None
    requester = getattr(m, "requester", None)
    return ResourceRequest(
        id=m.id,
        requester_id=m.requester_id,
        title=m.title,
        subject=m.subject,
        semester=m.semester,
        description=m.description or "",
        status=RequestStatus(m.status) if m.status else RequestStatus.OPEN,
        fulfilled_resource_id=m.fulfilled_resource_id,
        created_at=m.created_at,
        requester_name=(requester.name or requester.username) if requester is not None else "",
    )


class DjangoResourceRequestRepository:
    """ResourceRequestRepository 구현."""

    def get(self, request_id: int) -> Optional[ResourceRequest]:
        from apps.domains.resource_requests.models import ResourceRequest as RequestModel
        m = RequestModel.objects.filter(id=request_id).select_related("requester").first()
        return _model_to_entity(m)

    def get_for_update(self, request_id: int) -> Optional[ResourceRequest]:
        from apps.domains.resource_requests.models import ResourceRequest as RequestModel
        m = RequestModel.objects.select_for_update().filter(id=request_id).first()
        return _model_to_entity(m)

    def list_all(self) -> list[ResourceRequest]:
        from apps.domains.resource_requests.models import ResourceRequest as RequestModel
        qs = RequestModel.objects.select_related("requester").order_by("-created_at", "-id")
        return [_model_to_entity(m) for m in qs]

    def add(self, request: ResourceRequest) -> ResourceRequest:
        from apps.domains.resource_requests.models import ResourceRequest as RequestModel
        m = RequestModel.objects.create(
            requester_id=request.requester_id,
            title=request.title,
            subject=request.subject,
            semester=request.semester,
            description=request.description or "",
        )
        return self.get(m.id)

    def save(self, request: ResourceRequest) -> ResourceRequest:
        from apps.domains.resource_requests.models import ResourceRequest as RequestModel
        RequestModel.objects.filter(id=request.id).update(
            status=RequestStatus(request.status).value,
            fulfilled_resource_id=request.fulfilled_resource_id,
        )
        return self.get(request.id)
