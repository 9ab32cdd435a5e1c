"""
Resource Repository: Django ORM 구현 (메서드 내부에서만 apps.domains.resources import)

average_rating / total_ratings 는 save_rating 외 어떤 경로로도 기록하지 않는다.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Optional

from acadex.domain.sharing.entities import Resource, ResourceQuery, Visibility
from acadex.domain.sharing.errors import ValidationFailedError

# 엔티티 필드 -> 모델 필드 (이름이 다른 것만)
_FIELD_MAP = {
    "visibility": "privacy",
    "owner_id": "uploader_id",
    "affiliation": "college",
    "rating_average": "average_rating",
    "rating_count": "total_ratings",
}

_RATING_FIELDS = frozenset({"rating_average", "rating_count"})


def _model_to_entity(m) -> Optional[Resource]:
    if m is None:
        return None
    uploader = getattr(m, "uploader", None)
    return Resource(
        id=m.id,
        owner_id=m.uploader_id,
        affiliation=m.college,
        visibility=Visibility(m.privacy),
        title=m.title,
        subject=m.subject,
        semester=m.semester,
        course=m.course,
        branch=m.branch,
        resource_type=m.resource_type,
        year=m.year,
        tags=list(m.tags or []),
        description=m.description or "",
        file_url=m.file_url,
        drive_link=m.drive_link,
        is_exam_important=bool(m.is_exam_important),
        rating_average=Decimal(m.average_rating or 0),
        rating_count=int(m.total_ratings or 0),
        created_at=m.created_at,
        owner_name=(uploader.name or uploader.username) if uploader is not None else "",
    )


def _field_value(resource: Resource, name: str):
    value = getattr(resource, name)
    if name == "visibility":
        return Visibility(value).value
    return value


class DjangoResourceRepository:
    """ResourceRepository 구현."""

    def get(self, resource_id: int) -> Optional[Resource]:
        from apps.domains.resources.models import Resource as ResourceModel
        m = ResourceModel.objects.filter(id=resource_id).select_related("uploader").first()
        return _model_to_entity(m)

    def get_for_update(self, resource_id: int) -> Optional[Resource]:
        from apps.domains.resources.models import Resource as ResourceModel
        m = ResourceModel.objects.select_for_update().filter(id=resource_id).first()
        return _model_to_entity(m)

    def search(self, query: ResourceQuery) -> list[Resource]:
        from apps.domains.resources.filters import ResourceFilter
        from apps.domains.resources.models import Resource as ResourceModel
        qs = ResourceModel.objects.select_related("uploader")
        filterset = ResourceFilter(data=query.as_params(), queryset=qs)
        if not filterset.is_valid():
            raise ValidationFailedError(f"Invalid resource filter: {dict(filterset.errors)}")
        qs = filterset.qs.order_by("-created_at", "-id")
        return [_model_to_entity(m) for m in qs]

    def list_all(self) -> list[Resource]:
        from apps.domains.resources.models import Resource as ResourceModel
        return [_model_to_entity(m) for m in ResourceModel.objects.select_related("uploader").order_by("id")]

    def add(self, resource: Resource) -> Resource:
        from apps.domains.resources.models import Resource as ResourceModel
        m = ResourceModel.objects.create(
            uploader_id=resource.owner_id,
            college=resource.affiliation,
            privacy=Visibility(resource.visibility).value,
            title=resource.title,
            subject=resource.subject,
            semester=resource.semester,
            course=resource.course,
            branch=resource.branch or "General",
            resource_type=resource.resource_type,
            year=resource.year,
            tags=list(resource.tags or []),
            description=resource.description or "",
            file_url=resource.file_url,
            drive_link=resource.drive_link,
            is_exam_important=bool(resource.is_exam_important),
        )
        return self.get(m.id)

    def update(self, resource: Resource, fields: Iterable[str]) -> Resource:
        from apps.domains.resources.models import Resource as ResourceModel
        fields = [f for f in fields if f not in _RATING_FIELDS]
        if fields:
            m = ResourceModel.objects.get(id=resource.id)
            for name in fields:
                setattr(m, _FIELD_MAP.get(name, name), _field_value(resource, name))
            m.save(update_fields=[_FIELD_MAP.get(name, name) for name in fields] + ["updated_at"])
        return self.get(resource.id)

    def delete(self, resource_id: int) -> None:
        from apps.domains.resources.models import Resource as ResourceModel
        ResourceModel.objects.filter(id=resource_id).delete()

    def save_rating(self, resource_id: int, average: Decimal, count: int) -> None:
        from apps.domains.resources.models import Resource as ResourceModel
        updated = ResourceModel.objects.filter(id=resource_id).update(
            average_rating=average,
            total_ratings=count,
        )
        if updated != 1:
            raise RuntimeError(f"Resource {resource_id} disappeared during rating refresh")
