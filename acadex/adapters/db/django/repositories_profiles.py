"""
Profile Repository: Django ORM 구현 (core.User = 프로필)
"""
from __future__ import annotations

from typing import Iterable, Optional

from acadex.domain.sharing.entities import Profile


def _model_to_entity(m) -> Optional[Profile]:
    if m is None:
        return None
    return Profile(
        id=m.pk,
        name=m.name or m.username,
        college=m.college or "",
        course=m.course or "",
        branch=m.branch or "",
        semester=m.semester or "",
        profile_image_url=m.profile_image_url,
        created_at=m.date_joined,
    )


class DjangoProfileRepository:
    """ProfileRepository 구현. ORM 접근은 모두 메서드 내부에서 lazy import."""

    def get(self, profile_id: int) -> Optional[Profile]:
        from django.contrib.auth import get_user_model
        m = get_user_model().objects.filter(pk=profile_id, is_active=True).first()
        return _model_to_entity(m)

    def list_all(self) -> list[Profile]:
        from django.contrib.auth import get_user_model
        qs = get_user_model().objects.filter(is_active=True).order_by("id")
        return [_model_to_entity(m) for m in qs]

    def update(self, profile: Profile, fields: Iterable[str]) -> Profile:
        from django.contrib.auth import get_user_model
        fields = list(fields)
        m = get_user_model().objects.get(pk=profile.id)
        for name in fields:
            setattr(m, name, getattr(profile, name))
        m.save(update_fields=fields)
        return _model_to_entity(m)
