"""
프로필 Use Case: 본인만 조회/수정

college 를 바꿔도 기존 Resource.affiliation 스냅샷은 그대로.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from acadex.application.ports.unit_of_work import UnitOfWork
from acadex.domain.sharing.entities import Profile, Viewer
from acadex.domain.sharing.errors import AccessDeniedError, NotFoundError, ValidationFailedError

logger = logging.getLogger(__name__)

EDITABLE_PROFILE_FIELDS = ("name", "college", "course", "branch", "semester", "profile_image_url")


def get_profile(uow: UnitOfWork, viewer: Optional[Viewer]) -> Profile:
    if viewer is None:
        raise AccessDeniedError("Authentication required.")
    with uow:
        profile = uow.profiles.get(viewer.id)
    if profile is None:
        raise NotFoundError("Profile not found.")
    return profile


def update_profile(uow: UnitOfWork, viewer: Optional[Viewer], changes: dict[str, Any]) -> Profile:
    if viewer is None:
        raise AccessDeniedError("Authentication required.")
    fields = [k for k in changes if k in EDITABLE_PROFILE_FIELDS]
    for name in ("name", "college"):
        if name in fields and not (changes[name] or "").strip():
            raise ValidationFailedError(f"{name} must not be empty.")

    with uow:
        profile = uow.profiles.get(viewer.id)
        if profile is None:
            raise NotFoundError("Profile not found.")
        if not fields:
            return profile
        for name in fields:
            setattr(profile, name, changes[name])
        profile = uow.profiles.update(profile, fields)

    logger.info("Profile updated | profile_id=%s fields=%s", viewer.id, ",".join(fields))
    return profile
