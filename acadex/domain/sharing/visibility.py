"""
가시성 정책: (viewer, resource) -> 볼 수 있는가

public 은 항상 공개. private 은 업로더 본인 또는 같은 college(스냅샷) 사용자만.
"""
from __future__ import annotations

from typing import Iterable, Optional

from acadex.domain.sharing.entities import Resource, Viewer, Visibility


def can_view(viewer: Optional[Viewer], resource: Resource) -> bool:
    if resource.visibility == Visibility.PUBLIC:
        return True
    if viewer is None:
        return False
    if viewer.id == resource.owner_id:
        return True
    # affiliation 없는 viewer 는 본인 자료만
    return viewer.affiliation is not None and viewer.affiliation == resource.affiliation


def filter_visible(viewer: Optional[Viewer], resources: Iterable[Resource]) -> list[Resource]:
    """이미 정렬된 후보 목록에서 볼 수 있는 것만 남긴다. 순서 유지."""
    return [r for r in resources if can_view(viewer, r)]
