"""
Repository 포트: 영속화 추상화 (Django/ORM 미사용)
"""
from __future__ import annotations

from abc import abstractmethod
from decimal import Decimal
from typing import Iterable, Optional, Protocol

from acadex.domain.sharing.entities import (
    Profile,
    Resource,
    ResourceQuery,
    ResourceRequest,
    Review,
)


class ProfileRepository(Protocol):

    @abstractmethod
    def get(self, profile_id: int) -> Optional[Profile]:
        ...

    @abstractmethod
    def list_all(self) -> list[Profile]:
        ...

    @abstractmethod
    def update(self, profile: Profile, fields: Iterable[str]) -> Profile:
        """지정 필드만 저장."""
        ...


class ResourceRepository(Protocol):
    """Resource 영속화. rating 필드는 save_rating 으로만 기록."""

    @abstractmethod
    def get(self, resource_id: int) -> Optional[Resource]:
        ...

    @abstractmethod
    def get_for_update(self, resource_id: int) -> Optional[Resource]:
        """조회 + row lock. 같은 자료의 평점 재계산을 직렬화."""
        ...

    @abstractmethod
    def search(self, query: ResourceQuery) -> list[Resource]:
        """필터 적용 후 created_at 내림차순. 가시성 필터는 적용하지 않음."""
        ...

    @abstractmethod
    def list_all(self) -> list[Resource]:
        ...

    @abstractmethod
    def add(self, resource: Resource) -> Resource:
        """insert. id/created_at 채워진 엔티티 반환."""
        ...

    @abstractmethod
    def update(self, resource: Resource, fields: Iterable[str]) -> Resource:
        ...

    @abstractmethod
    def delete(self, resource_id: int) -> None:
        """리뷰는 함께 삭제, 연결된 요청의 fulfilled_resource_id 는 NULL."""
        ...

    @abstractmethod
    def save_rating(self, resource_id: int, average: Decimal, count: int) -> None:
        ...


class ReviewRepository(Protocol):

    @abstractmethod
    def get(self, review_id: int) -> Optional[Review]:
        ...

    @abstractmethod
    def get_by_resource_and_reviewer(self, resource_id: int, reviewer_id: int) -> Optional[Review]:
        ...

    @abstractmethod
    def list_for_resource(self, resource_id: int) -> list[Review]:
        """created_at 내림차순."""
        ...

    @abstractmethod
    def ratings_for_resource(self, resource_id: int) -> list[int]:
        ...

    @abstractmethod
    def add(self, review: Review) -> Review:
        """
        insert. (resource_id, reviewer_id) 유니크 제약 위반 시 DuplicateReviewError.
        """
        ...

    @abstractmethod
    def update(self, review: Review, fields: Iterable[str]) -> Review:
        ...

    @abstractmethod
    def delete(self, review_id: int) -> None:
        ...


class ResourceRequestRepository(Protocol):

    @abstractmethod
    def get_for_update(self, request_id: int) -> Optional[ResourceRequest]:
        ...

    @abstractmethod
    def list_all(self) -> list[ResourceRequest]:
        """created_at 내림차순."""
        ...

    @abstractmethod
    def add(self, request: ResourceRequest) -> ResourceRequest:
        ...

    @abstractmethod
    def save(self, request: ResourceRequest) -> ResourceRequest:
        """status / fulfilled_resource_id 저장."""
        ...
