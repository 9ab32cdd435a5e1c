"""테스트 공용 Fixtures: 인메모리 저장소 / UoW 와 Django API 클라이언트."""
from __future__ import annotations

import copy
from collections import defaultdict
from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal
from typing import Iterable, Optional

import pytest

from acadex.domain.shared.clock import FixedClock
from acadex.domain.sharing.entities import (
    Profile,
    Resource,
    ResourceQuery,
    ResourceRequest,
    Review,
    Viewer,
)
from acadex.domain.sharing.errors import DuplicateReviewError

T0 = datetime(2025, 1, 10, 9, 0, tzinfo=timezone.utc)


# ============================================================================
# In-memory repositories
# ============================================================================

class InMemoryState:
    """저장소가 공유하는 테이블. UoW 가 스냅샷/복원한다."""

    TABLES = ("profiles", "resources", "reviews", "requests", "ids")

    def __init__(self, clock: FixedClock):
        self.clock = clock
        self.profiles: dict[int, Profile] = {}
        self.resources: dict[int, Resource] = {}
        self.reviews: dict[int, Review] = {}
        self.requests: dict[int, ResourceRequest] = {}
        self.ids: dict[str, int] = defaultdict(int)
        # True 면 save_rating 이 실패 (집계 실패 시나리오)
        self.fail_rating_save = False

    def next_id(self, table: str) -> int:
        self.ids[table] += 1
        return self.ids[table]

    def snapshot(self) -> dict:
        return {name: copy.deepcopy(getattr(self, name)) for name in self.TABLES}

    def restore(self, snap: dict) -> None:
        for name, value in snap.items():
            setattr(self, name, value)

    def profile_name(self, profile_id: int) -> str:
        profile = self.profiles.get(profile_id)
        return profile.name if profile else ""


class InMemoryProfileRepository:
    def __init__(self, state: InMemoryState):
        self.state = state

    def get(self, profile_id):
        profile = self.state.profiles.get(profile_id)
        return copy.deepcopy(profile)

    def list_all(self):
        return [copy.deepcopy(p) for _, p in sorted(self.state.profiles.items())]

    def update(self, profile, fields):
        stored = self.state.profiles[profile.id]
        for name in fields:
            setattr(stored, name, getattr(profile, name))
        return copy.deepcopy(stored)


class InMemoryResourceRepository:
    _EXACT = ("course", "branch", "semester", "resource_type", "year")

    def __init__(self, state: InMemoryState):
        self.state = state

    def _out(self, resource: Resource) -> Resource:
        return replace(copy.deepcopy(resource), owner_name=self.state.profile_name(resource.owner_id))

    def get(self, resource_id):
        resource = self.state.resources.get(resource_id)
        return self._out(resource) if resource else None

    def get_for_update(self, resource_id):
        return self.get(resource_id)

    def search(self, query: ResourceQuery):
        rows = list(self.state.resources.values())
        for name in self._EXACT:
            value = getattr(query, name)
            if value:
                rows = [r for r in rows if getattr(r, name) == value]
        if query.privacy:
            rows = [r for r in rows if r.visibility.value == query.privacy]
        if query.search:
            needle = query.search.lower()
            rows = [
                r for r in rows
                if needle in r.title.lower() or needle in r.subject.lower() or needle in r.description.lower()
            ]
        rows.sort(key=lambda r: (r.created_at, r.id), reverse=True)
        return [self._out(r) for r in rows]

    def list_all(self):
        return [self._out(r) for _, r in sorted(self.state.resources.items())]

    def add(self, resource):
        stored = replace(resource, id=self.state.next_id("resources"), created_at=self.state.clock.now())
        self.state.resources[stored.id] = stored
        return self._out(stored)

    def update(self, resource, fields: Iterable[str]):
        stored = self.state.resources[resource.id]
        for name in fields:
            if name in ("rating_average", "rating_count"):
                continue
            setattr(stored, name, copy.deepcopy(getattr(resource, name)))
        return self._out(stored)

    def delete(self, resource_id):
        self.state.resources.pop(resource_id, None)
        for review_id in [k for k, v in self.state.reviews.items() if v.resource_id == resource_id]:
            del self.state.reviews[review_id]
        for request in self.state.requests.values():
            if request.fulfilled_resource_id == resource_id:
                request.fulfilled_resource_id = None

    def save_rating(self, resource_id, average: Decimal, count: int):
        if self.state.fail_rating_save:
            raise RuntimeError("rating store unavailable")
        stored = self.state.resources.get(resource_id)
        if stored is None:
            raise RuntimeError(f"Resource {resource_id} vanished during rating refresh")
        stored.rating_average = average
        stored.rating_count = count


class InMemoryReviewRepository:
    def __init__(self, state: InMemoryState):
        self.state = state

    def _out(self, review: Review) -> Review:
        return replace(copy.deepcopy(review), reviewer_name=self.state.profile_name(review.reviewer_id))

    def get(self, review_id):
        review = self.state.reviews.get(review_id)
        return self._out(review) if review else None

    def get_by_resource_and_reviewer(self, resource_id, reviewer_id):
        for review in self.state.reviews.values():
            if review.resource_id == resource_id and review.reviewer_id == reviewer_id:
                return self._out(review)
        return None

    def list_for_resource(self, resource_id):
        rows = [r for r in self.state.reviews.values() if r.resource_id == resource_id]
        rows.sort(key=lambda r: (r.created_at, r.id), reverse=True)
        return [self._out(r) for r in rows]

    def ratings_for_resource(self, resource_id):
        return [r.rating for r in self.state.reviews.values() if r.resource_id == resource_id]

    def add(self, review):
        # 저장소 유니크 제약 흉내
        for existing in self.state.reviews.values():
            if existing.resource_id == review.resource_id and existing.reviewer_id == review.reviewer_id:
                raise DuplicateReviewError()
        stored = replace(review, id=self.state.next_id("reviews"), created_at=self.state.clock.now())
        self.state.reviews[stored.id] = stored
        return self._out(stored)

    def update(self, review, fields):
        stored = self.state.reviews[review.id]
        for name in fields:
            setattr(stored, name, getattr(review, name))
        return self._out(stored)

    def delete(self, review_id):
        self.state.reviews.pop(review_id, None)


class InMemoryResourceRequestRepository:
    def __init__(self, state: InMemoryState):
        self.state = state

    def _out(self, request: ResourceRequest) -> ResourceRequest:
        return replace(copy.deepcopy(request), requester_name=self.state.profile_name(request.requester_id))

    def get_for_update(self, request_id):
        request = self.state.requests.get(request_id)
        return self._out(request) if request else None

    def list_all(self):
        rows = sorted(self.state.requests.values(), key=lambda r: (r.created_at, r.id), reverse=True)
        return [self._out(r) for r in rows]

    def add(self, request):
        stored = replace(request, id=self.state.next_id("requests"), created_at=self.state.clock.now())
        self.state.requests[stored.id] = stored
        return self._out(stored)

    def save(self, request):
        stored = self.state.requests[request.id]
        stored.status = request.status
        stored.fulfilled_resource_id = request.fulfilled_resource_id
        return self._out(stored)


class InMemoryUnitOfWork:
    """__enter__ 에서 스냅샷, 예외로 빠져나가면 복원 (트랜잭션 롤백 흉내)."""

    def __init__(self, state: InMemoryState):
        self.state = state
        self.profiles = InMemoryProfileRepository(state)
        self.resources = InMemoryResourceRepository(state)
        self.reviews = InMemoryReviewRepository(state)
        self.requests = InMemoryResourceRequestRepository(state)
        self._snapshot: Optional[dict] = None
        self.committed = 0
        self.rolled_back = 0

    def __enter__(self):
        self._snapshot = self.state.snapshot()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()
        self._snapshot = None

    def commit(self):
        self.committed += 1

    def rollback(self):
        if self._snapshot is not None:
            self.state.restore(self._snapshot)
        self.rolled_back += 1


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(T0)


@pytest.fixture
def state(clock) -> InMemoryState:
    return InMemoryState(clock)


@pytest.fixture
def uow(state) -> InMemoryUnitOfWork:
    return InMemoryUnitOfWork(state)


@pytest.fixture
def add_profile(state):
    """프로필 직접 등록 후 Viewer 반환."""

    def _add(name: str, college: str, branch: str = "CSE") -> Viewer:
        profile_id = state.next_id("profiles")
        state.profiles[profile_id] = Profile(
            id=profile_id,
            name=name,
            college=college,
            course="BTech",
            branch=branch,
            semester="3",
            created_at=state.clock.now(),
        )
        return Viewer(id=profile_id, affiliation=college)

    return _add


@pytest.fixture
def alice(add_profile) -> Viewer:
    return add_profile("Alice", "IIT Delhi")


@pytest.fixture
def bob(add_profile) -> Viewer:
    return add_profile("Bob", "IIT Delhi")


@pytest.fixture
def carol(add_profile) -> Viewer:
    return add_profile("Carol", "NIT Trichy")


# ============================================================================
# Django API
# ============================================================================

@pytest.fixture
def api_client():
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def make_user(db):
    from django.contrib.auth import get_user_model

    def _make(username: str, college: str, name: Optional[str] = None, branch: str = "CSE"):
        return get_user_model().objects.create_user(
            username=username,
            password="pass-1234-word",
            name=name or username.title(),
            college=college,
            course="BTech",
            branch=branch,
            semester="3",
        )

    return _make
