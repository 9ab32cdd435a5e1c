"""
자료 공유 도메인 엔티티: 순수 파이썬 (Django/ORM 미사용)

rating_average / rating_count 는 파생값. 집계기(use_cases.sharing.reviews)만 기록한다.
요청 상태 전이 규칙은 ResourceRequest 메서드로 표현.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional


class Visibility(str, Enum):
    """Resource 공개 범위 (apps.domains.resources.models Resource.privacy choices와 동기화)."""
    PUBLIC = "public"
    PRIVATE = "private"


class RequestStatus(str, Enum):
    OPEN = "open"
    FULFILLED = "fulfilled"


class MutationOutcome(str, Enum):
    """소유자/잠금 판정 결과."""
    ALLOWED = "allowed"
    NOT_OWNER = "not_owner"
    LOCK_EXPIRED = "lock_expired"


@dataclass(frozen=True)
class Viewer:
    """인증 계층이 넘겨주는 요청 주체. 익명 요청은 Viewer 대신 None."""
    id: int
    affiliation: Optional[str] = None


@dataclass
class Profile:
    id: int
    name: str
    college: str
    course: str = ""
    branch: str = ""
    semester: str = ""
    profile_image_url: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass
class Resource:
    """
    공유 자료.
    affiliation 은 생성 시점 업로더 college 스냅샷 (이후 프로필 변경과 무관).
    """
    id: Optional[int]
    owner_id: int
    affiliation: str
    visibility: Visibility
    title: str
    subject: str = ""
    semester: str = ""
    course: str = ""
    branch: str = "General"
    resource_type: str = ""
    year: str = ""
    tags: list[str] = field(default_factory=list)
    description: str = ""
    file_url: Optional[str] = None
    drive_link: Optional[str] = None
    is_exam_important: bool = False
    rating_average: Decimal = Decimal("0")
    rating_count: int = 0
    created_at: Optional[datetime] = None
    owner_name: str = ""

    @property
    def is_public(self) -> bool:
        return self.visibility == Visibility.PUBLIC


# update_resource 로 변경 가능한 필드. rating/owner/affiliation/created_at 은 제외.
EDITABLE_RESOURCE_FIELDS = (
    "title",
    "subject",
    "semester",
    "course",
    "branch",
    "resource_type",
    "year",
    "tags",
    "description",
    "visibility",
    "file_url",
    "drive_link",
    "is_exam_important",
)


@dataclass
class Review:
    id: Optional[int]
    resource_id: int
    reviewer_id: int
    rating: int
    comment: str = ""
    created_at: Optional[datetime] = None
    reviewer_name: str = ""


@dataclass
class ResourceRequest:
    """
    커뮤니티 자료 요청.
    open(초기) -> fulfilled(종료). open 으로 되돌리는 전이는 없다.
    """
    id: Optional[int]
    requester_id: int
    title: str
    subject: str = ""
    semester: str = ""
    description: str = ""
    status: RequestStatus = RequestStatus.OPEN
    fulfilled_resource_id: Optional[int] = None
    created_at: Optional[datetime] = None
    requester_name: str = ""

    def is_fulfilled(self) -> bool:
        return self.status == RequestStatus.FULFILLED

    def fulfill(self, resource_id: int) -> None:
        """
        open/fulfilled -> fulfilled.
        이미 fulfilled 여도 막지 않고 연결 자료만 덮어쓴다. resource_id 존재 여부는 검증하지 않음.
        """
        self.status = RequestStatus.FULFILLED
        self.fulfilled_resource_id = resource_id


@dataclass(frozen=True)
class LeaderboardEntry:
    profile_id: int
    name: str
    college: str
    branch: str
    points: int


@dataclass(frozen=True)
class ResourceQuery:
    """목록 조회 필터. 값이 비어 있으면 해당 조건 미적용."""
    course: Optional[str] = None
    branch: Optional[str] = None
    semester: Optional[str] = None
    resource_type: Optional[str] = None
    year: Optional[str] = None
    privacy: Optional[str] = None
    search: Optional[str] = None

    def as_params(self) -> dict[str, Any]:
        params = {
            "course": self.course,
            "branch": self.branch,
            "semester": self.semester,
            "type": self.resource_type,
            "year": self.year,
            "privacy": self.privacy,
            "search": self.search,
        }
        return {k: v for k, v in params.items() if v not in (None, "")}
