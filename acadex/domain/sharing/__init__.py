from acadex.domain.sharing.entities import (
    LeaderboardEntry,
    MutationOutcome,
    Profile,
    RequestStatus,
    Resource,
    ResourceQuery,
    ResourceRequest,
    Review,
    Viewer,
    Visibility,
)
from acadex.domain.sharing.errors import (
    AccessDeniedError,
    AggregateRefreshError,
    DuplicateReviewError,
    LockExpiredError,
    NotFoundError,
    NotOwnerError,
    SharingDomainError,
    ValidationFailedError,
)

__all__ = [
    "LeaderboardEntry",
    "MutationOutcome",
    "Profile",
    "RequestStatus",
    "Resource",
    "ResourceQuery",
    "ResourceRequest",
    "Review",
    "Viewer",
    "Visibility",
    "AccessDeniedError",
    "AggregateRefreshError",
    "DuplicateReviewError",
    "LockExpiredError",
    "NotFoundError",
    "NotOwnerError",
    "SharingDomainError",
    "ValidationFailedError",
]
