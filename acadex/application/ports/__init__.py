from acadex.application.ports.unit_of_work import UnitOfWork
from acadex.application.ports.repositories import (
    ProfileRepository,
    ResourceRepository,
    ResourceRequestRepository,
    ReviewRepository,
)

__all__ = [
    "UnitOfWork",
    "ProfileRepository",
    "ResourceRepository",
    "ResourceRequestRepository",
    "ReviewRepository",
]
