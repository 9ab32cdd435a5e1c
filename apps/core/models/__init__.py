from .base import TimestampModel
from .user import User

__all__ = [
    "TimestampModel",
    "User",
]
