# PATH: apps/core/identity.py
"""
요청 -> Viewer 변환 (Identity Provider 어댑터)

토큰 검증은 DRF 인증 클래스(REST_FRAMEWORK DEFAULT_AUTHENTICATION_CLASSES:
base 는 JWTAuthentication, dev 는 SessionAuthentication 추가)가 끝낸 상태.
여기서는 인증된 User 를 정책 계산용 Viewer 로만 옮긴다. 익명은 None.
"""
from __future__ import annotations

from typing import Optional

from acadex.domain.sharing.entities import Viewer


def viewer_from_user(user) -> Optional[Viewer]:
    if user is None or not getattr(user, "is_authenticated", False):
        return None
    college = (getattr(user, "college", "") or "").strip()
    return Viewer(id=user.pk, affiliation=college or None)


def viewer_from_request(request) -> Optional[Viewer]:
    return viewer_from_user(getattr(request, "user", None))
