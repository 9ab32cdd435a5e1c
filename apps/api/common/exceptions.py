# apps/api/common/exceptions.py
# acadex 도메인 오류 -> DRF 응답. 나머지는 DRF 기본 핸들러.
from __future__ import annotations

import logging

from rest_framework.response import Response
from rest_framework.views import exception_handler

from acadex.domain.sharing.errors import SharingDomainError

logger = logging.getLogger(__name__)


def domain_exception_handler(exc, context):
    """
    SharingDomainError 는 code/http_status 로 안정적인 응답을 만든다.
    body: {"detail": <message>, "code": <code>}
    """
    if isinstance(exc, SharingDomainError):
        view = context.get("view")
        view_name = type(view).__name__ if view is not None else "-"
        if exc.http_status >= 500:
            logger.error("Domain failure | view=%s code=%s message=%s", view_name, exc.code, exc.message)
        else:
            logger.info("Domain rejection | view=%s code=%s", view_name, exc.code)
        return Response({"detail": exc.message, "code": exc.code}, status=exc.http_status)
    return exception_handler(exc, context)
