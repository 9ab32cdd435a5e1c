"""
공통 API 뷰
"""
import logging

from django.db import connection, DatabaseError
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def health_check(request):
    """
    헬스체크 엔드포인트

    Returns:
        - 200: 모든 시스템 정상
        - 503: 데이터베이스 연결 실패
    """
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError as e:
        logger.warning("Health check failed | error=%s", e)
        return JsonResponse({
            "status": "unhealthy",
            "service": "acadex-api",
            "database": "disconnected",
        }, status=503)
    return JsonResponse({
        "status": "healthy",
        "service": "acadex-api",
        "database": "connected",
    }, status=200)
