"""
자료 공유 도메인 오류: 순수 파이썬

모든 오류는 요청 워커를 죽이지 않는 "보고 가능한" 결과.
code 는 API 응답에 그대로 노출되는 안정 식별자, http_status 는 API 계층 매핑용.
"""
from __future__ import annotations

from typing import Optional


class SharingDomainError(Exception):
    code = "sharing_error"
    http_status = 400
    default_message = "Request could not be completed."

    def __init__(self, message: Optional[str] = None):
        self.message = str(message or self.default_message)
        super().__init__(self.message)


class NotFoundError(SharingDomainError):
    code = "not_found"
    http_status = 404
    default_message = "Not found."


class AccessDeniedError(SharingDomainError):
    """가시성 정책 실패 (private 자료). NotFound 와 구분된다."""
    code = "access_denied"
    http_status = 403
    default_message = "Private resource access denied."


class NotOwnerError(SharingDomainError):
    code = "not_owner"
    http_status = 403
    default_message = "You can only modify your own records."


class LockExpiredError(SharingDomainError):
    code = "lock_expired"
    http_status = 403
    default_message = "Edit lock is 24 hours."


class DuplicateReviewError(SharingDomainError):
    code = "duplicate_review"
    http_status = 409
    default_message = "You can submit only one review per resource."


class ValidationFailedError(SharingDomainError):
    code = "validation_failed"
    http_status = 400
    default_message = "Invalid input."


class AggregateRefreshError(SharingDomainError):
    """리뷰 기록 후 평점 재계산 실패. 작업 전체를 실패로 보고 (stale 집계 반환 금지)."""
    code = "aggregate_refresh_failed"
    http_status = 500
    default_message = "Failed to refresh resource rating."
