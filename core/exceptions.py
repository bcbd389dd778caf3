"""
core/exceptions.py - 통합 예외 계층 구조

워커 풀 가격 리포트 실행 중 발생하는 치명적 오류를 정의합니다.
여기 정의된 예외는 모두 실행 전체를 중단시키며, 중간 복구하지 않습니다.

예외 계층 구조:
    WPPError (베이스)
    ├── ConfigurationError (풀/런치 설정 데이터 오류)
    │   ├── UnknownProviderError
    │   └── MissingAvailabilityZoneError
    └── PricingError (가격 조회 결과 오류)
        └── AmbiguousPriceError

가격 정보가 없는 경우(조회 결과 0건, 미구현 provider)는 오류가 아니라
``NOT_AVAILABLE`` 값으로 전달됩니다 (core.pricing.cache 참조).

Usage:
    from core.exceptions import MissingAvailabilityZoneError

    if not az:
        raise MissingAvailabilityZoneError(worker_pool_id="proj/wp-1")
"""

from typing import Any, Dict, List, Optional

# =============================================================================
# 베이스 예외
# =============================================================================


class WPPError(Exception):
    """Worker Pool Pricing 기본 예외 클래스

    모든 커스텀 예외의 베이스 클래스입니다.

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


# =============================================================================
# 설정/데이터 관련 예외
# =============================================================================


class ConfigurationError(WPPError):
    """워커 풀 설정 데이터 관련 예외"""

    def __init__(
        self,
        message: str,
        worker_pool_id: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, cause)
        self.worker_pool_id = worker_pool_id
        if worker_pool_id:
            self.details["worker_pool_id"] = worker_pool_id


class UnknownProviderError(ConfigurationError):
    """providerId를 provider 목록에서 찾을 수 없음"""

    def __init__(self, worker_pool_id: str, provider_id: str):
        message = f"worker pool {worker_pool_id} has unknown providerId {provider_id!r}"
        super().__init__(message, worker_pool_id=worker_pool_id)
        self.provider_id = provider_id
        self.details["provider_id"] = provider_id


class MissingAvailabilityZoneError(ConfigurationError):
    """AWS 런치 설정에 Placement.AvailabilityZone 누락"""

    def __init__(self, worker_pool_id: Optional[str] = None, instance_type: Optional[str] = None):
        pool = worker_pool_id or "<unknown>"
        message = f"worker pool {pool} config does not specify AZ"
        super().__init__(message, worker_pool_id=worker_pool_id)
        self.instance_type = instance_type
        if instance_type:
            self.details["instance_type"] = instance_type


# =============================================================================
# 가격 조회 관련 예외
# =============================================================================


class PricingError(WPPError):
    """가격 조회 관련 예외"""

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, cause)
        self.key = key
        if key:
            self.details["key"] = key


class AmbiguousPriceError(PricingError):
    """동일 키에 대해 가격 레코드가 2건 이상 반환됨

    모호한 가격은 허용하지 않으며 실행 전체를 중단합니다.
    """

    def __init__(self, key: str, records: List[Any]):
        message = f"가격 레코드가 {len(records)}건 반환됨 [{key}]"
        super().__init__(message, key=key)
        self.records = records
        self.details["record_count"] = len(records)


__all__ = [
    "WPPError",
    "ConfigurationError",
    "UnknownProviderError",
    "MissingAvailabilityZoneError",
    "PricingError",
    "AmbiguousPriceError",
]
