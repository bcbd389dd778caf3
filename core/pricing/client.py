"""
core/pricing/client.py - boto3 client 생성 헬퍼

타임아웃이 설정된 boto3 client를 생성하고, EC2 client를 리전별로 한 번만 만들어 재사용합니다.
가격 리포트는 실패 시 재시도하지 않으므로 기본 ``max_attempts`` 는 1입니다.

Example:
    from core.pricing.client import EC2ClientRegistry

    clients = EC2ClientRegistry(profile="my-profile")
    ec2 = clients.get("us-east-1")
"""

from __future__ import annotations

import logging
from typing import Any, Literal, cast

import boto3
from botocore.config import Config

logger = logging.getLogger(__name__)

# Retry mode 타입 (botocore TypedDict와 호환)
RetryMode = Literal["legacy", "standard", "adaptive"]

DEFAULT_MAX_ATTEMPTS = 1  # 재시도 없음
DEFAULT_RETRY_MODE: RetryMode = "standard"
DEFAULT_CONNECT_TIMEOUT = 10  # 초
DEFAULT_READ_TIMEOUT = 30  # 초


def get_client(
    session: boto3.Session,
    service_name: str,
    region_name: str | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    retry_mode: RetryMode = DEFAULT_RETRY_MODE,
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT,
    read_timeout: int = DEFAULT_READ_TIMEOUT,
    **kwargs: Any,
) -> Any:
    """타임아웃/재시도 설정이 적용된 boto3 client 생성

    Args:
        session: boto3 Session
        service_name: AWS 서비스 이름 (ec2 등)
        region_name: 리전 (None이면 세션 기본값)
        max_attempts: 최대 시도 횟수 (기본: 1, 재시도 없음)
        retry_mode: 재시도 모드
        connect_timeout: 연결 타임아웃 (초)
        read_timeout: 읽기 타임아웃 (초)
        **kwargs: session.client()에 전달할 추가 인자

    Returns:
        boto3 client
    """
    config = Config(
        retries={"max_attempts": max_attempts, "mode": retry_mode},  # pyright: ignore[reportArgumentType]
        connect_timeout=connect_timeout,
        read_timeout=read_timeout,
    )

    if "config" in kwargs:
        existing = kwargs.pop("config")
        config = config.merge(existing)

    # cast to Any to bypass boto3-stubs Literal type requirements
    return session.client(  # pyright: ignore[reportCallIssue]
        cast(Any, service_name),
        region_name=region_name,
        config=config,
        **kwargs,
    )


class EC2ClientRegistry:
    """리전별 EC2 client 지연 생성/재사용

    Attributes:
        profile: boto3 프로파일 이름 (None이면 기본 credential chain)
    """

    def __init__(self, profile: str | None = None, session: boto3.Session | None = None):
        self.profile = profile
        self._session = session
        self._clients: dict[str, Any] = {}

    @property
    def session(self) -> boto3.Session:
        if self._session is None:
            self._session = boto3.Session(profile_name=self.profile) if self.profile else boto3.Session()
        return self._session

    def get(self, region: str) -> Any:
        """리전의 EC2 client 반환 (최초 호출 시 생성)"""
        if region not in self._clients:
            logger.debug(f"EC2 client 생성: {region}")
            self._clients[region] = get_client(self.session, "ec2", region_name=region)
        return self._clients[region]
