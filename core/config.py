"""
core/config.py - 중앙 설정 관리

환경 변수에서 실행 설정을 읽고, CLI 옵션으로 덮어쓸 수 있는 ``Settings`` 를 제공합니다.
자격 증명 자체는 여기서 다루지 않습니다:
    - Taskcluster: ``TASKCLUSTER_ROOT_URL`` / ``TASKCLUSTER_CLIENT_ID`` /
      ``TASKCLUSTER_ACCESS_TOKEN`` (taskcluster.optionsFromEnvironment)
    - AWS: boto3 기본 credential chain (``AWS_PROFILE`` 또는 ``--profile``)

환경 변수:
    WPP_PRODUCT_DESCRIPTION: Spot 가격 조회 제품 설명 (기본: ``Linux/UNIX (Amazon VPC)``)
    WPP_LOG_LEVEL: 로그 레벨 (기본: ``WARNING``)
    AWS_PROFILE: boto3 프로파일 이름

Usage:
    from core.config import load_settings

    settings = load_settings(profile="my-profile")
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path

from core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_PRODUCT_DESCRIPTION = "Linux/UNIX (Amazon VPC)"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# 프로젝트 루트 (core/config.py -> core/ -> project_root/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent


@dataclass(frozen=True)
class Settings:
    """실행 설정

    Attributes:
        product_description: Spot 가격 이력 조회 시 사용할 ProductDescription
        aws_profile: boto3 Session 프로파일 (None이면 기본 credential chain)
        log_level: 로그 레벨 이름
    """

    product_description: str = DEFAULT_PRODUCT_DESCRIPTION
    aws_profile: str | None = None
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings(**overrides: str | None) -> Settings:
    """환경 변수에서 설정을 읽고 ``None`` 이 아닌 override 값을 적용

    Args:
        **overrides: ``Settings`` 필드명과 값 (CLI 옵션)

    Returns:
        Settings 인스턴스

    Raises:
        ConfigurationError: 알 수 없는 로그 레벨
    """
    settings = Settings(
        product_description=os.environ.get("WPP_PRODUCT_DESCRIPTION") or DEFAULT_PRODUCT_DESCRIPTION,
        aws_profile=os.environ.get("AWS_PROFILE") or None,
        log_level=(os.environ.get("WPP_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    )
    values = {k: v for k, v in overrides.items() if v is not None}
    if values:
        settings = replace(settings, **values)

    if settings.log_level not in LOG_LEVELS:
        raise ConfigurationError(f"invalid log level {settings.log_level!r} (expected one of {', '.join(LOG_LEVELS)})")
    return settings


def get_version() -> str:
    """버전 문자열 반환 (프로젝트 루트의 version.txt)"""
    version_file = _PROJECT_ROOT / "version.txt"
    try:
        return version_file.read_text(encoding="utf-8").strip()
    except OSError as e:
        logger.debug(f"Failed to read version file: {e}")
    return "0.0.1"
