"""
core/fleet/types.py - worker-manager 데이터 타입

worker-manager API 응답(camelCase dict)을 다루기 위한 데이터 구조 정의.
런치 설정 원본(``raw``)은 provider마다 구조가 달라 그대로 보존하고,
공통 필드인 ``capacityPerInstance`` 만 꺼내 둡니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from core.exceptions import ConfigurationError


class ProviderType(str, Enum):
    """worker-manager provider 종류"""

    STATIC = "static"
    AWS = "aws"
    GOOGLE = "google"

    @classmethod
    def parse(cls, value: str) -> ProviderType | str:
        """알려진 provider면 enum, 아니면 원본 문자열 반환"""
        try:
            return cls(value)
        except ValueError:
            return value


def provider_type_name(provider_type: ProviderType | str) -> str:
    """리포트 표시용 provider 이름"""
    if isinstance(provider_type, ProviderType):
        return provider_type.value
    return str(provider_type)


@dataclass
class LaunchConfig:
    """워커 풀 내 단일 런치 설정

    Attributes:
        raw: API가 반환한 런치 설정 원본
        capacity_per_instance: 인스턴스 1대가 제공하는 capacity (기본 1)
    """

    raw: dict[str, Any]
    capacity_per_instance: int = 1

    @classmethod
    def from_api(cls, data: dict[str, Any], worker_pool_id: str | None = None) -> LaunchConfig:
        """capacityPerInstance 누락 시 1, 양의 정수가 아니면 ConfigurationError"""
        capacity = data.get("capacityPerInstance")
        if capacity is None:
            return cls(raw=data)
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ConfigurationError(
                f"worker pool {worker_pool_id or '<unknown>'} has invalid capacityPerInstance {capacity!r}",
                worker_pool_id=worker_pool_id,
            )
        return cls(raw=data, capacity_per_instance=capacity)

    def get(self, key: str, default: Any = None) -> Any:
        return self.raw.get(key, default)


@dataclass
class WorkerPool:
    """worker-manager 워커 풀

    Attributes:
        worker_pool_id: 워커 풀 ID (예: ``"proj-misc/ci"``)
        provider_id: provider ID (provider 목록의 키)
        launch_configs: ``config.launchConfigs`` 순서 그대로의 런치 설정 목록
    """

    worker_pool_id: str
    provider_id: str
    launch_configs: list[LaunchConfig] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> WorkerPool:
        config = data.get("config") or {}
        return cls(
            worker_pool_id=data["workerPoolId"],
            provider_id=data["providerId"],
            launch_configs=[
                LaunchConfig.from_api(cfg, data["workerPoolId"]) for cfg in config.get("launchConfigs") or []
            ],
        )
