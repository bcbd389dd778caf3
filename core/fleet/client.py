"""
core/fleet/client.py - worker-manager API 클라이언트

``taskcluster.WorkerManager`` 를 감싸 provider 목록과 워커 풀 목록을
전체 페이지에 걸쳐 수집합니다. 자격 증명과 rootUrl은 환경 변수
(``TASKCLUSTER_ROOT_URL`` 등)에서 읽습니다.

Example:
    from core.fleet.client import WorkerManagerClient

    wm = WorkerManagerClient.from_environment()
    provider_types = wm.list_provider_types()
    pools = wm.list_worker_pools()
"""

from __future__ import annotations

import logging
from typing import Any

import taskcluster

from .pagination import CONTINUATION_TOKEN, collect_mapping, collect_pages
from .types import ProviderType, WorkerPool

logger = logging.getLogger(__name__)


def _query(token: str | None) -> dict[str, Any]:
    return {CONTINUATION_TOKEN: token} if token else {}


class WorkerManagerClient:
    """worker-manager 목록 조회 래퍼

    Attributes:
        service: ``taskcluster.WorkerManager`` 인스턴스 (또는 동일 인터페이스 객체)
    """

    def __init__(self, service: Any):
        self.service = service

    @classmethod
    def from_environment(cls) -> WorkerManagerClient:
        """환경 변수 기반 옵션으로 클라이언트 생성"""
        # SDK 기본값(maxRetries=5) 대신 재시도 없음
        options = {**taskcluster.optionsFromEnvironment(), "maxRetries": 0}
        logger.debug(f"worker-manager 클라이언트 생성: {options.get('rootUrl')}")
        return cls(taskcluster.WorkerManager(options))

    def list_provider_types(self) -> dict[str, ProviderType | str]:
        """providerId -> providerType 매핑 조회"""
        raw = collect_mapping(
            lambda token: self.service.listProviders(query=_query(token)),
            "providers",
            "providerId",
            "providerType",
        )
        logger.debug(f"provider {len(raw)}개 조회")
        return {provider_id: ProviderType.parse(provider_type) for provider_id, provider_type in raw.items()}

    def list_worker_pools(self) -> list[WorkerPool]:
        """전체 워커 풀 목록 조회 (API 반환 순서 유지)"""
        items = collect_pages(
            lambda token: self.service.listWorkerPools(query=_query(token)),
            "workerPools",
        )
        logger.debug(f"워커 풀 {len(items)}개 조회")
        return [WorkerPool.from_api(item) for item in items]
