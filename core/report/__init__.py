"""
core/report - 워커 풀 가격 집계 및 리포트 출력 형식

Usage:
    from core.report import generate_reports, render_lines

    reports = generate_reports(wm_client, registry)
    for report in reports:
        print("\\n".join(render_lines(report)))
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from core.fleet.client import WorkerManagerClient
from core.fleet.types import WorkerPool
from core.pricing.base import ResolverRegistry

from .aggregator import ConfigPrice, PoolReport, PriceAggregator
from .formatter import format_price, render_json, render_lines, report_to_dict, round_price

logger = logging.getLogger(__name__)


def generate_reports(
    client: WorkerManagerClient,
    registry: ResolverRegistry,
    on_pool: Callable[[WorkerPool], None] | None = None,
) -> list[PoolReport]:
    """provider/워커 풀 목록을 조회하여 전체 풀의 가격 리포트 생성

    Args:
        client: worker-manager 클라이언트
        registry: providerType -> resolver 레지스트리
        on_pool: 풀 처리 시작 시 호출되는 콜백

    Returns:
        목록 순서대로의 PoolReport 리스트
    """
    provider_types = client.list_provider_types()
    pools = client.list_worker_pools()
    logger.info(f"provider {len(provider_types)}개, 워커 풀 {len(pools)}개")
    reports = PriceAggregator(provider_types, registry).aggregate(pools, on_pool=on_pool)

    for resolver in registry:
        cache = getattr(resolver, "cache", None)
        if cache is not None:
            logger.debug(f"[{cache.name}] 가격 캐시 통계: {cache.metrics.to_dict()}")
    return reports


__all__: list[str] = [
    "generate_reports",
    "ConfigPrice",
    "PoolReport",
    "PriceAggregator",
    "format_price",
    "render_json",
    "render_lines",
    "report_to_dict",
    "round_price",
]
