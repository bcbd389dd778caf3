"""
core/report/aggregator.py - 워커 풀별 가격 집계

워커 풀을 목록 순서대로 순회하며 런치 설정마다 provider resolver로 가격을 조회하고,
capacity 가중 평균 가격(``Σ price/capacity ÷ 가격 있는 설정 수``)을 계산합니다.

    - static provider 풀: resolver를 호출하지 않고 "가격 없음" 리포트만 생성
    - 가격 없는 설정(N/A): 표시는 하지만 합계/개수에서 제외
    - 가격 있는 설정이 하나도 없으면 평균은 N/A

치명적 오류(알 수 없는 providerId, AZ 누락, 중복 가격 레코드)는 그대로 전파되며,
리포트는 전체 집계가 끝난 뒤에만 반환되므로 부분 리포트는 출력되지 않습니다.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from decimal import Decimal

from core.exceptions import UnknownProviderError
from core.fleet.types import ProviderType, WorkerPool, provider_type_name
from core.pricing.base import ResolverRegistry
from core.pricing.cache import NOT_AVAILABLE, PriceResult, is_available

logger = logging.getLogger(__name__)


@dataclass
class ConfigPrice:
    """런치 설정 하나의 가격 행"""

    display_name: str
    price: PriceResult
    capacity_per_instance: int = 1


@dataclass
class PoolReport:
    """워커 풀 하나의 집계 결과

    Attributes:
        worker_pool_id: 워커 풀 ID
        provider_type: provider 종류
        configs: 런치 설정 순서대로의 가격 행
        total: 가격 있는 설정의 ``price / capacity`` 합계
        priced_count: 가격 있는 설정 수
    """

    worker_pool_id: str
    provider_type: ProviderType | str
    configs: list[ConfigPrice] = field(default_factory=list)
    total: Decimal = Decimal(0)
    priced_count: int = 0

    @property
    def provider_type_name(self) -> str:
        return provider_type_name(self.provider_type)

    @property
    def is_static(self) -> bool:
        return self.provider_type == ProviderType.STATIC

    @property
    def average(self) -> PriceResult:
        """capacity 단위 평균 가격 (가격 있는 설정이 없으면 NOT_AVAILABLE)"""
        if self.priced_count == 0:
            return NOT_AVAILABLE
        return self.total / self.priced_count

    def add(self, display_name: str, price: PriceResult, capacity_per_instance: int) -> None:
        self.configs.append(ConfigPrice(display_name, price, capacity_per_instance))
        if is_available(price):
            self.total += price / capacity_per_instance
            self.priced_count += 1


class PriceAggregator:
    """워커 풀 목록 -> PoolReport 목록

    Attributes:
        provider_types: providerId -> providerType 매핑
        registry: providerType -> resolver 레지스트리
    """

    def __init__(self, provider_types: dict[str, ProviderType | str], registry: ResolverRegistry):
        self.provider_types = provider_types
        self.registry = registry

    def provider_type_of(self, pool: WorkerPool) -> ProviderType | str:
        if pool.provider_id not in self.provider_types:
            raise UnknownProviderError(pool.worker_pool_id, pool.provider_id)
        return self.provider_types[pool.provider_id]

    def aggregate_pool(self, pool: WorkerPool) -> PoolReport:
        provider_type = self.provider_type_of(pool)
        report = PoolReport(pool.worker_pool_id, provider_type)
        if report.is_static:
            return report

        resolver = self.registry.get(provider_type)
        for launch_config in pool.launch_configs:
            resolved = resolver.resolve(launch_config, pool.worker_pool_id)
            report.add(resolved.display_name, resolved.price, launch_config.capacity_per_instance)

        logger.debug(
            f"{pool.worker_pool_id}: 설정 {len(report.configs)}개 중 {report.priced_count}개 가격 조회됨"
        )
        return report

    def aggregate(
        self,
        pools: Iterable[WorkerPool],
        on_pool: Callable[[WorkerPool], None] | None = None,
    ) -> list[PoolReport]:
        """전체 워커 풀 집계 (목록 순서 유지)

        Args:
            pools: 워커 풀 목록
            on_pool: 풀 처리 시작 시 호출되는 콜백 (진행 표시용)
        """
        reports = []
        for pool in pools:
            if on_pool:
                on_pool(pool)
            reports.append(self.aggregate_pool(pool))
        return reports
