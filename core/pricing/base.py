"""
core/pricing/base.py - provider별 가격 resolver 인터페이스와 레지스트리

resolver는 런치 설정 하나를 받아 ``ResolvedPrice(price, display_name)`` 를 돌려줍니다.
aggregator는 워커 풀의 providerType으로 ``ResolverRegistry`` 에서 resolver를 고릅니다.
등록되지 않은 providerType은 ``UnsupportedProviderResolver`` 가 처리하여
가격 없음(N/A)으로 표시됩니다.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass

from core.fleet.types import LaunchConfig, ProviderType, provider_type_name

from .cache import NOT_AVAILABLE, PriceResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedPrice:
    """런치 설정 하나의 가격 조회 결과

    Attributes:
        price: 시간당 USD 가격 또는 NOT_AVAILABLE
        display_name: 리포트 표시 이름 (예: ``"us-east-1a m5.large"``)
    """

    price: PriceResult
    display_name: str


class PriceResolver(ABC):
    """provider별 가격 resolver 베이스"""

    provider_type: ProviderType | str

    @abstractmethod
    def resolve(self, launch_config: LaunchConfig, worker_pool_id: str | None = None) -> ResolvedPrice:
        """런치 설정의 가격과 표시 이름 반환"""


class UnsupportedProviderResolver(PriceResolver):
    """가격 조회 방법이 없는 providerType용 resolver (항상 N/A)"""

    def __init__(self, provider_type: ProviderType | str):
        self.provider_type = provider_type
        self._warned = False

    def resolve(self, launch_config: LaunchConfig, worker_pool_id: str | None = None) -> ResolvedPrice:
        name = provider_type_name(self.provider_type)
        if not self._warned:
            logger.warning(f"가격 조회를 지원하지 않는 providerType: {name}")
            self._warned = True
        return ResolvedPrice(NOT_AVAILABLE, f"<unsupported provider type {name}>")


class ResolverRegistry:
    """providerType -> resolver 매핑"""

    def __init__(self, resolvers: list[PriceResolver] | None = None):
        self._resolvers: dict[str, PriceResolver] = {}
        for resolver in resolvers or []:
            self.register(resolver)

    def register(self, resolver: PriceResolver) -> None:
        self._resolvers[provider_type_name(resolver.provider_type)] = resolver

    def get(self, provider_type: ProviderType | str) -> PriceResolver:
        """등록된 resolver 반환 (없으면 UnsupportedProviderResolver를 등록 후 반환)"""
        name = provider_type_name(provider_type)
        if name not in self._resolvers:
            self._resolvers[name] = UnsupportedProviderResolver(provider_type)
        return self._resolvers[name]

    def __contains__(self, provider_type: ProviderType | str) -> bool:
        return provider_type_name(provider_type) in self._resolvers

    def __iter__(self) -> Iterator[PriceResolver]:
        return iter(self._resolvers.values())
