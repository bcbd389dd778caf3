"""
core/pricing/google.py - GCP Compute 가격 조회 (미구현)

Cloud Billing Catalog에서 ``compute.`` 서비스를 찾아 SKU 가격으로 환산하는 것이
목표였으나, machineType -> SKU 매핑이 정해져 있지 않아 항상 가격 없음을 반환합니다.
외부 API는 호출하지 않습니다.
"""

from __future__ import annotations

from core.fleet.types import LaunchConfig, ProviderType

from .base import PriceResolver, ResolvedPrice
from .cache import NOT_AVAILABLE


class GoogleComputePriceResolver(PriceResolver):
    """GCP 런치 설정 resolver (항상 N/A)"""

    provider_type = ProviderType.GOOGLE

    def resolve(self, launch_config: LaunchConfig, worker_pool_id: str | None = None) -> ResolvedPrice:
        machine_type = launch_config.get("machineType")
        zone = launch_config.get("zone")
        # TODO: billing catalog SKU lookup once machineType -> SKU mapping is defined
        return ResolvedPrice(NOT_AVAILABLE, f"{zone} {machine_type}")
