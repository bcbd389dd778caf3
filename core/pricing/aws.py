"""
core/pricing/aws.py - Amazon EC2 Spot 가격 조회

AWS provider 워커 풀의 런치 설정을 Spot 가격으로 환산합니다.
``describe_spot_price_history`` 를 StartTime = EndTime = 현재 시각으로 호출하여
해당 AZ/인스턴스 타입의 최신 Spot 가격 한 건을 얻습니다.

조회 조건:
    - InstanceTypes: 런치 설정의 ``launchConfig.InstanceType``
    - ProductDescriptions: ``Linux/UNIX (Amazon VPC)`` (설정으로 변경 가능)
    - Filter: ``availability-zone`` = ``launchConfig.Placement.AvailabilityZone``

캐시 키:
    ``{availability_zone}/{instance_type}``

사용법:
    from core.pricing.aws import AwsSpotPriceResolver

    resolver = AwsSpotPriceResolver(EC2ClientRegistry())
    resolved = resolver.resolve(launch_config, "proj/wp-1")
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from decimal import Decimal

from core.config import DEFAULT_PRODUCT_DESCRIPTION
from core.exceptions import MissingAvailabilityZoneError
from core.fleet.types import LaunchConfig, ProviderType

from .base import PriceResolver, ResolvedPrice
from .cache import PriceCache
from .client import EC2ClientRegistry

logger = logging.getLogger(__name__)


def fetch_spot_prices(
    ec2,
    instance_type: str,
    availability_zone: str,
    product_description: str = DEFAULT_PRODUCT_DESCRIPTION,
    now: datetime | None = None,
) -> list[Decimal]:
    """현재 시점의 Spot 가격 레코드 조회

    Args:
        ec2: EC2 client
        instance_type: 인스턴스 타입 (예: ``"m5.large"``)
        availability_zone: 가용 영역 (예: ``"us-east-1a"``)
        product_description: 제품 설명 필터
        now: 조회 시점 (기본: 현재 UTC 시각)

    Returns:
        레코드별 시간당 USD 가격 리스트 (0건, 1건 또는 여러 건)
    """
    now = now or datetime.now(timezone.utc)
    response = ec2.describe_spot_price_history(
        InstanceTypes=[instance_type],
        ProductDescriptions=[product_description],
        Filters=[{"Name": "availability-zone", "Values": [availability_zone]}],
        StartTime=now,
        EndTime=now,
    )
    history = response.get("SpotPriceHistory", [])
    return [Decimal(record["SpotPrice"]) for record in history]


class AwsSpotPriceResolver(PriceResolver):
    """AWS 런치 설정 -> Spot 가격 resolver

    Attributes:
        clients: 리전별 EC2 client 레지스트리
        cache: ``{az}/{instance_type}`` 키 가격 캐시
        product_description: Spot 가격 조회 제품 설명
    """

    provider_type = ProviderType.AWS

    def __init__(
        self,
        clients: EC2ClientRegistry,
        cache: PriceCache | None = None,
        product_description: str = DEFAULT_PRODUCT_DESCRIPTION,
    ):
        self.clients = clients
        self.cache = cache if cache is not None else PriceCache("aws")
        self.product_description = product_description

    def resolve(self, launch_config: LaunchConfig, worker_pool_id: str | None = None) -> ResolvedPrice:
        region = launch_config.get("region")
        aws_config = launch_config.get("launchConfig") or {}
        instance_type = aws_config.get("InstanceType")
        az = (aws_config.get("Placement") or {}).get("AvailabilityZone")
        if not az:
            raise MissingAvailabilityZoneError(worker_pool_id=worker_pool_id, instance_type=instance_type)

        key = f"{az}/{instance_type}"
        price = self.cache.lookup(
            key,
            lambda: fetch_spot_prices(self.clients.get(region), instance_type, az, self.product_description),
        )
        return ResolvedPrice(price, f"{az} {instance_type}")
