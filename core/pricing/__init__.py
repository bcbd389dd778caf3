"""
core/pricing - provider별 가격 조회

구성:
    cache.py   - 실행 단위 가격 메모이제이션 (PriceCache, NOT_AVAILABLE)
    base.py    - resolver 인터페이스, ResolverRegistry
    aws.py     - EC2 Spot 가격 resolver
    google.py  - GCP resolver (미구현, 항상 N/A)
    client.py  - boto3 client 헬퍼

Usage:
    from core.pricing import build_registry

    registry = build_registry(profile="my-profile")
    resolved = registry.get("aws").resolve(launch_config, "proj/wp-1")
"""

from __future__ import annotations

from core.config import DEFAULT_PRODUCT_DESCRIPTION

from .aws import AwsSpotPriceResolver, fetch_spot_prices
from .base import PriceResolver, ResolvedPrice, ResolverRegistry, UnsupportedProviderResolver
from .cache import NOT_AVAILABLE, Availability, PriceCache, PriceResult, is_available
from .client import EC2ClientRegistry
from .google import GoogleComputePriceResolver


def build_registry(
    profile: str | None = None,
    product_description: str = DEFAULT_PRODUCT_DESCRIPTION,
) -> ResolverRegistry:
    """기본 resolver 구성 (aws, google)

    Args:
        profile: boto3 프로파일 이름
        product_description: Spot 가격 조회 제품 설명

    Returns:
        ResolverRegistry
    """
    return ResolverRegistry(
        [
            AwsSpotPriceResolver(EC2ClientRegistry(profile=profile), product_description=product_description),
            GoogleComputePriceResolver(),
        ]
    )


__all__: list[str] = [
    "build_registry",
    "AwsSpotPriceResolver",
    "fetch_spot_prices",
    "GoogleComputePriceResolver",
    "PriceResolver",
    "ResolvedPrice",
    "ResolverRegistry",
    "UnsupportedProviderResolver",
    "NOT_AVAILABLE",
    "Availability",
    "PriceCache",
    "PriceResult",
    "is_available",
    "EC2ClientRegistry",
]
