"""
core/pricing/cache.py - 실행 단위 가격 메모이제이션 캐시

provider별로 하나씩 생성되어 ``조회 키 -> 가격`` 을 기억합니다.
캐시 미스일 때만 fetch 함수를 호출하며, 결과 레코드 수에 따라:
    - 1건: 해당 가격 저장
    - 0건: ``NOT_AVAILABLE`` 저장 (가격 없음도 캐싱되어 재조회하지 않음)
    - 2건 이상: ``AmbiguousPriceError`` (실행 전체 중단)

만료/무효화는 없습니다. 캐시 수명은 캐시 객체 수명(한 번의 실행)과 같습니다.

사용법:
    from core.pricing.cache import NOT_AVAILABLE, PriceCache

    cache = PriceCache("aws")
    price = cache.lookup("us-east-1a/m5.large", lambda: fetch_records(...))
    if price is NOT_AVAILABLE:
        ...
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Union

from core.exceptions import AmbiguousPriceError

logger = logging.getLogger(__name__)


class Availability(Enum):
    """가격 없음 sentinel (아직 조회 안 함과 구분)"""

    NOT_AVAILABLE = "N/A"

    def __repr__(self) -> str:
        return "NOT_AVAILABLE"


NOT_AVAILABLE = Availability.NOT_AVAILABLE

# 시간당 USD 가격 또는 NOT_AVAILABLE
PriceResult = Union[Decimal, Availability]

# 캐시 미스 시 호출되는 가격 레코드 조회 함수
RecordFetcher = Callable[[], Sequence[Decimal]]


def is_available(price: PriceResult) -> bool:
    """실제 가격 값이면 True"""
    return price is not NOT_AVAILABLE


@dataclass
class CacheMetrics:
    """캐시 조회 통계

    Attributes:
        hits: 캐시 히트 횟수
        misses: 캐시 미스(= fetch 호출) 횟수
        unavailable: NOT_AVAILABLE로 저장된 키 수
    """

    hits: int = 0
    misses: int = 0
    unavailable: int = 0

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0

    def to_dict(self) -> dict[str, float | int]:
        return {
            "hits": self.hits,
            "misses": self.misses,
            "unavailable": self.unavailable,
            "hit_rate": round(self.hit_rate, 2),
        }


class PriceCache:
    """provider 단위 가격 메모이제이션 캐시

    Attributes:
        name: 로그 식별용 이름 (예: ``"aws"``)
        metrics: 조회 통계
    """

    def __init__(self, name: str = "default"):
        self.name = name
        self.metrics = CacheMetrics()
        self._prices: dict[str, PriceResult] = {}

    def __contains__(self, key: str) -> bool:
        return key in self._prices

    def __len__(self) -> int:
        return len(self._prices)

    def lookup(self, key: str, fetch: RecordFetcher) -> PriceResult:
        """키에 해당하는 가격 조회 (미스일 때만 fetch 호출)

        Args:
            key: provider별 조회 키 (예: ``"us-east-1a/m5.large"``)
            fetch: 가격 레코드 목록을 반환하는 함수

        Returns:
            가격(Decimal) 또는 NOT_AVAILABLE

        Raises:
            AmbiguousPriceError: 레코드가 2건 이상인 경우
        """
        if key in self._prices:
            self.metrics.hits += 1
            return self._prices[key]

        self.metrics.misses += 1
        records = list(fetch())

        if len(records) > 1:
            logger.error(f"[{self.name}] 가격 레코드 중복: {key} -> {records}")
            raise AmbiguousPriceError(key, records)

        if not records:
            logger.debug(f"[{self.name}] 가격 정보 없음: {key}")
            self.metrics.unavailable += 1
            price: PriceResult = NOT_AVAILABLE
        else:
            price = records[0]
            logger.debug(f"[{self.name}] 가격 저장: {key} = {price}")

        self._prices[key] = price
        return price
