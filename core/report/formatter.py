"""
core/report/formatter.py - 가격 리포트 텍스트/JSON 변환

리포트 형식:
    {workerPoolId} ({providerType})
      {displayName} {price}[ ÷ {capacityPerInstance}]
      Average Price per Capacity: {price}

가격 표기:
    ``USD $<소수점 4자리 반올림, 뒤쪽 0 제거>/hr`` 또는 ``N/A``
"""

from __future__ import annotations

import json
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from core.pricing.cache import PriceResult, is_available

from .aggregator import ConfigPrice, PoolReport

NOT_AVAILABLE_TEXT = "N/A"
STATIC_POOL_TEXT = "No pricing for static worker pools"
AVERAGE_LABEL = "Average Price per Capacity"

_QUANTUM = Decimal("0.0001")


def round_price(price: Decimal) -> str:
    """소수점 4자리 반올림 (half-up) 후 뒤쪽 0을 제거한 문자열"""
    rounded = price.quantize(_QUANTUM, rounding=ROUND_HALF_UP).normalize()
    return format(rounded, "f")


def format_price(price: PriceResult) -> str:
    if not is_available(price):
        return NOT_AVAILABLE_TEXT
    return f"USD ${round_price(price)}/hr"


def capacity_suffix(capacity_per_instance: int) -> str:
    return f" ÷ {capacity_per_instance}" if capacity_per_instance > 1 else ""


def format_header(report: PoolReport) -> str:
    return f"{report.worker_pool_id} ({report.provider_type_name})"


def format_config_line(config: ConfigPrice) -> str:
    return f"  {config.display_name} {format_price(config.price)}{capacity_suffix(config.capacity_per_instance)}"


def format_average_line(report: PoolReport) -> str:
    return f"  {AVERAGE_LABEL}: {format_price(report.average)}"


def render_lines(report: PoolReport) -> list[str]:
    """워커 풀 리포트를 색상 없는 텍스트 줄로 변환"""
    lines = [format_header(report)]
    if report.is_static:
        lines.append(f"  {STATIC_POOL_TEXT}")
        return lines

    lines.extend(format_config_line(config) for config in report.configs)
    lines.append(format_average_line(report))
    return lines


def _price_value(price: PriceResult) -> str | None:
    return round_price(price) if is_available(price) else None


def report_to_dict(report: PoolReport) -> dict[str, Any]:
    """JSON 출력용 dict (가격은 반올림 문자열, 가격 없음은 null)"""
    data: dict[str, Any] = {
        "workerPoolId": report.worker_pool_id,
        "providerType": report.provider_type_name,
    }
    if report.is_static:
        data["priced"] = False
        return data

    data["priced"] = True
    data["launchConfigs"] = [
        {
            "name": config.display_name,
            "pricePerHour": _price_value(config.price),
            "capacityPerInstance": config.capacity_per_instance,
        }
        for config in report.configs
    ]
    data["averagePricePerCapacity"] = _price_value(report.average)
    return data


def render_json(reports: list[PoolReport]) -> str:
    return json.dumps(
        {"currency": "USD", "unit": "hour", "workerPools": [report_to_dict(r) for r in reports]},
        indent=2,
        ensure_ascii=False,
    )
