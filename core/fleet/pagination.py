"""
core/fleet/pagination.py - continuationToken 기반 페이지 수집

worker-manager 목록 API는 한 페이지와 함께 ``continuationToken`` 을 돌려주며,
토큰이 없는 페이지가 마지막 페이지입니다. 반복 횟수 제한은 두지 않습니다
(API가 결국 토큰 없는 페이지를 반환한다고 가정).

Example:
    from core.fleet.pagination import collect_pages

    pools = collect_pages(
        lambda token: wm.listWorkerPools(query={"continuationToken": token} if token else {}),
        "workerPools",
    )
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any

logger = logging.getLogger(__name__)

# 페이지 조회 함수: continuationToken(첫 호출은 None) -> 응답 dict
PageFetcher = Callable[[str | None], dict[str, Any]]

CONTINUATION_TOKEN = "continuationToken"


def iter_pages(fetch: PageFetcher) -> Iterator[dict[str, Any]]:
    """토큰이 없는 페이지가 나올 때까지 페이지를 순서대로 반환"""
    token: str | None = None
    page_no = 0
    while True:
        page = fetch(token)
        page_no += 1
        yield page

        token = page.get(CONTINUATION_TOKEN)
        if not token:
            logger.debug(f"페이지 수집 완료: {page_no} 페이지")
            return


def collect_pages(fetch: PageFetcher, items_key: str) -> list[Any]:
    """모든 페이지의 ``items_key`` 항목을 페이지 순서대로 이어 붙여 반환

    Args:
        fetch: 페이지 조회 함수
        items_key: 응답에서 항목 목록이 담긴 키 (예: ``"workerPools"``)

    Returns:
        전체 항목 리스트
    """
    items: list[Any] = []
    for page in iter_pages(fetch):
        items.extend(page.get(items_key) or [])
    return items


def collect_mapping(fetch: PageFetcher, items_key: str, key_field: str, value_field: str) -> dict[str, Any]:
    """모든 페이지의 항목을 ``{item[key_field]: item[value_field]}`` 로 수집

    같은 키가 다시 나오면 나중 값이 덮어씁니다.

    Args:
        fetch: 페이지 조회 함수
        items_key: 응답에서 항목 목록이 담긴 키 (예: ``"providers"``)
        key_field: 매핑 키로 사용할 필드 (예: ``"providerId"``)
        value_field: 매핑 값으로 사용할 필드 (예: ``"providerType"``)
    """
    mapping: dict[str, Any] = {}
    for page in iter_pages(fetch):
        for item in page.get(items_key) or []:
            mapping[item[key_field]] = item[value_field]
    return mapping
