"""
tests/conftest.py - pytest 공통 픽스처

worker-manager / EC2 API 모킹과 테스트 헬퍼를 제공합니다.

Usage:
    def test_something(mock_ec2_registry, mock_ec2_client):
        # mock_ec2_client: describe_spot_price_history 모킹 EC2 client
        # mock_ec2_registry: 모든 리전에 mock_ec2_client를 돌려주는 레지스트리
        pass
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """테스트 환경 설정"""
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("TASKCLUSTER_ROOT_URL", "https://tc.example.com")
    for name in ("WPP_PRODUCT_DESCRIPTION", "WPP_LOG_LEVEL", "AWS_PROFILE"):
        monkeypatch.delenv(name, raising=False)

    yield


# =============================================================================
# 응답 헬퍼
# =============================================================================


def aws_launch_config(
    instance_type: str = "m5.large",
    az: Optional[str] = "us-east-1a",
    region: str = "us-east-1",
    capacity: int = 1,
) -> Dict[str, Any]:
    """AWS provider 런치 설정 dict 생성 (az=None이면 Placement 생략)"""
    launch_config: Dict[str, Any] = {"InstanceType": instance_type}
    if az is not None:
        launch_config["Placement"] = {"AvailabilityZone": az}
    return {"region": region, "capacityPerInstance": capacity, "launchConfig": launch_config}


def worker_pool(worker_pool_id: str, provider_id: str, launch_configs: Optional[List[Dict[str, Any]]] = None):
    """worker-manager 워커 풀 dict 생성"""
    return {
        "workerPoolId": worker_pool_id,
        "providerId": provider_id,
        "config": {"launchConfigs": launch_configs or []},
    }


def spot_history(*prices: str) -> Dict[str, Any]:
    """describe_spot_price_history 응답 생성"""
    return {
        "SpotPriceHistory": [
            {
                "AvailabilityZone": "us-east-1a",
                "InstanceType": "m5.large",
                "ProductDescription": "Linux/UNIX (Amazon VPC)",
                "SpotPrice": price,
            }
            for price in prices
        ]
    }


class FakeWorkerManager:
    """continuationToken 페이지 응답을 순서대로 돌려주는 worker-manager 대역

    Attributes:
        calls: 메서드별 호출 query 기록
    """

    def __init__(
        self,
        provider_pages: Optional[List[Dict[str, Any]]] = None,
        pool_pages: Optional[List[Dict[str, Any]]] = None,
    ):
        self._pages = {
            "listProviders": list(provider_pages or [{"providers": []}]),
            "listWorkerPools": list(pool_pages or [{"workerPools": []}]),
        }
        self.calls: Dict[str, List[Dict[str, Any]]] = {"listProviders": [], "listWorkerPools": []}

    def _next(self, method: str, query: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        self.calls[method].append(dict(query or {}))
        return self._pages[method].pop(0)

    def listProviders(self, query=None):  # noqa: N802
        return self._next("listProviders", query)

    def listWorkerPools(self, query=None):  # noqa: N802
        return self._next("listWorkerPools", query)


# =============================================================================
# 픽스처
# =============================================================================


@pytest.fixture
def mock_ec2_client():
    """EC2 클라이언트 모킹 (기본: 가격 레코드 1건, 0.05)"""
    mock_client = MagicMock()
    mock_client.describe_spot_price_history.return_value = spot_history("0.05")
    yield mock_client


@pytest.fixture
def mock_ec2_registry(mock_ec2_client):
    """모든 리전에 대해 mock_ec2_client를 돌려주는 EC2ClientRegistry 대역"""
    registry = MagicMock()
    registry.get.return_value = mock_ec2_client
    return registry
