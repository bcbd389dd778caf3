"""
core/fleet - worker-manager (워커 풀 관리) API 접근

Usage:
    from core.fleet import WorkerManagerClient, WorkerPool, ProviderType
"""

from .client import WorkerManagerClient
from .pagination import collect_mapping, collect_pages, iter_pages
from .types import LaunchConfig, ProviderType, WorkerPool, provider_type_name

__all__: list[str] = [
    "WorkerManagerClient",
    "collect_pages",
    "collect_mapping",
    "iter_pages",
    "LaunchConfig",
    "ProviderType",
    "WorkerPool",
    "provider_type_name",
]
