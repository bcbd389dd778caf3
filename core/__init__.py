# core/__init__.py
"""
core - Worker Pool Pricing 코어

worker-manager 목록 조회, provider별 가격 조회, 워커 풀별 집계를 포함하는 최상위 패키지입니다.

아키텍처:
    core/
    ├── fleet/          # worker-manager API (페이지 수집, 데이터 타입)
    ├── pricing/        # provider별 가격 resolver, 실행 단위 가격 캐시
    ├── report/         # 워커 풀별 집계, 텍스트/JSON 형식
    ├── config.py       # 환경 변수 설정, 버전
    └── exceptions.py   # 통합 예외 계층

Usage:
    from core.fleet import WorkerManagerClient
    from core.pricing import build_registry
    from core.report import generate_reports, render_lines

    reports = generate_reports(WorkerManagerClient.from_environment(), build_registry())
    for report in reports:
        print("\\n".join(render_lines(report)))
"""

from core import config, exceptions, fleet, pricing, report

__all__: list[str] = [
    # 서브패키지
    "fleet",
    "pricing",
    "report",
    # 모듈
    "config",
    "exceptions",
]
