# cli/ui - 콘솔 출력 컴포넌트 (rich)
"""
콘솔 출력 모듈

리포트 출력, 로깅 설정
"""

from .console import (
    configure_logging,
    console,
    err_console,
    get_console,
    print_pool_report,
    print_reports,
)

__all__ = [
    "configure_logging",
    "console",
    "err_console",
    "get_console",
    "print_pool_report",
    "print_reports",
]
