"""
cli/ui/console.py - Rich 콘솔 유틸리티

리포트 출력(stdout)과 로그/에러 출력(stderr)을 위한 Rich 콘솔과 헬퍼 함수들
"""

import logging
import platform

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from core.report import PoolReport, format_price
from core.report.formatter import AVERAGE_LABEL, STATIC_POOL_TEXT, capacity_suffix

# botocore 노이즈 로그 제한
logging.getLogger("botocore.httpchecksum").setLevel(logging.WARNING)
logging.getLogger("botocore.credentials").setLevel(logging.WARNING)
logging.getLogger("botocore.loaders").setLevel(logging.WARNING)
logging.getLogger("botocore.session").setLevel(logging.WARNING)
logging.getLogger("urllib3.connectionpool").setLevel(logging.WARNING)


def get_console(stderr: bool = False) -> Console:
    """Rich Console 인스턴스를 생성하고 반환합니다."""
    is_windows = platform.system().lower() == "windows"

    return Console(
        stderr=stderr,
        color_system="auto",
        highlight=False,
        soft_wrap=True,
        markup=True,
        emoji=not is_windows,
    )


# 전역 콘솔 인스턴스 (리포트: stdout, 로그/에러: stderr)
console = get_console()
err_console = get_console(stderr=True)


def configure_logging(level: str = "WARNING", show_traceback: bool = False) -> None:
    """루트 logger에 Rich 핸들러를 설정합니다.

    Args:
        level: 로그 레벨 이름
        show_traceback: 예외 로그에 Rich traceback 표시 여부
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)

    handler = RichHandler(console=err_console, rich_tracebacks=show_traceback, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    root.addHandler(handler)
    root.setLevel(level)


def print_pool_report(report: PoolReport) -> None:
    """워커 풀 리포트 출력

    풀 ID는 노란색, 설정 이름은 cyan, 가격은 magenta로 표시합니다.
    텍스트 내용은 core.report.render_lines()와 동일합니다.
    """
    console.print(f"[yellow]{escape(report.worker_pool_id)}[/yellow] ({escape(report.provider_type_name)})")

    if report.is_static:
        console.print(f"  {STATIC_POOL_TEXT}")
        return

    for config in report.configs:
        console.print(
            f"  [cyan]{escape(config.display_name)}[/cyan] "
            f"[magenta]{escape(format_price(config.price))}[/magenta]"
            f"{capacity_suffix(config.capacity_per_instance)}"
        )
    console.print(f"  {AVERAGE_LABEL}: [magenta]{escape(format_price(report.average))}[/magenta]")


def print_reports(reports: list[PoolReport]) -> None:
    for report in reports:
        print_pool_report(report)
