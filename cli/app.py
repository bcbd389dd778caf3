"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반 CLI 애플리케이션 진입점입니다.
worker-manager에서 provider/워커 풀 목록을 조회하고, 런치 설정별 시간당 가격과
capacity 단위 평균 가격을 출력합니다.

명령어 구조:
    wpp                         # 콘솔 리포트
    wpp -f json                 # JSON 리포트
    wpp -p my-profile           # AWS 프로파일 지정
    wpp -v                      # DEBUG 로그 + traceback
    wpp --version               # 버전 표시

종료 코드:
    0: 성공
    1: 실패 (설정 오류, 중복 가격 레코드, API 오류 등 모든 예외)
    130: 사용자 중단 (Ctrl+C)

Usage:
    $ TASKCLUSTER_ROOT_URL=https://tc.example.com wpp
    $ python -m cli.app
"""

import logging
import sys

import click

from cli.ui import configure_logging, console, err_console, print_reports
from core.config import Settings, get_version, load_settings
from core.exceptions import ConfigurationError
from core.fleet import WorkerManagerClient
from core.pricing import build_registry
from core.report import generate_reports, render_json

logger = logging.getLogger(__name__)

VERSION = get_version()

OUTPUT_FORMATS = ("console", "json")


def run(settings: Settings, output_format: str = "console") -> int:
    """리포트 생성 및 출력

    Returns:
        0: 성공
        1: 실패
        130: 사용자 중단
    """
    try:
        client = WorkerManagerClient.from_environment()
        registry = build_registry(profile=settings.aws_profile, product_description=settings.product_description)

        with err_console.status("워커 풀 목록 조회 중...") as status:
            reports = generate_reports(
                client,
                registry,
                on_pool=lambda pool: status.update(f"가격 조회 중: {pool.worker_pool_id}"),
            )
    except KeyboardInterrupt:
        err_console.print("\n[dim]중단됨[/dim]")
        return 130
    except Exception as e:
        logger.error(f"가격 리포트 생성 실패: {e}", exc_info=settings.log_level == "DEBUG")
        return 1

    if output_format == "json":
        console.print_json(render_json(reports))
    else:
        print_reports(reports)
    return 0


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(VERSION, prog_name="wpp")
@click.option("-p", "--profile", "profile", default=None, help="AWS 프로파일 (기본: AWS_PROFILE / 기본 credential chain)")
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default="console",
    show_default=True,
    help="출력 형식",
)
@click.option("--product-description", default=None, help="Spot 가격 조회 제품 설명 (기본: Linux/UNIX (Amazon VPC))")
@click.option("-v", "--verbose", is_flag=True, help="DEBUG 로그 및 traceback 출력")
def cli(profile: str | None, output_format: str, product_description: str | None, verbose: bool) -> None:
    """워커 풀별 시간당 예상 비용 리포트"""
    try:
        settings = load_settings(
            aws_profile=profile,
            product_description=product_description,
            log_level="DEBUG" if verbose else None,
        )
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e
    configure_logging(settings.log_level, show_traceback=verbose)
    sys.exit(run(settings, output_format))


if __name__ == "__main__":
    cli()
