# tests/cli/test_app.py
"""
Tests for cli/app.py - Main CLI entry point

Tests cover:
- CLI version display
- Console report end-to-end (worker-manager + EC2 mocked)
- JSON report output
- Fatal errors -> exit code 1, no partial report
"""

import json
import logging
import re
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner
from conftest import FakeWorkerManager, aws_launch_config, spot_history, worker_pool

from core.fleet.client import WorkerManagerClient

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")


def plain(text: str) -> str:
    """ANSI 색상 코드 제거"""
    return ANSI_ESCAPE.sub("", text)


PROVIDER_PAGES = [
    {
        "providers": [
            {"providerId": "aws", "providerType": "aws"},
            {"providerId": "static", "providerType": "static"},
        ]
    }
]


@pytest.fixture(autouse=True)
def reset_root_logging():
    """CLI가 설정한 루트 로그 레벨 복원"""
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def run_cli(runner, mock_ec2_client):
    """worker-manager/EC2를 모킹하고 CLI 실행"""

    def _run(pool_pages, *args):
        wm = FakeWorkerManager(provider_pages=PROVIDER_PAGES, pool_pages=pool_pages)
        with patch("cli.app.WorkerManagerClient.from_environment", return_value=WorkerManagerClient(wm)), patch(
            "core.pricing.client.get_client", return_value=mock_ec2_client
        ):
            from cli.app import cli

            return runner.invoke(cli, list(args))

    return _run


# =============================================================================
# Version Tests
# =============================================================================


class TestVersion:
    """버전 표시 테스트"""

    def test_version_option(self, runner):
        from cli.app import VERSION, cli

        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert VERSION in result.output

    def test_version_constant_set(self):
        from cli.app import VERSION

        assert isinstance(VERSION, str)
        assert len(VERSION) > 0


# =============================================================================
# Console Report Tests
# =============================================================================


class TestConsoleReport:
    """콘솔 리포트 end-to-end 테스트"""

    def test_single_priced_config(self, run_cli):
        """가격 0.05, capacity 2 -> 평균 0.025"""
        result = run_cli([{"workerPools": [worker_pool("wp-1", "aws", [aws_launch_config(capacity=2)])]}])

        assert result.exit_code == 0
        assert plain(result.stdout).splitlines() == [
            "wp-1 (aws)",
            "  us-east-1a m5.large USD $0.05/hr ÷ 2",
            "  Average Price per Capacity: USD $0.025/hr",
        ]

    def test_no_price_records(self, run_cli, mock_ec2_client):
        """가격 레코드 0건 -> N/A"""
        mock_ec2_client.describe_spot_price_history.return_value = {"SpotPriceHistory": []}

        result = run_cli([{"workerPools": [worker_pool("wp-1", "aws", [aws_launch_config(capacity=2)])]}])

        assert result.exit_code == 0
        assert plain(result.stdout).splitlines() == [
            "wp-1 (aws)",
            "  us-east-1a m5.large N/A ÷ 2",
            "  Average Price per Capacity: N/A",
        ]

    def test_static_pool_and_pagination(self, run_cli, mock_ec2_client):
        """여러 페이지 + static 풀, 같은 AZ/타입은 한 번만 조회"""
        result = run_cli(
            [
                {"workerPools": [worker_pool("wp-static", "static")], "continuationToken": "t1"},
                {
                    "workerPools": [
                        worker_pool("wp-1", "aws", [aws_launch_config(capacity=1)]),
                        worker_pool("wp-2", "aws", [aws_launch_config(capacity=4)]),
                    ]
                },
            ]
        )

        assert result.exit_code == 0
        assert plain(result.stdout).splitlines() == [
            "wp-static (static)",
            "  No pricing for static worker pools",
            "wp-1 (aws)",
            "  us-east-1a m5.large USD $0.05/hr",
            "  Average Price per Capacity: USD $0.05/hr",
            "wp-2 (aws)",
            "  us-east-1a m5.large USD $0.05/hr ÷ 4",
            "  Average Price per Capacity: USD $0.0125/hr",
        ]
        mock_ec2_client.describe_spot_price_history.assert_called_once()

    def test_product_description_option(self, run_cli, mock_ec2_client):
        run_cli(
            [{"workerPools": [worker_pool("wp-1", "aws", [aws_launch_config()])]}],
            "--product-description",
            "Linux/UNIX",
        )

        kwargs = mock_ec2_client.describe_spot_price_history.call_args.kwargs
        assert kwargs["ProductDescriptions"] == ["Linux/UNIX"]


# =============================================================================
# JSON Report Tests
# =============================================================================


class TestJsonReport:
    """JSON 출력 테스트"""

    def test_json_output(self, run_cli):
        result = run_cli(
            [{"workerPools": [worker_pool("wp-1", "aws", [aws_launch_config(capacity=2)])]}],
            "-f",
            "json",
        )

        assert result.exit_code == 0
        data = json.loads(plain(result.stdout))
        assert data["workerPools"][0]["averagePricePerCapacity"] == "0.025"
        assert data["workerPools"][0]["launchConfigs"][0]["pricePerHour"] == "0.05"


# =============================================================================
# Failure Tests
# =============================================================================


class TestFailures:
    """치명적 오류 -> 종료 코드 1, 부분 리포트 없음"""

    def test_missing_availability_zone(self, run_cli, caplog):
        result = run_cli(
            [
                {
                    "workerPools": [
                        worker_pool("wp-0", "static"),
                        worker_pool("wp-1", "aws", [aws_launch_config(az=None, capacity=2)]),
                    ]
                }
            ]
        )

        assert result.exit_code == 1
        assert "No pricing for static worker pools" not in plain(result.stdout)
        assert "m5.large" not in plain(result.stdout)
        assert "worker pool wp-1 config does not specify AZ" in caplog.text

    def test_ambiguous_price_records(self, run_cli, mock_ec2_client, caplog):
        mock_ec2_client.describe_spot_price_history.return_value = spot_history("0.05", "0.06")

        result = run_cli([{"workerPools": [worker_pool("wp-1", "aws", [aws_launch_config()])]}])

        assert result.exit_code == 1
        assert "wp-1" not in plain(result.stdout)
        assert "us-east-1a/m5.large" in caplog.text

    def test_unknown_provider_id(self, run_cli, caplog):
        result = run_cli([{"workerPools": [worker_pool("wp-1", "gone")]}])

        assert result.exit_code == 1
        assert "unknown providerId 'gone'" in caplog.text

    def test_upstream_api_error(self, runner, caplog):
        """worker-manager API 오류도 종료 코드 1"""
        service = MagicMock()
        service.listProviders.side_effect = RuntimeError("401 Unauthorized")

        with patch("cli.app.WorkerManagerClient.from_environment", return_value=WorkerManagerClient(service)):
            from cli.app import cli

            result = runner.invoke(cli, [])

        assert result.exit_code == 1
        assert "401 Unauthorized" in caplog.text

    def test_keyboard_interrupt(self, runner):
        with patch("cli.app.WorkerManagerClient.from_environment", side_effect=KeyboardInterrupt):
            from cli.app import cli

            result = runner.invoke(cli, [])

        assert result.exit_code == 130

    def test_invalid_log_level(self, runner, monkeypatch):
        """잘못된 WPP_LOG_LEVEL -> traceback 없이 종료 코드 1"""
        monkeypatch.setenv("WPP_LOG_LEVEL", "VERBOSE")
        from cli.app import cli

        with patch("cli.app.WorkerManagerClient.from_environment") as from_environment:
            result = runner.invoke(cli, [])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "invalid log level 'VERBOSE'" in result.output
        from_environment.assert_not_called()

    def test_invalid_capacity(self, run_cli, caplog):
        result = run_cli([{"workerPools": [worker_pool("wp-1", "aws", [aws_launch_config(capacity=0)])]}])

        assert result.exit_code == 1
        assert "wp-1" not in plain(result.stdout)
        assert "invalid capacityPerInstance 0" in caplog.text
