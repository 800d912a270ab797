"""命令行测试"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from click.testing import CliRunner

from cli import cli


@pytest.fixture
def runner():
    return CliRunner()


LOAN_ARGS = ["--principal", "10000", "--term-months", "12", "--annual-rate", "24"]


class TestScheduleCommand:
    def test_csv_output(self, runner):
        result = runner.invoke(cli, ["schedule", *LOAN_ARGS, "--method", "french"])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines[0] == "period,capital,interest,total,balance,cumulative_capital,cumulative_interest"
        assert len(lines) == 13
        assert lines[1].startswith("1,745.6,200.0,945.6,9254.4")

    def test_spanish_method_name(self, runner):
        result = runner.invoke(cli, ["schedule", *LOAN_ARGS, "--method", "americano"])
        assert result.exit_code == 0
        assert result.output.strip().splitlines()[-1].startswith("12,10000.0,200.0,10200.0,0.0")

    def test_zero_principal_rejected(self, runner):
        result = runner.invoke(cli, ["schedule", "--principal", "0", "--term-months", "12",
                                     "--annual-rate", "24"])
        assert result.exit_code == 2
        assert "mayor que 0" in result.output


class TestSummaryCommand:
    def test_german(self, runner):
        result = runner.invoke(cli, ["summary", *LOAN_ARGS, "--method", "german"])
        assert result.exit_code == 0
        assert "Primera cuota: S/ 1,033.33" in result.output
        assert "Total interest: S/ 1,300.00" in result.output
        assert "Total payable: S/ 11,300.00" in result.output


class TestTceaCommand:
    def test_french(self, runner):
        result = runner.invoke(cli, ["tcea", *LOAN_ARGS])
        assert result.exit_code == 0
        assert result.output.strip() == "TCEA: 26.82%"

    def test_long_term(self, runner):
        result = runner.invoke(cli, ["tcea", "--principal", "10000", "--term-months", "1200",
                                     "--annual-rate", "24", "--method", "german"])
        assert result.exit_code == 0
        assert result.output.strip() == "TCEA: 26.82%"


class TestCompareCommand:
    def test_rows(self, runner):
        result = runner.invoke(cli, ["compare", *LOAN_ARGS])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines[0].startswith("method,first_installment")
        assert [line.split(",")[0] for line in lines[1:]] == ["french", "german", "american"]

    def test_negative_rate_rejected(self, runner):
        result = runner.invoke(cli, ["compare", "--principal", "10000", "--term-months", "12",
                                     "--annual-rate", "-1"])
        assert result.exit_code == 2
        assert "negativa" in result.output
