from unittest.mock import MagicMock

from fund_tracker import cli
from fund_tracker.application.dto import FundView
from fund_tracker.domain.models import FundMetrics, FundRecord, NavSample, SearchResult
from fund_tracker.domain.services import FundAnalysis


def test_cagr_command(capsys):
    assert cli.main(["cagr", "10000", "20000", "--years", "1"]) == 0

    assert "CAGR: 100.00%" in capsys.readouterr().out


def test_cagr_command_with_bad_input_reports_zero(capsys):
    assert cli.main(["cagr", "abc", "20000"]) == 0

    assert "CAGR: 0.00%" in capsys.readouterr().out


def test_project_command_sip(capsys):
    assert cli.main(["project", "10000", "--sip", "--rate", "0", "--years", "2"]) == 0

    out = capsys.readouterr().out
    assert "Total Investment  ₹240,000.00" in out
    assert "Tax Amount        ₹0.00" in out


def test_withdraw_command_outputs_csv(capsys):
    assert cli.main(["withdraw", "1000000", "--withdrawal-rate", "0", "--growth-rate", "10", "--years", "2"]) == 0

    out = capsys.readouterr().out
    assert out.splitlines()[0].startswith("year,starting_corpus,annual_withdrawal")
    assert "Final corpus: ₹1,210,000.00" in out


def test_search_command(monkeypatch, capsys):
    services = MagicMock()
    services.search.execute.return_value = [SearchResult("1", "Alpha Fund", "Alpha")]
    monkeypatch.setattr(cli, "build_services", lambda: services)

    assert cli.main(["search", "alpha"]) == 0

    assert "1  Alpha Fund (Alpha)" in capsys.readouterr().out


def test_show_command(monkeypatch, capsys):
    fund = FundRecord(
        scheme_code="1",
        scheme_name="Alpha Fund",
        fund_house="Alpha",
        scheme_type="Open Ended Schemes",
        scheme_category="Equity Scheme - Large Cap Fund",
        nav_data=(NavSample("02-01-2024", "12.5"), NavSample("02-01-2022", "10")),
        metrics=FundMetrics(risk_level="Moderate"),
    )
    view = FundView(
        fund=fund,
        analysis=FundAnalysis(cagr={"Max": 11.8}, periods=("6M", "Max"), span="2Y", discontinued=True),
    )
    services = MagicMock()
    services.select.execute.return_value = view
    monkeypatch.setattr(cli, "build_services", lambda: services)

    assert cli.main(["show", "1"]) == 0

    out = capsys.readouterr().out
    assert "Current NAV: 12.5 (as of 02-01-2024)" in out
    assert "Discontinued/Merged fund" in out
    assert " Max: 11.80%" in out


def test_show_missing_fund(monkeypatch, capsys):
    services = MagicMock()
    services.select.execute.return_value = None
    monkeypatch.setattr(cli, "build_services", lambda: services)

    assert cli.main(["show", "404"]) == 1
