import pytest

from fund_tracker.domain.models import ProjectionInputs
from fund_tracker.domain.projection import (
    lumpsum_value,
    project_investment,
    sip_future_value,
    tax_on_gains,
    total_investment,
)


@pytest.mark.parametrize("years", [0, 1, 5, 30])
def test_zero_growth_leaves_principal_unchanged(years):
    assert lumpsum_value(25_000, 0, years) == pytest.approx(25_000)


def test_lumpsum_compounds_annually():
    assert lumpsum_value(10_000, 10, 2) == pytest.approx(12_100)


def test_sip_matches_annuity_due_formula():
    m = 12 / 1200
    expected = 5_000 * ((1 + m) ** 120 - 1) / m * (1 + m)
    assert sip_future_value(5_000, 12, 10) == pytest.approx(expected)


def test_sip_at_zero_rate_is_sum_of_contributions():
    assert sip_future_value(5_000, 0, 10) == pytest.approx(600_000)


def test_tax_threshold():
    assert tax_on_gains(150_000) == 0
    assert tax_on_gains(250_000) == pytest.approx(12_500)
    assert tax_on_gains(-10_000) == 0


def test_total_investment_by_mode():
    assert total_investment(ProjectionInputs("sip", 1_000, 12, 3)) == 36_000
    assert total_investment(ProjectionInputs("lumpsum", 1_000, 12, 3)) == 1_000


def test_projection_summary_lumpsum():
    summary = project_investment(ProjectionInputs("lumpsum", 1_000_000, 10, 5))

    projected = 1_000_000 * 1.1 ** 5
    gains = projected - 1_000_000
    assert summary.total_investment == 1_000_000
    assert summary.projected_value == pytest.approx(projected)
    assert summary.total_gains == pytest.approx(gains)
    assert summary.tax_amount == pytest.approx((gains - 150_000) * 0.125)
    assert summary.post_tax_value == pytest.approx(projected - summary.tax_amount)


def test_negative_gains_are_not_taxed():
    summary = project_investment(ProjectionInputs("lumpsum", 100_000, -20, 2))

    assert summary.total_gains < 0
    assert summary.tax_amount == 0
    assert summary.post_tax_value == pytest.approx(summary.projected_value)
