import pytest

from fund_tracker.domain.models import WithdrawalInputs
from fund_tracker.domain.withdrawal import simulate_from_inputs, simulate_withdrawal


def test_zero_withdrawal_grows_corpus_each_year():
    schedule = simulate_withdrawal(1_000_000, 0, 8, 5)

    assert len(schedule) == 5
    for row in schedule:
        assert row.annual_withdrawal == 0
        assert row.annual_tax == 0
        assert row.ending_corpus == pytest.approx(row.starting_corpus * 1.08)


def test_each_year_starts_from_previous_ending():
    schedule = simulate_withdrawal(5_000_000, 6, 7, 10)

    assert [row.year for row in schedule] == list(range(1, 11))
    assert schedule[0].starting_corpus == 5_000_000
    for prev, cur in zip(schedule, schedule[1:]):
        assert cur.starting_corpus == pytest.approx(prev.ending_corpus)


def test_first_year_figures():
    (row,) = simulate_withdrawal(10_000_000, 4, 8, 1)

    assert row.annual_withdrawal == pytest.approx(400_000)
    assert row.growth_amount == pytest.approx(9_600_000 * 0.08)
    assert row.ending_corpus == pytest.approx(9_600_000 * 1.08)
    assert row.annual_tax == pytest.approx((400_000 - 150_000) * 0.125)
    assert row.monthly_income_before_tax == pytest.approx(400_000 / 12)
    assert row.monthly_income_after_tax == pytest.approx((400_000 - row.annual_tax) / 12)


def test_small_withdrawals_are_untaxed():
    (row,) = simulate_withdrawal(1_000_000, 10, 5, 1)

    assert row.annual_withdrawal == pytest.approx(100_000)
    assert row.annual_tax == 0
    assert row.monthly_income_after_tax == pytest.approx(row.monthly_income_before_tax)


def test_no_years_yields_empty_schedule():
    assert simulate_withdrawal(1_000_000, 4, 8, 0) == []


def test_simulation_is_repeatable():
    inputs = WithdrawalInputs(initial_corpus=2_000_000, withdrawal_rate=5, growth_rate=6, years=3)

    assert simulate_from_inputs(inputs) == simulate_from_inputs(inputs)
