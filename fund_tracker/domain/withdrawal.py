"""Year-by-year corpus drawdown during a withdrawal phase."""
from __future__ import annotations

from .models import WithdrawalInputs, WithdrawalYear
from .projection import TAX_EXEMPTION, TAX_RATE, tax_on_gains


def simulate_withdrawal(
    initial_corpus: float,
    withdrawal_rate_percent: float,
    growth_rate_percent: float,
    years: int,
    exemption: float = TAX_EXEMPTION,
    rate: float = TAX_RATE,
) -> list[WithdrawalYear]:
    schedule: list[WithdrawalYear] = []
    current = initial_corpus
    for year in range(1, years + 1):
        annual_withdrawal = current * withdrawal_rate_percent / 100
        remaining = current - annual_withdrawal
        growth = remaining * growth_rate_percent / 100
        ending = remaining + growth
        tax = tax_on_gains(annual_withdrawal, exemption=exemption, rate=rate)
        schedule.append(
            WithdrawalYear(
                year=year,
                starting_corpus=current,
                annual_withdrawal=annual_withdrawal,
                growth_amount=growth,
                annual_tax=tax,
                ending_corpus=ending,
                monthly_income_before_tax=annual_withdrawal / 12,
                monthly_income_after_tax=(annual_withdrawal - tax) / 12,
            )
        )
        current = ending
    return schedule


def simulate_from_inputs(inputs: WithdrawalInputs) -> list[WithdrawalYear]:
    return simulate_withdrawal(
        inputs.initial_corpus,
        inputs.withdrawal_rate,
        inputs.growth_rate,
        inputs.years,
    )
