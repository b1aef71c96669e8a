"""Projection engine for lumpsum and SIP investments."""
from __future__ import annotations

from .models import ProjectionInputs, ProjectionSummary

TAX_EXEMPTION = 150_000.0
TAX_RATE = 0.125


def lumpsum_value(principal: float, annual_rate_percent: float, years: float) -> float:
    r = annual_rate_percent / 100
    return principal * (1 + r) ** years


def sip_future_value(monthly_amount: float, annual_rate_percent: float, years: float) -> float:
    """Future value of an annuity-due with monthly contributions.

    At a zero rate the closed form is undefined; its limit, the plain sum of
    contributions, is returned instead.
    """
    monthly_rate = annual_rate_percent / (12 * 100)
    months = years * 12
    if monthly_rate == 0:
        return monthly_amount * months
    return monthly_amount * (((1 + monthly_rate) ** months - 1) / monthly_rate) * (1 + monthly_rate)


def tax_on_gains(
    total_gains: float,
    exemption: float = TAX_EXEMPTION,
    rate: float = TAX_RATE,
) -> float:
    if total_gains <= exemption:
        return 0.0
    return (total_gains - exemption) * rate


def total_investment(inputs: ProjectionInputs) -> float:
    if inputs.investment_type == "sip":
        return inputs.amount * inputs.years * 12
    return inputs.amount


def projected_value(inputs: ProjectionInputs) -> float:
    if inputs.investment_type == "sip":
        return sip_future_value(inputs.amount, inputs.annual_rate, inputs.years)
    return lumpsum_value(inputs.amount, inputs.annual_rate, inputs.years)


def project_investment(
    inputs: ProjectionInputs,
    exemption: float = TAX_EXEMPTION,
    rate: float = TAX_RATE,
) -> ProjectionSummary:
    invested = total_investment(inputs)
    projected = projected_value(inputs)
    gains = projected - invested
    tax = tax_on_gains(gains, exemption=exemption, rate=rate)
    return ProjectionSummary(
        total_investment=invested,
        projected_value=projected,
        total_gains=gains,
        tax_amount=tax,
        post_tax_value=projected - tax,
    )
