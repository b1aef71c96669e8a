"""Tabular renderers for CAGR tables, chart data and withdrawal schedules."""
from __future__ import annotations

import csv
import io
from dataclasses import asdict
from typing import Sequence

import pandas as pd

from fund_tracker.domain.models import ProjectionSummary, WithdrawalYear
from fund_tracker.domain.services import CHART_PERIODS, ChartPoint


def format_inr(amount: float) -> str:
    return f"₹{amount:,.2f}"


def format_percent(value: float | None) -> str:
    return "n/a" if value is None else f"{value:.2f}%"


def cagr_rows(cagr: dict[str, float]) -> list[dict[str, str]]:
    return [
        {"period": period, "cagr": format_percent(cagr[period])}
        for period in CHART_PERIODS
        if period in cagr
    ]


def chart_frame(points: Sequence[ChartPoint]) -> pd.DataFrame:
    frame = pd.DataFrame([{"date": p.date, "nav": p.nav} for p in points], columns=["date", "nav"])
    frame["date"] = pd.to_datetime(frame["date"], format="%d-%m-%Y")
    return frame.set_index("date")


def projection_rows(summary: ProjectionSummary) -> list[dict[str, str]]:
    return [
        {"label": "Total Investment", "value": format_inr(summary.total_investment)},
        {"label": "Total Gains", "value": format_inr(summary.total_gains)},
        {"label": "Tax Amount", "value": format_inr(summary.tax_amount)},
        {"label": "Final Amount", "value": format_inr(summary.projected_value)},
        {"label": "Post-tax Amount", "value": format_inr(summary.post_tax_value)},
    ]


def withdrawal_frame(schedule: Sequence[WithdrawalYear]) -> pd.DataFrame:
    columns = list(WithdrawalYear.__dataclass_fields__)
    return pd.DataFrame([asdict(row) for row in schedule], columns=columns)


def render_withdrawal_csv(schedule: Sequence[WithdrawalYear]) -> bytes:
    rows = [asdict(row) for row in schedule]
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=list(rows[0].keys()) if rows else [])
    if rows:
        writer.writeheader()
        writer.writerows(rows)
    return buffer.getvalue().encode("utf-8")
