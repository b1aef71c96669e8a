"""Streamlit front-end for the mutual fund tracker."""
from __future__ import annotations

import logging
from datetime import date

import pandas as pd
import streamlit as st

from fund_tracker.application.dto import FundView
from fund_tracker.application.inputs import clamp_months, clamp_years, coerce_amount
from fund_tracker.bootstrap import Services, build_services
from fund_tracker.domain.cagr import calculate_cagr
from fund_tracker.domain.models import CagrInputs, ProjectionInputs, WithdrawalInputs
from fund_tracker.domain.projection import project_investment
from fund_tracker.domain.withdrawal import simulate_withdrawal
from fund_tracker.presentation.tables import (
    cagr_rows,
    chart_frame,
    format_inr,
    format_percent,
    projection_rows,
    render_withdrawal_csv,
    withdrawal_frame,
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

st.set_page_config(page_title="Finance Tracker", layout="wide")


@st.cache_resource
def get_services() -> Services:
    return build_services()


def render_projection(summary_inputs: ProjectionInputs, services: Services) -> None:
    summary = project_investment(
        summary_inputs,
        exemption=services.settings.tax_exemption,
        rate=services.settings.tax_rate,
    )
    cols = st.columns(5)
    for col, row in zip(cols, projection_rows(summary)):
        col.metric(row["label"], row["value"])


def projection_form(key: str, default_rate: float | None = None) -> ProjectionInputs:
    mode = st.radio(
        "Investment type",
        ["lumpsum", "sip"],
        format_func=lambda m: "Lumpsum" if m == "lumpsum" else "SIP",
        horizontal=True,
        key=f"{key}_mode",
    )
    label = "Lumpsum Amount (₹)" if mode == "lumpsum" else "Monthly SIP Amount (₹)"
    amount = st.number_input(label, min_value=0.0, value=10_000.0, step=1_000.0, key=f"{key}_amount")
    years = st.number_input("Investment Period (Years)", min_value=1, max_value=50, value=5, key=f"{key}_years")
    if default_rate is None:
        rate = st.number_input("Expected CAGR (%)", value=12.0, step=0.5, key=f"{key}_rate")
    else:
        rate = default_rate
        st.caption(f"Expected CAGR: {format_percent(rate)}")
    return ProjectionInputs(
        investment_type=mode,
        amount=coerce_amount(amount),
        annual_rate=float(rate),
        years=clamp_years(years),
    )


def render_fund(view: FundView, services: Services) -> None:
    fund = view.fund
    st.header(fund.scheme_name)
    st.caption(" • ".join(part for part in (fund.scheme_category, fund.scheme_type, fund.fund_house) if part))
    if view.analysis.discontinued:
        st.warning(f"Discontinued/Merged Fund • Last NAV: {fund.last_updated}")

    col1, col2, col3 = st.columns(3)
    col1.metric("Current NAV", format_inr(float(fund.current_nav)))
    col2.metric("Risk Level", fund.metrics.risk_level or "n/a")
    col3.metric("History", view.analysis.span or "n/a")

    st.subheader("Price Chart")
    periods = list(view.analysis.periods)
    period = st.radio("Period", periods, index=periods.index("1Y") if "1Y" in periods else 0, horizontal=True)
    points = view.chart(period)
    if points:
        low, high = view.chart_range(period)
        c1, c2, c3 = st.columns(3)
        c1.metric("Low", format_inr(low))
        c2.metric("High", format_inr(high))
        if period in view.cagr:
            c3.metric(f"CAGR ({period})", format_percent(view.cagr[period]))
        st.area_chart(chart_frame(points), y="nav")
    else:
        st.info("No NAV data for this period.")

    st.subheader("Returns")
    rows = cagr_rows(view.cagr)
    if rows:
        st.dataframe(pd.DataFrame(rows), hide_index=True)
    else:
        st.info("Not enough history to compute CAGR.")

    expected = view.expected_cagr
    if expected is not None:
        st.subheader("Investment Calculator")
        render_projection(projection_form("fund_calc", default_rate=expected), services)


def mutual_funds_page(services: Services) -> None:
    st.title("Indian Mutual Funds")
    st.caption("Track, analyze, and compare mutual fund performance with interactive charts")

    if st.session_state.pop("clear_search", False):
        st.session_state["search_query"] = ""
    # text_input reruns only on Enter or blur, which stands in for the search debounce.
    query = st.text_input("Search mutual funds by name or fund house...", key="search_query")
    if query.strip():
        with st.spinner("Searching..."):
            results = services.search.execute(query)
        if not results:
            st.info("No funds found.")
        for fund in results:
            label = f"{fund.scheme_name}" + (f" · {fund.fund_house}" if fund.fund_house else "")
            if st.button(label, key=f"fund_{fund.scheme_code}"):
                st.query_params["fund"] = fund.scheme_code
                st.session_state["clear_search"] = True
                st.rerun()

    scheme_code = st.query_params.get("fund")
    if not scheme_code:
        return
    cached: FundView | None = st.session_state.get("fund_view")
    if cached is None or cached.fund.scheme_code != scheme_code:
        with st.spinner("Loading fund..."):
            cached = services.select.execute(scheme_code, today=date.today())
        st.session_state["fund_view"] = cached
    if cached is None:
        st.error(f"No data available for scheme {scheme_code}.")
        return
    render_fund(cached, services)


def calculator_page(services: Services) -> None:
    st.title("Investment Calculator")
    tabs = st.tabs(["Calculate CAGR", "Project Returns", "Withdrawal Plan"])

    with tabs[0]:
        initial = st.number_input("Initial Investment Amount (₹)", min_value=0.0, value=10_000.0)
        final = st.number_input("Final Amount (₹)", min_value=0.0, value=20_000.0)
        c1, c2 = st.columns(2)
        years = c1.number_input("Years", min_value=0, value=5)
        months = c2.number_input("Months", min_value=0, max_value=11, value=0)
        inputs = CagrInputs(
            initial_amount=coerce_amount(initial),
            final_amount=coerce_amount(final),
            years=int(coerce_amount(years)),
            months=clamp_months(months),
        )
        value = calculate_cagr(inputs.initial_amount, inputs.final_amount, inputs.total_years)
        st.metric("Calculated CAGR", format_percent(value))
        st.caption(
            "The annualized return rate that provides a constant rate of return over the time period."
        )

    with tabs[1]:
        render_projection(projection_form("calc"), services)

    with tabs[2]:
        defaults = WithdrawalInputs()
        corpus = st.number_input("Initial Corpus (₹)", min_value=0.0, value=defaults.initial_corpus, step=100_000.0)
        c1, c2, c3 = st.columns(3)
        withdrawal_rate = c1.number_input("Withdrawal Rate (%)", min_value=0.0, max_value=100.0, value=defaults.withdrawal_rate)
        growth_rate = c2.number_input("Growth Rate (%)", value=defaults.growth_rate)
        years = c3.number_input("Years", min_value=1, max_value=50, value=defaults.years, key="withdrawal_years")
        schedule = simulate_withdrawal(
            coerce_amount(corpus),
            float(withdrawal_rate),
            float(growth_rate),
            clamp_years(years),
            exemption=services.settings.tax_exemption,
            rate=services.settings.tax_rate,
        )
        if schedule:
            st.metric("Final Corpus", format_inr(schedule[-1].ending_corpus))
            frame = withdrawal_frame(schedule)
            st.line_chart(frame.set_index("year")[["ending_corpus"]])
            st.dataframe(frame, hide_index=True)
            st.download_button(
                "Download schedule CSV",
                data=render_withdrawal_csv(schedule),
                file_name="withdrawal_schedule.csv",
                mime="text/csv",
            )


services = get_services()
page = st.sidebar.radio("Finance Tracker", ["Mutual Funds", "CAGR Calculator"])
if page == "Mutual Funds":
    mutual_funds_page(services)
else:
    calculator_page(services)
