"""Command-line entrypoint for fund lookup and calculators."""
from __future__ import annotations

import argparse
import logging
import sys

from fund_tracker.application.inputs import clamp_months, clamp_years, coerce_amount
from fund_tracker.bootstrap import build_services
from fund_tracker.config import SETTINGS
from fund_tracker.domain.cagr import calculate_cagr
from fund_tracker.domain.models import CagrInputs, ProjectionInputs
from fund_tracker.domain.projection import project_investment
from fund_tracker.domain.withdrawal import simulate_withdrawal
from fund_tracker.presentation.tables import (
    cagr_rows,
    format_inr,
    format_percent,
    projection_rows,
    render_withdrawal_csv,
)


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Track Indian mutual fund NAVs and project returns")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    search = sub.add_parser("search", help="Search funds by name or fund house")
    search.add_argument("query", type=str)

    show = sub.add_parser("show", help="Show NAV summary and CAGR table for a scheme")
    show.add_argument("scheme_code", type=str)

    cagr = sub.add_parser("cagr", help="CAGR between two amounts")
    cagr.add_argument("initial", type=str)
    cagr.add_argument("final", type=str)
    cagr.add_argument("--years", type=str, default="5")
    cagr.add_argument("--months", type=str, default="0")

    project = sub.add_parser("project", help="Project lumpsum or SIP returns")
    project.add_argument("amount", type=str)
    project.add_argument("--rate", type=float, default=12.0, help="Expected annual return in percent")
    project.add_argument("--years", type=str, default="5")
    project.add_argument("--sip", action="store_true", help="Treat amount as a monthly SIP")

    withdraw = sub.add_parser("withdraw", help="Simulate corpus withdrawal year by year")
    withdraw.add_argument("corpus", type=str)
    withdraw.add_argument("--withdrawal-rate", type=float, default=4.0)
    withdraw.add_argument("--growth-rate", type=float, default=8.0)
    withdraw.add_argument("--years", type=str, default="30")
    return parser.parse_args(argv)


def _search(query: str) -> int:
    services = build_services()
    results = services.search.execute(query)
    if not results:
        print("No funds found.")
        return 0
    for fund in results:
        house = f" ({fund.fund_house})" if fund.fund_house else ""
        print(f"{fund.scheme_code}  {fund.scheme_name}{house}")
    return 0


def _show(scheme_code: str) -> int:
    services = build_services()
    view = services.select.execute(scheme_code)
    if view is None:
        print(f"No data available for scheme {scheme_code}.")
        return 1
    fund = view.fund
    print(fund.scheme_name)
    print("=" * len(fund.scheme_name))
    print(f"Fund house: {fund.fund_house}")
    print(f"Category: {fund.scheme_category} / {fund.scheme_type}")
    print(f"Risk level: {fund.metrics.risk_level}")
    print(f"Current NAV: {fund.current_nav} (as of {fund.last_updated})")
    print(f"History: {view.analysis.span}")
    if view.analysis.discontinued:
        print("Discontinued/Merged fund")
    print("\nCAGR")
    for row in cagr_rows(view.cagr):
        print(f"  {row['period']:>4}: {row['cagr']}")
    return 0


def _cagr(args: argparse.Namespace) -> int:
    inputs = CagrInputs(
        initial_amount=coerce_amount(args.initial),
        final_amount=coerce_amount(args.final),
        years=int(coerce_amount(args.years)),
        months=clamp_months(args.months),
    )
    value = calculate_cagr(inputs.initial_amount, inputs.final_amount, inputs.total_years)
    print(f"CAGR: {format_percent(value)}")
    return 0


def _project(args: argparse.Namespace) -> int:
    inputs = ProjectionInputs(
        investment_type="sip" if args.sip else "lumpsum",
        amount=coerce_amount(args.amount),
        annual_rate=args.rate,
        years=clamp_years(args.years),
    )
    summary = project_investment(inputs, exemption=SETTINGS.tax_exemption, rate=SETTINGS.tax_rate)
    for row in projection_rows(summary):
        print(f"{row['label']:<17} {row['value']}")
    return 0


def _withdraw(args: argparse.Namespace) -> int:
    schedule = simulate_withdrawal(
        coerce_amount(args.corpus),
        args.withdrawal_rate,
        args.growth_rate,
        clamp_years(args.years),
        exemption=SETTINGS.tax_exemption,
        rate=SETTINGS.tax_rate,
    )
    sys.stdout.write(render_withdrawal_csv(schedule).decode("utf-8"))
    if schedule:
        print(f"\nFinal corpus: {format_inr(schedule[-1].ending_corpus)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "search":
        return _search(args.query)
    if args.command == "show":
        return _show(args.scheme_code)
    if args.command == "cagr":
        return _cagr(args)
    if args.command == "project":
        return _project(args)
    return _withdraw(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
