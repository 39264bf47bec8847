from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from typing import Sequence

from income_tax.config import LOG_FORMAT, get_settings
from income_tax.errors import IncomeTaxError, UnsupportedTaxYearError
from income_tax.germany import IncomeTaxType, supported_year_labels

logger = logging.getLogger("income_tax.cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="income-tax",
        description="Calculate German income tax and tax refunds",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity (default: INCOME_TAX_LOG_LEVEL or INFO)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    calc = sub.add_parser("calculate", help="Tax owed on an income")
    calc.add_argument("income", type=float, help="Taxable income")
    calc.add_argument("--year", default=None, help="Tax year (default: INCOME_TAX_DEFAULT_YEAR)")
    calc.add_argument("--json", action="store_true", help="Print the result as JSON")

    refund = sub.add_parser("refund", help="Tax refund when income changes")
    refund.add_argument("income_before", type=float, help="Income before adjustments")
    refund.add_argument("income_after", type=float, help="Income after adjustments (e.g. deductions)")
    refund.add_argument("--year", default=None, help="Tax year (default: INCOME_TAX_DEFAULT_YEAR)")
    refund.add_argument("--json", action="store_true", help="Print the result as JSON")

    sub.add_parser("years", help="List supported tax years")
    return parser


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )


def _format_amount(value: float) -> str:
    return f"{value:,.0f}"


def _format_income(value: float) -> str:
    # tax is assessed on the income rounded down to a whole unit
    return f"{math.floor(value):,}"


def _run_calculate(tax: IncomeTaxType, args: argparse.Namespace) -> None:
    amount = tax.calculate(args.income)
    logger.debug("Calculated %s tax for income %s", tax.label, args.income)
    if args.json:
        print(json.dumps({"year": tax.year(), "income": args.income, "tax": amount}))
    else:
        print(f"Income tax {tax.label} on {_format_income(args.income)}: {_format_amount(amount)}")


def _run_refund(tax: IncomeTaxType, args: argparse.Namespace) -> None:
    amount = tax.tax_refund(args.income_before, args.income_after)
    if args.json:
        payload = {
            "year": tax.year(),
            "income_before": args.income_before,
            "income_after": args.income_after,
            "refund": amount,
        }
        print(json.dumps(payload))
    elif amount >= 0:
        print(f"Tax refund {tax.label}: {_format_amount(amount)}")
    else:
        print(f"Additional tax due {tax.label}: {_format_amount(-amount)}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    settings = get_settings()
    _configure_logging(args.log_level or settings.log_level)

    if args.command == "years":
        for label in supported_year_labels():
            print(label)
        return 0

    try:
        tax = IncomeTaxType.for_year(args.year or settings.default_year)
        if args.command == "calculate":
            _run_calculate(tax, args)
        else:
            _run_refund(tax, args)
    except (IncomeTaxError, UnsupportedTaxYearError) as exc:
        logger.debug("Rejected request: %r", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
