#!/usr/bin/env python3
"""Compare avalanche and snowball payoff plans for a portfolio file.

Usage:
    python scripts/payoff_report.py portfolio.json
    python scripts/payoff_report.py portfolio.json --extra 5000 --out timeline.csv

The portfolio file is JSON of the form::

    {"debts": [{"id": "card", "name": "...", "balance": 120000, ...}],
     "monthly_income": 90000,
     "config": {"extra_monthly_payment": 2000}}

Prints a summary and writes the month-by-month timeline of both strategies
as CSV (amounts rounded to the smallest currency unit).
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import pandas as pd
from pydantic import ValidationError

BACKEND_DIR = Path(__file__).resolve().parent.parent
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from debt_engine.models.debt import Debt  # noqa: E402
from debt_engine.models.errors import EngineError  # noqa: E402
from debt_engine.models.simulation import SimulationConfig, SimulationResult  # noqa: E402
from debt_engine.services.comparison_service import compare_strategies  # noqa: E402
from debt_engine.services.dti import analyze_dti  # noqa: E402
from debt_engine.services.formatting import (  # noqa: E402
    format_currency,
    format_duration,
    round_currency,
)
from debt_engine.services.savings_service import project_savings  # noqa: E402

logger = logging.getLogger(__name__)

TIMELINE_COLUMNS = [
    "strategy", "month", "debt_id", "payment", "interest", "principal", "remaining_balance",
]


def timeline_frame(result: SimulationResult) -> pd.DataFrame:
    """One row per debt per month, amounts rounded for display."""
    rows = []
    for snapshot in result.monthly_timeline:
        for d in snapshot.debts:
            rows.append({
                "strategy": result.strategy.value,
                "month": snapshot.month,
                "debt_id": d.debt_id,
                "payment": round_currency(d.payment),
                "interest": round_currency(d.interest_paid),
                "principal": round_currency(d.principal_paid),
                "remaining_balance": round_currency(d.remaining_balance),
            })
    if not rows:
        return pd.DataFrame(columns=TIMELINE_COLUMNS)
    return pd.DataFrame(rows, columns=TIMELINE_COLUMNS)


def _fail(error: EngineError) -> int:
    logger.error("%s", error.message)
    for failure in getattr(error, "failures", []):
        logger.error("  %s: %s", failure.field, failure.message)
    return 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("portfolio", help="Path to portfolio JSON")
    parser.add_argument("--extra", type=float, default=None,
                        help="Extra monthly payment (overrides the file's config)")
    parser.add_argument("--out", default=None, help="Timeline CSV path (default: <portfolio>_timeline.csv)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    path = Path(args.portfolio)
    data = json.loads(path.read_text())

    # Range checks happen inside the simulator; descriptive fields are optional here
    try:
        debts = [Debt.model_validate(d) for d in data.get("debts", [])]
        config = SimulationConfig(**data.get("config", {}))
        if args.extra is not None:
            config = SimulationConfig(**{**config.model_dump(), "extra_monthly_payment": args.extra})
    except ValidationError as e:
        logger.error("%s is not a valid portfolio file", path)
        for err in e.errors():
            logger.error("  %s: %s", ".".join(str(p) for p in err["loc"]), err["msg"])
        return 1

    comparison = compare_strategies(debts, config)
    if isinstance(comparison, EngineError):
        return _fail(comparison)

    for result in (comparison.avalanche, comparison.snowball):
        logger.info(
            "%-10s debt-free in %s, total interest %s",
            result.strategy.value,
            format_duration(result.summary.months_to_debt_free),
            format_currency(result.summary.total_interest_paid),
        )
    logger.info(
        "Recommended: %s (%s)", comparison.recommended.value, comparison.rationale,
    )

    if config.extra_monthly_payment > 0:
        savings = project_savings(debts, config, config.extra_monthly_payment)
        if isinstance(savings, EngineError):
            logger.warning("Savings not available: %s", savings.message)
        else:
            logger.info(
                "Paying %s extra per month saves %d months and %s interest",
                format_currency(config.extra_monthly_payment),
                savings.months_saved,
                format_currency(savings.interest_saved),
            )

    if "monthly_income" in data:
        dti = analyze_dti(debts, float(data["monthly_income"]))
        if isinstance(dti, EngineError):
            logger.warning("DTI not available: %s", dti.message)
        else:
            logger.info("DTI %.1f%% (%s)", dti.dti_ratio_percent, dti.health_band.value)

    out = Path(args.out) if args.out else path.with_name(f"{path.stem}_timeline.csv")
    frame = pd.concat(
        [timeline_frame(comparison.avalanche), timeline_frame(comparison.snowball)],
        ignore_index=True,
    )
    frame.to_csv(out, index=False)
    logger.info("Timeline written to %s (%d rows)", out, len(frame))
    return 0


if __name__ == "__main__":
    sys.exit(main())
