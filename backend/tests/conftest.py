from datetime import date

import pytest

from debt_engine.models.debt import Debt, PaymentFrequency


@pytest.fixture
def sample_portfolio() -> list[Debt]:
    """Three debts where avalanche and snowball target different debts first."""
    return [
        Debt(
            id="card",
            name="Credit Card",
            lender="HDFC",
            balance=120_000.0,
            annual_interest_rate_percent=36.0,
            minimum_payment=6_000.0,
            due_date=date(2025, 7, 5),
            is_high_priority=True,
        ),
        Debt(
            id="car",
            name="Car Loan",
            lender="SBI",
            balance=240_000.0,
            original_principal=400_000.0,
            annual_interest_rate_percent=12.0,
            minimum_payment=8_000.0,
            due_date=date(2025, 7, 10),
        ),
        Debt(
            id="personal",
            name="Personal Loan",
            lender="ICICI",
            balance=40_000.0,
            annual_interest_rate_percent=18.0,
            minimum_payment=2_000.0,
            payment_frequency=PaymentFrequency.monthly,
            due_date=date(2025, 7, 15),
        ),
    ]
