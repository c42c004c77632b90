"""Debt validator — checks candidate records before they enter any computation.

Failures are collected and returned as a DebtValidationError value; nothing
here raises for bad data.
"""
from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Iterable, Mapping

from pydantic import ValidationError

from debt_engine.models.amortization import PaymentCheck
from debt_engine.models.debt import Debt
from debt_engine.models.errors import DebtValidationError, FieldFailure

logger = logging.getLogger(__name__)

_LARGE_PAYMENT_SHARE = 0.5


def _numeric_failures(debt: Debt) -> list[FieldFailure]:
    """Range checks every computation depends on."""
    failures: list[FieldFailure] = []
    # Written as ``not (x >= 0)`` so NaN fails too
    if not debt.balance >= 0:
        failures.append(FieldFailure(field="balance", message="Balance must be zero or more"))
    if not debt.minimum_payment >= 0:
        failures.append(FieldFailure(
            field="minimum_payment", message="Minimum payment must be zero or more",
        ))
    if not 0 <= debt.annual_interest_rate_percent <= 100:
        failures.append(FieldFailure(
            field="annual_interest_rate_percent",
            message="Interest rate must be between 0% and 100%",
        ))
    if debt.original_principal is not None and debt.balance > debt.original_principal:
        failures.append(FieldFailure(
            field="original_principal",
            message="Current balance cannot exceed original principal amount",
        ))
    return failures


def _record_failures(debt: Debt) -> list[FieldFailure]:
    """Completeness checks for a stored debt record."""
    failures: list[FieldFailure] = []
    if not debt.name.strip():
        failures.append(FieldFailure(field="name", message="Debt name is required"))
    if not debt.lender.strip():
        failures.append(FieldFailure(field="lender", message="Lender name is required"))
    if debt.due_date is None:
        failures.append(FieldFailure(field="due_date", message="Due date is required"))
    return failures


def _coerce(candidate: Debt | Mapping[str, Any]) -> Debt | list[FieldFailure]:
    if isinstance(candidate, Debt):
        return candidate
    try:
        return Debt.model_validate(candidate)
    except ValidationError as e:
        return [
            FieldFailure(field=".".join(str(p) for p in err["loc"]) or "debt", message=err["msg"])
            for err in e.errors()
        ]


def validate_debt(candidate: Debt | Mapping[str, Any]) -> Debt | DebtValidationError:
    """Accept a debt record or report every failed check."""
    debt = _coerce(candidate)
    if isinstance(debt, list):
        debt_id = candidate.get("id") if isinstance(candidate, Mapping) else None
        return DebtValidationError(
            message="Debt record is malformed",
            debt_id=str(debt_id) if debt_id is not None else None,
            failures=debt,
        )

    failures = _record_failures(debt) + _numeric_failures(debt)
    if failures:
        logger.debug("Debt %s rejected: %d failures", debt.id, len(failures))
        return DebtValidationError(
            message=f"Debt '{debt.id}' failed validation",
            debt_id=debt.id,
            failures=failures,
        )
    return debt


def _duplicate_id_failures(ids: Iterable[str]) -> list[FieldFailure]:
    counts = Counter(ids)
    return [
        FieldFailure(field="id", message=f"Duplicate debt id '{debt_id}'")
        for debt_id, n in counts.items() if n > 1
    ]


def validate_portfolio(
    candidates: Iterable[Debt | Mapping[str, Any]],
) -> list[Debt] | DebtValidationError:
    """Validate every record and require unique ids.

    Failure fields are prefixed with the offending record's id (or index).
    """
    accepted: list[Debt] = []
    failures: list[FieldFailure] = []
    for i, candidate in enumerate(candidates):
        result = validate_debt(candidate)
        if isinstance(result, DebtValidationError):
            prefix = result.debt_id if result.debt_id is not None else f"[{i}]"
            failures.extend(
                FieldFailure(field=f"{prefix}.{f.field}", message=f.message)
                for f in result.failures
            )
        else:
            accepted.append(result)

    failures.extend(_duplicate_id_failures(d.id for d in accepted))
    if failures:
        logger.warning("Portfolio rejected with %d validation failures", len(failures))
        return DebtValidationError(message="Portfolio failed validation", failures=failures)
    return accepted


def check_simulation_inputs(debts: Iterable[Debt]) -> DebtValidationError | None:
    """Numeric and uniqueness checks the simulator relies on.

    Unlike ``validate_portfolio`` this does not require descriptive fields
    (name, lender, due date), which the arithmetic never reads.
    """
    debts = list(debts)
    failures: list[FieldFailure] = []
    for debt in debts:
        failures.extend(
            FieldFailure(field=f"{debt.id}.{f.field}", message=f.message)
            for f in _numeric_failures(debt)
        )
    failures.extend(_duplicate_id_failures(d.id for d in debts))
    if failures:
        return DebtValidationError(message="Simulation inputs failed validation", failures=failures)
    return None


def validate_payment(debt: Debt, amount: float) -> PaymentCheck:
    """Check a one-off payment amount against a debt.

    Paying more than half the balance is allowed but flagged as a warning.
    """
    errors: list[str] = []
    warnings: list[str] = []
    if not amount > 0:
        errors.append("Payment amount must be greater than 0")
    if amount > debt.balance:
        errors.append("Payment amount cannot exceed current balance")
    if amount > debt.balance * _LARGE_PAYMENT_SHARE:
        warnings.append("This payment is more than 50% of the current balance")
    return PaymentCheck(is_valid=not errors, errors=errors, warnings=warnings)
