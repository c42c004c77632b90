"""Display formatting — the single place where currency amounts are rounded."""
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from debt_engine.config import settings

_CURRENCY_SYMBOLS = {"INR": "₹", "USD": "$", "EUR": "€", "GBP": "£"}


def round_currency(amount: float, places: int = 2) -> float:
    """Round half-up to the smallest currency unit (cents/paise by default)."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(amount)).quantize(quantum, rounding=ROUND_HALF_UP))


def format_currency(amount: float, currency: str | None = None, places: int = 0) -> str:
    """Format an amount for display, e.g. ``₹120,000`` or ``$1,234.50``."""
    code = currency or settings.CURRENCY_CODE
    symbol = _CURRENCY_SYMBOLS.get(code, f"{code} ")
    value = round_currency(amount, places)
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.{places}f}"


def _plural(n: int, unit: str) -> str:
    return f"{n} {unit}{'' if n == 1 else 's'}"


def format_duration(months: int | float) -> str:
    """Human-readable duration, e.g. ``2 years 3 months``; ``Never`` when not positive."""
    if not math.isfinite(months) or months <= 0:
        return "Never"
    months = int(months)
    years, remainder = divmod(months, 12)
    if years == 0:
        return _plural(remainder, "month")
    if remainder == 0:
        return _plural(years, "year")
    return f"{_plural(years, 'year')} {_plural(remainder, 'month')}"
