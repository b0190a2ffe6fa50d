from __future__ import annotations

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional, Union

Number = Union[int, float, str, Decimal, None]


def _to_decimal(value: Number) -> Decimal:
    if value is None or value == "":
        return Decimal(0)
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return Decimal(0)


def format_revenue_k(value: Number) -> str:
    """1250000 -> 'R$ 1250k' (thousands, rounded half up)."""
    thousands = (_to_decimal(value) / 1000).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return f"R$ {thousands}k"


def format_brl(value: Number) -> str:
    """1250000.5 -> 'R$ 1.250.000,50'"""
    amount = _to_decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    text = f"{abs(amount):,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")
    sign = "-" if amount < 0 else ""
    return f"{sign}R$ {text}"


def format_growth(value: Number) -> str:
    """18.7 -> '+18.7%', -3 -> '-3%'"""
    n = float(_to_decimal(value))
    sign = "+" if n >= 0 else "-"
    return f"{sign}{abs(n):g}%"


def parse_datetime(value: Union[str, datetime, date, None]) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


def format_date(value: Union[str, datetime, date, None]) -> str:
    dt = parse_datetime(value)
    return dt.strftime("%d/%m/%Y") if dt else "—"
