# backend/lawdesk/services/finance_service.py

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from lawdesk.db.enums import TransactionType
from lawdesk.db.models import Transaction

ZERO = Decimal("0.00")


def sum_amount(
    db: Session,
    tx_type: TransactionType,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
) -> Decimal:
    """Sum of ``tx_type`` amounts dated in [start, end)."""
    q = db.query(func.coalesce(func.sum(Transaction.amount), 0)).filter(Transaction.type == tx_type)
    if start is not None:
        q = q.filter(Transaction.date >= start)
    if end is not None:
        q = q.filter(Transaction.date < end)
    return Decimal(str(q.scalar())).quantize(ZERO)


def summarize(
    db: Session,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
) -> Dict[str, Decimal]:
    income = sum_amount(db, TransactionType.income, start, end)
    expense = sum_amount(db, TransactionType.expense, start, end)
    return {"income": income, "expense": expense, "balance": income - expense}


def month_starts(now: datetime, months: int) -> List[datetime]:
    """First instant of each of the last ``months`` months, oldest first."""
    year, month = now.year, now.month
    starts = []
    for _ in range(months):
        starts.append(datetime(year, month, 1))
        month -= 1
        if month == 0:
            month = 12
            year -= 1
    return list(reversed(starts))


def monthly_totals(db: Session, now: datetime, months: int = 6) -> List[Tuple[str, Decimal, Decimal]]:
    """
    (YYYY-MM, income, expense) for the last ``months`` months including the
    current one. Months with no transactions are zero.
    """
    starts = month_starts(now, months)
    rows = (
        db.query(Transaction.date, Transaction.type, Transaction.amount)
        .filter(Transaction.date >= starts[0])
        .all()
    )

    buckets = {s.strftime("%Y-%m"): [ZERO, ZERO] for s in starts}
    for date, tx_type, amount in rows:
        key = date.strftime("%Y-%m")
        if key not in buckets:
            continue
        idx = 0 if tx_type == TransactionType.income else 1
        buckets[key][idx] += Decimal(amount)

    return [(key, income, expense) for key, (income, expense) in buckets.items()]
