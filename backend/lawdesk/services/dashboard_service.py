# backend/lawdesk/services/dashboard_service.py

"""
Aggregates behind the dashboard cards, charts and feeds.

Every figure is a plain count or sum over stored rows; growth figures
compare the selected window with the window of the same length just
before it.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from lawdesk.db.enums import ContractStatus, ProjectStatus, TransactionType
from lawdesk.db.models import Client, Contract, Document, Project, Transaction, utcnow
from lawdesk.services.finance_service import monthly_totals, sum_amount

TIME_RANGES: Dict[str, timedelta] = {
    "7d": timedelta(days=7),
    "30d": timedelta(days=30),
    "90d": timedelta(days=90),
    "1y": timedelta(days=365),
}

EXPIRY_WARNING_DAYS = 7
PENDING_PROJECT_STATUSES = (ProjectStatus.planning, ProjectStatus.on_hold)


# ======================================================================================
# 1) stats
# ======================================================================================
def growth(current: float, previous: float) -> float:
    """Percent change, one decimal. A zero baseline counts as +100% when anything appeared."""
    if previous == 0:
        return 100.0 if current > 0 else 0.0
    return round((current - previous) / previous * 100, 1)


def _count_created(db: Session, model, start: datetime, end: datetime) -> int:
    return (
        db.query(func.count(model.id))
        .filter(model.created_at >= start, model.created_at < end)
        .scalar()
    )


def advanced_stats(db: Session, time_range: str = "30d", now: Optional[datetime] = None) -> dict:
    now = now or utcnow()
    window = TIME_RANGES[time_range]
    start = now - window
    prev_start = start - window

    revenue = sum_amount(db, TransactionType.income, start, now)
    prev_revenue = sum_amount(db, TransactionType.income, prev_start, start)

    contracts_now = _count_created(db, Contract, start, now)
    contracts_prev = _count_created(db, Contract, prev_start, start)
    clients_now = _count_created(db, Client, start, now)
    clients_prev = _count_created(db, Client, prev_start, start)

    return {
        "totalRevenue": float(revenue),
        "activeContracts": db.query(func.count(Contract.id))
        .filter(Contract.status == ContractStatus.active)
        .scalar(),
        "totalClients": db.query(func.count(Client.id)).scalar(),
        "pendingTasks": db.query(func.count(Project.id))
        .filter(Project.status.in_(PENDING_PROJECT_STATUSES))
        .scalar(),
        "revenueGrowth": growth(float(revenue), float(prev_revenue)),
        "contractsGrowth": growth(contracts_now, contracts_prev),
        "clientsGrowth": growth(clients_now, clients_prev),
    }


# ======================================================================================
# 2) alerts
# ======================================================================================
def _plural(n: int, singular: str, plural: str) -> str:
    return singular if n == 1 else plural


def alerts(db: Session, now: Optional[datetime] = None) -> List[dict]:
    now = now or utcnow()
    active = db.query(Contract).filter(
        Contract.status == ContractStatus.active,
        Contract.end_date.isnot(None),
    )

    expiring = active.filter(
        Contract.end_date >= now,
        Contract.end_date <= now + timedelta(days=EXPIRY_WARNING_DAYS),
    ).count()
    overdue = active.filter(Contract.end_date < now).count()

    result = []
    if expiring:
        result.append({
            "id": "contracts-expiring",
            "type": "warning",
            "title": "Prazo próximo",
            "message": f"{expiring} {_plural(expiring, 'contrato vence', 'contratos vencem')} "
                       f"nos próximos {EXPIRY_WARNING_DAYS} dias",
            "date": now,
        })
    if overdue:
        result.append({
            "id": "contracts-overdue",
            "type": "error",
            "title": "Contratos vencidos",
            "message": f"{overdue} {_plural(overdue, 'contrato ativo passou', 'contratos ativos passaram')} "
                       f"da data de término",
            "date": now,
        })
    return result


# ======================================================================================
# 3) revenue chart
# ======================================================================================
def revenue_chart(db: Session, months: int = 6, now: Optional[datetime] = None) -> List[dict]:
    now = now or utcnow()
    return [
        {"month": month, "income": float(income), "expense": float(expense)}
        for month, income, expense in monthly_totals(db, now, months)
    ]


# ======================================================================================
# 4) upcoming events (calendar)
# ======================================================================================
def upcoming_events(db: Session, days: int = 30, now: Optional[datetime] = None) -> List[dict]:
    now = now or utcnow()
    horizon = now + timedelta(days=days)
    events = []

    contracts = db.query(Contract).filter(
        Contract.end_date >= now,
        Contract.end_date <= horizon,
        Contract.status.in_((ContractStatus.draft, ContractStatus.active)),
    )
    for c in contracts:
        events.append({
            "id": f"contract-end-{c.id}",
            "kind": "contract_end",
            "title": f"Término do contrato: {c.title}",
            "date": c.end_date,
            "reference_id": c.id,
        })

    open_projects = db.query(Project).filter(
        Project.status.notin_((ProjectStatus.completed, ProjectStatus.cancelled))
    )
    for p in open_projects:
        if p.start_date and now <= p.start_date <= horizon:
            events.append({
                "id": f"project-start-{p.id}",
                "kind": "project_start",
                "title": f"Início do projeto: {p.name}",
                "date": p.start_date,
                "reference_id": p.id,
            })
        if p.end_date and now <= p.end_date <= horizon:
            events.append({
                "id": f"project-end-{p.id}",
                "kind": "project_end",
                "title": f"Entrega do projeto: {p.name}",
                "date": p.end_date,
                "reference_id": p.id,
            })

    events.sort(key=lambda e: e["date"])
    return events


# ======================================================================================
# 5) recent activities
# ======================================================================================
_ACTIVITY_SOURCES = (
    ("client", Client, "name", "Novo cliente"),
    ("contract", Contract, "title", "Contrato criado"),
    ("project", Project, "name", "Projeto criado"),
    ("document", Document, "name", "Documento enviado"),
    ("transaction", Transaction, "description", "Lançamento financeiro"),
)


def recent_activities(db: Session, limit: int = 10) -> List[dict]:
    items = []
    for entity, model, label_attr, verb in _ACTIVITY_SOURCES:
        rows = db.query(model).order_by(model.created_at.desc()).limit(limit).all()
        for row in rows:
            items.append({
                "id": f"{entity}-{row.id}",
                "entity": entity,
                "title": f"{verb}: {getattr(row, label_attr)}",
                "created_at": row.created_at,
            })

    items.sort(key=lambda a: a["created_at"], reverse=True)
    return items[:limit]
