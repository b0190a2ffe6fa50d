from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from lawdesk.db.enums import ContractStatus, ProjectStatus, TransactionType
from lawdesk.db.models import Client, Contract, Document, Project, Transaction
from lawdesk.services import dashboard_service
from lawdesk.services.dashboard_service import growth

NOW = datetime(2026, 6, 15, 12, 0, 0)


def _add(db, owner, *rows):
    """Insert rows, stamping the owner on the ones that carry a creator."""
    for row in rows:
        if isinstance(row, Document):
            row.uploaded_by = owner.id
        elif hasattr(row, "created_by"):
            row.created_by = owner.id
    db.add_all(rows)
    db.commit()


# ======================================================================================
# growth
# ======================================================================================
@pytest.mark.parametrize(
    "current, previous, expected",
    [
        (0, 0, 0.0),
        (5, 0, 100.0),
        (150, 100, 50.0),
        (50, 100, -50.0),
        (1187, 1000, 18.7),
    ],
)
def test_growth(current, previous, expected):
    assert growth(current, previous) == expected


# ======================================================================================
# advanced stats
# ======================================================================================
def test_advanced_stats_empty_database(db):
    stats = dashboard_service.advanced_stats(db, "30d", now=NOW)
    assert stats == {
        "totalRevenue": 0.0,
        "activeContracts": 0,
        "totalClients": 0,
        "pendingTasks": 0,
        "revenueGrowth": 0.0,
        "contractsGrowth": 0.0,
        "clientsGrowth": 0.0,
    }


def test_advanced_stats_counts_and_growth(db, admin):
    _add(
        db,
        admin,
        # revenue: 1500 in the window, 1000 in the window before, expenses ignored
        Transaction(description="a", amount=Decimal("1500"), type=TransactionType.income, date=NOW - timedelta(days=3)),
        Transaction(description="b", amount=Decimal("1000"), type=TransactionType.income, date=NOW - timedelta(days=40)),
        Transaction(description="c", amount=Decimal("999"), type=TransactionType.expense, date=NOW - timedelta(days=3)),
        # clients: two new, one old
        Client(name="A", created_at=NOW - timedelta(days=1)),
        Client(name="B", created_at=NOW - timedelta(days=2)),
        Client(name="C", created_at=NOW - timedelta(days=45)),
        # contracts: one active created now, none before
        Contract(title="X", status=ContractStatus.active, created_at=NOW - timedelta(days=5)),
        Contract(title="Y", status=ContractStatus.draft, created_at=NOW - timedelta(days=100)),
        # projects: planning and on_hold are pending
        Project(name="P1", status=ProjectStatus.planning),
        Project(name="P2", status=ProjectStatus.on_hold),
        Project(name="P3", status=ProjectStatus.active),
    )

    stats = dashboard_service.advanced_stats(db, "30d", now=NOW)

    assert stats["totalRevenue"] == 1500.0
    assert stats["revenueGrowth"] == 50.0
    assert stats["activeContracts"] == 1
    assert stats["contractsGrowth"] == 100.0
    assert stats["totalClients"] == 3
    assert stats["clientsGrowth"] == 100.0
    assert stats["pendingTasks"] == 2


def test_advanced_stats_range_changes_window(db, admin):
    _add(
        db,
        admin,
        Transaction(description="a", amount=Decimal("100"), type=TransactionType.income, date=NOW - timedelta(days=3)),
        Transaction(description="b", amount=Decimal("200"), type=TransactionType.income, date=NOW - timedelta(days=20)),
    )

    assert dashboard_service.advanced_stats(db, "7d", now=NOW)["totalRevenue"] == 100.0
    assert dashboard_service.advanced_stats(db, "30d", now=NOW)["totalRevenue"] == 300.0


def test_advanced_stats_endpoint(auth_client):
    resp = auth_client.get("/api/dashboard/advanced-stats", params={"range": "90d"})
    assert resp.status_code == 200
    assert set(resp.json()) == {
        "totalRevenue",
        "activeContracts",
        "totalClients",
        "pendingTasks",
        "revenueGrowth",
        "contractsGrowth",
        "clientsGrowth",
    }

    assert auth_client.get("/api/dashboard/advanced-stats", params={"range": "2w"}).status_code == 422


# ======================================================================================
# alerts
# ======================================================================================
def test_alerts(db, admin):
    _add(
        db,
        admin,
        Contract(title="Vence logo", status=ContractStatus.active, end_date=NOW + timedelta(days=3)),
        Contract(title="Vence logo 2", status=ContractStatus.active, end_date=NOW + timedelta(days=6)),
        Contract(title="Longe", status=ContractStatus.active, end_date=NOW + timedelta(days=30)),
        Contract(title="Vencido", status=ContractStatus.active, end_date=NOW - timedelta(days=1)),
        Contract(title="Rascunho", status=ContractStatus.draft, end_date=NOW + timedelta(days=2)),
    )

    alerts = {a["id"]: a for a in dashboard_service.alerts(db, now=NOW)}

    assert alerts["contracts-expiring"]["type"] == "warning"
    assert alerts["contracts-expiring"]["message"].startswith("2 contratos vencem")
    assert alerts["contracts-overdue"]["type"] == "error"
    assert alerts["contracts-overdue"]["message"].startswith("1 contrato ativo passou")


def test_no_alerts_when_nothing_is_due(db, admin):
    _add(db, admin, Contract(title="Longe", status=ContractStatus.active, end_date=NOW + timedelta(days=60)))
    assert dashboard_service.alerts(db, now=NOW) == []


# ======================================================================================
# revenue chart
# ======================================================================================
def test_revenue_chart_buckets_by_month(db, admin):
    _add(
        db,
        admin,
        Transaction(description="a", amount=Decimal("100"), type=TransactionType.income, date=datetime(2026, 6, 1)),
        Transaction(description="b", amount=Decimal("50"), type=TransactionType.income, date=datetime(2026, 6, 10)),
        Transaction(description="c", amount=Decimal("30"), type=TransactionType.expense, date=datetime(2026, 4, 2)),
        Transaction(description="old", amount=Decimal("999"), type=TransactionType.income, date=datetime(2025, 1, 1)),
    )

    chart = dashboard_service.revenue_chart(db, months=3, now=NOW)

    assert chart == [
        {"month": "2026-04", "income": 0.0, "expense": 30.0},
        {"month": "2026-05", "income": 0.0, "expense": 0.0},
        {"month": "2026-06", "income": 150.0, "expense": 0.0},
    ]


def test_revenue_chart_crosses_year(db):
    chart = dashboard_service.revenue_chart(db, months=3, now=datetime(2026, 1, 20))
    assert [p["month"] for p in chart] == ["2025-11", "2025-12", "2026-01"]


def test_revenue_chart_endpoint_bounds(auth_client):
    assert len(auth_client.get("/api/dashboard/revenue-chart").json()) == 6
    assert auth_client.get("/api/dashboard/revenue-chart", params={"months": 0}).status_code == 422


# ======================================================================================
# upcoming events
# ======================================================================================
def test_upcoming_events_sorted_by_date(db, admin):
    _add(
        db,
        admin,
        Contract(title="C1", status=ContractStatus.active, end_date=NOW + timedelta(days=10)),
        Contract(title="Encerrado", status=ContractStatus.completed, end_date=NOW + timedelta(days=5)),
        Contract(title="Longe", status=ContractStatus.active, end_date=NOW + timedelta(days=90)),
        Project(name="P1", status=ProjectStatus.planning, start_date=NOW + timedelta(days=2), end_date=NOW + timedelta(days=20)),
        Project(name="Cancelado", status=ProjectStatus.cancelled, start_date=NOW + timedelta(days=1)),
    )

    events = dashboard_service.upcoming_events(db, days=30, now=NOW)

    assert [(e["kind"], e["title"]) for e in events] == [
        ("project_start", "Início do projeto: P1"),
        ("contract_end", "Término do contrato: C1"),
        ("project_end", "Entrega do projeto: P1"),
    ]


# ======================================================================================
# recent activities
# ======================================================================================
def test_recent_activities_newest_first_and_limited(db, admin):
    _add(
        db,
        admin,
        Client(name="Cliente antigo", created_at=NOW - timedelta(days=5)),
        Contract(title="Contrato", created_at=NOW - timedelta(days=1)),
        Document(name="Procuração", type="procuração", created_at=NOW - timedelta(days=3)),
        Transaction(
            description="Honorários",
            amount=Decimal("10"),
            type=TransactionType.income,
            created_at=NOW - timedelta(hours=1),
        ),
    )

    items = dashboard_service.recent_activities(db, limit=3)

    assert [i["entity"] for i in items] == ["transaction", "contract", "document"]
    assert items[0]["title"] == "Lançamento financeiro: Honorários"


def test_dashboard_requires_session(client):
    for path in ("alerts", "revenue-chart", "upcoming-events", "recent-activities"):
        assert client.get(f"/api/dashboard/{path}").status_code == 401
