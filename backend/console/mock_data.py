"""Fixed demo payloads used when USE_MOCK_DATA is on or the API is down."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import List


def advanced_stats_mock(time_range: str = "30d") -> dict:
    return {
        "totalRevenue": 1250000,
        "activeContracts": 24,
        "totalClients": 156,
        "pendingTasks": 8,
        "revenueGrowth": 18.7,
        "contractsGrowth": 12.5,
        "clientsGrowth": 8.3,
    }


def alerts_mock() -> List[dict]:
    now = datetime.now().isoformat()
    return [
        {
            "id": "1",
            "type": "warning",
            "title": "Prazo próximo",
            "message": "3 contratos vencem nos próximos 7 dias",
            "date": now,
        },
        {
            "id": "2",
            "type": "info",
            "title": "Nova atualização",
            "message": "Sistema atualizado com novas funcionalidades",
            "date": now,
        },
    ]


def revenue_chart_mock(months: int = 6) -> List[dict]:
    incomes = [168000, 182500, 175000, 201300, 214800, 226400]
    expenses = [92000, 98500, 95100, 103800, 99700, 108200]
    today = datetime.now()
    year, month = today.year, today.month
    labels = []
    for _ in range(months):
        labels.append(f"{year:04d}-{month:02d}")
        month -= 1
        if month == 0:
            month, year = 12, year - 1
    labels.reverse()
    return [
        {"month": label, "income": incomes[i % len(incomes)], "expense": expenses[i % len(expenses)]}
        for i, label in enumerate(labels)
    ]


def upcoming_events_mock(days: int = 30) -> List[dict]:
    today = datetime.now().replace(hour=9, minute=0, second=0, microsecond=0)
    return [
        {
            "id": "contract-end-demo-1",
            "kind": "contract_end",
            "title": "Término do contrato: Prestação de serviços jurídicos",
            "date": (today + timedelta(days=3)).isoformat(),
            "reference_id": "demo-1",
        },
        {
            "id": "project-start-demo-2",
            "kind": "project_start",
            "title": "Início do projeto: Due diligence societária",
            "date": (today + timedelta(days=6)).isoformat(),
            "reference_id": "demo-2",
        },
        {
            "id": "project-end-demo-3",
            "kind": "project_end",
            "title": "Entrega do projeto: Recuperação de crédito",
            "date": (today + timedelta(days=12)).isoformat(),
            "reference_id": "demo-3",
        },
    ]


def recent_activities_mock(limit: int = 10) -> List[dict]:
    now = datetime.now()
    items = [
        ("contract", "Contrato criado: Assessoria trabalhista"),
        ("client", "Novo cliente: Silva & Associados Ltda."),
        ("document", "Documento enviado: Procuração ad judicia"),
        ("transaction", "Lançamento financeiro: Honorários iniciais"),
        ("project", "Projeto criado: Revisão contratual"),
    ]
    return [
        {
            "id": f"{entity}-demo-{i}",
            "entity": entity,
            "title": title,
            "created_at": (now - timedelta(hours=3 * i)).isoformat(),
        }
        for i, (entity, title) in enumerate(items[:limit])
    ]
