"""
Plain data for the dashboard cards: what each card shows, already
formatted. The Streamlit components only lay these out.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from console.formatting import format_growth, format_revenue_k


@dataclass(frozen=True)
class Kpi:
    label: str
    value: str
    delta: Optional[str] = None
    help: Optional[str] = None


def overview_kpis(stats: Optional[dict]) -> List[Kpi]:
    stats = stats or {}
    return [
        Kpi(
            "Receita",
            format_revenue_k(stats.get("totalRevenue")),
            format_growth(stats.get("revenueGrowth")),
            help="Receitas lançadas no período selecionado",
        ),
        Kpi(
            "Contratos Ativos",
            str(stats.get("activeContracts") or 0),
            format_growth(stats.get("contractsGrowth")),
        ),
        Kpi(
            "Clientes",
            str(stats.get("totalClients") or 0),
            format_growth(stats.get("clientsGrowth")),
        ),
        Kpi("Tarefas Pendentes", str(stats.get("pendingTasks") or 0), help="Projetos em planejamento ou pausados"),
    ]


def financial_summary(stats: Optional[dict]) -> List[Tuple[str, str]]:
    stats = stats or {}
    return [
        ("Receita Mensal", format_revenue_k(stats.get("totalRevenue"))),
        ("Contratos Ativos", str(stats.get("activeContracts") or 0)),
        ("Crescimento", format_growth(stats.get("revenueGrowth"))),
    ]


_EVENT_LABELS = {
    "contract_end": "Vencimentos de contrato",
    "project_start": "Inícios de projeto",
    "project_end": "Entregas de projeto",
}


def month_statistics(events: Iterable[dict]) -> List[Tuple[str, int]]:
    counts = Counter(e.get("kind") for e in events)
    rows = [(label, counts.get(kind, 0)) for kind, label in _EVENT_LABELS.items()]
    rows.append(("Total de Compromissos", sum(counts.values())))
    return rows


def productivity(projects: Iterable[dict], pending_tasks: int) -> List[Tuple[str, int]]:
    counts = Counter(p.get("status") for p in projects)
    return [
        ("Concluídos", counts.get("completed", 0)),
        ("Em Andamento", counts.get("active", 0)),
        ("Pendentes", pending_tasks or 0),
    ]
