from __future__ import annotations

import streamlit as st

from console import session
from console.api_client import UnauthorizedError
from console.components.api import load
from console.components.cards import render_alerts, render_key_values, render_kpi_row
from console.components.charts import revenue_chart
from console.components.feeds import calendar_table, quick_actions, recent_activities, upcoming_events
from console.panels import financial_summary, month_statistics, overview_kpis, productivity
from console.service import (
    get_advanced_stats,
    get_alerts,
    get_recent_activities,
    get_revenue_chart,
    get_upcoming_events,
)

TIME_RANGES = {"7d": "7 dias", "30d": "30 dias", "90d": "90 dias", "1y": "1 ano"}


def render() -> None:
    client = session.client()
    use_mock = session.use_mock()

    head, range_col, refresh_col = st.columns([6, 2, 1])
    with head:
        st.title("Dashboard Executivo")
        st.caption("Visão geral do sistema jurídico e indicadores de performance")
    with range_col:
        time_range = st.selectbox(
            "Período",
            list(TIME_RANGES),
            index=1,
            format_func=TIME_RANGES.get,
            key="dashboard_range",
        )
    with refresh_col:
        st.write("")
        if st.button("🔄 Atualizar"):
            client.cache.clear()
            st.rerun()

    # --- independent panel fetches (query cache keeps them across tabs/reruns) ---
    try:
        stats = get_advanced_stats(client, use_mock, time_range)
        alerts = get_alerts(client, use_mock)
        chart = get_revenue_chart(client, use_mock)
        events = get_upcoming_events(client, use_mock)
        activities = get_recent_activities(client, use_mock)
    except UnauthorizedError:
        session.handle_unauthorized()
        return

    for res in (stats, alerts, chart, events, activities):
        if res.warning:
            st.warning(res.warning)
            break

    render_alerts(alerts.data)
    render_kpi_row(overview_kpis(stats.data))

    overview, calendar, financial, activity = st.tabs(
        ["📈 Visão Geral", "📅 Calendário", "💰 Financeiro", "🕑 Atividades"]
    )

    with overview:
        left, right = st.columns(2)
        with left:
            revenue_chart(chart.data, key="overview-revenue")
            quick_actions("overview")
        with right:
            upcoming_events(events.data)
            recent_activities(activities.data)

    with calendar:
        left, right = st.columns([2, 1])
        with left:
            calendar_table(events.data)
        with right:
            upcoming_events(events.data)
            render_key_values("Estatísticas do Mês", month_statistics(events.data))

    with financial:
        left, right = st.columns([2, 1])
        with left:
            revenue_chart(chart.data, key="financial-revenue")
        with right:
            render_key_values("Resumo Financeiro", financial_summary(stats.data))
            quick_actions("financial")

    with activity:
        left, right = st.columns(2)
        with left:
            recent_activities(activities.data)
        with right:
            upcoming_events(events.data)
            projects = [] if stats.source == "mock" else load("/api/projects")
            render_key_values("Produtividade", productivity(projects, stats.data.get("pendingTasks", 0)))
