from __future__ import annotations

import streamlit as st

from console import session
from console.api_client import UnauthorizedError
from console.components.cards import render_key_values
from console.components.feeds import calendar_table
from console.panels import month_statistics
from console.service import get_upcoming_events


def render() -> None:
    st.title("📅 Calendário")

    days = st.select_slider("Próximos dias", options=[7, 15, 30, 60, 90], value=30)
    try:
        events = get_upcoming_events(session.client(), session.use_mock(), days)
    except UnauthorizedError:
        session.handle_unauthorized()
        return

    if events.warning:
        st.warning(events.warning)

    left, right = st.columns([2, 1])
    with left:
        calendar_table(events.data)
    with right:
        render_key_values("Estatísticas do período", month_statistics(events.data))
