from __future__ import annotations

from typing import Iterable, List, Tuple

import streamlit as st

from console.config import ALERT_STYLES, THEME
from console.panels import Kpi


def render_kpi_row(kpis: List[Kpi]) -> None:
    cols = st.columns(len(kpis))
    for c, k in zip(cols, kpis):
        with c:
            st.metric(k.label, k.value, delta=k.delta, help=k.help)


def render_alerts(alerts: Iterable[dict]) -> None:
    dismissed = st.session_state.setdefault("dismissed_alerts", set())
    for alert in alerts:
        if alert["id"] in dismissed:
            continue
        icon, bg, fg = ALERT_STYLES.get(alert.get("type"), ALERT_STYLES["info"])
        left, right = st.columns([10, 1])
        with left:
            st.markdown(
                f"""
<div style="background:{bg}; color:{fg}; border:1px solid {THEME['border_color']};
            border-radius:8px; padding:10px 14px;">
  <strong>{icon} {alert['title']}</strong><br/>
  <span style="opacity:0.9">{alert['message']}</span>
</div>
                """,
                unsafe_allow_html=True,
            )
        with right:
            if st.button("Dispensar", key=f"dismiss-{alert['id']}"):
                dismissed.add(alert["id"])
                st.rerun()


def render_key_values(title: str, rows: List[Tuple[str, object]]) -> None:
    with st.container(border=True):
        st.markdown(f"**{title}**")
        for label, value in rows:
            left, right = st.columns([3, 2])
            left.caption(label)
            right.markdown(f"**{value}**")
