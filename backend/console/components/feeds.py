from __future__ import annotations

from typing import List

import pandas as pd
import streamlit as st

from console import session
from console.formatting import format_date, parse_datetime

_ENTITY_ICONS = {
    "client": "👥",
    "contract": "📝",
    "project": "📁",
    "document": "📄",
    "transaction": "💰",
}


def upcoming_events(events: List[dict]) -> None:
    with st.container(border=True):
        st.markdown("**📅 Próximos Compromissos**")
        if not events:
            st.caption("Nenhum compromisso nos próximos dias.")
        for e in events[:6]:
            st.markdown(f"- **{format_date(e['date'])}** · {e['title']}")


def recent_activities(items: List[dict]) -> None:
    with st.container(border=True):
        st.markdown("**🕑 Atividades Recentes**")
        if not items:
            st.caption("Nenhuma atividade registrada.")
        for a in items:
            icon = _ENTITY_ICONS.get(a.get("entity"), "•")
            st.markdown(f"{icon} {a['title']}  \n<small>{format_date(a['created_at'])}</small>", unsafe_allow_html=True)


QUICK_ACTIONS = [
    ("Novo contrato", "/contracts"),
    ("Novo cliente", "/clients"),
    ("Lançamento financeiro", "/financial"),
    ("Enviar documento", "/documents"),
]


def quick_actions(key_prefix: str) -> None:
    with st.container(border=True):
        st.markdown("**⚡ Ações Rápidas**")
        cols = st.columns(2)
        for i, (label, path) in enumerate(QUICK_ACTIONS):
            if cols[i % 2].button(label, key=f"{key_prefix}-qa-{i}", use_container_width=True):
                session.navigate(path)


def calendar_table(events: List[dict]) -> None:
    if not events:
        st.info("Nenhum compromisso agendado.")
        return
    df = pd.DataFrame(
        [
            {
                "Data": parse_datetime(e["date"]),
                "Compromisso": e["title"],
            }
            for e in events
        ]
    )
    st.dataframe(
        df,
        hide_index=True,
        use_container_width=True,
        column_config={"Data": st.column_config.DatetimeColumn(format="DD/MM/YYYY HH:mm")},
    )
