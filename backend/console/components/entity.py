"""Form and table helpers shared by the entity pages."""

from __future__ import annotations

from datetime import date, datetime
from typing import Dict, List, Optional

import pandas as pd
import streamlit as st

from console.components.api import mutate
from console.formatting import parse_datetime

NONE_LABEL = "—"


def table(rows: List[dict], columns: Dict[str, str], formatters: Optional[dict] = None) -> None:
    if not rows:
        st.info("Nenhum registro encontrado.")
        return
    formatters = formatters or {}
    data = [
        {label: formatters.get(key, lambda v: v)(row.get(key)) for key, label in columns.items()}
        for row in rows
    ]
    st.dataframe(pd.DataFrame(data), hide_index=True, use_container_width=True)


def options(rows: List[dict], label_key: str) -> Dict[Optional[str], str]:
    opts: Dict[Optional[str], str] = {None: NONE_LABEL}
    opts.update({r["id"]: r.get(label_key) or r["id"] for r in rows})
    return opts


def select_ref(label: str, opts: Dict[Optional[str], str], current: Optional[str] = None, key: str = "") -> Optional[str]:
    ids = list(opts)
    index = ids.index(current) if current in ids else 0
    return st.selectbox(label, ids, index=index, format_func=lambda i: opts[i], key=key)


def select_enum(label: str, labels: Dict[str, str], current: Optional[str] = None, key: str = "") -> str:
    values = list(labels)
    index = values.index(current) if current in values else 0
    return st.selectbox(label, values, index=index, format_func=labels.get, key=key)


def date_field(label: str, current=None, key: str = "") -> Optional[str]:
    dt = parse_datetime(current)
    value = st.date_input(label, value=dt.date() if dt else None, format="DD/MM/YYYY", key=key)
    return to_iso(value)


def to_iso(value: Optional[date]) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.isoformat()
    return datetime(value.year, value.month, value.day).isoformat()


def pick_row(label: str, rows: List[dict], label_key: str, key: str) -> Optional[dict]:
    if not rows:
        return None
    by_id = {r["id"]: r for r in rows}
    row_id = st.selectbox(label, list(by_id), format_func=lambda i: by_id[i].get(label_key) or i, key=key)
    return by_id.get(row_id)


def delete_button(path: str, noun: str, key: str) -> None:
    confirm = st.checkbox(f"Confirmo a exclusão deste {noun}", key=f"{key}-confirm")
    if st.button("🗑️ Excluir", key=key, disabled=not confirm):
        mutate("DELETE", path, success=f"{noun.capitalize()} excluído.")
