from __future__ import annotations

import streamlit as st

from console.components.api import load, mutate
from console.components.entity import (
    date_field,
    delete_button,
    options,
    pick_row,
    select_enum,
    select_ref,
    table,
)
from console.formatting import format_date

STATUS_LABELS = {
    "planning": "Planejamento",
    "active": "Em andamento",
    "on_hold": "Pausado",
    "completed": "Concluído",
    "cancelled": "Cancelado",
}


def _form(prefix: str, clients: dict, users: dict, current: dict = None) -> dict:
    current = current or {}
    name = st.text_input("Nome *", value=current.get("name", ""), key=f"{prefix}-name")
    c1, c2 = st.columns(2)
    with c1:
        client_id = select_ref("Cliente", clients, current.get("client_id"), key=f"{prefix}-client")
        start = date_field("Início", current.get("start_date"), key=f"{prefix}-start")
    with c2:
        assigned_to = select_ref("Responsável", users, current.get("assigned_to"), key=f"{prefix}-assignee")
        end = date_field("Entrega", current.get("end_date"), key=f"{prefix}-end")
    status = select_enum("Status", STATUS_LABELS, current.get("status"), key=f"{prefix}-status")
    description = st.text_area("Descrição", value=current.get("description") or "", key=f"{prefix}-desc")
    return {
        "name": name.strip(),
        "client_id": client_id,
        "assigned_to": assigned_to,
        "status": status,
        "start_date": start,
        "end_date": end,
        "description": description or None,
    }


def render() -> None:
    st.title("📁 Projetos")

    client_opts = options(load("/api/clients"), "name")
    user_opts = options(load("/api/users"), "email")

    f1, f2 = st.columns(2)
    status = f1.selectbox(
        "Status", [None] + list(STATUS_LABELS), format_func=lambda s: "Todos" if s is None else STATUS_LABELS[s]
    )
    assigned_to = f2.selectbox(
        "Responsável", list(user_opts), format_func=lambda i: "Todos" if i is None else user_opts[i]
    )

    projects = load("/api/projects", {"status": status, "assigned_to": assigned_to})
    table(
        projects,
        {"name": "Projeto", "client_id": "Cliente", "assigned_to": "Responsável", "status": "Status", "end_date": "Entrega"},
        {
            "client_id": lambda v: client_opts.get(v, "—"),
            "assigned_to": lambda v: user_opts.get(v, "—"),
            "status": STATUS_LABELS.get,
            "end_date": format_date,
        },
    )

    new_tab, edit_tab = st.tabs(["➕ Novo projeto", "✏️ Editar / excluir"])

    with new_tab:
        payload = _form("new-project", client_opts, user_opts)
        if st.button("Salvar projeto", type="primary", key="new-project-save"):
            if not payload["name"]:
                st.warning("Informe o nome do projeto.")
            else:
                mutate("POST", "/api/projects", payload, success="Projeto criado.")

    with edit_tab:
        row = pick_row("Projeto", projects, "name", key="edit-project-pick")
        if row:
            payload = _form(f"edit-{row['id']}", client_opts, user_opts, row)
            if st.button("Salvar alterações", type="primary", key="edit-project-save"):
                mutate("PATCH", f"/api/projects/{row['id']}", payload, success="Projeto atualizado.")
            delete_button(f"/api/projects/{row['id']}", "projeto", key=f"delete-{row['id']}")
