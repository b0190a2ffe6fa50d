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
from console.formatting import format_brl, format_date

STATUS_LABELS = {
    "draft": "Rascunho",
    "active": "Ativo",
    "completed": "Concluído",
    "cancelled": "Cancelado",
}


def _form(prefix: str, clients: dict, templates: list, current: dict = None) -> dict:
    current = current or {}
    title = st.text_input("Título *", value=current.get("title", ""), key=f"{prefix}-title")
    client_id = select_ref("Cliente", clients, current.get("client_id"), key=f"{prefix}-client")
    status = select_enum("Status", STATUS_LABELS, current.get("status"), key=f"{prefix}-status")
    value = st.number_input(
        "Valor (R$)",
        min_value=0.0,
        step=100.0,
        value=float(current.get("value") or 0),
        key=f"{prefix}-value",
    )
    c1, c2 = st.columns(2)
    with c1:
        start = date_field("Início", current.get("start_date"), key=f"{prefix}-start")
    with c2:
        end = date_field("Término", current.get("end_date"), key=f"{prefix}-end")
    description = st.text_area("Descrição", value=current.get("description") or "", key=f"{prefix}-desc")

    content = current.get("content") or ""
    if templates and not current:
        by_id = {t["id"]: t for t in templates}
        template_id = st.selectbox(
            "Partir de uma minuta",
            [None] + list(by_id),
            format_func=lambda i: "—" if i is None else by_id[i]["name"],
            key=f"{prefix}-template",
        )
        if template_id:
            content = by_id[template_id]["content"]
    content = st.text_area("Conteúdo do contrato", value=content, height=200, key=f"{prefix}-content")

    return {
        "title": title.strip(),
        "client_id": client_id,
        "status": status,
        "value": f"{value:.2f}" if value else None,
        "start_date": start,
        "end_date": end,
        "description": description or None,
        "content": content or None,
    }


def render() -> None:
    st.title("📝 Contratos")

    clients = load("/api/clients")
    client_opts = options(clients, "name")

    f1, f2 = st.columns(2)
    status = f1.selectbox(
        "Status", [None] + list(STATUS_LABELS), format_func=lambda s: "Todos" if s is None else STATUS_LABELS[s]
    )
    client_id = f2.selectbox("Cliente", list(client_opts), format_func=lambda i: "Todos" if i is None else client_opts[i])

    contracts = load("/api/contracts", {"status": status, "client_id": client_id})
    table(
        contracts,
        {"title": "Título", "client_id": "Cliente", "status": "Status", "value": "Valor", "end_date": "Término"},
        {
            "client_id": lambda v: client_opts.get(v, "—"),
            "status": STATUS_LABELS.get,
            "value": lambda v: format_brl(v) if v is not None else "—",
            "end_date": format_date,
        },
    )

    new_tab, edit_tab = st.tabs(["➕ Novo contrato", "✏️ Editar / excluir"])

    with new_tab:
        templates = load("/api/contract-templates", {"active": True})
        payload = _form("new-contract", client_opts, templates)
        if st.button("Salvar contrato", type="primary", key="new-contract-save"):
            if not payload["title"]:
                st.warning("Informe o título do contrato.")
            else:
                mutate("POST", "/api/contracts", payload, success="Contrato criado.")

    with edit_tab:
        row = pick_row("Contrato", contracts, "title", key="edit-contract-pick")
        if row:
            payload = _form(f"edit-{row['id']}", client_opts, [], row)
            if st.button("Salvar alterações", type="primary", key="edit-contract-save"):
                mutate("PATCH", f"/api/contracts/{row['id']}", payload, success="Contrato atualizado.")
            delete_button(f"/api/contracts/{row['id']}", "contrato", key=f"delete-{row['id']}")
