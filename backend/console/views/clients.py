from __future__ import annotations

import streamlit as st

from console.components.api import load, mutate
from console.components.entity import delete_button, pick_row, select_enum, table

TYPE_LABELS = {"individual": "Pessoa Física", "company": "Pessoa Jurídica"}


def client_form(prefix: str, current: dict = None, fixed_type: str = None) -> dict:
    current = current or {}
    name = st.text_input("Nome *", value=current.get("name", ""), key=f"{prefix}-name")
    client_type = fixed_type or select_enum("Tipo", TYPE_LABELS, current.get("type"), key=f"{prefix}-type")

    c1, c2 = st.columns(2)
    email = c1.text_input("E-mail", value=current.get("email") or "", key=f"{prefix}-email")
    phone = c2.text_input("Telefone", value=current.get("phone") or "", key=f"{prefix}-phone")

    if client_type == "company":
        document = st.text_input("CNPJ", value=current.get("company_document") or "", key=f"{prefix}-cnpj")
        docs = {"company_document": document or None, "personal_document": None}
    else:
        document = st.text_input("CPF", value=current.get("personal_document") or "", key=f"{prefix}-cpf")
        docs = {"personal_document": document or None, "company_document": None}

    address = st.text_area("Endereço", value=current.get("address") or "", key=f"{prefix}-address")
    notes = st.text_area("Observações", value=current.get("notes") or "", key=f"{prefix}-notes")

    return {
        "name": name.strip(),
        "type": client_type,
        "email": email or None,
        "phone": phone or None,
        "address": address or None,
        "notes": notes or None,
        **docs,
    }


def render() -> None:
    st.title("👥 Clientes")

    f1, f2 = st.columns(2)
    search = f1.text_input("Buscar por nome ou e-mail")
    client_type = f2.selectbox(
        "Tipo", [None] + list(TYPE_LABELS), format_func=lambda t: "Todos" if t is None else TYPE_LABELS[t]
    )

    clients = load("/api/clients", {"type": client_type, "search": search or None})
    table(
        clients,
        {"name": "Nome", "type": "Tipo", "email": "E-mail", "phone": "Telefone"},
        {"type": TYPE_LABELS.get},
    )

    new_tab, edit_tab = st.tabs(["➕ Novo cliente", "✏️ Editar / excluir"])

    with new_tab:
        payload = client_form("new-client")
        if st.button("Salvar cliente", type="primary", key="new-client-save"):
            if not payload["name"]:
                st.warning("Informe o nome do cliente.")
            else:
                mutate("POST", "/api/clients", payload, success="Cliente criado.")

    with edit_tab:
        row = pick_row("Cliente", clients, "name", key="edit-client-pick")
        if row:
            payload = client_form(f"edit-{row['id']}", row)
            if st.button("Salvar alterações", type="primary", key="edit-client-save"):
                mutate("PATCH", f"/api/clients/{row['id']}", payload, success="Cliente atualizado.")
            delete_button(f"/api/clients/{row['id']}", "cliente", key=f"delete-{row['id']}")
