from __future__ import annotations

import streamlit as st

from console.components.api import load, mutate
from console.components.entity import delete_button, options, pick_row, select_enum, select_ref, table
from console.formatting import format_date

STATUS_LABELS = {"active": "Ativo", "archived": "Arquivado", "draft": "Rascunho"}
DOCUMENT_TYPES = ["petição", "procuração", "contrato", "parecer", "comprovante", "outro"]


def _form(prefix: str, refs: dict, current: dict = None) -> dict:
    current = current or {}
    name = st.text_input("Nome *", value=current.get("name", ""), key=f"{prefix}-name")
    c1, c2 = st.columns(2)
    doc_type = c1.selectbox(
        "Tipo *",
        DOCUMENT_TYPES,
        index=DOCUMENT_TYPES.index(current["type"]) if current.get("type") in DOCUMENT_TYPES else 0,
        key=f"{prefix}-type",
    )
    with c2:
        status = select_enum("Status", STATUS_LABELS, current.get("status"), key=f"{prefix}-status")
    file_path = st.text_input("Arquivo (caminho)", value=current.get("file_path") or "", key=f"{prefix}-path")
    client_id = select_ref("Cliente", refs["clients"], current.get("client_id"), key=f"{prefix}-client")
    project_id = select_ref("Projeto", refs["projects"], current.get("project_id"), key=f"{prefix}-project")
    contract_id = select_ref("Contrato", refs["contracts"], current.get("contract_id"), key=f"{prefix}-contract")
    return {
        "name": name.strip(),
        "type": doc_type,
        "status": status,
        "file_path": file_path or None,
        "client_id": client_id,
        "project_id": project_id,
        "contract_id": contract_id,
    }


def render() -> None:
    st.title("📄 Documentos")

    refs = {
        "clients": options(load("/api/clients"), "name"),
        "projects": options(load("/api/projects"), "name"),
        "contracts": options(load("/api/contracts"), "title"),
    }

    f1, f2 = st.columns(2)
    status = f1.selectbox(
        "Status", [None] + list(STATUS_LABELS), format_func=lambda s: "Todos" if s is None else STATUS_LABELS[s]
    )
    doc_type = f2.selectbox("Tipo", [None] + DOCUMENT_TYPES, format_func=lambda t: "Todos" if t is None else t)

    documents = load("/api/documents", {"status": status, "type": doc_type})
    table(
        documents,
        {"name": "Nome", "type": "Tipo", "status": "Status", "client_id": "Cliente", "created_at": "Enviado em"},
        {
            "status": STATUS_LABELS.get,
            "client_id": lambda v: refs["clients"].get(v, "—"),
            "created_at": format_date,
        },
    )

    new_tab, edit_tab = st.tabs(["➕ Novo documento", "✏️ Editar / excluir"])

    with new_tab:
        payload = _form("new-document", refs)
        if st.button("Salvar documento", type="primary", key="new-document-save"):
            if not payload["name"]:
                st.warning("Informe o nome do documento.")
            else:
                mutate("POST", "/api/documents", payload, success="Documento registrado.")

    with edit_tab:
        row = pick_row("Documento", documents, "name", key="edit-document-pick")
        if row:
            payload = _form(f"edit-{row['id']}", refs, row)
            if st.button("Salvar alterações", type="primary", key="edit-document-save"):
                mutate("PATCH", f"/api/documents/{row['id']}", payload, success="Documento atualizado.")
            delete_button(f"/api/documents/{row['id']}", "documento", key=f"delete-{row['id']}")
