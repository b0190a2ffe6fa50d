from __future__ import annotations

import streamlit as st

from console import session
from console.components.api import load, mutate
from console.components.entity import delete_button, pick_row, table


def _library(kind: str, path: str, title_key: str, noun: str) -> None:
    rows = load(path)
    table(
        rows,
        {title_key: "Nome", "category": "Categoria", "is_active": "Ativo"},
        {"is_active": lambda v: "Sim" if v else "Não"},
    )

    new_tab, edit_tab = st.tabs([f"➕ Nova {noun}", "✏️ Editar / excluir"])

    with new_tab:
        with st.form(f"new-{kind}"):
            name = st.text_input("Nome *")
            category = st.text_input("Categoria")
            content = st.text_area("Texto *", height=200)
            active = st.checkbox("Ativa", value=True)
            submitted = st.form_submit_button("Salvar", type="primary")
        if submitted:
            if not name.strip() or not content.strip():
                st.warning("Nome e texto são obrigatórios.")
            else:
                mutate(
                    "POST",
                    path,
                    {title_key: name.strip(), "category": category or None, "content": content, "is_active": active},
                    success=f"{noun.capitalize()} criada.",
                )

    with edit_tab:
        row = pick_row(noun.capitalize(), rows, title_key, key=f"edit-{kind}-pick")
        if row:
            with st.form(f"edit-{kind}-{row['id']}"):
                name = st.text_input("Nome *", value=row.get(title_key, ""))
                category = st.text_input("Categoria", value=row.get("category") or "")
                content = st.text_area("Texto *", value=row.get("content", ""), height=200)
                active = st.checkbox("Ativa", value=bool(row.get("is_active")))
                submitted = st.form_submit_button("Salvar alterações", type="primary")
            if submitted:
                mutate(
                    "PATCH",
                    f"{path}/{row['id']}",
                    {title_key: name.strip(), "category": category or None, "content": content, "is_active": active},
                    success=f"{noun.capitalize()} atualizada.",
                )
            delete_button(f"{path}/{row['id']}", noun, key=f"delete-{row['id']}")


def render() -> None:
    st.title("⚙️ Configurações")

    templates, clauses, console = st.tabs(["Minutas", "Cláusulas", "Console"])

    with templates:
        _library("template", "/api/contract-templates", "name", "minuta")

    with clauses:
        _library("clause", "/api/contract-clauses", "title", "cláusula")

    with console:
        cfg = session.config()
        st.markdown("**API**")
        st.code(cfg.api_url, language="text")
        use_mock = st.toggle(
            "Usar dados de demonstração no dashboard",
            value=session.use_mock(),
            help="Quando desligado, o dashboard consulta a API e usa os dados de demonstração apenas se ela falhar.",
        )
        st.session_state["use_mock"] = use_mock
        if st.button("Limpar cache de consultas"):
            session.client().cache.clear()
            st.toast("Cache limpo.")
