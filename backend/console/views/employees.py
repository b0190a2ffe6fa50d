from __future__ import annotations

import streamlit as st

from console import session
from console.components.api import load, mutate
from console.components.entity import delete_button, pick_row, select_enum, table
from console.formatting import format_date

ROLE_LABELS = {"admin": "Administrador", "lawyer": "Advogado(a)", "assistant": "Assistente"}


def render() -> None:
    st.title("🧑‍💼 Equipe")

    users = load("/api/users")
    table(
        users,
        {"first_name": "Nome", "last_name": "Sobrenome", "email": "E-mail", "role": "Função", "created_at": "Desde"},
        {"role": ROLE_LABELS.get, "created_at": format_date},
    )

    me = session.current_user() or {}
    if me.get("role") != "admin":
        st.caption("Apenas administradores podem gerenciar a equipe.")
        return

    new_tab, edit_tab = st.tabs(["➕ Novo membro", "✏️ Função / excluir"])

    with new_tab:
        with st.form("new-user"):
            c1, c2 = st.columns(2)
            first_name = c1.text_input("Nome")
            last_name = c2.text_input("Sobrenome")
            email = st.text_input("E-mail *")
            password = st.text_input("Senha inicial *", type="password")
            role = select_enum("Função", ROLE_LABELS, "assistant", key="new-user-role")
            submitted = st.form_submit_button("Cadastrar", type="primary")
        if submitted:
            mutate(
                "POST",
                "/api/users",
                {
                    "email": email,
                    "password": password,
                    "first_name": first_name or None,
                    "last_name": last_name or None,
                    "role": role,
                },
                success="Membro cadastrado.",
            )

    with edit_tab:
        row = pick_row("Membro", users, "email", key="edit-user-pick")
        if row:
            role = select_enum("Função", ROLE_LABELS, row.get("role"), key=f"role-{row['id']}")
            if st.button("Salvar função", key="edit-user-save"):
                mutate("PATCH", f"/api/users/{row['id']}", {"role": role}, success="Função atualizada.")
            if row["id"] != me.get("id"):
                delete_button(f"/api/users/{row['id']}", "usuário", key=f"delete-{row['id']}")
