from __future__ import annotations

import streamlit as st

from console import session
from console.api_client import ApiError, UnauthorizedError


def render() -> None:
    st.title("⚖️ LawDesk")
    st.subheader("Gestão completa para o seu escritório jurídico")
    st.write(
        "Clientes, contratos, minutas, projetos, financeiro e documentos em um só lugar. "
        "Entre com a sua conta para acessar o painel."
    )

    left, right = st.columns([3, 2])
    with left:
        st.markdown(
            """
- 📝 **Contratos** com minutas e cláusulas reutilizáveis
- 👥 **Clientes** pessoa física e jurídica
- 📁 **Projetos** com responsáveis e prazos
- 💰 **Financeiro** com receitas, despesas e saldo
- 📄 **Documentos** vinculados a clientes, projetos e contratos
            """
        )

    with right:
        with st.form("login"):
            st.markdown("**Entrar**")
            email = st.text_input("E-mail")
            password = st.text_input("Senha", type="password")
            submitted = st.form_submit_button("Entrar", type="primary", use_container_width=True)

        if submitted:
            if not email or not password:
                st.warning("Informe e-mail e senha.")
                return
            try:
                user = session.login(email, password)
            except UnauthorizedError:
                st.error("E-mail ou senha inválidos.")
                return
            except ApiError as e:
                st.error(f"Não foi possível entrar: {e.detail or 'API indisponível'}")
                return
            st.toast(f"Bem-vindo(a), {user.get('first_name') or user.get('email')}!")
            st.rerun()
