from __future__ import annotations

import streamlit as st

from console import session
from console.components.api import api_call
from console.views.employees import ROLE_LABELS


def render() -> None:
    st.title("🙍 Perfil")

    user = session.current_user() or {}
    st.caption(f"{user.get('email', '')} · {ROLE_LABELS.get(user.get('role'), '')}")

    with st.form("profile"):
        c1, c2 = st.columns(2)
        first_name = c1.text_input("Nome", value=user.get("first_name") or "")
        last_name = c2.text_input("Sobrenome", value=user.get("last_name") or "")
        image = st.text_input("URL da foto", value=user.get("profile_image_url") or "")
        password = st.text_input("Nova senha", type="password", help="Deixe em branco para manter a atual")
        submitted = st.form_submit_button("Salvar", type="primary")

    if submitted:
        payload = {
            "first_name": first_name or None,
            "last_name": last_name or None,
            "profile_image_url": image or None,
        }
        if password:
            payload["password"] = password
        with api_call(success="Perfil atualizado."):
            st.session_state["user"] = session.client().update("/api/users/me", payload)

    st.divider()
    if st.button("Sair"):
        with api_call():
            session.logout()
        st.rerun()
