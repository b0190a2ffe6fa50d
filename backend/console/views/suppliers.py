from __future__ import annotations

import streamlit as st

from console.components.api import load, mutate
from console.components.entity import table
from console.views.clients import client_form


def render() -> None:
    st.title("🏢 Fornecedores")
    st.caption("Empresas cadastradas como pessoa jurídica.")

    companies = load("/api/clients", {"type": "company"})
    table(
        companies,
        {"name": "Razão social", "company_document": "CNPJ", "email": "E-mail", "phone": "Telefone"},
    )

    with st.expander("➕ Nova empresa"):
        payload = client_form("new-supplier", fixed_type="company")
        if st.button("Salvar empresa", type="primary", key="new-supplier-save"):
            if not payload["name"]:
                st.warning("Informe a razão social.")
            else:
                mutate("POST", "/api/clients", payload, success="Empresa cadastrada.")
