from __future__ import annotations

from datetime import date

import streamlit as st

from console import session
from console.components.api import load, mutate
from console.components.charts import revenue_chart
from console.components.entity import delete_button, options, pick_row, select_ref, table, to_iso
from console.formatting import format_brl, format_date
from console.service import get_revenue_chart

TYPE_LABELS = {"income": "Receita", "expense": "Despesa"}


def render() -> None:
    st.title("💰 Financeiro")

    summary = load("/api/transactions/summary", default={})
    c1, c2, c3 = st.columns(3)
    c1.metric("Receitas", format_brl(summary.get("income")))
    c2.metric("Despesas", format_brl(summary.get("expense")))
    c3.metric("Saldo", format_brl(summary.get("balance")))

    chart = get_revenue_chart(session.client(), session.use_mock())
    if chart.warning:
        st.warning(chart.warning)
    revenue_chart(chart.data)

    refs = {
        "clients": options(load("/api/clients"), "name"),
        "projects": options(load("/api/projects"), "name"),
        "contracts": options(load("/api/contracts"), "title"),
    }

    tx_type = st.selectbox(
        "Tipo", [None] + list(TYPE_LABELS), format_func=lambda t: "Todos" if t is None else TYPE_LABELS[t]
    )
    transactions = load("/api/transactions", {"type": tx_type})
    table(
        transactions,
        {"date": "Data", "description": "Descrição", "type": "Tipo", "amount": "Valor", "client_id": "Cliente"},
        {
            "date": format_date,
            "type": TYPE_LABELS.get,
            "amount": format_brl,
            "client_id": lambda v: refs["clients"].get(v, "—"),
        },
    )

    new_tab, delete_tab = st.tabs(["➕ Novo lançamento", "🗑️ Excluir lançamento"])

    with new_tab:
        with st.form("new-transaction"):
            description = st.text_input("Descrição *")
            c1, c2, c3 = st.columns(3)
            kind = c1.selectbox("Tipo *", list(TYPE_LABELS), format_func=TYPE_LABELS.get)
            amount = c2.number_input("Valor (R$) *", min_value=0.0, step=50.0)
            when = c3.date_input("Data", value=date.today(), format="DD/MM/YYYY")
            client_id = select_ref("Cliente", refs["clients"], key="tx-client")
            project_id = select_ref("Projeto", refs["projects"], key="tx-project")
            contract_id = select_ref("Contrato", refs["contracts"], key="tx-contract")
            submitted = st.form_submit_button("Lançar", type="primary")
        if submitted:
            if not description.strip():
                st.warning("Informe a descrição.")
            else:
                mutate(
                    "POST",
                    "/api/transactions",
                    {
                        "description": description.strip(),
                        "type": kind,
                        "amount": f"{amount:.2f}",
                        "date": to_iso(when),
                        "client_id": client_id,
                        "project_id": project_id,
                        "contract_id": contract_id,
                    },
                    success="Lançamento registrado.",
                )

    with delete_tab:
        row = pick_row("Lançamento", transactions, "description", key="delete-tx-pick")
        if row:
            st.caption(f"{format_date(row.get('date'))} · {format_brl(row.get('amount'))}")
            delete_button(f"/api/transactions/{row['id']}", "lançamento", key=f"delete-{row['id']}")
