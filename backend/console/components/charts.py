from __future__ import annotations

from typing import List

import pandas as pd
import plotly.express as px
import streamlit as st

from console.config import THEME


def revenue_chart(points: List[dict], title: str = "Receitas x Despesas", key: str = "revenue-chart") -> None:
    if not points:
        st.info("Nenhum lançamento financeiro no período.")
        return

    df = pd.DataFrame(points)
    long = df.melt(id_vars=["month"], value_vars=["income", "expense"], var_name="series", value_name="valor")
    long["series"] = long["series"].map({"income": "Receitas", "expense": "Despesas"})

    fig = px.bar(
        long,
        x="month",
        y="valor",
        color="series",
        barmode="group",
        title=title,
        color_discrete_map={"Receitas": THEME["income"], "Despesas": THEME["expense"]},
    )
    fig.update_layout(
        margin=dict(l=10, r=10, t=44, b=10),
        paper_bgcolor=THEME["bg_card"],
        plot_bgcolor=THEME["bg_card"],
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="left", x=0, title=None),
        xaxis_title=None,
        yaxis_title=None,
    )
    fig.update_yaxes(tickprefix="R$ ", separatethousands=True, gridcolor=THEME["grid"])
    st.plotly_chart(fig, use_container_width=True, key=key)
