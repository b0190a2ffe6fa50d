import streamlit as st

from console import session


def render() -> None:
    st.title("404")
    st.write("Página não encontrada.")
    if st.button("Voltar ao dashboard"):
        session.navigate("/")
