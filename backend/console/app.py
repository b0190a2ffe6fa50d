"""
Console entrypoint: page registry, auth gate and sidebar.

All view logic lives in console/views/.
All env reads happen ONLY in console/config.py.

    streamlit run backend/console/app.py
"""

from __future__ import annotations

import os
import sys

# Make `console` importable when running the file directly
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

import streamlit as st  # noqa: E402

from console import session  # noqa: E402
from console.api_client import ApiError, ApiUnavailableError  # noqa: E402
from console.routes import (  # noqa: E402
    NOT_FOUND,
    Route,
    registered_routes,
    requested_path,
    resolve,
    routes_for,
    url_path,
)
from console.views import (  # noqa: E402
    calendar,
    clients,
    contracts,
    dashboard,
    documents,
    employees,
    financial,
    landing,
    not_found,
    profile,
    projects,
    settings,
    suppliers,
)

VIEWS = {
    "landing": landing,
    "dashboard": dashboard,
    "contracts": contracts,
    "clients": clients,
    "suppliers": suppliers,
    "employees": employees,
    "projects": projects,
    "documents": documents,
    "financial": financial,
    "settings": settings,
    "profile": profile,
    "calendar": calendar,
    NOT_FOUND: not_found,
}


def _page(route: Route) -> "st.Page":
    return st.Page(
        VIEWS[route.page].render,
        title=route.title,
        icon=route.icon,
        url_path=url_path(route),
        default=route.path == "/",
    )


def _sidebar(routes) -> None:
    user = session.current_user() or {}
    with st.sidebar:
        st.markdown("### ⚖️ LawDesk")
        name = " ".join(p for p in (user.get("first_name"), user.get("last_name")) if p)
        st.caption(name or user.get("email", ""))

        for route in routes:
            st.page_link(session.PAGES[route.page], label=route.title, icon=route.icon)

        st.divider()
        if session.use_mock():
            st.caption("🧪 Dados de demonstração ativos")
        if st.button("Sair", use_container_width=True):
            try:
                session.logout()
            except ApiError:
                # the session is dropped locally even if the API is down
                st.session_state["user"] = None
            st.rerun()


def register_pages(authenticated: bool) -> dict:
    session.PAGES.clear()
    for route in registered_routes(authenticated):
        session.PAGES[route.page] = _page(route)
    return session.PAGES


def main() -> None:
    st.set_page_config(page_title="LawDesk", page_icon="⚖️", layout="wide")

    try:
        authenticated = session.is_authenticated()
    except ApiUnavailableError:
        st.error("API indisponível. Verifique se o servidor está em execução.")
        authenticated = False

    pages = register_pages(authenticated)
    if authenticated:
        _sidebar(routes_for(True))

    current = st.navigation(list(pages.values()), position="hidden")

    # Streamlit serves the default page for unknown paths; the URL keeps the original one
    path = requested_path(st.context.url, st.get_option("server.baseUrlPath"))
    target = resolve(path, authenticated)
    if target.redirected:
        st.info("Faça login para acessar esta página.")
    if target.page == NOT_FOUND:
        VIEWS[NOT_FOUND].render()
    else:
        current.run()


if __name__ == "__main__":
    main()
