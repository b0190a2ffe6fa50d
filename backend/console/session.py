"""Per-browser-session state: API client, current user, page registry."""

from __future__ import annotations

import time
from typing import Dict, Optional

import streamlit as st

from console.api_client import ApiClient
from console.config import ConsoleConfig, get_config
from console.routes import NOT_FOUND, resolve

# page key -> st.Page, filled by app.py on every run
PAGES: Dict[str, "st.Page"] = {}


def config() -> ConsoleConfig:
    if "config" not in st.session_state:
        st.session_state["config"] = get_config()
    return st.session_state["config"]


def client() -> ApiClient:
    if "api_client" not in st.session_state:
        cfg = config()
        st.session_state["api_client"] = ApiClient(cfg.api_url, timeout=cfg.request_timeout)
    return st.session_state["api_client"]


def use_mock() -> bool:
    return st.session_state.get("use_mock", config().use_mock)


def current_user() -> Optional[dict]:
    if "user" not in st.session_state:
        st.session_state["user"] = client().current_user()
    return st.session_state["user"]


def is_authenticated() -> bool:
    return current_user() is not None


def navigate(path: str) -> None:
    target = resolve(path, is_authenticated())
    page = PAGES.get(target.page) or PAGES.get(NOT_FOUND)
    if page is not None:
        st.switch_page(page)


def handle_unauthorized() -> None:
    """Session gone: transient notice, forget the user, back to the login page."""
    st.toast("Acesso Negado. Você não está autenticado. Redirecionando...", icon="🚫")
    st.session_state["user"] = None
    client().cache.clear()
    time.sleep(0.5)
    st.rerun()


def login(email: str, password: str) -> dict:
    user = client().login(email, password)
    st.session_state["user"] = user
    return user


def logout() -> None:
    client().logout()
    st.session_state["user"] = None
